# mypy: disable-error-code=name-defined

from __future__ import annotations

from finance_control.extensions.database import db
from finance_control.models.base import AuditedModel


class TransactionSubcategory(AuditedModel):
    __tablename__ = "transaction_subcategories"

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    is_active = db.Column(
        db.Boolean, nullable=False, default=True, server_default=db.true()
    )
    category_id = db.Column(
        db.Integer,
        db.ForeignKey("transaction_categories.id"),
        nullable=False,
        index=True,
    )

    category = db.relationship("TransactionCategory", back_populates="subcategories")

    __table_args__ = (
        db.UniqueConstraint(
            "category_id", "name", name="uq_transaction_subcategories_category_name"
        ),
    )

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category is not None else None

    def __repr__(self) -> str:
        return (
            f"<TransactionSubcategory id={self.id} name={self.name!r} "
            f"category_id={self.category_id}>"
        )
