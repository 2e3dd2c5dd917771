# mypy: disable-error-code=name-defined

from __future__ import annotations

from finance_control.extensions.database import db
from finance_control.models.base import AuditedModel


class TransactionCategory(AuditedModel):
    __tablename__ = "transaction_categories"

    name = db.Column(db.String(100), nullable=False, unique=True)

    subcategories = db.relationship(
        "TransactionSubcategory",
        back_populates="category",
        lazy="select",
    )

    def __repr__(self) -> str:
        return f"<TransactionCategory id={self.id} name={self.name!r}>"
