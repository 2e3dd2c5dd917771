# mypy: disable-error-code=name-defined

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from finance_control.extensions.database import db
from finance_control.models.base import AuditedModel

CENTS = Decimal("0.01")


class Transaction(AuditedModel):
    __tablename__ = "transactions"

    user_id = db.Column(db.Integer, nullable=False, index=True)
    type = db.Column(db.String(16), nullable=False)
    subtype = db.Column(db.String(16), nullable=False)
    source = db.Column(db.String(32), nullable=False)
    description = db.Column(db.String(500), nullable=False)
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    installments = db.Column(db.Integer, nullable=True)
    date = db.Column(db.DateTime, nullable=False, index=True)
    reconciled = db.Column(
        db.Boolean, nullable=False, default=False, server_default=db.false()
    )
    category_id = db.Column(
        db.Integer,
        db.ForeignKey("transaction_categories.id"),
        nullable=False,
        index=True,
    )
    subcategory_id = db.Column(
        db.Integer,
        db.ForeignKey("transaction_subcategories.id"),
        nullable=True,
    )

    category = db.relationship("TransactionCategory")
    subcategory = db.relationship("TransactionSubcategory")
    responsibilities = db.relationship(
        "TransactionResponsibility",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionResponsibility.id",
    )

    __table_args__ = (
        db.CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        db.CheckConstraint(
            "installments IS NULL OR installments >= 1",
            name="ck_transactions_installments_min",
        ),
    )

    def recalculate_responsibilities(self) -> None:
        for responsibility in self.responsibilities:
            responsibility.calculated_amount = responsibility.share_of(self.amount)

    def __repr__(self) -> str:
        return (
            f"<Transaction id={self.id} type={self.type!r} "
            f"amount={self.amount} user_id={self.user_id}>"
        )


class TransactionResponsibility(db.Model):
    __tablename__ = "transaction_responsibilities"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    responsible_id = db.Column(
        db.Integer,
        db.ForeignKey("transaction_responsibles.id"),
        nullable=False,
    )
    percentage = db.Column(db.Numeric(5, 2), nullable=False)
    calculated_amount = db.Column(db.Numeric(12, 2), nullable=True)
    notes = db.Column(db.String(500), nullable=True)

    transaction = db.relationship("Transaction", back_populates="responsibilities")
    responsible = db.relationship("TransactionResponsible")

    __table_args__ = (
        db.CheckConstraint(
            "percentage > 0 AND percentage <= 100",
            name="ck_transaction_responsibilities_percentage",
        ),
    )

    @property
    def responsible_name(self) -> str | None:
        return self.responsible.name if self.responsible is not None else None

    def share_of(self, amount: Decimal | None) -> Decimal | None:
        if amount is None or self.percentage is None:
            return None
        share = Decimal(amount) * Decimal(self.percentage) / Decimal("100")
        return share.quantize(CENTS, rounding=ROUND_HALF_UP)
