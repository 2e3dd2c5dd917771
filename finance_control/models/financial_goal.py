# mypy: disable-error-code=name-defined

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from finance_control.extensions.database import db
from finance_control.models.base import AuditedModel


class FinancialGoal(AuditedModel):
    __tablename__ = "financial_goals"

    user_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500), nullable=True)
    goal_type = db.Column(db.String(32), nullable=False)
    target_amount = db.Column(db.Numeric(12, 2), nullable=False)
    current_amount = db.Column(
        db.Numeric(12, 2),
        nullable=False,
        default=Decimal("0"),
        server_default="0",
    )
    deadline = db.Column(db.Date, nullable=True)
    is_active = db.Column(
        db.Boolean, nullable=False, default=True, server_default=db.true()
    )
    auto_calculate = db.Column(
        db.Boolean, nullable=False, default=False, server_default=db.false()
    )
    completed_at = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        db.CheckConstraint(
            "target_amount > 0", name="ck_financial_goals_target_amount_positive"
        ),
        db.CheckConstraint(
            "current_amount >= 0", name="ck_financial_goals_current_amount_nonneg"
        ),
    )

    @property
    def is_completed(self) -> bool:
        if self.target_amount is None:
            return False
        return Decimal(self.current_amount or 0) >= Decimal(self.target_amount)

    @property
    def progress_percentage(self) -> Decimal:
        if not self.target_amount:
            return Decimal("0.00")
        ratio = Decimal(self.current_amount or 0) / Decimal(self.target_amount)
        return (ratio * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    @property
    def remaining_amount(self) -> Decimal:
        remaining = Decimal(self.target_amount or 0) - Decimal(self.current_amount or 0)
        return max(remaining, Decimal("0.00"))

    def __repr__(self) -> str:
        return (
            f"<FinancialGoal id={self.id} name={self.name!r} "
            f"target_amount={self.target_amount} is_active={self.is_active}>"
        )
