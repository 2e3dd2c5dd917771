from __future__ import annotations

from decimal import Decimal

from finance_control.models import FinancialGoal, TransactionResponsibility


def test_responsibility_share_rounds_half_up_to_cents() -> None:
    responsibility = TransactionResponsibility(percentage=Decimal("33.33"))

    assert responsibility.share_of(Decimal("10.00")) == Decimal("3.33")
    assert responsibility.share_of(Decimal("0.15")) == Decimal("0.05")
    assert responsibility.share_of(None) is None


def test_goal_progress_properties() -> None:
    goal = FinancialGoal(
        target_amount=Decimal("300.00"), current_amount=Decimal("100.00")
    )

    assert goal.progress_percentage == Decimal("33.33")
    assert goal.remaining_amount == Decimal("200.00")
    assert goal.is_completed is False


def test_goal_over_target_is_completed_with_nothing_remaining() -> None:
    goal = FinancialGoal(
        target_amount=Decimal("100.00"), current_amount=Decimal("120.00")
    )

    assert goal.is_completed is True
    assert goal.remaining_amount == Decimal("0.00")
    assert goal.progress_percentage == Decimal("120.00")
