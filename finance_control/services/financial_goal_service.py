from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, cast

from marshmallow import ValidationError

from finance_control.exceptions import ValidationAPIError, field_errors_from_messages
from finance_control.mappers import SchemaEntityMapper
from finance_control.models import FinancialGoal
from finance_control.repositories import SQLAlchemyRepository
from finance_control.schemas import FinancialGoalSchema, GoalProgressSchema
from finance_control.schemas.base_schema import MAX_AMOUNT
from finance_control.services.crud_service import CrudService
from finance_control.utils.datetime_utils import utc_now_naive

logger = logging.getLogger(__name__)


def build_financial_goal_crud() -> CrudService[FinancialGoal]:
    return CrudService(
        SQLAlchemyRepository(FinancialGoal, searchable_fields=("name", "description")),
        SchemaEntityMapper(FinancialGoal, FinancialGoalSchema),
        entity_name="Financial goal",
        user_aware=True,
    )


class FinancialGoalService:
    """Goal CRUD plus the progress lifecycle.

    A goal whose current amount reaches its target is deactivated and
    stamped with ``completed_at``; reactivating clears the stamp.
    """

    def __init__(self, crud: CrudService[FinancialGoal]) -> None:
        self.crud = crud
        self._progress_schema = GoalProgressSchema()

    @classmethod
    def with_defaults(cls) -> FinancialGoalService:
        return cls(build_financial_goal_crud())

    def find_active_goals(self, current_user_id: int | None) -> list[dict[str, Any]]:
        return self.crud.find_list(
            filters={"is_active": True},
            order_by=[("deadline", "asc")],
            current_user_id=current_user_id,
        )

    def find_completed_goals(
        self, current_user_id: int | None
    ) -> list[dict[str, Any]]:
        return self.crud.find_list(
            filters={"is_active": False},
            order_by=[("updated_at", "desc")],
            current_user_id=current_user_id,
        )

    def update_progress(
        self,
        goal_id: int,
        payload: Mapping[str, Any],
        current_user_id: int | None,
    ) -> dict[str, Any]:
        goal = self.crud.get_entity(goal_id, current_user_id)
        try:
            data = cast(dict[str, Any], self._progress_schema.load(payload))
        except ValidationError as exc:
            raise ValidationAPIError(
                "Invalid progress data",
                field_errors=field_errors_from_messages(exc.messages, payload),
            ) from exc

        total = Decimal(goal.current_amount or 0) + data["amount"]
        if total > MAX_AMOUNT:
            raise ValidationAPIError.for_field(
                "amount",
                f"Progress would exceed the maximum of {MAX_AMOUNT}",
                payload.get("amount"),
            )
        goal.current_amount = total
        if goal.is_completed:
            goal.is_active = False
            goal.completed_at = goal.completed_at or utc_now_naive()
        logger.info(
            "goal_progress_updated id=%s amount=%s completed=%s",
            goal_id,
            data["amount"],
            goal.is_completed,
        )
        return self.crud.save_entity(goal)

    def mark_as_completed(
        self, goal_id: int, current_user_id: int | None
    ) -> dict[str, Any]:
        goal = self.crud.get_entity(goal_id, current_user_id)
        goal.is_active = False
        goal.completed_at = utc_now_naive()
        logger.info("goal_marked_completed id=%s", goal_id)
        return self.crud.save_entity(goal)

    def reactivate(self, goal_id: int, current_user_id: int | None) -> dict[str, Any]:
        goal = self.crud.get_entity(goal_id, current_user_id)
        goal.is_active = True
        goal.completed_at = None
        logger.info("goal_reactivated id=%s", goal_id)
        return self.crud.save_entity(goal)
