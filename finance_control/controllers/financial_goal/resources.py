# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any

from flask_apispec import doc
from flask_apispec.views import MethodResource
from flask_jwt_extended import jwt_required

from finance_control.controllers.crud import (
    BEARER_SECURITY,
    CrudController,
    current_user_id,
    request_body,
)
from finance_control.controllers.dependencies import get_finance_dependencies
from finance_control.services import FinancialGoalService
from finance_control.utils.response_builder import json_response, success_payload

DOCS_TAG = "Financial goals"
GOAL_ID_PARAM = {"goal_id": {"in": "path", "type": "integer", "required": True}}


def _service() -> FinancialGoalService:
    return get_finance_dependencies().financial_goal_service_factory()


financial_goal_controller = CrudController(
    resource_key="financial_goals",
    entity_name="Financial goal",
    collection_label="Financial goals",
    docs_tag=DOCS_TAG,
    service_factory=lambda: _service().crud,
)


class ActiveGoalsResource(MethodResource):
    @doc(
        description="Active goals of the authenticated user, nearest deadline first.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        responses={200: {"description": "Active goals"}},
    )
    @jwt_required()
    def get(self) -> Any:
        goals = _service().find_active_goals(current_user_id())
        return json_response(
            success_payload(goals, "Active financial goals retrieved successfully"),
            200,
        )


class CompletedGoalsResource(MethodResource):
    @doc(
        description="Completed (inactive) goals, most recently updated first.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        responses={200: {"description": "Completed goals"}},
    )
    @jwt_required()
    def get(self) -> Any:
        goals = _service().find_completed_goals(current_user_id())
        return json_response(
            success_payload(goals, "Completed financial goals retrieved successfully"),
            200,
        )


class GoalProgressResource(MethodResource):
    @doc(
        description=(
            "Add an amount to the goal's current amount. The goal is "
            "deactivated once the target is reached."
        ),
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        params=GOAL_ID_PARAM,
        responses={
            200: {"description": "Progress updated"},
            400: {"description": "Invalid amount"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def post(self, goal_id: int) -> Any:
        payload = request_body()
        goal = _service().update_progress(goal_id, payload, current_user_id())
        return json_response(
            success_payload(goal, "Goal progress updated successfully"), 200
        )


class GoalCompletionResource(MethodResource):
    @doc(
        description="Mark a goal as completed.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        params=GOAL_ID_PARAM,
        responses={
            200: {"description": "Goal completed"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def post(self, goal_id: int) -> Any:
        goal = _service().mark_as_completed(goal_id, current_user_id())
        return json_response(success_payload(goal, "Goal marked as completed"), 200)


class GoalReactivationResource(MethodResource):
    @doc(
        description="Reactivate a completed or inactive goal.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        params=GOAL_ID_PARAM,
        responses={
            200: {"description": "Goal reactivated"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def post(self, goal_id: int) -> Any:
        goal = _service().reactivate(goal_id, current_user_id())
        return json_response(success_payload(goal, "Goal reactivated"), 200)
