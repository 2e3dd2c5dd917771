from __future__ import annotations

from finance_control.controllers.crud import DocumentedResource, register_crud_routes

from .blueprint import financial_goal_bp
from .resources import (
    ActiveGoalsResource,
    CompletedGoalsResource,
    GoalCompletionResource,
    GoalProgressResource,
    GoalReactivationResource,
    financial_goal_controller,
)

DOCUMENTED_RESOURCES: list[DocumentedResource] = []
_ROUTES_REGISTERED = False

_EXTRA_ROUTES = (
    ("/active", ActiveGoalsResource, "financial_goals_active", ["GET"]),
    ("/completed", CompletedGoalsResource, "financial_goals_completed", ["GET"]),
    (
        "/<int:goal_id>/progress",
        GoalProgressResource,
        "financial_goals_progress",
        ["POST"],
    ),
    (
        "/<int:goal_id>/complete",
        GoalCompletionResource,
        "financial_goals_complete",
        ["POST"],
    ),
    (
        "/<int:goal_id>/reactivate",
        GoalReactivationResource,
        "financial_goals_reactivate",
        ["POST"],
    ),
)


def register_financial_goal_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    for rule, resource, endpoint, methods in _EXTRA_ROUTES:
        financial_goal_bp.add_url_rule(
            rule,
            view_func=resource.as_view(endpoint),
            methods=methods,
        )
        DOCUMENTED_RESOURCES.append(
            DocumentedResource(resource, financial_goal_bp.name, endpoint)
        )
    DOCUMENTED_RESOURCES.extend(
        register_crud_routes(financial_goal_bp, financial_goal_controller)
    )

    _ROUTES_REGISTERED = True


register_financial_goal_routes()
