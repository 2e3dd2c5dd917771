from . import routes as _routes  # noqa: F401
from .blueprint import financial_goal_bp
from .resources import (
    ActiveGoalsResource,
    CompletedGoalsResource,
    GoalCompletionResource,
    GoalProgressResource,
    GoalReactivationResource,
    financial_goal_controller,
)
from .routes import DOCUMENTED_RESOURCES

__all__ = [
    "financial_goal_bp",
    "financial_goal_controller",
    "ActiveGoalsResource",
    "CompletedGoalsResource",
    "GoalProgressResource",
    "GoalCompletionResource",
    "GoalReactivationResource",
    "DOCUMENTED_RESOURCES",
]
