from flask import Blueprint

financial_goal_bp = Blueprint(
    "financial_goals", __name__, url_prefix="/financial-goals"
)
