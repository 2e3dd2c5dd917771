from flask import Blueprint

from finance_control.controllers.crud import DocumentedResource

from . import financial_goal as _financial_goal
from . import transaction_category_controller as _categories
from . import transaction_controller as _transactions
from . import transaction_responsible_controller as _responsibles
from . import transaction_subcategory_controller as _subcategories
from .dependencies import (
    FinanceDependencies,
    get_finance_dependencies,
    register_finance_dependencies,
)
from .health_controller import health_bp

API_BLUEPRINTS: list[Blueprint] = [
    _categories.transaction_category_bp,
    _subcategories.transaction_subcategory_bp,
    _responsibles.transaction_responsible_bp,
    _transactions.transaction_bp,
    _financial_goal.financial_goal_bp,
]

DOCUMENTED_RESOURCES: list[DocumentedResource] = [
    *_categories.DOCUMENTED_RESOURCES,
    *_subcategories.DOCUMENTED_RESOURCES,
    *_responsibles.DOCUMENTED_RESOURCES,
    *_transactions.DOCUMENTED_RESOURCES,
    *_financial_goal.DOCUMENTED_RESOURCES,
]

__all__ = [
    "API_BLUEPRINTS",
    "DOCUMENTED_RESOURCES",
    "FinanceDependencies",
    "get_finance_dependencies",
    "health_bp",
    "register_finance_dependencies",
]
