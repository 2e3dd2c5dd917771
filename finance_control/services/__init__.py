from .crud_service import CrudService, Validator
from .financial_goal_service import FinancialGoalService, build_financial_goal_crud
from .transaction_category_service import build_transaction_category_service
from .transaction_responsible_service import build_transaction_responsible_service
from .transaction_service import build_transaction_service, reconcile_transaction
from .transaction_subcategory_service import (
    TransactionSubcategoryService,
    build_transaction_subcategory_crud,
)

__all__ = [
    "CrudService",
    "Validator",
    "FinancialGoalService",
    "TransactionSubcategoryService",
    "build_financial_goal_crud",
    "build_transaction_category_service",
    "build_transaction_responsible_service",
    "build_transaction_service",
    "build_transaction_subcategory_crud",
    "reconcile_transaction",
]
