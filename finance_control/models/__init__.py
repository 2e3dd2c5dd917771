from .financial_goal import FinancialGoal
from .transaction import Transaction, TransactionResponsibility
from .transaction_category import TransactionCategory
from .transaction_responsible import TransactionResponsible
from .transaction_subcategory import TransactionSubcategory

__all__ = [
    "FinancialGoal",
    "Transaction",
    "TransactionCategory",
    "TransactionResponsibility",
    "TransactionResponsible",
    "TransactionSubcategory",
]
