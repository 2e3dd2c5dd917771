"""
Marshmallow schemas used to validate input, serialize output and document
the API in OpenAPI.
"""

from .envelope_schema import (
    ApiResponseSchema,
    ErrorResponseSchema,
    FieldErrorSchema,
    PageSchema,
)
from .financial_goal_schema import FinancialGoalSchema, GoalProgressSchema
from .query_schema import RESERVED_QUERY_PARAMS, PageQuerySchema
from .transaction_category_schema import TransactionCategorySchema
from .transaction_responsible_schema import TransactionResponsibleSchema
from .transaction_schema import (
    TransactionReconciliationSchema,
    TransactionResponsibilitySchema,
    TransactionSchema,
)
from .transaction_subcategory_schema import TransactionSubcategorySchema

__all__ = [
    "ApiResponseSchema",
    "ErrorResponseSchema",
    "FieldErrorSchema",
    "PageSchema",
    "PageQuerySchema",
    "RESERVED_QUERY_PARAMS",
    "FinancialGoalSchema",
    "GoalProgressSchema",
    "TransactionCategorySchema",
    "TransactionReconciliationSchema",
    "TransactionResponsibleSchema",
    "TransactionResponsibilitySchema",
    "TransactionSchema",
    "TransactionSubcategorySchema",
]
