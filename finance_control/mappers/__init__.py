from .schema_mapper import SchemaEntityMapper
from .transaction_mapper import TransactionMapper

__all__ = ["SchemaEntityMapper", "TransactionMapper"]
