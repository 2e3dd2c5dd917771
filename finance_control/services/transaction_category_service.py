from __future__ import annotations

from finance_control.mappers import SchemaEntityMapper
from finance_control.models import TransactionCategory
from finance_control.repositories import SQLAlchemyRepository
from finance_control.schemas import TransactionCategorySchema
from finance_control.services.crud_service import CrudService

ENTITY_NAME = "Transaction category"


def build_transaction_category_service() -> CrudService[TransactionCategory]:
    return CrudService(
        SQLAlchemyRepository(TransactionCategory, searchable_fields=("name",)),
        SchemaEntityMapper(TransactionCategory, TransactionCategorySchema),
        entity_name=ENTITY_NAME,
        name_based=True,
    )
