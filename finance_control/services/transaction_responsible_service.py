from __future__ import annotations

from finance_control.mappers import SchemaEntityMapper
from finance_control.models import TransactionResponsible
from finance_control.repositories import SQLAlchemyRepository
from finance_control.schemas import TransactionResponsibleSchema
from finance_control.services.crud_service import CrudService


def build_transaction_responsible_service() -> CrudService[TransactionResponsible]:
    return CrudService(
        SQLAlchemyRepository(TransactionResponsible, searchable_fields=("name",)),
        SchemaEntityMapper(TransactionResponsible, TransactionResponsibleSchema),
        entity_name="Transaction responsible",
        name_based=True,
    )
