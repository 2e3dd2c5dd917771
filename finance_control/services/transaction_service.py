from __future__ import annotations

import logging
from typing import Any, Mapping, cast

from marshmallow import ValidationError

from finance_control.application.interfaces import Repository
from finance_control.exceptions import (
    FieldError,
    ValidationAPIError,
    field_errors_from_messages,
)
from finance_control.mappers import TransactionMapper
from finance_control.models import (
    Transaction,
    TransactionCategory,
    TransactionResponsible,
    TransactionSubcategory,
)
from finance_control.repositories import SQLAlchemyRepository
from finance_control.schemas import TransactionReconciliationSchema
from finance_control.services.crud_service import CrudService, Validator
from finance_control.utils.validation_utils import (
    FieldErrorCollector,
    validate_percentages_sum,
)

logger = logging.getLogger(__name__)


def references_must_exist(
    categories: Repository[TransactionCategory],
    subcategories: Repository[TransactionSubcategory],
) -> Validator:
    """Category must exist; a subcategory, when given, must belong to it."""

    def _validate(
        dto: Mapping[str, Any], existing: Transaction | None
    ) -> list[FieldError]:
        collector = FieldErrorCollector()
        category_id = dto.get("category_id", getattr(existing, "category_id", None))
        if "category_id" in dto and not categories.exists_by_id(category_id):
            collector.add("categoryId", "Transaction category not found", category_id)

        subcategory_id = dto.get(
            "subcategory_id", getattr(existing, "subcategory_id", None)
        )
        if subcategory_id is not None and (
            "subcategory_id" in dto or "category_id" in dto
        ):
            subcategory = subcategories.find_by_id(subcategory_id)
            if subcategory is None:
                collector.add(
                    "subcategoryId", "Transaction subcategory not found", subcategory_id
                )
            elif subcategory.category_id != category_id:
                collector.add(
                    "subcategoryId",
                    "Subcategory does not belong to the selected category",
                    subcategory_id,
                )
        return collector.errors

    return _validate


def responsibilities_must_be_consistent(
    responsibles: Repository[TransactionResponsible],
) -> Validator:
    """Responsibles must exist, appear once each and split exactly 100%."""

    def _validate(
        dto: Mapping[str, Any], existing: Transaction | None
    ) -> list[FieldError]:
        if "responsibilities" not in dto:
            return []
        items = dto["responsibilities"] or []
        collector = FieldErrorCollector()
        seen: set[int] = set()
        for index, item in enumerate(items):
            responsible_id = item["responsible_id"]
            field = f"responsibilities.{index}.responsibleId"
            if responsible_id in seen:
                collector.add(field, "Responsible is listed more than once", responsible_id)
            elif not responsibles.exists_by_id(responsible_id):
                collector.add(field, "Transaction responsible not found", responsible_id)
            seen.add(responsible_id)
        collector.check(
            validate_percentages_sum,
            [item["percentage"] for item in items],
            "responsibilities",
        )
        return collector.errors

    return _validate


def build_transaction_service() -> CrudService[Transaction]:
    return CrudService(
        SQLAlchemyRepository(Transaction, searchable_fields=("description",)),
        TransactionMapper(),
        entity_name="Transaction",
        user_aware=True,
        validators=(
            references_must_exist(
                SQLAlchemyRepository(TransactionCategory),
                SQLAlchemyRepository(TransactionSubcategory),
            ),
            responsibilities_must_be_consistent(
                SQLAlchemyRepository(TransactionResponsible)
            ),
        ),
    )


def reconcile_transaction(
    crud: CrudService[Transaction],
    transaction_id: int,
    payload: Mapping[str, Any],
    current_user_id: int | None,
) -> dict[str, Any]:
    """Set the reconciliation flag of one of the caller's transactions."""

    transaction = crud.get_entity(transaction_id, current_user_id)
    try:
        data = cast(
            dict[str, Any], TransactionReconciliationSchema().load(payload)
        )
    except ValidationError as exc:
        raise ValidationAPIError(
            "Invalid reconciliation data",
            field_errors=field_errors_from_messages(exc.messages, payload),
        ) from exc

    transaction.reconciled = data["reconciled"]
    logger.info(
        "transaction_reconciled id=%s reconciled=%s",
        transaction_id,
        transaction.reconciled,
    )
    return crud.save_entity(transaction)
