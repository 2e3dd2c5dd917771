from __future__ import annotations

from typing import Any, Mapping

from finance_control.mappers.schema_mapper import SchemaEntityMapper
from finance_control.models.transaction import Transaction, TransactionResponsibility
from finance_control.schemas.transaction_schema import TransactionSchema
from finance_control.utils.datetime_utils import as_naive_utc, utc_now_naive


class TransactionMapper(SchemaEntityMapper[Transaction]):
    """Maps transactions together with their responsibility split."""

    def __init__(self) -> None:
        super().__init__(Transaction, TransactionSchema)

    @staticmethod
    def _build_responsibilities(
        items: list[Mapping[str, Any]],
    ) -> list[TransactionResponsibility]:
        return [
            TransactionResponsibility(
                responsible_id=item["responsible_id"],
                percentage=item["percentage"],
                notes=item.get("notes"),
            )
            for item in items
        ]

    @staticmethod
    def _normalize_date(dto: Mapping[str, Any]) -> dict[str, Any]:
        normalized = dict(dto)
        if "date" in normalized:
            value = normalized["date"]
            normalized["date"] = utc_now_naive() if value is None else as_naive_utc(value)
        return normalized

    def to_entity(self, dto: Mapping[str, Any]) -> Transaction:
        normalized = self._normalize_date(dto)
        normalized.setdefault("date", utc_now_naive())
        transaction = super().to_entity(normalized)
        transaction.responsibilities = self._build_responsibilities(
            normalized.get("responsibilities") or []
        )
        transaction.recalculate_responsibilities()
        return transaction

    def update_entity(
        self, entity: Transaction, dto: Mapping[str, Any]
    ) -> Transaction:
        normalized = self._normalize_date(dto)
        super().update_entity(entity, normalized)
        if "responsibilities" in normalized:
            entity.responsibilities = self._build_responsibilities(
                normalized["responsibilities"] or []
            )
        entity.recalculate_responsibilities()
        return entity
