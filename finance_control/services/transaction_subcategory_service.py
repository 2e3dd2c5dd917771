from __future__ import annotations

from typing import Any, Mapping

from finance_control.application.interfaces import Repository
from finance_control.exceptions import FieldError
from finance_control.mappers import SchemaEntityMapper
from finance_control.models import TransactionCategory, TransactionSubcategory
from finance_control.repositories import SQLAlchemyRepository
from finance_control.schemas import TransactionSubcategorySchema
from finance_control.services.crud_service import CrudService, Validator


def category_must_exist(
    categories: Repository[TransactionCategory],
) -> Validator:
    def _validate(
        dto: Mapping[str, Any], existing: TransactionSubcategory | None
    ) -> list[FieldError]:
        if "category_id" not in dto:
            return []
        category_id = dto["category_id"]
        if categories.exists_by_id(category_id):
            return []
        return [
            FieldError("categoryId", "Transaction category not found", category_id)
        ]

    return _validate


class TransactionSubcategoryService:
    """Subcategory CRUD plus the per-category listing."""

    def __init__(self, crud: CrudService[TransactionSubcategory]) -> None:
        self.crud = crud

    @classmethod
    def with_defaults(cls) -> TransactionSubcategoryService:
        return cls(build_transaction_subcategory_crud())

    def find_by_category(self, category_id: int) -> list[dict[str, Any]]:
        return self.crud.find_list(
            filters={"category_id": category_id, "is_active": True},
            order_by=[("name", "asc")],
        )


def build_transaction_subcategory_crud(
    categories: Repository[TransactionCategory] | None = None,
) -> CrudService[TransactionSubcategory]:
    if categories is None:
        categories = SQLAlchemyRepository(TransactionCategory)
    return CrudService(
        SQLAlchemyRepository(
            TransactionSubcategory, searchable_fields=("name", "description")
        ),
        SchemaEntityMapper(TransactionSubcategory, TransactionSubcategorySchema),
        entity_name="Transaction subcategory",
        name_based=True,
        name_scope=("category_id",),
        validators=(category_must_exist(categories),),
    )
