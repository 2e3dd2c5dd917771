"""Generic CRUD orchestration shared by every finance domain.

A :class:`CrudService` is configured, never subclassed: each domain hands it
a repository, an entity mapper and plain validator callables. The current
user is always an explicit argument; user-aware services scope every read
and write by it and report records owned by someone else as absent.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeVar

from marshmallow import ValidationError

from finance_control.application.interfaces import EntityMapper, Repository
from finance_control.exceptions import (
    ConflictAPIError,
    FieldError,
    NotFoundAPIError,
    UnauthorizedAPIError,
    ValidationAPIError,
    field_errors_from_messages,
)
from finance_control.utils.pagination import Page, PageRequest, Sort, SortDirection
from finance_control.utils.validation_utils import (
    FieldValidationError,
    validate_date_range,
    validate_id,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")

Validator = Callable[[Mapping[str, Any], Any], Iterable[FieldError]]

OWNER_FIELD = "user_id"


class CrudService(Generic[E]):
    def __init__(
        self,
        repository: Repository[E],
        mapper: EntityMapper[E],
        *,
        entity_name: str,
        user_aware: bool = False,
        name_based: bool = False,
        name_scope: Sequence[str] = (),
        validators: Sequence[Validator] = (),
    ) -> None:
        self._repository = repository
        self._mapper = mapper
        self._entity_name = entity_name
        self._user_aware = user_aware
        self._name_based = name_based
        self._name_scope = tuple(name_scope)
        self._validators = tuple(validators)

    @property
    def entity_name(self) -> str:
        return self._entity_name

    @property
    def user_aware(self) -> bool:
        return self._user_aware

    @property
    def mapper(self) -> EntityMapper[E]:
        return self._mapper

    @property
    def repository(self) -> Repository[E]:
        return self._repository

    # helpers

    def _owner(self, current_user_id: int | None) -> int | None:
        if not self._user_aware:
            return None
        if current_user_id is None:
            raise UnauthorizedAPIError("Authenticated user is required")
        return current_user_id

    def _scoped_filters(
        self, filters: Mapping[str, Any] | None, owner: int | None
    ) -> dict[str, Any]:
        scoped = dict(filters or {})
        if self._user_aware:
            scoped[OWNER_FIELD] = owner
        return scoped

    @staticmethod
    def _validate_id(entity_id: Any) -> None:
        try:
            validate_id(entity_id)
        except FieldValidationError as exc:
            raise ValidationAPIError(
                str(exc), field_errors=[exc.field_error]
            ) from exc

    def _load(
        self, loader: Callable[[Mapping[str, Any]], dict[str, Any]], payload: Any
    ) -> dict[str, Any]:
        if not isinstance(payload, Mapping):
            raise ValidationAPIError.for_field(
                "_body", "Request body must be a JSON object", None
            )
        try:
            return loader(payload)
        except ValidationError as exc:
            raise ValidationAPIError(
                f"Invalid {self._entity_name.lower()} data",
                field_errors=field_errors_from_messages(exc.messages, payload),
            ) from exc

    def _run_validators(self, dto: Mapping[str, Any], existing: E | None) -> None:
        errors: list[FieldError] = []
        for validator in self._validators:
            errors.extend(validator(dto, existing))
        if errors:
            raise ValidationAPIError(
                f"Invalid {self._entity_name.lower()} data", field_errors=errors
            )

    def _ensure_unique_name(
        self, dto: Mapping[str, Any], existing: E | None, owner: int | None
    ) -> None:
        if not self._name_based:
            return
        name = dto.get("name", getattr(existing, "name", None))
        if not name:
            return
        scope = {
            field: dto.get(field, getattr(existing, field, None))
            for field in self._name_scope
        }
        filters = self._scoped_filters(scope, owner)
        exclude_id = getattr(existing, "id", None)
        if self._repository.exists_by_name_ignore_case(
            name, filters=filters, exclude_id=exclude_id
        ):
            raise ConflictAPIError(
                f"{self._entity_name} with name '{name}' already exists"
            )

    def _is_owned(self, entity: E, owner: int | None) -> bool:
        if not self._user_aware:
            return True
        return getattr(entity, OWNER_FIELD, None) == owner

    def _require_name_based(self) -> None:
        if not self._name_based:
            raise NotImplementedError(
                f"{self._entity_name} does not support name-based lookups"
            )

    def get_entity(self, entity_id: int, current_user_id: int | None = None) -> E:
        """Load an entity visible to the current user or raise NotFound."""
        owner = self._owner(current_user_id)
        self._validate_id(entity_id)
        entity = self._repository.find_by_id(entity_id)
        if entity is None or not self._is_owned(entity, owner):
            logger.warning(
                "crud_entity_not_found entity=%s id=%s", self._entity_name, entity_id
            )
            raise NotFoundAPIError.for_entity(self._entity_name, entity_id)
        return entity

    def save_entity(self, entity: E) -> dict[str, Any]:
        saved = self._repository.save(entity)
        return self._mapper.to_dto(saved)

    # reads

    def find_all(
        self,
        page_request: PageRequest,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
        sort_field: str | None = None,
        sort_direction: str | SortDirection | None = None,
        current_user_id: int | None = None,
    ) -> Page[dict[str, Any]]:
        owner = self._owner(current_user_id)
        if sort_field:
            page_request = page_request.with_sort(
                Sort(sort_field, SortDirection.parse(sort_direction))
            )
        page = self._repository.find_page(
            page_request,
            search=search,
            filters=self._scoped_filters(filters, owner),
        )
        logger.debug(
            "crud_find_all entity=%s page=%s size=%s total=%s",
            self._entity_name,
            page_request.page,
            page_request.size,
            page.total_elements,
        )
        return page.map(self._mapper.to_dto)

    def find_list(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: Iterable[tuple[str, str]] = (),
        current_user_id: int | None = None,
    ) -> list[dict[str, Any]]:
        owner = self._owner(current_user_id)
        entities = self._repository.find_all(
            filters=self._scoped_filters(filters, owner), order_by=order_by
        )
        return [self._mapper.to_dto(entity) for entity in entities]

    def find_by_id(
        self, entity_id: int, current_user_id: int | None = None
    ) -> dict[str, Any] | None:
        owner = self._owner(current_user_id)
        self._validate_id(entity_id)
        entity = self._repository.find_by_id(entity_id)
        if entity is None or not self._is_owned(entity, owner):
            logger.debug(
                "crud_find_by_id_absent entity=%s id=%s", self._entity_name, entity_id
            )
            return None
        return self._mapper.to_dto(entity)

    def exists_by_id(self, entity_id: int, current_user_id: int | None = None) -> bool:
        return self.find_by_id(entity_id, current_user_id) is not None

    def count(
        self,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
        current_user_id: int | None = None,
    ) -> int:
        owner = self._owner(current_user_id)
        return self._repository.count(
            search=search, filters=self._scoped_filters(filters, owner)
        )

    def find_by_name(
        self, name: str, current_user_id: int | None = None
    ) -> dict[str, Any] | None:
        self._require_name_based()
        owner = self._owner(current_user_id)
        entity = self._repository.find_by_name_ignore_case(
            name, filters=self._scoped_filters(None, owner)
        )
        return None if entity is None else self._mapper.to_dto(entity)

    def exists_by_name(self, name: str, current_user_id: int | None = None) -> bool:
        self._require_name_based()
        owner = self._owner(current_user_id)
        return self._repository.exists_by_name_ignore_case(
            name, filters=self._scoped_filters(None, owner)
        )

    def find_all_ordered_by_name(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        current_user_id: int | None = None,
    ) -> list[dict[str, Any]]:
        self._require_name_based()
        owner = self._owner(current_user_id)
        entities = self._repository.find_all_ordered_by_name(
            filters=self._scoped_filters(filters, owner)
        )
        return [self._mapper.to_dto(entity) for entity in entities]

    def find_created_between(
        self,
        start: datetime,
        end: datetime,
        current_user_id: int | None = None,
    ) -> list[dict[str, Any]]:
        owner = self._owner(current_user_id)
        self._check_range(start, end)
        entities = self._repository.find_by_created_at_between(
            start, end, filters=self._scoped_filters(None, owner)
        )
        return [self._mapper.to_dto(entity) for entity in entities]

    def find_updated_between(
        self,
        start: datetime,
        end: datetime,
        current_user_id: int | None = None,
    ) -> list[dict[str, Any]]:
        owner = self._owner(current_user_id)
        self._check_range(start, end)
        entities = self._repository.find_by_updated_at_between(
            start, end, filters=self._scoped_filters(None, owner)
        )
        return [self._mapper.to_dto(entity) for entity in entities]

    @staticmethod
    def _check_range(start: datetime, end: datetime) -> None:
        try:
            validate_date_range(start, end)
        except FieldValidationError as exc:
            raise ValidationAPIError(
                str(exc), field_errors=[exc.field_error]
            ) from exc

    # writes

    def create(
        self, payload: Mapping[str, Any], current_user_id: int | None = None
    ) -> dict[str, Any]:
        owner = self._owner(current_user_id)
        dto = self._load(self._mapper.load_create, payload)
        self._run_validators(dto, None)
        self._ensure_unique_name(dto, None, owner)

        entity = self._mapper.to_entity(dto)
        if self._user_aware:
            setattr(entity, OWNER_FIELD, owner)
        saved = self._repository.save(entity)
        logger.info(
            "crud_created entity=%s id=%s user_id=%s",
            self._entity_name,
            getattr(saved, "id", None),
            owner,
        )
        return self._mapper.to_dto(saved)

    def update(
        self,
        entity_id: int,
        payload: Mapping[str, Any],
        current_user_id: int | None = None,
    ) -> dict[str, Any]:
        owner = self._owner(current_user_id)
        entity = self.get_entity(entity_id, current_user_id)
        dto = self._load(self._mapper.load_update, payload)
        self._run_validators(dto, entity)
        self._ensure_unique_name(dto, entity, owner)

        self._mapper.update_entity(entity, dto)
        saved = self._repository.save(entity)
        logger.info(
            "crud_updated entity=%s id=%s user_id=%s",
            self._entity_name,
            entity_id,
            owner,
        )
        return self._mapper.to_dto(saved)

    def delete(self, entity_id: int, current_user_id: int | None = None) -> None:
        entity = self.get_entity(entity_id, current_user_id)
        self._repository.delete(entity)
        logger.info(
            "crud_deleted entity=%s id=%s user_id=%s",
            self._entity_name,
            entity_id,
            current_user_id,
        )
