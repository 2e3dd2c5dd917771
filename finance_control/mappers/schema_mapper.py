from __future__ import annotations

from typing import Any, Generic, Iterable, Mapping, TypeVar, cast

from marshmallow import Schema

from finance_control.extensions.database import db

M = TypeVar("M", bound=db.Model)

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at", "user_id"})


class SchemaEntityMapper(Generic[M]):
    """Entity mapper driven by a marshmallow schema.

    ``load_*`` validate wire payloads into DTO dicts keyed by entity
    attribute names, ``to_dto`` dumps an entity back to its wire shape.
    Only mapped columns are copied onto entities and server-owned fields
    are never overwritten.
    """

    def __init__(
        self,
        model: type[M],
        schema_cls: type[Schema],
        *,
        protected_fields: Iterable[str] = PROTECTED_FIELDS,
    ) -> None:
        self._model = model
        self._schema = schema_cls()
        self._partial_schema = schema_cls(partial=True)
        self._protected = frozenset(protected_fields)
        self._columns = {column.key for column in model.__mapper__.columns}
        self._wire_to_attribute = {
            (field.data_key or name): (field.attribute or name)
            for name, field in self._schema.fields.items()
        }

    @property
    def model(self) -> type[M]:
        return self._model

    def load_create(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return cast(dict[str, Any], self._schema.load(payload))

    def load_update(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return cast(dict[str, Any], self._partial_schema.load(payload))

    def _assignable(self, dto: Mapping[str, Any]) -> dict[str, Any]:
        return {
            key: value
            for key, value in dto.items()
            if key in self._columns and key not in self._protected
        }

    def to_entity(self, dto: Mapping[str, Any]) -> M:
        return self._model(**self._assignable(dto))

    def update_entity(self, entity: M, dto: Mapping[str, Any]) -> M:
        for key, value in self._assignable(dto).items():
            setattr(entity, key, value)
        return entity

    def to_dto(self, entity: M) -> dict[str, Any]:
        return cast(dict[str, Any], self._schema.dump(entity))

    def resolve_field(self, wire_name: str) -> str | None:
        return self._wire_to_attribute.get(wire_name)
