from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar

E = TypeVar("E")


class EntityMapper(Protocol[E]):
    """Converts between wire payloads, validated DTOs and entities."""

    def load_create(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        pass

    def load_update(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        pass

    def to_entity(self, dto: Mapping[str, Any]) -> E:
        pass

    def update_entity(self, entity: E, dto: Mapping[str, Any]) -> E:
        pass

    def to_dto(self, entity: E) -> dict[str, Any]:
        pass

    def resolve_field(self, wire_name: str) -> str | None:
        pass
