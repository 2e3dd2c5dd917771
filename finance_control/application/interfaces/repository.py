from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Mapping, Protocol, TypeVar

from finance_control.utils.pagination import Page, PageRequest

E = TypeVar("E")


class Repository(Protocol[E]):
    """Store of entities keyed by a numeric id.

    Implementations stamp ``created_at`` on insert and ``updated_at`` on
    every save, run each write in its own transaction and surface
    uniqueness violations as ``ConflictAPIError``.
    """

    def has_field(self, name: str) -> bool:
        pass

    def find_page(
        self,
        page_request: PageRequest,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> Page[E]:
        pass

    def find_all(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: Iterable[tuple[str, str]] = (),
    ) -> list[E]:
        pass

    def find_by_id(self, entity_id: int) -> E | None:
        pass

    def exists_by_id(self, entity_id: int) -> bool:
        pass

    def find_one_by(self, **criteria: Any) -> E | None:
        pass

    def exists_by(self, *, exclude_id: int | None = None, **criteria: Any) -> bool:
        pass

    def count(
        self,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        pass

    def find_by_name_ignore_case(
        self, name: str, *, filters: Mapping[str, Any] | None = None
    ) -> E | None:
        pass

    def exists_by_name_ignore_case(
        self,
        name: str,
        *,
        filters: Mapping[str, Any] | None = None,
        exclude_id: int | None = None,
    ) -> bool:
        pass

    def find_all_ordered_by_name(
        self, *, filters: Mapping[str, Any] | None = None
    ) -> list[E]:
        pass

    def find_by_created_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> list[E]:
        pass

    def find_by_updated_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> list[E]:
        pass

    def find_by_created_at_after(
        self, moment: datetime, *, filters: Mapping[str, Any] | None = None
    ) -> list[E]:
        pass

    def find_by_updated_at_after(
        self, moment: datetime, *, filters: Mapping[str, Any] | None = None
    ) -> list[E]:
        pass

    def count_by_created_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        pass

    def count_by_updated_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        pass

    def save(self, entity: E) -> E:
        pass

    def delete(self, entity: E) -> None:
        pass
