from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar

from finance_control.exceptions import ValidationAPIError

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | SortDirection | None) -> SortDirection:
        """Case-insensitive parse; ``None`` or blank means ascending."""
        if isinstance(raw, SortDirection):
            return raw
        if raw is None or not str(raw).strip():
            return cls.ASC
        normalized = str(raw).strip().lower()
        for direction in cls:
            if direction.value == normalized:
                return direction
        raise ValidationAPIError.for_field(
            "sortDirection", "Sort direction must be 'asc' or 'desc'", raw
        )


@dataclass(frozen=True)
class Sort:
    property: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[Sort, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.page, int) or self.page < 0:
            raise ValidationAPIError.for_field(
                "page", "Page index must not be negative", self.page
            )
        if not isinstance(self.size, int) or self.size < 1:
            raise ValidationAPIError.for_field(
                "size", "Page size must be at least 1", self.size
            )

    @property
    def offset(self) -> int:
        return self.page * self.size

    def with_sort(self, *orders: Sort) -> PageRequest:
        return PageRequest(page=self.page, size=self.size, sort=tuple(orders))


@dataclass(frozen=True)
class Page(Generic[T]):
    content: Sequence[T]
    total_elements: int
    page_request: PageRequest

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_request.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.page_request.page == 0

    @property
    def last(self) -> bool:
        return self.page_request.page + 1 >= self.total_pages

    def map(self, mapper: Callable[[T], U]) -> Page[U]:
        return Page(
            content=[mapper(item) for item in self.content],
            total_elements=self.total_elements,
            page_request=self.page_request,
        )

    @classmethod
    def empty(cls, page_request: PageRequest) -> Page[Any]:
        return cls(content=[], total_elements=0, page_request=page_request)
