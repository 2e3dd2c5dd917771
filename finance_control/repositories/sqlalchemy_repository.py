from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.query import Query

from finance_control.exceptions import ConflictAPIError, ValidationAPIError
from finance_control.extensions.database import db
from finance_control.utils.datetime_utils import as_naive_utc, utc_now_naive
from finance_control.utils.pagination import Page, PageRequest, SortDirection

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=db.Model)

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


class SQLAlchemyRepository(Generic[M]):
    """Relational implementation of the persistence port for one model."""

    def __init__(
        self,
        model: type[M],
        *,
        searchable_fields: Sequence[str] = (),
        default_sort: str = "id",
    ) -> None:
        self._model = model
        self._searchable_fields = tuple(searchable_fields)
        self._default_sort = default_sort
        self._columns = {column.key: column for column in model.__mapper__.columns}

    @property
    def model(self) -> type[M]:
        return self._model

    def has_field(self, name: str) -> bool:
        return name in self._columns

    # queries

    def _query(self) -> Query:
        return self._model.query

    def _coerce(self, name: str, value: Any) -> Any:
        if value is None:
            return None
        column = self._columns[name]
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return value

        try:
            if python_type is bool:
                if isinstance(value, bool):
                    return value
                normalized = str(value).strip().lower()
                if normalized in _TRUE_STRINGS:
                    return True
                if normalized in _FALSE_STRINGS:
                    return False
                raise ValueError(value)
            if python_type is int:
                if isinstance(value, bool):
                    raise ValueError(value)
                if isinstance(value, float) and not value.is_integer():
                    raise ValueError(value)
                return int(value)
            if python_type is Decimal:
                return Decimal(str(value))
            if python_type is datetime:
                if isinstance(value, datetime):
                    return as_naive_utc(value)
                return as_naive_utc(datetime.fromisoformat(str(value)))
            if python_type is date:
                if isinstance(value, date):
                    return value
                return date.fromisoformat(str(value))
            if python_type is str:
                return str(value)
        except (ValueError, TypeError, InvalidOperation) as exc:
            raise ValidationAPIError.for_field(
                name, f"Invalid value for filter '{name}'", value
            ) from exc
        return value

    def _apply_filters(
        self, query: Query, filters: Mapping[str, Any] | None
    ) -> Query:
        for name, raw_value in (filters or {}).items():
            if not self.has_field(name):
                logger.debug(
                    "repository_filter_ignored model=%s field=%s",
                    self._model.__name__,
                    name,
                )
                continue
            column = getattr(self._model, name)
            value = self._coerce(name, raw_value)
            if value is None:
                query = query.filter(column.is_(None))
            else:
                query = query.filter(column == value)
        return query

    def _apply_search(self, query: Query, search: str | None) -> Query:
        term = (search or "").strip().lower()
        if not term or not self._searchable_fields:
            return query
        conditions = [
            func.lower(getattr(self._model, field)).contains(term, autoescape=True)
            for field in self._searchable_fields
        ]
        return query.filter(or_(*conditions))

    def _apply_order(
        self, query: Query, order_by: Iterable[tuple[str, str | SortDirection]]
    ) -> Query:
        clauses = []
        for name, direction in order_by:
            if not self.has_field(name):
                raise ValidationAPIError.for_field(
                    "sortBy", f"Cannot sort by '{name}'", name
                )
            column = getattr(self._model, name)
            if SortDirection.parse(direction) is SortDirection.DESC:
                clauses.append(column.desc())
            else:
                clauses.append(column.asc())
        if not any(name == "id" for name, _ in order_by):
            clauses.append(self._model.id.asc())
        return query.order_by(*clauses)

    def _filtered(
        self,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> Query:
        query = self._apply_filters(self._query(), filters)
        return self._apply_search(query, search)

    def find_page(
        self,
        page_request: PageRequest,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> Page[M]:
        query = self._filtered(search=search, filters=filters)
        order = [(sort.property, sort.direction) for sort in page_request.sort] or [
            (self._default_sort, SortDirection.ASC)
        ]
        pagination = self._apply_order(query, order).paginate(
            page=page_request.page + 1,
            per_page=page_request.size,
            error_out=False,
            max_per_page=None,
        )
        return Page(
            content=list(pagination.items),
            total_elements=int(pagination.total or 0),
            page_request=page_request,
        )

    def find_all(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: Iterable[tuple[str, str]] = (),
    ) -> list[M]:
        query = self._apply_order(self._filtered(filters=filters), list(order_by))
        return list(query.all())

    def find_by_id(self, entity_id: int) -> M | None:
        return db.session.get(self._model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        return self.exists_by(id=entity_id)

    def find_one_by(self, **criteria: Any) -> M | None:
        return self._apply_filters(self._query(), criteria).first()

    def exists_by(self, *, exclude_id: int | None = None, **criteria: Any) -> bool:
        query = self._apply_filters(self._query(), criteria)
        if exclude_id is not None:
            query = query.filter(self._model.id != exclude_id)
        return bool(db.session.query(query.exists()).scalar())

    def count(
        self,
        *,
        search: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        return int(self._filtered(search=search, filters=filters).count())

    # name-based lookups

    def _name_query(self, name: str, filters: Mapping[str, Any] | None) -> Query:
        query = self._apply_filters(self._query(), filters)
        return query.filter(func.lower(self._model.name) == name.strip().lower())

    def find_by_name_ignore_case(
        self, name: str, *, filters: Mapping[str, Any] | None = None
    ) -> M | None:
        return self._name_query(name, filters).first()

    def exists_by_name_ignore_case(
        self,
        name: str,
        *,
        filters: Mapping[str, Any] | None = None,
        exclude_id: int | None = None,
    ) -> bool:
        query = self._name_query(name, filters)
        if exclude_id is not None:
            query = query.filter(self._model.id != exclude_id)
        return bool(db.session.query(query.exists()).scalar())

    def find_all_ordered_by_name(
        self, *, filters: Mapping[str, Any] | None = None
    ) -> list[M]:
        return self.find_all(filters=filters, order_by=[("name", "asc")])

    # audit-field ranges

    def _between(
        self,
        field: str,
        start: datetime,
        end: datetime,
        filters: Mapping[str, Any] | None,
    ) -> Query:
        column = getattr(self._model, field)
        return self._apply_filters(self._query(), filters).filter(
            column.between(as_naive_utc(start), as_naive_utc(end))
        )

    def _after(
        self, field: str, moment: datetime, filters: Mapping[str, Any] | None
    ) -> Query:
        column = getattr(self._model, field)
        return self._apply_filters(self._query(), filters).filter(
            column > as_naive_utc(moment)
        )

    def find_by_created_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> list[M]:
        query = self._between("created_at", start, end, filters)
        return list(query.order_by(self._model.created_at.asc()).all())

    def find_by_updated_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> list[M]:
        query = self._between("updated_at", start, end, filters)
        return list(query.order_by(self._model.updated_at.asc()).all())

    def find_by_created_at_after(
        self, moment: datetime, *, filters: Mapping[str, Any] | None = None
    ) -> list[M]:
        query = self._after("created_at", moment, filters)
        return list(query.order_by(self._model.created_at.asc()).all())

    def find_by_updated_at_after(
        self, moment: datetime, *, filters: Mapping[str, Any] | None = None
    ) -> list[M]:
        query = self._after("updated_at", moment, filters)
        return list(query.order_by(self._model.updated_at.asc()).all())

    def count_by_created_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        return int(self._between("created_at", start, end, filters).count())

    def count_by_updated_at_between(
        self,
        start: datetime,
        end: datetime,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        return int(self._between("updated_at", start, end, filters).count())

    # writes

    def save(self, entity: M) -> M:
        now = utc_now_naive()
        if entity.created_at is None:
            entity.created_at = now
        previous = entity.updated_at
        entity.updated_at = now if previous is None or now >= previous else previous
        db.session.add(entity)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            logger.warning(
                "repository_integrity_error model=%s detail=%s",
                self._model.__name__,
                exc.orig,
            )
            raise ConflictAPIError(
                f"{self._model.__name__} conflicts with an existing record"
            ) from exc
        return entity

    def delete(self, entity: M) -> None:
        db.session.delete(entity)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise ConflictAPIError(
                f"{self._model.__name__} is referenced by other records"
            ) from exc
