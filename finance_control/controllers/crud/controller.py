from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from flask import Response, current_app, request
from flask_jwt_extended import get_jwt_identity

from finance_control.exceptions import (
    NotFoundAPIError,
    UnauthorizedAPIError,
    ValidationAPIError,
)
from finance_control.services import CrudService
from finance_control.utils.pagination import PageRequest
from finance_control.utils.response_builder import json_response, success_payload

from .query_params import extract_filters


def current_user_id() -> int:
    identity = get_jwt_identity()
    try:
        return int(identity)
    except (TypeError, ValueError) as exc:
        raise UnauthorizedAPIError("Token identity is not a valid user id") from exc


def request_body() -> Any:
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationAPIError.for_field(
            "_body", "Request body must be a JSON object", None
        )
    return payload


def resolve_page_size(size: int | None) -> int:
    default_size = int(current_app.config.get("DEFAULT_PAGE_SIZE", 20))
    max_size = int(current_app.config.get("MAX_PAGE_SIZE", 100))
    if size is None:
        return min(default_size, max_size)
    return min(size, max_size)


@dataclass(frozen=True)
class CrudController:
    """HTTP adapter between a resource's routes and its ``CrudService``.

    Holds no request state; the service is resolved per call so tests can
    swap factories through the app dependencies.
    """

    resource_key: str
    entity_name: str
    collection_label: str
    docs_tag: str
    service_factory: Callable[[], CrudService[Any]]

    def _service(self) -> CrudService[Any]:
        return self.service_factory()

    def _scope(self, service: CrudService[Any]) -> int | None:
        return current_user_id() if service.user_aware else None

    def list(
        self,
        *,
        page: int,
        size: int | None,
        search: str | None,
        sort_by: str | None,
        sort_direction: str | None,
    ) -> Response:
        service = self._service()
        filters = extract_filters(request.args, service.mapper.resolve_field)
        sort_field = None
        if sort_by:
            sort_field = service.mapper.resolve_field(sort_by) or sort_by
        result = service.find_all(
            PageRequest(page=page, size=resolve_page_size(size)),
            search=search,
            filters=filters,
            sort_field=sort_field,
            sort_direction=sort_direction,
            current_user_id=self._scope(service),
        )
        return json_response(
            success_payload(result, f"{self.collection_label} retrieved successfully"),
            200,
        )

    def retrieve(self, entity_id: int) -> Response:
        service = self._service()
        data = service.find_by_id(entity_id, self._scope(service))
        if data is None:
            raise NotFoundAPIError.for_entity(self.entity_name, entity_id)
        return json_response(
            success_payload(data, f"{self.entity_name} retrieved successfully"), 200
        )

    def create(self) -> Response:
        payload = request_body()
        service = self._service()
        data = service.create(payload, self._scope(service))
        return json_response(
            success_payload(data, f"{self.entity_name} created successfully"), 201
        )

    def update(self, entity_id: int) -> Response:
        payload = request_body()
        service = self._service()
        data = service.update(entity_id, payload, self._scope(service))
        return json_response(
            success_payload(data, f"{self.entity_name} updated successfully"), 200
        )

    def delete(self, entity_id: int) -> Response:
        service = self._service()
        service.delete(entity_id, self._scope(service))
        return json_response(
            success_payload(None, f"{self.entity_name} deleted successfully"), 200
        )
