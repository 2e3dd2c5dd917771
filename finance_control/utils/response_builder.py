from __future__ import annotations

from typing import Any, Iterable

from flask import Response, has_request_context, jsonify, request

from finance_control.exceptions import ErrorKind, FieldError
from finance_control.utils.datetime_utils import iso_utc_now
from finance_control.utils.pagination import Page

SENSITIVE_DATA_FIELDS = {
    "password",
    "password_hash",
    "secret",
    "secret_key",
    "jwt_secret_key",
}


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, dict):
        sanitized: dict[str, Any] = {}
        for key, item in value.items():
            if str(key).strip().lower() in SENSITIVE_DATA_FIELDS:
                continue
            sanitized[key] = _sanitize_value(item)
        return sanitized
    if isinstance(value, list):
        return [_sanitize_value(item) for item in value]
    return value


def _current_path() -> str | None:
    if has_request_context():
        return request.path
    return None


def success_payload(
    data: Any = None,
    message: str = "Operation completed successfully",
    path: str | None = None,
) -> dict[str, Any]:
    if isinstance(data, Page):
        data = page_payload(data)
    return {
        "success": True,
        "data": _sanitize_value(data),
        "message": message,
        "timestamp": iso_utc_now(),
        "path": path,
    }


def error_payload(
    kind: ErrorKind,
    message: str,
    path: str | None = None,
    validation_errors: Iterable[FieldError] | None = None,
) -> dict[str, Any]:
    errors: list[dict[str, Any]] | None = None
    if kind is ErrorKind.VALIDATION:
        errors = [
            _sanitize_value(error.to_dict()) for error in (validation_errors or ())
        ]
    return {
        "error": kind.value,
        "message": message,
        "path": path if path is not None else _current_path(),
        "timestamp": iso_utc_now(),
        "validationErrors": errors,
    }


def page_payload(page: Page[Any]) -> dict[str, Any]:
    request_ = page.page_request
    return {
        "content": list(page.content),
        "totalElements": page.total_elements,
        "totalPages": page.total_pages,
        "first": page.first,
        "last": page.last,
        "numberOfElements": page.number_of_elements,
        "pageable": {
            "pageNumber": request_.page,
            "pageSize": request_.size,
            "sort": [
                {"property": order.property, "direction": order.direction.value}
                for order in request_.sort
            ],
        },
    }


def json_response(payload: dict[str, Any], status_code: int) -> Response:
    response = jsonify(payload)
    response.status_code = status_code
    return response
