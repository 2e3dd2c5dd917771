"""Translation of every error raised while serving a request into the
standard error envelope.

Known errors (``APIError`` and its subclasses, marshmallow/webargs
validation failures, database integrity and data errors, werkzeug HTTP
errors) keep their meaning. Anything else is reported as ``INTERNAL``
with a fixed message; the details only go to the server log.
"""

from __future__ import annotations

from typing import Any, NoReturn

from flask import Flask, Response, current_app
from marshmallow import ValidationError
from sqlalchemy.exc import DataError, IntegrityError
from webargs.flaskparser import parser
from werkzeug.exceptions import HTTPException

from finance_control.exceptions import (
    APIError,
    ErrorKind,
    FieldError,
    ValidationAPIError,
    field_errors_from_messages,
)
from finance_control.extensions.database import db
from finance_control.utils.response_builder import error_payload, json_response

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"
VALIDATION_ERROR_MESSAGE = "Validation failed"
CONFLICT_ERROR_MESSAGE = "The request conflicts with existing data"


def error_response(
    kind: ErrorKind,
    message: str,
    validation_errors: list[FieldError] | None = None,
) -> Response:
    return json_response(
        error_payload(kind, message, validation_errors=validation_errors),
        kind.status_code,
    )


def _strip_locations(messages: Any) -> Any:
    # webargs nests messages under the request location ("query", "json").
    if isinstance(messages, dict) and messages.keys() <= {
        "query",
        "json",
        "form",
        "view_args",
    }:
        merged: dict[str, Any] = {}
        for nested in messages.values():
            if isinstance(nested, dict):
                merged.update(nested)
        return merged
    return messages


@parser.error_handler
def handle_webargs_error(
    err: ValidationError,
    req: Any,
    schema: Any = None,
    *,
    error_status_code: Any = None,
    error_headers: Any = None,
    **kwargs: Any,
) -> NoReturn:
    raise ValidationAPIError(
        VALIDATION_ERROR_MESSAGE,
        field_errors=field_errors_from_messages(
            _strip_locations(err.messages), err.data
        ),
    ) from err


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(APIError)  # type: ignore[misc]
    def handle_api_error(e: APIError) -> Response:
        if e.kind is ErrorKind.INTERNAL:
            current_app.logger.error("api_internal_error message=%s", e.message)
            return error_response(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)
        current_app.logger.warning(
            "api_error kind=%s message=%s", e.kind.value, e.message
        )
        return error_response(e.kind, e.message, e.field_errors)

    @app.errorhandler(ValidationError)  # type: ignore[misc]
    def handle_schema_validation_error(e: ValidationError) -> Response:
        field_errors = field_errors_from_messages(e.messages, e.data)
        current_app.logger.warning(
            "schema_validation_error fields=%s",
            ",".join(error.field for error in field_errors),
        )
        return error_response(
            ErrorKind.VALIDATION, VALIDATION_ERROR_MESSAGE, field_errors
        )

    @app.errorhandler(IntegrityError)  # type: ignore[misc]
    def handle_integrity_error(e: IntegrityError) -> Response:
        db.session.rollback()
        current_app.logger.warning("integrity_error detail=%s", e.orig)
        return error_response(ErrorKind.CONFLICT, CONFLICT_ERROR_MESSAGE)

    @app.errorhandler(DataError)  # type: ignore[misc]
    def handle_data_error(e: DataError) -> Response:
        # Values the column cannot hold, e.g. numeric overflow.
        db.session.rollback()
        current_app.logger.warning("data_error detail=%s", e.orig)
        return error_response(ErrorKind.VALIDATION, VALIDATION_ERROR_MESSAGE)

    @app.errorhandler(HTTPException)  # type: ignore[misc]
    def handle_http_exception(e: HTTPException) -> Response:
        status_code = e.code or 500
        kind = ErrorKind.from_status(status_code)
        if kind is ErrorKind.INTERNAL:
            current_app.logger.error("http_internal_error status=%s", status_code)
            message = INTERNAL_ERROR_MESSAGE
        else:
            message = e.description or e.name
        response = json_response(error_payload(kind, message), status_code)
        valid_methods = getattr(e, "valid_methods", None)
        if valid_methods:
            response.headers["Allow"] = ", ".join(valid_methods)
        return response

    @app.errorhandler(Exception)  # type: ignore[misc]
    def handle_generic_exception(e: Exception) -> Response:
        current_app.logger.exception("unhandled_exception type=%s", type(e).__name__)
        return error_response(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)
