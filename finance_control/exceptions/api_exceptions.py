from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL = "INTERNAL"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]

    @classmethod
    def from_status(cls, status_code: int) -> ErrorKind:
        for kind, status in _STATUS_BY_KIND.items():
            if status == status_code:
                return kind
        if status_code >= 500:
            return cls.INTERNAL
        return cls.VALIDATION


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    rejected_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "rejectedValue": self.rejected_value,
        }


class APIError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        resolved = message or self.default_message
        super().__init__(resolved)
        self.message = resolved
        self.details = details or {}

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def field_errors(self) -> list[FieldError]:
        return []


class ValidationAPIError(APIError):
    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        field_errors: Iterable[FieldError] = (),
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self._field_errors = list(field_errors)

    @property
    def field_errors(self) -> list[FieldError]:
        return list(self._field_errors)

    @classmethod
    def for_field(
        cls, field: str, message: str, rejected_value: Any = None
    ) -> ValidationAPIError:
        return cls(
            message,
            field_errors=[FieldError(field, message, rejected_value)],
        )


class NotFoundAPIError(APIError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"

    @classmethod
    def for_entity(cls, entity_name: str, entity_id: Any) -> NotFoundAPIError:
        return cls(f"{entity_name} not found with id: {entity_id}")


class ConflictAPIError(APIError):
    kind = ErrorKind.CONFLICT
    default_message = "Resource conflict"


class UnauthorizedAPIError(APIError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Authentication required"


class ForbiddenAPIError(APIError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Access denied"


class InternalAPIError(APIError):
    kind = ErrorKind.INTERNAL


def field_errors_from_messages(
    messages: Mapping[str, Any] | list[Any] | str,
    data: Any = None,
    *,
    prefix: str = "",
) -> list[FieldError]:
    """Flatten a marshmallow ``messages`` structure into field errors.

    Nested schemas and list indexes become dotted paths, e.g.
    ``responsibilities.0.percentage``. The rejected value is looked up in
    ``data`` along the same path when possible.
    """

    if isinstance(messages, str):
        return [FieldError(prefix or "_schema", messages, data)]
    if isinstance(messages, list):
        errors: list[FieldError] = []
        for item in messages:
            if isinstance(item, (dict, list)):
                errors.extend(field_errors_from_messages(item, data, prefix=prefix))
            else:
                errors.append(FieldError(prefix or "_schema", str(item), data))
        return errors

    errors = []
    for key, nested in messages.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        errors.extend(
            field_errors_from_messages(nested, _lookup(data, key), prefix=path)
        )
    return errors


def _lookup(data: Any, key: Any) -> Any:
    if isinstance(data, Mapping):
        return data.get(key)
    if isinstance(data, list) and isinstance(key, int) and 0 <= key < len(data):
        return data[key]
    return None
