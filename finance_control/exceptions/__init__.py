from .api_exceptions import (
    APIError,
    ConflictAPIError,
    ErrorKind,
    FieldError,
    ForbiddenAPIError,
    InternalAPIError,
    NotFoundAPIError,
    UnauthorizedAPIError,
    ValidationAPIError,
    field_errors_from_messages,
)

__all__ = [
    "APIError",
    "ErrorKind",
    "FieldError",
    "ValidationAPIError",
    "NotFoundAPIError",
    "ConflictAPIError",
    "UnauthorizedAPIError",
    "ForbiddenAPIError",
    "InternalAPIError",
    "field_errors_from_messages",
]
