"""Response envelope schemas used only to document the API in OpenAPI."""

from marshmallow import Schema, fields

from finance_control.exceptions import ErrorKind


class ApiResponseSchema(Schema):
    class Meta:
        name = "ApiResponse"

    success = fields.Bool(required=True, metadata={"example": True})
    data = fields.Raw(allow_none=True)
    message = fields.Str(
        required=True, metadata={"example": "Operation completed successfully"}
    )
    timestamp = fields.Str(
        required=True, metadata={"example": "2026-01-31T12:00:00.000000Z"}
    )
    path = fields.Str(allow_none=True)


class FieldErrorSchema(Schema):
    class Meta:
        name = "FieldError"

    field = fields.Str(required=True, metadata={"example": "name"})
    message = fields.Str(
        required=True, metadata={"example": "Missing data for required field."}
    )
    rejectedValue = fields.Raw(allow_none=True)


class ErrorResponseSchema(Schema):
    class Meta:
        name = "ErrorResponse"

    error = fields.Str(
        required=True,
        metadata={
            "enum": [kind.value for kind in ErrorKind],
            "example": ErrorKind.VALIDATION.value,
        },
    )
    message = fields.Str(required=True, metadata={"example": "Validation failed"})
    path = fields.Str(allow_none=True, metadata={"example": "/transaction-categories"})
    timestamp = fields.Str(required=True)
    validationErrors = fields.List(fields.Nested(FieldErrorSchema), allow_none=True)


class SortOrderSchema(Schema):
    class Meta:
        name = "SortOrder"

    property = fields.Str(required=True)
    direction = fields.Str(required=True, metadata={"enum": ["asc", "desc"]})


class PageableSchema(Schema):
    class Meta:
        name = "Pageable"

    pageNumber = fields.Int(required=True)
    pageSize = fields.Int(required=True)
    sort = fields.List(fields.Nested(SortOrderSchema))


class PageSchema(Schema):
    class Meta:
        name = "Page"

    content = fields.List(fields.Raw())
    totalElements = fields.Int(required=True)
    totalPages = fields.Int(required=True)
    first = fields.Bool(required=True)
    last = fields.Bool(required=True)
    numberOfElements = fields.Int(required=True)
    pageable = fields.Nested(PageableSchema)
