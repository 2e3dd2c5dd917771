from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load

from finance_control.schemas.sanitization import sanitize_string_fields
from finance_control.utils.validation_utils import has_at_most_decimal_places

# Largest value a Numeric(12, 2) column holds.
MAX_AMOUNT = Decimal("9999999999.99")


def max_decimal_places(places: int = 2) -> Callable[[Any], None]:
    def _validate(value: Any) -> None:
        if not has_at_most_decimal_places(value, places):
            raise ValidationError(f"Must have at most {places} decimal places.")

    return _validate


class EntitySchema(Schema):
    """Wire representation shared by every entity.

    Server-assigned fields are dump-only, so values sent by clients for
    ``id``, ``createdAt`` or ``updatedAt`` are discarded on load.
    """

    text_fields: tuple[str, ...] = ()

    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    created_at = fields.DateTime(dump_only=True, data_key="createdAt")
    updated_at = fields.DateTime(dump_only=True, data_key="updatedAt")

    @pre_load
    def sanitize_input(self, data: object, **kwargs: object) -> object:
        return sanitize_string_fields(data, self.text_fields)
