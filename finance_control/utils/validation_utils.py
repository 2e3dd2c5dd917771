"""Primitive validation helpers shared by the domain validators.

Predicates (``is_valid_*``) never raise. ``validate_*`` functions raise
:class:`FieldValidationError` naming the offending field, and
:class:`FieldErrorCollector` gathers those into a list of
:class:`~finance_control.exceptions.FieldError` so that one request can
report every violated constraint at once.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Collection, Iterable

from finance_control.exceptions import FieldError

HUNDRED = Decimal("100")


class FieldValidationError(ValueError):
    def __init__(self, field: str, message: str, rejected_value: Any = None) -> None:
        super().__init__(message)
        self.field_error = FieldError(field, message, rejected_value)


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def is_valid_percentage(value: Any) -> bool:
    percentage = _to_decimal(value)
    return percentage is not None and Decimal("0") <= percentage <= HUNDRED


def is_valid_amount(value: Any) -> bool:
    amount = _to_decimal(value)
    return amount is not None and amount > 0


def is_valid_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_valid_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_valid_collection(value: Any) -> bool:
    return value is not None and len(value) > 0


def is_valid_date_range(
    start: date | datetime | None, end: date | datetime | None
) -> bool:
    return start is not None and end is not None and start <= end


def validate_required(value: Any, field: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise FieldValidationError(field, f"{field} is required", value)


def validate_string(value: Any, field: str) -> None:
    if not is_valid_string(value):
        raise FieldValidationError(field, f"{field} cannot be null or empty", value)


def validate_length(
    value: str | None, field: str, *, min_length: int = 0, max_length: int
) -> None:
    if value is not None and not min_length <= len(value) <= max_length:
        raise FieldValidationError(
            field,
            f"{field} must be between {min_length} and {max_length} characters",
            value,
        )


def validate_max_length(value: str | None, field: str, max_length: int) -> None:
    if value is not None and len(value) > max_length:
        raise FieldValidationError(
            field, f"{field} must not exceed {max_length} characters", value
        )


def validate_range(
    value: Any,
    field: str,
    *,
    minimum: Decimal | int | None = None,
    maximum: Decimal | int | None = None,
) -> None:
    number = _to_decimal(value)
    if number is None:
        raise FieldValidationError(field, f"{field} must be a number", value)
    if minimum is not None and number < minimum:
        raise FieldValidationError(
            field, f"{field} must be greater than or equal to {minimum}", value
        )
    if maximum is not None and number > maximum:
        raise FieldValidationError(
            field, f"{field} must be less than or equal to {maximum}", value
        )


def validate_percentage(value: Any, field: str = "percentage") -> None:
    if not is_valid_percentage(value):
        raise FieldValidationError(
            field, "Percentage must be between 0 and 100", value
        )


def validate_amount(value: Any, field: str = "amount") -> None:
    if not is_valid_amount(value):
        raise FieldValidationError(field, "Amount must be greater than zero", value)


def validate_id(value: Any, field: str = "id") -> None:
    if not is_valid_id(value):
        raise FieldValidationError(field, "ID must be a positive number", value)


def validate_collection(value: Collection[Any] | None, field: str) -> None:
    if not is_valid_collection(value):
        raise FieldValidationError(field, f"{field} cannot be null or empty", value)


def validate_date_range(
    start: date | datetime | None,
    end: date | datetime | None,
    field: str = "startDate",
) -> None:
    if not is_valid_date_range(start, end):
        raise FieldValidationError(
            field, "Start date must be before or equal to end date", start
        )


def has_at_most_decimal_places(value: Any, places: int = 2) -> bool:
    number = _to_decimal(value)
    if number is None or not number.is_finite():
        return False
    exponent = number.normalize().as_tuple().exponent
    return not isinstance(exponent, int) or -exponent <= places


def validate_decimal_places(value: Any, field: str, places: int = 2) -> None:
    if _to_decimal(value) is None:
        raise FieldValidationError(field, f"{field} must be a number", value)
    if not has_at_most_decimal_places(value, places):
        raise FieldValidationError(
            field, f"{field} must have at most {places} decimal places", value
        )


def validate_percentages_sum(
    percentages: Iterable[Any],
    field: str,
    expected: Decimal = HUNDRED,
) -> None:
    values = [_to_decimal(item) for item in percentages]
    total = sum((item for item in values if item is not None), Decimal("0"))
    if total != expected:
        raise FieldValidationError(
            field,
            f"Total percentage must equal {expected}, got {total}",
            str(total),
        )


class FieldErrorCollector:
    def __init__(self) -> None:
        self.errors: list[FieldError] = []

    def check(self, validator: Callable[..., None], *args: Any, **kwargs: Any) -> bool:
        try:
            validator(*args, **kwargs)
        except FieldValidationError as exc:
            self.errors.append(exc.field_error)
            return False
        return True

    def add(self, field: str, message: str, rejected_value: Any = None) -> None:
        self.errors.append(FieldError(field, message, rejected_value))

    def __bool__(self) -> bool:
        return bool(self.errors)
