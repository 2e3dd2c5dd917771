from __future__ import annotations

from decimal import Decimal

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from finance_control.models.enums import (
    TransactionSource,
    TransactionSubtype,
    TransactionType,
    enum_values,
)
from finance_control.schemas.base_schema import (
    MAX_AMOUNT,
    EntitySchema,
    max_decimal_places,
)
from finance_control.schemas.sanitization import (
    sanitize_string_fields,
    upper_case_fields,
)


class TransactionResponsibilitySchema(Schema):
    class Meta:
        name = "TransactionResponsibility"
        unknown = EXCLUDE

    responsible_id = fields.Int(
        required=True,
        strict=True,
        data_key="responsibleId",
        validate=validate.Range(min=1),
    )
    responsible_name = fields.Str(dump_only=True, data_key="responsibleName")
    percentage = fields.Decimal(
        as_string=True,
        required=True,
        validate=[
            validate.Range(min=Decimal("0.01"), max=Decimal("100")),
            max_decimal_places(2),
        ],
    )
    calculated_amount = fields.Decimal(
        as_string=True, dump_only=True, data_key="calculatedAmount"
    )
    notes = fields.Str(allow_none=True, validate=validate.Length(max=500))

    @pre_load
    def sanitize_input(self, data: object, **kwargs: object) -> object:
        return sanitize_string_fields(data, {"notes"})


class TransactionSchema(EntitySchema):
    class Meta(EntitySchema.Meta):
        name = "Transaction"

    text_fields = ("description",)

    user_id = fields.Int(dump_only=True, data_key="userId")
    type = fields.Str(
        required=True, validate=validate.OneOf(enum_values(TransactionType))
    )
    subtype = fields.Str(
        required=True, validate=validate.OneOf(enum_values(TransactionSubtype))
    )
    source = fields.Str(
        required=True, validate=validate.OneOf(enum_values(TransactionSource))
    )
    description = fields.Str(required=True, validate=validate.Length(min=1, max=500))
    amount = fields.Decimal(
        as_string=True,
        required=True,
        validate=[
            validate.Range(min=Decimal("0.01"), max=MAX_AMOUNT),
            max_decimal_places(2),
        ],
    )
    installments = fields.Int(allow_none=True, validate=validate.Range(min=1))
    date = fields.DateTime(allow_none=True)
    reconciled = fields.Bool(load_default=False)
    category_id = fields.Int(
        required=True,
        strict=True,
        data_key="categoryId",
        validate=validate.Range(min=1),
    )
    subcategory_id = fields.Int(
        allow_none=True,
        strict=True,
        data_key="subcategoryId",
        validate=validate.Range(min=1),
    )
    responsibilities = fields.List(
        fields.Nested(TransactionResponsibilitySchema),
        required=True,
        validate=validate.Length(min=1, error="At least one responsible is required."),
    )

    @pre_load
    def normalize_enums(self, data: object, **kwargs: object) -> object:
        return upper_case_fields(data, {"type", "subtype", "source"})


class TransactionReconciliationSchema(Schema):
    class Meta:
        name = "TransactionReconciliation"
        unknown = EXCLUDE

    reconciled = fields.Bool(load_default=True)
