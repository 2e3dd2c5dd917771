from __future__ import annotations

from marshmallow import fields, validate

from finance_control.schemas.base_schema import EntitySchema


class TransactionCategorySchema(EntitySchema):
    class Meta(EntitySchema.Meta):
        name = "TransactionCategory"

    text_fields = ("name",)

    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
