from __future__ import annotations

from marshmallow import fields, validate

from finance_control.schemas.base_schema import EntitySchema


class TransactionSubcategorySchema(EntitySchema):
    class Meta(EntitySchema.Meta):
        name = "TransactionSubcategory"

    text_fields = ("name", "description")

    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    description = fields.Str(allow_none=True, validate=validate.Length(max=500))
    category_id = fields.Int(
        required=True,
        strict=True,
        data_key="categoryId",
        validate=validate.Range(min=1),
    )
    category_name = fields.Str(dump_only=True, data_key="categoryName")
    is_active = fields.Bool(load_default=True, data_key="isActive")
