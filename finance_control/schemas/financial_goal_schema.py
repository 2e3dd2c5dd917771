from __future__ import annotations

from decimal import Decimal

from marshmallow import Schema, fields, pre_load, validate

from finance_control.models.enums import GoalType, enum_values
from finance_control.schemas.base_schema import (
    MAX_AMOUNT,
    EntitySchema,
    max_decimal_places,
)
from finance_control.schemas.sanitization import upper_case_fields


class FinancialGoalSchema(EntitySchema):
    class Meta(EntitySchema.Meta):
        name = "FinancialGoal"

    text_fields = ("name", "description")

    user_id = fields.Int(dump_only=True, data_key="userId")
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    description = fields.Str(allow_none=True, validate=validate.Length(max=500))
    goal_type = fields.Str(
        required=True,
        data_key="goalType",
        validate=validate.OneOf(enum_values(GoalType)),
    )
    target_amount = fields.Decimal(
        as_string=True,
        required=True,
        data_key="targetAmount",
        validate=[
            validate.Range(min=Decimal("0.01"), max=MAX_AMOUNT),
            max_decimal_places(2),
        ],
    )
    current_amount = fields.Decimal(
        as_string=True,
        load_default=Decimal("0.00"),
        data_key="currentAmount",
        validate=[
            validate.Range(min=Decimal("0"), max=MAX_AMOUNT),
            max_decimal_places(2),
        ],
    )
    deadline = fields.Date(allow_none=True)
    is_active = fields.Bool(load_default=True, data_key="isActive")
    auto_calculate = fields.Bool(load_default=False, data_key="autoCalculate")
    progress_percentage = fields.Decimal(
        as_string=True, dump_only=True, data_key="progressPercentage"
    )
    remaining_amount = fields.Decimal(
        as_string=True, dump_only=True, data_key="remainingAmount"
    )
    is_completed = fields.Bool(dump_only=True, data_key="isCompleted")
    completed_at = fields.DateTime(dump_only=True, data_key="completedAt")

    @pre_load
    def normalize_goal_type(self, data: object, **kwargs: object) -> object:
        return upper_case_fields(data, {"goalType"})


class GoalProgressSchema(Schema):
    class Meta:
        name = "GoalProgress"

    amount = fields.Decimal(
        as_string=True,
        required=True,
        validate=[
            validate.Range(min=Decimal("0.01"), max=MAX_AMOUNT),
            max_decimal_places(2),
        ],
    )
