from marshmallow import fields, validate
from fittrack.schemas.base import BaseSchema, Day
from fittrack.utils.enums import WaterUnit, values


class CreateWaterEntrySchema(BaseSchema):
    amount = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    unit = fields.Str(required=True, validate=validate.OneOf(values(WaterUnit), error="Invalid unit"))
    date = Day(allow_none=True, load_default=None)


class WaterGoalSchema(BaseSchema):
    daily_goal = fields.Float(
        required=True, data_key="dailyGoal", validate=validate.Range(min=0, min_inclusive=False)
    )
    unit = fields.Str(required=True, validate=validate.OneOf(values(WaterUnit), error="Invalid unit"))
