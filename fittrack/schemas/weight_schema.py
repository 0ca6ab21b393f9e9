from marshmallow import fields, validate
from fittrack.schemas.base import BaseSchema, Day
from fittrack.utils.enums import WeightUnit, values


class WeightSchema(BaseSchema):
    weight = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    unit = fields.Str(required=True, validate=validate.OneOf(values(WeightUnit), error="Invalid weight unit"))
    date = Day(allow_none=True, load_default=None)
    notes = fields.Str(allow_none=True)
