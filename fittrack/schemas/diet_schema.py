from marshmallow import fields, validate
from fittrack.schemas.base import BaseSchema, Day
from fittrack.utils.enums import MealCategory, values


class CreateDietEntrySchema(BaseSchema):
    food_id = fields.Int(required=True, data_key="foodId")
    date = Day(required=True)
    meal_category = fields.Str(
        required=True,
        data_key="mealCategory",
        validate=validate.OneOf(values(MealCategory), error="Invalid meal category"),
    )
    servings = fields.Float(load_default=1.0, validate=validate.Range(min=0, min_inclusive=False))
    notes = fields.Str(allow_none=True)


class UpdateDietEntrySchema(BaseSchema):
    meal_category = fields.Str(
        data_key="mealCategory",
        validate=validate.OneOf(values(MealCategory), error="Invalid meal category"),
    )
    servings = fields.Float(validate=validate.Range(min=0, min_inclusive=False))
    notes = fields.Str(allow_none=True)
