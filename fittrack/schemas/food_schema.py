from marshmallow import fields, validate
from fittrack.schemas.base import BaseSchema
from fittrack.utils.enums import FoodSource, values


class FoodSchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    brand = fields.Str(allow_none=True)
    barcode = fields.Str(allow_none=True)
    calories = fields.Int(required=True, validate=validate.Range(min=0))
    protein = fields.Float(allow_none=True, validate=validate.Range(min=0))
    carbs = fields.Float(allow_none=True, validate=validate.Range(min=0))
    fat = fields.Float(allow_none=True, validate=validate.Range(min=0))
    serving_size = fields.Str(allow_none=True, data_key="servingSize")
    serving_unit = fields.Str(allow_none=True, data_key="servingUnit")
    # compound foods are only created through the recipe endpoints
    source = fields.Str(
        load_default=FoodSource.MANUAL.value,
        validate=validate.OneOf([FoodSource.MANUAL.value, FoodSource.BARCODE.value]),
    )


class CompoundIngredientSchema(BaseSchema):
    food_id = fields.Int(required=True, data_key="foodId")
    quantity = fields.Float(load_default=1.0, validate=validate.Range(min=0, min_inclusive=False))


class CreateCompoundFoodSchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    description = fields.Str(allow_none=True)
    servings = fields.Float(load_default=1.0, validate=validate.Range(min=0.1))
    ingredients = fields.List(
        fields.Nested(CompoundIngredientSchema),
        required=True,
        validate=validate.Length(min=1, error="At least one ingredient is required"),
    )


class UpdateCompoundFoodSchema(BaseSchema):
    name = fields.Str(validate=validate.Length(min=1))
    description = fields.Str(allow_none=True)
    servings = fields.Float(validate=validate.Range(min=0.1))
    ingredients = fields.List(
        fields.Nested(CompoundIngredientSchema),
        validate=validate.Length(min=1, error="At least one ingredient is required"),
    )


class ListFoodQuerySchema(BaseSchema):
    search = fields.Str(load_default="")
    source = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf(values(FoodSource) + [""]))
