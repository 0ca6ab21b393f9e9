from marshmallow import fields, validate
from fittrack.schemas.base import BaseSchema, Day
from fittrack.utils.enums import WaterUnit, WeightUnit, values


class PreferencesSchema(BaseSchema):
    default_weight_unit = fields.Str(
        required=True,
        data_key="defaultWeightUnit",
        validate=validate.OneOf(values(WeightUnit), error="Invalid weight unit"),
    )
    default_water_unit = fields.Str(
        required=True,
        data_key="defaultWaterUnit",
        validate=validate.OneOf(values(WaterUnit), error="Invalid water unit"),
    )


class UserProfileUpdateSchema(BaseSchema):
    name = fields.Str(validate=validate.Length(min=1))


class ChangePasswordSchema(BaseSchema):
    current_password = fields.Str(required=True, data_key="currentPassword")
    new_password = fields.Str(
        required=True,
        data_key="newPassword",
        validate=validate.Length(min=8, error="New password must be at least 8 characters"),
    )


def _all_sections():
    return {
        "include_weight": True,
        "include_workouts": True,
        "include_diet": True,
        "include_water": True,
    }


class ReportOptionsSchema(BaseSchema):
    include_weight = fields.Bool(load_default=False, data_key="includeWeight")
    include_workouts = fields.Bool(load_default=False, data_key="includeWorkouts")
    include_diet = fields.Bool(load_default=False, data_key="includeDiet")
    include_water = fields.Bool(load_default=False, data_key="includeWater")


class GenerateReportSchema(BaseSchema):
    date = Day(required=True)
    options = fields.Nested(ReportOptionsSchema, load_default=_all_sections)
