from marshmallow import fields, validate, pre_load
from fittrack.schemas.base import BaseSchema, Day
from fittrack.utils.enums import WeightUnit, WorkoutStatus, values


class ExerciseSchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    muscle_group = fields.Str(required=True, data_key="muscleGroup", validate=validate.Length(min=1))
    description = fields.Str(allow_none=True)

    @pre_load
    def join_muscle_groups(self, data, **kwargs):
        # accept ["chest", "triceps"] as well as "chest,triceps"
        groups = data.get("muscleGroup") if isinstance(data, dict) else None
        if isinstance(groups, (list, tuple)):
            data = dict(data)
            data["muscleGroup"] = ",".join(str(g).strip() for g in groups if str(g).strip())
        return data


class TemplateExerciseSchema(BaseSchema):
    exercise_id = fields.Int(required=True, data_key="exerciseId")
    sets = fields.Int(load_default=3, validate=validate.Range(min=1, max=100))
    reps = fields.Int(load_default=10, validate=validate.Range(min=1, max=1000))
    notes = fields.Str(allow_none=True)


class TemplateSchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    description = fields.Str(allow_none=True)
    exercises = fields.List(
        fields.Nested(TemplateExerciseSchema),
        required=True,
        validate=validate.Length(min=1, error="At least one exercise is required"),
    )


class CreateWorkoutInstanceSchema(BaseSchema):
    template_id = fields.Int(required=True, data_key="templateId")
    scheduled_date = Day(required=True, data_key="scheduledDate")
    notes = fields.Str(allow_none=True)


class UpdateWorkoutInstanceSchema(BaseSchema):
    status = fields.Str(validate=validate.OneOf(values(WorkoutStatus), error="Invalid status"))
    notes = fields.Str(allow_none=True)
    completed_date = fields.DateTime(allow_none=True, data_key="completedDate")


class UpdateExerciseSetSchema(BaseSchema):
    actual_reps = fields.Int(allow_none=True, data_key="actualReps", validate=validate.Range(min=0))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0))
    unit = fields.Str(validate=validate.OneOf(values(WeightUnit), error="Invalid weight unit"))
    completed = fields.Bool()
