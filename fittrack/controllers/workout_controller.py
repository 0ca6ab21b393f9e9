"""
Workout Controller Module

Handles exercises, workout templates, scheduled workout instances and the
per-set logging endpoint used while a workout is being executed.
"""

from flask import request

from fittrack.models.template import WorkoutTemplate
from fittrack.schemas.workout_schema import (
    ExerciseSchema,
    TemplateSchema,
    CreateWorkoutInstanceSchema,
    UpdateWorkoutInstanceSchema,
    UpdateExerciseSetSchema,
)
from fittrack.services import workout_service
from fittrack.utils.enums import WorkoutStatus, values
from fittrack.utils.http import ok, error, json_body, parse_date, validate_schema, schema_error
from fittrack.utils.query import get_owned


# ============================================================================
# Exercises
# ============================================================================

def list_exercises_handler():
    exercises = workout_service.list_exercises(
        request.user_id,
        search=request.args.get("search", ""),
        muscle_group=request.args.get("muscleGroup"),
    )
    return ok([e.to_dict() for e in exercises])


def create_exercise_handler():
    data, errors = validate_schema(ExerciseSchema, json_body())
    if errors:
        return schema_error(errors)
    return ok(workout_service.create_exercise(request.user_id, data).to_dict(), 201)


def update_exercise_handler(exercise_id: int):
    data, errors = validate_schema(ExerciseSchema, json_body(), partial=True)
    if errors:
        return schema_error(errors)
    return ok(workout_service.update_exercise(request.user_id, exercise_id, data).to_dict())


def delete_exercise_handler(exercise_id: int):
    workout_service.delete_exercise(request.user_id, exercise_id)
    return ok({"message": "Exercise deleted successfully"})


# ============================================================================
# Templates
# ============================================================================

def list_templates_handler():
    return ok([t.to_dict() for t in workout_service.list_templates(request.user_id)])


def create_template_handler():
    data, errors = validate_schema(TemplateSchema, json_body())
    if errors:
        return schema_error(errors)
    return ok(workout_service.create_template(request.user_id, data).to_dict(), 201)


def get_template_handler(template_id: int):
    template = get_owned(WorkoutTemplate, template_id, request.user_id, "Template not found")
    return ok(template.to_dict())


def update_template_handler(template_id: int):
    data, errors = validate_schema(TemplateSchema, json_body(), partial=True)
    if errors:
        return schema_error(errors)
    return ok(workout_service.update_template(request.user_id, template_id, data).to_dict())


def delete_template_handler(template_id: int):
    workout_service.delete_template(request.user_id, template_id)
    return ok({"message": "Template deleted successfully"})


# ============================================================================
# Workout instances
# ============================================================================

def list_instances_handler():
    status = request.args.get("status")
    if status and status not in values(WorkoutStatus):
        return error("VALIDATION_ERROR", "Invalid status", 400)
    day = None
    if request.args.get("date"):
        day = parse_date(request.args.get("date"))
        if day is None:
            return error("VALIDATION_ERROR", "Invalid date (expected YYYY-MM-DD)", 400)
    instances = workout_service.list_instances(request.user_id, day=day, status=status)
    return ok([i.to_dict() for i in instances])


def create_instance_handler():
    data, errors = validate_schema(CreateWorkoutInstanceSchema, json_body())
    if errors:
        return schema_error(errors)
    instance = workout_service.schedule_workout(
        request.user_id, data["template_id"], data["scheduled_date"], data.get("notes")
    )
    return ok(instance.to_dict(), 201)


def get_instance_handler(instance_id: int):
    instance = workout_service.get_instance(request.user_id, instance_id)
    return ok({**instance.to_dict(), **workout_service.workout_progress(instance)})


def update_instance_handler(instance_id: int):
    data, errors = validate_schema(UpdateWorkoutInstanceSchema, json_body())
    if errors:
        return schema_error(errors)
    instance = workout_service.update_instance(request.user_id, instance_id, data)
    return ok(instance.to_dict())


def delete_instance_handler(instance_id: int):
    workout_service.delete_instance(request.user_id, instance_id)
    return ok({"message": "Workout deleted successfully"})


# ============================================================================
# Exercise sets
# ============================================================================

def update_exercise_set_handler(set_id: int):
    data, errors = validate_schema(UpdateExerciseSetSchema, json_body())
    if errors:
        return schema_error(errors)
    exercise_set = workout_service.update_set(request.user_id, set_id, data)
    return ok(exercise_set.to_dict())
