from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.workout_controller import (
    list_exercises_handler,
    create_exercise_handler,
    update_exercise_handler,
    delete_exercise_handler,
    list_templates_handler,
    create_template_handler,
    get_template_handler,
    update_template_handler,
    delete_template_handler,
    list_instances_handler,
    create_instance_handler,
    get_instance_handler,
    update_instance_handler,
    delete_instance_handler,
    update_exercise_set_handler,
)

workout_bp = Blueprint("workout", __name__, url_prefix="/api")

# Exercises
@workout_bp.get("/exercises")
@require_auth
def list_exercises():
    return list_exercises_handler()


@workout_bp.post("/exercises")
@require_auth
def create_exercise():
    return create_exercise_handler()


@workout_bp.put("/exercises/<int:id>")
@require_auth
def update_exercise(id):
    return update_exercise_handler(id)


@workout_bp.delete("/exercises/<int:id>")
@require_auth
def delete_exercise(id):
    return delete_exercise_handler(id)


# Templates
@workout_bp.get("/templates")
@require_auth
def list_templates():
    return list_templates_handler()


@workout_bp.post("/templates")
@require_auth
def create_template():
    return create_template_handler()


@workout_bp.get("/templates/<int:id>")
@require_auth
def get_template(id):
    return get_template_handler(id)


@workout_bp.put("/templates/<int:id>")
@require_auth
def update_template(id):
    return update_template_handler(id)


@workout_bp.delete("/templates/<int:id>")
@require_auth
def delete_template(id):
    return delete_template_handler(id)


# Workout instances
@workout_bp.get("/workout-instances")
@require_auth
def list_instances():
    return list_instances_handler()


@workout_bp.post("/workout-instances")
@require_auth
def create_instance():
    return create_instance_handler()


@workout_bp.get("/workout-instances/<int:id>")
@require_auth
def get_instance(id):
    return get_instance_handler(id)


@workout_bp.patch("/workout-instances/<int:id>")
@require_auth
def update_instance(id):
    return update_instance_handler(id)


@workout_bp.delete("/workout-instances/<int:id>")
@require_auth
def delete_instance(id):
    return delete_instance_handler(id)


@workout_bp.patch("/exercise-sets/<int:id>")
@require_auth
def update_exercise_set(id):
    return update_exercise_set_handler(id)
