from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.food_controller import (
    list_foods_handler,
    create_food_handler,
    get_food_handler,
    update_food_handler,
    delete_food_handler,
    list_compound_foods_handler,
    create_compound_food_handler,
    get_compound_food_handler,
    update_compound_food_handler,
    delete_compound_food_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api")

@food_bp.get("/foods")
@require_auth
def list_foods():
    return list_foods_handler()


@food_bp.post("/foods")
@require_auth
def create_food():
    return create_food_handler()


@food_bp.get("/foods/<int:id>")
@require_auth
def get_food(id):
    return get_food_handler(id)


@food_bp.patch("/foods/<int:id>")
@require_auth
def update_food(id):
    return update_food_handler(id)


@food_bp.delete("/foods/<int:id>")
@require_auth
def delete_food(id):
    return delete_food_handler(id)


@food_bp.get("/compound-foods")
@require_auth
def list_compound_foods():
    return list_compound_foods_handler()


@food_bp.post("/compound-foods")
@require_auth
def create_compound_food():
    return create_compound_food_handler()


@food_bp.get("/compound-foods/<int:id>")
@require_auth
def get_compound_food(id):
    return get_compound_food_handler(id)


@food_bp.patch("/compound-foods/<int:id>")
@require_auth
def update_compound_food(id):
    return update_compound_food_handler(id)


@food_bp.delete("/compound-foods/<int:id>")
@require_auth
def delete_compound_food(id):
    return delete_compound_food_handler(id)
