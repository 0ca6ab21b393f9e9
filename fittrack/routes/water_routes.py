from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.water_controller import (
    list_water_entries_handler,
    create_water_entry_handler,
    delete_water_entry_handler,
    get_water_goal_handler,
    set_water_goal_handler,
)

water_bp = Blueprint("water", __name__, url_prefix="/api")

@water_bp.get("/water-entries")
@require_auth
def list_entries():
    return list_water_entries_handler()


@water_bp.post("/water-entries")
@require_auth
def create_entry():
    return create_water_entry_handler()


@water_bp.delete("/water-entries/<int:id>")
@require_auth
def delete_entry(id):
    return delete_water_entry_handler(id)


@water_bp.get("/water-goal")
@require_auth
def get_goal():
    return get_water_goal_handler()


@water_bp.post("/water-goal")
@require_auth
def set_goal():
    return set_water_goal_handler()
