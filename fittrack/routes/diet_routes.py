from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.diet_controller import (
    list_diet_entries_handler,
    create_diet_entry_handler,
    get_diet_entry_handler,
    update_diet_entry_handler,
    delete_diet_entry_handler,
)

diet_bp = Blueprint("diet", __name__, url_prefix="/api/diet-entries")

@diet_bp.get("")
@require_auth
def list_entries():
    return list_diet_entries_handler()


@diet_bp.post("")
@require_auth
def create_entry():
    return create_diet_entry_handler()


@diet_bp.get("/<int:id>")
@require_auth
def get_entry(id):
    return get_diet_entry_handler(id)


@diet_bp.patch("/<int:id>")
@require_auth
def update_entry(id):
    return update_diet_entry_handler(id)


@diet_bp.delete("/<int:id>")
@require_auth
def delete_entry(id):
    return delete_diet_entry_handler(id)
