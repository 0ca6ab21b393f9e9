from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.user_controller import (
    get_preferences_handler,
    update_preferences_handler,
    get_profile_handler,
    update_profile_handler,
    export_data_handler,
    delete_account_handler,
    change_password_handler,
    has_password_handler,
)

user_bp = Blueprint("user", __name__, url_prefix="/api/user")

@user_bp.get("/preferences")
@require_auth
def get_preferences():
    return get_preferences_handler()


@user_bp.put("/preferences")
@require_auth
def update_preferences():
    return update_preferences_handler()


@user_bp.get("/profile")
@require_auth
def get_profile():
    return get_profile_handler()


@user_bp.patch("/profile")
@require_auth
def update_profile():
    return update_profile_handler()


@user_bp.get("/export")
@require_auth
def export_data():
    return export_data_handler()


@user_bp.delete("/account")
@require_auth
def delete_account():
    return delete_account_handler()


@user_bp.post("/change-password")
@require_auth
def change_password():
    return change_password_handler()


@user_bp.get("/has-password")
@require_auth
def has_password():
    return has_password_handler()
