from flask import request, jsonify

from fittrack.schemas.user_schema import PreferencesSchema, UserProfileUpdateSchema, ChangePasswordSchema
from fittrack.services import user_service
from fittrack.utils.http import ok, json_body, validate_schema, schema_error


def get_preferences_handler():
    return ok(user_service.get_preferences(request.user_id))


def update_preferences_handler():
    data, errors = validate_schema(PreferencesSchema, json_body())
    if errors:
        return schema_error(errors)
    return ok(user_service.save_preferences(request.user_id, data).to_dict())


def get_profile_handler():
    return ok(user_service.get_user(request.user_id).to_dict())


def update_profile_handler():
    data, errors = validate_schema(UserProfileUpdateSchema, json_body())
    if errors:
        return schema_error(errors)
    return ok(user_service.update_profile(request.user_id, data).to_dict())


def export_data_handler():
    resp = jsonify(user_service.export_data(request.user_id))
    resp.headers["Content-Disposition"] = f'attachment; filename="{user_service.export_filename()}"'
    return resp, 200


def delete_account_handler():
    user_service.delete_account(request.user_id)
    return ok({"message": "Account deleted successfully"})


def change_password_handler():
    data, errors = validate_schema(ChangePasswordSchema, json_body())
    if errors:
        return schema_error(errors)
    user_service.change_password(request.user_id, data["current_password"], data["new_password"])
    return ok({"message": "Password changed successfully"})


def has_password_handler():
    return ok({"hasPassword": user_service.has_password(request.user_id)})
