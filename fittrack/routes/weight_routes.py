from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.weight_controller import (
    list_weights_handler,
    create_weight_handler,
    get_weight_handler,
    update_weight_handler,
    delete_weight_handler,
)

weight_bp = Blueprint("weight", __name__, url_prefix="/api/weights")

@weight_bp.get("")
@require_auth
def list_weights():
    return list_weights_handler()


@weight_bp.post("")
@require_auth
def create_weight():
    return create_weight_handler()


@weight_bp.get("/<int:id>")
@require_auth
def get_weight(id):
    return get_weight_handler(id)


@weight_bp.patch("/<int:id>")
@require_auth
def update_weight(id):
    return update_weight_handler(id)


@weight_bp.delete("/<int:id>")
@require_auth
def delete_weight(id):
    return delete_weight_handler(id)
