from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.report_controller import generate_report_handler
from fittrack.controllers.dashboard_controller import dashboard_handler

report_bp = Blueprint("report", __name__, url_prefix="/api")

@report_bp.post("/reports/generate")
@require_auth
def generate_report():
    return generate_report_handler()


@report_bp.get("/dashboard")
@require_auth
def dashboard():
    return dashboard_handler()
