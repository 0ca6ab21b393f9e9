from flask import request

from fittrack.services.dashboard_service import get_dashboard
from fittrack.utils.http import ok, parse_date


def dashboard_handler():
    # optional override lets the client ask for its local "today"
    today = parse_date(request.args.get("date"))
    return ok(get_dashboard(request.user_id, today))
