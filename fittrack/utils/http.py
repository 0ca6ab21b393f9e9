from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple
from flask import request, jsonify
from marshmallow import ValidationError as SchemaValidationError


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, data: Dict[str, Any], partial: bool = False) -> Tuple[Dict[str, Any], Optional[Dict]]:
    """Load ``data`` through a marshmallow schema, returning ``(data, errors)``."""
    try:
        return schema_cls().load(data, partial=partial), None
    except SchemaValidationError as e:
        return {}, e.messages


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def parse_date(value: Any) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string as a calendar date, no timezone shift."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.strptime(value[:10], "%Y-%m-%d").date()
        except ValueError:
            return None
    return None


def _first_message(messages: Any) -> str:
    if isinstance(messages, dict):
        for value in messages.values():
            return _first_message(value)
    if isinstance(messages, (list, tuple)) and messages:
        return _first_message(messages[0])
    return str(messages) if messages else "Invalid request"


def schema_error(errors: Dict):
    """400 response for marshmallow errors, leading with the first message."""
    return error("VALIDATION_ERROR", _first_message(errors), 400, details=errors)
