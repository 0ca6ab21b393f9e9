from datetime import date
from flask import request

from fittrack.extensions import db
from fittrack.models.weight import Weight
from fittrack.schemas.weight_schema import WeightSchema
from fittrack.utils.http import ok, json_body, arg_int, validate_schema, schema_error
from fittrack.utils.query import get_owned


def list_weights_handler():
    limit = arg_int("limit", 50, min_value=1, max_value=500)
    weights = (
        Weight.query.filter_by(user_id=request.user_id)
        .order_by(Weight.date.desc(), Weight.created_at.desc())
        .limit(limit)
        .all()
    )
    return ok([w.to_dict() for w in weights])


def create_weight_handler():
    data, errors = validate_schema(WeightSchema, json_body())
    if errors:
        return schema_error(errors)

    weight = Weight(
        user_id=request.user_id,
        date=data.get("date") or date.today(),
        weight=data["weight"],
        unit=data["unit"],
        notes=data.get("notes"),
    )
    db.session.add(weight)
    db.session.commit()
    return ok(weight.to_dict(), 201)


def get_weight_handler(weight_id: int):
    return ok(get_owned(Weight, weight_id, request.user_id, "Weight entry not found").to_dict())


def update_weight_handler(weight_id: int):
    weight = get_owned(Weight, weight_id, request.user_id, "Weight entry not found")
    data, errors = validate_schema(WeightSchema, json_body(), partial=True)
    if errors:
        return schema_error(errors)

    for field in ("weight", "unit", "notes"):
        if field in data:
            setattr(weight, field, data[field])
    if data.get("date"):
        weight.date = data["date"]
    db.session.commit()
    return ok(weight.to_dict())


def delete_weight_handler(weight_id: int):
    weight = get_owned(Weight, weight_id, request.user_id, "Weight entry not found")
    db.session.delete(weight)
    db.session.commit()
    return ok({"message": "Weight entry deleted successfully"})
