from datetime import date, datetime
from flask import request

from fittrack.extensions import db
from fittrack.models.water import WaterEntry, UserWaterGoal
from fittrack.schemas.water_schema import CreateWaterEntrySchema, WaterGoalSchema
from fittrack.services import water_service
from fittrack.utils.http import ok, error, json_body, parse_date, validate_schema, schema_error
from fittrack.utils.query import get_owned


def list_water_entries_handler():
    day = parse_date(request.args.get("date"))
    if day is None:
        return error("VALIDATION_ERROR", "Date parameter is required (YYYY-MM-DD)", 400)
    return ok(water_service.daily_summary(request.user_id, day))


def create_water_entry_handler():
    data, errors = validate_schema(CreateWaterEntrySchema, json_body())
    if errors:
        return schema_error(errors)

    entry = WaterEntry(
        user_id=request.user_id,
        date=data.get("date") or date.today(),
        amount=data["amount"],
        unit=data["unit"],
        timestamp=datetime.utcnow(),
    )
    db.session.add(entry)
    db.session.commit()
    return ok(entry.to_dict(), 201)


def delete_water_entry_handler(entry_id: int):
    entry = get_owned(WaterEntry, entry_id, request.user_id, "Water entry not found")
    db.session.delete(entry)
    db.session.commit()
    return ok({"message": "Water entry deleted successfully"})


def get_water_goal_handler():
    return ok(water_service.goal_or_default(request.user_id))


def set_water_goal_handler():
    data, errors = validate_schema(WaterGoalSchema, json_body())
    if errors:
        return schema_error(errors)

    goal = water_service.get_goal(request.user_id)
    if goal is None:
        goal = UserWaterGoal(user_id=request.user_id)
        db.session.add(goal)
    goal.daily_goal = data["daily_goal"]
    goal.unit = data["unit"]
    db.session.commit()
    return ok(goal.to_dict())
