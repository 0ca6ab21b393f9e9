from flask import request

from fittrack.extensions import db
from fittrack.models.diet_entry import DietEntry
from fittrack.models.food import Food
from fittrack.schemas.diet_schema import CreateDietEntrySchema, UpdateDietEntrySchema
from fittrack.services import diet_service
from fittrack.utils.http import ok, error, json_body, parse_date, validate_schema, schema_error
from fittrack.utils.query import get_owned


def list_diet_entries_handler():
    day = parse_date(request.args.get("date"))
    if day is None:
        return error("VALIDATION_ERROR", "date query parameter is required (YYYY-MM-DD)", 400)
    return ok(diet_service.daily_summary(request.user_id, day))


def create_diet_entry_handler():
    data, errors = validate_schema(CreateDietEntrySchema, json_body())
    if errors:
        return schema_error(errors)

    food = get_owned(Food, data["food_id"], request.user_id, "Food not found")
    entry = DietEntry(
        user_id=request.user_id,
        food=food,
        date=data["date"],
        meal_category=data["meal_category"],
        servings=data.get("servings") or 1.0,
        notes=data.get("notes"),
    )
    db.session.add(entry)
    db.session.commit()
    return ok(entry.to_dict(), 201)


def get_diet_entry_handler(entry_id: int):
    entry = get_owned(DietEntry, entry_id, request.user_id, "Diet entry not found")
    return ok(entry.to_dict())


def update_diet_entry_handler(entry_id: int):
    entry = get_owned(DietEntry, entry_id, request.user_id, "Diet entry not found")
    data, errors = validate_schema(UpdateDietEntrySchema, json_body())
    if errors:
        return schema_error(errors)

    for field in ("meal_category", "servings", "notes"):
        if field in data:
            setattr(entry, field, data[field])
    db.session.commit()
    return ok(entry.to_dict())


def delete_diet_entry_handler(entry_id: int):
    entry = get_owned(DietEntry, entry_id, request.user_id, "Diet entry not found")
    db.session.delete(entry)
    db.session.commit()
    return ok({"message": "Diet entry deleted successfully"})
