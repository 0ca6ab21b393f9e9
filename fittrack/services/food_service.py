"""
Food Service

CRUD for the user's food library.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import or_

from fittrack.extensions import db
from fittrack.models.food import Food, CompoundFoodIngredient
from fittrack.utils.errors import ConflictError
from fittrack.utils.query import get_owned

EDITABLE_FIELDS = [
    "name", "brand", "barcode", "calories", "protein", "carbs", "fat",
    "serving_size", "serving_unit", "source",
]


def _check_barcode(user_id: int, barcode: Optional[str], exclude_id: Optional[int] = None) -> None:
    if not barcode:
        return
    query = Food.query.filter_by(user_id=user_id, barcode=barcode)
    if exclude_id is not None:
        query = query.filter(Food.id != exclude_id)
    if query.first():
        raise ConflictError("A food with this barcode already exists")


def list_foods(user_id: int, search: str = "", source: Optional[str] = None) -> List[Food]:
    query = Food.query.filter_by(user_id=user_id)
    search = (search or "").strip()
    if search:
        like = f"%{search}%"
        query = query.filter(or_(Food.name.ilike(like), Food.brand.ilike(like)))
    if source:
        query = query.filter(Food.source == source)
    return query.order_by(Food.name.asc(), Food.id.asc()).all()


def get_food(user_id: int, food_id: int) -> Food:
    return get_owned(Food, food_id, user_id, "Food not found")


def create_food(user_id: int, data: Dict[str, Any]) -> Food:
    barcode = (data.get("barcode") or "").strip() or None
    _check_barcode(user_id, barcode)

    food = Food(user_id=user_id)
    for field in EDITABLE_FIELDS:
        if field in data:
            setattr(food, field, data[field])
    food.name = data["name"].strip()
    food.barcode = barcode
    db.session.add(food)
    db.session.commit()
    return food


def update_food(user_id: int, food_id: int, data: Dict[str, Any]) -> Food:
    food = get_food(user_id, food_id)
    if food.is_compound:
        raise ConflictError("Recipe foods are updated through their compound food", code="COMPOUND_FOOD")

    if "barcode" in data:
        data["barcode"] = (data["barcode"] or "").strip() or None
        _check_barcode(user_id, data["barcode"], exclude_id=food.id)

    for field in EDITABLE_FIELDS:
        if field in data:
            setattr(food, field, data[field])
    db.session.commit()
    return food


def delete_food(user_id: int, food_id: int) -> None:
    """
    Delete a food and its diet entries.

    Foods still used as a recipe ingredient, and foods generated for a
    recipe, cannot be deleted directly.
    """
    food = get_food(user_id, food_id)
    if food.is_compound or food.compound_food is not None:
        raise ConflictError("Delete the compound food instead", code="COMPOUND_FOOD")
    if CompoundFoodIngredient.query.filter_by(ingredient_food_id=food.id).first():
        raise ConflictError("Food is used as an ingredient in a compound food", code="FOOD_IN_USE")

    db.session.delete(food)
    db.session.commit()
