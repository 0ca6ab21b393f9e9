"""
Compound Food Service

Recipes built from the user's own foods. Each compound food owns a generated
Food row carrying its per-serving macros so it can be logged like any other
food.
"""

import logging
from typing import Any, Dict, List

from fittrack.extensions import db
from fittrack.models.food import Food, CompoundFood, CompoundFoodIngredient
from fittrack.services.macro_service import calculate_compound_macros
from fittrack.utils.enums import FoodSource
from fittrack.utils.errors import NotFoundError
from fittrack.utils.query import get_owned

logger = logging.getLogger(__name__)

RECIPE_BRAND = "Recipe"
RECIPE_SERVING_UNIT = "serving(s)"


def _format_servings(servings: float) -> str:
    servings = float(servings)
    return str(int(servings)) if servings.is_integer() else str(servings)


def _load_ingredient_foods(user_id: int, ingredients: List[Dict[str, Any]]) -> Dict[int, Food]:
    """
    Resolve ingredient food ids for ``user_id``.

    Raises:
        NotFoundError: If any id is missing or owned by another user
    """
    wanted = {int(i["food_id"]) for i in ingredients}
    foods = Food.query.filter(Food.id.in_(wanted), Food.user_id == user_id).all()
    if len(foods) != len(wanted):
        raise NotFoundError("One or more ingredient foods not found")
    return {f.id: f for f in foods}


def _replace_ingredients(compound: CompoundFood, ingredients: List[Dict[str, Any]], foods: Dict[int, Food]):
    compound.ingredients.clear()
    db.session.flush()
    for item in ingredients:
        compound.ingredients.append(CompoundFoodIngredient(
            ingredient_food=foods[int(item["food_id"])],
            quantity=float(item.get("quantity") or 1),
        ))


def _apply_macros(compound: CompoundFood):
    macros = calculate_compound_macros(
        ((i.ingredient_food, i.quantity) for i in compound.ingredients),
        compound.servings,
    )
    food = compound.food
    food.calories = macros["calories"]
    food.protein = macros["protein"]
    food.carbs = macros["carbs"]
    food.fat = macros["fat"]
    food.serving_size = _format_servings(compound.servings)


def list_compound_foods(user_id: int) -> List[CompoundFood]:
    return (
        CompoundFood.query
        .filter_by(user_id=user_id)
        .order_by(CompoundFood.created_at.desc(), CompoundFood.id.desc())
        .all()
    )


def get_compound_food(user_id: int, compound_id: int) -> CompoundFood:
    return get_owned(CompoundFood, compound_id, user_id, "Compound food not found")


def create_compound_food(user_id: int, data: Dict[str, Any]) -> CompoundFood:
    """
    Create a recipe and its generated Food in one transaction.

    Args:
        user_id: Owner
        data: Loaded ``CreateCompoundFoodSchema`` payload

    Returns:
        The new CompoundFood with its linked Food populated
    """
    foods = _load_ingredient_foods(user_id, data["ingredients"])
    name = data["name"].strip()
    servings = float(data.get("servings") or 1)

    try:
        food = Food(
            user_id=user_id,
            name=name,
            brand=RECIPE_BRAND,
            calories=0,
            protein=0,
            carbs=0,
            fat=0,
            serving_size=_format_servings(servings),
            serving_unit=RECIPE_SERVING_UNIT,
            source=FoodSource.COMPOUND.value,
            is_compound=True,
        )
        compound = CompoundFood(
            user_id=user_id,
            name=name,
            description=(data.get("description") or "").strip() or None,
            servings=servings,
            food=food,
        )
        db.session.add(compound)
        _replace_ingredients(compound, data["ingredients"], foods)
        _apply_macros(compound)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Created compound food %s for user %s", compound.id, user_id)
    return compound


def update_compound_food(user_id: int, compound_id: int, data: Dict[str, Any]) -> CompoundFood:
    """
    Update a recipe, replacing its ingredient list wholesale when given.

    The linked Food is always recomputed from the stored ingredients, so a
    servings-only change rescales every per-serving value.
    """
    compound = get_compound_food(user_id, compound_id)
    foods = _load_ingredient_foods(user_id, data["ingredients"]) if "ingredients" in data else None

    try:
        if data.get("name"):
            compound.name = data["name"].strip()
        if "description" in data:
            compound.description = (data["description"] or "").strip() or None
        if "servings" in data:
            compound.servings = float(data["servings"])
        if foods is not None:
            _replace_ingredients(compound, data["ingredients"], foods)

        if compound.food is None:
            # generated food was lost; regenerate it rather than leave the recipe unloggable
            compound.food = Food(
                user_id=user_id,
                brand=RECIPE_BRAND,
                serving_unit=RECIPE_SERVING_UNIT,
                source=FoodSource.COMPOUND.value,
                is_compound=True,
            )
        compound.food.name = compound.name
        _apply_macros(compound)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return compound


def delete_compound_food(user_id: int, compound_id: int) -> None:
    """Delete a recipe, its ingredient rows and its generated Food together."""
    compound = get_compound_food(user_id, compound_id)
    try:
        food = compound.food
        db.session.delete(compound)
        if food is not None:
            db.session.delete(food)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
