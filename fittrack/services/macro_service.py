"""
Macro Service

Derives calories and macronutrients for compound foods (recipes) from their
ingredient list.
"""

from typing import Dict, Iterable, Tuple

from fittrack.models.food import Food
from fittrack.utils.numbers import round_half_up

MACRO_FIELDS = ("protein", "carbs", "fat")


def calculate_totals(ingredients: Iterable[Tuple[Food, float]]) -> Dict[str, float]:
    """
    Sum macros over ``(food, quantity)`` pairs.

    ``quantity`` is a multiplier of the ingredient's serving, not a count.
    Missing protein/carbs/fat count as zero.

    Returns:
        Dictionary with calories (int) and protein/carbs/fat rounded to 2 decimals
    """
    total = {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}

    for food, quantity in ingredients:
        quantity = float(quantity)
        total["calories"] += (food.calories or 0) * quantity
        for field in MACRO_FIELDS:
            total[field] += float(getattr(food, field) or 0) * quantity

    return {
        "calories": round_half_up(total["calories"]),
        "protein": round_half_up(total["protein"], 2),
        "carbs": round_half_up(total["carbs"], 2),
        "fat": round_half_up(total["fat"], 2),
    }


def per_serving(totals: Dict[str, float], servings: float) -> Dict[str, float]:
    """
    Divide already-rounded totals by the recipe yield.

    Rounding is applied a second time here, so per-serving values can drift
    slightly from a single-rounded computation.
    """
    servings = float(servings or 1)
    return {
        "calories": round_half_up(totals["calories"] / servings),
        "protein": round_half_up(totals["protein"] / servings, 2),
        "carbs": round_half_up(totals["carbs"] / servings, 2),
        "fat": round_half_up(totals["fat"] / servings, 2),
    }


def calculate_compound_macros(ingredients: Iterable[Tuple[Food, float]], servings: float) -> Dict[str, float]:
    return per_serving(calculate_totals(ingredients), servings)
