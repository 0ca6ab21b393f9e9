from types import SimpleNamespace

from fittrack.services.macro_service import calculate_totals, per_serving, calculate_compound_macros
from fittrack.utils.numbers import round_half_up


def food(calories, protein=None, carbs=None, fat=None):
    return SimpleNamespace(calories=calories, protein=protein, carbs=carbs, fat=fat)


def test_totals_treat_missing_macros_as_zero():
    totals = calculate_totals([(food(120, protein=3.3), 1.5), (food(80), 2)])
    assert totals == {"calories": 340, "protein": 4.95, "carbs": 0.0, "fat": 0.0}


def test_recipe_per_serving():
    a = food(100, protein=10)
    b = food(200, protein=5)
    macros = calculate_compound_macros([(a, 2), (b, 1)], servings=2)
    assert macros["calories"] == 200
    assert macros["protein"] == 12.5


def test_per_serving_rounds_halves_up():
    totals = {"calories": 401, "protein": 10.02, "carbs": 10.01, "fat": 3.0}
    result = per_serving(totals, 2)
    assert result["calories"] == 201
    assert result["protein"] == 5.01
    # 10.01 / 2 is stored just below 5.005
    assert result["carbs"] == 5.0
    assert result["fat"] == 1.5


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(266.5) == 267
    assert round_half_up(1.005, 2) == 1.0
    assert round_half_up(1.125, 2) == 1.13
    assert isinstance(round_half_up(10.0), int)


def test_recipe_rounds_binary_value_like_to_fixed():
    macros = calculate_compound_macros([(food(10, protein=1.005), 1)], servings=1)
    assert macros["protein"] == 1.0
