"""
Food Controller Module

Handles the food library and compound food (recipe) endpoints.
"""

from flask import request

from fittrack.schemas.food_schema import (
    FoodSchema,
    ListFoodQuerySchema,
    CreateCompoundFoodSchema,
    UpdateCompoundFoodSchema,
)
from fittrack.services import food_service, compound_food_service
from fittrack.utils.http import ok, json_body, validate_schema, schema_error


# ============================================================================
# Foods
# ============================================================================

def list_foods_handler():
    query, errors = validate_schema(ListFoodQuerySchema, request.args.to_dict())
    if errors:
        return schema_error(errors)
    foods = food_service.list_foods(request.user_id, query.get("search", ""), query.get("source"))
    return ok([f.to_dict() for f in foods])


def create_food_handler():
    data, errors = validate_schema(FoodSchema, json_body())
    if errors:
        return schema_error(errors)
    food = food_service.create_food(request.user_id, data)
    return ok(food.to_dict(), 201)


def get_food_handler(food_id: int):
    return ok(food_service.get_food(request.user_id, food_id).to_dict())


def update_food_handler(food_id: int):
    data, errors = validate_schema(FoodSchema, json_body(), partial=True)
    if errors:
        return schema_error(errors)
    food = food_service.update_food(request.user_id, food_id, data)
    return ok(food.to_dict())


def delete_food_handler(food_id: int):
    food_service.delete_food(request.user_id, food_id)
    return ok({"message": "Food deleted successfully"})


# ============================================================================
# Compound foods
# ============================================================================

def list_compound_foods_handler():
    compounds = compound_food_service.list_compound_foods(request.user_id)
    return ok([c.to_dict() for c in compounds])


def create_compound_food_handler():
    data, errors = validate_schema(CreateCompoundFoodSchema, json_body())
    if errors:
        return schema_error(errors)
    compound = compound_food_service.create_compound_food(request.user_id, data)
    return ok(compound.to_dict(), 201)


def get_compound_food_handler(compound_id: int):
    return ok(compound_food_service.get_compound_food(request.user_id, compound_id).to_dict())


def update_compound_food_handler(compound_id: int):
    data, errors = validate_schema(UpdateCompoundFoodSchema, json_body())
    if errors:
        return schema_error(errors)
    compound = compound_food_service.update_compound_food(request.user_id, compound_id, data)
    return ok(compound.to_dict())


def delete_compound_food_handler(compound_id: int):
    compound_food_service.delete_compound_food(request.user_id, compound_id)
    return ok({"message": "Compound food deleted successfully"})
