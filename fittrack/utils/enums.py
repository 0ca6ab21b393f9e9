from enum import Enum


class MealCategory(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"
    DINNER = "dinner"


class WaterUnit(str, Enum):
    ML = "ml"
    OZ = "oz"
    CUPS = "cups"


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class FoodSource(str, Enum):
    MANUAL = "manual"
    BARCODE = "barcode"
    COMPOUND = "compound"


class WorkoutStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def values(enum_cls):
    return [e.value for e in enum_cls]
