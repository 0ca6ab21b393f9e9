from fittrack.models.user import User
from fittrack.models.preference import UserPreferences
from fittrack.models.food import Food, CompoundFood, CompoundFoodIngredient
from fittrack.models.diet_entry import DietEntry
from fittrack.models.water import WaterEntry, UserWaterGoal
from fittrack.models.weight import Weight
from fittrack.models.exercise import Exercise
from fittrack.models.template import WorkoutTemplate, TemplateExercise
from fittrack.models.workout import WorkoutInstance, InstanceExercise, ExerciseSet

__all__ = [
    "User",
    "UserPreferences",
    "Food",
    "CompoundFood",
    "CompoundFoodIngredient",
    "DietEntry",
    "WaterEntry",
    "UserWaterGoal",
    "Weight",
    "Exercise",
    "WorkoutTemplate",
    "TemplateExercise",
    "WorkoutInstance",
    "InstanceExercise",
    "ExerciseSet",
]
