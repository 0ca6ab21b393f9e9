"""
User Service

Account-level operations: preferences, profile, data export, password
change and account deletion.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict

from fittrack.extensions import db
from fittrack.models.preference import UserPreferences, DEFAULT_WEIGHT_UNIT, DEFAULT_WATER_UNIT
from fittrack.models.user import User
from fittrack.utils.auth import check_password_hash, hash_password
from fittrack.utils.errors import NotFoundError, UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)


def get_user(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_preferences(user_id: int) -> Dict[str, str]:
    pref = db.session.get(UserPreferences, user_id)
    if pref is None:
        return {"defaultWeightUnit": DEFAULT_WEIGHT_UNIT, "defaultWaterUnit": DEFAULT_WATER_UNIT}
    return pref.to_dict()


def save_preferences(user_id: int, data: Dict[str, str]) -> UserPreferences:
    pref = db.session.get(UserPreferences, user_id)
    if pref is None:
        pref = UserPreferences(user_id=user_id)
        db.session.add(pref)
    pref.default_weight_unit = data["default_weight_unit"]
    pref.default_water_unit = data["default_water_unit"]
    db.session.commit()
    return pref


def update_profile(user_id: int, data: Dict[str, Any]) -> User:
    user = get_user(user_id)
    if data.get("name"):
        user.name = data["name"].strip()
    db.session.commit()
    return user


def change_password(user_id: int, current_password: str, new_password: str) -> None:
    """
    Replace the user's password after verifying the current one.

    Raises:
        ValidationError: account has no password set
        UnauthorizedError: current password does not match
    """
    user = get_user(user_id)
    if not user.password:
        raise ValidationError("No password is set for this account")
    if not check_password_hash(user.password, current_password):
        raise UnauthorizedError("Current password is incorrect")
    user.password = hash_password(new_password)
    db.session.commit()
    logger.info("Password changed for user %s", user_id)


def has_password(user_id: int) -> bool:
    return bool(get_user(user_id).password)


def delete_account(user_id: int) -> None:
    """Delete the user; owned records go with it through relationship cascades."""
    user = get_user(user_id)
    db.session.delete(user)
    db.session.commit()
    logger.info("Deleted account %s", user_id)


def export_filename(today: date = None) -> str:
    return f"fitness-data-export-{(today or date.today()).isoformat()}.json"


def export_data(user_id: int) -> Dict[str, Any]:
    """Everything the user owns, as plain JSON-ready dictionaries."""
    user = get_user(user_id)
    water_goal = user.water_goal

    return {
        "exportDate": datetime.utcnow().isoformat(),
        "user": user.to_dict(),
        "preferences": user.preferences.to_dict() if user.preferences else None,
        "statistics": {
            "totalWeightEntries": len(user.weights),
            "totalExercises": len(user.exercises),
            "totalTemplates": len(user.templates),
            "totalWorkouts": len(user.workout_instances),
            "totalFoods": len(user.foods),
            "totalCompoundFoods": len(user.compound_foods),
            "totalDietEntries": len(user.diet_entries),
            "totalWaterEntries": len(user.water_entries),
        },
        "weights": [w.to_dict() for w in user.weights],
        "exercises": [e.to_dict() for e in user.exercises],
        "templates": [t.to_dict() for t in user.templates],
        "workoutInstances": [w.to_dict() for w in user.workout_instances],
        "foods": [f.to_dict() for f in user.foods],
        "compoundFoods": [c.to_dict() for c in user.compound_foods],
        "dietEntries": [d.to_dict() for d in user.diet_entries],
        "waterEntries": [w.to_dict() for w in user.water_entries],
        "waterGoal": water_goal.to_dict() if water_goal else None,
    }
