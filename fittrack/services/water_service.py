"""
Water Service

Unit conversion and daily aggregation of water intake against the user's
goal.
"""

from datetime import date
from typing import Any, Dict, Iterable, Optional

from fittrack.models.preference import UserPreferences
from fittrack.models.water import WaterEntry, UserWaterGoal
from fittrack.utils.numbers import round_half_up

ML_PER_UNIT = {
    "ml": 1.0,
    "oz": 29.5735,
    "cups": 240.0,
}

DEFAULT_GOAL = {"dailyGoal": 2000, "unit": "ml"}

# Default goal when only a preferred unit is known
DEFAULT_GOAL_BY_UNIT = {
    "ml": 2000,
    "oz": 64,
    "cups": 8,
}


def convert(amount: float, from_unit: str, to_unit: str) -> float:
    """Convert a water amount between units, always through millilitres."""
    if from_unit == to_unit:
        return float(amount)
    ml = float(amount) * ML_PER_UNIT[from_unit]
    return ml / ML_PER_UNIT[to_unit]


def total_in_unit(entries: Iterable[WaterEntry], unit: str) -> float:
    """Unrounded sum of entries expressed in ``unit``."""
    return sum(convert(e.amount, e.unit, unit) for e in entries)


def get_goal(user_id: int) -> Optional[UserWaterGoal]:
    return UserWaterGoal.query.filter_by(user_id=user_id).first()


def goal_or_default(user_id: int) -> Dict[str, Any]:
    """Stored goal, or a default sized for the user's preferred water unit."""
    goal = get_goal(user_id)
    if goal:
        return goal.to_dict()

    pref = UserPreferences.query.filter_by(user_id=user_id).first()
    unit = pref.default_water_unit if pref and pref.default_water_unit in DEFAULT_GOAL_BY_UNIT else "ml"
    return {"dailyGoal": DEFAULT_GOAL_BY_UNIT[unit], "unit": unit}


def entries_for_day(user_id: int, day: date):
    return (
        WaterEntry.query
        .filter_by(user_id=user_id, date=day)
        .order_by(WaterEntry.timestamp.asc(), WaterEntry.id.asc())
        .all()
    )


def summarize(entries, goal: Optional[UserWaterGoal]) -> Dict[str, Any]:
    """
    Total a day's entries in the goal's unit.

    Without a stored goal the system default (2000 ml) is shown, but progress
    is reported as 0 instead of being computed against that default.
    """
    if goal is None:
        total = total_in_unit(entries, DEFAULT_GOAL["unit"])
        return {
            "total": round_half_up(total),
            "unit": DEFAULT_GOAL["unit"],
            "goal": DEFAULT_GOAL["dailyGoal"],
            "progress": 0,
        }

    total = total_in_unit(entries, goal.unit)
    return {
        "total": round_half_up(total),
        "unit": goal.unit,
        "goal": goal.daily_goal,
        "progress": round_half_up(total / goal.daily_goal * 100) if goal.daily_goal else 0,
    }


def daily_summary(user_id: int, day: date) -> Dict[str, Any]:
    entries = entries_for_day(user_id, day)
    summary = summarize(entries, get_goal(user_id))
    summary["entries"] = [e.to_dict() for e in entries]
    return summary
