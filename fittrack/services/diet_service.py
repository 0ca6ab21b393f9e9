"""
Diet Service

Daily diet log aggregation: entries grouped by meal category with calorie
totals.
"""

from datetime import date
from typing import Any, Dict, List

from fittrack.models.diet_entry import DietEntry
from fittrack.utils.enums import MealCategory
from fittrack.utils.numbers import round_half_up

MEAL_CATEGORIES = [c.value for c in MealCategory]


def entries_for_day(user_id: int, day: date) -> List[DietEntry]:
    return (
        DietEntry.query
        .filter_by(user_id=user_id, date=day)
        .order_by(DietEntry.created_at.asc(), DietEntry.id.asc())
        .all()
    )


def group_entries(entries: List[DietEntry]) -> Dict[str, Any]:
    """
    Group entries into the four meal categories and total their calories.

    Category totals are left unrounded; only the daily total is rounded, once,
    over the sum of the category totals.

    Returns:
        Dictionary with ``entries`` (category -> list of entries),
        ``totals`` (category -> calories) and ``daily_total``
    """
    grouped: Dict[str, List[DietEntry]] = {c: [] for c in MEAL_CATEGORIES}
    for entry in entries:
        grouped.setdefault(entry.meal_category, []).append(entry)

    totals = {c: sum(e.calories for e in grouped[c]) for c in MEAL_CATEGORIES}
    daily_total = round_half_up(sum(totals.values()))

    return {"entries": grouped, "totals": totals, "daily_total": daily_total}


def daily_summary(user_id: int, day: date) -> Dict[str, Any]:
    summary = group_entries(entries_for_day(user_id, day))
    return {
        "entries": {c: [e.to_dict() for e in items] for c, items in summary["entries"].items()},
        "totals": summary["totals"],
        "dailyTotal": summary["daily_total"],
    }
