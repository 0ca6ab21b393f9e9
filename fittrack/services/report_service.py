"""
Report Service

Builds a daily markdown report from weight, workout, diet and water data.

Data collection hits the database; ``generate_markdown`` is a pure function
of the collected data, the section options and the footer timestamp.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from fittrack.extensions import db
from fittrack.models.diet_entry import DietEntry
from fittrack.models.user import User
from fittrack.models.weight import Weight
from fittrack.models.workout import WorkoutInstance
from fittrack.services import diet_service, water_service
from fittrack.utils.errors import NotFoundError
from fittrack.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

SECTION_KEYS = ("include_weight", "include_workouts", "include_diet", "include_water")

MEAL_HEADINGS = [
    ("breakfast", "Breakfast"),
    ("lunch", "Lunch"),
    ("snack", "Snacks"),
    ("dinner", "Dinner"),
]

CHECK = "✓"
CIRCLE = "○"
DASH = "—"


def _num(value) -> str:
    """Render a number without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _long_date(d: date) -> str:
    return f"{d:%B} {d.day}, {d.year}"


def _clock(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt:%M} {'AM' if dt.hour < 12 else 'PM'}"


def _timestamp(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{dt:%b} {dt.day}, {dt.year}, {hour}:{dt:%M:%S} {'AM' if dt.hour < 12 else 'PM'}"


# ============================================================================
# Data collection
# ============================================================================

def collect_report_data(user_id: int, day: date, options: Dict[str, bool]) -> Dict[str, Any]:
    """
    Gather the data for the requested sections of one day's report.

    Args:
        user_id: Owner of the data
        day: Calendar date of the report
        options: ``include_*`` section flags

    Returns:
        Dictionary consumed by ``generate_markdown``
    """
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")

    data: Dict[str, Any] = {
        "date": day,
        "user": {"name": user.name, "email": user.email},
        "weight": None,
        "workouts": [],
        "diet": {key: [] for key, _ in MEAL_HEADINGS},
        "total_calories": 0,
        "water": None,
    }

    if options.get("include_weight"):
        weight = (
            Weight.query
            .filter_by(user_id=user_id, date=day)
            .order_by(Weight.created_at.desc(), Weight.id.desc())
            .first()
        )
        if weight:
            data["weight"] = {"weight": weight.weight, "unit": weight.unit, "notes": weight.notes}

    if options.get("include_workouts"):
        workouts = (
            WorkoutInstance.query
            .filter_by(user_id=user_id, scheduled_date=day)
            .order_by(WorkoutInstance.created_at.asc(), WorkoutInstance.id.asc())
            .all()
        )
        data["workouts"] = [
            {
                "name": w.name,
                "status": w.status,
                "completed_date": w.completed_date,
                "exercises": [
                    {
                        "name": ex.exercise_name,
                        "sets": [
                            {
                                "set_number": s.set_number,
                                "target_reps": s.target_reps,
                                "actual_reps": s.actual_reps,
                                "weight": s.weight,
                                "unit": s.unit,
                                "completed": s.completed,
                            }
                            for s in ex.sets
                        ],
                    }
                    for ex in w.exercises
                ],
            }
            for w in workouts
        ]

    if options.get("include_diet"):
        entries: List[DietEntry] = diet_service.entries_for_day(user_id, day)
        total = 0
        for entry in entries:
            calories = round_half_up(entry.calories)
            total += calories
            data["diet"].setdefault(entry.meal_category, []).append({
                "food_name": entry.food.name,
                "servings": entry.servings,
                "calories": calories,
            })
        data["total_calories"] = total

    if options.get("include_water"):
        entries = water_service.entries_for_day(user_id, day)
        if entries:
            goal = water_service.get_goal(user_id)
            summary = water_service.summarize(entries, goal)
            data["water"] = {
                "total": summary["total"],
                "unit": summary["unit"],
                "goal": summary["goal"] if goal else None,
                "progress": summary["progress"] if goal else None,
            }

    return data


# ============================================================================
# Rendering
# ============================================================================

def _weight_section(data: Dict[str, Any]) -> List[str]:
    lines = ["## 📊 Weight", ""]
    weight = data.get("weight")
    if weight:
        lines.append(f"- **Weight:** {_num(weight['weight'])} {weight['unit']}")
        if weight.get("notes"):
            lines.append(f"- **Notes:** {weight['notes']}")
    else:
        lines.append("*No weight entry recorded for this day.*")
    lines.append("")
    return lines


def _set_line(s: Dict[str, Any]) -> str:
    status = CHECK if s["completed"] else CIRCLE
    reps = s["actual_reps"] if s["actual_reps"] is not None else DASH
    parts = [f"- {status} Set {s['set_number']}: {reps} reps"]
    if s.get("weight"):
        parts.append(f"@ {_num(s['weight'])} {s['unit']}")
    parts.append(f"(Target: {s['target_reps']})")
    return " ".join(parts)


def _workouts_section(data: Dict[str, Any]) -> List[str]:
    lines = ["## 💪 Workouts", ""]
    workouts = data.get("workouts") or []
    if not workouts:
        lines.extend(["*No workouts scheduled for this day.*", ""])
        return lines

    for workout in workouts:
        lines.extend([f"### {workout['name']}", ""])
        status = workout["status"]
        lines.append(f"- **Status:** {status[:1].upper() + status[1:]}")
        if workout.get("completed_date"):
            lines.append(f"- **Completed:** {_clock(workout['completed_date'])}")
        lines.append("")

        for exercise in workout["exercises"]:
            lines.extend([f"#### {exercise['name']}", ""])
            if exercise["sets"]:
                lines.extend(_set_line(s) for s in exercise["sets"])
            else:
                lines.append("*No sets logged*")
            lines.append("")
    return lines


def _diet_section(data: Dict[str, Any]) -> List[str]:
    lines = ["## 🍎 Nutrition", "", f"**Total Calories:** {data.get('total_calories', 0)} cal", ""]
    diet = data.get("diet") or {}

    if not any(diet.get(key) for key, _ in MEAL_HEADINGS):
        lines.extend(["*No food entries recorded for this day.*", ""])
        return lines

    for key, heading in MEAL_HEADINGS:
        items = diet.get(key) or []
        if not items:
            continue
        lines.extend([f"### {heading}", ""])
        for item in items:
            lines.append(
                f"- {item['food_name']}: {_num(item['servings'])} serving(s) {DASH} {item['calories']} cal"
            )
        lines.append("")
    return lines


def _water_section(data: Dict[str, Any]) -> List[str]:
    lines = ["## 💧 Hydration", ""]
    water = data.get("water")
    if water:
        lines.append(f"- **Total Water:** {water['total']} {water['unit']}")
        if water.get("goal"):
            lines.append(f"- **Daily Goal:** {_num(water['goal'])} {water['unit']}")
            lines.append(f"- **Progress:** {water['progress']}%")
    else:
        lines.append("*No water intake recorded for this day.*")
    lines.append("")
    return lines


def generate_markdown(data: Dict[str, Any], options: Dict[str, bool], generated_at: Optional[datetime] = None) -> str:
    """
    Render report data as markdown.

    Sections appear in a fixed order (weight, workouts, nutrition, hydration)
    and only when their option is set. An enabled section with no data still
    renders its heading with a "no data" line.

    Args:
        data: Output of ``collect_report_data``
        options: ``include_*`` section flags
        generated_at: Footer timestamp, defaults to now

    Returns:
        The markdown document
    """
    user = data.get("user") or {}
    lines = [
        f"# Fitness Report - {_long_date(data['date'])}",
        "",
        f"**Generated for:** {user.get('name') or user.get('email')}",
        "",
        "---",
        "",
    ]

    if options.get("include_weight"):
        lines.extend(_weight_section(data))
    if options.get("include_workouts"):
        lines.extend(_workouts_section(data))
    if options.get("include_diet"):
        lines.extend(_diet_section(data))
    if options.get("include_water"):
        lines.extend(_water_section(data))

    lines.extend(["---", "", f"*Report generated on {_timestamp(generated_at or datetime.now())}*"])
    return "\n".join(lines)


def report_filename(day: date) -> str:
    return f"fitness-report-{day.isoformat()}.md"


def generate_report(user_id: int, day: date, options: Dict[str, bool]) -> Dict[str, str]:
    data = collect_report_data(user_id, day, options)
    markdown = generate_markdown(data, options)
    logger.info("Generated report for user %s on %s", user_id, day)
    return {"markdown": markdown, "filename": report_filename(day)}
