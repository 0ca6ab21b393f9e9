"""
Dashboard Service

Aggregates today's snapshot for the home screen.
"""

from datetime import date
from typing import Any, Dict, Optional

from fittrack.models.exercise import Exercise
from fittrack.models.food import Food
from fittrack.models.template import WorkoutTemplate
from fittrack.models.weight import Weight
from fittrack.models.workout import WorkoutInstance
from fittrack.services import diet_service, water_service
from fittrack.services.workout_service import workout_progress
from fittrack.utils.enums import WorkoutStatus

RECENT_WEIGHTS = 7
RECENT_ACTIVITY_LIMIT = 5


def _recent_activities(user_id: int):
    weights = (
        Weight.query.filter_by(user_id=user_id)
        .order_by(Weight.created_at.desc(), Weight.id.desc())
        .limit(3)
        .all()
    )
    workouts = (
        WorkoutInstance.query
        .filter_by(user_id=user_id, status=WorkoutStatus.COMPLETED.value)
        .order_by(WorkoutInstance.completed_date.desc())
        .limit(2)
        .all()
    )

    activities = [
        {"type": "weight", "date": w.created_at, "data": w.to_dict()} for w in weights
    ] + [
        {"type": "workout", "date": w.completed_date or w.created_at, "data": w.to_dict()} for w in workouts
    ]
    activities.sort(key=lambda a: a["date"], reverse=True)

    return [
        {"type": a["type"], "date": a["date"].isoformat(), "data": a["data"]}
        for a in activities[:RECENT_ACTIVITY_LIMIT]
    ]


def get_dashboard(user_id: int, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Build the dashboard payload.

    ``latestWeight`` is only filled when there is no weight logged today.
    Calories are rounded once over the day; water is converted into the
    goal unit the same way the water log does it.
    """
    today = today or date.today()

    today_weight = (
        Weight.query.filter_by(user_id=user_id, date=today)
        .order_by(Weight.created_at.desc(), Weight.id.desc())
        .first()
    )
    latest_weight = None
    if today_weight is None:
        latest_weight = (
            Weight.query.filter_by(user_id=user_id)
            .order_by(Weight.date.desc(), Weight.created_at.desc())
            .first()
        )
    recent_weights = (
        Weight.query.filter_by(user_id=user_id)
        .order_by(Weight.date.desc(), Weight.created_at.desc())
        .limit(RECENT_WEIGHTS)
        .all()
    )

    workouts = (
        WorkoutInstance.query.filter_by(user_id=user_id, scheduled_date=today)
        .order_by(WorkoutInstance.created_at.desc(), WorkoutInstance.id.desc())
        .all()
    )
    todays_workouts = [{**w.to_dict(), **workout_progress(w)} for w in workouts]

    calories = diet_service.group_entries(diet_service.entries_for_day(user_id, today))["daily_total"]
    water = water_service.summarize(
        water_service.entries_for_day(user_id, today), water_service.get_goal(user_id)
    )

    return {
        "todayWeight": today_weight.to_dict() if today_weight else None,
        "latestWeight": latest_weight.to_dict() if latest_weight else None,
        "recentWeights": [w.to_dict() for w in recent_weights],
        "todaysWorkouts": todays_workouts,
        "todayCalories": calories,
        "todayWater": water["total"],
        "waterUnit": water["unit"],
        "waterGoal": water["goal"],
        "waterProgress": water["progress"],
        "stats": {
            "exercises": Exercise.query.filter_by(user_id=user_id).count(),
            "templates": WorkoutTemplate.query.filter_by(user_id=user_id).count(),
            "weightEntries": Weight.query.filter_by(user_id=user_id).count(),
            "foods": Food.query.filter_by(user_id=user_id).count(),
        },
        "recentActivities": _recent_activities(user_id),
    }
