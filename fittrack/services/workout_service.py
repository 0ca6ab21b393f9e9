"""
Workout Service

Templates are mutable definitions; instances are scheduled snapshots of a
template that carry per-set execution data.

Handles:
- Template create/replace/delete
- Instantiating a template into a scheduled workout
- Logging sets, including the scheduled -> in-progress promotion
- One-way status transitions and completion stamping
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from fittrack.extensions import db
from fittrack.models.exercise import Exercise
from fittrack.models.template import WorkoutTemplate, TemplateExercise
from fittrack.models.workout import WorkoutInstance, InstanceExercise, ExerciseSet
from fittrack.utils.enums import WorkoutStatus
from fittrack.utils.errors import NotFoundError, ValidationError
from fittrack.utils.query import get_owned

logger = logging.getLogger(__name__)

STATUS_ORDER = [
    WorkoutStatus.SCHEDULED.value,
    WorkoutStatus.IN_PROGRESS.value,
    WorkoutStatus.COMPLETED.value,
]


# ============================================================================
# Exercises
# ============================================================================

def list_exercises(user_id: int, search: str = "", muscle_group: Optional[str] = None) -> List[Exercise]:
    query = Exercise.query.filter_by(user_id=user_id)
    search = (search or "").strip()
    if search:
        query = query.filter(Exercise.name.ilike(f"%{search}%"))
    if muscle_group:
        query = query.filter(Exercise.muscle_group.ilike(f"%{muscle_group.strip()}%"))
    return query.order_by(Exercise.name.asc(), Exercise.id.asc()).all()


def create_exercise(user_id: int, data: Dict[str, Any]) -> Exercise:
    exercise = Exercise(
        user_id=user_id,
        name=data["name"].strip(),
        muscle_group=data["muscle_group"],
        description=(data.get("description") or "").strip() or None,
    )
    db.session.add(exercise)
    db.session.commit()
    return exercise


def update_exercise(user_id: int, exercise_id: int, data: Dict[str, Any]) -> Exercise:
    exercise = get_owned(Exercise, exercise_id, user_id, "Exercise not found")
    if data.get("name"):
        exercise.name = data["name"].strip()
    if data.get("muscle_group"):
        exercise.muscle_group = data["muscle_group"]
    if "description" in data:
        exercise.description = (data["description"] or "").strip() or None
    db.session.commit()
    return exercise


def delete_exercise(user_id: int, exercise_id: int) -> None:
    """Delete an exercise and its template rows; logged workouts keep their copy."""
    exercise = get_owned(Exercise, exercise_id, user_id, "Exercise not found")
    InstanceExercise.query.filter_by(exercise_id=exercise.id).update({"exercise_id": None})
    db.session.delete(exercise)
    db.session.commit()


# ============================================================================
# Templates
# ============================================================================

def _build_template_exercises(user_id: int, exercises: List[Dict[str, Any]]) -> List[TemplateExercise]:
    wanted = {int(e["exercise_id"]) for e in exercises}
    owned = {
        ex.id: ex
        for ex in Exercise.query.filter(Exercise.id.in_(wanted), Exercise.user_id == user_id).all()
    }
    if len(owned) != len(wanted):
        raise NotFoundError("One or more exercises not found")

    return [
        TemplateExercise(
            exercise_id=owned[int(item["exercise_id"])].id,
            order_index=index,
            sets=item.get("sets") or 3,
            reps=item.get("reps") or 10,
            notes=(item.get("notes") or "").strip() or None,
        )
        for index, item in enumerate(exercises)
    ]


def list_templates(user_id: int) -> List[WorkoutTemplate]:
    return (
        WorkoutTemplate.query
        .filter_by(user_id=user_id)
        .order_by(WorkoutTemplate.updated_at.desc(), WorkoutTemplate.id.desc())
        .all()
    )


def create_template(user_id: int, data: Dict[str, Any]) -> WorkoutTemplate:
    template = WorkoutTemplate(
        user_id=user_id,
        name=data["name"].strip(),
        description=(data.get("description") or "").strip() or None,
    )
    template.exercises = _build_template_exercises(user_id, data["exercises"])
    db.session.add(template)
    db.session.commit()
    return template


def update_template(user_id: int, template_id: int, data: Dict[str, Any]) -> WorkoutTemplate:
    """Update a template; a given exercise list replaces the old one entirely."""
    template = get_owned(WorkoutTemplate, template_id, user_id, "Template not found")
    new_exercises = _build_template_exercises(user_id, data["exercises"]) if data.get("exercises") else None

    try:
        if data.get("name"):
            template.name = data["name"].strip()
        if "description" in data:
            template.description = (data["description"] or "").strip() or None
        if new_exercises is not None:
            template.exercises.clear()
            db.session.flush()
            template.exercises.extend(new_exercises)
        template.updated_at = datetime.utcnow()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return template


def delete_template(user_id: int, template_id: int) -> None:
    """Delete a template. Instances created from it keep their snapshot."""
    template = get_owned(WorkoutTemplate, template_id, user_id, "Template not found")
    WorkoutInstance.query.filter_by(template_id=template.id).update({"template_id": None})
    db.session.delete(template)
    db.session.commit()


# ============================================================================
# Instances
# ============================================================================

def instantiate_template(template: WorkoutTemplate, scheduled_date: date, notes: Optional[str] = None) -> WorkoutInstance:
    """
    Build a scheduled WorkoutInstance from a template (not yet committed).

    Template and exercise fields are copied by value. Each template exercise
    with ``sets=N`` and ``reps=R`` yields sets numbered 1..N targeting R reps.
    """
    instance = WorkoutInstance(
        user_id=template.user_id,
        template_id=template.id,
        name=template.name,
        description=template.description,
        scheduled_date=scheduled_date,
        status=WorkoutStatus.SCHEDULED.value,
        notes=notes or None,
    )
    for te in template.exercises:
        instance.exercises.append(InstanceExercise(
            exercise_id=te.exercise_id,
            exercise_name=te.exercise.name,
            muscle_group=te.exercise.muscle_group,
            order_index=te.order_index,
            notes=te.notes,
            sets=[
                ExerciseSet(
                    set_number=n,
                    target_reps=te.reps,
                    actual_reps=None,
                    weight=None,
                    completed=False,
                )
                for n in range(1, te.sets + 1)
            ],
        ))
    return instance


def schedule_workout(user_id: int, template_id: int, scheduled_date: date, notes: Optional[str] = None) -> WorkoutInstance:
    template = get_owned(WorkoutTemplate, template_id, user_id, "Template not found")
    try:
        instance = instantiate_template(template, scheduled_date, notes)
        db.session.add(instance)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info("Scheduled workout %s from template %s", instance.id, template.id)
    return instance


def list_instances(user_id: int, day: Optional[date] = None, status: Optional[str] = None) -> List[WorkoutInstance]:
    query = WorkoutInstance.query.filter_by(user_id=user_id)
    if day is not None:
        query = query.filter(WorkoutInstance.scheduled_date == day)
    if status:
        query = query.filter(WorkoutInstance.status == status)
    return query.order_by(WorkoutInstance.scheduled_date.desc(), WorkoutInstance.id.desc()).all()


def get_instance(user_id: int, instance_id: int) -> WorkoutInstance:
    return get_owned(WorkoutInstance, instance_id, user_id, "Workout instance not found")


def check_transition(current: str, new: str) -> None:
    """Status only moves forward: scheduled -> in-progress -> completed."""
    if new not in STATUS_ORDER:
        raise ValidationError("Invalid status")
    if STATUS_ORDER.index(new) < STATUS_ORDER.index(current):
        raise ValidationError(f"Cannot change status from {current} to {new}")


def update_instance(user_id: int, instance_id: int, data: Dict[str, Any]) -> WorkoutInstance:
    """
    Update status and notes of a workout.

    Completing without an explicit ``completed_date`` stamps the current time.
    """
    instance = get_instance(user_id, instance_id)

    status = data.get("status")
    if status:
        check_transition(instance.status, status)
        instance.status = status
    if "notes" in data:
        instance.notes = data["notes"]

    completed_date = data.get("completed_date")
    if completed_date:
        instance.completed_date = completed_date.replace(tzinfo=None)
    elif status == WorkoutStatus.COMPLETED.value and instance.completed_date is None:
        instance.completed_date = datetime.utcnow()

    db.session.commit()
    return instance


def delete_instance(user_id: int, instance_id: int) -> None:
    instance = get_instance(user_id, instance_id)
    db.session.delete(instance)
    db.session.commit()


# ============================================================================
# Sets
# ============================================================================

def get_owned_set(user_id: int, set_id: int) -> ExerciseSet:
    """Resolve a set through set -> instance exercise -> workout -> owner."""
    exercise_set = (
        ExerciseSet.query
        .join(InstanceExercise, ExerciseSet.instance_exercise_id == InstanceExercise.id)
        .join(WorkoutInstance, InstanceExercise.workout_instance_id == WorkoutInstance.id)
        .filter(ExerciseSet.id == set_id, WorkoutInstance.user_id == user_id)
        .first()
    )
    if exercise_set is None:
        raise NotFoundError("Exercise set not found")
    return exercise_set


def update_set(user_id: int, set_id: int, data: Dict[str, Any]) -> ExerciseSet:
    """
    Log actual reps, weight, unit or completion for one set.

    Completing a set of a still-scheduled workout promotes the workout to
    in-progress in the same transaction.
    """
    exercise_set = get_owned_set(user_id, set_id)

    for field in ("actual_reps", "weight", "unit", "completed"):
        if field in data:
            setattr(exercise_set, field, data[field])

    instance = exercise_set.instance_exercise.workout_instance
    if data.get("completed") and instance.status == WorkoutStatus.SCHEDULED.value:
        instance.status = WorkoutStatus.IN_PROGRESS.value
        logger.info("Workout %s started", instance.id)

    db.session.commit()
    return exercise_set


def workout_progress(instance: WorkoutInstance) -> Dict[str, int]:
    sets = instance.all_sets
    total = len(sets)
    done = sum(1 for s in sets if s.completed)
    return {
        "totalSets": total,
        "completedSets": done,
        "progressPercentage": round(done / total * 100) if total else 0,
    }
