"""
Scheduled workout occurrences.

Name, description, exercise name and muscle group are copied from the
template when the instance is created and never written afterwards, so
editing or deleting the template or exercise leaves history untouched.
"""

from datetime import datetime
from fittrack.extensions import db


class WorkoutInstance(db.Model):
    __tablename__ = "workout_instances"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    template_id = db.Column(db.Integer, db.ForeignKey("workout_templates.id", ondelete="SET NULL"), nullable=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)
    scheduled_date = db.Column(db.Date, nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="scheduled")
    completed_date = db.Column(db.DateTime, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="workout_instances")
    exercises = db.relationship(
        "InstanceExercise",
        back_populates="workout_instance",
        cascade="all, delete-orphan",
        order_by="InstanceExercise.order_index",
    )

    @property
    def all_sets(self):
        return [s for ex in self.exercises for s in ex.sets]

    def to_dict(self):
        return {
            "id": self.id,
            "templateId": self.template_id,
            "name": self.name,
            "description": self.description,
            "scheduledDate": self.scheduled_date.isoformat(),
            "status": self.status,
            "completedDate": self.completed_date.isoformat() if self.completed_date else None,
            "notes": self.notes,
            "exercises": [e.to_dict() for e in self.exercises],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class InstanceExercise(db.Model):
    __tablename__ = "instance_exercises"

    id = db.Column(db.Integer, primary_key=True)
    workout_instance_id = db.Column(
        db.Integer, db.ForeignKey("workout_instances.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id = db.Column(db.Integer, db.ForeignKey("exercises.id", ondelete="SET NULL"), nullable=True)
    exercise_name = db.Column(db.String(150), nullable=False)
    muscle_group = db.Column(db.String(255), nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    notes = db.Column(db.Text, nullable=True)

    workout_instance = db.relationship("WorkoutInstance", back_populates="exercises")
    sets = db.relationship(
        "ExerciseSet",
        back_populates="instance_exercise",
        cascade="all, delete-orphan",
        order_by="ExerciseSet.set_number",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "muscleGroup": self.muscle_group,
            "orderIndex": self.order_index,
            "notes": self.notes,
            "sets": [s.to_dict() for s in self.sets],
        }


class ExerciseSet(db.Model):
    __tablename__ = "exercise_sets"

    id = db.Column(db.Integer, primary_key=True)
    instance_exercise_id = db.Column(
        db.Integer, db.ForeignKey("instance_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_number = db.Column(db.Integer, nullable=False)
    target_reps = db.Column(db.Integer, nullable=False)
    actual_reps = db.Column(db.Integer, nullable=True)
    weight = db.Column(db.Float, nullable=True)
    unit = db.Column(db.String(10), nullable=False, default="kg")
    completed = db.Column(db.Boolean, nullable=False, default=False)

    instance_exercise = db.relationship("InstanceExercise", back_populates="sets")

    def to_dict(self):
        return {
            "id": self.id,
            "setNumber": self.set_number,
            "targetReps": self.target_reps,
            "actualReps": self.actual_reps,
            "weight": self.weight,
            "unit": self.unit,
            "completed": self.completed,
        }
