from datetime import datetime
from fittrack.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    preferences = db.relationship(
        "UserPreferences", uselist=False, back_populates="user", cascade="all, delete-orphan"
    )
    water_goal = db.relationship(
        "UserWaterGoal", uselist=False, back_populates="user", cascade="all, delete-orphan"
    )

    # Owned records; deleting a user removes everything they logged
    foods = db.relationship("Food", back_populates="user", cascade="all, delete-orphan")
    compound_foods = db.relationship("CompoundFood", back_populates="user", cascade="all, delete-orphan")
    diet_entries = db.relationship("DietEntry", back_populates="user", cascade="all, delete-orphan")
    water_entries = db.relationship("WaterEntry", back_populates="user", cascade="all, delete-orphan")
    weights = db.relationship("Weight", back_populates="user", cascade="all, delete-orphan")
    exercises = db.relationship("Exercise", back_populates="user", cascade="all, delete-orphan")
    templates = db.relationship("WorkoutTemplate", back_populates="user", cascade="all, delete-orphan")
    workout_instances = db.relationship("WorkoutInstance", back_populates="user", cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
