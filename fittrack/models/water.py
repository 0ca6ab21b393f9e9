from datetime import datetime
from fittrack.extensions import db


class WaterEntry(db.Model):
    __tablename__ = "water_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = db.Column(db.Date, nullable=False)
    amount = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(10), nullable=False, default="ml")
    timestamp = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="water_entries")

    __table_args__ = (
        db.Index("ix_water_entries_user_date", "user_id", "date"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "amount": self.amount,
            "unit": self.unit,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


class UserWaterGoal(db.Model):
    __tablename__ = "user_water_goals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    daily_goal = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(10), nullable=False, default="ml")
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="water_goal")

    def to_dict(self):
        return {"dailyGoal": self.daily_goal, "unit": self.unit}
