from datetime import datetime
from fittrack.extensions import db


class DietEntry(db.Model):
    __tablename__ = "diet_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id", ondelete="CASCADE"), nullable=False)
    date = db.Column(db.Date, nullable=False)
    meal_category = db.Column(db.String(20), nullable=False)
    servings = db.Column(db.Float, nullable=False, default=1)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="diet_entries")
    food = db.relationship("Food", back_populates="diet_entries")

    __table_args__ = (
        db.Index("ix_diet_entries_user_date", "user_id", "date"),
    )

    @property
    def calories(self) -> float:
        return self.food.calories * self.servings

    def to_dict(self):
        return {
            "id": self.id,
            "foodId": self.food_id,
            "food": self.food.to_dict() if self.food else None,
            "date": self.date.isoformat(),
            "mealCategory": self.meal_category,
            "servings": self.servings,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
