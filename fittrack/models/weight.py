from datetime import datetime
from fittrack.extensions import db


class Weight(db.Model):
    __tablename__ = "weights"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = db.Column(db.Date, nullable=False)
    weight = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(10), nullable=False, default="kg")
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="weights")

    __table_args__ = (
        db.Index("ix_weights_user_date", "user_id", "date"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "weight": self.weight,
            "unit": self.unit,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
