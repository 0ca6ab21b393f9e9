from fittrack.extensions import db

DEFAULT_WEIGHT_UNIT = "kg"
DEFAULT_WATER_UNIT = "ml"


class UserPreferences(db.Model):
    __tablename__ = "user_preferences"

    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    default_weight_unit = db.Column(db.String(10), nullable=False, default=DEFAULT_WEIGHT_UNIT)
    default_water_unit = db.Column(db.String(10), nullable=False, default=DEFAULT_WATER_UNIT)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    user = db.relationship("User", back_populates="preferences")

    def to_dict(self):
        return {
            "defaultWeightUnit": self.default_weight_unit,
            "defaultWaterUnit": self.default_water_unit,
        }
