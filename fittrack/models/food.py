from datetime import datetime
from fittrack.extensions import db


def _num(value):
    return float(value) if value is not None else None


class Food(db.Model):
    __tablename__ = "foods"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    brand = db.Column(db.String(200), nullable=True)
    barcode = db.Column(db.String(64), nullable=True, index=True)
    calories = db.Column(db.Integer, nullable=False, default=0)
    protein = db.Column(db.Float, nullable=True)
    carbs = db.Column(db.Float, nullable=True)
    fat = db.Column(db.Float, nullable=True)
    serving_size = db.Column(db.String(50), nullable=True)
    serving_unit = db.Column(db.String(50), nullable=True)
    source = db.Column(db.String(20), nullable=False, default="manual")
    is_compound = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="foods")
    compound_food = db.relationship("CompoundFood", uselist=False, back_populates="food")
    diet_entries = db.relationship("DietEntry", back_populates="food", cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "barcode": self.barcode,
            "calories": self.calories,
            "protein": _num(self.protein),
            "carbs": _num(self.carbs),
            "fat": _num(self.fat),
            "servingSize": self.serving_size,
            "servingUnit": self.serving_unit,
            "source": self.source,
            "isCompound": self.is_compound,
            "compoundFoodId": self.compound_food.id if self.compound_food else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Food {self.id}: {self.name}>"


class CompoundFood(db.Model):
    __tablename__ = "compound_foods"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id", ondelete="SET NULL"), unique=True, nullable=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    servings = db.Column(db.Float, nullable=False, default=1)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="compound_foods")
    food = db.relationship("Food", back_populates="compound_food", foreign_keys=[food_id])
    ingredients = db.relationship(
        "CompoundFoodIngredient",
        back_populates="compound_food",
        cascade="all, delete-orphan",
        order_by="CompoundFoodIngredient.id",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "description": self.description,
            "servings": self.servings,
            "food": self.food.to_dict() if self.food else None,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


class CompoundFoodIngredient(db.Model):
    __tablename__ = "compound_food_ingredients"

    id = db.Column(db.Integer, primary_key=True)
    compound_food_id = db.Column(
        db.Integer, db.ForeignKey("compound_foods.id", ondelete="CASCADE"), nullable=False, index=True
    )
    ingredient_food_id = db.Column(db.Integer, db.ForeignKey("foods.id"), nullable=False)
    quantity = db.Column(db.Float, nullable=False, default=1)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    compound_food = db.relationship("CompoundFood", back_populates="ingredients")
    ingredient_food = db.relationship("Food", foreign_keys=[ingredient_food_id])

    def to_dict(self):
        return {
            "id": self.id,
            "compoundFoodId": self.compound_food_id,
            "ingredientFoodId": self.ingredient_food_id,
            "ingredientFood": self.ingredient_food.to_dict() if self.ingredient_food else None,
            "quantity": self.quantity,
        }
