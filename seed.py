from datetime import date

from fittrack import create_app
from fittrack.extensions import db
from fittrack.models.user import User
from fittrack.models.food import Food
from fittrack.models.exercise import Exercise
from fittrack.models.water import UserWaterGoal
from fittrack.services import compound_food_service, workout_service
from werkzeug.security import generate_password_hash

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    user = User.query.filter_by(email="demo@example.com").first()
    if not user:
        user = User(name="Demo User", email="demo@example.com",
                    password=generate_password_hash("password123"))
        db.session.add(user)
        db.session.flush()
        db.session.add(UserWaterGoal(user_id=user.id, daily_goal=2000, unit="ml"))

    def add_food(name, cal, p, c, f, size="100", unit="g", brand=None):
        food = Food.query.filter_by(user_id=user.id, name=name).first()
        if not food:
            food = Food(user_id=user.id, name=name, brand=brand, calories=cal,
                        protein=p, carbs=c, fat=f, serving_size=size, serving_unit=unit)
            db.session.add(food)
        return food

    oats = add_food("Rolled oats", 389, 16.9, 66.3, 6.9)
    egg = add_food("Egg", 78, 6.3, 0.6, 5.3, size="1", unit="large")
    banana = add_food("Banana", 89, 1.1, 22.8, 0.3)
    add_food("Chicken breast", 165, 31.0, 0.0, 3.6)
    add_food("White rice", 130, 2.7, 28.0, 0.3)

    def add_exercise(name, groups):
        ex = Exercise.query.filter_by(user_id=user.id, name=name).first()
        if not ex:
            ex = Exercise(user_id=user.id, name=name, muscle_group=groups)
            db.session.add(ex)
        return ex

    squat = add_exercise("Back Squat", "quads,glutes,hamstrings")
    bench = add_exercise("Bench Press", "chest,triceps,shoulders")
    row = add_exercise("Barbell Row", "back,biceps")

    db.session.commit()

    if not user.compound_foods:
        compound_food_service.create_compound_food(user.id, {
            "name": "Breakfast bowl",
            "servings": 2,
            "ingredients": [
                {"food_id": oats.id, "quantity": 1},
                {"food_id": egg.id, "quantity": 2},
                {"food_id": banana.id, "quantity": 1},
            ],
        })

    if not user.templates:
        template = workout_service.create_template(user.id, {
            "name": "Full Body A",
            "description": "Compound lifts, three times a week",
            "exercises": [
                {"exercise_id": squat.id, "sets": 3, "reps": 5},
                {"exercise_id": bench.id, "sets": 3, "reps": 5},
                {"exercise_id": row.id, "sets": 3, "reps": 8},
            ],
        })
        workout_service.schedule_workout(user.id, template.id, date.today())

    print("Seeded demo@example.com / password123")
