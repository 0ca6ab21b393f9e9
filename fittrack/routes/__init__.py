from .home_routes import home_bp
from .auth_routes import auth_bp
from .user_routes import user_bp
from .food_routes import food_bp
from .diet_routes import diet_bp
from .water_routes import water_bp
from .weight_routes import weight_bp
from .workout_routes import workout_bp
from .report_routes import report_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(diet_bp)
    app.register_blueprint(water_bp)
    app.register_blueprint(weight_bp)
    app.register_blueprint(workout_bp)
    app.register_blueprint(report_bp)
