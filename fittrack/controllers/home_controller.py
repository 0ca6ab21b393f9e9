import logging
from flask import jsonify
from fittrack.extensions import db

logger = logging.getLogger(__name__)


def home_index():
    return jsonify({"message": "FitTrack API"})


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
