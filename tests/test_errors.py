from fittrack.extensions import db
from fittrack.models.user import User


def test_unexpected_error_rolls_back_and_hides_details(app):
    @app.get("/boom")
    def boom():
        db.session.add(User(email="ghost@example.com"))
        db.session.flush()
        raise RuntimeError("database password is hunter2")

    r = app.test_client().get("/boom")
    assert r.status_code == 500
    assert r.get_json() == {"error": {"code": "INTERNAL_ERROR", "message": "Something went wrong"}}

    with app.app_context():
        assert User.query.filter_by(email="ghost@example.com").first() is None


def test_unknown_route_uses_error_body(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"
