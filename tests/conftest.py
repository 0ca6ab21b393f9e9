import pytest

from fittrack import create_app
from fittrack.extensions import db


@pytest.fixture()
def app():
    app = create_app("fittrack.config.TestConfig")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def _register(client, email, password="password123", name="Test User"):
    r = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert r.status_code == 201, r.data
    return {"Authorization": f"Bearer {r.get_json()['token']}"}


@pytest.fixture()
def headers(client):
    return _register(client, "user@example.com")


@pytest.fixture()
def other_headers(client):
    return _register(client, "other@example.com", name="Other User")


@pytest.fixture()
def make_food(client):
    def _make(headers, name="Food", calories=100, **fields):
        r = client.post("/api/foods", headers=headers, json={"name": name, "calories": calories, **fields})
        assert r.status_code == 201, r.data
        return r.get_json()
    return _make


@pytest.fixture()
def make_workout(client):
    """Create exercises, a template from ``plan`` [(sets, reps), ...] and schedule it."""
    def _make(headers, plan=((3, 10), (2, 8)), scheduled_date="2026-10-19"):
        exercises = []
        for i, (sets, reps) in enumerate(plan):
            r = client.post("/api/exercises", headers=headers,
                            json={"name": f"Exercise {i + 1}", "muscleGroup": ["chest", "triceps"]})
            assert r.status_code == 201, r.data
            exercises.append({"exerciseId": r.get_json()["id"], "sets": sets, "reps": reps})

        r = client.post("/api/templates", headers=headers, json={"name": "Push Day", "exercises": exercises})
        assert r.status_code == 201, r.data
        template = r.get_json()

        r = client.post("/api/workout-instances", headers=headers,
                        json={"templateId": template["id"], "scheduledDate": scheduled_date})
        assert r.status_code == 201, r.data
        return r.get_json()
    return _make
