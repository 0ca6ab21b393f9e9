def test_preferences_default_and_update(client, headers):
    r = client.get("/api/user/preferences", headers=headers)
    assert r.get_json() == {"defaultWeightUnit": "kg", "defaultWaterUnit": "ml"}

    r = client.put("/api/user/preferences", headers=headers, json={"defaultWeightUnit": "lbs", "defaultWaterUnit": "oz"})
    assert r.status_code == 200, r.data
    assert client.get("/api/user/preferences", headers=headers).get_json() == {
        "defaultWeightUnit": "lbs", "defaultWaterUnit": "oz",
    }

    r = client.put("/api/user/preferences", headers=headers, json={"defaultWeightUnit": "stone", "defaultWaterUnit": "oz"})
    assert r.status_code == 400
    assert r.get_json()["error"]["message"] == "Invalid weight unit"


def test_profile(client, headers):
    r = client.patch("/api/user/profile", headers=headers, json={"name": "Renamed"})
    assert r.status_code == 200, r.data
    body = client.get("/api/user/profile", headers=headers).get_json()
    assert body["name"] == "Renamed"
    assert body["email"] == "user@example.com"


def test_change_password(client, headers):
    assert client.get("/api/user/has-password", headers=headers).get_json() == {"hasPassword": True}

    r = client.post("/api/user/change-password", headers=headers,
                    json={"currentPassword": "wrong-password", "newPassword": "new-password"})
    assert r.status_code == 401

    r = client.post("/api/user/change-password", headers=headers,
                    json={"currentPassword": "password123", "newPassword": "short"})
    assert r.status_code == 400
    assert r.get_json()["error"]["message"] == "New password must be at least 8 characters"

    r = client.post("/api/user/change-password", headers=headers,
                    json={"currentPassword": "password123", "newPassword": "new-password"})
    assert r.status_code == 200, r.data

    r = client.post("/api/auth/login", json={"email": "user@example.com", "password": "new-password"})
    assert r.status_code == 200


def test_export(client, headers, make_food, make_workout):
    make_food(headers, name="Oats")
    make_workout(headers)
    client.post("/api/weights", headers=headers, json={"weight": 70, "unit": "kg"})

    r = client.get("/api/user/export", headers=headers)
    assert r.status_code == 200
    assert "attachment; filename=\"fitness-data-export-" in r.headers["Content-Disposition"]
    body = r.get_json()
    assert body["user"]["email"] == "user@example.com"
    assert body["statistics"]["totalFoods"] == 1
    assert body["statistics"]["totalWorkouts"] == 1
    assert body["statistics"]["totalExercises"] == 2
    assert len(body["weights"]) == 1
    assert body["waterGoal"] is None


def test_delete_account_removes_everything(app, client, headers, other_headers, make_food, make_workout):
    a = make_food(headers, name="A")
    client.post("/api/compound-foods", headers=headers, json={"name": "R", "ingredients": [{"foodId": a["id"]}]})
    client.post("/api/diet-entries", headers=headers, json={"foodId": a["id"], "date": "2026-10-19", "mealCategory": "lunch"})
    client.post("/api/water-goal", headers=headers, json={"dailyGoal": 2500, "unit": "ml"})
    make_workout(headers)
    make_food(other_headers, name="Kept")

    r = client.delete("/api/user/account", headers=headers)
    assert r.status_code == 200, r.data

    # token outlives the account but no longer authenticates
    assert client.get("/api/foods", headers=headers).status_code == 401

    from fittrack.models import Food, CompoundFood, DietEntry, WorkoutInstance, ExerciseSet, UserWaterGoal
    with app.app_context():
        assert [f.name for f in Food.query.all()] == ["Kept"]
        assert CompoundFood.query.count() == 0
        assert DietEntry.query.count() == 0
        assert WorkoutInstance.query.count() == 0
        assert ExerciseSet.query.count() == 0
        assert UserWaterGoal.query.count() == 0
