from datetime import date


def test_dashboard_summarises_today(client, headers, make_food, make_workout):
    today = date.today().isoformat()

    client.post("/api/weights", headers=headers, json={"weight": 80, "unit": "kg", "date": "2026-01-01"})
    r = client.get("/api/dashboard", headers=headers)
    body = r.get_json()
    assert body["todayWeight"] is None
    assert body["latestWeight"]["weight"] == 80

    client.post("/api/weights", headers=headers, json={"weight": 79.5, "unit": "kg"})
    food = make_food(headers, calories=333)
    client.post("/api/diet-entries", headers=headers, json={
        "foodId": food["id"], "date": today, "mealCategory": "lunch", "servings": 0.5,
    })
    client.post("/api/water-entries", headers=headers, json={"amount": 8, "unit": "oz", "date": today})
    workout = make_workout(headers, scheduled_date=today)
    set_id = workout["exercises"][0]["sets"][0]["id"]
    client.patch(f"/api/exercise-sets/{set_id}", headers=headers, json={"completed": True})

    r = client.get("/api/dashboard", headers=headers)
    assert r.status_code == 200, r.data
    body = r.get_json()
    assert body["todayWeight"]["weight"] == 79.5
    assert body["latestWeight"] is None
    assert len(body["recentWeights"]) == 2
    assert body["todayCalories"] == 167
    assert body["todayWater"] == 237
    assert body["waterUnit"] == "ml"
    assert body["stats"] == {"exercises": 2, "templates": 1, "weightEntries": 2, "foods": 1}

    [todays] = body["todaysWorkouts"]
    assert todays["status"] == "in-progress"
    assert (todays["totalSets"], todays["completedSets"], todays["progressPercentage"]) == (5, 1, 20)
    assert [a["type"] for a in body["recentActivities"]] == ["weight", "weight"]


def test_recent_activities_include_completed_workouts(client, headers, make_workout):
    workout = make_workout(headers)
    client.patch(f"/api/workout-instances/{workout['id']}", headers=headers, json={"status": "completed"})
    for w in (70, 71, 72, 73):
        client.post("/api/weights", headers=headers, json={"weight": w, "unit": "kg"})

    activities = client.get("/api/dashboard", headers=headers).get_json()["recentActivities"]
    assert len(activities) == 4
    assert sorted(a["type"] for a in activities) == ["weight", "weight", "weight", "workout"]
    assert [a["date"] for a in activities] == sorted((a["date"] for a in activities), reverse=True)
