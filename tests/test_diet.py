from datetime import date

from fittrack.services.diet_service import group_entries


def test_daily_log_groups_by_meal_and_rounds_once(client, headers, make_food):
    a = make_food(headers, name="Stew", calories=333)
    b = make_food(headers, name="Toast", calories=100)

    for food_id, category, servings in [(b["id"], "breakfast", 1), (a["id"], "lunch", 0.5)]:
        r = client.post("/api/diet-entries", headers=headers, json={
            "foodId": food_id, "date": "2026-10-19", "mealCategory": category, "servings": servings,
        })
        assert r.status_code == 201, r.data

    r = client.get("/api/diet-entries?date=2026-10-19", headers=headers)
    assert r.status_code == 200
    body = r.get_json()
    assert set(body["entries"]) == {"breakfast", "lunch", "snack", "dinner"}
    assert body["totals"]["lunch"] == 166.5
    assert body["totals"]["snack"] == 0
    # 100 + 166.5 rounds half up
    assert body["dailyTotal"] == 267
    assert body["entries"]["lunch"][0]["food"]["name"] == "Stew"


def test_empty_day(client, headers):
    r = client.get("/api/diet-entries?date=2026-01-01", headers=headers)
    body = r.get_json()
    assert body["dailyTotal"] == 0
    assert all(items == [] for items in body["entries"].values())


def test_diet_entry_validation(client, headers, other_headers, make_food):
    food = make_food(headers)
    theirs = make_food(other_headers)

    r = client.get("/api/diet-entries", headers=headers)
    assert r.status_code == 400

    r = client.post("/api/diet-entries", headers=headers, json={
        "foodId": food["id"], "date": "2026-10-19", "mealCategory": "brunch",
    })
    assert r.status_code == 400
    assert r.get_json()["error"]["message"] == "Invalid meal category"

    r = client.post("/api/diet-entries", headers=headers, json={
        "foodId": theirs["id"], "date": "2026-10-19", "mealCategory": "lunch",
    })
    assert r.status_code == 404


def test_update_and_delete_entry(client, headers, make_food):
    food = make_food(headers, calories=200)
    r = client.post("/api/diet-entries", headers=headers, json={
        "foodId": food["id"], "date": "2026-10-19T08:30:00.000Z", "mealCategory": "breakfast",
    })
    entry = r.get_json()
    assert entry["date"] == "2026-10-19"
    assert entry["servings"] == 1

    r = client.patch(f"/api/diet-entries/{entry['id']}", headers=headers, json={"servings": 2, "mealCategory": "dinner"})
    assert r.status_code == 200, r.data

    body = client.get("/api/diet-entries?date=2026-10-19", headers=headers).get_json()
    assert body["totals"]["dinner"] == 400
    assert body["entries"]["breakfast"] == []

    assert client.delete(f"/api/diet-entries/{entry['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/diet-entries/{entry['id']}", headers=headers).status_code == 404


def test_group_entries_total_independent_of_grouping():
    from types import SimpleNamespace

    def entry(calories, servings, category):
        return SimpleNamespace(food=SimpleNamespace(calories=calories), servings=servings,
                               meal_category=category, calories=calories * servings)

    entries = [entry(95, 1.3, "breakfast"), entry(95, 1.3, "dinner"), entry(10, 0.25, "snack")]
    summary = group_entries(entries)
    assert summary["daily_total"] == 250
    assert summary["totals"]["lunch"] == 0
