import pytest

from fittrack.services.water_service import convert


@pytest.mark.parametrize("a,b", [("ml", "oz"), ("oz", "cups"), ("cups", "ml")])
def test_conversion_round_trip(a, b):
    assert convert(convert(750, a, b), b, a) == pytest.approx(750)


def test_conversion_factors():
    assert convert(1, "cups", "ml") == 240
    assert convert(1, "oz", "ml") == pytest.approx(29.5735)


def test_summary_without_goal_uses_default_and_zero_progress(client, headers):
    client.post("/api/water-entries", headers=headers, json={"amount": 1, "unit": "cups", "date": "2026-10-19"})
    client.post("/api/water-entries", headers=headers, json={"amount": 8, "unit": "oz", "date": "2026-10-19"})

    body = client.get("/api/water-entries?date=2026-10-19", headers=headers).get_json()
    assert body["goal"] == 2000
    assert body["unit"] == "ml"
    assert body["total"] == 477
    assert body["progress"] == 0
    assert len(body["entries"]) == 2


def test_summary_converts_into_goal_unit(client, headers):
    r = client.post("/api/water-goal", headers=headers, json={"dailyGoal": 64, "unit": "oz"})
    assert r.status_code == 200, r.data

    client.post("/api/water-entries", headers=headers, json={"amount": 240, "unit": "ml", "date": "2026-10-19"})
    client.post("/api/water-entries", headers=headers, json={"amount": 1, "unit": "cups", "date": "2026-10-19"})

    body = client.get("/api/water-entries?date=2026-10-19", headers=headers).get_json()
    assert body["unit"] == "oz"
    assert body["total"] == 16
    assert body["progress"] == 25


def test_goal_default_follows_preferred_unit(client, headers):
    assert client.get("/api/water-goal", headers=headers).get_json() == {"dailyGoal": 2000, "unit": "ml"}

    client.put("/api/user/preferences", headers=headers, json={"defaultWeightUnit": "kg", "defaultWaterUnit": "cups"})
    assert client.get("/api/water-goal", headers=headers).get_json() == {"dailyGoal": 8, "unit": "cups"}


def test_water_validation_and_delete(client, headers, other_headers):
    r = client.post("/api/water-entries", headers=headers, json={"amount": 250, "unit": "litres"})
    assert r.status_code == 400

    r = client.post("/api/water-entries", headers=headers, json={"amount": 250, "unit": "ml"})
    entry = r.get_json()
    assert client.delete(f"/api/water-entries/{entry['id']}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/water-entries/{entry['id']}", headers=headers).status_code == 200


def test_listing_requires_a_valid_date(client, headers):
    client.post("/api/water-entries", headers=headers, json={"amount": 500, "unit": "ml"})

    r = client.get("/api/water-entries", headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"

    r = client.get("/api/water-entries?date=not-a-date", headers=headers)
    assert r.status_code == 400
