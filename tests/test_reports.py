from datetime import date, datetime

from fittrack.services.report_service import generate_markdown

ALL = {"include_weight": True, "include_workouts": True, "include_diet": True, "include_water": True}
GENERATED_AT = datetime(2026, 10, 19, 14, 5, 7)


def _data(**overrides):
    data = {
        "date": date(2026, 10, 19),
        "user": {"name": "Ana", "email": "ana@example.com"},
        "weight": None,
        "workouts": [],
        "diet": {"breakfast": [], "lunch": [], "snack": [], "dinner": []},
        "total_calories": 0,
        "water": None,
    }
    data.update(overrides)
    return data


def test_empty_workouts_section():
    md = generate_markdown(_data(), {"include_workouts": True}, generated_at=GENERATED_AT)
    assert md == "\n".join([
        "# Fitness Report - October 19, 2026",
        "",
        "**Generated for:** Ana",
        "",
        "---",
        "",
        "## 💪 Workouts",
        "",
        "*No workouts scheduled for this day.*",
        "",
        "---",
        "",
        "*Report generated on Oct 19, 2026, 2:05:07 PM*",
    ])


def test_sections_in_fixed_order_with_no_data_lines():
    md = generate_markdown(_data(user={"name": None, "email": "ana@example.com"}), ALL, generated_at=GENERATED_AT)
    assert "**Generated for:** ana@example.com" in md
    headings = [line for line in md.splitlines() if line.startswith("## ")]
    assert headings == ["## 📊 Weight", "## 💪 Workouts", "## 🍎 Nutrition", "## 💧 Hydration"]
    assert "*No weight entry recorded for this day.*" in md
    assert "*No food entries recorded for this day.*" in md
    assert "*No water intake recorded for this day.*" in md
    assert "**Total Calories:** 0 cal" in md


def test_workout_set_lines():
    workout = {
        "name": "Push Day",
        "status": "completed",
        "completed_date": datetime(2026, 10, 19, 18, 30),
        "exercises": [
            {"name": "Bench Press", "sets": [
                {"set_number": 1, "target_reps": 10, "actual_reps": 10, "weight": 50.0, "unit": "kg", "completed": True},
                {"set_number": 2, "target_reps": 10, "actual_reps": None, "weight": None, "unit": "kg", "completed": False},
            ]},
            {"name": "Dips", "sets": []},
        ],
    }
    md = generate_markdown(_data(workouts=[workout]), {"include_workouts": True}, generated_at=GENERATED_AT)
    assert "### Push Day" in md
    assert "- **Status:** Completed" in md
    assert "- **Completed:** 6:30 PM" in md
    assert "- ✓ Set 1: 10 reps @ 50 kg (Target: 10)" in md
    assert "- ○ Set 2: — reps (Target: 10)" in md
    assert "#### Dips\n\n*No sets logged*" in md


def test_diet_and_water_lines():
    diet = {
        "breakfast": [{"food_name": "Oats", "servings": 1.5, "calories": 584}],
        "lunch": [],
        "snack": [{"food_name": "Apple", "servings": 1.0, "calories": 95}],
        "dinner": [],
    }
    water = {"total": 1500, "unit": "ml", "goal": 2000.0, "progress": 75}
    md = generate_markdown(
        _data(diet=diet, total_calories=679, water=water, weight={"weight": 72.5, "unit": "kg", "notes": "morning"}),
        ALL,
        generated_at=GENERATED_AT,
    )
    assert "- **Weight:** 72.5 kg" in md
    assert "- **Notes:** morning" in md
    assert "**Total Calories:** 679 cal" in md
    assert "### Breakfast\n\n- Oats: 1.5 serving(s) — 584 cal" in md
    assert "### Snacks\n\n- Apple: 1 serving(s) — 95 cal" in md
    assert "### Lunch" not in md
    assert "- **Total Water:** 1500 ml" in md
    assert "- **Daily Goal:** 2000 ml" in md
    assert "- **Progress:** 75%" in md


def test_generate_endpoint(client, headers, make_food, make_workout):
    food = make_food(headers, name="Oats", calories=389)
    client.post("/api/diet-entries", headers=headers, json={
        "foodId": food["id"], "date": "2026-10-19", "mealCategory": "breakfast", "servings": 1.5,
    })
    client.post("/api/weights", headers=headers, json={"weight": 72.5, "unit": "kg", "date": "2026-10-19"})
    client.post("/api/water-entries", headers=headers, json={"amount": 2, "unit": "cups", "date": "2026-10-19"})
    make_workout(headers)

    r = client.post("/api/reports/generate", headers=headers, json={"date": "2026-10-19"})
    assert r.status_code == 200, r.data
    body = r.get_json()
    assert body["filename"] == "fitness-report-2026-10-19.md"
    md = body["markdown"]
    assert md.startswith("# Fitness Report - October 19, 2026")
    assert "- **Weight:** 72.5 kg" in md
    assert "### Push Day" in md
    assert "- Oats: 1.5 serving(s) — 584 cal" in md
    assert "- **Total Water:** 480 ml" in md
    # no stored goal, so no goal lines
    assert "Daily Goal" not in md


def test_generate_endpoint_respects_options(client, headers):
    r = client.post("/api/reports/generate", headers=headers,
                    json={"date": "2026-10-19", "options": {"includeWater": True}})
    md = r.get_json()["markdown"]
    assert "## 💧 Hydration" in md
    assert "## 📊 Weight" not in md
    assert "## 💪 Workouts" not in md

    r = client.post("/api/reports/generate", headers=headers, json={"options": {}})
    assert r.status_code == 400
