"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from fittrack.api.app import create_app
from tests.conftest import FakeGeminiClient, gemini_text_response

_ANSWER = '{"name": "Kumpir", "calories": 600, "protein": 15, "carbs": 70, "fat": 28}'


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_resolve_from_catalog(container, gemini_client: FakeGeminiClient) -> None:
    response = _client(container).post(
        "/foods/resolve", json={"description": "3 tane elma"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "name": "3x Elma (1 adet)",
        "calories": 285,
        "protein": 3,
        "carbs": 75,
        "fat": 0,
    }
    assert gemini_client.calls == []


def test_resolve_from_form_fields(container) -> None:
    response = _client(container).post(
        "/foods/resolve",
        json={"amount": 2, "unit": "adet", "name": "Elma", "form_id": "meal"},
    )

    assert response.status_code == 200
    assert response.json()["calories"] == 190


def test_resolve_with_ai(container, gemini_client: FakeGeminiClient) -> None:
    gemini_client.default = gemini_text_response(_ANSWER)

    response = _client(container).post("/foods/resolve", json={"description": "zxqv jkwp"})

    assert response.status_code == 200
    assert response.json()["name"] == "Kumpir"


def test_resolve_error_statuses(container, gemini_client: FakeGeminiClient) -> None:
    client = _client(container)

    blank = client.post("/foods/resolve", json={"description": "  "})
    failed = client.post("/foods/resolve", json={"description": "zxqv jkwp"})
    gemini_client.default = gemini_text_response("Bilmiyorum.")
    unreadable = client.post("/foods/resolve", json={"description": "zxqv jkwp"})
    container.user_data_service.fallback_api_key = None
    missing_key = client.post("/foods/resolve", json={"description": "qqq www"})

    assert blank.status_code == 400
    assert failed.status_code == 502
    assert failed.json()["detail"] == "models/gemini-2.0-flash is not found"
    assert unreadable.status_code == 422
    assert unreadable.json()["detail"].startswith("Unreadable AI response")
    assert missing_key.status_code == 424


def test_resolve_photo(container, gemini_client: FakeGeminiClient) -> None:
    gemini_client.default = gemini_text_response(_ANSWER)

    response = _client(container).post(
        "/foods/photo", json={"image_base64": "aGVsbG8=", "mime_type": "image/png"}
    )

    assert response.status_code == 200
    assert response.json()["calories"] == 600


def test_resolve_photo_upload(container, gemini_client: FakeGeminiClient) -> None:
    gemini_client.default = gemini_text_response(_ANSWER)
    client = _client(container)

    response = client.post(
        "/foods/photo/raw",
        content=b"\x89PNG\r\n\x1a\nimage-data",
        headers={"Content-Type": "image/png"},
    )
    empty = client.post("/foods/photo/raw", content=b"")

    assert response.status_code == 200
    assert response.json()["calories"] == 600
    assert empty.status_code == 400


def test_log_food_stores_resolved_meal(container, gemini_client: FakeGeminiClient) -> None:
    client = _client(container)

    created = client.post(
        "/foods/log",
        json={"description": "3 tane elma", "meal_time": "08:30", "date": "2026-01-02"},
    )
    listed = client.get("/meals", params={"date": "2026-01-02"})

    assert created.status_code == 201
    assert created.json()["name"] == "3x Elma (1 adet)"
    assert created.json()["calories"] == 285
    assert created.json()["meal_time"] == "08:30"
    assert listed.json()["meals"] == [created.json()]
    assert gemini_client.calls == []


def test_log_food_failure_stores_nothing(container) -> None:
    client = _client(container)

    response = client.post("/foods/log", json={"description": " "})

    assert response.status_code == 400
    assert client.get("/meals").json() == {"meals": []}


def test_tracked_forms_stay_bounded(container) -> None:
    app = create_app(container, max_tracked_forms=4)
    client = TestClient(app)

    for index in range(10):
        response = client.post(
            "/foods/resolve", json={"description": "elma", "form_id": f"form-{index}"}
        )
        assert response.status_code == 200

    assert len(app.state.form_generations) == 4
    assert "form-0" not in app.state.form_generations
    assert "form-9" in app.state.form_generations


def test_portion_units(container) -> None:
    response = _client(container).get(
        "/foods/units", params={"name": "Mercimek Çorbası", "current": "bardak"}
    )

    assert response.json() == {
        "category": "kase_gram",
        "units": [
            {"value": "kase", "label": "Kase"},
            {"value": "bardak", "label": "Bardak"},
            {"value": "gram", "label": "Gram (g)"},
        ],
        "selected": "bardak",
    }


def test_meal_endpoints(container) -> None:
    client = _client(container)

    created = client.post(
        "/meals",
        json={"name": "Menemen", "calories": 300, "protein": 15, "date": "2026-01-02"},
    )
    rejected = client.post("/meals", json={"name": "Su"})
    totals = client.get("/meals/totals", params={"date": "2026-01-02"})
    listed = client.get("/meals", params={"date": "2026-01-02"})
    deleted = client.delete(f"/meals/{created.json()['id']}")

    assert created.status_code == 201
    assert rejected.status_code == 400
    assert totals.json()["calories"] == 300
    assert totals.json()["remaining"] == 1700
    assert listed.json()["meals"][0]["name"] == "Menemen"
    assert deleted.status_code == 200
    assert client.get("/meals").json() == {"meals": []}
    assert len(client.get("/meals/history", params={"days": 3}).json()["days"]) == 3


def test_program_flow_and_recommendations(container) -> None:
    client = _client(container)

    assert client.get("/recommendations").json()["source"] == "none"

    exercise = client.post(
        "/programs/current/exercises",
        json={"exercise": "Squat", "target_sets": 5, "target_reps": 5},
    )
    client.post(
        "/programs/logs",
        json={"exercise": "Squat", "weight": 60, "sets": 3, "reps": 8, "rpe": 8},
    )
    report = client.get("/recommendations").json()

    assert exercise.status_code == 201
    assert report["source"] == "rules"
    assert report["recommendations"][0]["suggestedWeight"] == 57.5
    assert report["recommendations"][0]["action"] == "decrease"
    assert len(client.get("/programs/logs").json()["logs"]) == 1

    programs = client.get("/programs").json()
    only_id = programs["programs"][0]["id"]
    assert client.delete(f"/programs/{only_id}").status_code == 400

    added = client.post("/programs", json={}).json()
    assert added["name"] == "Program 2"
    selected = client.post(f"/programs/{only_id}/select").json()
    assert selected["exercises"][0]["exercise"] == "Squat"


def test_rpe_description(container) -> None:
    response = _client(container).get("/rpe/8")

    assert response.json()["description"] == "2 tekrar daha yapılabilirdi."


def test_workouts_profile_and_reset(container) -> None:
    client = _client(container)

    client.post(
        "/workouts",
        json={"exercise": "Squat", "weight": 90, "sets": 1, "reps": 3, "date": "2026-01-01"},
    )
    client.put(
        "/profile",
        json={"height": 180, "age": 30, "body_weight": 82, "calorie_goal": 2500},
    )
    saved = client.put("/settings/api-key", json={"api_key": "user-key"})

    assert saved.status_code == 200
    assert container.user_data_service.get_api_key() == "user-key"
    assert client.get("/workouts").json()["exercises"] == ["Squat"]
    assert client.get("/workouts/records").json()["records"][0]["weight"] == 90
    assert client.get("/profile").json()["calorie_goal"] == 2500
    export = client.get("/export").json()
    assert export["profile"]["calorieGoal"] == 2500

    assert client.post("/reset").json() == {"status": "cleared"}
    assert client.get("/workouts").json()["workouts"] == []
    assert client.get("/profile").json()["calorie_goal"] == 2000
