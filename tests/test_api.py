import unittest
import uuid

import httpx
from fastapi.testclient import TestClient

from fitcoach.api.deps import (
    get_chat_repository,
    get_coach_service,
    get_exercise_repository,
    get_plan_repository,
    get_workout_repository,
)
from fitcoach.main import app
from fitcoach.services.coach import CoachService
from tests.factories import (
    FakeChatHistoryRepository,
    FakeExerciseRepository,
    FakePlanRepository,
    FakeWorkoutRepository,
    Recorder,
    gemini_reply,
    make_gemini_client,
)

API = "/api/v1"
CATALOG = ["Press de Banca", "Sentadilla", "Peso Muerto", "Dominadas"]


class APITestCase(unittest.TestCase):
    """Endpoints wired to in-memory repositories and a mocked AI transport."""

    def setUp(self) -> None:
        self.workouts = FakeWorkoutRepository()
        self.exercises = FakeExerciseRepository(
            CATALOG,
            media={"Press de Banca": ["https://cdn.example.com/bench.jpg"]},
        )
        self.chat = FakeChatHistoryRepository()
        self.plans = FakePlanRepository()
        self.recorder = Recorder()
        app.dependency_overrides[get_workout_repository] = lambda: self.workouts
        app.dependency_overrides[get_exercise_repository] = lambda: self.exercises
        app.dependency_overrides[get_chat_repository] = lambda: self.chat
        app.dependency_overrides[get_plan_repository] = lambda: self.plans
        app.dependency_overrides[get_coach_service] = lambda: CoachService(make_gemini_client(self.recorder))
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def start_session(self, name: str = "Push day") -> str:
        response = self.client.post(f"{API}/sessions", json={"workout_name": name})
        self.assertEqual(response.status_code, 201)
        return response.json()["id"]

    def log_set(self, session_id: str, **fields) -> httpx.Response:
        payload = {"exercise_name": "Press de Banca", "set_number": 1, "reps": 8, "weight_kg": 60, **fields}
        return self.client.post(f"{API}/sessions/{session_id}/sets", json=payload)


class HealthTestCase(APITestCase):
    def test_health(self) -> None:
        body = self.client.get(f"{API}/health").json()
        self.assertEqual(body["status"], "ok")
        self.assertIn("ai_configured", body)

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json()["status"], "ok")


class SessionsTestCase(APITestCase):
    def test_session_lifecycle(self) -> None:
        session_id = self.start_session()
        self.assertEqual(self.log_set(session_id, rpe=7).status_code, 201)

        sets = self.client.get(f"{API}/sessions/{session_id}/sets").json()
        self.assertEqual(len(sets), 1)
        self.assertEqual(sets[0]["weight_kg"], 60)

        response = self.client.post(f"{API}/sessions/{session_id}/complete", json={"total_duration_minutes": 45})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total_duration_minutes"], 45)
        self.assertIsNotNone(response.json()["completed_at"])

    def test_complete_twice_conflicts(self) -> None:
        session_id = self.start_session()
        url = f"{API}/sessions/{session_id}/complete"
        self.assertEqual(self.client.post(url, json={"total_duration_minutes": 30}).status_code, 200)
        self.assertEqual(self.client.post(url, json={"total_duration_minutes": 30}).status_code, 409)

    def test_unknown_session(self) -> None:
        response = self.client.get(f"{API}/sessions/{uuid.uuid4()}/sets")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.log_set(str(uuid.uuid4())).status_code, 404)

    def test_set_validation(self) -> None:
        session_id = self.start_session()
        self.assertEqual(self.log_set(session_id, reps=0).status_code, 422)
        self.assertEqual(self.log_set(session_id, weight_kg=-1).status_code, 422)
        self.assertEqual(self.log_set(session_id, rpe=11).status_code, 422)

    def test_set_limit_per_exercise(self) -> None:
        session_id = self.start_session()
        for n in range(1, 11):
            self.assertEqual(self.log_set(session_id, set_number=n).status_code, 201)
        self.assertEqual(self.log_set(session_id, set_number=11).status_code, 400)
        self.assertEqual(self.log_set(session_id, exercise_name="Sentadilla").status_code, 201)

    def test_list_sessions(self) -> None:
        self.start_session("Push day")
        self.start_session("Leg day")
        names = [s["workout_name"] for s in self.client.get(f"{API}/sessions").json()]
        self.assertCountEqual(names, ["Push day", "Leg day"])

    def test_list_limit_bounds(self) -> None:
        for limit in (-1, 0, 1000):
            self.assertEqual(self.client.get(f"{API}/sessions", params={"limit": limit}).status_code, 422, limit)


class AnalyticsTestCase(APITestCase):
    def test_progress_without_sets_is_null(self) -> None:
        response = self.client.get(f"{API}/analytics/progress", params={"exercise_name": "Sentadilla"})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json())

    def test_progress(self) -> None:
        session_id = self.start_session()
        self.log_set(session_id, set_number=1, reps=10, weight_kg=50)
        self.log_set(session_id, set_number=2, reps=8, weight_kg=55)
        self.log_set(session_id, set_number=3, reps=6, weight_kg=60)

        response = self.client.get(
            f"{API}/analytics/progress", params={"exercise_name": "Press de Banca", "days": 7}
        )
        body = response.json()
        self.assertEqual(body["total_sets"], 3)
        self.assertEqual(body["max_weight"], 60)
        self.assertEqual(body["max_reps"], 10)
        self.assertEqual(body["total_volume"], 1300)
        self.assertEqual(body["workout_frequency"], 1)
        self.assertEqual(len(body["recent_sets"]), 3)

    def test_summary(self) -> None:
        self.assertIsNone(self.client.get(f"{API}/analytics/summary").json())
        session_id = self.start_session()
        self.log_set(session_id)
        self.client.post(f"{API}/sessions/{session_id}/complete", json={"total_duration_minutes": 50})

        body = self.client.get(f"{API}/analytics/summary").json()
        self.assertEqual(body["total_sessions"], 1)
        self.assertEqual(body["avg_duration_minutes"], 50)
        self.assertEqual(body["top_exercises"], ["Press de Banca"])


class ExercisesTestCase(APITestCase):
    def test_resolve(self) -> None:
        body = self.client.get(f"{API}/exercises/resolve", params={"name": "press banca"}).json()
        self.assertEqual(body["resolved_name"], "Press de Banca")
        self.assertEqual(body["matches"][0]["score"], 90.0)

    def test_resolve_no_match(self) -> None:
        body = self.client.get(f"{API}/exercises/resolve", params={"name": "zzzz qqqq"}).json()
        self.assertIsNone(body["resolved_name"])
        self.assertEqual(body["matches"], [])

    def test_media_fuzzy_lookup(self) -> None:
        for name in ("Press de Banca", "bench press"):
            media = self.client.get(f"{API}/exercises/media", params={"name": name}).json()
            self.assertEqual([m["url"] for m in media], ["https://cdn.example.com/bench.jpg"], name)

    def test_media_none(self) -> None:
        self.assertEqual(self.client.get(f"{API}/exercises/media", params={"name": "Sentadilla"}).json(), [])

    def test_create_exercise(self) -> None:
        payload = {"name": "Hip Thrust", "category": "piernas", "primary_muscles": ["glúteos"]}
        response = self.client.post(f"{API}/exercises", json=payload)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["rest_time"], 90)
        self.assertEqual(self.client.post(f"{API}/exercises", json=payload).status_code, 409)

    def test_catalog_paging_bounds(self) -> None:
        self.assertEqual(self.client.get(f"{API}/exercises", params={"skip": -1}).status_code, 422)
        self.assertEqual(self.client.get(f"{API}/exercises", params={"limit": -5}).status_code, 422)
        self.assertEqual(len(self.client.get(f"{API}/exercises", params={"limit": 2}).json()), 2)

    def test_history_newest_first(self) -> None:
        session_id = self.start_session()
        self.log_set(session_id, set_number=1, weight_kg=50)
        self.log_set(session_id, set_number=2, weight_kg=55)
        history = self.client.get(f"{API}/exercises/history", params={"name": "Press de Banca"}).json()
        self.assertEqual([s["set_number"] for s in history], [2, 1])


class PlansTestCase(APITestCase):
    PLAN = {
        "name": "Fuerza 4 semanas",
        "description": "Full body, three days a week",
        "difficulty": "intermediate",
        "duration_weeks": 4,
        "sessions_per_week": 3,
        "exercises": [
            {"day_number": 2, "exercise_name": "Peso Muerto", "sets": 3, "reps": "5", "order_index": 0},
            {"day_number": 1, "exercise_name": "Press de Banca", "sets": 4, "reps": "6-8", "order_index": 1},
            {"day_number": 1, "exercise_name": "Sentadilla", "sets": 5, "reps": "5", "order_index": 0},
        ],
    }

    def test_create_plan(self) -> None:
        response = self.client.post(f"{API}/plans", json=self.PLAN)

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["name"], "Fuerza 4 semanas")
        self.assertEqual(
            [e["exercise_name"] for e in body["exercises"]],
            ["Sentadilla", "Press de Banca", "Peso Muerto"],
        )
        self.assertEqual(body["exercises"][0]["rest_seconds"], 90)

    def test_list_plans_newest_first(self) -> None:
        self.client.post(f"{API}/plans", json={**self.PLAN, "name": "First"})
        self.client.post(f"{API}/plans", json={**self.PLAN, "name": "Second", "exercises": []})

        plans = self.client.get(f"{API}/plans").json()

        self.assertEqual([p["name"] for p in plans], ["Second", "First"])
        self.assertEqual(len(plans[1]["exercises"]), 3)
        self.assertEqual(plans[0]["exercises"], [])

    def test_plan_validation(self) -> None:
        bad_plans = [
            {**self.PLAN, "name": ""},
            {**self.PLAN, "sessions_per_week": 8},
            {**self.PLAN, "duration_weeks": 0},
            {**self.PLAN, "exercises": [{"day_number": 0, "exercise_name": "Sentadilla", "sets": 3, "reps": "5"}]},
            {**self.PLAN, "exercises": [{"day_number": 1, "exercise_name": "Sentadilla", "sets": 0, "reps": "5"}]},
        ]
        for plan in bad_plans:
            self.assertEqual(self.client.post(f"{API}/plans", json=plan).status_code, 422)
        self.assertEqual(self.plans.plans, [])


class CoachTestCase(APITestCase):
    def test_recommendation_falls_back_when_ai_fails(self) -> None:
        self.recorder.responses.append(httpx.Response(500, text="boom"))
        session_id = self.start_session()
        self.log_set(session_id, reps=8, weight_kg=60, rpe=7)

        response = self.client.get(f"{API}/coach/recommendation", params={"exercise_name": "Press de Banca"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["suggestedWeight"], 62.5)
        self.assertEqual(body["suggestedReps"], "7-9")
        self.assertEqual(body["confidenceLevel"], "medium")

    def test_recommendation_without_history(self) -> None:
        body = self.client.get(f"{API}/coach/recommendation", params={"exercise_name": "Peso Muerto"}).json()
        self.assertEqual(body["suggestedWeight"], 20)
        self.assertEqual(body["suggestedReps"], "8-12")
        self.assertEqual(self.recorder.requests, [])

    def test_progress_analysis(self) -> None:
        self.recorder.responses.append(httpx.Response(200, json=gemini_reply("Great consistency.")))
        session_id = self.start_session()
        self.log_set(session_id)
        body = self.client.get(f"{API}/coach/progress-analysis", params={"exercise_name": "Press de Banca"}).json()
        self.assertEqual(body, {"exercise_name": "Press de Banca", "analysis": "Great consistency."})

    def test_chat_stores_both_turns(self) -> None:
        self.recorder.responses.append(httpx.Response(200, json=gemini_reply("Keep your core tight.")))

        response = self.client.post(f"{API}/coach/chat", json={"message": "Squat tips?"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Keep your core tight.")
        history = self.client.get(f"{API}/coach/chat/history").json()
        self.assertEqual([m["role"] for m in history], ["ai", "user", "ai"])
        self.assertEqual(history[1]["message"], "Squat tips?")

    def test_chat_unavailable(self) -> None:
        self.recorder.responses.extend(httpx.Response(503) for _ in range(3))

        response = self.client.post(f"{API}/coach/chat", json={"message": "Squat tips?"})

        self.assertEqual(response.status_code, 503)
        history = self.client.get(f"{API}/coach/chat/history").json()
        self.assertEqual(len(history), 1)

    def test_chat_rejects_empty_message(self) -> None:
        self.assertEqual(self.client.post(f"{API}/coach/chat", json={"message": ""}).status_code, 422)

    def test_clear_history(self) -> None:
        self.recorder.responses.append(httpx.Response(200, json=gemini_reply("Sure.")))
        self.client.post(f"{API}/coach/chat", json={"message": "Hello"})

        cleared = self.client.delete(f"{API}/coach/chat/history").json()

        self.assertEqual(len(cleared), 1)
        self.assertEqual(cleared[0]["role"], "ai")


if __name__ == "__main__":
    unittest.main()
