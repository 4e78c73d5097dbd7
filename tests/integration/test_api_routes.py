"""
API integration tests using FastAPI TestClient with in-memory DB.
"""
import pytest
from fastapi.testclient import TestClient

from cringeshield.config import settings


@pytest.mark.integration
class TestHealthRoutes:
    """Health and root endpoints (no auth)."""

    def test_root_returns_healthy(self, api_client: TestClient):
        response = api_client.get("/")
        assert response.status_code == 200
        assert "Healthy" in response.json()["message"]

    def test_request_id_echoed(self, api_client: TestClient):
        response = api_client.get("/", headers={"x-request-id": "abc123"})
        assert response.headers.get("x-request-id") == "abc123"


@pytest.mark.integration
class TestAuthRoutes:
    """Auth: register, login, logout, current user, account deletion."""

    def test_register_sets_cookie(self, api_client: TestClient, register):
        response = register("newuser@example.com")
        assert "access_token" in response.cookies
        me = api_client.get("/api/auth/current-user")
        assert me.status_code == 200
        assert me.json()["email"] == "newuser@example.com"
        assert me.json()["isAdmin"] is False

    def test_register_duplicate_fails(self, api_client: TestClient, register):
        register("dup@example.com")
        response = api_client.post(
            "/api/auth/register",
            json={"email": "DUP@example.com", "password": "other12", "confirmPassword": "other12"},
        )
        assert response.status_code == 400

    def test_register_concurrent_duplicate_answers_400(self, api_client: TestClient, register, monkeypatch):
        register("race@example.com")
        api_client.cookies.clear()
        # The other request inserted the row after our existence check ran.
        monkeypatch.setattr("cringeshield.routes.auth_routes.get_user_by_email", lambda email, db: None)
        response = api_client.post(
            "/api/auth/register",
            json={"email": "race@example.com", "password": "secret12", "confirmPassword": "secret12"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"
        assert "access_token" not in response.cookies

    def test_register_password_mismatch(self, api_client: TestClient):
        response = api_client.post(
            "/api/auth/register",
            json={"email": "x@example.com", "password": "abcdef", "confirmPassword": "abcdeg"},
        )
        assert response.status_code == 400

    def test_login_success(self, api_client: TestClient, register):
        register("login@example.com", "mypass123")
        api_client.post("/api/auth/logout")
        api_client.cookies.clear()
        response = api_client.post("/api/auth/login", json={"email": "login@example.com", "password": "mypass123"})
        assert response.status_code == 200
        assert response.json()["tokenSet"] is True

    def test_login_wrong_password_fails(self, api_client: TestClient, register):
        register("wrong@example.com", "correct1")
        api_client.cookies.clear()
        response = api_client.post("/api/auth/login", json={"email": "wrong@example.com", "password": "nope"})
        assert response.status_code == 401

    def test_current_user_without_cookie(self, api_client: TestClient):
        assert api_client.get("/api/auth/current-user").status_code == 401

    def test_delete_account_cascades(self, auth_client: TestClient, register):
        auth_client.post("/api/challenge-progress", json={"dayNumber": 1})
        auth_client.post("/api/weekly-challenge", json={"tier": "shy_starter"})
        auth_client.post("/api/weekly-challenge/complete", json={"promptId": "shy_w1_p1"})
        response = auth_client.delete("/api/auth/account")
        assert response.status_code == 200
        auth_client.cookies.clear()

        register("test@example.com")
        assert auth_client.get("/api/challenge-progress").json() == []
        assert auth_client.get("/api/weekly-challenge").json() == {"status": "not_started"}


@pytest.mark.integration
class TestAuthRequired:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/challenge-progress"),
            ("post", "/api/challenge-progress"),
            ("get", "/api/challenge-progress/summary"),
            ("get", "/api/challenge-badges"),
            ("post", "/api/challenge-badges/check-and-award"),
            ("get", "/api/weekly-challenge"),
            ("post", "/api/weekly-challenge"),
            ("post", "/api/weekly-challenge/complete"),
            ("get", "/api/weekly-badges"),
            ("post", "/api/weekly-badges/check-and-award"),
            ("get", "/api/sessions"),
            ("get", "/api/user/stats"),
            ("get", "/api/admin/stats"),
        ],
    )
    def test_unauthorized_without_cookie(self, api_client: TestClient, method, path):
        response = getattr(api_client, method)(path, **({"json": {}} if method == "post" else {}))
        assert response.status_code == 401


@pytest.mark.integration
class TestChallengeRoutes:
    """30-day challenge: days, progress and milestone badges."""

    def test_challenge_days_catalog(self, api_client: TestClient):
        response = api_client.get("/api/challenge-days")
        assert response.status_code == 200
        assert [d["day"] for d in response.json()] == list(range(1, 31))

    def test_complete_day_idempotent(self, auth_client: TestClient):
        first = auth_client.post("/api/challenge-progress", json={"dayNumber": 5})
        assert first.status_code == 201
        second = auth_client.post("/api/challenge-progress", json={"dayNumber": 5})
        assert second.status_code == 201
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["completedAt"] == first.json()["completedAt"]
        assert len(auth_client.get("/api/challenge-progress").json()) == 1

    @pytest.mark.parametrize("day", [0, 31, "5", 2.5, None, True])
    def test_invalid_day(self, auth_client: TestClient, day):
        response = auth_client.post("/api/challenge-progress", json={"dayNumber": day})
        assert response.status_code == 400
        assert auth_client.get("/api/challenge-progress").json() == []

    @pytest.mark.parametrize("raw", ["0", "31", "abc", "²", "٣", "-1"])
    def test_day_status_rejects_bad_path_values(self, auth_client: TestClient, raw):
        response = auth_client.get(f"/api/challenge-progress/{raw}")
        assert response.status_code == 400

    def test_day_status(self, auth_client: TestClient):
        auth_client.post("/api/challenge-progress", json={"dayNumber": 3})
        assert auth_client.get("/api/challenge-progress/3").json() == {"dayNumber": 3, "isCompleted": True}
        assert auth_client.get("/api/challenge-progress/4").json()["isCompleted"] is False
        assert auth_client.get("/api/challenge-progress/31").status_code == 400
        assert auth_client.get("/api/challenge-progress/abc").status_code == 400

    def test_milestone_badge_flow(self, auth_client: TestClient):
        for day in range(1, 7):
            auth_client.post("/api/challenge-progress", json={"dayNumber": day})

        early = auth_client.post("/api/challenge-badges/check-and-award", json={"milestone": 7})
        assert early.status_code == 400
        assert early.json()["detail"]["completed"] == 6
        assert early.json()["detail"]["required"] == 7

        auth_client.post("/api/challenge-progress", json={"dayNumber": 7})
        awarded = auth_client.post("/api/challenge-badges/check-and-award", json={"milestone": 7})
        assert awarded.status_code == 201
        body = awarded.json()
        assert body["newlyAwarded"] is True
        assert body["name"] == "Week One Warrior"

        again = auth_client.post("/api/challenge-badges/check-and-award", json={"milestone": 7})
        assert again.status_code == 200
        assert again.json()["newlyAwarded"] is False
        assert again.json()["id"] == body["id"]

        strict = auth_client.post("/api/challenge-badges/award", json={"milestone": 7})
        assert strict.status_code == 409

        badges = auth_client.get("/api/challenge-badges").json()
        assert [b["milestone"] for b in badges] == [7]

    def test_invalid_milestone(self, auth_client: TestClient):
        response = auth_client.post("/api/challenge-badges/check-and-award", json={"milestone": 10})
        assert response.status_code == 400

    def test_summary(self, auth_client: TestClient):
        for day in (1, 2, 4):
            auth_client.post("/api/challenge-progress", json={"dayNumber": day})
        summary = auth_client.get("/api/challenge-progress/summary").json()
        assert summary["completedDays"] == [1, 2, 4]
        assert summary["nextDay"] == 3
        assert summary["progressPercentage"] == 10
        assert summary["totalDays"] == 30


@pytest.mark.integration
class TestWeeklyRoutes:
    """15-week challenge: enrollment, prompt completion, summary and badges."""

    def test_prompt_catalog_filters(self, api_client: TestClient):
        response = api_client.get("/api/weekly-prompts", params={"tier": "growing_speaker", "week": 3})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["growing_w3_p1", "growing_w3_p2", "growing_w3_p3"]
        assert len(api_client.get("/api/weekly-prompts", params={"tier": "shy_starter"}).json()) == 45
        assert api_client.get("/api/weekly-prompts", params={"tier": "expert"}).status_code == 400
        assert api_client.get("/api/weekly-prompts", params={"week": 16}).status_code == 400

    def test_status_before_and_after_start(self, auth_client: TestClient):
        assert auth_client.get("/api/weekly-challenge").json() == {"status": "not_started"}
        started = auth_client.post("/api/weekly-challenge", json={"tier": "growing_speaker"})
        assert started.status_code == 201
        assert started.json()["selectedTier"] == "growing_speaker"
        assert started.json()["completedPrompts"] == []

        status_body = auth_client.get("/api/weekly-challenge").json()
        assert status_body["status"] == "in_progress"
        assert status_body["progress"]["selectedTier"] == "growing_speaker"

    def test_start_twice_conflicts(self, auth_client: TestClient):
        auth_client.post("/api/weekly-challenge", json={"tier": "shy_starter"})
        response = auth_client.post("/api/weekly-challenge", json={"tier": "confident_creator"})
        assert response.status_code == 409

    def test_start_invalid_tier(self, auth_client: TestClient):
        assert auth_client.post("/api/weekly-challenge", json={"tier": "expert"}).status_code == 400

    def test_complete_before_start(self, auth_client: TestClient):
        response = auth_client.post("/api/weekly-challenge/complete", json={"promptId": "shy_w1_p1"})
        assert response.status_code == 400
        assert "not started" in response.json()["detail"]

    def test_complete_unknown_prompt(self, auth_client: TestClient):
        auth_client.post("/api/weekly-challenge", json={"tier": "shy_starter"})
        assert auth_client.post("/api/weekly-challenge/complete", json={"promptId": "nope"}).status_code == 404
        assert auth_client.post("/api/weekly-challenge/complete", json={}).status_code == 400

    def test_weekly_badge_flow(self, auth_client: TestClient):
        auth_client.post("/api/weekly-challenge", json={"tier": "growing_speaker"})
        for pid in ("growing_w3_p1", "growing_w3_p2", "growing_w3_p2"):
            response = auth_client.post("/api/weekly-challenge/complete", json={"promptId": pid})
            assert response.status_code == 200
        assert response.json()["completedPrompts"] == ["growing_w3_p1", "growing_w3_p2"]

        body = {"tier": "growing_speaker", "weekNumber": 3}
        early = auth_client.post("/api/weekly-badges/check-and-award", json=body)
        assert early.status_code == 400
        assert early.json()["detail"]["completed"] == 2

        auth_client.post("/api/weekly-challenge/complete", json={"promptId": "growing_w3_p3"})
        awarded = auth_client.post("/api/weekly-badges/check-and-award", json=body)
        assert awarded.status_code == 201
        assert awarded.json()["newlyAwarded"] is True
        again = auth_client.post("/api/weekly-badges/check-and-award", json=body)
        assert again.status_code == 200
        assert again.json()["id"] == awarded.json()["id"]
        assert auth_client.post("/api/weekly-badges/award", json=body).status_code == 409

        badges = auth_client.get("/api/weekly-badges").json()
        assert [(b["tier"], b["weekNumber"]) for b in badges] == [("growing_speaker", 3)]

    def test_summary_requires_enrollment(self, auth_client: TestClient):
        assert auth_client.get("/api/weekly-challenge/summary").status_code == 400

    def test_summary_time_mode(self, auth_client: TestClient):
        auth_client.post("/api/weekly-challenge", json={"tier": "shy_starter"})
        for pid in ("shy_w1_p1", "shy_w1_p2", "shy_w1_p3"):
            auth_client.post("/api/weekly-challenge/complete", json={"promptId": pid})
        summary = auth_client.get("/api/weekly-challenge/summary").json()
        assert summary["unlockMode"] == "time"
        assert summary["currentWeek"] == 1
        assert summary["progressPercentage"] == 7
        assert [w["week"] for w in summary["weeks"] if w["unlocked"]] == [1]
        assert summary["weeks"][0]["completed"] == 3

    def test_summary_completion_mode(self, auth_client: TestClient, monkeypatch):
        monkeypatch.setattr(settings, "weekly_unlock_mode", "completion")
        auth_client.post("/api/weekly-challenge", json={"tier": "shy_starter"})
        for pid in ("shy_w1_p1", "shy_w1_p2", "shy_w1_p3"):
            auth_client.post("/api/weekly-challenge/complete", json={"promptId": pid})
        summary = auth_client.get("/api/weekly-challenge/summary").json()
        assert summary["unlockMode"] == "completion"
        assert [w["week"] for w in summary["weeks"] if w["unlocked"]] == [1, 2]


@pytest.mark.integration
class TestPracticeRoutes:
    def test_generate_prompt(self, api_client: TestClient):
        response = api_client.get("/api/prompts/generate", params={"category": "interview"})
        assert response.status_code == 200
        assert response.json()["category"] == "interview"
        assert api_client.get("/api/prompts/generate").status_code == 200
        assert api_client.get("/api/prompts/generate", params={"category": "karaoke"}).status_code == 404

    def test_feedback_analyze(self, api_client: TestClient):
        response = api_client.post(
            "/api/feedback/analyze",
            files={"recording": ("answer.webm", b"\x1aE\xdf\xa3fake-webm", "video/webm")},
            data={"prompt": "Introduce yourself"},
        )
        assert response.status_code == 200
        body = response.json()
        assert 2 <= len(body["strengths"]) <= 3
        assert 1 <= len(body["improvements"]) <= 2
        assert 55 <= body["confidenceScore"] <= 84

    def test_feedback_without_recording(self, api_client: TestClient):
        response = api_client.post("/api/feedback/analyze", data={"prompt": "Introduce yourself"})
        assert response.status_code == 400
        assert response.json()["detail"] == "No recording file uploaded"

    def test_feedback_empty_recording(self, api_client: TestClient):
        response = api_client.post(
            "/api/feedback/analyze",
            files={"recording": ("answer.webm", b"", "video/webm")},
        )
        assert response.status_code == 400

    def test_sessions(self, auth_client: TestClient):
        created = auth_client.post(
            "/api/sessions",
            json={"duration": 45, "promptCategory": "casual", "prompt": "Talk about lunch", "confidenceScore": 4},
        )
        assert created.status_code == 201
        assert created.json()["cameraOn"] is True
        sessions = auth_client.get("/api/sessions").json()
        assert len(sessions) == 1 and sessions[0]["duration"] == 45
        assert auth_client.post("/api/sessions", json={"duration": -1}).status_code == 422

    def test_prompt_completions(self, auth_client: TestClient):
        response = auth_client.post("/api/prompt-completions", json={"promptText": "Hello", "category": "casual"})
        assert response.status_code == 201
        assert [c["promptText"] for c in auth_client.get("/api/prompt-completions").json()] == ["Hello"]


@pytest.mark.integration
class TestUserRoutes:
    def test_stats(self, auth_client: TestClient):
        auth_client.post("/api/sessions", json={"duration": 30, "confidenceScore": 2})
        auth_client.post("/api/challenge-progress", json={"dayNumber": 1})
        stats = auth_client.get("/api/user/stats").json()
        assert stats["totalSessions"] == 1
        assert stats["totalDuration"] == 30
        assert stats["challengeDaysCompleted"] == 1

    def test_notification_preferences_merge(self, auth_client: TestClient):
        auth_client.patch("/api/notification-preferences", json={"preferences": {"dailyReminder": True}})
        response = auth_client.patch("/api/notification-preferences", json={"preferences": {"weeklyDigest": False}})
        assert response.json()["preferences"] == {"dailyReminder": True, "weeklyDigest": False}

    def test_theme(self, auth_client: TestClient):
        assert auth_client.patch("/api/theme", json={"theme": "dark"}).json() == {"theme": "dark"}
        assert auth_client.get("/api/auth/current-user").json()["theme"] == "dark"


@pytest.mark.integration
class TestAdminRoutes:
    def test_forbidden_for_regular_user(self, auth_client: TestClient):
        assert auth_client.get("/api/admin/stats").status_code == 403

    def test_admin_endpoints(self, auth_client: TestClient, make_admin):
        make_admin("test@example.com")
        stats = auth_client.get("/api/admin/stats")
        assert stats.status_code == 200
        assert stats.json()["totalUsers"] == 1

        users = auth_client.get("/api/admin/users").json()
        assert [u["email"] for u in users] == ["test@example.com"]

        details = auth_client.get(f"/api/admin/users/{users[0]['id']}")
        assert details.status_code == 200
        assert details.json()["user"]["isAdmin"] is True
        assert auth_client.get("/api/admin/users/999").status_code == 404
