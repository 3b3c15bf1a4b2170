"""
Tests for the HTTP surface.

Every endpoint is stateless, so each test posts its own snapshot through
FastAPI's TestClient.
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from foefinder.api import results
from foefinder.api.admin import analytics
from foefinder.main import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def _submission(user_id, pairs):
    return {
        "user_id": user_id,
        "answers": [{"questionId": q, "value": v} for q, v in pairs],
    }


@pytest.fixture
def population():
    """Ten users answering question 1 with 4 and question 2 split 1 vs 7."""
    return [
        _submission(f"user-{i}", [(1, 4), (2, 1 if i < 5 else 7)])
        for i in range(10)
    ]


class TestHealth:

    def test_liveness(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_deep(self, client):
        body = client.get("/health/deep").json()
        assert body["status"] == "healthy"
        assert body["questions"] == 30
        assert body["neighborhoods"] == 8


class TestQuestionnaire:

    def test_questions(self, client):
        body = client.get("/api/v1/questionnaire/questions").json()
        assert len(body) == 30
        assert [q["id"] for q in body] == list(range(1, 31))

    def test_neighborhoods(self, client):
        body = client.get("/api/v1/questionnaire/neighborhoods").json()
        assert body[1]["id"] == "upper-east-side"
        assert body[1]["reference_vector"] == [30, 50, 60]

    def test_unknown_neighborhood_404(self, client):
        response = client.get("/api/v1/questionnaire/neighborhoods/hoboken")
        assert response.status_code == 404

    def test_validate_filters_and_dedupes(self, client):
        payload = {
            "user_id": "u1",
            "answers": [
                {"questionId": 1, "value": 2},
                {"questionId": 99, "value": 5},
                {"questionId": 2, "value": 8},
                {"questionId": 1, "value": 6},
            ],
        }
        body = client.post("/api/v1/questionnaire/validate", json=payload).json()
        assert body["user_id"] == "u1"
        assert body["answers"] == [{"question_id": 1, "value": 6}]


class TestResults:

    def test_full_results(self, client, population):
        payload = _submission("me", [(1, 7), (2, 1), (3, 4), (4, 6), (5, 2)])
        payload["population"] = population
        response = client.post("/api/v1/results", json=payload)
        assert response.status_code == 200
        body = response.json()

        assert [t["question_id"] for t in body["hot_takes"]] == [1, 2, 4]
        # q1: |7 - 4| >= 3 disagrees, q2: |1 - 4| >= 3 disagrees
        assert body["disagreement"]["percentage"] == 100
        assert body["disagreement"]["compared_count"] == 2
        assert body["disagreement"]["level"] == "extreme"
        assert body["neighborhood"]["id"]
        assert set(body["dimensions"]) == {"progressive", "artistic", "social"}
        assert [o["question_id"] for o in body["outliers"]] == [1]
        assert body["outliers"][0]["is_top_outlier"] is True

    def test_empty_population(self, client):
        payload = _submission("me", [(1, 7)])
        body = client.post("/api/v1/results", json=payload).json()
        assert body["disagreement"]["percentage"] == 0
        assert body["outliers"] == []

    def test_empty_answers_land_upper_east_side(self, client):
        body = client.post("/api/v1/results", json={"answers": []}).json()
        assert body["neighborhood"]["id"] == "upper-east-side"
        assert body["hot_takes"] == []

    def test_hot_take_count_override(self, client):
        payload = _submission("me", [(1, 7), (2, 1), (4, 6)])
        payload["hot_take_count"] = 1
        body = client.post("/api/v1/results", json=payload).json()
        assert len(body["hot_takes"]) == 1

    def test_differences(self, client):
        payload = {
            "answers_a": [{"questionId": 1, "value": 7}, {"questionId": 2, "value": 3}],
            "answers_b": [{"questionId": 1, "value": 1}, {"questionId": 2, "value": 3}],
        }
        body = client.post("/api/v1/results/differences", json=payload).json()
        assert len(body) == 1
        assert body[0]["difference"] == 6


class TestAnalytics:

    def test_statistics(self, client, population):
        response = client.post(
            "/api/v1/admin/analytics/statistics", json={"population": population}
        )
        assert response.status_code == 200
        body = response.json()
        assert [s["question_id"] for s in body["statistics"]] == [1, 2]
        assert body["statistics"][1]["std_dev"] == pytest.approx(3.0)
        assert body["summary"]["respondent_count"] == 10
        assert body["summary"]["high_variance_question_ids"] == [2]

    def test_distribution(self, client, population):
        response = client.post(
            "/api/v1/admin/analytics/distribution/2", json={"population": population}
        )
        rows = response.json()
        assert len(rows) == 7
        assert rows[0] == {"value": 1, "count": 5, "percentage": 50.0}

    def test_distribution_without_responses(self, client, population):
        response = client.post(
            "/api/v1/admin/analytics/distribution/30", json={"population": population}
        )
        assert response.status_code == 200
        assert response.json() == []

    def test_distribution_unknown_question(self, client):
        response = client.post(
            "/api/v1/admin/analytics/distribution/31", json={"population": []}
        )
        assert response.status_code == 404


class TestRequestContext:
    """Every response carries the id its log events were bound to."""

    def test_generates_request_id(self, client):
        response = client.get("/health")
        assert response.headers["X-Request-ID"]

    def test_echoes_caller_request_id(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


def _event_loop_running():
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class TestAggregationOffEventLoop:
    """Aggregation runs in the threadpool, never on the event loop thread."""

    @pytest.fixture
    def loop_flags(self, monkeypatch):
        flags = []

        def wrap(module):
            original = module.aggregate

            def recording_aggregate(*args, **kwargs):
                flags.append(_event_loop_running())
                return original(*args, **kwargs)

            monkeypatch.setattr(module, "aggregate", recording_aggregate)

        wrap(results)
        wrap(analytics)
        return flags

    def test_results(self, client, population, loop_flags):
        payload = _submission("me", [(1, 7)])
        payload["population"] = population
        assert client.post("/api/v1/results", json=payload).status_code == 200
        assert loop_flags == [False]

    def test_statistics(self, client, population, loop_flags):
        response = client.post(
            "/api/v1/admin/analytics/statistics", json={"population": population}
        )
        assert response.status_code == 200
        assert loop_flags == [False]

    def test_distribution(self, client, population, loop_flags):
        response = client.post(
            "/api/v1/admin/analytics/distribution/2", json={"population": population}
        )
        assert response.status_code == 200
        assert loop_flags == [False]
