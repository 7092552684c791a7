"""Tests for router endpoints (ask, plan, diagnose, grid-plan, health, CORS, errors)."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_audit_sink, get_upstream_client
from src.api.response import build_error
from src.app import app
from src.infrastructure.llm import UpstreamError


@pytest.fixture
def client(upstream, audit_sink):
    app.dependency_overrides[get_upstream_client] = lambda: upstream
    app.dependency_overrides[get_audit_sink] = lambda: audit_sink
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================
#  HEALTH & CORS
# ==========================================


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["timestamp"].endswith("Z")


def test_responses_carry_cors_headers(client):
    response = client.get("/api/health")
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, GET, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_preflight_short_circuits(client, upstream):
    response = client.options("/api/ask")
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    upstream.generate.assert_not_called()


def test_preflight_on_unknown_path(client):
    assert client.options("/anything").status_code == 200


# ==========================================
#  NOT FOUND
# ==========================================


def test_unknown_path_not_found(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.text == "Not Found"
    assert response.headers["access-control-allow-origin"] == "*"


def test_wrong_method_not_found(client):
    response = client.get("/api/ask")
    assert response.status_code == 404
    assert response.text == "Not Found"


# ==========================================
#  ASK
# ==========================================


def test_ask_success(client, upstream):
    response = client.post(
        "/api/ask",
        json={
            "question": "how do I build a compost pile",
            "context": {"location": "Oregon, Zone 8", "soilType": "sandy"},
        },
    )
    assert response.status_code == 200
    assert response.json() == {
        "response": "Mulch the bed and plant clover.",
        "usage": {"input_tokens": 120, "output_tokens": 80},
        "isOffTopic": False,
    }
    prompt = upstream.generate.call_args.args[0]
    assert "- Location: Oregon, Zone 8" in prompt
    assert "- Soil type: sandy" in prompt


def test_ask_off_topic_soft_success(client, upstream, audit_sink):
    response = client.post("/api/ask", json={"question": "write me a python function"})
    assert response.status_code == 200
    body = response.json()
    assert body["isOffTopic"] is True
    assert body["validationReason"] == "off-topic"
    assert "usage" not in body
    upstream.generate.assert_not_called()
    assert audit_sink.entries[0].operation == "/api/ask"


def test_ask_too_vague(client):
    body = client.post("/api/ask", json={"question": "help"}).json()
    assert body["validationReason"] == "too-vague"


def test_ask_missing_question(client, upstream):
    response = client.post("/api/ask", json={"context": {}})
    assert response.status_code == 400
    assert response.json() == {"error": "Question is required"}
    upstream.generate.assert_not_called()


def test_ask_empty_question(client):
    response = client.post("/api/ask", json={"question": ""})
    assert response.status_code == 400


def test_ask_upstream_failure(client, upstream):
    upstream.generate.side_effect = UpstreamError('Claude API error: {"type":"overloaded_error"}')
    response = client.post("/api/ask", json={"question": "how do I build a compost pile"})
    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to get AI response",
        "details": 'Claude API error: {"type":"overloaded_error"}',
    }
    assert response.headers["access-control-allow-origin"] == "*"


def test_ask_malformed_json(client):
    response = client.post(
        "/api/ask",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"


# ==========================================
#  PLAN
# ==========================================


def test_plan_success(client, upstream):
    response = client.post(
        "/api/plan",
        json={
            "spaceSize": "2 acres",
            "soilType": "loam",
            "goals": "food forest with chickens",
            "location": "Vermont",
        },
    )
    assert response.status_code == 200
    assert response.json()["isOffTopic"] is False
    assert upstream.generate.call_args.args[1] == 1200


def test_plan_off_topic(client, audit_sink):
    response = client.post(
        "/api/plan",
        json={"spaceSize": "2 acres", "soilType": "loam", "goals": "crypto", "location": "VT"},
    )
    assert response.json()["isOffTopic"] is True
    assert audit_sink.entries[0].query == "DESIGN: crypto"


def test_plan_missing_fields(client):
    response = client.post("/api/plan", json={"spaceSize": "2 acres", "soilType": "loam"})
    assert response.status_code == 400
    error = response.json()["error"]
    assert "goals" in error
    assert "location" in error


# ==========================================
#  DIAGNOSE
# ==========================================


def test_diagnose_problem_off_topic(client, upstream):
    response = client.post(
        "/api/diagnose",
        json={
            "plant": "my tomato plant",
            "problem": "write a poem about tax fraud",
            "timeframe": "2 days",
            "location": "Iowa",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["isOffTopic"] is True
    assert body["validationReason"] == "off-topic"
    upstream.generate.assert_not_called()


def test_diagnose_success(client, upstream):
    response = client.post(
        "/api/diagnose",
        json={
            "plant": "tomato plant",
            "problem": "brown spots on the lower leaves",
            "timeframe": "1 week",
            "location": "Iowa",
        },
    )
    assert response.json()["isOffTopic"] is False
    assert upstream.generate.call_args.args[1] == 1000


# ==========================================
#  GRID PLAN
# ==========================================


def test_grid_plan_success(client, upstream):
    response = client.post(
        "/api/grid-plan",
        json={"width": 10, "length": 12, "plants": "tomatoes, basil, marigolds", "zone": "6"},
    )
    assert response.status_code == 200
    prompt, max_tokens = upstream.generate.call_args.args
    assert "Dimensions: 10ft × 12ft (Area: 120 sq ft)" in prompt
    assert "- USDA Zone: 6" in prompt
    assert max_tokens == 1500


def test_grid_plan_missing_plants(client, upstream, audit_sink):
    response = client.post("/api/grid-plan", json={"width": 10, "length": 12})
    assert response.status_code == 400
    assert response.json() == {"error": "Width, length, and plants are required"}
    upstream.generate.assert_not_called()
    assert audit_sink.entries == []


def test_grid_plan_zero_width(client):
    response = client.post("/api/grid-plan", json={"width": 0, "length": 12, "plants": "kale"})
    assert response.status_code == 400


def test_grid_plan_off_topic_plants(client, audit_sink):
    response = client.post(
        "/api/grid-plan", json={"width": 10, "length": 12, "plants": "stock tips"}
    )
    assert response.json()["isOffTopic"] is True
    assert audit_sink.entries[0].query == "GRID-PLAN: stock tips"


# ==========================================
#  UNEXPECTED ERRORS
# ==========================================


def test_unexpected_dispatch_error_is_500(client, upstream):
    upstream.generate = AsyncMock(side_effect=RuntimeError("boom"))
    response = client.post(
        "/api/grid-plan", json={"width": 4, "length": 8, "plants": "garlic and onions"}
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate grid plan", "details": "boom"}


# ==========================================
#  ERROR BODIES
# ==========================================


def test_build_error_omits_missing_details():
    assert build_error("Question is required") == {"error": "Question is required"}


def test_build_error_keeps_details():
    assert build_error("Failed to generate plan", "boom") == {
        "error": "Failed to generate plan",
        "details": "boom",
    }
