"""
Minimal API smoke checks for service health.

Focuses on availability endpoints to keep the suite fast and robust.
"""
from __future__ import annotations

from fastapi.testclient import TestClient
from apps.api.main import app
client = TestClient(app)


def test_docs_and_metrics_accessible():
    docs = client.get("/api/docs")
    metrics = client.get("/metrics")
    assert docs.status_code in (200, 308)
    assert metrics.status_code == 200


def test_health_endpoints_respond():
    live = client.get("/api/v1/health/live")
    assert live.status_code == 200
    assert live.json()["status"] == "ok"
    up = client.get("/api/v1/health/up")
    assert up.text == "ok"


def test_root_info():
    r = client.get("/")
    assert r.status_code == 200
    info = r.json()
    assert info.get("name")


def test_version_reports_algorithm():
    r = client.get("/api/v1/version")
    assert r.status_code == 200
    data = r.json()
    assert data["day_policy"] == "continuous"
    assert data["algo_version"]


def test_lifespan_publishes_build_info():
    with TestClient(app) as c:
        body = c.get("/metrics").text
    assert "kairos_build_info" in body
    assert 'micro_per_day="17491270421"' in body
