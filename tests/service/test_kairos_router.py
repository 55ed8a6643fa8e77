from __future__ import annotations

import pytest

from fastapi.testclient import TestClient

from apps.api.main import app
from app.services.kairos_adapter import kairos_adapter
from kairos.constants import GENESIS_MS

client = TestClient(app)


def _assert_problem(r, status: int, code: str | None = None) -> dict:
    assert r.status_code == status
    assert r.headers["content-type"].startswith("application/problem+json")
    body = r.json()
    assert body["status"] == status
    assert body["title"]
    assert body["request_id"] == r.headers["X-Request-ID"]
    if code:
        assert body["code"] == code
    return body


def test_constants_and_headers():
    r = client.get("/api/v1/kairos/constants")
    assert r.status_code == 200
    data = r.json()
    assert data["genesis_ms"] == GENESIS_MS
    assert data["micro_per_day"] == 17_491_270_421
    assert data["micro_per_beat"] == 485_868_623
    assert data["ms_per_pulse"].endswith("/" + str(10**60))
    assert data["weekday_names"][0] == "Solhara"
    assert r.headers["X-Kairos-Genesis-Ms"] == str(GENESIS_MS)
    assert r.headers["X-Kairos-Micro-Per-Day"] == "17491270421"
    assert r.headers["X-Kairos-Day-Policy"] == "continuous"
    assert r.headers["X-Kairos-Algorithm-Version"]
    assert r.headers["X-Request-ID"]


def test_request_id_is_echoed():
    r = client.get("/api/v1/health/live", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_post_moment_genesis():
    r = client.post("/api/v1/kairos/moment", json={"ms": GENESIS_MS})
    assert r.status_code == 200
    data = r.json()
    assert data["micro_pulses"] == "0"
    assert data["calendar"]["weekday"] == "Solhara"
    assert data["epoch_ms"] == GENESIS_MS
    assert data["input_kind"] == "ms"
    assert data["input_neutralized"] is False


def test_post_moment_pre_genesis():
    r = client.post("/api/v1/kairos/moment", json={"ms": GENESIS_MS - 1000})
    data = r.json()
    assert data["calendar"]["day_index"] == -1
    assert data["calendar"]["weekday"] == "Kaelith"
    assert data["calendar"]["year"] == -1
    assert data["beat_step_label"] == "35:43"


def test_post_moment_other_inputs():
    r = client.post("/api/v1/kairos/moment", json={"pulse": 1})
    assert r.json()["micro_pulses"] == "1000000"
    assert r.json()["beat_micro_pulses"] == 1_000_000
    r = client.post("/api/v1/kairos/moment", json={"micro_pulses": 485_868_623})
    assert (r.json()["calendar"]["beat"], r.json()["calendar"]["step"]) == (1, 0)
    r = client.post("/api/v1/kairos/moment", json={"iso": "2024-05-10T06:45:41.888Z"})
    assert r.json()["micro_pulses"] == "0"
    assert r.json()["input_kind"] == "iso"


def test_post_moment_nan_is_neutralised():
    r = client.post(
        "/api/v1/kairos/moment",
        content='{"pulse": NaN}',
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["micro_pulses"] == "0"
    assert data["input_neutralized"] is True


def test_post_moment_requires_exactly_one_input():
    r = client.post("/api/v1/kairos/moment", json={"ms": 1, "pulse": 2})
    _assert_problem(r, 422, "VALIDATION_ERROR")
    r = client.post("/api/v1/kairos/moment", json={})
    _assert_problem(r, 422, "VALIDATION_ERROR")


def test_post_moment_bad_iso():
    r = client.post("/api/v1/kairos/moment", json={"iso": "not-a-date"})
    body = _assert_problem(r, 422, "INVALID_INPUT")
    assert "not-a-date" in body["detail"]


def test_get_moment_query():
    r = client.get("/api/v1/kairos/moment", params={"ms": str(GENESIS_MS)})
    assert r.json()["micro_pulses"] == "0"
    r = client.get("/api/v1/kairos/moment", params={"ms": "NaN"})
    assert r.json()["input_neutralized"] is True
    r = client.get("/api/v1/kairos/moment", params={"ms": "abc"})
    _assert_problem(r, 422, "INVALID_INPUT")


def test_huge_moment_is_saturated():
    r = client.get("/api/v1/kairos/moment", params={"ms": "1" + "0" * 40})
    data = r.json()
    assert data["pulse"] == 2**53 - 1
    assert int(data["pulse_exact"]) > 2**53


def test_day_endpoints():
    r = client.get("/api/v1/kairos/days/0")
    assert r.json()["epoch_ms"] == GENESIS_MS
    r = client.get("/api/v1/kairos/days/-1")
    assert r.json()["micro_pulses"] == "-17491270421"
    r = client.get("/api/v1/kairos/days", params={"start": -1, "count": 3})
    data = r.json()
    assert data["count"] == 3
    assert [d["day_index"] for d in data["days"]] == [-1, 0, 1]


def test_day_range_is_bounded():
    r = client.get("/api/v1/kairos/days", params={"start": 0, "count": 100_000})
    _assert_problem(r, 400)
    r = client.get("/api/v1/kairos/days", params={"start": 0, "count": 0})
    _assert_problem(r, 422, "VALIDATION_ERROR")


def test_calendar_endpoint():
    r = client.get("/api/v1/kairos/calendar/-1/8/42")
    assert r.json()["day_index"] == -1
    r = client.get("/api/v1/kairos/calendar/0/9/1")
    _assert_problem(r, 422, "INVALID_INPUT")


def test_pulse_epoch():
    r = client.get("/api/v1/kairos/pulse/1/epoch")
    data = r.json()
    assert data["epoch_ms"] == GENESIS_MS + 5236
    assert data["iso"].endswith("Z")
    r = client.get("/api/v1/kairos/pulse/0/epoch")
    assert r.json()["iso"] == "2024-05-10T06:45:41.888Z"


def test_next_pulse():
    r = client.get("/api/v1/kairos/next-pulse", params={"now_ms": str(GENESIS_MS)})
    data = r.json()
    assert data["next_pulse"] == "1"
    assert data["boundary_ms"] == GENESIS_MS + 5237
    assert data["wait_ms"] == 5237


@pytest.mark.parametrize("beat, arc, chakra", [(0, "Ignite", "Root"), (6, "Integrate", "Sacral"), (35, "Dream", "Third Eye")])
def test_arc(beat, arc, chakra):
    data = client.get(f"/api/v1/kairos/arc/{beat}").json()
    assert (data["arc"], data["chakra"]) == (arc, chakra)
    assert data["description"]


def test_grid_drift():
    data = client.get("/api/v1/kairos/grid-drift/1").json()
    assert data["drift_micro_pulses"] == "67270421"
    assert data["continuous_day_index_at_grid_start"] == "0"


def test_unknown_route_is_problem():
    r = client.get("/api/v1/kairos/nope")
    _assert_problem(r, 404)


def test_unhandled_error_is_problem(monkeypatch):
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(kairos_adapter, "constants", boom)
    safe_client = TestClient(app, raise_server_exceptions=False)
    r = safe_client.get("/api/v1/kairos/constants")
    _assert_problem(r, 500, "INTERNAL_ERROR")
    assert r.headers["X-Kairos-Genesis-Ms"] == str(GENESIS_MS)


def test_metrics_count_conversions():
    client.get("/api/v1/kairos/days/3")
    body = client.get("/metrics").text
    assert "kairos_conversions_total" in body
    assert 'operation="day_start"' in body


def test_oversized_numbers_are_rejected():
    r = client.get("/api/v1/kairos/moment", params={"ms": "1e30000000"})
    _assert_problem(r, 422, "INVALID_INPUT")
    r = client.get("/api/v1/kairos/next-pulse", params={"now_ms": "-1e-50"})
    _assert_problem(r, 422, "INVALID_INPUT")
    r = client.get("/api/v1/kairos/pulse/" + "9" * 100 + "/epoch")
    _assert_problem(r, 422, "INVALID_INPUT")
    r = client.get("/api/v1/kairos/days/" + "9" * 100)
    _assert_problem(r, 422, "INVALID_INPUT")
    r = client.get("/api/v1/kairos/grid-drift/" + "9" * 100)
    _assert_problem(r, 422, "INVALID_INPUT")


def test_oversized_body_numbers_are_rejected():
    r = client.post("/api/v1/kairos/moment", json={"micro_pulses": 10**60})
    _assert_problem(r, 422, "VALIDATION_ERROR")
    r = client.post("/api/v1/kairos/moment", json={"ms": 1e300})
    _assert_problem(r, 422, "VALIDATION_ERROR")
    # Beyond the JSON decoder's integer digit limit
    r = client.post(
        "/api/v1/kairos/moment",
        content='{"micro_pulses": ' + "7" * 5000 + "}",
        headers={"content-type": "application/json"},
    )
    assert r.status_code in (400, 422)
    assert r.headers["content-type"].startswith("application/problem+json")


@pytest.mark.parametrize("iso", ["2025-02-31T00:00:00Z", "2025-02-29T00:00:00Z", "2025-04-31T12:00:00Z"])
def test_post_moment_impossible_date(iso):
    r = client.post("/api/v1/kairos/moment", json={"iso": iso})
    _assert_problem(r, 422, "INVALID_INPUT")


def test_post_moment_leap_day():
    r = client.post("/api/v1/kairos/moment", json={"iso": "2024-02-29T00:00:00Z"})
    assert r.status_code == 200
    assert r.json()["input_kind"] == "iso"
