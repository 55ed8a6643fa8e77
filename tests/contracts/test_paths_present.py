from __future__ import annotations

def test_critical_paths_present(openapi_spec) -> None:
    spec = openapi_spec
    paths = set(spec.get("paths", {}).keys())
    expected = {
        "/api/v1/kairos/constants",
        "/api/v1/kairos/moment",
        "/api/v1/kairos/days/{day_index}",
        "/api/v1/kairos/days",
        "/api/v1/kairos/calendar/{year}/{month}/{day}",
        "/api/v1/kairos/pulse/{pulse}/epoch",
        "/api/v1/kairos/next-pulse",
        "/api/v1/kairos/arc/{beat}",
        "/api/v1/kairos/grid-drift/{day_index}",
        "/api/v1/health/live",
        "/api/v1/health/up",
        "/api/v1/version",
        "/metrics",
    }
    missing = expected - paths
    assert not missing, f"Missing expected paths in OpenAPI: {sorted(missing)}"


def test_moment_has_get_and_post(openapi_spec) -> None:
    methods = set(openapi_spec["paths"]["/api/v1/kairos/moment"])
    assert {"get", "post"} <= methods
