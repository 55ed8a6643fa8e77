from __future__ import annotations

from fastapi.testclient import TestClient
from apps.api.main import app


client = TestClient(app)


def _openapi() -> dict:
    r = client.get("/openapi.json")
    assert r.status_code == 200
    return r.json()


def test_operation_ids_unique():
    spec = _openapi()
    op_ids = []
    for path_item in spec.get("paths", {}).values():
        for op in path_item.values():
            if isinstance(op, dict):
                oid = op.get("operationId")
                assert oid, "Missing operationId"
                op_ids.append(oid)
    assert len(op_ids) == len(set(op_ids)), "Duplicate operationIds found"


def test_basic_openapi_metadata_present():
    spec = _openapi()
    # Servers URL present
    servers = spec.get("servers", [])
    assert servers and isinstance(servers[0].get("url"), str) and servers[0]["url"]
    info = spec.get("info", {})
    assert info.get("version"), "API version must be set"
    assert info.get("x-build", {}).get("algo_version")


def test_200_json_have_schema():
    spec = _openapi()
    for path, methods in spec.get("paths", {}).items():
        for method, op in methods.items():
            if not isinstance(op, dict):
                continue
            resp = op.get("responses", {}).get("200")
            if not resp:
                continue
            content = resp.get("content", {})
            # Skip non-JSON or pure text endpoints
            if "application/json" in content:
                schema = content["application/json"].get("schema")
                assert schema is not None, f"Missing schema for {path} {method}"
