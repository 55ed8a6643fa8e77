from __future__ import annotations

def test_kairos_headers_documented(openapi_spec):
    op = openapi_spec["paths"]["/api/v1/kairos/constants"]["get"]
    h = op["responses"]["200"].get("headers", {})
    for name in (
        "X-Request-ID",
        "X-Kairos-Genesis-Ms",
        "X-Kairos-Micro-Per-Day",
        "X-Kairos-Day-Policy",
        "X-Kairos-Algorithm-Version",
    ):
        assert name in h, f"Missing {name} header docs on 200 response"
