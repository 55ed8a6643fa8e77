import os
import pytest


# Run the app in the test environment with plain-text logs
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient
    from apps.api.main import app

    return TestClient(app)


@pytest.fixture(scope="session")
def openapi_spec(client):
    r = client.get("/openapi.json")
    r.raise_for_status()
    return r.json()
