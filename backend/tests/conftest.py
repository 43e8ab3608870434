import os

# must be set before catalog_api.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_catalog.db")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ADMIN_PASSWORD", "admin-pass")
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault("ENFORCE_ADMIN_WRITES", "true")

import pytest
from fastapi.testclient import TestClient

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture
def admin_client():
    from catalog_api.main import app

    c = TestClient(app)
    r = c.post("/api/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return c
