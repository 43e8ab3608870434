import os

from fastapi.testclient import TestClient

from catalog_api.db import SessionLocal, init_db
from catalog_api.main import app
from catalog_api.models.distributor import Distributor
from catalog_api.models.master import Master
from catalog_api.security import is_hashed
from catalog_api.services.session_store import InMemorySessionStore
from sqlalchemy.exc import OperationalError

client = TestClient(app)

DISTRIBUTOR = {
    "email": "dist@example.com",
    "password": "dist-pass",
    "distributorName": "Acme Traders",
    "country": "India",
}


def setup_module(module):
    init_db(reset=True)


def _fresh_client():
    return TestClient(app)


def test_register_requires_all_fields():
    r = client.post("/api/register", json={"email": "x@example.com", "password": "pw"})
    assert r.status_code == 400
    assert r.json()["error"] == "All fields are required"


def test_register_hashes_password():
    r = client.post("/api/register", json=DISTRIBUTOR)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Distributor registered successfully"
    assert isinstance(body["distributorId"], int)

    db = SessionLocal()
    try:
        d = db.get(Distributor, body["distributorId"])
        assert d.password != DISTRIBUTOR["password"]
        assert is_hashed(d.password)
    finally:
        db.close()


def test_same_password_hashes_differently():
    other = dict(DISTRIBUTOR, email="dist2@example.com", distributorName="Beta Supply")
    r = client.post("/api/register", json=other)
    assert r.status_code == 200

    db = SessionLocal()
    try:
        hashes = {
            d.password
            for d in db.query(Distributor).filter(
                Distributor.email.in_(["dist@example.com", "dist2@example.com"])
            )
        }
        assert len(hashes) == 2
    finally:
        db.close()


def test_duplicate_email_is_a_conflict():
    r = client.post("/api/register", json=DISTRIBUTOR)
    assert r.status_code == 409
    assert r.json()["error"] == "Email already registered"


def test_distributor_login_establishes_session():
    c = _fresh_client()
    r = c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": DISTRIBUTOR["password"]})
    assert r.status_code == 200
    body = r.json()
    assert body["userRole"] == "distributor"
    assert body["distributorName"] == "Acme Traders"
    assert body["countryName"] == "India"
    assert body["email"] == DISTRIBUTOR["email"]

    s = c.get("/api/session").json()
    assert s["isLoggedIn"] is True
    assert s["userRole"] == "distributor"
    assert s["userId"] == body["distributorId"]
    assert s["distributorName"] == "Acme Traders"
    assert s["countryName"] == "India"


def test_wrong_password_gives_400_and_no_session():
    c = _fresh_client()
    r = c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": "nope"})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid email or password"
    assert c.get("/api/session").json() == {"isLoggedIn": False}


def test_unknown_email_same_error_as_wrong_password():
    c = _fresh_client()
    r = c.post("/api/login", json={"email": "ghost@example.com", "password": "nope"})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid email or password"


def test_login_requires_email_and_password():
    r = client.post("/api/login", json={"email": DISTRIBUTOR["email"]})
    assert r.status_code == 400
    assert r.json()["error"] == "Email and password are required"


def test_admin_login():
    ADMIN_EMAIL, ADMIN_PASSWORD = os.environ["ADMIN_EMAIL"], os.environ["ADMIN_PASSWORD"]

    c = _fresh_client()
    r = c.post("/api/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["userRole"] == "central-admin"
    assert body["email"] == ADMIN_EMAIL
    assert "adminId" in body

    s = c.get("/api/session").json()
    assert s["isLoggedIn"] is True
    assert s["userRole"] == "central-admin"
    assert s["distributorName"] is None


def test_legacy_plaintext_admin_is_rehashed_on_login():
    db = SessionLocal()
    try:
        db.add(Master(email="legacy@example.com", password="plain-old"))
        db.commit()
    finally:
        db.close()

    c = _fresh_client()
    r = c.post("/api/login", json={"email": "legacy@example.com", "password": "plain-old"})
    assert r.status_code == 200
    assert r.json()["userRole"] == "central-admin"

    db = SessionLocal()
    try:
        m = db.query(Master).filter(Master.email == "legacy@example.com").first()
        assert is_hashed(m.password)
    finally:
        db.close()

    # still works against the hash
    r = _fresh_client().post("/api/login", json={"email": "legacy@example.com", "password": "plain-old"})
    assert r.status_code == 200


def test_logout_clears_session():
    c = _fresh_client()
    c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": DISTRIBUTOR["password"]})
    assert c.get("/api/session").json()["isLoggedIn"] is True

    r = c.post("/api/logout")
    assert r.status_code == 200
    assert r.json()["message"] == "Logged out successfully"
    assert c.get("/api/session").json() == {"isLoggedIn": False}


def test_logout_destroys_server_side_session():
    c = _fresh_client()
    c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": DISTRIBUTOR["password"]})
    token = c.cookies.get("session_id")
    assert token

    c.post("/api/logout")
    assert app.state.session_store.get(token) is None


def test_session_without_cookie():
    assert _fresh_client().get("/api/session").json() == {"isLoggedIn": False}


def test_register_and_login_with_password_over_72_bytes():
    long_pw = "p" * 100
    r = client.post(
        "/api/register",
        json={"email": "long@example.com", "password": long_pw, "distributorName": "Long Ltd", "country": "Peru"},
    )
    assert r.status_code == 200

    c = _fresh_client()
    r = c.post("/api/login", json={"email": "long@example.com", "password": long_pw})
    assert r.status_code == 200
    assert r.json()["distributorName"] == "Long Ltd"


class _BrokenStore(InMemorySessionStore):
    def destroy(self, token):
        raise OperationalError("DELETE FROM user_sessions", {}, Exception("database is locked"))


def test_logout_store_failure_is_500(monkeypatch):
    c = _fresh_client()
    c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": DISTRIBUTOR["password"]})
    monkeypatch.setattr(app.state, "session_store", _BrokenStore())

    r = c.post("/api/logout")
    assert r.status_code == 500
    assert r.json() == {"error": "Error logging out"}
    assert "locked" not in r.text


def test_rolling_session_reissues_cookie(monkeypatch):
    monkeypatch.setattr(app.state, "session_store", InMemorySessionStore(ttl_seconds=60, rolling=True))
    c = _fresh_client()
    r = c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": DISTRIBUTOR["password"]})
    token = r.cookies.get("session_id")

    r = c.get("/api/session")
    assert r.json()["isLoggedIn"] is True
    cookie = r.headers.get("set-cookie")
    assert cookie is not None
    assert f"session_id={token}" in cookie
    assert "Max-Age=60" in cookie


def test_absolute_session_does_not_reissue_cookie(monkeypatch):
    monkeypatch.setattr(app.state, "session_store", InMemorySessionStore(ttl_seconds=60, rolling=False))
    c = _fresh_client()
    c.post("/api/login", json={"email": DISTRIBUTOR["email"], "password": DISTRIBUTOR["password"]})

    r = c.get("/api/session")
    assert r.json()["isLoggedIn"] is True
    assert "set-cookie" not in r.headers
