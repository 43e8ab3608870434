from catalog_api.config import Settings
from catalog_api.db import _engine_options


def test_pool_waits_indefinitely_by_default(monkeypatch):
    monkeypatch.delenv("DB_POOL_TIMEOUT", raising=False)
    assert Settings().DB_POOL_TIMEOUT is None


def test_server_databases_get_a_bounded_pool():
    opts = _engine_options("mysql+pymysql://user:pw@localhost/catalog")
    assert opts["pool_size"] == 10
    assert opts["max_overflow"] == 0
    assert opts["pool_timeout"] is None


def test_sqlite_shares_connections_across_threads():
    assert _engine_options("sqlite:///./x.db") == {"connect_args": {"check_same_thread": False}}
