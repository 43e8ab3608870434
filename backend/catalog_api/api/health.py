import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text

from catalog_api.api.deps import get_session_store
from catalog_api.db import engine
from catalog_api.services.session_store import SessionStore

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", tags=["health"])
def health(store: SessionStore = Depends(get_session_store)):
    db_ok = False
    sessions_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception:
        log.warning("Health check: database unreachable", exc_info=True)
    try:
        sessions_ok = store.health_check()
    except Exception:
        log.warning("Health check: session store unavailable", exc_info=True)

    return {
        "status": "ok" if db_ok and sessions_ok else "degraded",
        "db": db_ok,
        "sessions": sessions_ok,
    }
