import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from catalog_api.config import settings
from catalog_api.db import SessionLocal
from catalog_api.models.user_session import UserSession

log = logging.getLogger(__name__)

CENTRAL_ADMIN = "central-admin"
DISTRIBUTOR = "distributor"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionData:
    user_id: int
    user_role: str
    distributor_name: Optional[str] = None
    country_name: Optional[str] = None
    expires_at: datetime = field(default_factory=_now)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or _now())


class SessionStore:
    """
    Maps opaque tokens to SessionData.

    Expired sessions behave as absent. With `rolling` on, every successful
    read pushes the expiry `ttl_seconds` into the future.
    """

    def __init__(self, ttl_seconds: Optional[int] = None, rolling: Optional[bool] = None):
        self.ttl = timedelta(
            seconds=ttl_seconds if ttl_seconds is not None else settings.SESSION_TTL_SECONDS
        )
        self.rolling = settings.SESSION_ROLLING if rolling is None else rolling

    def _new_token(self) -> str:
        return secrets.token_urlsafe(32)

    def create(self, user_id: int, user_role: str, distributor_name: Optional[str] = None,
               country_name: Optional[str] = None) -> str:
        raise NotImplementedError

    def get(self, token: Optional[str]) -> Optional[SessionData]:
        raise NotImplementedError

    def destroy(self, token: Optional[str]) -> None:
        raise NotImplementedError

    def purge_expired(self) -> int:
        raise NotImplementedError

    def health_check(self) -> bool:
        return True


class InMemorySessionStore(SessionStore):
    """Process-local store. Sessions are lost on restart and not shared between workers."""

    def __init__(self, ttl_seconds: Optional[int] = None, rolling: Optional[bool] = None):
        super().__init__(ttl_seconds, rolling)
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def create(self, user_id, user_role, distributor_name=None, country_name=None) -> str:
        token = self._new_token()
        data = SessionData(
            user_id=user_id,
            user_role=user_role,
            distributor_name=distributor_name,
            country_name=country_name,
            expires_at=_now() + self.ttl,
        )
        with self._lock:
            self._sessions[token] = data
        return token

    def get(self, token):
        if not token:
            return None
        now = _now()
        with self._lock:
            data = self._sessions.get(token)
            if data is None:
                return None
            if data.is_expired(now):
                del self._sessions[token]
                return None
            if self.rolling:
                data.expires_at = now + self.ttl
            return data

    def destroy(self, token):
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        now = _now()
        with self._lock:
            expired = [t for t, d in self._sessions.items() if d.is_expired(now)]
            for t in expired:
                del self._sessions[t]
        return len(expired)


class DatabaseSessionStore(SessionStore):
    """
    Sessions kept in the `user_sessions` table so several server instances can
    share them. Each call uses its own short-lived DB session and commits
    immediately.
    """

    def __init__(self, session_factory=None, ttl_seconds=None, rolling=None):
        super().__init__(ttl_seconds, rolling)
        self.session_factory = session_factory or SessionLocal

    @staticmethod
    def _naive(dt: datetime) -> datetime:
        # DateTime columns come back naive on most backends; store UTC naive
        return dt.astimezone(timezone.utc).replace(tzinfo=None)

    def create(self, user_id, user_role, distributor_name=None, country_name=None) -> str:
        token = self._new_token()
        with self.session_factory() as s:
            s.add(
                UserSession(
                    token=token,
                    user_id=user_id,
                    user_role=user_role,
                    distributor_name=distributor_name,
                    country_name=country_name,
                    expires_at=self._naive(_now() + self.ttl),
                )
            )
            s.commit()
        return token

    def get(self, token):
        if not token:
            return None
        now = _now()
        with self.session_factory() as s:
            row = s.get(UserSession, token)
            if row is None:
                return None
            expires_at = row.expires_at.replace(tzinfo=timezone.utc)
            if expires_at <= now:
                s.delete(row)
                s.commit()
                return None
            if self.rolling:
                expires_at = now + self.ttl
                row.expires_at = self._naive(expires_at)
                s.commit()
            return SessionData(
                user_id=row.user_id,
                user_role=row.user_role,
                distributor_name=row.distributor_name,
                country_name=row.country_name,
                expires_at=expires_at,
            )

    def destroy(self, token):
        if not token:
            return
        with self.session_factory() as s:
            s.query(UserSession).filter(UserSession.token == token).delete(
                synchronize_session=False
            )
            s.commit()

    def purge_expired(self) -> int:
        with self.session_factory() as s:
            count = (
                s.query(UserSession)
                .filter(UserSession.expires_at <= self._naive(_now()))
                .delete(synchronize_session=False)
            )
            s.commit()
            return count

    def health_check(self) -> bool:
        with self.session_factory() as s:
            s.query(UserSession.token).limit(1).all()
        return True


def build_session_store(backend: Optional[str] = None) -> SessionStore:
    backend = (backend or settings.SESSION_BACKEND).lower()
    if backend == "memory":
        return InMemorySessionStore()
    if backend == "database":
        return DatabaseSessionStore()
    raise ValueError(f"Unknown SESSION_BACKEND: {backend!r}")
