from typing import Optional

from fastapi import Depends, Request, Response

from catalog_api.config import settings
from catalog_api.errors import AuthError
from catalog_api.services.session_store import CENTRAL_ADMIN, SessionData, SessionStore

MASTER_REQUIRED = "Unauthorized: Master access required"


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def set_session_cookie(response: Response, token: str, store: SessionStore):
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=int(store.ttl.total_seconds()),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def current_session(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
) -> Optional[SessionData]:
    token = get_session_token(request)
    session = store.get(token)
    if session is not None and store.rolling:
        # the store pushed the expiry forward; keep the cookie in step
        set_session_cookie(response, token, store)
    return session


def require_central_admin(
    session: Optional[SessionData] = Depends(current_session),
) -> SessionData:
    if session is None or session.user_role != CENTRAL_ADMIN:
        raise AuthError(MASTER_REQUIRED)
    return session


def admin_write_guard(
    session: Optional[SessionData] = Depends(current_session),
) -> Optional[SessionData]:
    """Central-admin gate for catalogue mutations, switchable with ENFORCE_ADMIN_WRITES."""
    if settings.ENFORCE_ADMIN_WRITES:
        return require_central_admin(session)
    return session
