import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.api.deps import (
    current_session,
    get_session_store,
    get_session_token,
    set_session_cookie,
)
from catalog_api.config import settings
from catalog_api.db import get_db
from catalog_api.errors import PersistenceError
from catalog_api.schemas.auth_schema import LoginIn, RegisterIn
from catalog_api.services.auth_service import AuthService
from catalog_api.services.session_store import SessionStore

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", summary="Register a distributor")
def register(
    payload: RegisterIn,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    payload.require("email", "password", "distributorName", "country", message="All fields are required")
    distributor_id = AuthService(db, store).register(
        payload.email, payload.password, payload.distributorName, payload.country
    )
    return {"message": "Distributor registered successfully", "distributorId": distributor_id}


@router.post("/login", summary="Log in as central admin or distributor")
def login(
    payload: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    payload.require("email", "password", message="Email and password are required")
    token, body = AuthService(db, store).login(payload.email, payload.password)
    set_session_cookie(response, token, store)
    return body


@router.post("/logout", summary="Log out")
def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    try:
        store.destroy(get_session_token(request))
    except SQLAlchemyError as exc:
        log.exception("Error destroying session")
        raise PersistenceError("Error logging out") from exc
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/session", summary="Current session state")
def session_info(session=Depends(current_session)):
    if session is None:
        return {"isLoggedIn": False}
    return {
        "isLoggedIn": True,
        "userId": session.user_id,
        "userRole": session.user_role,
        "distributorName": session.distributor_name,
        "countryName": session.country_name,
    }
