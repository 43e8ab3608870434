import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_api.api.health import router as health_router
from catalog_api.api.routes_auth import router as auth_router
from catalog_api.api.routes_catalogue import router as catalogue_router
from catalog_api.api.routes_countries import router as countries_router
from catalog_api.api.routes_distributors import router as distributors_router
from catalog_api.api.routes_reports import router as reports_router
from catalog_api.api.routes_taxonomy import router as taxonomy_router
from catalog_api.config import settings
from catalog_api.db import init_db
from catalog_api.errors import CatalogException
from catalog_api.services.session_store import build_session_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()

    # scheduler for purging expired sessions
    scheduler = BackgroundScheduler()

    def purge_job():
        try:
            purged = app.state.session_store.purge_expired()
        except Exception:
            logger.exception("Session purge failed")
            return
        if purged:
            logger.info("Purged %d expired sessions", purged)

    scheduler.add_job(
        purge_job, "interval", seconds=settings.SESSION_SWEEP_SECONDS, id="purge_sessions"
    )
    scheduler.start()

    try:
        yield
    finally:
        scheduler.shutdown(wait=False)


app = FastAPI(title="Distributor Catalog - Backend", version="0.1.0", lifespan=lifespan)
app.state.session_store = build_session_store()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogException)
async def catalog_exception_handler(request: Request, exc: CatalogException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies are client errors like any missing field
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "errors": jsonable_errors(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
        for err in exc.errors()
    ]


app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(auth_router, tags=["auth"])

app.include_router(catalogue_router, tags=["catalogue"])

app.include_router(taxonomy_router, tags=["taxonomy"])

app.include_router(countries_router, tags=["countries"])

app.include_router(distributors_router, tags=["distributors"])

app.include_router(reports_router, tags=["reports"])
