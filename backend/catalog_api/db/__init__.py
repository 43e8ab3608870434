import importlib
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from catalog_api.config import settings

log = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # TestClient and the threadpool share connections across threads
        return {"connect_args": {"check_same_thread": False}}
    options = {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": 0,
        "pool_pre_ping": True,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
    }
    return options


DATABASE_URL = settings.DATABASE_URL
engine = create_engine(DATABASE_URL, future=True, echo=False, **_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# modules whose import registers tables on Base.metadata
MODEL_MODULES = [
    "catalog_api.models.master",
    "catalog_api.models.distributor",
    "catalog_api.models.brand",
    "catalog_api.models.category",
    "catalog_api.models.country",
    "catalog_api.models.product",
    "catalog_api.models.country_product",
    "catalog_api.models.legacy_order",
    "catalog_api.models.user_session",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema.

    With reset=True every table is dropped and recreated (tests use this for a
    clean slate). Existing tables are otherwise left alone. When ADMIN_EMAIL and
    ADMIN_PASSWORD are configured the central admin account is seeded.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset:
        log.info("Resetting database schema")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    log.info("Database initialized (%s)", engine.url.render_as_string(hide_password=True))

    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        from catalog_api.repositories.account_repo import MasterRepository

        s = SessionLocal()
        try:
            if MasterRepository(s).ensure(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD):
                log.info("Seeded central admin %s", settings.ADMIN_EMAIL)
        finally:
            s.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
