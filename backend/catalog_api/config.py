from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = Field(1234, validation_alias=AliasChoices("PORT", "APP_PORT"))
    FRONTEND_ORIGINS: List[str] = ["http://localhost:5173"]
    LOG_LEVEL: str = "INFO"

    # bounded pool; callers queue when it is exhausted
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: Optional[float] = None  # None: wait for a free connection indefinitely

    SESSION_BACKEND: str = "memory"  # memory | database
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_TTL_SECONDS: int = 24 * 60 * 60
    SESSION_ROLLING: bool = False
    SESSION_SWEEP_SECONDS: int = 300

    BCRYPT_ROUNDS: int = 10
    ENFORCE_ADMIN_WRITES: bool = True
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
