# coworker/adapters/configuration/config.py

from typing import Optional, List, Union, Literal
from logging import getLevelName
from pydantic import PostgresDsn, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Database
    DB_DRIVER: str = "psycopg2"
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int
    TEST_MODE: bool = False
    TEST_POSTGRES_DB: str = ""
    DATABASE_URL: Optional[PostgresDsn] = Field(default=None, validate_default=True)

    # Auth
    TOKEN_SYMMETRIC_KEY: str
    TOKEN_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_DURATION_MINUTES: int = 15
    SESSION_DURATION_MINUTES: int = 60 * 24
    AUTH_MODE: Literal["token", "session"] = "token"
    TOKEN_TRANSPORT: Literal["header", "cookie"] = "header"
    ACCESS_TOKEN_COOKIE_NAME: str = "access_token"
    SESSION_COOKIE_NAME: str = "session_token"
    COOKIE_SECURE: bool = True

    # HTTP
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        db_name = data.get("TEST_POSTGRES_DB") if data.get("TEST_MODE") else data.get("POSTGRES_DB")
        return PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'psycopg2')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=db_name,
        )

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        A CSV string (e.g. 'a,b,c') becomes a list.
        A list is returned as is.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensure the value is a valid logging level."""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
