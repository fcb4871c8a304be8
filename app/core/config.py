"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

# Driver used when the URL is assembled from the DB_* variables.
DEFAULT_DRIVERNAME = "postgresql+psycopg2"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"

    # Relational store. Blank values are passed through as-is: a missing
    # DB_HOST means the driver's local default, not a startup error.
    DB_HOST: str = ""
    DB_PORT: int | None = None
    DB_USER: str = ""
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_NAME: str = ""
    # Full SQLAlchemy URL; when set it wins over the DB_* parts above.
    DATABASE_URL: str | None = None

    # Engine creation attempts before StorageUnavailableError is raised.
    DB_CONNECT_RETRIES: int = 1

    # Cost factor for bcrypt password hashes written by the seeder.
    BCRYPT_ROUNDS: int = 10

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("DB_PORT")
    @classmethod
    def validate_db_port(cls, v: int | None) -> int | None:
        if v is not None and (v < 1 or v > 65535):
            raise ValueError("DB_PORT must be between 1 and 65535")
        return v

    @field_validator("DB_CONNECT_RETRIES")
    @classmethod
    def validate_db_connect_retries(cls, v: int) -> int:
        if v < 1 or v > 10:
            raise ValueError("DB_CONNECT_RETRIES must be between 1 and 10")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    def database_url(self) -> URL:
        """Return the SQLAlchemy URL for the Users store."""
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            DEFAULT_DRIVERNAME,
            username=self.DB_USER or None,
            password=self.DB_PASSWORD.get_secret_value() or None,
            host=self.DB_HOST or None,
            port=self.DB_PORT,
            database=self.DB_NAME or None,
        )

    def loggable_db_config(self) -> dict[str, str | int | None]:
        """DB connection parameters with the password masked, for log lines."""
        return {
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "user": self.DB_USER,
            "password": "********" if self.DB_PASSWORD.get_secret_value() else None,
            "database": self.DB_NAME,
        }


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
