"""Shared database engine with liveness probing, reconnect and session management."""

import logging
import threading
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)


class StorageUnavailableError(Exception):
    """Raised when the database cannot be reached or a storage operation fails."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConnectionManager:
    """
    Lazily creates one engine and hands it out to every caller.

    Before an existing engine is reused it is probed with ``SELECT 1``; a failed
    probe disposes it and a fresh one is built. Building is attempted up to
    ``max_retries`` times before StorageUnavailableError is raised. All of this
    runs under an instance lock, so concurrent callers share one engine.
    """

    def __init__(self, url: str | URL, *, max_retries: int = 1, echo: bool = False) -> None:
        self.url = make_url(url)
        self.max_retries = max(1, max_retries)
        self.echo = echo
        self._engine: Engine | None = None
        # Reentrant: get_engine() calls dispose() while holding it.
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, cfg: Settings) -> "ConnectionManager":
        return cls(cfg.database_url(), max_retries=cfg.DB_CONNECT_RETRIES, echo=cfg.DEBUG)

    def _engine_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"pool_pre_ping": True, "echo": self.echo}
        if self.url.get_backend_name() == "sqlite" and self.url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database.
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
        return options

    @staticmethod
    def _ping(engine: Engine) -> None:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def get_engine(self) -> Engine:
        """Return a live engine, reconnecting if the cached one fails its probe."""
        with self._lock:
            if self._engine is not None:
                try:
                    self._ping(self._engine)
                    logger.debug("DB connection ping successful.")
                    return self._engine
                except SQLAlchemyError as e:
                    logger.warning("DB ping failed. Reconnecting... (%s)", e)
                    self.dispose()

            logger.info(
                "Effective DB config being used for connection attempt: %s",
                self.url.render_as_string(hide_password=True),
            )
            last_error: SQLAlchemyError | None = None
            for attempt in range(1, self.max_retries + 1):
                engine: Engine | None = None
                try:
                    engine = create_engine(self.url, **self._engine_options())
                    self._ping(engine)
                except SQLAlchemyError as e:
                    last_error = e
                    logger.warning(
                        "DB connection attempt %s/%s failed: %s", attempt, self.max_retries, e
                    )
                    if engine is not None:
                        engine.dispose()
                    continue
                self._engine = engine
                logger.info(
                    "Successfully connected to database '%s' on host '%s'.",
                    self.url.database or "",
                    self.url.host or "",
                )
                return engine

            logger.error("DB connection error: %s", last_error)
            raise StorageUnavailableError("Could not connect to DB.") from last_error

    def dispose(self) -> None:
        """Close all pooled connections and forget the cached engine."""
        with self._lock:
            if self._engine is None:
                return
            try:
                self._engine.dispose()
            except SQLAlchemyError as e:
                logger.warning("Error closing stale DB connection: %s", e)
            self._engine = None

    def session(self) -> Session:
        """Open a new ORM session bound to the live engine."""
        return SessionLocal(bind=self.get_engine())


SessionLocal = sessionmaker(autoflush=False)

db_manager = ConnectionManager.from_settings(settings)


def check_db_connected(manager: ConnectionManager | None = None) -> bool:
    """Verify the database is reachable; get_engine() already runs the SELECT 1 probe."""
    manager = manager or db_manager
    try:
        manager.get_engine()
        return True
    except StorageUnavailableError:
        return False
