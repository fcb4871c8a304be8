"""Core app configuration and database."""

from app.core.config import get_settings, settings
from app.core.database import StorageUnavailableError, db_manager

__all__ = ["get_settings", "settings", "StorageUnavailableError", "db_manager"]
