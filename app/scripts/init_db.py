"""
Developer startup script: drop, recreate and seed the Users table.

  python -m app.scripts.init_db

Destroys every existing account. Never point it at a production database.
"""

import logging
import sys

from app.core.config import get_settings
from app.core.database import StorageUnavailableError
from app.services.user_store import initialize_database

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

PANEL_NAMES = {
    "super_admin": "Super Admin Panel",
    "client_admin": "Client Admin Panel",
}


def main() -> int:
    """Initialize the database and list the seeded sample accounts."""
    logger.info("Attempting to initialize database and add sample users...")
    logger.info("Effective DB config: %s", get_settings().loggable_db_config())
    try:
        seeded = initialize_database()
    except StorageUnavailableError as e:
        logger.error("Failed to initialize database during dev startup: %s", e)
        logger.error(
            "Please ensure your database server is running and DB_HOST, DB_USER, "
            "DB_PASSWORD and DB_NAME in .env are correct."
        )
        return 1

    logger.info("Sample accounts for testing (from Users table):")
    for creds in seeded:
        logger.info("  %s -> User Identifier: %s", PANEL_NAMES[creds.role_hint.value], creds.user_identifier)
    return 0


if __name__ == "__main__":
    sys.exit(main())
