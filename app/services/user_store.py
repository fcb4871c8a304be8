"""
Credential store initializer: (re)create the Users table and seed sample accounts.

initialize_database() is meant for development startup only. It drops the
table first, so every run destroys all existing accounts.
"""

import logging
from typing import NamedTuple

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import ConnectionManager, SessionLocal, StorageUnavailableError, db_manager
from app.core.security import hash_password
from app.models import User
from app.schemas.auth import Role, SampleUserCredentials

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"


class SampleUser(NamedTuple):
    user_identifier: str
    plain_password: str
    role_hint: Role
    full_name: str | None = None
    email: str | None = None


SAMPLE_USERS: tuple[SampleUser, ...] = (
    SampleUser("testUser", SAMPLE_PASSWORD, Role.SUPER_ADMIN, "Test Super Admin", "superadmin@example.com"),
    SampleUser("clientTestUser", SAMPLE_PASSWORD, Role.CLIENT_ADMIN, "Test Client Admin", "clientadmin@example.com"),
    SampleUser("dineshUser", SAMPLE_PASSWORD, Role.CLIENT_ADMIN, "Dinesh", "dinesh@example.com"),
)


def drop_users_table(engine: Engine) -> None:
    """DROP TABLE IF EXISTS Users."""
    User.__table__.drop(engine, checkfirst=True)
    logger.info("'Users' table dropped successfully (or did not exist).")


def create_users_table(engine: Engine) -> None:
    """CREATE TABLE IF NOT EXISTS Users."""
    User.__table__.create(engine, checkfirst=True)
    logger.info("Users table checked/created successfully.")


def get_user(session: Session, user_identifier: str) -> User | None:
    return session.query(User).filter(User.user_identifier == user_identifier).first()


def add_user(
    session: Session,
    user_identifier: str,
    plain_password: str,
    full_name: str | None = None,
    email: str | None = None,
) -> bool:
    """
    Insert an account unless one with this identifier already exists.

    Returns True when a row was inserted, False when the identifier was taken.
    Missing display fields default to the identifier and identifier@example.com.
    """
    if get_user(session, user_identifier) is not None:
        logger.info("User '%s' already exists in Users table.", user_identifier)
        return False

    session.add(
        User(
            user_identifier=user_identifier,
            password_hash=hash_password(plain_password),
            full_name=full_name or user_identifier,
            email=email or f"{user_identifier}@example.com",
        )
    )
    session.commit()
    logger.info("User '%s' added to Users table successfully.", user_identifier)
    return True


def add_sample_user(
    session: Session,
    user_identifier: str,
    plain_password: str,
    role_hint: Role,
    full_name: str | None = None,
    email: str | None = None,
) -> SampleUserCredentials:
    """Seed one sample account; a no-op if the identifier is already present."""
    add_user(session, user_identifier, plain_password, full_name=full_name, email=email)
    return SampleUserCredentials(user_identifier=user_identifier, role_hint=role_hint)


def initialize_database(
    manager: ConnectionManager | None = None,
    sample_users: tuple[SampleUser, ...] = SAMPLE_USERS,
) -> list[SampleUserCredentials]:
    """
    Drop and recreate the Users table, then seed the sample accounts.

    Any database failure aborts the whole routine and is raised as
    StorageUnavailableError after being logged.
    """
    manager = manager or db_manager
    logger.info("Starting database initialization...")
    seeded: list[SampleUserCredentials] = []
    try:
        engine = manager.get_engine()
        logger.info("Dropping 'Users' table if it exists for a clean setup...")
        drop_users_table(engine)
        create_users_table(engine)

        logger.info("Adding sample users...")
        session = SessionLocal(bind=engine)
        try:
            for sample in sample_users:
                seeded.append(add_sample_user(session, **sample._asdict()))
        finally:
            session.close()
    except StorageUnavailableError as e:
        logger.error("DB initialization failed: %s", e)
        raise
    except SQLAlchemyError as e:
        logger.exception("DB initialization failed: %s", e)
        raise StorageUnavailableError(f"DB initialization failed: {e}") from e

    logger.info("--- Sample user accounts (for Users table) ---")
    for creds in seeded:
        logger.info(
            "%s -> User Identifier: %s, Password: ********",
            creds.role_hint.value,
            creds.user_identifier,
        )
    logger.info("Database initialization process completed.")
    return seeded
