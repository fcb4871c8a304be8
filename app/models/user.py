"""ORM model for admin panel accounts (the Users credential store)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base


class User(Base):
    """
    Account that can sign in to the super-admin or client-admin panel.

    No role is stored: which panel an account belongs to is only a hint
    recorded at seeding time.
    """

    __tablename__ = "Users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_identifier = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True, unique=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
