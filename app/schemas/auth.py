"""Request/response schemas for sign-in and seeded credentials."""

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Which admin panel an authenticated account lands on."""

    SUPER_ADMIN = "super_admin"
    CLIENT_ADMIN = "client_admin"


class AuthFailureReason(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_CREDENTIALS = "invalid_credentials"


class SignInRequest(BaseModel):
    """
    Sign-in form submission.

    Fields are untyped and optional so that missing, empty or non-string values
    come back as an invalid_input result instead of a schema validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Any = Field(default=None, alias="user_Id", description="User identifier")
    password: Any = Field(default=None, description="Password")


class AuthSuccess(BaseModel):
    success: Literal[True] = True
    role: Role
    identifier: str
    message: str
    redirect_to: str | None = Field(
        default=None, description="Dashboard route for the role"
    )


class AuthFailure(BaseModel):
    success: Literal[False] = False
    reason: AuthFailureReason
    message: str


AuthResult = Union[AuthSuccess, AuthFailure]


class SampleUserCredentials(BaseModel):
    """Seeded account summary returned by the initializer (no password)."""

    user_identifier: str
    role_hint: Role
