"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthFailure,
    AuthFailureReason,
    AuthResult,
    AuthSuccess,
    Role,
    SampleUserCredentials,
    SignInRequest,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AuthFailure",
    "AuthFailureReason",
    "AuthResult",
    "AuthSuccess",
    "HealthResponse",
    "Role",
    "SampleUserCredentials",
    "SignInRequest",
]
