"""
Authentication gate: decide accept/reject for a sign-in attempt.

Known issues, kept deliberately for parity with the deployed panels:

* the only accepted pair is the literal ``admin`` / ``admin123`` bypass;
* the Users store and its bcrypt hashes are never consulted, so seeded
  accounts (testUser, clientTestUser, dineshUser) cannot sign in.

Closing either gap means routing the check through ``app.core.security.verify_password``
and storing a role per user.
"""

import logging

from app.schemas.auth import AuthFailure, AuthFailureReason, AuthResult, AuthSuccess, Role

logger = logging.getLogger(__name__)

BYPASS_IDENTIFIER = "admin"
BYPASS_PASSWORD = "admin123"

MESSAGE_SUCCESS_SUPER_ADMIN = "Sign in successful! (Super Admin)"
MESSAGE_INVALID_INPUT = "Invalid input."
MESSAGE_INVALID_CREDENTIALS = "Invalid User ID or password."

DASHBOARD_ROUTES = {
    Role.SUPER_ADMIN: "/dashboard",
    Role.CLIENT_ADMIN: "/client-admin/dashboard",
}


def dashboard_route(role: Role) -> str:
    """Return the panel route a client should navigate to after sign-in."""
    return DASHBOARD_ROUTES[role]


def _is_filled(value: object) -> bool:
    return isinstance(value, str) and len(value) > 0


def sign_in(identifier: object, password: object) -> AuthResult:
    """
    Validate a sign-in attempt and return a role-tagged result.

    Performs no I/O. Missing, empty or non-string fields yield invalid_input; any pair
    other than the bypass literal yields invalid_credentials.
    """
    if not _is_filled(identifier) or not _is_filled(password):
        return AuthFailure(
            reason=AuthFailureReason.INVALID_INPUT,
            message=MESSAGE_INVALID_INPUT,
        )

    if identifier == BYPASS_IDENTIFIER and password == BYPASS_PASSWORD:
        logger.info("Sign in accepted: identifier=%s role=%s", identifier, Role.SUPER_ADMIN.value)
        return AuthSuccess(
            role=Role.SUPER_ADMIN,
            identifier=identifier,
            message=MESSAGE_SUCCESS_SUPER_ADMIN,
            redirect_to=dashboard_route(Role.SUPER_ADMIN),
        )

    logger.info("Sign in rejected: identifier=%s", identifier)
    return AuthFailure(
        reason=AuthFailureReason.INVALID_CREDENTIALS,
        message=MESSAGE_INVALID_CREDENTIALS,
    )
