"""Sign-in endpoint for the super-admin and client-admin panels."""

from fastapi import APIRouter, Response, status

from app.schemas.auth import AuthFailure, AuthFailureReason, AuthResult, SignInRequest
from app.services.auth import sign_in

router = APIRouter()

FAILURE_STATUS = {
    AuthFailureReason.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthFailureReason.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}


@router.post("/sign-in", response_model=AuthResult)
def sign_in_user(response: Response, body: SignInRequest | None = None) -> AuthResult:
    """
    Check a sign-in form submission and return the role-tagged outcome.
    On success, redirect_to holds the dashboard route for the role.
    A missing body is treated like a form with both fields empty.
    """
    if body is None:
        result = sign_in(None, None)
    else:
        result = sign_in(body.user_id, body.password)
    if isinstance(result, AuthFailure):
        response.status_code = FAILURE_STATUS[result.reason]
    return result
