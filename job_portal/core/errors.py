"""
Error taxonomy for the API.

Every error is an HTTPException, so routes raise them exactly like FastAPI's
own exception and the framework renders {"detail": ...}.

- ValidationError (400)         bad or missing fields
- DuplicateEmailError (400)     email already registered
- InvalidCredentialsError (400) unknown email or wrong password (same body)
- ApplicationError (400)        student already applied to the job
- AuthenticationError (401/403) missing / invalid / expired / revoked token
- AuthorizationError (403)      wrong role
- NotFoundError (404)           missing resource or not owned by caller
- ServerError (500)             unhandled database failure
"""

from typing import Any, Optional
from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base class: subclasses set default status and message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Server error"

    def __init__(self, detail: Optional[Any] = None, headers: Optional[dict] = None):
        super().__init__(
            status_code=type(self).status_code,
            detail=detail if detail is not None else self.default_detail,
            headers=headers,
        )


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class DuplicateEmailError(ValidationError):
    default_detail = "Email already exists"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid credentials"


class ApplicationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Already applied for this job"


class AuthenticationError(AppError):
    """Missing token -> 401 (use MissingTokenError), bad token -> 403."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token"


class MissingTokenError(AuthenticationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"

    def __init__(self, detail: Optional[Any] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Server error"
