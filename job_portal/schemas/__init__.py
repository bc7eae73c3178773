"""
Schemas module - Request/Response schemas for API endpoints.
"""

from job_portal.schemas.schemas import (
    UserRole,
    ApplicationStatus,
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    MessageResponse,
)

__all__ = [
    "UserRole",
    "ApplicationStatus",
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "MessageResponse",
]
