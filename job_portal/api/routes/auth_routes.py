"""
Authentication Routes

POST /register - Register user and role profile in one transaction
POST /login - Login and get JWT token
POST /logout - Revoke every token issued so far
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from job_portal.db.database import get_db_session
from job_portal.core.auth import hash_password, verify_password, create_user_token, get_current_user
from job_portal.core.errors import DuplicateEmailError, InvalidCredentialsError, ValidationError
from job_portal.schemas.schemas import (
    RegisterRequest, LoginRequest, TokenResponse, MessageResponse, UserRole, PROFILE_DATA_MODELS
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


def _parse_profile_data(request: RegisterRequest):
    """Validate profileData against the model for the requested role."""
    model = PROFILE_DATA_MODELS[request.user_type]
    try:
        return model.model_validate(request.profile_data)
    except PydanticValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ValidationError(f"Missing or invalid profile fields: {', '.join(missing)}")


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest):
    """
    Register a new employee or student.

    The user row and its profile row are written in one transaction, so a
    failed profile insert leaves no orphan user behind.
    """
    profile = _parse_profile_data(request)

    try:
        with get_db_session() as db:
            # Check email exists
            result = db.execute(
                text("SELECT id FROM users WHERE email = :email"),
                {"email": request.email}
            )
            if result.fetchone():
                raise DuplicateEmailError()

            result = db.execute(
                text("""
                    INSERT INTO users (email, password_hash, role)
                    VALUES (:email, :password_hash, :role)
                    RETURNING id
                """),
                {
                    "email": request.email,
                    "password_hash": hash_password(request.password),
                    "role": request.user_type.value
                }
            )
            user_id = result.scalar_one()

            if request.user_type == UserRole.employee:
                db.execute(
                    text("""
                        INSERT INTO employee_profiles (user_id, company_name, contact_person, industry)
                        VALUES (:user_id, :company_name, :contact_person, :industry)
                    """),
                    {"user_id": user_id, **profile.model_dump()}
                )
            else:
                db.execute(
                    text("""
                        INSERT INTO student_profiles (user_id, first_name, last_name, university)
                        VALUES (:user_id, :first_name, :last_name, :university)
                    """),
                    {"user_id": user_id, **profile.model_dump()}
                )
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        raise DuplicateEmailError()

    logger.info("Registered %s user %s", request.user_type.value, user_id)
    return MessageResponse(message=f"{request.user_type.value.capitalize()} registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Unknown email and wrong password produce the same response.
    Include token in requests: Authorization: Bearer <token>
    """
    with get_db_session() as db:
        result = db.execute(
            text("SELECT id, password_hash, role, token_version FROM users WHERE email = :email"),
            {"email": request.email}
        )
        user = result.fetchone()

    password_hash = user[1] if user else None
    if not verify_password(request.password, password_hash):
        logger.warning("Failed login attempt")
        raise InvalidCredentialsError()

    user_id, _, role, token_version = user
    token = create_user_token(user_id, role, token_version)

    return TokenResponse(token=token, user_type=role)


@router.post("/logout", response_model=MessageResponse)
async def logout(user: dict = Depends(get_current_user)):
    """Invalidate all of the caller's tokens by bumping their token version."""
    with get_db_session() as db:
        db.execute(
            text("UPDATE users SET token_version = token_version + 1 WHERE id = :id"),
            {"id": user["user_id"]}
        )

    return MessageResponse(message="Logged out successfully")
