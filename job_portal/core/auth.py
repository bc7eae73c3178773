"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification (exp + token version claims)
- FastAPI dependencies for protected routes
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy import text

from job_portal.core.config import get_settings
from job_portal.core.errors import AuthenticationError, AuthorizationError, MissingTokenError
from job_portal.db.database import get_db_session

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extractor. Missing header is reported as 401 by get_current_user.
bearer_scheme = HTTPBearer(auto_error=False)

# Verified when the email is unknown so both login failures cost the same
_DUMMY_HASH = pwd_context.hash("job-portal-dummy-password")


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify password against hash. A missing hash still burns one bcrypt round."""
    if hashed_password is None:
        pwd_context.verify(plain_password, _DUMMY_HASH)
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_user_token(user_id: int, role: str, token_version: int) -> str:
    """Token for a logged-in user: subject, role and the user's current token version."""
    return create_access_token(data={"sub": str(user_id), "role": role, "ver": token_version})


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token (signature and expiry)."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    No bearer header -> 401. Bad signature, expired, revoked (token version
    bumped by logout) or unknown user -> 403.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    if credentials is None:
        raise MissingTokenError()

    payload = decode_token(credentials.credentials)
    if not payload:
        raise AuthenticationError()

    user_id = payload.get("sub")
    if not user_id or not str(user_id).isdigit():
        raise AuthenticationError()

    with get_db_session() as db:
        result = db.execute(
            text("SELECT id, email, role, token_version FROM users WHERE id = :id"),
            {"id": int(user_id)}
        )
        user = result.fetchone()

    if not user:
        raise AuthenticationError()

    if payload.get("ver") != user[3]:
        logger.info("Rejected revoked token for user %s", user[0])
        raise AuthenticationError("Token has been revoked")

    return {"user_id": user[0], "email": user[1], "role": user[2], "token_version": user[3]}


async def get_current_employee(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require employee (job poster) role."""
    if user["role"] != "employee":
        raise AuthorizationError()
    return user


async def get_current_student(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require student role."""
    if user["role"] != "student":
        raise AuthorizationError()
    return user
