"""
Security Infrastructure
=======================

Password hashing (bcrypt) and bearer access tokens (JWT, HS256).
"""

from datetime import timedelta
from typing import Any, Optional

import bcrypt
import jwt

from src.config import settings
from src.core import AuthenticationException, utcnow


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(user_id: int, expires_minutes: Optional[int] = None) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: Subject of the token
        expires_minutes: Lifetime override (defaults to settings)

    Returns:
        str: Encoded JWT
    """
    lifetime = expires_minutes or settings.access_token_expire_minutes
    now = utcnow()
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int:
    """
    Validate a token and return the user id it was issued for.

    Raises:
        AuthenticationException: If the token is expired, malformed or unsigned
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationException("Token expired")
    except jwt.InvalidTokenError:
        raise AuthenticationException("Invalid token")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise AuthenticationException("Invalid token")
