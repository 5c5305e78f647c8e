"""
Authentication Dependencies
===========================

FastAPI dependencies resolving the bearer token to the calling account.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.domain import User
from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.core import AuthenticationException, AuthorizationException
from src.infrastructure.database import get_session
from src.infrastructure.security import decode_access_token

# Missing credentials are reported through our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_session)
) -> User:
    """Resolve the Authorization header to a stored account."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Authentication required")

    user_id = decode_access_token(credentials.credentials)

    user = await SQLAlchemyUserRepository(session).get_by_id(user_id)
    if user is None:
        raise AuthenticationException("User not found")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise AuthorizationException("Admin access required")
    return user
