"""
Accounts Controllers (API Routes)
=================================

FastAPI routes for registration, login and the current account.

Controllers are thin - they delegate to application services.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.application import (
    AccountService,
    RegisterRequest, LoginRequest,
    AuthResponse, MeResponse,
    UserResponse, UserListResponse
)
from src.accounts.domain import User
from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.accounts.interfaces.dependencies import get_current_user, require_admin
from src.betting.domain import IGameConfigProvider
from src.betting.infrastructure import get_game_config_provider
from src.infrastructure.database import get_session
from src.infrastructure.security import create_access_token

from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api", tags=["Accounts"])


# ========== Example payloads for Swagger ==========

AUTH_RESPONSE_EXAMPLE = {
    "message": "Login successful",
    "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "user": {
        "id": 7,
        "username": "mgmg",
        "phone": "09123456789",
        "balance": "0.00",
        "commission": "0.00",
        "referral_code": "SMQ4K8ZP",
        "is_admin": False,
        "created_at": "2024-01-15T10:00:00Z"
    }
}


# ========== Dependencies ==========

async def get_account_service(
    session: AsyncSession = Depends(get_session),
    config_provider: IGameConfigProvider = Depends(get_game_config_provider)
) -> AccountService:
    """Get account service instance."""
    return AccountService(SQLAlchemyUserRepository(session), config_provider)


# ========== Route Handlers ==========

@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a player",
    description="""
    Create a player account and return a bearer token.

    - `username` and `phone` must be unique (409 otherwise)
    - `password` must be at least 6 characters and match `confirm_password`
    - `used_ref_code`: referral code of the inviting player; a known code
      credits the referrer's commission
    """,
    responses={
        201: {"content": {"application/json": {"example": AUTH_RESPONSE_EXAMPLE}}},
        409: {"description": "Username or phone already registered"}
    }
)
async def register(
    request: RegisterRequest,
    session: AsyncSession = Depends(get_session),
    account_service: AccountService = Depends(get_account_service)
):
    user = await account_service.register(request)
    await session.commit()

    return AuthResponse(
        message="Registration successful",
        token=create_access_token(user.id),
        user=UserResponse.from_entity(user)
    )


@router.post(
    "/auth/login",
    response_model=AuthResponse,
    summary="Log in",
    responses={
        200: {"content": {"application/json": {"example": AUTH_RESPONSE_EXAMPLE}}},
        401: {"description": "Invalid credentials"}
    }
)
async def login(
    request: LoginRequest,
    account_service: AccountService = Depends(get_account_service)
):
    user = await account_service.authenticate(request.username, request.password)
    logger.info("User logged in", extra={"user_id": user.id})

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id),
        user=UserResponse.from_entity(user)
    )


@router.get(
    "/auth/me",
    response_model=MeResponse,
    summary="Current account",
    description="Profile, balance and commission of the token's owner."
)
async def me(user: User = Depends(get_current_user)):
    return MeResponse(user=UserResponse.from_entity(user))


@router.get(
    "/admin/users",
    response_model=UserListResponse,
    summary="List players (admin)"
)
async def list_users(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    admin: User = Depends(require_admin),
    account_service: AccountService = Depends(get_account_service)
):
    users = await account_service.list_users(limit=limit, offset=offset)
    return UserListResponse(users=[UserResponse.from_entity(u) for u in users])


# Export router for inclusion in main app
accounts_router = router
