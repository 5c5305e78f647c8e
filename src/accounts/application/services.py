"""
Accounts Application Services
=============================

Registration, authentication and referral commission.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from src.accounts.domain import User, ReferralCodeGenerator
from src.accounts.application.dto import RegisterRequest
from src.betting.domain import IGameConfigProvider
from src.core import (
    AuthenticationException,
    ConflictException,
    RepositoryException,
)
from src.infrastructure.security import hash_password, verify_password
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

REFERRAL_CODE_ATTEMPTS = 5


# ========== Repository Interfaces (Dependency Inversion) ==========

class IUserRepository(ABC):
    """Interface for account data access."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""

    @abstractmethod
    async def get_by_phone(self, phone: str) -> Optional[User]:
        """Get user by phone number."""

    @abstractmethod
    async def get_by_referral_code(self, code: str) -> Optional[User]:
        """Get user owning a referral code."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with its ID."""

    @abstractmethod
    async def adjust_balance(self, user_id: int, delta: Decimal) -> Decimal:
        """
        Add `delta` (may be negative) to a balance, returning the new balance.

        Raises:
            InsufficientBalanceException: If a debit would make the balance negative
        """

    @abstractmethod
    async def add_commission(self, user_id: int, amount: Decimal) -> Decimal:
        """Add to a user's referral commission, returning the new total."""

    @abstractmethod
    async def list(self, limit: int = 100, offset: int = 0) -> List[User]:
        """List users, newest first."""


# ========== Application Services ==========

class AccountService:
    """
    Service for account registration and login.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        config_provider: IGameConfigProvider
    ):
        self._user_repo = user_repository
        self._config_provider = config_provider

    async def register(self, request: RegisterRequest) -> User:
        """
        Register a player.

        Raises:
            ConflictException: If the username or phone is taken
        """
        if await self._user_repo.get_by_username(request.username):
            raise ConflictException("Username already exists")

        if request.phone and await self._user_repo.get_by_phone(request.phone):
            raise ConflictException("Phone number already registered")

        user = await self._user_repo.create(User(
            id=None,
            username=request.username,
            password_hash=hash_password(request.password),
            referral_code=await self._new_referral_code(),
            phone=request.phone,
            used_ref_code=request.used_ref_code,
        ))

        if request.used_ref_code:
            await self._credit_referrer(request.used_ref_code, user)

        logger.info(
            "User registered",
            extra={"user_id": user.id, "username": user.username}
        )
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """
        Raises:
            AuthenticationException: On unknown user or wrong password
        """
        user = await self._user_repo.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Login failed", extra={"username": username})
            raise AuthenticationException("Invalid credentials")
        return user

    async def list_users(self, limit: int = 100, offset: int = 0) -> List[User]:
        return await self._user_repo.list(limit=limit, offset=offset)

    async def ensure_admin(self, username: str, password: str) -> bool:
        """
        Create an admin account unless the username already exists.

        Returns:
            True if an account was created
        """
        if await self._user_repo.get_by_username(username):
            return False

        await self._user_repo.create(User(
            id=None,
            username=username,
            password_hash=hash_password(password),
            referral_code=await self._new_referral_code(),
            is_admin=True,
        ))
        logger.info("Bootstrap admin created", extra={"username": username})
        return True

    async def _credit_referrer(self, code: str, new_user: User) -> None:
        referrer = await self._user_repo.get_by_referral_code(code)
        if referrer is None:
            logger.warning(
                "Unknown referral code used at registration",
                extra={"user_id": new_user.id, "referral_code": code}
            )
            return

        bonus = self._config_provider.get_config().referral_bonus
        total = await self._user_repo.add_commission(referrer.id, bonus)
        logger.info(
            "Referral commission credited",
            extra={
                "referrer_id": referrer.id,
                "user_id": new_user.id,
                "bonus": str(bonus),
                "commission_total": str(total)
            }
        )

    async def _new_referral_code(self) -> str:
        for _ in range(REFERRAL_CODE_ATTEMPTS):
            code = ReferralCodeGenerator.generate()
            if await self._user_repo.get_by_referral_code(code) is None:
                return code
        raise RepositoryException("Could not allocate a unique referral code")
