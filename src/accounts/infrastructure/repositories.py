"""
Accounts Infrastructure Repositories
====================================

SQLAlchemy implementation of the user repository.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.application import IUserRepository
from src.accounts.domain import User
from src.accounts.infrastructure.models import UserModel
from src.core import InsufficientBalanceException, ResourceNotFoundException


class SQLAlchemyUserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Handles persistence of User entities using async SQLAlchemy.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        model = await self._session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._get_one(UserModel.username == username)

    async def get_by_phone(self, phone: str) -> Optional[User]:
        return await self._get_one(UserModel.phone == phone)

    async def get_by_referral_code(self, code: str) -> Optional[User]:
        return await self._get_one(UserModel.referral_code == code)

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            password_hash=user.password_hash,
            phone=user.phone,
            balance=user.balance,
            referral_code=user.referral_code,
            used_ref_code=user.used_ref_code,
            commission=user.commission,
            is_admin=user.is_admin,
        )
        if user.created_at:
            model.created_at = user.created_at

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def adjust_balance(self, user_id: int, delta: Decimal) -> Decimal:
        model = await self._lock(user_id)
        # Re-checked under the row lock; the caller's earlier read may be stale
        if delta < 0 and model.balance + delta < 0:
            raise InsufficientBalanceException(user_id, -delta, model.balance)
        model.balance = model.balance + delta
        await self._session.flush()
        return model.balance

    async def add_commission(self, user_id: int, amount: Decimal) -> Decimal:
        model = await self._lock(user_id)
        model.commission = model.commission + amount
        await self._session.flush()
        return model.commission

    async def list(self, limit: int = 100, offset: int = 0) -> List[User]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def _get_one(self, condition) -> Optional[User]:
        result = await self._session.execute(select(UserModel).where(condition))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def _lock(self, user_id: int) -> UserModel:
        """Load a user row for update (row lock on PostgreSQL)."""
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise ResourceNotFoundException("User", str(user_id))
        return model

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            referral_code=model.referral_code,
            balance=model.balance,
            commission=model.commission,
            phone=model.phone,
            used_ref_code=model.used_ref_code,
            is_admin=model.is_admin,
            created_at=model.created_at
        )
