"""
Wallet Infrastructure Repositories
==================================

SQLAlchemy implementations of the ledger and payment method repositories.
"""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import TransactionStatus
from src.core import RepositoryException
from src.wallet.application import ITransactionRepository, IPaymentMethodRepository
from src.wallet.domain import PaymentMethod, Transaction
from src.wallet.infrastructure.models import PaymentMethodModel, TransactionModel


class SQLAlchemyTransactionRepository(ITransactionRepository):
    """
    SQLAlchemy implementation of the ledger repository.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(
            user_id=transaction.user_id,
            type=transaction.type,
            amount=transaction.amount,
            status=transaction.status,
            description=transaction.description,
            payment_method_id=transaction.payment_method_id,
            receipt_url=transaction.receipt_url,
            admin_notes=transaction.admin_notes,
        )

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        model = await self._session.get(TransactionModel, transaction_id)
        return self._to_entity(model) if model else None

    async def list_by_user(self, user_id: int, limit: int = 100) -> List[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.user_id == user_id)
            .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_pending(self) -> List[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.status == TransactionStatus.PENDING)
            .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def update(self, transaction: Transaction) -> Transaction:
        model = await self._session.get(TransactionModel, transaction.id)
        if model is None:
            raise RepositoryException(f"Transaction {transaction.id} not found")

        model.status = transaction.status
        model.admin_notes = transaction.admin_notes
        await self._session.flush()

        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            amount=model.amount,
            status=model.status,
            description=model.description,
            payment_method_id=model.payment_method_id,
            receipt_url=model.receipt_url,
            admin_notes=model.admin_notes,
            created_at=model.created_at
        )


class SQLAlchemyPaymentMethodRepository(IPaymentMethodRepository):
    """
    SQLAlchemy implementation of the payment method repository.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, method_id: int) -> Optional[PaymentMethod]:
        model = await self._session.get(PaymentMethodModel, method_id)
        return self._to_entity(model) if model else None

    async def list(self, active_only: bool = False) -> List[PaymentMethod]:
        stmt = select(PaymentMethodModel)
        if active_only:
            stmt = stmt.where(PaymentMethodModel.is_active.is_(True))
        stmt = stmt.order_by(PaymentMethodModel.id.asc())

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def create(self, method: PaymentMethod) -> PaymentMethod:
        model = PaymentMethodModel(
            name=method.name,
            account_name=method.account_name,
            account_number=method.account_number,
            is_active=method.is_active,
        )

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def update(self, method: PaymentMethod) -> PaymentMethod:
        model = await self._session.get(PaymentMethodModel, method.id)
        if model is None:
            raise RepositoryException(f"Payment method {method.id} not found")

        model.name = method.name
        model.account_name = method.account_name
        model.account_number = method.account_number
        model.is_active = method.is_active
        await self._session.flush()

        return self._to_entity(model)

    async def delete(self, method_id: int) -> None:
        # Ledger rows outlive the method; unlink them first
        await self._session.execute(
            update(TransactionModel)
            .where(TransactionModel.payment_method_id == method_id)
            .values(payment_method_id=None)
            .execution_options(synchronize_session="fetch")
        )
        await self._session.execute(
            delete(PaymentMethodModel).where(PaymentMethodModel.id == method_id)
        )
        await self._session.flush()

    @staticmethod
    def _to_entity(model: PaymentMethodModel) -> PaymentMethod:
        return PaymentMethod(
            id=model.id,
            name=model.name,
            account_name=model.account_name,
            account_number=model.account_number,
            is_active=model.is_active,
            created_at=model.created_at
        )
