"""
Wallet Application Services
===========================

Deposit/withdrawal requests, their review, and payment methods.

Following SOLID principles:
- Single Responsibility: requests and payment methods are separate services
- Dependency Inversion: services depend on repository interfaces
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.accounts.application import IUserRepository
from src.admin.application import AuditService
from src.betting.domain import IGameConfigProvider
from src.config import AuditAction, TransactionType
from src.core import (
    InsufficientBalanceException,
    ResourceNotFoundException,
    ValidationException,
)
from src.wallet.application.dto import (
    PaymentMethodCreateRequest,
    PaymentMethodUpdateRequest,
    TransactionCreateRequest,
)
from src.wallet.domain import PaymentMethod, Transaction
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interfaces (Dependency Inversion) ==========

class ITransactionRepository(ABC):
    """Interface for ledger data access."""

    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        """Store a ledger entry and return it with its ID."""

    @abstractmethod
    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""

    @abstractmethod
    async def list_by_user(self, user_id: int, limit: int = 100) -> List[Transaction]:
        """List a user's transactions, newest first."""

    @abstractmethod
    async def list_pending(self) -> List[Transaction]:
        """List transactions awaiting review, newest first."""

    @abstractmethod
    async def update(self, transaction: Transaction) -> Transaction:
        """Persist status and admin notes of an existing transaction."""


class IPaymentMethodRepository(ABC):
    """Interface for payment method data access."""

    @abstractmethod
    async def get_by_id(self, method_id: int) -> Optional[PaymentMethod]:
        """Get payment method by ID."""

    @abstractmethod
    async def list(self, active_only: bool = False) -> List[PaymentMethod]:
        """List payment methods."""

    @abstractmethod
    async def create(self, method: PaymentMethod) -> PaymentMethod:
        """Store a new payment method."""

    @abstractmethod
    async def update(self, method: PaymentMethod) -> PaymentMethod:
        """Persist changes to a payment method."""

    @abstractmethod
    async def delete(self, method_id: int) -> None:
        """Remove a payment method."""


# ========== Application Services ==========

class WalletService:
    """
    Service for player deposit/withdrawal requests.

    A request does not move money. The balance changes when an admin
    approves it, in the same unit of work as the status update.
    """

    def __init__(
        self,
        transaction_repository: ITransactionRepository,
        user_repository: IUserRepository,
        payment_method_repository: IPaymentMethodRepository,
        config_provider: IGameConfigProvider,
        audit_service: AuditService
    ):
        self._transaction_repo = transaction_repository
        self._user_repo = user_repository
        self._payment_method_repo = payment_method_repository
        self._config_provider = config_provider
        self._audit = audit_service

    async def request_transaction(
        self,
        user_id: int,
        request: TransactionCreateRequest
    ) -> Transaction:
        """
        Create a pending deposit or withdrawal request.

        Raises:
            ValidationException: Deposit below minimum or unusable payment method
            InsufficientBalanceException: Withdrawal larger than the balance
        """
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("User", str(user_id))

        if request.type == TransactionType.DEPOSIT:
            min_deposit = self._config_provider.get_config().min_deposit
            if request.amount < min_deposit:
                raise ValidationException(f"Minimum deposit is {min_deposit}")
        elif not user.can_afford(request.amount):
            raise InsufficientBalanceException(user.id, request.amount, user.balance)

        if request.payment_method_id is not None:
            method = await self._payment_method_repo.get_by_id(request.payment_method_id)
            if method is None or not method.is_active:
                raise ValidationException("Payment method is not available")

        transaction = await self._transaction_repo.create(Transaction(
            id=None,
            user_id=user_id,
            type=request.type,
            amount=request.amount,
            description=request.description,
            payment_method_id=request.payment_method_id,
            receipt_url=request.receipt_url,
        ))

        logger.info(
            "Transaction requested",
            extra={
                "transaction_id": transaction.id,
                "user_id": user_id,
                "type": transaction.type,
                "amount": str(transaction.amount)
            }
        )
        return transaction

    async def list_user_transactions(self, user_id: int, limit: int = 100) -> List[Transaction]:
        return await self._transaction_repo.list_by_user(user_id, limit=limit)

    async def list_pending(self) -> List[Transaction]:
        return await self._transaction_repo.list_pending()

    async def review_transaction(
        self,
        admin_id: int,
        transaction_id: int,
        status: str,
        admin_notes: Optional[str] = None
    ) -> Transaction:
        """
        Approve or reject a pending request, applying approved amounts
        to the player's balance.

        Raises:
            ResourceNotFoundException: Unknown transaction
            ConflictException: Transaction already reviewed or not a request
            InsufficientBalanceException: Approved withdrawal exceeds balance
        """
        transaction = await self._transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise ResourceNotFoundException("Transaction", str(transaction_id))

        delta = transaction.review(status, admin_notes)

        if delta < 0:
            user = await self._user_repo.get_by_id(transaction.user_id)
            if user is None:
                raise ResourceNotFoundException("User", str(transaction.user_id))
            if not user.can_afford(-delta):
                raise InsufficientBalanceException(user.id, -delta, user.balance)

        transaction = await self._transaction_repo.update(transaction)

        new_balance = None
        if delta != 0:
            new_balance = await self._user_repo.adjust_balance(transaction.user_id, delta)

        details = f"Updated transaction {transaction_id} status to {status}"
        if admin_notes:
            details += f" with notes: {admin_notes}"
        await self._audit.record(admin_id, AuditAction.TRANSACTION_UPDATE, details)

        logger.info(
            "Transaction reviewed",
            extra={
                "transaction_id": transaction_id,
                "admin_id": admin_id,
                "status": status,
                "balance_delta": str(delta),
                "new_balance": str(new_balance) if new_balance is not None else None
            }
        )
        return transaction


class PaymentMethodService:
    """CRUD for payment methods; admin changes are audited."""

    def __init__(
        self,
        payment_method_repository: IPaymentMethodRepository,
        audit_service: Optional[AuditService] = None
    ):
        self._repo = payment_method_repository
        self._audit = audit_service

    async def list_active(self) -> List[PaymentMethod]:
        return await self._repo.list(active_only=True)

    async def list_all(self) -> List[PaymentMethod]:
        return await self._repo.list(active_only=False)

    async def create(self, admin_id: int, request: PaymentMethodCreateRequest) -> PaymentMethod:
        method = await self._repo.create(PaymentMethod(
            id=None,
            name=request.name,
            account_name=request.account_name,
            account_number=request.account_number,
            is_active=request.is_active,
        ))
        await self._record(admin_id, AuditAction.PAYMENT_METHOD_CREATED,
                           f"Created payment method {method.id} ({method.name})")
        return method

    async def update(
        self,
        admin_id: int,
        method_id: int,
        request: PaymentMethodUpdateRequest
    ) -> PaymentMethod:
        method = await self._get(method_id)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        for field_name, value in changes.items():
            setattr(method, field_name, value)

        method = await self._repo.update(method)
        await self._record(admin_id, AuditAction.PAYMENT_METHOD_UPDATED,
                           f"Updated payment method {method_id}: {sorted(changes)}")
        return method

    async def delete(self, admin_id: int, method_id: int) -> None:
        await self._get(method_id)
        await self._repo.delete(method_id)
        await self._record(admin_id, AuditAction.PAYMENT_METHOD_DELETED,
                           f"Deleted payment method {method_id}")

    async def _get(self, method_id: int) -> PaymentMethod:
        method = await self._repo.get_by_id(method_id)
        if method is None:
            raise ResourceNotFoundException("Payment method", str(method_id))
        return method

    async def _record(self, admin_id: int, action: str, details: str) -> None:
        if self._audit is not None:
            await self._audit.record(admin_id, action, details)
