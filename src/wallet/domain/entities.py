"""
Wallet Domain Entities
======================

Ledger transactions and the payment channels players deposit through.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from src.config import (
    TransactionStatus, TransactionType,
    REVIEW_STATUSES, VALID_TRANSACTION_TYPES, VALID_TRANSACTION_STATUSES
)
from src.core import ConflictException, ValidationException


@dataclass
class Transaction:
    """
    Ledger entry.

    Amounts of `bet` entries are negative (money leaving the wallet);
    every other type carries a positive amount. Deposit and withdrawal
    requests start `pending` and only move the balance once approved.
    """

    id: Optional[int]
    user_id: int
    type: str
    amount: Decimal
    status: str = TransactionStatus.PENDING
    description: Optional[str] = None
    payment_method_id: Optional[int] = None
    receipt_url: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.type not in VALID_TRANSACTION_TYPES:
            raise ValueError(f"unknown transaction type: {self.type}")
        if self.status not in VALID_TRANSACTION_STATUSES:
            raise ValueError(f"unknown transaction status: {self.status}")

    @property
    def is_pending(self) -> bool:
        return self.status == TransactionStatus.PENDING

    @property
    def is_request(self) -> bool:
        """Deposits and withdrawals need an admin decision."""
        return self.type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)

    def review(self, status: str, admin_notes: Optional[str] = None) -> Decimal:
        """
        Approve or reject a pending request.

        Returns:
            Balance change the decision causes (0 for rejections)

        Raises:
            ValidationException: If `status` is not approved/rejected
            ConflictException: If the transaction is not a pending request
        """
        if status not in REVIEW_STATUSES:
            raise ValidationException("Invalid status")
        if not self.is_request or not self.is_pending:
            raise ConflictException(
                f"Transaction {self.id} is not a pending request (status: {self.status})"
            )

        self.status = status
        if admin_notes:
            self.admin_notes = admin_notes

        return self.balance_delta()

    def balance_delta(self) -> Decimal:
        """Effect an approved request has on the wallet balance."""
        if self.status != TransactionStatus.APPROVED:
            return Decimal("0")
        if self.type == TransactionType.DEPOSIT:
            return self.amount
        if self.type == TransactionType.WITHDRAWAL:
            return -self.amount
        return Decimal("0")


@dataclass
class PaymentMethod:
    """A bank account or mobile wallet players send deposits to."""

    id: Optional[int]
    name: str
    account_name: str
    account_number: str
    is_active: bool = True
    created_at: Optional[datetime] = None
