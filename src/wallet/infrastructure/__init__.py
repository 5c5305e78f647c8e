"""
Wallet Infrastructure Layer
===========================

- Models: SQLAlchemy ORM models
- Repositories: Data access layer
"""

from src.wallet.infrastructure.models import TransactionModel, PaymentMethodModel
from src.wallet.infrastructure.repositories import (
    SQLAlchemyTransactionRepository,
    SQLAlchemyPaymentMethodRepository,
)

__all__ = [
    "TransactionModel",
    "PaymentMethodModel",
    "SQLAlchemyTransactionRepository",
    "SQLAlchemyPaymentMethodRepository",
]
