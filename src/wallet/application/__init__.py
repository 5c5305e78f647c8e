"""
Wallet Application Layer
========================

Contains:
- Services: Deposit/withdrawal requests and review, payment methods
- DTOs: Data transfer objects for API serialization
"""

from src.wallet.application.dto import (
    TransactionCreateRequest,
    TransactionReviewRequest,
    PaymentMethodCreateRequest,
    PaymentMethodUpdateRequest,
    TransactionResponse,
    TransactionCreatedResponse,
    TransactionListResponse,
    PaymentMethodResponse,
    PaymentMethodCreatedResponse,
    PaymentMethodListResponse,
)
from src.wallet.application.services import (
    WalletService,
    PaymentMethodService,
    ITransactionRepository,
    IPaymentMethodRepository,
)

__all__ = [
    # DTOs
    "TransactionCreateRequest",
    "TransactionReviewRequest",
    "PaymentMethodCreateRequest",
    "PaymentMethodUpdateRequest",
    "TransactionResponse",
    "TransactionCreatedResponse",
    "TransactionListResponse",
    "PaymentMethodResponse",
    "PaymentMethodCreatedResponse",
    "PaymentMethodListResponse",
    # Services
    "WalletService",
    "PaymentMethodService",
    # Repository Interfaces
    "ITransactionRepository",
    "IPaymentMethodRepository",
]
