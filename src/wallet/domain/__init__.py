"""
Wallet Domain Layer
===================

Contains:
- Entities: Transaction (ledger entry / request), PaymentMethod
"""

from src.wallet.domain.entities import Transaction, PaymentMethod

__all__ = [
    "Transaction",
    "PaymentMethod",
]
