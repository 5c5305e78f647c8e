"""
Wallet Module
=============

Bounded Context for player money.

Responsibilities:
- Record every balance change as a ledger transaction
- Accept deposit and withdrawal requests and let admins review them
- Manage the payment methods shown on the deposit form
"""

__version__ = "1.0.0"
