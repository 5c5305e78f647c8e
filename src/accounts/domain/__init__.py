"""
Accounts Domain Layer
=====================

Contains:
- Entities: User
- Value Objects: ReferralCodeGenerator
"""

from src.accounts.domain.entities import User, ReferralCodeGenerator

__all__ = [
    "User",
    "ReferralCodeGenerator",
]
