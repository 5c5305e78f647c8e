"""
Accounts Domain Entities
========================

Player and admin accounts with their wallet balance and referral data.
"""

import secrets
import string
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class User:
    """
    Account entity.

    `balance` is the spendable wallet amount; `commission` accumulates
    referral bonuses and is tracked separately from the balance.
    """

    id: Optional[int]
    username: str
    password_hash: str
    referral_code: str
    balance: Decimal = Decimal("0.00")
    commission: Decimal = Decimal("0.00")
    phone: Optional[str] = None
    used_ref_code: Optional[str] = None
    is_admin: bool = False
    created_at: Optional[datetime] = None

    def can_afford(self, amount: Decimal) -> bool:
        """Check if the wallet covers a debit of `amount`."""
        return amount <= self.balance


class ReferralCodeGenerator:
    """Generates shareable referral codes like SM4K7Q2Z."""

    PREFIX = "SM"
    LENGTH = 6
    ALPHABET = string.ascii_uppercase + string.digits

    @classmethod
    def generate(cls) -> str:
        suffix = "".join(secrets.choice(cls.ALPHABET) for _ in range(cls.LENGTH))
        return f"{cls.PREFIX}{suffix}"
