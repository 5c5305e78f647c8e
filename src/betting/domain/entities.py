"""
Betting Domain Entities
=======================

Pure Python domain entities for bet placement and settlement.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from src.config import BetStatus
from src.core import ConflictException
from src.betting.domain.value_objects import BetRules


@dataclass
class Bet:
    """
    A stake on a single 2D or 3D number for one draw day.

    `potential_payout` is fixed when the bet is placed so later odds
    changes never affect open bets.
    """

    id: Optional[int]
    user_id: int
    type: str
    number: str
    amount: Decimal
    potential_payout: Decimal
    draw_date: date
    status: str = BetStatus.PENDING
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.amount <= 0:
            raise ValueError("amount must be positive")
        if self.potential_payout < self.amount:
            raise ValueError("potential_payout cannot be lower than amount")

    @property
    def is_pending(self) -> bool:
        return self.status == BetStatus.PENDING

    @property
    def is_won(self) -> bool:
        return self.status == BetStatus.WON

    def settle(self, winning_number: Optional[str]) -> str:
        """
        Resolve the bet against the published number of its game.

        A missing winning number settles the bet as lost.

        Returns:
            The new status (won or lost)

        Raises:
            ConflictException: If the bet was already settled
        """
        if not self.is_pending:
            raise ConflictException(f"Bet {self.id} already settled as {self.status}")

        if BetRules.is_winning(self.number, winning_number):
            self.status = BetStatus.WON
        else:
            self.status = BetStatus.LOST
        return self.status
