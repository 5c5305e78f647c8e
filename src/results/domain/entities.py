"""
Results Domain Entities
=======================

Published draw results and the outcome of settling a draw day.
"""

from dataclasses import dataclass, field
import datetime as dt
from datetime import datetime
from decimal import Decimal
from typing import Optional

from src.betting.domain import BetRules
from src.config import BetType
from src.core import ValidationException


@dataclass
class DrawResult:
    """
    Winning numbers of one draw day.

    Either half may be missing; bets on a missing half settle as lost.
    """

    id: Optional[int]
    date: dt.date
    result_2d: Optional[str] = None
    result_3d: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.result_2d is None and self.result_3d is None:
            raise ValidationException("At least one of result_2d or result_3d is required")
        if self.result_2d is not None:
            BetRules.validate_number(BetType.TWO_D, self.result_2d)
        if self.result_3d is not None:
            BetRules.validate_number(BetType.THREE_D, self.result_3d)

    def winning_number_for(self, bet_type: str) -> Optional[str]:
        """Published number for a bet type (None if not published)."""
        if bet_type == BetType.TWO_D:
            return self.result_2d
        if bet_type == BetType.THREE_D:
            return self.result_3d
        return None

    def describe(self) -> str:
        return f"{self.date.isoformat()}: 2D={self.result_2d}, 3D={self.result_3d}"


@dataclass
class SettlementSummary:
    """Counters collected while settling one draw day."""

    draw_date: dt.date
    bets_evaluated: int = 0
    winners: int = 0
    losers: int = 0
    total_payout: Decimal = Decimal("0.00")
    winning_user_ids: set = field(default_factory=set)

    def record_win(self, user_id: int, payout: Decimal) -> None:
        self.bets_evaluated += 1
        self.winners += 1
        self.total_payout += payout
        self.winning_user_ids.add(user_id)

    def record_loss(self) -> None:
        self.bets_evaluated += 1
        self.losers += 1
