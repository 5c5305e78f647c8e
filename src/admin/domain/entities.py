"""
Admin Domain Entities
=====================
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class AuditLog:
    """Record of an admin action."""

    id: Optional[int]
    admin_id: int
    action: str
    details: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class DashboardStats:
    """
    Betting totals for one draw day.

    `total_winnings` counts payouts of won bets only, so `net_profit`
    is the house result for the day.
    """

    draw_date: date
    total_bets: int = 0
    total_amount: Decimal = Decimal("0.00")
    total_winnings: Decimal = Decimal("0.00")
    pending_bets: int = 0
    net_profit: Decimal = field(init=False)

    def __post_init__(self):
        self.net_profit = self.total_amount - self.total_winnings
