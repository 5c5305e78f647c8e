"""
Betting Application DTOs
========================

Pydantic models for betting API requests and responses.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from src.betting.domain import Bet


# ========== Type Aliases for Literals ==========
BetTypeStr = Literal["2D", "3D"]
BetStatusStr = Literal["pending", "won", "lost"]


# ========== Request DTOs ==========

class BetCreateRequest(BaseModel):
    """Request model for placing a bet."""
    type: BetTypeStr = Field(..., description="2D or 3D")
    number: str = Field(..., min_length=1, max_length=3, description="Two or three digits, e.g. '07' or '415'")
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Stake")


# ========== Response DTOs ==========

class BetResponse(BaseModel):
    id: int
    user_id: int
    type: BetTypeStr
    number: str
    amount: Decimal
    potential_payout: Decimal
    status: BetStatusStr
    draw_date: date
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, bet: Bet) -> "BetResponse":
        return cls(
            id=bet.id,
            user_id=bet.user_id,
            type=bet.type,
            number=bet.number,
            amount=bet.amount,
            potential_payout=bet.potential_payout,
            status=bet.status,
            draw_date=bet.draw_date,
            created_at=bet.created_at
        )


class BetPlacedResponse(BaseModel):
    message: str
    bet: BetResponse
    balance: Decimal = Field(..., description="Wallet balance after the stake was debited")


class BetListResponse(BaseModel):
    bets: List[BetResponse]


class GameRulesResponse(BaseModel):
    """Current odds and limits, for the betting form."""
    odds: Dict[str, int]
    min_bet: Decimal
    max_bet: Optional[Decimal] = None
    min_deposit: Decimal
