"""
Betting Application Layer
=========================

Contains:
- Services: Bet placement and listing
- DTOs: Data transfer objects for API serialization
"""

from src.betting.application.dto import (
    BetCreateRequest,
    BetResponse,
    BetPlacedResponse,
    BetListResponse,
    GameRulesResponse,
)
from src.betting.application.services import (
    BettingService,
    IBetRepository,
    IDrawCalendar,
)

__all__ = [
    # DTOs
    "BetCreateRequest",
    "BetResponse",
    "BetPlacedResponse",
    "BetListResponse",
    "GameRulesResponse",
    # Services
    "BettingService",
    # Repository Interfaces
    "IBetRepository",
    "IDrawCalendar",
]
