"""
Betting Domain Layer
====================

Contains:
- Entities: Bet
- Value Objects: GameConfig (odds and limits)
- Domain Services: BetRules (number formats, payouts, win check)

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from src.betting.domain.value_objects import (
    BetRules,
    GameConfig,
    IGameConfigProvider,
    quantize_money,
)
from src.betting.domain.entities import Bet

__all__ = [
    # Entities
    "Bet",
    # Value Objects & Services
    "BetRules",
    "GameConfig",
    "IGameConfigProvider",
    "quantize_money",
]
