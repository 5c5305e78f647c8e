"""
Betting Infrastructure Layer
============================

- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- External: Game rules file loader with hot reload
"""

from src.betting.infrastructure.models import BetModel
from src.betting.infrastructure.repositories import SQLAlchemyBetRepository
from src.betting.infrastructure.external import (
    GameConfigManager,
    game_config_manager,
    get_game_config_provider,
)

__all__ = [
    "BetModel",
    "SQLAlchemyBetRepository",
    "GameConfigManager",
    "game_config_manager",
    "get_game_config_provider",
]
