"""
Betting Interfaces Layer
========================

Contains:
- Controllers: FastAPI route handlers
"""

from src.betting.interfaces.controllers import betting_router

__all__ = ["betting_router"]
