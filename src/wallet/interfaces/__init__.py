"""
Wallet Interfaces Layer
=======================

Contains:
- Controllers: FastAPI route handlers
"""

from src.wallet.interfaces.controllers import wallet_router

__all__ = ["wallet_router"]
