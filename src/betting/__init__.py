"""
Betting Module
==============

Bounded Context for 2D/3D bet placement.

Responsibilities:
- Hold the game rules (odds, number formats, stake limits) with hot reload
- Validate and place bets, debiting the stake from the player's wallet
- List a player's bets and all bets of a draw day
"""

__version__ = "1.0.0"
