"""
Results Interfaces Layer
========================

Contains:
- Controllers: FastAPI route handlers
"""

from src.results.interfaces.controllers import results_router

__all__ = ["results_router"]
