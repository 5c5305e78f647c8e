"""
Admin Interfaces Layer
======================

Contains:
- Controllers: FastAPI route handlers
"""

from src.admin.interfaces.controllers import admin_router

__all__ = ["admin_router"]
