"""
Accounts Interfaces Layer
=========================

Contains:
- Controllers: FastAPI route handlers
- Dependencies: Bearer token resolution and admin guard
"""

from src.accounts.interfaces.controllers import accounts_router
from src.accounts.interfaces.dependencies import get_current_user, require_admin

__all__ = ["accounts_router", "get_current_user", "require_admin"]
