"""
Accounts Infrastructure Layer
=============================

- Models: SQLAlchemy ORM models
- Repositories: Data access layer
"""

from src.accounts.infrastructure.models import UserModel
from src.accounts.infrastructure.repositories import SQLAlchemyUserRepository

__all__ = [
    "UserModel",
    "SQLAlchemyUserRepository",
]
