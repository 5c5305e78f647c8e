"""
Results Infrastructure Layer
============================

- Models: SQLAlchemy ORM models
- Repositories: Data access layer
"""

from src.results.infrastructure.models import DrawResultModel
from src.results.infrastructure.repositories import SQLAlchemyDrawResultRepository

__all__ = [
    "DrawResultModel",
    "SQLAlchemyDrawResultRepository",
]
