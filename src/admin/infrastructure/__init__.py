"""
Admin Infrastructure Layer
==========================

- Models: SQLAlchemy ORM models
- Repositories: Audit trail and dashboard aggregates
"""

from src.admin.infrastructure.models import AuditLogModel
from src.admin.infrastructure.repositories import (
    SQLAlchemyAuditLogRepository,
    SQLAlchemyStatsRepository,
)

__all__ = [
    "AuditLogModel",
    "SQLAlchemyAuditLogRepository",
    "SQLAlchemyStatsRepository",
]
