"""
Admin Application Services
==========================

Audit trail and dashboard statistics.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.admin.domain import AuditLog, DashboardStats
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interfaces (Dependency Inversion) ==========

class IAuditLogRepository(ABC):
    """Interface for audit log storage."""

    @abstractmethod
    async def create(self, entry: AuditLog) -> AuditLog:
        """Store an audit entry."""

    @abstractmethod
    async def list(self, limit: int = 100, admin_id: Optional[int] = None) -> List[AuditLog]:
        """List entries, newest first."""


class IStatsRepository(ABC):
    """Interface for betting aggregates."""

    @abstractmethod
    async def stats_for_date(self, draw_date: date) -> DashboardStats:
        """Aggregate bets of one draw day."""


# ========== Application Services ==========

class AuditService:
    """
    Writes the admin audit trail.

    Used by the results and wallet modules inside their own unit of work,
    so an audit entry is only kept when the audited change is committed.
    """

    def __init__(self, audit_repository: IAuditLogRepository):
        self._audit_repo = audit_repository

    async def record(self, admin_id: int, action: str, details: Optional[str] = None) -> AuditLog:
        entry = await self._audit_repo.create(AuditLog(
            id=None,
            admin_id=admin_id,
            action=action,
            details=details,
        ))
        logger.info(
            "Admin action recorded",
            extra={"admin_id": admin_id, "action": action, "audit_id": entry.id}
        )
        return entry

    async def list_entries(self, limit: int = 100, admin_id: Optional[int] = None) -> List[AuditLog]:
        return await self._audit_repo.list(limit=limit, admin_id=admin_id)


class AdminStatsService:
    """Dashboard numbers for the admin console."""

    def __init__(self, stats_repository: IStatsRepository):
        self._stats_repo = stats_repository

    async def get_dashboard_stats(self, draw_date: date) -> DashboardStats:
        return await self._stats_repo.stats_for_date(draw_date)
