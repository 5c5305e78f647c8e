"""
Admin Application Layer
=======================

Contains:
- Services: Audit trail, dashboard statistics
- DTOs: Data transfer objects for API serialization
"""

from src.admin.application.dto import (
    AuditLogResponse,
    AuditLogListResponse,
    DashboardStatsDTO,
    StatsResponse,
)
from src.admin.application.services import (
    AuditService,
    AdminStatsService,
    IAuditLogRepository,
    IStatsRepository,
)

__all__ = [
    # DTOs
    "AuditLogResponse",
    "AuditLogListResponse",
    "DashboardStatsDTO",
    "StatsResponse",
    # Services
    "AuditService",
    "AdminStatsService",
    # Repository Interfaces
    "IAuditLogRepository",
    "IStatsRepository",
]
