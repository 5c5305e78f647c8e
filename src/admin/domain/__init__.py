"""
Admin Domain Layer
==================

Contains:
- Entities: AuditLog, DashboardStats
"""

from src.admin.domain.entities import AuditLog, DashboardStats

__all__ = [
    "AuditLog",
    "DashboardStats",
]
