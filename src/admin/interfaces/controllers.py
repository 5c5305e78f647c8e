"""
Admin Controllers (API Routes)
==============================

FastAPI routes for the admin dashboard and the audit trail.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.domain import User
from src.accounts.interfaces import require_admin
from src.admin.application import (
    AdminStatsService, AuditService,
    AuditLogResponse, AuditLogListResponse,
    DashboardStatsDTO, StatsResponse
)
from src.admin.infrastructure import SQLAlchemyAuditLogRepository, SQLAlchemyStatsRepository
from src.config import settings
from src.core import draw_day
from src.infrastructure.database import get_session

router = APIRouter(prefix="/api/admin", tags=["Admin"])


# ========== Dependencies ==========

async def get_stats_service(
    session: AsyncSession = Depends(get_session)
) -> AdminStatsService:
    return AdminStatsService(SQLAlchemyStatsRepository(session))


async def get_audit_service(
    session: AsyncSession = Depends(get_session)
) -> AuditService:
    return AuditService(SQLAlchemyAuditLogRepository(session))


# ========== Route Handlers ==========

@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Dashboard statistics",
    description="""
    Betting totals for `date` (default: today in the draw timezone).

    - `total_amount`: sum of stakes
    - `total_winnings`: sum of payouts on won bets
    - `net_profit`: `total_amount - total_winnings`
    """
)
async def get_stats(
    draw_date: Optional[date] = Query(None, alias="date"),
    admin: User = Depends(require_admin),
    stats_service: AdminStatsService = Depends(get_stats_service)
):
    stats = await stats_service.get_dashboard_stats(draw_date or draw_day(settings.draw_timezone))
    return StatsResponse(stats=DashboardStatsDTO.from_entity(stats))


@router.get(
    "/audit-logs",
    response_model=AuditLogListResponse,
    summary="Audit trail",
    description="Admin actions, newest first. Filter by `admin_id`."
)
async def list_audit_logs(
    limit: int = Query(100, ge=1, le=1000),
    admin_id: Optional[int] = Query(None),
    admin: User = Depends(require_admin),
    audit_service: AuditService = Depends(get_audit_service)
):
    entries = await audit_service.list_entries(limit=limit, admin_id=admin_id)
    return AuditLogListResponse(audit_logs=[AuditLogResponse.from_entity(e) for e in entries])


# Export router for inclusion in main app
admin_router = router
