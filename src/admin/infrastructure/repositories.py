"""
Admin Infrastructure Repositories
=================================

SQLAlchemy implementations for the audit trail and dashboard aggregates.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.admin.application import IAuditLogRepository, IStatsRepository
from src.admin.domain import AuditLog, DashboardStats
from src.admin.infrastructure.models import AuditLogModel
from src.betting.domain import quantize_money
from src.betting.infrastructure import BetModel
from src.config import BetStatus


class SQLAlchemyAuditLogRepository(IAuditLogRepository):
    """
    SQLAlchemy implementation of audit log repository.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, entry: AuditLog) -> AuditLog:
        model = AuditLogModel(
            admin_id=entry.admin_id,
            action=entry.action,
            details=entry.details,
        )

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def list(self, limit: int = 100, admin_id: Optional[int] = None) -> List[AuditLog]:
        stmt = select(AuditLogModel)
        if admin_id is not None:
            stmt = stmt.where(AuditLogModel.admin_id == admin_id)
        stmt = stmt.order_by(AuditLogModel.created_at.desc(), AuditLogModel.id.desc()).limit(limit)

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _to_entity(model: AuditLogModel) -> AuditLog:
        return AuditLog(
            id=model.id,
            admin_id=model.admin_id,
            action=model.action,
            details=model.details,
            created_at=model.created_at
        )


class SQLAlchemyStatsRepository(IStatsRepository):
    """
    Aggregates over the bets table for the admin dashboard.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def stats_for_date(self, draw_date: date) -> DashboardStats:
        stmt = select(
            func.count(BetModel.id),
            func.coalesce(func.sum(BetModel.amount), 0),
            func.coalesce(
                func.sum(case((BetModel.status == BetStatus.WON, BetModel.potential_payout), else_=0)),
                0
            ),
            func.coalesce(
                func.sum(case((BetModel.status == BetStatus.PENDING, 1), else_=0)),
                0
            ),
        ).where(BetModel.draw_date == draw_date)

        row = (await self._session.execute(stmt)).one()
        total_bets, total_amount, total_winnings, pending_bets = row

        return DashboardStats(
            draw_date=draw_date,
            total_bets=int(total_bets),
            total_amount=quantize_money(Decimal(str(total_amount))),
            total_winnings=quantize_money(Decimal(str(total_winnings))),
            pending_bets=int(pending_bets),
        )
