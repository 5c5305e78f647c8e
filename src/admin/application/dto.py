"""
Admin Application DTOs
======================
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from src.admin.domain import AuditLog, DashboardStats


class AuditLogResponse(BaseModel):
    id: int
    admin_id: int
    action: str
    details: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, entry: AuditLog) -> "AuditLogResponse":
        return cls(
            id=entry.id,
            admin_id=entry.admin_id,
            action=entry.action,
            details=entry.details,
            created_at=entry.created_at
        )


class AuditLogListResponse(BaseModel):
    audit_logs: List[AuditLogResponse]


class DashboardStatsDTO(BaseModel):
    """Betting totals for a draw day."""
    draw_date: date
    total_bets: int = Field(..., description="Bets placed for the draw day")
    pending_bets: int = Field(..., description="Bets not yet settled")
    total_amount: Decimal = Field(..., description="Sum of stakes")
    total_winnings: Decimal = Field(..., description="Sum of payouts on won bets")
    net_profit: Decimal = Field(..., description="Stakes minus payouts")

    @classmethod
    def from_entity(cls, stats: DashboardStats) -> "DashboardStatsDTO":
        return cls(
            draw_date=stats.draw_date,
            total_bets=stats.total_bets,
            pending_bets=stats.pending_bets,
            total_amount=stats.total_amount,
            total_winnings=stats.total_winnings,
            net_profit=stats.net_profit
        )


class StatsResponse(BaseModel):
    stats: DashboardStatsDTO
