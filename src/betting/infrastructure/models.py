"""
Betting Infrastructure Models
=============================

SQLAlchemy ORM models for the betting module.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base
from src.config import BetStatus


class BetModel(Base):
    """
    Database model for Bet entity.

    Maps to the 'bets' table.
    """
    __tablename__ = "bets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    type: Mapped[str] = mapped_column(String(2), nullable=False)  # 2D or 3D
    number: Mapped[str] = mapped_column(String(3), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    potential_payout: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=BetStatus.PENDING)

    draw_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    # Settlement reads pending bets of one draw day
    __table_args__ = (
        Index("ix_bets_draw_date_status", "draw_date", "status"),
    )
