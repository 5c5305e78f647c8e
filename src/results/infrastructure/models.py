"""
Results Infrastructure Models
=============================

SQLAlchemy ORM models for the results module.
"""

import datetime as dt
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class DrawResultModel(Base):
    """
    Database model for DrawResult entity.

    Maps to the 'results' table. One row per draw day.
    """
    __tablename__ = "results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, unique=True)
    result_2d: Mapped[Optional[str]] = mapped_column(String(2), nullable=True)
    result_3d: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
