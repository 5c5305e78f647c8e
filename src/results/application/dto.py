"""
Results Application DTOs
========================
"""

import datetime as dt
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.results.domain import DrawResult, SettlementSummary


# ========== Request DTOs ==========

class ResultCreateRequest(BaseModel):
    """Winning numbers an admin publishes for a draw day."""
    date: dt.date = Field(..., description="Draw day (YYYY-MM-DD)")
    result_2d: Optional[str] = Field(None, pattern=r"^\d{2}$", description="Two-digit winning number")
    result_3d: Optional[str] = Field(None, pattern=r"^\d{3}$", description="Three-digit winning number")

    @field_validator("result_2d", "result_3d", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def require_a_number(self) -> "ResultCreateRequest":
        if self.result_2d is None and self.result_3d is None:
            raise ValueError("At least one of result_2d or result_3d is required")
        return self


# ========== Response DTOs ==========

class ResultResponse(BaseModel):
    id: int
    date: dt.date
    result_2d: Optional[str] = None
    result_3d: Optional[str] = None
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_entity(cls, result: DrawResult) -> "ResultResponse":
        return cls(
            id=result.id,
            date=result.date,
            result_2d=result.result_2d,
            result_3d=result.result_3d,
            created_at=result.created_at
        )


class SettlementResponse(BaseModel):
    """Outcome of settling a draw day."""
    bets_evaluated: int
    winners: int
    losers: int
    total_payout: Decimal

    @classmethod
    def from_summary(cls, summary: SettlementSummary) -> "SettlementResponse":
        return cls(
            bets_evaluated=summary.bets_evaluated,
            winners=summary.winners,
            losers=summary.losers,
            total_payout=summary.total_payout
        )


class ResultPublishedResponse(BaseModel):
    message: str
    result: ResultResponse
    settlement: SettlementResponse


class TodayResultResponse(BaseModel):
    """`result` is null until today's draw is published."""
    result: Optional[ResultResponse] = None


class ResultListResponse(BaseModel):
    results: List[ResultResponse]
