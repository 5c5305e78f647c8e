"""
Results Application Layer
=========================

Contains:
- Services: Result publication and settlement
- DTOs: Data transfer objects for API serialization
"""

from src.results.application.dto import (
    ResultCreateRequest,
    ResultResponse,
    SettlementResponse,
    ResultPublishedResponse,
    TodayResultResponse,
    ResultListResponse,
)
from src.results.application.services import (
    ResultService,
    IDrawResultRepository,
)

__all__ = [
    # DTOs
    "ResultCreateRequest",
    "ResultResponse",
    "SettlementResponse",
    "ResultPublishedResponse",
    "TodayResultResponse",
    "ResultListResponse",
    # Services
    "ResultService",
    # Repository Interfaces
    "IDrawResultRepository",
]
