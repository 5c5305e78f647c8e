"""
Results Domain Layer
====================

Contains:
- Entities: DrawResult, SettlementSummary
"""

from src.results.domain.entities import DrawResult, SettlementSummary

__all__ = [
    "DrawResult",
    "SettlementSummary",
]
