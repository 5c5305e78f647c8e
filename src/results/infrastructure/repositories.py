"""
Results Infrastructure Repositories
===================================

SQLAlchemy implementation of the draw result repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.betting.application import IDrawCalendar
from src.core import ConflictException
from src.results.application import IDrawResultRepository
from src.results.domain import DrawResult
from src.results.infrastructure.models import DrawResultModel


class SQLAlchemyDrawResultRepository(IDrawResultRepository, IDrawCalendar):
    """
    SQLAlchemy implementation of draw result repository.

    Also answers whether a draw day is closed for betting.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, result: DrawResult) -> DrawResult:
        model = DrawResultModel(
            date=result.date,
            result_2d=result.result_2d,
            result_3d=result.result_3d,
        )

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # Concurrent publish for the same day lost the race on the unique key
            raise ConflictException(f"Result for {result.date.isoformat()} already published") from e

        return self._to_entity(model)

    async def get_by_date(self, draw_date: date) -> Optional[DrawResult]:
        result = await self._session.execute(
            select(DrawResultModel).where(DrawResultModel.date == draw_date)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_recent(self, limit: int = 30) -> List[DrawResult]:
        result = await self._session.execute(
            select(DrawResultModel)
            .order_by(DrawResultModel.date.desc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in result.scalars().all()]

    async def is_drawn(self, draw_date: date) -> bool:
        result = await self._session.execute(
            select(DrawResultModel.id).where(DrawResultModel.date == draw_date)
        )
        return result.first() is not None

    @staticmethod
    def _to_entity(model: DrawResultModel) -> DrawResult:
        return DrawResult(
            id=model.id,
            date=model.date,
            result_2d=model.result_2d,
            result_3d=model.result_3d,
            created_at=model.created_at
        )
