"""
Betting Infrastructure Repositories
===================================

SQLAlchemy implementation of the bet repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.betting.application import IBetRepository
from src.betting.domain import Bet
from src.betting.infrastructure.models import BetModel
from src.core import RepositoryException


class SQLAlchemyBetRepository(IBetRepository):
    """
    SQLAlchemy implementation of bet repository.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, bet: Bet) -> Bet:
        model = BetModel(
            user_id=bet.user_id,
            type=bet.type,
            number=bet.number,
            amount=bet.amount,
            potential_payout=bet.potential_payout,
            status=bet.status,
            draw_date=bet.draw_date,
        )

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def list_by_user(self, user_id: int, limit: int = 10) -> List[Bet]:
        stmt = (
            select(BetModel)
            .where(BetModel.user_id == user_id)
            .order_by(BetModel.created_at.desc(), BetModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_by_draw_date(
        self,
        draw_date: date,
        status: Optional[str] = None
    ) -> List[Bet]:
        stmt = select(BetModel).where(BetModel.draw_date == draw_date)
        if status is not None:
            stmt = stmt.where(BetModel.status == status)
        stmt = stmt.order_by(BetModel.created_at.desc(), BetModel.id.desc())

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def update_status(self, bet_id: int, status: str) -> None:
        result = await self._session.execute(
            update(BetModel)
            .where(BetModel.id == bet_id)
            .values(status=status)
            .execution_options(synchronize_session="fetch")
        )
        if result.rowcount == 0:
            raise RepositoryException(f"Bet {bet_id} not found")

    @staticmethod
    def _to_entity(model: BetModel) -> Bet:
        return Bet(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            number=model.number,
            amount=model.amount,
            potential_payout=model.potential_payout,
            draw_date=model.draw_date,
            status=model.status,
            created_at=model.created_at
        )
