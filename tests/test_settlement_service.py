"""Tests for ResultService.settle_bets against the SQLAlchemy repositories."""

from collections import Counter
from datetime import timedelta
from decimal import Decimal

from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.admin.application import AuditService
from src.admin.infrastructure import SQLAlchemyAuditLogRepository
from src.betting.infrastructure import SQLAlchemyBetRepository
from src.config import BetStatus
from src.infrastructure.database import get_session_context
from src.results.application import ResultService
from src.results.domain import DrawResult
from src.results.infrastructure import SQLAlchemyDrawResultRepository
from src.wallet.infrastructure import SQLAlchemyTransactionRepository


def result_service(session) -> ResultService:
    return ResultService(
        SQLAlchemyDrawResultRepository(session),
        SQLAlchemyBetRepository(session),
        SQLAlchemyUserRepository(session),
        SQLAlchemyTransactionRepository(session),
        AuditService(SQLAlchemyAuditLogRepository(session)),
    )


async def test_settled_bets_are_skipped(player, seed_bet, today):
    draw_date = today - timedelta(days=1)
    await seed_bet(player["id"], draw_date, "2D", "07", "100", "8500.00", BetStatus.WON)
    await seed_bet(player["id"], draw_date, "2D", "12", "100", "8500.00", BetStatus.LOST)
    pending = await seed_bet(player["id"], draw_date, "2D", "07", "100", "8500.00")

    async with get_session_context() as session:
        summary = await result_service(session).settle_bets(
            DrawResult(id=None, date=draw_date, result_2d="07")
        )

    assert summary.bets_evaluated == 1
    assert summary.winners == 1
    assert summary.losers == 0
    assert summary.total_payout == Decimal("8500.00")
    assert summary.winning_user_ids == {player["id"]}

    async with get_session_context() as session:
        user = await SQLAlchemyUserRepository(session).get_by_id(player["id"])
        bets = await SQLAlchemyBetRepository(session).list_by_draw_date(draw_date)
        payouts = [
            t for t in await SQLAlchemyTransactionRepository(session).list_by_user(player["id"])
            if t.type == "payout"
        ]

    # Only the pending bet is paid
    assert user.balance == Decimal("13500.00")
    assert len(payouts) == 1
    assert Counter(bet.status for bet in bets) == {BetStatus.WON: 2, BetStatus.LOST: 1}
    assert [bet.status for bet in bets if bet.id == pending.id] == [BetStatus.WON]


async def test_other_days_are_not_touched(player, seed_bet, today):
    await seed_bet(player["id"], today, "2D", "07", "100", "8500.00")

    async with get_session_context() as session:
        summary = await result_service(session).settle_bets(
            DrawResult(id=None, date=today - timedelta(days=1), result_2d="07")
        )

    assert summary.bets_evaluated == 0

    async with get_session_context() as session:
        [bet] = await SQLAlchemyBetRepository(session).list_by_draw_date(today)
    assert bet.status == BetStatus.PENDING
