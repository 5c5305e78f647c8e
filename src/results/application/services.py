"""
Results Application Services
============================

Result publication and settlement of the draw day's bets.

Settlement runs inside the caller's unit of work: the result row, every bet
status, balance credit, payout ledger entry and the audit entry are
committed together or not at all.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple

from src.accounts.application import IUserRepository
from src.admin.application import AuditService
from src.betting.application import IBetRepository
from src.config import AuditAction, BetStatus, TransactionStatus, TransactionType
from src.core import ConflictException, ValidationException
from src.results.domain import DrawResult, SettlementSummary
from src.wallet.application import ITransactionRepository
from src.wallet.domain import Transaction
from src.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)


# ========== Repository Interfaces (Dependency Inversion) ==========

class IDrawResultRepository(ABC):
    """Interface for draw result data access."""

    @abstractmethod
    async def create(self, result: DrawResult) -> DrawResult:
        """Store a result and return it with its ID."""

    @abstractmethod
    async def get_by_date(self, draw_date: date) -> Optional[DrawResult]:
        """Get the result of a draw day."""

    @abstractmethod
    async def list_recent(self, limit: int = 30) -> List[DrawResult]:
        """List results, most recent draw day first."""


# ========== Application Services ==========

class ResultService:
    """
    Service for publishing results and paying out winners.
    """

    def __init__(
        self,
        result_repository: IDrawResultRepository,
        bet_repository: IBetRepository,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
        audit_service: AuditService
    ):
        self._result_repo = result_repository
        self._bet_repo = bet_repository
        self._user_repo = user_repository
        self._transaction_repo = transaction_repository
        self._audit = audit_service

    async def publish_result(
        self,
        admin_id: int,
        draw_date: date,
        result_2d: Optional[str],
        result_3d: Optional[str],
        today: date
    ) -> Tuple[DrawResult, SettlementSummary]:
        """
        Publish the winning numbers of a draw day and settle its bets.

        Args:
            admin_id: Admin publishing the result (audited)
            draw_date: Draw day the numbers belong to
            result_2d: Two-digit winning number, if drawn
            result_3d: Three-digit winning number, if drawn
            today: Current draw day, upper bound for draw_date

        Raises:
            ValidationException: Malformed numbers or a future draw day
            ConflictException: The draw day already has a result
        """
        if draw_date > today:
            raise ValidationException("Cannot publish a result for a future date")

        if await self._result_repo.get_by_date(draw_date) is not None:
            raise ConflictException(f"Result for {draw_date.isoformat()} already published")

        result = await self._result_repo.create(DrawResult(
            id=None,
            date=draw_date,
            result_2d=result_2d,
            result_3d=result_3d,
        ))

        with log_latency(logger, "settlement", draw_date=draw_date.isoformat()):
            summary = await self.settle_bets(result)

        await self._audit.record(
            admin_id,
            AuditAction.RESULT_CREATED,
            f"Created result for {result.describe()}"
        )

        logger.info(
            "Result published",
            extra={
                "result_id": result.id,
                "draw_date": draw_date.isoformat(),
                "admin_id": admin_id,
                "bets_evaluated": summary.bets_evaluated,
                "winners": summary.winners,
                "losers": summary.losers,
                "winning_users": len(summary.winning_user_ids),
                "total_payout": str(summary.total_payout)
            }
        )
        return result, summary

    async def settle_bets(self, result: DrawResult) -> SettlementSummary:
        """
        Settle every pending bet of the result's draw day.

        Bets that are already won or lost are left untouched.
        """
        summary = SettlementSummary(draw_date=result.date)
        pending = await self._bet_repo.list_by_draw_date(result.date, status=BetStatus.PENDING)

        for bet in pending:
            status = bet.settle(result.winning_number_for(bet.type))
            await self._bet_repo.update_status(bet.id, status)

            if status != BetStatus.WON:
                summary.record_loss()
                continue

            await self._user_repo.adjust_balance(bet.user_id, bet.potential_payout)
            await self._transaction_repo.create(Transaction(
                id=None,
                user_id=bet.user_id,
                type=TransactionType.PAYOUT,
                amount=bet.potential_payout,
                status=TransactionStatus.COMPLETED,
                description=f"Winning payout for {bet.type} bet on {bet.number}",
            ))
            summary.record_win(bet.user_id, bet.potential_payout)

            logger.info(
                "Winning bet paid",
                extra={
                    "bet_id": bet.id,
                    "user_id": bet.user_id,
                    "payout": str(bet.potential_payout)
                }
            )

        return summary

    async def get_result_for_date(self, draw_date: date) -> Optional[DrawResult]:
        return await self._result_repo.get_by_date(draw_date)

    async def list_results(self, limit: int = 30) -> List[DrawResult]:
        return await self._result_repo.list_recent(limit=limit)
