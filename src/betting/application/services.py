"""
Betting Application Services
============================

Bet placement: validates the number and stake, fixes the payout at the
current odds, debits the wallet and writes the ledger entry.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from src.accounts.application import IUserRepository
from src.betting.domain import Bet, BetRules, IGameConfigProvider
from src.config import BetStatus, TransactionStatus, TransactionType
from src.core import (
    ConflictException,
    InsufficientBalanceException,
    ResourceNotFoundException,
)
from src.wallet.application import ITransactionRepository
from src.wallet.domain import Transaction
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interfaces (Dependency Inversion) ==========

class IBetRepository(ABC):
    """Interface for bet data access."""

    @abstractmethod
    async def create(self, bet: Bet) -> Bet:
        """Store a new bet and return it with its ID."""

    @abstractmethod
    async def list_by_user(self, user_id: int, limit: int = 10) -> List[Bet]:
        """List a user's bets, newest first."""

    @abstractmethod
    async def list_by_draw_date(
        self,
        draw_date: date,
        status: Optional[str] = None
    ) -> List[Bet]:
        """List bets of a draw day, newest first."""

    @abstractmethod
    async def update_status(self, bet_id: int, status: str) -> None:
        """Set the status of a bet."""


class IDrawCalendar(ABC):
    """Answers whether a draw day already has a published result."""

    @abstractmethod
    async def is_drawn(self, draw_date: date) -> bool:
        """True once the result for `draw_date` is published."""


# ========== Application Services ==========

class BettingService:
    """
    Service for placing and listing bets.
    """

    def __init__(
        self,
        bet_repository: IBetRepository,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
        config_provider: IGameConfigProvider,
        draw_calendar: IDrawCalendar
    ):
        self._bet_repo = bet_repository
        self._user_repo = user_repository
        self._transaction_repo = transaction_repository
        self._config_provider = config_provider
        self._draw_calendar = draw_calendar

    async def place_bet(
        self,
        user_id: int,
        bet_type: str,
        number: str,
        amount: Decimal,
        draw_date: date
    ) -> Tuple[Bet, Decimal]:
        """
        Place a bet for a draw day.

        Returns:
            Tuple of (bet, balance after the stake was debited)

        Raises:
            ValidationException: Bad number format, stake outside limits or
                a payout too large to record
            ConflictException: The draw day already has a result
            InsufficientBalanceException: Stake exceeds the balance
        """
        config = self._config_provider.get_config()

        number = BetRules.validate_number(bet_type, number)
        config.check_stake(amount)
        odds = config.get_odds(bet_type)
        potential_payout = BetRules.calculate_payout(amount, odds)
        BetRules.check_payout(potential_payout)

        if await self._draw_calendar.is_drawn(draw_date):
            raise ConflictException(f"Betting is closed for {draw_date.isoformat()}")

        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("User", str(user_id))
        if not user.can_afford(amount):
            raise InsufficientBalanceException(user.id, amount, user.balance)

        bet = await self._bet_repo.create(Bet(
            id=None,
            user_id=user_id,
            type=bet_type,
            number=number,
            amount=amount,
            potential_payout=potential_payout,
            draw_date=draw_date,
            status=BetStatus.PENDING,
        ))

        balance = await self._user_repo.adjust_balance(user_id, -amount)
        await self._transaction_repo.create(Transaction(
            id=None,
            user_id=user_id,
            type=TransactionType.BET,
            amount=-amount,
            status=TransactionStatus.COMPLETED,
            description=f"{bet_type} bet on {number}",
        ))

        logger.info(
            "Bet placed",
            extra={
                "bet_id": bet.id,
                "user_id": user_id,
                "bet_type": bet_type,
                "amount": str(amount),
                "odds": odds,
                "draw_date": draw_date.isoformat(),
                "balance": str(balance)
            }
        )
        return bet, balance

    async def list_user_bets(self, user_id: int, limit: int = 10) -> List[Bet]:
        return await self._bet_repo.list_by_user(user_id, limit=limit)

    async def list_bets_for_date(self, draw_date: date) -> List[Bet]:
        return await self._bet_repo.list_by_draw_date(draw_date)
