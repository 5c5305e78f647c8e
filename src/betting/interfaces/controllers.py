"""
Betting Controllers (API Routes)
================================

FastAPI routes for placing and listing bets.

Controllers are thin - they delegate to application services.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.domain import User
from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.accounts.interfaces import get_current_user, require_admin
from src.betting.application import (
    BettingService,
    BetCreateRequest, BetResponse,
    BetPlacedResponse, BetListResponse,
    GameRulesResponse
)
from src.betting.domain import IGameConfigProvider
from src.betting.infrastructure import SQLAlchemyBetRepository, get_game_config_provider
from src.config import settings
from src.core import draw_day
from src.infrastructure.database import get_session
from src.results.infrastructure import SQLAlchemyDrawResultRepository
from src.wallet.infrastructure import SQLAlchemyTransactionRepository

router = APIRouter(prefix="/api", tags=["Betting"])


# ========== Example payloads for Swagger ==========

BET_PLACED_EXAMPLE = {
    "message": "Bet placed successfully",
    "bet": {
        "id": 42,
        "user_id": 7,
        "type": "2D",
        "number": "07",
        "amount": "100.00",
        "potential_payout": "8500.00",
        "status": "pending",
        "draw_date": "2024-01-15",
        "created_at": "2024-01-15T10:00:00Z"
    },
    "balance": "4900.00"
}


# ========== Dependencies ==========

async def get_betting_service(
    session: AsyncSession = Depends(get_session),
    config_provider: IGameConfigProvider = Depends(get_game_config_provider)
) -> BettingService:
    """Get betting service instance."""
    return BettingService(
        SQLAlchemyBetRepository(session),
        SQLAlchemyUserRepository(session),
        SQLAlchemyTransactionRepository(session),
        config_provider,
        SQLAlchemyDrawResultRepository(session)
    )


# ========== Route Handlers ==========

@router.post(
    "/bets",
    response_model=BetPlacedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place a bet",
    description="""
    Place a 2D or 3D bet on today's draw.

    - 2D numbers are exactly two digits (`00`-`99`), 3D exactly three (`000`-`999`)
    - The stake is debited immediately and recorded as a `bet` transaction
    - `potential_payout` is the stake times the current odds
    - Betting closes once today's result is published (409)
    """,
    responses={
        201: {"content": {"application/json": {"example": BET_PLACED_EXAMPLE}}},
        400: {"description": "Invalid number, stake outside limits or insufficient balance"},
        409: {"description": "Betting is closed for the draw day"}
    }
)
async def place_bet(
    request: BetCreateRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
    betting_service: BettingService = Depends(get_betting_service)
):
    bet, balance = await betting_service.place_bet(
        user_id=user.id,
        bet_type=request.type,
        number=request.number,
        amount=request.amount,
        draw_date=draw_day(settings.draw_timezone)
    )
    await session.commit()

    return BetPlacedResponse(
        message="Bet placed successfully",
        bet=BetResponse.from_entity(bet),
        balance=balance
    )


@router.get(
    "/bets",
    response_model=BetListResponse,
    summary="My recent bets"
)
async def list_my_bets(
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(get_current_user),
    betting_service: BettingService = Depends(get_betting_service)
):
    bets = await betting_service.list_user_bets(user.id, limit=limit)
    return BetListResponse(bets=[BetResponse.from_entity(b) for b in bets])


@router.get(
    "/admin/bets",
    response_model=BetListResponse,
    summary="Bets of a draw day (admin)",
    description="All bets for `date` (default: today in the draw timezone)."
)
async def list_bets_for_date(
    draw_date: Optional[date] = Query(None, alias="date"),
    admin: User = Depends(require_admin),
    betting_service: BettingService = Depends(get_betting_service)
):
    bets = await betting_service.list_bets_for_date(draw_date or draw_day(settings.draw_timezone))
    return BetListResponse(bets=[BetResponse.from_entity(b) for b in bets])


@router.get(
    "/game/rules",
    response_model=GameRulesResponse,
    summary="Current odds and limits"
)
async def get_game_rules(
    config_provider: IGameConfigProvider = Depends(get_game_config_provider)
):
    config = config_provider.get_config()
    return GameRulesResponse(
        odds=config.odds,
        min_bet=config.min_bet,
        max_bet=config.max_bet,
        min_deposit=config.min_deposit
    )


# Export router for inclusion in main app
betting_router = router
