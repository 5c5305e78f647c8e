"""
Results Controllers (API Routes)
================================

FastAPI routes for publishing and reading draw results.

Controllers are thin - they delegate to application services.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.domain import User
from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.accounts.interfaces import require_admin
from src.admin.application import AuditService
from src.admin.infrastructure import SQLAlchemyAuditLogRepository
from src.betting.infrastructure import SQLAlchemyBetRepository
from src.config import settings
from src.core import draw_day
from src.infrastructure.database import get_session
from src.results.application import (
    ResultService,
    ResultCreateRequest, ResultResponse,
    SettlementResponse, ResultPublishedResponse,
    TodayResultResponse, ResultListResponse
)
from src.results.infrastructure import SQLAlchemyDrawResultRepository
from src.wallet.infrastructure import SQLAlchemyTransactionRepository

router = APIRouter(prefix="/api", tags=["Results"])


# ========== Example payloads for Swagger ==========

RESULT_PUBLISHED_EXAMPLE = {
    "message": "Result published and bets settled",
    "result": {
        "id": 12,
        "date": "2024-01-15",
        "result_2d": "07",
        "result_3d": "415",
        "created_at": "2024-01-15T16:30:00Z"
    },
    "settlement": {
        "bets_evaluated": 250,
        "winners": 3,
        "losers": 247,
        "total_payout": "25500.00"
    }
}


# ========== Dependencies ==========

async def get_result_service(
    session: AsyncSession = Depends(get_session)
) -> ResultService:
    """Get result service instance."""
    return ResultService(
        SQLAlchemyDrawResultRepository(session),
        SQLAlchemyBetRepository(session),
        SQLAlchemyUserRepository(session),
        SQLAlchemyTransactionRepository(session),
        AuditService(SQLAlchemyAuditLogRepository(session))
    )


# ========== Route Handlers ==========

@router.post(
    "/admin/results",
    response_model=ResultPublishedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a draw result (admin)",
    description="""
    Publish the winning numbers of a draw day and settle its bets.

    - One result per day; a second publication returns 409
    - Either number may be omitted; bets on the missing half are lost
    - Winners are credited `potential_payout` and get a `payout` transaction
    - The result, settlement and audit entry are committed together
    """,
    responses={
        201: {"content": {"application/json": {"example": RESULT_PUBLISHED_EXAMPLE}}},
        409: {"description": "Result already published for the date"}
    }
)
async def publish_result(
    request: ResultCreateRequest,
    admin: User = Depends(require_admin),
    session: AsyncSession = Depends(get_session),
    result_service: ResultService = Depends(get_result_service)
):
    result, summary = await result_service.publish_result(
        admin_id=admin.id,
        draw_date=request.date,
        result_2d=request.result_2d,
        result_3d=request.result_3d,
        today=draw_day(settings.draw_timezone)
    )
    await session.commit()

    return ResultPublishedResponse(
        message="Result published and bets settled",
        result=ResultResponse.from_entity(result),
        settlement=SettlementResponse.from_summary(summary)
    )


@router.get(
    "/results/today",
    response_model=TodayResultResponse,
    summary="Today's result",
    description="`result` is null until today's draw is published."
)
async def get_today_result(
    result_service: ResultService = Depends(get_result_service)
):
    result = await result_service.get_result_for_date(draw_day(settings.draw_timezone))
    return TodayResultResponse(result=ResultResponse.from_entity(result) if result else None)


@router.get(
    "/results",
    response_model=ResultListResponse,
    summary="Result history"
)
async def list_results(
    limit: int = Query(30, ge=1, le=365),
    result_service: ResultService = Depends(get_result_service)
):
    results = await result_service.list_results(limit=limit)
    return ResultListResponse(results=[ResultResponse.from_entity(r) for r in results])


# Export router for inclusion in main app
results_router = router
