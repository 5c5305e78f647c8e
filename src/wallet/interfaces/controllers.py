"""
Wallet Controllers (API Routes)
===============================

FastAPI routes for deposit/withdrawal requests, their review, and
payment methods.

Controllers are thin - they delegate to application services.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounts.domain import User
from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.accounts.interfaces import get_current_user, require_admin
from src.admin.application import AuditService
from src.admin.infrastructure import SQLAlchemyAuditLogRepository
from src.betting.domain import IGameConfigProvider
from src.betting.infrastructure import get_game_config_provider
from src.infrastructure.database import get_session
from src.shared.api.schemas import MessageResponse
from src.wallet.application import (
    WalletService, PaymentMethodService,
    TransactionCreateRequest, TransactionReviewRequest,
    TransactionResponse, TransactionCreatedResponse, TransactionListResponse,
    PaymentMethodCreateRequest, PaymentMethodUpdateRequest,
    PaymentMethodResponse, PaymentMethodCreatedResponse, PaymentMethodListResponse
)
from src.wallet.infrastructure import (
    SQLAlchemyTransactionRepository,
    SQLAlchemyPaymentMethodRepository
)

router = APIRouter(prefix="/api", tags=["Wallet"])


# ========== Dependencies ==========

async def get_audit_service(
    session: AsyncSession = Depends(get_session)
) -> AuditService:
    return AuditService(SQLAlchemyAuditLogRepository(session))


async def get_wallet_service(
    session: AsyncSession = Depends(get_session),
    config_provider: IGameConfigProvider = Depends(get_game_config_provider),
    audit_service: AuditService = Depends(get_audit_service)
) -> WalletService:
    """Get wallet service instance."""
    return WalletService(
        SQLAlchemyTransactionRepository(session),
        SQLAlchemyUserRepository(session),
        SQLAlchemyPaymentMethodRepository(session),
        config_provider,
        audit_service
    )


async def get_payment_method_service(
    session: AsyncSession = Depends(get_session),
    audit_service: AuditService = Depends(get_audit_service)
) -> PaymentMethodService:
    """Get payment method service instance."""
    return PaymentMethodService(SQLAlchemyPaymentMethodRepository(session), audit_service)


# ========== Player Routes ==========

@router.post(
    "/transactions",
    response_model=TransactionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request a deposit or withdrawal",
    description="""
    Submit a deposit or withdrawal for admin review. The balance does not
    change until the request is approved.

    - Deposits must reach the configured minimum
    - Withdrawals may not exceed the current balance
    - `payment_method_id` must reference an active payment method
    """
)
async def request_transaction(
    request: TransactionCreateRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
    wallet_service: WalletService = Depends(get_wallet_service)
):
    transaction = await wallet_service.request_transaction(user.id, request)
    await session.commit()

    return TransactionCreatedResponse(
        message="Transaction submitted for review",
        transaction=TransactionResponse.from_entity(transaction)
    )


@router.get(
    "/transactions",
    response_model=TransactionListResponse,
    summary="My transactions",
    description="Bets, payouts, deposits and withdrawals, newest first."
)
async def list_my_transactions(
    limit: int = Query(100, ge=1, le=1000),
    user: User = Depends(get_current_user),
    wallet_service: WalletService = Depends(get_wallet_service)
):
    transactions = await wallet_service.list_user_transactions(user.id, limit=limit)
    return TransactionListResponse(
        transactions=[TransactionResponse.from_entity(t) for t in transactions]
    )


@router.get(
    "/payment-methods",
    response_model=PaymentMethodListResponse,
    summary="Active payment methods"
)
async def list_payment_methods(
    payment_method_service: PaymentMethodService = Depends(get_payment_method_service)
):
    methods = await payment_method_service.list_active()
    return PaymentMethodListResponse(
        payment_methods=[PaymentMethodResponse.from_entity(m) for m in methods]
    )


# ========== Admin Routes ==========

@router.get(
    "/admin/transactions/pending",
    response_model=TransactionListResponse,
    summary="Pending deposit/withdrawal requests (admin)"
)
async def list_pending_transactions(
    admin: User = Depends(require_admin),
    wallet_service: WalletService = Depends(get_wallet_service)
):
    transactions = await wallet_service.list_pending()
    return TransactionListResponse(
        transactions=[TransactionResponse.from_entity(t) for t in transactions]
    )


@router.patch(
    "/admin/transactions/{transaction_id}",
    response_model=TransactionResponse,
    summary="Approve or reject a request (admin)",
    description="""
    Approving a deposit credits the player's balance; approving a withdrawal
    debits it. Only pending requests can be reviewed (409 otherwise).
    """
)
async def review_transaction(
    transaction_id: int,
    request: TransactionReviewRequest,
    admin: User = Depends(require_admin),
    session: AsyncSession = Depends(get_session),
    wallet_service: WalletService = Depends(get_wallet_service)
):
    transaction = await wallet_service.review_transaction(
        admin_id=admin.id,
        transaction_id=transaction_id,
        status=request.status,
        admin_notes=request.admin_notes
    )
    await session.commit()

    return TransactionResponse.from_entity(transaction)


@router.get(
    "/admin/payment-methods",
    response_model=PaymentMethodListResponse,
    summary="All payment methods (admin)"
)
async def list_all_payment_methods(
    admin: User = Depends(require_admin),
    payment_method_service: PaymentMethodService = Depends(get_payment_method_service)
):
    methods = await payment_method_service.list_all()
    return PaymentMethodListResponse(
        payment_methods=[PaymentMethodResponse.from_entity(m) for m in methods]
    )


@router.post(
    "/admin/payment-methods",
    response_model=PaymentMethodCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a payment method (admin)"
)
async def create_payment_method(
    request: PaymentMethodCreateRequest,
    admin: User = Depends(require_admin),
    session: AsyncSession = Depends(get_session),
    payment_method_service: PaymentMethodService = Depends(get_payment_method_service)
):
    method = await payment_method_service.create(admin.id, request)
    await session.commit()

    return PaymentMethodCreatedResponse(
        message="Payment method created",
        payment_method=PaymentMethodResponse.from_entity(method)
    )


@router.patch(
    "/admin/payment-methods/{method_id}",
    response_model=PaymentMethodResponse,
    summary="Update a payment method (admin)"
)
async def update_payment_method(
    method_id: int,
    request: PaymentMethodUpdateRequest,
    admin: User = Depends(require_admin),
    session: AsyncSession = Depends(get_session),
    payment_method_service: PaymentMethodService = Depends(get_payment_method_service)
):
    method = await payment_method_service.update(admin.id, method_id, request)
    await session.commit()

    return PaymentMethodResponse.from_entity(method)


@router.delete(
    "/admin/payment-methods/{method_id}",
    response_model=MessageResponse,
    summary="Delete a payment method (admin)",
    description="Past transactions keep their amount; their payment method link is cleared."
)
async def delete_payment_method(
    method_id: int,
    admin: User = Depends(require_admin),
    session: AsyncSession = Depends(get_session),
    payment_method_service: PaymentMethodService = Depends(get_payment_method_service)
):
    await payment_method_service.delete(admin.id, method_id)
    await session.commit()

    return MessageResponse(message="Payment method deleted")


# Export router for inclusion in main app
wallet_router = router
