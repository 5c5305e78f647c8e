"""
Lottery Service - Main Application
==================================

Backend for daily 2D/3D number betting.

Modules:
- Accounts: Registration, login, referral commission
- Betting: Bet placement against the configured odds
- Results: Result publication and settlement of the draw day
- Wallet: Ledger, deposit/withdrawal requests, payment methods
- Admin: Audit trail and dashboard statistics

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Entities and value objects
- Infrastructure: Database, security, game config file
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

# Configuration and Core
from src.config import settings
from src.core import ApplicationException, draw_day

# Infrastructure
from src.infrastructure.database import (
    init_database, close_database, create_tables, get_session_context
)

# Betting Module - game rules file
from src.betting.infrastructure import game_config_manager

# Accounts Module - bootstrap admin
from src.accounts.application import AccountService
from src.accounts.infrastructure import SQLAlchemyUserRepository

# Module Routers
from src.accounts.interfaces import accounts_router
from src.betting.interfaces import betting_router
from src.results.interfaces import results_router
from src.wallet.interfaces import wallet_router
from src.admin.interfaces import admin_router

# Shared API
from src.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    application_exception_handler,
    global_exception_handler
)

# Logging
from src.shared.infrastructure.logging import setup_logging, get_logger

logger = get_logger(__name__)


async def bootstrap_admin() -> None:
    """Create the configured admin account if it does not exist yet."""
    username = settings.bootstrap_admin_username
    password = settings.bootstrap_admin_password
    if not username or not password:
        return

    async with get_session_context() as session:
        service = AccountService(SQLAlchemyUserRepository(session), game_config_manager)
        await service.ensure_admin(username, password)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Initialize database and create tables
    3. Load game configuration and watch it for changes
    4. Create the bootstrap admin

    SHUTDOWN:
    1. Stop config watcher
    2. Close database connections
    """
    # === STARTUP ===
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting Lottery Service", extra={
        "version": settings.app_version,
        "environment": settings.environment,
        "draw_timezone": settings.draw_timezone
    })

    logger.info("Initializing database")
    init_database()

    # Create tables (for development - use migrations in production)
    # If the database is not reachable the server still starts and
    # database-dependent endpoints fail
    logger.info("Creating database tables")
    try:
        await create_tables()
    except Exception as e:
        logger.warning(f"Database not available - running in degraded mode: {e}")

    logger.info("Loading game configuration", extra={"path": str(settings.game_config_path)})
    game_config_manager.load(settings.game_config_path)
    game_config_manager.start_watching()

    try:
        await bootstrap_admin()
    except Exception as e:
        logger.warning(f"Bootstrap admin not created: {e}")

    logger.info("Lottery Service started successfully")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Shutting down Lottery Service")

    game_config_manager.stop_watching()
    await close_database()

    logger.info("Lottery Service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Lottery Service API",
    description="""
    ## Daily 2D/3D Number Betting

    ### Players
    - `POST /api/auth/register`, `POST /api/auth/login`, `GET /api/auth/me`
    - `POST /api/bets` - bet on today's 2D (`00`-`99`) or 3D (`000`-`999`) draw
    - `GET /api/results/today`, `GET /api/results`
    - `POST /api/transactions` - deposit/withdrawal request for admin review
    - `GET /api/transactions`, `GET /api/payment-methods`

    ### Admins
    - `POST /api/admin/results` - publish the day's numbers and settle its bets
    - `PATCH /api/admin/transactions/{id}` - approve or reject a request
    - Payment methods, players, bets, statistics and the audit trail

    ### Payouts

    | Game | Odds |
    |------|------|
    | 2D   | 85x  |
    | 3D   | 500x |

    Odds and limits are read from the game config file and reloaded on change.

    All endpoints except registration, login, results, payment methods and
    health require `Authorization: Bearer <token>`.
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# === Custom Middleware (from shared) ===
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)
app.add_exception_handler(ApplicationException, application_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# === Include Module Routers ===
app.include_router(accounts_router)
app.include_router(betting_router)
app.include_router(results_router)
app.include_router(wallet_router)
app.include_router(admin_router)


# === Health Check Endpoint ===

@app.get("/health", tags=["Health"], responses={
    200: {
        "description": "Service health",
        "content": {
            "application/json": {
                "example": {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "development",
                    "draw_date": "2024-01-15",
                    "checks": {
                        "database": "connected",
                        "game_config": "watching"
                    }
                }
            }
        }
    }
})
async def health_check():
    """
    Health check endpoint for load balancers and orchestrators.

    Reports database connectivity and game config state.
    """
    checks = {
        "database": "connected",
        "game_config": "watching" if game_config_manager.is_watching else "loaded",
    }

    try:
        async with get_session_context() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health check database probe failed", extra={"error": str(e)})
        checks["database"] = f"error: {e}"

    return {
        "status": "healthy" if checks["database"] == "connected" else "degraded",
        "version": settings.app_version,
        "environment": settings.environment,
        "draw_date": draw_day(settings.draw_timezone).isoformat(),
        "checks": checks
    }


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Lottery Service",
        "version": settings.app_version,
        "architecture": "Clean Architecture / Modular Monolith",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
