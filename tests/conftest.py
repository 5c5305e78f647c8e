"""
Shared fixtures: an in-memory database per test and an HTTP client bound
to the FastAPI app.
"""

import os
from decimal import Decimal

# Settings are read once at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("GAME_CONFIG_PATH", "tests/missing_game_config.yaml")

import pytest
from httpx import ASGITransport, AsyncClient

from src.accounts.application import AccountService
from src.accounts.infrastructure import SQLAlchemyUserRepository
from src.betting.domain import Bet
from src.betting.infrastructure import SQLAlchemyBetRepository, game_config_manager
from src.config import BetStatus, settings
from src.core import draw_day
from src.infrastructure.database import (
    close_database,
    create_tables,
    drop_tables,
    get_session_context,
    init_database,
)
from src.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass"
PLAYER_PASSWORD = "secret123"


@pytest.fixture
def today():
    return draw_day(settings.draw_timezone)


@pytest.fixture
async def database():
    init_database("sqlite+aiosqlite://")
    await create_tables()
    game_config_manager.load(settings.game_config_path)
    yield
    await drop_tables()
    await close_database()


@pytest.fixture
async def client(database):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Register a player through the API; returns the auth response body."""

    async def _register(username: str, **extra) -> dict:
        payload = {
            "username": username,
            "password": PLAYER_PASSWORD,
            "confirm_password": PLAYER_PASSWORD,
        }
        payload.update(extra)
        response = await client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
async def admin_token(client):
    async with get_session_context() as session:
        service = AccountService(SQLAlchemyUserRepository(session), game_config_manager)
        await service.ensure_admin(ADMIN_USERNAME, ADMIN_PASSWORD)

    response = await client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def fund():
    """Credit a player's wallet directly."""

    async def _fund(user_id: int, amount: str) -> Decimal:
        async with get_session_context() as session:
            return await SQLAlchemyUserRepository(session).adjust_balance(user_id, Decimal(amount))

    return _fund


@pytest.fixture
async def player(register, fund):
    """A registered player holding 5000.00."""
    body = await register("mgmg")
    await fund(body["user"]["id"], "5000.00")
    return {"id": body["user"]["id"], "token": body["token"]}


@pytest.fixture
def seed_bet():
    """Store a bet directly, bypassing placement rules and the wallet."""

    async def _seed_bet(user_id: int, draw_date, bet_type: str, number: str,
                        amount: str, payout: str, status: str = BetStatus.PENDING) -> Bet:
        async with get_session_context() as session:
            return await SQLAlchemyBetRepository(session).create(Bet(
                id=None,
                user_id=user_id,
                type=bet_type,
                number=number,
                amount=Decimal(amount),
                potential_payout=Decimal(payout),
                draw_date=draw_date,
                status=status,
            ))

    return _seed_bet
