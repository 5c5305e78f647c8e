"""Tests for dashboard statistics, the audit trail and service endpoints."""

from decimal import Decimal

from tests.conftest import auth
from tests.test_betting_api import place
from tests.test_settlement_api import publish


async def get_stats(client, admin_token, draw_date=None):
    url = "/api/admin/stats"
    if draw_date is not None:
        url += f"?date={draw_date.isoformat()}"
    response = await client.get(url, headers=auth(admin_token))
    assert response.status_code == 200, response.text
    return response.json()["stats"]


async def test_stats_empty_day(client, admin_token, today):
    stats = await get_stats(client, admin_token)

    assert stats["draw_date"] == today.isoformat()
    assert stats["total_bets"] == 0
    assert Decimal(stats["total_amount"]) == Decimal("0")
    assert Decimal(stats["net_profit"]) == Decimal("0")


async def test_stats_before_and_after_settlement(client, player, admin_token, today):
    await place(client, player["token"], "2D", "07", "100")
    await place(client, player["token"], "2D", "08", "200")
    await place(client, player["token"], "3D", "123", "50")

    stats = await get_stats(client, admin_token, today)
    assert stats["total_bets"] == 3
    assert stats["pending_bets"] == 3
    assert Decimal(stats["total_amount"]) == Decimal("350.00")
    assert Decimal(stats["total_winnings"]) == Decimal("0")

    await publish(client, admin_token, today, "07", "999")

    stats = await get_stats(client, admin_token, today)
    assert stats["pending_bets"] == 0
    assert Decimal(stats["total_winnings"]) == Decimal("8500.00")
    assert Decimal(stats["net_profit"]) == Decimal("-8150.00")


async def test_stats_require_admin(client, player):
    response = await client.get("/api/admin/stats", headers=auth(player["token"]))
    assert response.status_code == 403


async def test_audit_log_newest_first(client, player, admin_token, today):
    await publish(client, admin_token, today, "07", "415")
    await client.post("/api/admin/payment-methods", json={
        "name": "KBZPay", "account_name": "Lottery Co", "account_number": "0977",
    }, headers=auth(admin_token))

    response = await client.get("/api/admin/audit-logs?limit=10", headers=auth(admin_token))
    actions = [e["action"] for e in response.json()["audit_logs"]]
    assert actions == ["PAYMENT_METHOD_CREATED", "RESULT_CREATED"]


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"]["database"] == "connected"


async def test_root(client):
    response = await client.get("/")
    assert response.json()["service"] == "Lottery Service"


async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"
    assert "X-Response-Time" in response.headers
