"""Tests for result publication and settlement of the draw day."""

from datetime import timedelta
from decimal import Decimal

from tests.conftest import auth
from tests.test_betting_api import place


async def publish(client, admin_token, draw_date, result_2d=None, result_3d=None):
    payload = {"date": draw_date.isoformat()}
    if result_2d is not None:
        payload["result_2d"] = result_2d
    if result_3d is not None:
        payload["result_3d"] = result_3d
    return await client.post("/api/admin/results", json=payload, headers=auth(admin_token))


async def balance_of(client, token) -> Decimal:
    response = await client.get("/api/auth/me", headers=auth(token))
    return Decimal(response.json()["user"]["balance"])


async def bet_statuses(client, token) -> dict:
    response = await client.get("/api/bets", headers=auth(token))
    return {b["number"]: b["status"] for b in response.json()["bets"]}


async def test_winners_are_paid_and_losers_marked(client, player, register, fund, admin_token, today):
    other = await register("other")
    await fund(other["user"]["id"], "1000.00")

    await place(client, player["token"], "2D", "07", "100")    # wins 8500
    await place(client, player["token"], "3D", "415", "10")    # wins 5000
    await place(client, other["token"], "2D", "70", "100")     # loses

    response = await publish(client, admin_token, today, "07", "415")

    assert response.status_code == 201
    body = response.json()
    assert body["result"]["result_2d"] == "07"
    assert body["result"]["result_3d"] == "415"
    assert body["settlement"]["bets_evaluated"] == 3
    assert body["settlement"]["winners"] == 2
    assert body["settlement"]["losers"] == 1
    assert Decimal(body["settlement"]["total_payout"]) == Decimal("13500.00")

    # 5000 - 110 staked + 13500 won
    assert await balance_of(client, player["token"]) == Decimal("18390.00")
    assert await balance_of(client, other["token"]) == Decimal("900.00")

    assert await bet_statuses(client, player["token"]) == {"07": "won", "415": "won"}
    assert await bet_statuses(client, other["token"]) == {"70": "lost"}


async def test_payout_is_recorded_in_ledger(client, player, admin_token, today):
    await place(client, player["token"], "2D", "07", "100")
    await publish(client, admin_token, today, "07", "415")

    response = await client.get("/api/transactions", headers=auth(player["token"]))
    payouts = [t for t in response.json()["transactions"] if t["type"] == "payout"]

    assert len(payouts) == 1
    assert payouts[0]["status"] == "completed"
    assert Decimal(payouts[0]["amount"]) == Decimal("8500.00")
    assert payouts[0]["description"] == "Winning payout for 2D bet on 07"


async def test_missing_half_settles_as_lost(client, player, admin_token, today):
    await place(client, player["token"], "2D", "07", "100")
    await place(client, player["token"], "3D", "415", "100")

    response = await publish(client, admin_token, today, result_2d="07")

    assert response.status_code == 201
    assert response.json()["result"]["result_3d"] is None
    assert await bet_statuses(client, player["token"]) == {"07": "won", "415": "lost"}


async def test_only_the_draw_days_bets_are_settled(client, player, admin_token, today):
    await place(client, player["token"], "2D", "07", "100")

    yesterday = today - timedelta(days=1)
    response = await publish(client, admin_token, yesterday, "07", "415")

    assert response.json()["settlement"]["bets_evaluated"] == 0
    assert await bet_statuses(client, player["token"]) == {"07": "pending"}


async def test_past_draw_day_is_settled(client, player, seed_bet, admin_token, today):
    yesterday = today - timedelta(days=1)
    await seed_bet(player["id"], yesterday, "3D", "007", "2", "1000.00")
    await seed_bet(player["id"], yesterday, "2D", "07", "10", "850.00")

    response = await publish(client, admin_token, yesterday, result_3d="007")

    assert response.status_code == 201
    settlement = response.json()["settlement"]
    assert settlement["bets_evaluated"] == 2
    assert settlement["winners"] == 1
    assert settlement["losers"] == 1
    assert await balance_of(client, player["token"]) == Decimal("6000.00")
    assert await bet_statuses(client, player["token"]) == {"007": "won", "07": "lost"}


async def test_second_publication_conflicts(client, player, admin_token, today):
    await place(client, player["token"], "2D", "07", "100")
    await publish(client, admin_token, today, "07", "415")

    response = await publish(client, admin_token, today, "07", "415")

    assert response.status_code == 409
    # Not paid twice
    assert await balance_of(client, player["token"]) == Decimal("13400.00")


async def test_betting_closes_after_publication(client, player, admin_token, today):
    await publish(client, admin_token, today, "07", "415")

    response = await place(client, player["token"], "2D", "07", "100")

    assert response.status_code == 409
    assert response.json()["detail"] == f"Betting is closed for {today.isoformat()}"
    assert await balance_of(client, player["token"]) == Decimal("5000.00")


async def test_future_date_is_rejected(client, admin_token, today):
    response = await publish(client, admin_token, today + timedelta(days=1), "07", "415")
    assert response.status_code == 400


async def test_requires_a_number(client, admin_token, today):
    response = await publish(client, admin_token, today)
    assert response.status_code == 422


async def test_rejects_malformed_numbers(client, admin_token, today):
    response = await publish(client, admin_token, today, "7", "415")
    assert response.status_code == 422


async def test_players_cannot_publish(client, player, today):
    response = await publish(client, player["token"], today, "07", "415")
    assert response.status_code == 403


async def test_publication_is_audited(client, admin_token, today):
    await publish(client, admin_token, today, "07", "415")

    response = await client.get("/api/admin/audit-logs", headers=auth(admin_token))
    [entry] = response.json()["audit_logs"]
    assert entry["action"] == "RESULT_CREATED"
    assert entry["details"] == f"Created result for {today.isoformat()}: 2D=07, 3D=415"


async def test_today_result(client, admin_token, today):
    response = await client.get("/api/results/today")
    assert response.status_code == 200
    assert response.json()["result"] is None

    await publish(client, admin_token, today, "07", "415")

    response = await client.get("/api/results/today")
    assert response.json()["result"]["result_2d"] == "07"
    assert response.json()["result"]["date"] == today.isoformat()


async def test_result_history_newest_first(client, admin_token, today):
    for days_ago in (2, 0, 1):
        await publish(client, admin_token, today - timedelta(days=days_ago), "07", "415")

    response = await client.get("/api/results")
    dates = [r["date"] for r in response.json()["results"]]
    assert dates == [(today - timedelta(days=d)).isoformat() for d in (0, 1, 2)]
