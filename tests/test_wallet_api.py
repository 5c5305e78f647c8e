"""Tests for deposit/withdrawal requests, their review and payment methods."""

from decimal import Decimal

import pytest

from tests.conftest import auth
from tests.test_settlement_api import balance_of


async def request_tx(client, token, tx_type="deposit", amount="2000", **extra):
    payload = {"type": tx_type, "amount": amount}
    payload.update(extra)
    return await client.post("/api/transactions", json=payload, headers=auth(token))


async def review(client, admin_token, tx_id, status, admin_notes=None):
    payload = {"status": status}
    if admin_notes is not None:
        payload["admin_notes"] = admin_notes
    return await client.patch(
        f"/api/admin/transactions/{tx_id}", json=payload, headers=auth(admin_token)
    )


@pytest.fixture
async def payment_method(client, admin_token):
    response = await client.post("/api/admin/payment-methods", json={
        "name": "KBZPay",
        "account_name": "Lottery Co",
        "account_number": "09777777777",
    }, headers=auth(admin_token))
    assert response.status_code == 201, response.text
    return response.json()["payment_method"]


class TestRequests:
    async def test_deposit_request_is_pending(self, client, player, payment_method):
        response = await request_tx(
            client, player["token"],
            payment_method_id=payment_method["id"],
            receipt_url="https://files.example/receipt-1.png",
        )

        assert response.status_code == 201
        tx = response.json()["transaction"]
        assert tx["status"] == "pending"
        assert tx["type"] == "deposit"
        assert tx["receipt_url"] == "https://files.example/receipt-1.png"
        # Nothing moves until approval
        assert await balance_of(client, player["token"]) == Decimal("5000.00")

    async def test_deposit_below_minimum(self, client, player):
        response = await request_tx(client, player["token"], amount="999.99")
        assert response.status_code == 400
        assert response.json()["detail"] == "Minimum deposit is 1000.00"

    async def test_withdrawal_above_balance(self, client, player):
        response = await request_tx(client, player["token"], "withdrawal", "5000.01")
        assert response.status_code == 400
        assert response.json()["detail"] == "Insufficient balance"

    async def test_players_cannot_request_payouts(self, client, player):
        response = await request_tx(client, player["token"], "payout", "100")
        assert response.status_code == 422

    async def test_inactive_payment_method(self, client, player, admin_token, payment_method):
        await client.patch(
            f"/api/admin/payment-methods/{payment_method['id']}",
            json={"is_active": False},
            headers=auth(admin_token),
        )

        response = await request_tx(client, player["token"], payment_method_id=payment_method["id"])
        assert response.status_code == 400
        assert response.json()["detail"] == "Payment method is not available"

    async def test_list_own_transactions(self, client, player, register):
        other = await register("other")
        await request_tx(client, player["token"])
        await request_tx(client, player["token"], "withdrawal", "100")

        response = await client.get("/api/transactions", headers=auth(player["token"]))
        types = [t["type"] for t in response.json()["transactions"]]
        assert types == ["withdrawal", "deposit"]

        response = await client.get("/api/transactions", headers=auth(other["token"]))
        assert response.json()["transactions"] == []


class TestReview:
    async def test_approved_deposit_credits_balance(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"], amount="2000")).json()["transaction"]

        response = await review(client, admin_token, tx["id"], "approved", "receipt checked")

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        assert response.json()["admin_notes"] == "receipt checked"
        assert await balance_of(client, player["token"]) == Decimal("7000.00")

    async def test_approved_withdrawal_debits_balance(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"], "withdrawal", "1500")).json()["transaction"]

        await review(client, admin_token, tx["id"], "approved")

        assert await balance_of(client, player["token"]) == Decimal("3500.00")

    async def test_rejection_leaves_balance(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"])).json()["transaction"]

        response = await review(client, admin_token, tx["id"], "rejected")

        assert response.json()["status"] == "rejected"
        assert await balance_of(client, player["token"]) == Decimal("5000.00")

    async def test_cannot_review_twice(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"])).json()["transaction"]
        await review(client, admin_token, tx["id"], "approved")

        response = await review(client, admin_token, tx["id"], "approved")

        assert response.status_code == 409
        assert await balance_of(client, player["token"]) == Decimal("7000.00")

    async def test_withdrawal_checked_again_on_approval(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"], "withdrawal", "4000")).json()["transaction"]
        # Spend most of the balance after requesting
        await client.post(
            "/api/bets",
            json={"type": "2D", "number": "07", "amount": "2000"},
            headers=auth(player["token"]),
        )

        response = await review(client, admin_token, tx["id"], "approved")

        assert response.status_code == 400
        assert await balance_of(client, player["token"]) == Decimal("3000.00")

    async def test_unknown_transaction(self, client, admin_token):
        response = await review(client, admin_token, 9999, "approved")
        assert response.status_code == 404

    async def test_invalid_status(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"])).json()["transaction"]
        response = await review(client, admin_token, tx["id"], "completed")
        assert response.status_code == 422

    async def test_pending_queue(self, client, player, admin_token):
        first = (await request_tx(client, player["token"])).json()["transaction"]
        second = (await request_tx(client, player["token"], "withdrawal", "100")).json()["transaction"]
        await review(client, admin_token, first["id"], "approved")

        response = await client.get("/api/admin/transactions/pending", headers=auth(admin_token))

        assert [t["id"] for t in response.json()["transactions"]] == [second["id"]]

    async def test_review_is_audited(self, client, player, admin_token):
        tx = (await request_tx(client, player["token"])).json()["transaction"]
        await review(client, admin_token, tx["id"], "approved", "ok")

        response = await client.get("/api/admin/audit-logs", headers=auth(admin_token))
        [entry] = response.json()["audit_logs"]
        assert entry["action"] == "TRANSACTION_UPDATE"
        assert entry["details"] == f"Updated transaction {tx['id']} status to approved with notes: ok"

    async def test_players_cannot_review(self, client, player):
        tx = (await request_tx(client, player["token"])).json()["transaction"]
        response = await review(client, player["token"], tx["id"], "approved")
        assert response.status_code == 403


class TestPaymentMethods:
    async def test_public_list_shows_active_only(self, client, admin_token, payment_method):
        await client.post("/api/admin/payment-methods", json={
            "name": "Wave Money",
            "account_name": "Lottery Co",
            "account_number": "09888888888",
            "is_active": False,
        }, headers=auth(admin_token))

        response = await client.get("/api/payment-methods")
        assert [m["name"] for m in response.json()["payment_methods"]] == ["KBZPay"]

        response = await client.get("/api/admin/payment-methods", headers=auth(admin_token))
        assert len(response.json()["payment_methods"]) == 2

    async def test_partial_update(self, client, admin_token, payment_method):
        response = await client.patch(
            f"/api/admin/payment-methods/{payment_method['id']}",
            json={"account_number": "09111111111"},
            headers=auth(admin_token),
        )

        assert response.status_code == 200
        assert response.json()["account_number"] == "09111111111"
        assert response.json()["name"] == "KBZPay"

    async def test_delete_keeps_transactions(self, client, player, admin_token, payment_method):
        tx = (await request_tx(
            client, player["token"], payment_method_id=payment_method["id"]
        )).json()["transaction"]

        response = await client.delete(
            f"/api/admin/payment-methods/{payment_method['id']}", headers=auth(admin_token)
        )
        assert response.status_code == 200

        response = await client.get("/api/transactions", headers=auth(player["token"]))
        [kept] = response.json()["transactions"]
        assert kept["id"] == tx["id"]
        assert kept["payment_method_id"] is None

    async def test_delete_unknown(self, client, admin_token):
        response = await client.delete("/api/admin/payment-methods/9999", headers=auth(admin_token))
        assert response.status_code == 404

    async def test_changes_are_audited(self, client, admin_token, payment_method):
        response = await client.get("/api/admin/audit-logs", headers=auth(admin_token))
        assert [e["action"] for e in response.json()["audit_logs"]] == ["PAYMENT_METHOD_CREATED"]

    async def test_players_cannot_manage(self, client, player):
        response = await client.post("/api/admin/payment-methods", json={
            "name": "x", "account_name": "y", "account_number": "z",
        }, headers=auth(player["token"]))
        assert response.status_code == 403
