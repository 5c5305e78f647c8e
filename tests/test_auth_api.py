"""Tests for registration, login and token handling."""

from decimal import Decimal

from src.infrastructure.security import create_access_token
from tests.conftest import PLAYER_PASSWORD, auth


async def test_register_returns_token_and_profile(client):
    response = await client.post("/api/auth/register", json={
        "username": "mgmg",
        "password": PLAYER_PASSWORD,
        "confirm_password": PLAYER_PASSWORD,
        "phone": "09123456789",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["username"] == "mgmg"
    assert body["user"]["phone"] == "09123456789"
    assert Decimal(body["user"]["balance"]) == Decimal("0")
    assert body["user"]["referral_code"].startswith("SM")
    assert body["user"]["is_admin"] is False
    assert "password_hash" not in body["user"]


async def test_register_rejects_mismatched_passwords(client):
    response = await client.post("/api/auth/register", json={
        "username": "mgmg",
        "password": PLAYER_PASSWORD,
        "confirm_password": "different1",
    })
    assert response.status_code == 422


async def test_register_rejects_short_password(client):
    response = await client.post("/api/auth/register", json={
        "username": "mgmg",
        "password": "123",
        "confirm_password": "123",
    })
    assert response.status_code == 422


async def test_duplicate_username_conflicts(client, register):
    await register("mgmg")

    response = await client.post("/api/auth/register", json={
        "username": "mgmg",
        "password": PLAYER_PASSWORD,
        "confirm_password": PLAYER_PASSWORD,
    })
    assert response.status_code == 409
    assert response.json()["detail"] == "Username already exists"


async def test_duplicate_phone_conflicts(client, register):
    await register("first", phone="09111")

    response = await client.post("/api/auth/register", json={
        "username": "second",
        "password": PLAYER_PASSWORD,
        "confirm_password": PLAYER_PASSWORD,
        "phone": "09111",
    })
    assert response.status_code == 409


async def test_referral_credits_referrer_commission(client, register):
    referrer = await register("referrer")
    code = referrer["user"]["referral_code"]

    invited = await register("invited", used_ref_code=code)
    assert Decimal(invited["user"]["commission"]) == Decimal("0")

    response = await client.get("/api/auth/me", headers=auth(referrer["token"]))
    assert Decimal(response.json()["user"]["commission"]) == Decimal("50.00")
    # Commission is not spendable balance
    assert Decimal(response.json()["user"]["balance"]) == Decimal("0")


async def test_unknown_referral_code_is_accepted_without_bonus(register):
    body = await register("invited", used_ref_code="SMNOPE00")
    assert body["user"]["username"] == "invited"


async def test_login(client, register):
    await register("mgmg")

    response = await client.post(
        "/api/auth/login", json={"username": "mgmg", "password": PLAYER_PASSWORD}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Login successful"
    assert response.json()["token"]


async def test_login_wrong_password(client, register):
    await register("mgmg")

    response = await client.post(
        "/api/auth/login", json={"username": "mgmg", "password": "wrong-pass"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


async def test_login_unknown_user(client):
    response = await client.post(
        "/api/auth/login", json={"username": "ghost", "password": PLAYER_PASSWORD}
    )
    assert response.status_code == 401


async def test_me_requires_token(client):
    response = await client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert "correlation_id" in response.json()


async def test_me_rejects_garbage_token(client):
    response = await client.get("/api/auth/me", headers=auth("not-a-jwt"))
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


async def test_me_rejects_expired_token(client, register):
    body = await register("mgmg")
    token = create_access_token(body["user"]["id"], expires_minutes=-1)

    response = await client.get("/api/auth/me", headers=auth(token))
    assert response.status_code == 401
    assert response.json()["detail"] == "Token expired"


async def test_token_for_deleted_user(client):
    response = await client.get("/api/auth/me", headers=auth(create_access_token(9999)))
    assert response.status_code == 401
    assert response.json()["detail"] == "User not found"


async def test_admin_routes_reject_players(client, player):
    response = await client.get("/api/admin/users", headers=auth(player["token"]))
    assert response.status_code == 403
    assert response.json()["detail"] == "Admin access required"


async def test_admin_lists_users(client, admin_token, register):
    await register("mgmg")

    response = await client.get("/api/admin/users", headers=auth(admin_token))
    assert response.status_code == 200
    usernames = {u["username"] for u in response.json()["users"]}
    assert usernames == {"admin", "mgmg"}
