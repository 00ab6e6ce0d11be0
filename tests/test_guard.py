"""
tests.test_guard

Access guard on `GET /orders`: credential presence/validity and identity isolation.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import httpx
import pytest

TOKEN_REJECTED = {"error": True, "message": "Unauthorized access by token"}
EMAIL_REJECTED = {"error": True, "message": "Unauthorized access by email"}


@pytest.mark.asyncio
async def test_orders_without_cookie_is_unauthorized(client: httpx.AsyncClient) -> None:
    r = await client.get("/orders", params={"email": "alice@example.com"})
    assert r.status_code == 401
    assert r.json() == TOKEN_REJECTED


@pytest.mark.asyncio
async def test_forged_and_expired_tokens_are_unauthorized(
    client: httpx.AsyncClient, mint_token
) -> None:
    for token in (
        mint_token("alice@example.com", secret="someone-elses-secret"),
        mint_token("alice@example.com", now=datetime.now(tz=UTC) - timedelta(hours=2)),
        "not-a-jwt",
    ):
        client.cookies.set("access_token", token)
        r = await client.get("/orders", params={"email": "alice@example.com"})
        assert r.status_code == 401
        assert r.json() == TOKEN_REJECTED


@pytest.mark.asyncio
async def test_other_users_orders_are_unauthorized(client: httpx.AsyncClient, mint_token) -> None:
    client.cookies.set("access_token", mint_token("alice@example.com"))

    r = await client.get("/orders", params={"email": "bob@example.com"})
    assert r.status_code == 401
    assert r.json() == EMAIL_REJECTED

    # Exact match only.
    r = await client.get("/orders", params={"email": "Alice@example.com"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_missing_email_query_is_unauthorized(client: httpx.AsyncClient, mint_token) -> None:
    client.cookies.set("access_token", mint_token("alice@example.com"))
    r = await client.get("/orders")
    assert r.status_code == 401
    assert r.json() == EMAIL_REJECTED


@pytest.mark.asyncio
async def test_login_then_logout_flow(client: httpx.AsyncClient) -> None:
    r = await client.post("/jwt", json={"email": "alice@example.com"})
    assert r.status_code == 200

    r = await client.get("/orders", params={"email": "alice@example.com"})
    assert r.status_code == 200
    assert r.json() == []

    r = await client.post("/logout")
    assert r.status_code == 200
    assert client.cookies.get("access_token") is None

    r = await client.get("/orders", params={"email": "alice@example.com"})
    assert r.status_code == 401
    assert r.json() == TOKEN_REJECTED
