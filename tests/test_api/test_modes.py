"""Tests for the therapy mode catalog endpoints."""

import pytest
from httpx import AsyncClient


async def test_list_modes(client: AsyncClient) -> None:
    response = await client.get("/api/modes")
    assert response.status_code == 200
    data = response.json()
    assert [m["mode"] for m in data] == ["relaxation", "focus", "sleep", "premium"]
    assert data[0]["label"] == "Relaxation"


async def test_premium_locked_by_default(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SOUNDTHERAPY_PREMIUM_UNLOCKED", raising=False)
    response = await client.get("/api/modes/premium")
    assert response.status_code == 200
    data = response.json()
    assert data["requires_unlock"] is True
    assert data["unlocked"] is False


async def test_premium_unlocked(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOUNDTHERAPY_PREMIUM_UNLOCKED", "true")
    response = await client.get("/api/modes/premium")
    assert response.json()["unlocked"] is True


async def test_unknown_mode(client: AsyncClient) -> None:
    response = await client.get("/api/modes/party")
    assert response.status_code == 404
