"""Tests for health check endpoints."""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from rummypuzzle.main import app
from rummypuzzle.services.puzzle_store import PuzzleStore


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness probe returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    async def test_health_no_data_check(self, client: AsyncClient) -> None:
        """Health endpoint does not load puzzles."""
        response = await client.get("/health")

        assert response.json().get("puzzles") is None


class TestReadyEndpoint:
    async def test_ready_reports_puzzle_count(
        self, client: AsyncClient, store: PuzzleStore
    ) -> None:
        with patch("rummypuzzle.api.health.get_store", return_value=store):
            response = await client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["puzzles"] == len(store)

    async def test_ready_returns_503_without_data(self, client: AsyncClient) -> None:
        """Readiness probe returns 503 when the dataset cannot be loaded."""
        with patch(
            "rummypuzzle.api.health.get_store",
            side_effect=FileNotFoundError("Puzzle data not found"),
        ):
            response = await client.get("/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["puzzles"] is None
