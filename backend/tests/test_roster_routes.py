"""Tests for roster API routes."""

import random

import httpx
import pytest

from nosso_volei.main import app
from nosso_volei.repositories.roster_repository import RosterRepository
from nosso_volei.services.roster_service import RosterService

pytestmark = pytest.mark.anyio


@pytest.fixture
def roster_service(tmp_path):
    """Service backed by a throwaway DuckDB file."""
    repo = RosterRepository(tmp_path / "roster.duckdb")
    return RosterService(repo, rng=random.Random(5))


@pytest.fixture
async def client(roster_service):
    """Create async test client with a fresh roster service."""
    # Set service directly on app.state (mimics lifespan startup)
    app.state.roster_service = roster_service

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def add_players(client, count: int) -> list[dict]:
    players = []
    for i in range(count):
        response = await client.post(
            "/api/roster/players",
            json={"name": f"player {i}", "gender": "Masculino" if i % 2 else "Feminino"},
        )
        assert response.status_code == 201
        players.append(response.json())
    return players


def team_counts(data: dict) -> tuple[int, int, int]:
    teams = data["teams"]
    return teams["A"]["count"], teams["B"]["count"], teams["WAITING"]["count"]


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAddPlayer:
    async def test_add_player(self, client):
        response = await client.post("/api/roster/players", json={"name": " ana ", "gender": "F"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "ANA"
        assert data["gender"] == "Feminino"
        assert data["team"] == "A"
        assert data["sequenceNumber"] == 1
        assert data["id"]

    async def test_blank_name_rejected(self, client):
        response = await client.post("/api/roster/players", json={"name": "   ", "gender": "M"})
        assert response.status_code == 422

    async def test_unknown_gender_rejected(self, client):
        response = await client.post("/api/roster/players", json={"name": "ana", "gender": "X"})
        assert response.status_code == 422

    async def test_fill_order(self, client):
        await add_players(client, 13)

        response = await client.get("/api/roster")

        data = response.json()
        assert data["total_players"] == 13
        assert team_counts(data) == (6, 6, 1)

    async def test_add_random_player(self, client):
        response = await client.post("/api/roster/players/random")
        assert response.status_code == 201
        assert response.json()["gender"] in ("Masculino", "Feminino")


class TestEditAndRemove:
    async def test_update_player(self, client):
        [player] = await add_players(client, 1)

        response = await client.patch(
            f"/api/roster/players/{player['id']}",
            json={"name": "carla", "gender": "Mulher"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "CARLA"
        assert response.json()["sequenceNumber"] == player["sequenceNumber"]

    async def test_update_unknown_player(self, client):
        response = await client.patch(
            "/api/roster/players/missing", json={"name": "x", "gender": "M"}
        )
        assert response.status_code == 404

    async def test_remove_refills_from_waiting(self, client):
        players = await add_players(client, 14)

        response = await client.delete(f"/api/roster/players/{players[0]['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["removed"]["id"] == players[0]["id"]
        assert team_counts(data) == (6, 6, 1)
        team_a_ids = [p["id"] for p in data["teams"]["A"]["players"]]
        assert players[12]["id"] in team_a_ids

    async def test_remove_unknown_player(self, client):
        response = await client.delete("/api/roster/players/missing")
        assert response.status_code == 404


class TestBalanceAndMatches:
    async def test_balance_needs_two_players(self, client):
        await add_players(client, 1)
        response = await client.post("/api/roster/balance")
        assert response.status_code == 400

    async def test_balance(self, client):
        await add_players(client, 15)

        response = await client.post("/api/roster/balance")

        assert response.status_code == 200
        data = response.json()
        assert team_counts(data) == (6, 6, 3)
        waiting_seqs = [p["sequenceNumber"] for p in data["teams"]["WAITING"]["players"]]
        assert waiting_seqs == [13, 14, 15]

    async def test_match_full_swap(self, client):
        players = await add_players(client, 20)

        response = await client.post("/api/roster/matches", json={"winner": "A"})

        assert response.status_code == 200
        data = response.json()
        assert team_counts(data) == (6, 6, 8)
        team_b_ids = [p["id"] for p in data["teams"]["B"]["players"]]
        assert team_b_ids == [p["id"] for p in players[12:18]]

    async def test_invalid_winner(self, client):
        await add_players(client, 12)
        response = await client.post("/api/roster/matches", json={"winner": "WAITING"})
        assert response.status_code == 422

    async def test_match_needs_both_teams(self, client):
        await add_players(client, 3)
        response = await client.post("/api/roster/matches", json={"winner": "A"})
        assert response.status_code == 400


async def test_reset(client, roster_service):
    await add_players(client, 4)

    response = await client.delete("/api/roster")

    assert response.status_code == 200
    assert response.json()["total_players"] == 0
    assert roster_service.repository.load() == []
