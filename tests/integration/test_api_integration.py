"""Integration tests for API endpoints."""

from collections.abc import Generator
from unittest.mock import patch

from fastapi.testclient import TestClient
import pytest
from sqlmodel import Session, SQLModel

from footy_stats.api.deps import get_fetch_page, get_scrape_config, get_session
from footy_stats.core.config import ScrapeConfig
from footy_stats.core.exceptions import FetchFailure
from footy_stats.dao.player_dao import get_first_player
from footy_stats.main import app

ROUND_PAGES = {
    1: (
        "<table><tr><td>#</td><td>Player</td><td>Score</td></tr>"
        "<tr><td>1</td><td>Nick Daicos</td><td>130</td></tr>"
        '<tr><td>2</td><td>Shai O"Brien</td><td>95</td></tr>'
        "<tr><td>3</td><td>Injured</td><td>N/A</td></tr></table>"
    ),
    3: (
        "<table><tr><td>#</td><td>Player</td><td>Score</td></tr>"
        "<tr><td>1</td><td>Nick Daicos</td><td>121</td></tr></table>"
    ),
}


async def fake_fetch_page(year: int, round_number: int) -> str:
    """Serve canned round pages; round 2 is unreachable."""
    if round_number not in ROUND_PAGES:
        raise FetchFailure(message="HTTP error! status: 500")
    return ROUND_PAGES[round_number]


@pytest.fixture
def client(test_engine) -> Generator[TestClient, None, None]:
    """Create a test client with overridden dependencies."""

    def get_test_session() -> Generator[Session, None, None]:
        with Session(test_engine) as session:
            yield session

    async def get_test_fetch_page():
        yield fake_fetch_page

    app.dependency_overrides[get_session] = get_test_session
    app.dependency_overrides[get_fetch_page] = get_test_fetch_page
    app.dependency_overrides[get_scrape_config] = lambda: ScrapeConfig(
        max_round=3, request_delay_ms=0, year_bounds=(2000, 2100)
    )

    # Point startup at the in-memory database
    with (
        patch("footy_stats.main.engine", test_engine),
        patch(
            "footy_stats.main.create_db_and_tables",
            lambda: SQLModel.metadata.create_all(test_engine),
        ),
        TestClient(app, raise_server_exceptions=False) as test_client,
    ):
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def player_id(client, test_engine) -> int:
    """ID of the default player created at startup."""
    with Session(test_engine) as session:
        player = get_first_player(session)
        assert player is not None
        return player.id


def post_match(client: TestClient, player_id: int, **fields) -> dict:
    response = client.post(f"/api/v1/players/{player_id}/matches", json=fields)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.integration
class TestRootEndpoint:
    """Tests for the root endpoint."""

    def test_returns_welcome_message(self, client):
        """Test that root endpoint returns welcome message."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to Footy Stats API"}


@pytest.mark.integration
class TestPlayersEndpoints:
    """Tests for /api/v1/players."""

    def test_default_player_created_on_startup(self, client):
        """Test that startup seeds the default player."""
        response = client.get("/api/v1/players/")

        assert response.status_code == 200
        players = response.json()
        assert len(players) == 1
        assert players[0]["name"] == "Jay"
        assert players[0]["team_name"] == "Mordi-Brae U12 Mixed"

    def test_get_player(self, client, player_id):
        """Test fetching a single player."""
        response = client.get(f"/api/v1/players/{player_id}")

        assert response.status_code == 200
        assert response.json()["id"] == player_id

    def test_get_missing_player_returns_404(self, client):
        """Test that a missing player gives a not_found error payload."""
        response = client.get("/api/v1/players/99999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "not_found"


@pytest.mark.integration
class TestMatchEndpoints:
    """Tests for match lifecycle endpoints."""

    def test_create_and_list_matches(self, client, player_id):
        """Test that created matches are listed newest first."""
        post_match(client, player_id, date="2025-04-05", opponent="Beaumaris", kicks=5)
        post_match(client, player_id, date="2025-04-12", opponent="Cheltenham", kicks=7)

        response = client.get(f"/api/v1/players/{player_id}/matches")

        assert response.status_code == 200
        assert [m["opponent"] for m in response.json()] == ["Cheltenham", "Beaumaris"]

    def test_create_with_negative_counter_returns_422(self, client, player_id):
        """Test that negative counters fail request validation."""
        response = client.post(
            f"/api/v1/players/{player_id}/matches",
            json={"date": "2025-04-05", "kicks": -1},
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "request_validation_error"

    def test_create_for_missing_player_returns_404(self, client):
        """Test that a match for a missing player is rejected."""
        response = client.post(
            "/api/v1/players/99999/matches", json={"date": "2025-04-05"}
        )

        assert response.status_code == 404

    def test_get_patch_delete_match(self, client, player_id):
        """Test reading, updating and deleting one match."""
        created = post_match(client, player_id, date="2025-04-05", goals=1)
        match_url = f"/api/v1/matches/{created['id']}"

        assert client.get(match_url).json()["goals"] == 1

        patched = client.patch(match_url, json={"goals": 3, "result": "Win"})
        assert patched.status_code == 200
        assert patched.json()["goals"] == 3
        assert patched.json()["result"] == "Win"

        assert client.delete(match_url).status_code == 204
        assert client.get(match_url).status_code == 404

    def test_patch_invalid_result_returns_422(self, client, player_id):
        """Test that a domain validation error maps to 422."""
        created = post_match(client, player_id, date="2025-04-05")

        response = client.patch(
            f"/api/v1/matches/{created['id']}", json={"result": "Forfeit"}
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"


@pytest.mark.integration
class TestSeasonStatsEndpoint:
    """Tests for GET /api/v1/players/{id}/season-stats/{season}."""

    def test_season_stats(self, client, player_id):
        """Test totals, averages and bests over stored matches."""
        for day, kicks, goals in [("2025-04-05", 5, 0), ("2025-04-12", 7, 2), ("2025-04-26", 9, 1)]:
            post_match(client, player_id, date=day, kicks=kicks, goals=goals)
        post_match(client, player_id, date="2024-05-01", kicks=30)

        response = client.get(f"/api/v1/players/{player_id}/season-stats/2025")

        assert response.status_code == 200
        summary = response.json()
        assert summary["total_games"] == 3
        assert summary["totals"]["kicks"] == 21
        assert summary["averages"]["kicks"] == "7.0"
        assert summary["personal_bests"]["goals"] == 2

    def test_empty_season(self, client, player_id):
        """Test that a season with no games returns zero games."""
        response = client.get(f"/api/v1/players/{player_id}/season-stats/2019")

        assert response.json() == {
            "total_games": 0,
            "totals": {},
            "averages": {},
            "personal_bests": {},
        }

    def test_synthetic_data_excluded(self, client, player_id):
        """Test that loading synthetic data does not change the statistics."""
        loaded = client.post(f"/api/v1/players/{player_id}/synthetic-data")
        assert loaded.status_code == 201
        assert loaded.json() == {"count": 17}

        summary = client.get(f"/api/v1/players/{player_id}/season-stats/2025").json()
        assert summary["total_games"] == 0

        listed = client.get(f"/api/v1/players/{player_id}/matches").json()
        assert len(listed) == 17

    def test_synthetic_data_conflict_and_clear(self, client, player_id):
        """Test that a second load conflicts and clear removes the data."""
        client.post(f"/api/v1/players/{player_id}/synthetic-data")

        again = client.post(f"/api/v1/players/{player_id}/synthetic-data")
        assert again.status_code == 409
        assert again.json()["error"]["code"] == "conflict"

        cleared = client.delete("/api/v1/synthetic-data")
        assert cleared.json() == {"count": 17}
        assert client.get(f"/api/v1/players/{player_id}/matches").json() == []


@pytest.mark.integration
class TestSupercoachExportEndpoint:
    """Tests for GET /api/v1/exports/supercoach/{year}."""

    def test_exports_csv_skipping_failed_round(self, client):
        """Test that the CSV is built from reachable rounds only."""
        response = client.get("/api/v1/exports/supercoach/2024")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "afl_supercoach_2024.csv" in response.headers["content-disposition"]
        assert response.text == (
            "Player Name,Games Played,Total Score,Average SuperCoach Score\n"
            '"Nick Daicos",2,251,125.5\n'
            '"Shai O""Brien",1,95,95.0\n'
        )

    def test_max_round_limits_rounds(self, client):
        """Test that only rounds up to max_round are scraped."""
        response = client.get("/api/v1/exports/supercoach/2024?max_round=1")

        assert response.status_code == 200
        assert response.text.splitlines()[1:] == [
            '"Nick Daicos",1,130,130.0',
            '"Shai O""Brien",1,95,95.0',
        ]

    def test_invalid_year_returns_422(self, client):
        """Test that an out-of-range year maps to invalid_parameter."""
        response = client.get("/api/v1/exports/supercoach/1999")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "invalid_parameter"

    def test_max_round_above_limit_returns_422(self, client):
        """Test that too many rounds is rejected."""
        response = client.get("/api/v1/exports/supercoach/2024?max_round=4")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "invalid_parameter"
