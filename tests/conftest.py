"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
import datetime as dt

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from footy_stats.models import Match, Player


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(test_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    with Session(test_engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def sample_player(session) -> Player:
    """Create a sample player for testing."""
    player = Player(name="Jay", team_name="Mordi-Brae U12 Mixed", season=2025)
    session.add(player)
    session.commit()
    session.refresh(player)
    return player


@pytest.fixture
def other_player(session) -> Player:
    """Create a second player so per-player filtering can be checked."""
    player = Player(name="Sam", team_name="Mordi-Brae U12 Mixed", season=2025)
    session.add(player)
    session.commit()
    session.refresh(player)
    return player


def make_match(player_id: int = 1, day: str = "2025-04-05", **kwargs) -> Match:
    """Build an unsaved match; counters not given default to 0."""
    return Match(player_id=player_id, date=dt.date.fromisoformat(day), **kwargs)


@pytest.fixture
def season_matches(session, sample_player) -> list[Match]:
    """Three real 2025 matches, one synthetic 2025 match and one 2024 match."""
    matches = [
        make_match(sample_player.id, "2025-04-05", opponent="Beaumaris", kicks=5, goals=0, marks=3),
        make_match(sample_player.id, "2025-04-12", opponent="Cheltenham", kicks=7, goals=2, marks=4),
        make_match(sample_player.id, "2025-04-26", opponent="St Pauls", kicks=9, goals=1, marks=4),
        make_match(sample_player.id, "2025-05-03", opponent="Parkdale", kicks=40, goals=9, is_synthetic=True),
        make_match(sample_player.id, "2024-06-01", opponent="Highett", kicks=30, goals=7),
    ]
    session.add_all(matches)
    session.commit()
    for match in matches:
        session.refresh(match)
    return matches


@pytest.fixture
def match_factory():
    """Expose make_match to tests that build matches without a database."""
    return make_match
