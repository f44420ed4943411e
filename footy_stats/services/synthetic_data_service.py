"""Synthetic 2025 season used for demonstrations and testing.

Synthetic matches are flagged with ``is_synthetic`` so the season statistics
never count them.
"""

import datetime as dt
import random
from typing import NamedTuple

from loguru import logger
from sqlmodel import Session

from footy_stats.core.exceptions import ConflictError, NotFoundError
from footy_stats.dao import match_dao
from footy_stats.dao.player_dao import get_player_by_id
from footy_stats.models import Match, utc_now


class FixtureEntry(NamedTuple):
    """One scheduled match of the fixture."""

    date: dt.date
    opponent: str
    venue: str
    result: str


# 2025 season fixture for Mordi-Brae U12 Mixed WILLIAMS
FIXTURE_2025: tuple[FixtureEntry, ...] = (
    FixtureEntry(dt.date(2025, 4, 5), "Beaumaris", "Reserve Rd", "Win"),
    FixtureEntry(dt.date(2025, 4, 12), "Cheltenham", "President Park", "Win"),
    FixtureEntry(dt.date(2025, 4, 26), "St Pauls", "G H Cleland", "Loss"),
    FixtureEntry(dt.date(2025, 5, 3), "Parkdale", "Jack Grut", "Win"),
    FixtureEntry(dt.date(2025, 5, 10), "East Brighton", "Dendy Park", "Loss"),
    FixtureEntry(dt.date(2025, 5, 17), "Highett", "G H Cleland", "Win"),
    FixtureEntry(dt.date(2025, 5, 24), "Dingley", "Marcus Rd", "Draw"),
    FixtureEntry(dt.date(2025, 5, 31), "Bentleigh", "G H Cleland", "Win"),
    FixtureEntry(dt.date(2025, 6, 7), "South Yarra", "G H Cleland", "Win"),
    FixtureEntry(dt.date(2025, 6, 14), "Clayton", "Meake Reserve", "Loss"),
    FixtureEntry(dt.date(2025, 6, 21), "Hampton", "Boss James", "Win"),
    FixtureEntry(dt.date(2025, 6, 28), "Moorabbin", "G H Cleland", "Win"),
    FixtureEntry(dt.date(2025, 7, 12), "St Kilda City", "Peanut Farm", "Win"),
    FixtureEntry(dt.date(2025, 7, 19), "Oakleigh", "G H Cleland", "Loss"),
    FixtureEntry(dt.date(2025, 7, 26), "Sandringham", "G H Cleland", "Win"),
    # Finals
    FixtureEntry(dt.date(2025, 8, 2), "Elimination Final", "TBD", "Win"),
    FixtureEntry(dt.date(2025, 8, 9), "Preliminary Final", "TBD", "Loss"),
)

POSITIONS = ("Forward", "Midfield", "Defence")
WEATHER = ("Sunny", "Cloudy", "Rainy", "Windy")


def generate_stats(result: str, match_number: int, rng: random.Random) -> dict[str, int]:
    """Draw plausible counters for one match, nudged by the result."""
    stats = {
        "kicks": rng.randint(5, 12),
        "handballs": rng.randint(4, 9),
        "marks": rng.randint(2, 6),
        "goals": rng.randint(0, 2),
        "behinds": rng.randint(0, 2),
        "tackles": rng.randint(2, 6),
        "spoils": rng.randint(1, 3),
        "smothers": rng.randint(0, 1),
        "interceptions": rng.randint(1, 4),
        "frees_for": rng.randint(0, 2),
        "frees_against": rng.randint(0, 1),
    }

    if result == "Win":
        stats["kicks"] += rng.randint(0, 2)
        stats["marks"] += rng.randint(0, 1)
        stats["goals"] += rng.randint(0, 1)
    elif result == "Loss":
        stats["kicks"] = max(3, stats["kicks"] - 2)
        stats["goals"] //= 2

    # Gradual improvement over the season
    improvement = match_number // 5
    stats["kicks"] += improvement
    stats["handballs"] += improvement
    return stats


def generate_synthetic_matches(
    player_id: int, rng: random.Random | None = None
) -> list[Match]:
    """Build one synthetic match per fixture entry (not persisted)."""
    rng = rng or random.Random()
    now = utc_now()
    return [
        Match(
            player_id=player_id,
            date=entry.date,
            opponent=entry.opponent,
            venue=entry.venue,
            position=rng.choice(POSITIONS),
            quarters_played=4,
            weather=rng.choice(WEATHER),
            result=entry.result,
            notes="Synthetic data from 2025 fixture",
            is_synthetic=True,
            created_at=now,
            updated_at=now,
            **generate_stats(entry.result, index, rng),
        )
        for index, entry in enumerate(FIXTURE_2025, start=1)
    ]


def has_synthetic_data(session: Session) -> bool:
    """Check whether any synthetic matches are stored."""
    return bool(match_dao.get_synthetic_matches(session))


def load_synthetic_data(
    session: Session, player_id: int, rng: random.Random | None = None
) -> int:
    """Store the synthetic season for a player and return the match count."""
    if not get_player_by_id(session, player_id):
        raise NotFoundError(
            message=f"Player {player_id} not found",
            details={"player_id": player_id},
        )
    if has_synthetic_data(session):
        raise ConflictError(
            message="Synthetic data already loaded. Clear it first.",
        )

    matches = generate_synthetic_matches(player_id, rng)
    match_dao.create_matches(session, matches)
    logger.info(f"Loaded {len(matches)} synthetic matches for player {player_id}")
    return len(matches)


def clear_synthetic_data(session: Session) -> int:
    """Delete every synthetic match and return how many were removed."""
    synthetic = match_dao.get_synthetic_matches(session)
    for match in synthetic:
        match_dao.delete_match(session, match)
    logger.info(f"Cleared {len(synthetic)} synthetic matches")
    return len(synthetic)
