"""Service for calculating a player's season statistics."""

from collections.abc import Sequence

from loguru import logger
from sqlmodel import Session

from footy_stats.core.exceptions import (
    InvalidInputError,
    InvalidParameterError,
    NotFoundError,
)
from footy_stats.core.rounding import format_tenths
from footy_stats.dao.match_dao import get_matches_for_player
from footy_stats.dao.player_dao import get_player_by_id
from footy_stats.models import STAT_KEYS, Match
from footy_stats.schemas.schemas import SeasonSummary


def compute_season_stats(records: Sequence[Match], season: int) -> SeasonSummary:
    """Aggregate a player's matches for one season.

    Synthetic matches and matches from other seasons are ignored. This
    calculates:
    - totals: sum of every counter in STAT_KEYS
    - averages: total / games, rounded half-up to one decimal ("7.0")
    - personal_bests: highest single-match value of every counter

    A season with no matching games returns ``total_games=0`` and empty
    mappings rather than dividing by zero.

    Args:
        records: Matches to aggregate; never mutated.
        season: Calendar year to aggregate.

    Raises:
        InvalidInputError: If ``records`` is not a list or tuple.
        InvalidParameterError: If ``season`` is not an integer.
    """
    if not isinstance(records, (list, tuple)):
        raise InvalidInputError(
            message="Match records must be a list",
            details={"received_type": type(records).__name__},
        )
    if isinstance(season, bool) or not isinstance(season, int):
        raise InvalidParameterError(
            message=f"Invalid season: {season!r}",
            details={"season": str(season)},
        )

    season_matches = [
        m for m in records if not m.is_synthetic and m.date.year == season
    ]
    if not season_matches:
        return SeasonSummary(total_games=0)

    match_stats = [m.stats for m in season_matches]
    total_games = len(match_stats)

    totals = {key: sum(stats.get(key, 0) for stats in match_stats) for key in STAT_KEYS}
    averages = {key: format_tenths(totals[key], total_games) for key in STAT_KEYS}
    personal_bests = {
        key: max(stats.get(key, 0) for stats in match_stats) for key in STAT_KEYS
    }

    return SeasonSummary(
        total_games=total_games,
        totals=totals,
        averages=averages,
        personal_bests=personal_bests,
    )


def get_season_stats(session: Session, player_id: int, season: int) -> SeasonSummary:
    """Load a player's matches from the store and aggregate one season."""
    player = get_player_by_id(session, player_id)
    if not player:
        raise NotFoundError(
            message=f"Player {player_id} not found",
            details={"player_id": player_id},
        )

    matches = get_matches_for_player(session, player_id)
    summary = compute_season_stats(matches, season)
    logger.debug(
        f"Season {season} stats for {player.name}: "
        + f"games={summary.total_games}, goals={summary.totals.get('goals', 0)}"
    )
    return summary
