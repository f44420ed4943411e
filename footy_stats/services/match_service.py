"""Match lifecycle: record, list, update and delete matches."""

from loguru import logger
from sqlmodel import Session

from footy_stats.core.exceptions import NotFoundError, ValidationError
from footy_stats.dao import match_dao
from footy_stats.dao.player_dao import get_player_by_id
from footy_stats.models import MATCH_RESULTS, Match, utc_now
from footy_stats.schemas.schemas import MatchCreate, MatchUpdate


def _validate_result(result: str) -> None:
    if result not in MATCH_RESULTS:
        raise ValidationError(
            message=f"Invalid match result: {result}",
            details={"result": result, "allowed": list(MATCH_RESULTS)},
        )


def _require_player(session: Session, player_id: int) -> None:
    if not get_player_by_id(session, player_id):
        raise NotFoundError(
            message=f"Player {player_id} not found",
            details={"player_id": player_id},
        )


def create_match(session: Session, player_id: int, data: MatchCreate) -> Match:
    """Record a new match for a player."""
    _require_player(session, player_id)
    _validate_result(data.result)

    now = utc_now()
    match = Match(
        player_id=player_id,
        **data.model_dump(),
        created_at=now,
        updated_at=now,
    )
    match_dao.create_match(session, match)
    logger.info(f"Created match {match.id} vs {match.opponent or '?'} on {match.date}")
    return match


def get_match(session: Session, match_id: int) -> Match:
    """Get a match by ID, raising NotFoundError if it does not exist."""
    match = match_dao.get_match_by_id(session, match_id)
    if not match:
        raise NotFoundError(
            message=f"Match {match_id} not found",
            details={"match_id": match_id},
        )
    return match


def list_matches(
    session: Session, player_id: int, include_synthetic: bool = True
) -> list[Match]:
    """List a player's matches, newest first."""
    _require_player(session, player_id)
    return match_dao.get_matches_for_player(
        session, player_id, include_synthetic=include_synthetic
    )


def update_match(session: Session, match_id: int, updates: MatchUpdate) -> Match:
    """Apply the fields set on ``updates`` to an existing match."""
    match = get_match(session, match_id)
    changes = updates.model_dump(exclude_unset=True, exclude_none=True)
    if "result" in changes:
        _validate_result(changes["result"])

    for field_name, value in changes.items():
        setattr(match, field_name, value)
    match.updated_at = utc_now()

    match_dao.update_match(session, match)
    logger.debug(f"Updated match {match_id}: {sorted(changes)}")
    return match


def delete_match(session: Session, match_id: int) -> None:
    """Delete a match."""
    match = get_match(session, match_id)
    match_dao.delete_match(session, match)
    logger.info(f"Deleted match {match_id}")
