"""Data Access Object for Match operations."""

from sqlmodel import Session, col, select

from footy_stats.models import Match


def get_match_by_id(session: Session, match_id: int) -> Match | None:
    """Get a match by ID."""
    return session.get(Match, match_id)


def get_matches_for_player(
    session: Session, player_id: int, include_synthetic: bool = True
) -> list[Match]:
    """Get all matches for a player, newest first."""
    statement = select(Match).where(Match.player_id == player_id)
    if not include_synthetic:
        statement = statement.where(col(Match.is_synthetic).is_(False))
    statement = statement.order_by(col(Match.date).desc(), col(Match.id).desc())
    return list(session.exec(statement).all())


def get_synthetic_matches(session: Session) -> list[Match]:
    """Get every synthetic match regardless of player."""
    return list(
        session.exec(select(Match).where(col(Match.is_synthetic).is_(True))).all()
    )


def create_match(session: Session, match: Match) -> Match:
    """Create a new match and return it with ID populated."""
    session.add(match)
    session.flush()
    return match


def create_matches(session: Session, matches: list[Match]) -> list[Match]:
    """Create several matches in one flush."""
    session.add_all(matches)
    session.flush()
    return matches


def update_match(session: Session, match: Match) -> Match:
    """Update an existing match."""
    session.add(match)
    return match


def delete_match(session: Session, match: Match) -> None:
    """Delete a match."""
    session.delete(match)
