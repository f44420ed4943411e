"""Data Access Object for Player operations."""

from sqlmodel import Session, select

from footy_stats.models import Player


def get_player_by_id(session: Session, player_id: int) -> Player | None:
    """Get a player by ID."""
    return session.get(Player, player_id)


def get_all_players(
    session: Session, offset: int = 0, limit: int = 100
) -> list[Player]:
    """Get all players with pagination."""
    statement = select(Player).order_by(Player.id).offset(offset).limit(limit)  # type: ignore[arg-type]
    return list(session.exec(statement).all())


def get_first_player(session: Session) -> Player | None:
    """Get the player with the lowest ID."""
    return session.exec(select(Player).order_by(Player.id)).first()  # type: ignore[arg-type]


def create_player(session: Session, player: Player) -> Player:
    """Create a new player and return it with ID populated."""
    session.add(player)
    session.flush()
    return player
