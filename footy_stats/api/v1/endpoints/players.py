from fastapi import APIRouter
from loguru import logger

from footy_stats.api.deps import SessionDep
from footy_stats.core.exceptions import NotFoundError
from footy_stats.dao.player_dao import get_all_players, get_player_by_id
from footy_stats.models import Match, Player
from footy_stats.schemas.schemas import MatchCreate, SeasonSummary, SyntheticDataResponse
from footy_stats.services import match_service
from footy_stats.services.season_stats_service import get_season_stats
from footy_stats.services.synthetic_data_service import load_synthetic_data

router = APIRouter()


@router.get("/", response_model=list[Player])
def read_players(
    session: SessionDep, offset: int = 0, limit: int = 100
) -> list[Player]:
    """Retrieve a paginated list of players from the database."""
    logger.info(f"Fetching players list (offset={offset}, limit={limit})")
    players = get_all_players(session, offset=offset, limit=limit)
    logger.debug(f"Retrieved {len(players)} players")
    return players


@router.get("/{player_id}", response_model=Player)
def read_player(player_id: int, session: SessionDep) -> Player:
    """Retrieve a specific player by ID from the database."""
    logger.info(f"Fetching player with ID: {player_id}")
    player = get_player_by_id(session, player_id)
    if not player:
        raise NotFoundError(
            message=f"Player {player_id} not found",
            details={"player_id": player_id},
        )
    return player


@router.get("/{player_id}/matches", response_model=list[Match])
def read_player_matches(
    player_id: int, session: SessionDep, include_synthetic: bool = True
) -> list[Match]:
    """List a player's matches, newest first."""
    return match_service.list_matches(
        session, player_id, include_synthetic=include_synthetic
    )


@router.post("/{player_id}/matches", response_model=Match, status_code=201)
def create_player_match(
    player_id: int, data: MatchCreate, session: SessionDep
) -> Match:
    """Record a new match for a player."""
    match = match_service.create_match(session, player_id, data)
    session.commit()
    session.refresh(match)
    return match


@router.get("/{player_id}/season-stats/{season}", response_model=SeasonSummary)
def read_season_stats(player_id: int, season: int, session: SessionDep) -> SeasonSummary:
    """Totals, averages and personal bests for one season."""
    logger.info(f"Computing season {season} stats for player {player_id}")
    return get_season_stats(session, player_id, season)


@router.post(
    "/{player_id}/synthetic-data",
    response_model=SyntheticDataResponse,
    status_code=201,
)
def create_synthetic_data(player_id: int, session: SessionDep) -> SyntheticDataResponse:
    """Load the synthetic 2025 season for a player."""
    count = load_synthetic_data(session, player_id)
    session.commit()
    return SyntheticDataResponse(count=count)
