from fastapi import APIRouter, Response
from loguru import logger

from footy_stats.api.deps import SessionDep
from footy_stats.models import Match
from footy_stats.schemas.schemas import MatchUpdate, SyntheticDataResponse
from footy_stats.services import match_service
from footy_stats.services.synthetic_data_service import clear_synthetic_data

router = APIRouter()


@router.get("/matches/{match_id}", response_model=Match)
def read_match(match_id: int, session: SessionDep) -> Match:
    """Retrieve a single match."""
    return match_service.get_match(session, match_id)


@router.patch("/matches/{match_id}", response_model=Match)
def patch_match(match_id: int, updates: MatchUpdate, session: SessionDep) -> Match:
    """Update the given fields of a match."""
    match = match_service.update_match(session, match_id, updates)
    session.commit()
    session.refresh(match)
    return match


@router.delete("/matches/{match_id}", status_code=204)
def remove_match(match_id: int, session: SessionDep) -> Response:
    """Delete a match."""
    match_service.delete_match(session, match_id)
    session.commit()
    return Response(status_code=204)


@router.delete("/synthetic-data", response_model=SyntheticDataResponse)
def remove_synthetic_data(session: SessionDep) -> SyntheticDataResponse:
    """Delete every synthetic match."""
    count = clear_synthetic_data(session)
    session.commit()
    logger.info(f"Synthetic data cleared via API: {count} matches")
    return SyntheticDataResponse(count=count)
