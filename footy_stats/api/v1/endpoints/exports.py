"""
Export API endpoints.

Scrapes a season of SuperCoach scores and returns the per-player summary as
CSV text.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response
from loguru import logger

from footy_stats.api.deps import FetchPageDep, ScrapeConfigDep
from footy_stats.services.export_service import aggregate_players, csv_filename, to_csv
from footy_stats.services.scrape_service import fetch_season_scores

router = APIRouter()


@router.get("/supercoach/{year}")
async def export_supercoach_csv(
    year: int,
    fetch_page: FetchPageDep,
    config: ScrapeConfigDep,
    max_round: Annotated[int | None, Query(ge=1)] = None,
) -> Response:
    """
    Scrape every round of a season and return the player summary CSV.
    Rounds that cannot be fetched are skipped; an empty body means no scores.
    """
    rounds = max_round or config.max_round
    logger.info(f"Received SuperCoach export request for {year} ({rounds} rounds)")

    scores = await fetch_season_scores(year, rounds, fetch_page, config=config)
    players = aggregate_players(scores)

    logger.info(f"Export for {year} complete: {len(players)} players")
    return Response(
        content=to_csv(players),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{csv_filename(year)}"'},
    )
