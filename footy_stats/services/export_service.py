"""Aggregate scraped SuperCoach scores per player and export them as CSV."""

import csv
import io
from pathlib import Path

from loguru import logger

from footy_stats.core.config import ScrapeConfig
from footy_stats.core.exceptions import AppError
from footy_stats.core.rounding import round_to_tenths
from footy_stats.schemas.schemas import (
    PlayerSeasonAggregate,
    RoundScore,
    SeasonExportResult,
)
from footy_stats.services.scrape_service import FetchPage, fetch_season_scores

CSV_HEADER = ("Player Name", "Games Played", "Total Score", "Average SuperCoach Score")


def aggregate_players(scores: list[RoundScore]) -> list[PlayerSeasonAggregate]:
    """Sum and average each player's scores, best average first.

    Players are grouped by their exact name string, so two spellings of the
    same player produce two rows. Players with equal averages keep the order
    they were first seen in.
    """
    totals: dict[str, list[int]] = {}
    for entry in scores:
        games_and_total = totals.setdefault(entry.name, [0, 0])
        games_and_total[0] += 1
        games_and_total[1] += entry.score

    players = [
        PlayerSeasonAggregate(
            name=name,
            games_played=games,
            total_score=total,
            average_score=round_to_tenths(total, games),
        )
        for name, (games, total) in totals.items()
    ]
    # sorted() is stable, so ties keep encounter order
    return sorted(players, key=lambda p: p.average_score, reverse=True)


def to_csv(players: list[PlayerSeasonAggregate]) -> str:
    """Serialize players to CSV text.

    An empty list gives an empty string with no header. Names are always
    quoted, with embedded quotes doubled; numbers are left unquoted. Every
    row, the last included, ends with ``\\n``.
    """
    if not players:
        return ""

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    buffer.write(",".join(CSV_HEADER) + "\n")
    for player in players:
        writer.writerow(
            [player.name, player.games_played, player.total_score, player.average_score]
        )
    return buffer.getvalue()


def csv_filename(year: int) -> str:
    """Name of the CSV file for a season."""
    return f"afl_supercoach_{year}.csv"


def write_season_csv(
    year: int, players: list[PlayerSeasonAggregate], output_dir: Path
) -> Path:
    """Write a season's CSV into ``output_dir``, which must already exist."""
    path = output_dir / csv_filename(year)
    path.write_text(to_csv(players), encoding="utf-8")
    logger.success(f"CSV saved: {path}")
    return path


async def generate_season_csv(
    year: int,
    fetch_page: FetchPage,
    output_dir: Path,
    *,
    config: ScrapeConfig | None = None,
) -> SeasonExportResult:
    """Scrape a season, aggregate it and write its CSV file.

    Failures are logged and reported on the result rather than raised. A
    season with no scores writes no file.
    """
    config = config or ScrapeConfig.from_settings()
    logger.info(f"=== Processing Season {year} ===")

    try:
        scores = await fetch_season_scores(
            year, config.max_round, fetch_page, config=config
        )
        if not scores:
            logger.warning(f"No scores found for {year}")
            return SeasonExportResult(year=year)

        players = aggregate_players(scores)
        logger.info(f"Generating CSV for {year} ({len(players)} players)...")
        path = write_season_csv(year, players, output_dir)
    except (AppError, OSError) as e:
        logger.error(f"Error generating CSV for {year}: {e!s}")
        return SeasonExportResult(year=year, error=str(e))

    return SeasonExportResult(year=year, filename=str(path), player_count=len(players))


async def generate_all_season_csvs(
    years: list[int],
    fetch_page: FetchPage,
    output_dir: Path,
    *,
    config: ScrapeConfig | None = None,
) -> list[SeasonExportResult]:
    """Generate CSV files for several seasons, one season at a time."""
    results: list[SeasonExportResult] = []
    for year in years:
        results.append(
            await generate_season_csv(year, fetch_page, output_dir, config=config)
        )
    return results
