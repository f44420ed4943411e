"""Script to scrape AFL SuperCoach scores and write one CSV per season."""

import asyncio

from loguru import logger

from footy_stats.core.config import OUTPUT_DIR, SEASON_YEARS, ScrapeConfig
from footy_stats.core.logging_config import configure_logging
from footy_stats.schemas.schemas import SeasonExportResult
from footy_stats.services.export_service import generate_all_season_csvs
from footy_stats.services.footywire_client import FootyWireClient


async def run(years: list[int]) -> list[SeasonExportResult]:
    """Generate CSVs for ``years`` into the configured output directory."""
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {OUTPUT_DIR.resolve()}")

    async with FootyWireClient() as client:
        return await generate_all_season_csvs(
            years,
            client.fetch_round_page,
            OUTPUT_DIR,
            config=ScrapeConfig.from_settings(),
        )


def log_summary(results: list[SeasonExportResult]) -> None:
    """Log one line per season."""
    logger.info("=== Summary ===")
    for result in results:
        if result.error:
            logger.error(f"{result.year}: Failed - {result.error}")
        elif result.filename is None:
            logger.warning(f"{result.year}: No scores found")
        else:
            logger.success(f"{result.year}: Success - {result.player_count} players")


if __name__ == "__main__":
    configure_logging()
    logger.info("Starting AFL SuperCoach CSV generator...")
    log_summary(asyncio.run(run(SEASON_YEARS)))
    logger.success("CSV generation completed")
