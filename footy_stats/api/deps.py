from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel import Session

from footy_stats.core.config import ScrapeConfig
from footy_stats.core.db import engine
from footy_stats.services.footywire_client import FootyWireClient


def get_session() -> Generator[Session, None, None]:
    """Provide a database session for dependency injection."""
    logger.debug("Creating database session")
    with Session(engine) as session:
        yield session
    logger.debug("Database session closed")


async def get_fetch_page() -> AsyncGenerator[Callable[[int, int], Awaitable[str]], None]:
    """Provide the round-page fetcher backed by a FootyWire HTTP client."""
    async with FootyWireClient() as client:
        yield client.fetch_round_page


def get_scrape_config() -> ScrapeConfig:
    """Provide scrape tunables from the environment settings."""
    return ScrapeConfig.from_settings()


SessionDep = Annotated[Session, Depends(get_session)]
FetchPageDep = Annotated[Callable[[int, int], Awaitable[str]], Depends(get_fetch_page)]
ScrapeConfigDep = Annotated[ScrapeConfig, Depends(get_scrape_config)]
