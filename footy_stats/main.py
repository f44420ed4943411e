"""FastAPI application for Footy Stats with SQLModel database integration."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlmodel import Session

from footy_stats.api.v1.router import api_router
from footy_stats.core.db import create_db_and_tables, engine
from footy_stats.core.error_handlers import register_exception_handlers
from footy_stats.core.logging_config import configure_logging
from footy_stats.dao.player_dao import create_player, get_first_player
from footy_stats.models import Player


def ensure_default_player(session: Session) -> Player:
    """Create the default player if the store has none."""
    player = get_first_player(session)
    if player:
        return player

    player = create_player(
        session, Player(name="Jay", team_name="Mordi-Brae U12 Mixed", season=2025)
    )
    session.commit()
    logger.info(f"Created default player {player.name} (id={player.id})")
    return player


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    configure_logging()
    logger.info("Starting Footy Stats application...")
    logger.info("Initializing database...")
    create_db_and_tables()
    with Session(engine) as session:
        ensure_default_player(session)
    logger.success("Database initialized successfully")
    await asyncio.sleep(0)  # Satisfy RUF029 (async function must await)
    logger.success("Application startup complete")
    yield
    logger.info("Shutting down Footy Stats application...")


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/")
def read_root() -> dict[str, str]:
    """Return welcome message for the root endpoint."""
    logger.debug("Root endpoint accessed")
    return {"message": "Welcome to Footy Stats API"}
