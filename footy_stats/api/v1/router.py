from fastapi import APIRouter
from loguru import logger

from footy_stats.api.v1.endpoints import exports, matches, players

logger.info("Initializing API v1 router")
api_router = APIRouter(prefix="/api/v1")

logger.debug("Registering players endpoint")
api_router.include_router(players.router, prefix="/players", tags=["players"])
logger.debug("Registering matches endpoint")
api_router.include_router(matches.router, tags=["matches"])
logger.debug("Registering exports endpoint")
api_router.include_router(exports.router, prefix="/exports", tags=["exports"])
logger.success("API v1 router initialized successfully")
