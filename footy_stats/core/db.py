from loguru import logger
from sqlmodel import SQLModel, create_engine

from footy_stats.core.config import DATABASE_URL

# SQLite needs check_same_thread off once FastAPI hands sessions to worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

logger.info(f"Initializing database engine with URL: {DATABASE_URL.rsplit('@', 1)[-1]}")
engine = create_engine(DATABASE_URL, connect_args=connect_args)


def create_db_and_tables() -> None:
    """Create database tables from SQLModel metadata."""
    logger.info("Creating database tables from SQLModel metadata...")
    SQLModel.metadata.create_all(engine)
    logger.success("Database tables created successfully")
