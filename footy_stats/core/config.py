"""Application settings loaded from the environment."""

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _int_env(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _years_env(name: str, default: str) -> list[int]:
    raw = os.getenv(name, default)
    return [int(part) for part in raw.split(",") if part.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///footy_stats.db")

# Standard number of AFL rounds per season
MAX_AFL_ROUNDS = _int_env("MAX_AFL_ROUNDS", 24)
# Delay between round fetches to avoid overwhelming the source server
REQUEST_DELAY_MS = _int_env("REQUEST_DELAY_MS", 500)
YEAR_MIN = _int_env("YEAR_MIN", 2000)
YEAR_MAX = _int_env("YEAR_MAX", 2100)

SEASON_YEARS = _years_env("SEASON_YEARS", "2023,2024,2025")
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", "dataOutput"))
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))


@dataclass(frozen=True)
class ScrapeConfig:
    """Tunables for the season scrape pipeline."""

    max_round: int = MAX_AFL_ROUNDS
    request_delay_ms: int = REQUEST_DELAY_MS
    year_bounds: tuple[int, int] = (YEAR_MIN, YEAR_MAX)

    @classmethod
    def from_settings(cls) -> "ScrapeConfig":
        """Build a config from the module-level settings."""
        return cls(
            max_round=MAX_AFL_ROUNDS,
            request_delay_ms=REQUEST_DELAY_MS,
            year_bounds=(YEAR_MIN, YEAR_MAX),
        )
