"""Pydantic request/response schemas and pipeline value types."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MatchCreate(BaseModel):
    """Payload for recording a new match."""

    date: dt.date
    opponent: str = ""
    venue: str = ""
    position: str = ""
    quarters_played: int = Field(default=4, ge=0, le=4)
    weather: str = ""
    result: str = "Unknown"
    score: str = ""
    notes: str = ""
    is_synthetic: bool = False

    kicks: int = Field(default=0, ge=0)
    handballs: int = Field(default=0, ge=0)
    marks: int = Field(default=0, ge=0)
    goals: int = Field(default=0, ge=0)
    behinds: int = Field(default=0, ge=0)
    tackles: int = Field(default=0, ge=0)
    spoils: int = Field(default=0, ge=0)
    smothers: int = Field(default=0, ge=0)
    interceptions: int = Field(default=0, ge=0)
    frees_for: int = Field(default=0, ge=0)
    frees_against: int = Field(default=0, ge=0)


class MatchUpdate(BaseModel):
    """Partial update for an existing match; unset fields are left alone."""

    date: dt.date | None = None
    opponent: str | None = None
    venue: str | None = None
    position: str | None = None
    quarters_played: int | None = Field(default=None, ge=0, le=4)
    weather: str | None = None
    result: str | None = None
    score: str | None = None
    notes: str | None = None

    kicks: int | None = Field(default=None, ge=0)
    handballs: int | None = Field(default=None, ge=0)
    marks: int | None = Field(default=None, ge=0)
    goals: int | None = Field(default=None, ge=0)
    behinds: int | None = Field(default=None, ge=0)
    tackles: int | None = Field(default=None, ge=0)
    spoils: int | None = Field(default=None, ge=0)
    smothers: int | None = Field(default=None, ge=0)
    interceptions: int | None = Field(default=None, ge=0)
    frees_for: int | None = Field(default=None, ge=0)
    frees_against: int | None = Field(default=None, ge=0)


class SeasonSummary(BaseModel):
    """Totals, per-game averages and personal bests for one season."""

    total_games: int = 0
    totals: dict[str, int] = Field(default_factory=dict)
    averages: dict[str, str] = Field(default_factory=dict)
    personal_bests: dict[str, int] = Field(default_factory=dict)


class RoundScore(BaseModel):
    """A single player's SuperCoach score for one round."""

    model_config = ConfigDict(frozen=True)

    name: str
    round: int
    score: int


class PlayerSeasonAggregate(BaseModel):
    """A player's SuperCoach scores summed and averaged over a season."""

    model_config = ConfigDict(frozen=True)

    name: str
    games_played: int
    total_score: int
    average_score: Decimal


class SeasonExportResult(BaseModel):
    """Outcome of generating one season's CSV file."""

    year: int
    filename: str | None = None
    player_count: int = 0
    error: str | None = None


class SyntheticDataResponse(BaseModel):
    """Number of synthetic matches loaded or cleared."""

    count: int
