"""SQLModel data models for the Footy Stats application."""

import datetime as dt

from sqlmodel import Field, Relationship, SQLModel  # type: ignore

# Every counter recorded for a match, in display order
STAT_KEYS: tuple[str, ...] = (
    "kicks",
    "handballs",
    "marks",
    "goals",
    "behinds",
    "tackles",
    "spoils",
    "smothers",
    "interceptions",
    "frees_for",
    "frees_against",
)

MATCH_RESULTS: tuple[str, ...] = ("Win", "Loss", "Draw", "Unknown")


def utc_now() -> dt.datetime:
    """Timestamp used for created_at/updated_at columns."""
    return dt.datetime.now(dt.UTC)


class Player(SQLModel, table=True):
    """A junior player whose matches are being tracked."""

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(default="", index=True)
    team_name: str = Field(default="")
    season: int = Field(default_factory=lambda: dt.date.today().year, index=True)
    jersey_number: int | None = None

    created_at: dt.datetime = Field(default_factory=utc_now)
    updated_at: dt.datetime = Field(default_factory=utc_now)

    matches: list["Match"] = Relationship(back_populates="player")  # type: ignore


class Match(SQLModel, table=True):
    """One played match and the player's counters for it."""

    id: int | None = Field(default=None, primary_key=True)
    player_id: int = Field(foreign_key="player.id", index=True)
    date: dt.date = Field(index=True)

    opponent: str = Field(default="", index=True)
    venue: str = Field(default="")
    position: str = Field(default="")
    quarters_played: int = Field(default=4, ge=0, le=4)
    weather: str = Field(default="")
    result: str = Field(default="Unknown", description="Win, Loss, Draw or Unknown")
    score: str = Field(default="")
    notes: str = Field(default="")

    # Demonstration/test data, never counted in statistics
    is_synthetic: bool = Field(default=False, index=True)

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

    created_at: dt.datetime = Field(default_factory=utc_now)
    updated_at: dt.datetime = Field(default_factory=utc_now)

    player: Player = Relationship(back_populates="matches")  # type: ignore

    @property
    def season(self) -> int:
        """Calendar year the match was played in."""
        return self.date.year

    @property
    def stats(self) -> dict[str, int]:
        """Every counter in STAT_KEYS, with unset values reported as 0."""
        return {key: getattr(self, key) or 0 for key in STAT_KEYS}
