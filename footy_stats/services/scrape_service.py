"""Scrape per-round SuperCoach scores from results pages.

``extract_round_scores`` turns one round's markup into ``RoundScore`` values.
``fetch_season_scores`` drives it over every round of a season, one fetch at
a time, and keeps whatever rounds succeed.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
import re

from bs4 import BeautifulSoup
from bs4.element import Tag
from loguru import logger

from footy_stats.core.config import ScrapeConfig
from footy_stats.core.exceptions import FetchFailure, InvalidParameterError
from footy_stats.schemas.schemas import RoundScore

type FetchPage = Callable[[int, int], Awaitable[str]]
type ParseDocument = Callable[[str], Tag]
type ProgressCallback = Callable[[int, int], None]

# FootyWire puts the player name in the second column and the score last
NAME_COLUMN = 1
MIN_CELLS = 2

# Leading base-10 integer, the way the results pages print scores ("85", "-3")
_INTEGER_PREFIX = re.compile(r"[+-]?\d+")

# Summary rows on AFL Tables season pages
_SUMMARY_MARKERS = ("TOTAL", "Average")


def parse_html(markup: str) -> Tag:
    """Default document parser: a BeautifulSoup tree over ``markup``."""
    return BeautifulSoup(markup, "html.parser")


def parse_score(text: str) -> int | None:
    """Parse the leading integer of ``text``, or None if there is none."""
    match = _INTEGER_PREFIX.match(text.strip())
    if match is None:
        return None
    return int(match.group(), 10)


def _cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def _data_rows(document: Tag):
    """Yield the ``td`` cells of every non-header row of every table."""
    for table in document.find_all("table"):
        for index, row in enumerate(table.find_all("tr")):
            if index == 0:
                continue
            yield row.find_all("td")


def extract_round_scores(
    raw_markup: str,
    round_number: int,
    parse_document: ParseDocument = parse_html,
) -> list[RoundScore]:
    """Extract ``(name, round, score)`` triples from one round's results page.

    Every table in the document is scanned and the results unioned. Row 0 of
    each table is treated as a header. Rows with an empty name or a score
    that is not an integer (e.g. ``"N/A"``) are skipped; this never raises
    on bad data.

    Args:
        raw_markup: Page markup as returned by the fetcher.
        round_number: Round the page belongs to, copied onto each result.
        parse_document: Turns markup into a tree queryable by tag name.
    """
    document = parse_document(raw_markup)
    scores: list[RoundScore] = []

    for cells in _data_rows(document):
        if len(cells) < MIN_CELLS:
            continue

        name = _cell_text(cells[NAME_COLUMN])
        score = parse_score(_cell_text(cells[-1]))
        if not name or score is None:
            logger.trace(f"Skipping row in round {round_number}: name={name!r}")
            continue

        scores.append(RoundScore(name=name, round=round_number, score=score))

    return scores


def extract_player_names(
    raw_markup: str, year: int, parse_document: ParseDocument = parse_html
) -> list[str]:
    """Extract player names from an AFL Tables season statistics page.

    The name is the first cell of each non-header row; totals and average
    rows are dropped.
    """
    document = parse_document(raw_markup)
    names: list[str] = []

    for cells in _data_rows(document):
        if not cells:
            continue
        name = _cell_text(cells[0])
        if not name or any(marker in name for marker in _SUMMARY_MARKERS):
            continue
        names.append(name)

    logger.debug(f"Found {len(names)} players on AFL Tables page for {year}")
    return names


def validate_year(year: int, config: ScrapeConfig) -> None:
    """Raise InvalidParameterError unless ``year`` is an int within bounds."""
    low, high = config.year_bounds
    if isinstance(year, bool) or not isinstance(year, int) or not low <= year <= high:
        raise InvalidParameterError(
            message=f"Invalid year: {year}",
            details={"year": str(year), "min": low, "max": high},
        )


def validate_round(round_number: int, max_round: int) -> None:
    """Raise InvalidParameterError unless ``round_number`` is in 1..max_round."""
    if (
        isinstance(round_number, bool)
        or not isinstance(round_number, int)
        or not 1 <= round_number <= max_round
    ):
        raise InvalidParameterError(
            message=f"Invalid round: {round_number}",
            details={"round": str(round_number), "min": 1, "max": max_round},
        )


@dataclass
class RoundResult:
    """Outcome of one round: its scores, or the failure that replaced them."""

    round: int
    scores: list[RoundScore] = field(default_factory=list)
    failure: FetchFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


async def fetch_round(
    year: int,
    round_number: int,
    fetch_page: FetchPage,
    parse_document: ParseDocument = parse_html,
) -> RoundResult:
    """Fetch and parse one round, capturing a fetch error as a RoundResult.

    InvalidParameterError from the fetcher is not a fetch error and propagates.
    """
    try:
        markup = await fetch_page(year, round_number)
    except FetchFailure as e:
        e.details = {**e.details, "year": year, "round": round_number}
        return RoundResult(round=round_number, failure=e)
    except InvalidParameterError:
        raise
    except Exception as e:  # noqa: BLE001 - any fetcher error costs only this round
        return RoundResult(
            round=round_number,
            failure=FetchFailure(
                message=f"Error fetching {year} round {round_number}: {e!s}",
                details={"year": year, "round": round_number},
            ),
        )

    return RoundResult(
        round=round_number,
        scores=extract_round_scores(markup, round_number, parse_document),
    )


async def fetch_season_scores(
    year: int,
    max_round: int,
    fetch_page: FetchPage,
    *,
    config: ScrapeConfig | None = None,
    parse_document: ParseDocument = parse_html,
    on_progress: ProgressCallback | None = None,
) -> list[RoundScore]:
    """Fetch every round of a season, keeping whatever rounds succeed.

    Rounds ``1..max_round`` are fetched one after another with
    ``config.request_delay_ms`` between fetches. A round whose fetch fails
    is logged and contributes nothing; the season still returns the other
    rounds' scores. Callers should check the result length rather than
    assume every round is present.

    Args:
        year: Season year, within ``config.year_bounds``.
        max_round: Last round to fetch, between 1 and ``config.max_round``.
        fetch_page: Async callable returning a round's markup.
        config: Scrape tunables; defaults to the environment settings.
        parse_document: Markup parser handed to the extractor.
        on_progress: Called with ``(round, max_round)`` before each fetch.

    Raises:
        InvalidParameterError: Before any fetch, if ``year`` or
            ``max_round`` is out of range.
    """
    config = config or ScrapeConfig.from_settings()
    validate_year(year, config)
    validate_round(max_round, config.max_round)

    delay = config.request_delay_ms / 1000
    all_scores: list[RoundScore] = []
    failed_rounds: list[int] = []

    logger.info(f"Fetching SuperCoach scores for {year} ({max_round} rounds)...")

    for round_number in range(1, max_round + 1):
        if round_number > 1 and delay > 0:
            await asyncio.sleep(delay)
        if on_progress:
            on_progress(round_number, max_round)

        logger.debug(f"Fetching round {round_number}/{max_round}...")
        result = await fetch_round(year, round_number, fetch_page, parse_document)

        if result.ok:
            all_scores.extend(result.scores)
        else:
            failed_rounds.append(round_number)
            logger.warning(f"Failed to fetch round {round_number}: {result.failure}")

    logger.info(
        f"Total scores fetched for {year}: {len(all_scores)} "
        + f"({len(failed_rounds)} rounds failed)"
    )
    return all_scores
