"""Chapter segmentation and chapter titles.

Lore-worthy events are walked in year order and grouped into chapters. A
chapter closes before the next event when:
  - that event lies more than chapter_max_span years after the chapter start,
  - the chapter already holds chapter_max_events events, or
  - that event is a major one (significance >= chapter_break_significance);
    major events always start a new chapter.
The new chapter starts at the triggering event's year. With nothing to
segment, a single mythological "Age of Legends" chapter stands in.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from living_chronicle.config import DEFAULT_CONFIG, EngineConfig
from living_chronicle.models import Chapter, HistoricalEvent
from living_chronicle.seeding import derive_seed, pick

logger = logging.getLogger(__name__)

LEGENDS_TITLE = "The Age of Legends"
SILENT_TITLE = "The Silent Years"

# (dominant type, dominant category or None for any) -> title phrasings
CHAPTER_TITLES: dict[tuple[str, str | None], tuple[str, ...]] = {
    ("Military", "Conflict"): (
        "The Blood-Soaked Conquest",
        "The War of Shattered Crowns",
        "The Great Devastation",
        "The Crimson Campaign",
        "The Iron Storm",
    ),
    ("Military", "Coalition"): (
        "The Sacred Alliance",
        "The Brotherhood of Steel",
        "The Unbreakable Pact",
        "The Coalition of Destiny",
        "The Unity Forged",
    ),
    ("Military", "Escalation"): (
        "The Spreading Flames",
        "The War Without End",
        "The Gathering Storm",
        "The Widening Breach",
        "The March of Legions",
    ),
    ("Cultural", None): (
        "The Golden Renaissance",
        "The Age of Wonders",
        "The Flowering of Genius",
        "The Cultural Revolution",
        "The Dawn of Enlightenment",
    ),
    ("Religious", None): (
        "The Divine Revelation",
        "The Sacred Reformation",
        "The Age of Prophets",
        "The Spiritual Awakening",
        "The Holy Transformation",
    ),
    ("Economic", None): (
        "The Age of Gold",
        "The Merchant Kings",
        "The Great Prosperity",
        "The Golden Current",
        "The Wealth of Nations",
    ),
    ("Diplomatic", None): (
        "The Game of Thrones",
        "The Web of Intrigue",
        "The Master's Gambit",
        "The Silent War",
        "The Dance of Diplomats",
    ),
    ("Social", "Collapse"): (
        "The Great Collapse",
        "The Shattered Foundation",
        "The Time of Reckoning",
        "The Fall from Grace",
        "The Dying of the Light",
    ),
    ("Social", None): (
        "The Great Uprising",
        "The Social Revolution",
        "The Transformation",
        "The New Order",
        "The People's Awakening",
    ),
    ("Political", None): (
        "The Throne Wars",
        "The Game of Crowns",
        "The Struggle for Dominion",
        "The Political Earthquake",
        "The Power Shift",
    ),
    ("Technological", None): (
        "The Age of Invention",
        "The Forge of Progress",
        "The Spark of Ingenuity",
        "The Great Discovery",
        "The Engine of Tomorrow",
    ),
}

DEFAULT_TITLES: tuple[str, ...] = (
    "The Turning Point",
    "The Winds of Change",
    "The Crossroads of Fate",
    "The Defining Moment",
    "The Age of Legends",
)


def _title_bucket(event_type: str, category: str) -> tuple[str, ...]:
    return (
        CHAPTER_TITLES.get((event_type, category))
        or CHAPTER_TITLES.get((event_type, None))
        or DEFAULT_TITLES
    )


def year_range(start_year: int, end_year: int) -> str:
    if start_year == end_year:
        return f"(Year {start_year})"
    return f"(Years {start_year}–{end_year})"


def chapter_title(events: list[HistoricalEvent], start_year: int, end_year: int) -> str:
    """Title from the chapter's dominant type and category, plus its years.

    Ties between equally common types (or categories) go to the one seen
    first in the chapter.
    """
    if not events:
        return SILENT_TITLE
    dominant_type = Counter(e.type for e in events).most_common(1)[0][0]
    dominant_category = Counter(e.category for e in events).most_common(1)[0][0]
    bucket = _title_bucket(dominant_type, dominant_category)
    title = pick(bucket, derive_seed(start_year + end_year, 0.0, "chapter-title"))
    return f"{title} {year_range(start_year, end_year)}"


def legends_chapter(year: int = 0) -> Chapter:
    return Chapter(
        title=LEGENDS_TITLE,
        start_year=year,
        end_year=year,
        is_mythological=True,
    )


def _close(events: list[HistoricalEvent], start_year: int) -> Chapter:
    end_year = events[-1].year
    return Chapter(
        title=chapter_title(events, start_year, end_year),
        start_year=start_year,
        end_year=end_year,
        events=tuple(events),
    )


def segment_chapters(
    events: Iterable[HistoricalEvent],
    config: EngineConfig = DEFAULT_CONFIG,
    legend_year: int = 0,
) -> list[Chapter]:
    """Group lore-worthy events into year-ordered, non-overlapping chapters."""
    ordered = sorted(events, key=lambda e: (e.year, e.id))
    if not ordered:
        logger.debug("No events to segment, using the Age of Legends")
        return [legends_chapter(legend_year)]

    chapters: list[Chapter] = []
    current: list[HistoricalEvent] = []
    start_year = ordered[0].year

    for event in ordered:
        if current and (
            event.year - start_year > config.chapter_max_span
            or len(current) >= config.chapter_max_events
            or event.significance >= config.chapter_break_significance
        ):
            chapters.append(_close(current, start_year))
            current = []
            start_year = event.year
        current.append(event)

    chapters.append(_close(current, start_year))
    logger.debug("Segmented %d events into %d chapters", len(ordered), len(chapters))
    return chapters
