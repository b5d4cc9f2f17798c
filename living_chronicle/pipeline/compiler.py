"""Chronicle compilation: runs the narrative pipeline for one civilization.

Document layout (plain text, no markup):

    THE CHRONICLES OF <NAME>
    ═══════…
    <invocation>

    CHAPTER 1: <title>
    ──────…
    <event paragraph>
    <causal link, when the next event follows closely enough>
    <event paragraph>
    <chapter closing line>
    …

Mythological chapters carry a founding legend instead of event paragraphs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from statistics import fmean
from typing import Any

from living_chronicle.config import DEFAULT_CONFIG, EngineConfig
from living_chronicle.ingest import parse_events, require_civ_name
from living_chronicle.models import Chapter, CompiledChronicle, HistoricalEvent

from .causal import infer_causal_links
from .chapters import segment_chapters, year_range
from .lore_filter import filter_lore_worthy
from .mythology import generate_mythology
from .renderer import render_event

logger = logging.getLogger(__name__)

TITLE_RULE = "═" * 59
CHAPTER_RULE = "─" * 50

INVOCATION = (
    "Here are recorded the deeds and destinies of a great civilization, their triumphs and "
    "tragedies, their rise to glory and the trials that shaped their eternal legacy. "
    "Let all who read these pages remember those who came before."
)
CHAPTER_CLOSING = "Thus ended this chapter of their story, but greater deeds were yet to come..."
FINAL_CLOSING = (
    "And so the chronicles record these deeds for all time, that future generations might "
    "remember the glory and wisdom of those who came before."
)
UNTOLD_SUBTITLE = "A Tale Yet Untold"


def _link_chapter(chapter: Chapter, civ_name: str, config: EngineConfig) -> Chapter:
    if chapter.is_mythological:
        return chapter
    links = infer_causal_links(chapter.events, civ_name, config)
    return chapter.model_copy(update={"links": tuple(links)})


def chapter_body(chapter: Chapter, civ_name: str) -> list[str]:
    """Paragraphs of one chapter, in reading order."""
    if chapter.is_mythological:
        return [generate_mythology(civ_name)]

    links = {(link.from_event_id, link.to_event_id): link for link in chapter.links}
    paragraphs: list[str] = []
    previous: HistoricalEvent | None = None
    for index, event in enumerate(chapter.events):
        link = links.get((previous.id, event.id)) if previous is not None else None
        if link is not None and link.text:
            paragraphs.append(link.text)
        paragraphs.append(render_event(event, index == 0, civ_name, preceding_link=link))
        previous = event
    return paragraphs


def render_document(civ_name: str, chapters: list[Chapter]) -> str:
    blocks = [f"THE CHRONICLES OF {civ_name.upper()}\n{TITLE_RULE}", INVOCATION]
    for number, chapter in enumerate(chapters, start=1):
        blocks.append(f"CHAPTER {number}: {chapter.title}\n{CHAPTER_RULE}")
        blocks.extend(chapter_body(chapter, civ_name))
        blocks.append(FINAL_CLOSING if number == len(chapters) else CHAPTER_CLOSING)
    return "\n\n".join(blocks) + "\n"


def compile_chronicle(
    civ_id: str,
    civ_name: str,
    events: Iterable[HistoricalEvent | Mapping[str, Any]],
    config: EngineConfig = DEFAULT_CONFIG,
) -> CompiledChronicle:
    """Compile the full chronicle of one civilization.

    Raises MalformedEventError for a blank civ_name or an invalid record;
    an empty or entirely unremarkable event log yields a mythological
    chronicle instead of an error.
    """
    civ_name = require_civ_name(civ_name).strip()
    events = parse_events(events)
    filtered = filter_lore_worthy(events)
    legend_year = min((e.year for e in events), default=0)

    chapters = [
        _link_chapter(chapter, civ_name, config)
        for chapter in segment_chapters(filtered, config, legend_year)
    ]
    start_year, end_year = chapters[0].start_year, chapters[-1].end_year
    significances = [e.significance for e in filtered]

    if filtered:
        subtitle = f"The Rise and Deeds of {civ_name} {year_range(start_year, end_year)}"
    else:
        subtitle = UNTOLD_SUBTITLE

    logger.debug(
        "Compiled chronicle civ=%s events=%d lore=%d chapters=%d",
        civ_id, len(events), len(filtered), len(chapters),
    )
    return CompiledChronicle(
        civilization_id=civ_id,
        title=f"The Chronicles of {civ_name}",
        subtitle=subtitle,
        chapters=tuple(chapters),
        text=render_document(civ_name, chapters),
        start_year=start_year,
        end_year=end_year,
        total_entries=len(filtered),
        major_event_count=sum(1 for s in significances if s >= config.major_event_significance),
        dramatic_intensity=fmean(significances) if significances else 0.0,
        historical_significance=max(significances, default=0.0),
    )
