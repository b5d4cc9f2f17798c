"""Lore filter: keeps only events worth telling in a chronicle."""

import logging
from collections.abc import Iterable

from living_chronicle.models import HistoricalEvent

logger = logging.getLogger(__name__)

ALWAYS_EPIC_CATEGORIES = frozenset({
    "Hero",
    "Coalition",
    "HolyWar",
    "Betrayal",
    "Collapse",
    "Golden",
    "Disaster",
    "Revolution",
    "Cascade",
    "Spiritual",
    "Discovery",
    "Escalation",
})

HIGH_SIGNIFICANCE = 3.0

# Types narrated once they reach a modest significance
CIVIC_TYPES = frozenset({"Social", "Political", "Diplomatic", "Technological"})


def is_lore_worthy(event: HistoricalEvent) -> bool:
    """True if any inclusion rule holds for the event."""
    if event.category in ALWAYS_EPIC_CATEGORIES:
        return True
    if event.significance >= HIGH_SIGNIFICANCE:
        return True
    if event.type == "Religious":
        return True
    if event.type == "Military" and event.category == "Conflict" and event.significance >= 2.0:
        return True
    if event.type == "Cultural" and event.significance >= 1.5:
        return True
    return event.type in CIVIC_TYPES and event.significance >= 2.0


def filter_lore_worthy(events: Iterable[HistoricalEvent]) -> list[HistoricalEvent]:
    """Return the lore-worthy events, in input order."""
    events = list(events)
    kept = [e for e in events if is_lore_worthy(e)]
    logger.debug("Lore filter kept %d of %d events", len(kept), len(events))
    return kept
