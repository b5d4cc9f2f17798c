"""Causal link inference between adjacent events of one chapter.

Only neighbours in the chapter's year-sorted sequence are considered, and
only when they lie at most causal_window years apart. The link type comes
from a rule table on (from.type, to.type); without a rule, a significant
event followed closely by another is a DirectConsequence, anything else is
"None" and renders as empty text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from living_chronicle.config import DEFAULT_CONFIG, EngineConfig
from living_chronicle.models import CausalLink, CausalLinkType, HistoricalEvent
from living_chronicle.seeding import derive_seed, pick
from living_chronicle.templates import render_template

logger = logging.getLogger(__name__)

LINK_RULES: dict[tuple[str, str], CausalLinkType] = {
    ("Military", "Military"): "MilitaryEscalation",
    ("Economic", "Military"): "ResourceEffect",
    ("Economic", "Diplomatic"): "ResourceEffect",
    ("Diplomatic", "Military"): "PoliticalRipple",
    ("Cultural", "Social"): "CulturalInfluence",
}

LINK_TEMPLATES: dict[CausalLinkType, tuple[str, ...]] = {
    "DirectConsequence": (
        "The reverberations from these events continued to shape {{{civ}}}'s destiny. "
        "Within {{span}}, the consequences would become clear.",
        "This pivotal moment set in motion a chain of events that would unfold within {{span}}, "
        "fundamentally altering the course of {{{civ}}}.",
        "The decisions made during this time created ripple effects that reached every corner "
        "of {{{civ}}}, culminating in further developments within {{span}}.",
    ),
    "ResourceEffect": (
        "The economic shifts from this period strained {{{civ}}}'s resources and treasury. "
        "Within {{span}}, these pressures would force difficult choices about military "
        "and diplomatic priorities.",
        "Resource allocation changes following these events affected {{{civ}}}'s ability to "
        "maintain its previous policies. The economic consequences became apparent "
        "within {{span}}.",
        "Trade disruptions and resource shortages created by these developments weighed on "
        "{{{civ}}}'s strategic decisions, and within {{span}} they led to new approaches.",
    ),
    "PoliticalRipple": (
        "The diplomatic ramifications of these negotiations created new tensions and "
        "opportunities for {{{civ}}}. Within {{span}}, these political changes would "
        "manifest in more dramatic ways.",
        "Alliance structures around {{{civ}}} shifted as a result of these diplomatic efforts. "
        "The full impact would become clear within {{span}}.",
        "Trust and reputation effects from these diplomatic developments influenced {{{civ}}}'s "
        "relationships with neighbors, and within {{span}} the consequences were significant.",
    ),
    "CulturalInfluence": (
        "The cultural transformations of this era gradually reshaped {{{civ}}}'s social fabric. "
        "Within {{span}}, these changes would influence how society responded to new "
        "challenges.",
        "New ideas and artistic movements spread throughout {{{civ}}}, changing how people viewed "
        "themselves and their place in the world. The social implications became evident "
        "within {{span}}.",
        "Educational and intellectual developments from this period created a new generation of "
        "leaders and thinkers in {{{civ}}}. Their influence would be felt within {{span}}.",
    ),
    "MilitaryEscalation": (
        "The military actions of this period established new patterns of conflict and defense "
        "for {{{civ}}}. Within {{span}}, these precedents would influence strategic "
        "decisions.",
        "Veterans from these conflicts brought hard-won experience to {{{civ}}}'s military "
        "leadership. Their influence would shape military doctrine and tactics within {{span}}.",
        "The strategic lessons learned from these battles became part of {{{civ}}}'s military "
        "tradition. Within {{span}}, this knowledge would prove crucial in new conflicts.",
    ),
}


def span_phrase(years_apart: int) -> str:
    """Duration between linked events, worded to follow "within"."""
    if years_apart == 0:
        return "the same year"
    if years_apart == 1:
        return "a single year"
    return f"{years_apart} years"


def classify_link(
    earlier: HistoricalEvent,
    later: HistoricalEvent,
    config: EngineConfig = DEFAULT_CONFIG,
) -> CausalLinkType:
    rule = LINK_RULES.get((earlier.type, later.type))
    if rule is not None:
        return rule
    years_apart = later.year - earlier.year
    if (
        earlier.significance > config.direct_consequence_significance
        and years_apart <= config.direct_consequence_window
    ):
        return "DirectConsequence"
    return "None"


def link_text(link_type: CausalLinkType, earlier: HistoricalEvent, later: HistoricalEvent, civ_name: str) -> str:
    templates = LINK_TEMPLATES.get(link_type)
    if not templates:
        return ""
    seed = derive_seed(earlier.year + later.year, 0.0, f"link:{link_type}")
    return render_template(
        pick(templates, seed),
        {"civ": civ_name, "span": span_phrase(later.year - earlier.year)},
    )


def infer_causal_links(
    chapter_events: Sequence[HistoricalEvent],
    civ_name: str,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[CausalLink]:
    """Links for each adjacent pair of year-sorted chapter events.

    Pairs further apart than the causal window get no link at all.
    """
    links: list[CausalLink] = []
    for earlier, later in zip(chapter_events, chapter_events[1:]):
        years_apart = later.year - earlier.year
        if years_apart > config.causal_window:
            continue
        link_type = classify_link(earlier, later, config)
        links.append(CausalLink(
            from_event_id=earlier.id,
            to_event_id=later.id,
            link_type=link_type,
            years_apart=years_apart,
            text=link_text(link_type, earlier, later, civ_name),
        ))
    logger.debug("Inferred %d causal links over %d events", len(links), len(chapter_events))
    return links
