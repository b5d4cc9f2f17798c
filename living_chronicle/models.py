"""Core domain models.

All pipeline stages and the storage layer operate on these types.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EventType = Literal[
    "Military",
    "Cultural",
    "Religious",
    "Economic",
    "Diplomatic",
    "Social",
    "Political",
    "Technological",
    # narrated through the generic template families
    "Natural",
    "Environmental",
    "Scientific",
    "Artistic",
    "Philosophical",
    "Legal",
    "Infrastructure",
    "Agricultural",
    "Industrial",
    "Commercial",
    "Territorial",
    "Demographic",
]

EventCategory = Literal[
    "Conflict",
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
    "Hero",
    "Decline",
    "Interaction",
    "Growth",
    "Trade",
    "Diplomacy",
    "Expansion",
    "Innovation",
    "Recovery",
    "Natural",
    "Social",
    "Political",
    "Economic",
    "Religious",
    "Cultural",
    "Technological",
    "Military",
]

CausalLinkType = Literal[
    "DirectConsequence",
    "ResourceEffect",
    "PoliticalRipple",
    "CulturalInfluence",
    "MilitaryEscalation",
    "None",
]


class HistoricalEvent(BaseModel):
    """One entry of a civilization's event log, as emitted by the simulation."""

    model_config = ConfigDict(frozen=True)

    id: str
    year: int
    title: str = ""
    description: str = ""
    type: EventType
    category: EventCategory
    significance: float = Field(ge=0)
    location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    civilization_id: str = ""
    related_figures: tuple[str, ...] = ()
    related_civilizations: tuple[str, ...] = ()


class Civilization(BaseModel):
    """Civilization metadata stored next to its event log."""

    id: str
    name: str = Field(min_length=1)
    description: str = ""


class CausalLink(BaseModel):
    """Directional link between two adjacent events of a chapter."""

    model_config = ConfigDict(frozen=True)

    from_event_id: str
    to_event_id: str
    link_type: CausalLinkType
    years_apart: int
    text: str = ""  # empty when link_type is "None"


class Chapter(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    start_year: int
    end_year: int
    events: tuple[HistoricalEvent, ...] = ()
    is_mythological: bool = False
    links: tuple[CausalLink, ...] = ()


class CompiledChronicle(BaseModel):
    """The finished chronicle for one civilization.

    Created fresh for every compilation and never mutated afterwards; the
    consumer decides whether to cache, display or export it.
    """

    model_config = ConfigDict(frozen=True)

    civilization_id: str
    title: str
    subtitle: str
    chapters: tuple[Chapter, ...]
    text: str
    start_year: int
    end_year: int
    total_entries: int
    major_event_count: int
    dramatic_intensity: float
    historical_significance: float
