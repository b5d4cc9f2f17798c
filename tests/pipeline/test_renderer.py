"""Tests for event narration."""

import pytest

from living_chronicle.models import CausalLink
from living_chronicle.pipeline import render_event
from living_chronicle.pipeline.renderer import (
    CATEGORY_CONTEXTS,
    CONSEQUENCES,
    DEFAULT_CONSEQUENCES,
    GENERIC_CONTEXTS,
    RECORD_PHRASE,
    TIME_TRANSITIONS,
    TYPE_CONTEXTS,
    context_family,
    opening,
    record_clause,
)


def _link(text="The strategic lessons of Valdoria endured."):
    return CausalLink(from_event_id="a", to_event_id="b", link_type="MilitaryEscalation",
                      years_apart=4, text=text)


def test_chapter_opening_names_year(make_event):
    assert opening(make_event(year=14), True) == "In the year 14, "


def test_transition_when_not_opening(make_event):
    assert opening(make_event(year=14), False) in TIME_TRANSITIONS


def test_render_is_deterministic(make_event):
    event = make_event(year=14, description="Spearmen drove the clans back.")
    assert render_event(event, True, "Valdoria") == render_event(event, True, "Valdoria")


def test_render_includes_civ_and_description(make_event):
    event = make_event(year=14, significance=1.0, description="Spearmen Drove The Clans Back.")
    text = render_event(event, True, "Valdoria")
    assert text.startswith("In the year 14, ")
    assert "Valdoria" in text
    assert f"{RECORD_PHRASE} spearmen drove the clans back." in text


def test_record_phrase_suppressed_after_link(make_event):
    event = make_event(year=18, significance=1.0, description="the clans were broken at the ford")
    text = render_event(event, False, "Valdoria", preceding_link=_link())
    assert RECORD_PHRASE not in text
    assert "The clans were broken at the ford." in text


def test_empty_link_does_not_suppress_record_phrase(make_event):
    event = make_event(year=18, significance=1.0)
    text = render_event(event, False, "Valdoria", preceding_link=_link(text=""))
    assert RECORD_PHRASE in text


def test_record_falls_back_to_title(make_event):
    event = make_event(title="The Salt Treaty", description="")
    assert record_clause(event, False) == f"{RECORD_PHRASE} the salt treaty."


def test_consequence_only_above_threshold(make_event):
    low = make_event(year=5, type="Military", significance=2.0)
    high = make_event(year=5, type="Military", significance=2.1)
    assert not any(c in render_event(low, True, "Valdoria") for c in CONSEQUENCES["Military"])
    assert any(c in render_event(high, True, "Valdoria") for c in CONSEQUENCES["Military"])


def test_consequence_default_pool(make_event):
    event = make_event(type="Political", category="Revolution", significance=3.2)
    assert any(c in render_event(event, True, "Valdoria") for c in DEFAULT_CONSEQUENCES)


@pytest.mark.parametrize(("event_type", "category", "expected"), [
    ("Military", "Conflict", TYPE_CONTEXTS[("Military", "Conflict")]),
    ("Military", "Coalition", TYPE_CONTEXTS[("Military", "Coalition")]),
    ("Social", "Collapse", TYPE_CONTEXTS[("Social", "Collapse")]),
    ("Social", "Growth", TYPE_CONTEXTS[("Social", None)]),
    ("Natural", "Disaster", CATEGORY_CONTEXTS["Disaster"]),
    ("Religious", "Spiritual", CATEGORY_CONTEXTS["Spiritual"]),
    ("Religious", "Growth", TYPE_CONTEXTS[("Religious", None)]),
    ("Infrastructure", "Growth", GENERIC_CONTEXTS),
])
def test_context_family_lookup(make_event, event_type, category, expected):
    assert context_family(make_event(type=event_type, category=category)) == expected


def test_uncovered_combination_still_renders(make_event):
    event = make_event(type="Agricultural", category="Trade", significance=0.5)
    text = render_event(event, False, "Thalor")
    assert "Thalor" in text


def test_context_families_mention_civ():
    families = [*TYPE_CONTEXTS.values(), *CATEGORY_CONTEXTS.values(), GENERIC_CONTEXTS]
    for family in families:
        assert 4 <= len(family) <= 5
        assert all("{{{civ}}}" in phrasing for phrasing in family)
        assert not any(phrasing.startswith("{{{civ}}}") for phrasing in family)
