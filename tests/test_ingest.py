"""Tests for event ingestion and MalformedEventError context."""

import pytest

from living_chronicle.ingest import MalformedEventError, parse_event, parse_events, require_civ_name
from living_chronicle.models import HistoricalEvent

GOOD = {"id": "e1", "year": 5, "type": "Cultural", "category": "Golden", "significance": 1.0}


def test_parse_valid_record():
    event = parse_event(GOOD)
    assert isinstance(event, HistoricalEvent)
    assert event.category == "Golden"


def test_existing_event_passes_through():
    event = HistoricalEvent(**GOOD)
    assert parse_event(event) is event


def test_negative_significance_identifies_record():
    with pytest.raises(MalformedEventError) as exc:
        parse_event({**GOOD, "id": "bad-7", "significance": -2})
    err = exc.value
    assert err.event_id == "bad-7"
    assert err.field == "significance"
    assert err.value == -2
    assert "bad-7" in str(err)


def test_unknown_type_identifies_field():
    with pytest.raises(MalformedEventError) as exc:
        parse_event({**GOOD, "type": "Sporting"})
    assert exc.value.field == "type"
    assert exc.value.value == "Sporting"


def test_unknown_category_identifies_field():
    with pytest.raises(MalformedEventError) as exc:
        parse_event({**GOOD, "category": "Gossip"})
    assert exc.value.field == "category"


def test_malformed_error_is_value_error():
    with pytest.raises(ValueError):
        parse_event({**GOOD, "significance": -1})


def test_batch_aborts_on_first_malformed_record():
    records = [GOOD, {**GOOD, "id": "e2", "category": "Nope"}, {**GOOD, "id": "e3"}]
    with pytest.raises(MalformedEventError) as exc:
        parse_events(records)
    assert exc.value.event_id == "e2"


def test_batch_preserves_order():
    records = [{**GOOD, "id": "b"}, {**GOOD, "id": "a"}]
    assert [e.id for e in parse_events(records)] == ["b", "a"]


def test_to_dict():
    err = MalformedEventError("e9", "type", "Nope", "bad literal")
    assert err.to_dict() == {"event_id": "e9", "field": "type", "value": "Nope", "reason": "bad literal"}


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_civ_name_rejected(name):
    with pytest.raises(MalformedEventError) as exc:
        require_civ_name(name)
    assert exc.value.field == "civ_name"
    assert exc.value.event_id is None


def test_civ_name_accepted():
    assert require_civ_name("Valdoria") == "Valdoria"


@pytest.mark.parametrize("record", [None, 7, "e1", ["e1", 5]])
def test_non_object_record_rejected(record):
    with pytest.raises(MalformedEventError) as exc:
        parse_event(record)
    assert exc.value.field == "<record>"
    assert exc.value.value == record
    assert exc.value.event_id is None


def test_batch_with_null_record_aborts():
    with pytest.raises(MalformedEventError):
        parse_events([GOOD, None])
