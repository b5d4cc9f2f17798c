"""Event ingestion: turns raw event records into validated HistoricalEvents.

Any record that fails validation aborts the whole batch with a
MalformedEventError naming the record, the field and the offending value, so
bad data gets fixed upstream instead of silently disappearing from the
chronicle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from living_chronicle.models import HistoricalEvent

logger = logging.getLogger(__name__)


class MalformedEventError(ValueError):
    """Raised when an event record (or the civilization name) is invalid."""

    def __init__(self, event_id: str | None, field: str, value: Any, reason: str = "") -> None:
        self.event_id = event_id
        self.field = field
        self.value = value
        self.reason = reason
        where = f"event {event_id!r}" if event_id is not None else "chronicle input"
        message = f"Malformed {where}: field {field!r} has invalid value {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_id": self.event_id,
            "field": self.field,
            "value": self.value,
            "reason": self.reason,
        }


def parse_event(record: HistoricalEvent | Mapping[str, Any]) -> HistoricalEvent:
    """Validate one record. Already-built HistoricalEvents pass through."""
    if isinstance(record, HistoricalEvent):
        return record
    if not isinstance(record, Mapping):
        logger.warning("Rejected event record %r: not an object", record)
        raise MalformedEventError(None, "<record>", record, "event record must be an object")
    event_id = record.get("id")
    try:
        return HistoricalEvent.model_validate(dict(record))
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "<record>"
        value = error.get("input")
        logger.warning("Rejected event %r: %s=%r (%s)", event_id, field, value, error["msg"])
        raise MalformedEventError(
            str(event_id) if event_id is not None else None, field, value, error["msg"]
        ) from e


def parse_events(records: Iterable[HistoricalEvent | Mapping[str, Any]]) -> list[HistoricalEvent]:
    """Validate a batch of records, stopping at the first malformed one."""
    return [parse_event(record) for record in records]


def require_civ_name(civ_name: str | None) -> str:
    if civ_name is None or not civ_name.strip():
        raise MalformedEventError(None, "civ_name", civ_name, "civilization name must not be empty")
    return civ_name
