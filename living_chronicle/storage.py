"""JSON file storage for civilization event logs.

This is the event source the chronicle engine reads from. The simulation (or
the demo loader) writes events here; compilation reads an already-materialized
snapshot and never writes back.

Directory layout:

    {base}/
      config.json             ← engine tunables (see living_chronicle.config)
      civilizations/
        {civ_id}.json         ← Civilization metadata
        {civ_id}/
          events.json         ← raw event records, validated on compilation

Event records are stored and returned as plain dicts. Validation happens when
a chronicle is compiled, so a malformed record surfaces as a
MalformedEventError naming that record rather than a storage failure. An
events.json that is not a JSON list raises MalformedEventError on read.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from living_chronicle.ingest import MalformedEventError
from living_chronicle.models import Civilization, HistoricalEvent

_CIV_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


class Storage:
    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._civ_root = base_path / "civilizations"
        self._civ_root.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Internal path helpers
    # ------------------------------------------------------------------

    def _civ_file(self, civ_id: str) -> Path:
        if not _CIV_ID.match(civ_id):
            raise ValueError(f"Invalid civilization id: {civ_id!r}")
        return self._civ_root / f"{civ_id}.json"

    def _civ_dir(self, civ_id: str) -> Path:
        return self._civ_file(civ_id).with_suffix("")

    def _read_json(self, path: Path) -> Any:
        return json.loads(path.read_text())

    def _write_json(self, path: Path, data: Any) -> None:
        path.write_text(json.dumps(data, indent=2))

    @property
    def config_path(self) -> Path:
        return self._base / "config.json"

    # ------------------------------------------------------------------
    # Civilizations
    # ------------------------------------------------------------------

    def create_civilization(self, civ_id: str, name: str, description: str = "") -> Civilization:
        civ = Civilization(id=civ_id, name=name, description=description)
        self._civ_file(civ_id).write_text(civ.model_dump_json(indent=2))
        self._civ_dir(civ_id).mkdir(exist_ok=True)
        return civ

    def get_civilization(self, civ_id: str) -> Civilization | None:
        if not _CIV_ID.match(civ_id):
            return None
        path = self._civ_file(civ_id)
        if not path.exists():
            return None
        return Civilization.model_validate_json(path.read_text())

    def list_civilizations(self) -> list[Civilization]:
        return [
            Civilization.model_validate_json(path.read_text())
            for path in sorted(self._civ_root.glob("*.json"))
        ]

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def get_event_records(self, civ_id: str) -> list[Any]:
        """Raw records as stored. Entries are validated on compilation."""
        path = self._civ_dir(civ_id) / "events.json"
        if not path.exists():
            return []
        try:
            records = self._read_json(path)
        except json.JSONDecodeError as e:
            raise MalformedEventError(None, "events.json", str(path), f"not valid JSON: {e}") from e
        if not isinstance(records, list):
            raise MalformedEventError(None, "events.json", records, "event log must be a list of records")
        return records

    def append_events(
        self, civ_id: str, events: list[HistoricalEvent | dict[str, Any]]
    ) -> None:
        """Upsert events by id; existing ids are overwritten in place."""
        records = self.get_event_records(civ_id)
        index = {
            r["id"]: i for i, r in enumerate(records)
            if isinstance(r, dict) and isinstance(r.get("id"), str)
        }
        for event in events:
            record = event.model_dump(mode="json") if isinstance(event, HistoricalEvent) else dict(event)
            event_id = record.get("id")
            if not isinstance(event_id, str):
                raise ValueError(f"Event id must be a string, got {event_id!r}")
            if not record.get("civilization_id"):
                record["civilization_id"] = civ_id
            if event_id in index:
                records[index[event_id]] = record
            else:
                index[event_id] = len(records)
                records.append(record)
        self._civ_dir(civ_id).mkdir(parents=True, exist_ok=True)
        self._write_json(self._civ_dir(civ_id) / "events.json", records)
