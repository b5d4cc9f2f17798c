"""Caller-owned memo of compiled chronicles.

Compilation is reproducible, so a chronicle can be reused for as long as the
civilization's name and event records are unchanged. Entries are keyed by
(civ_id, fingerprint) where the fingerprint hashes the canonical JSON of the
inputs; editing any event produces a new key and the stale entry is dropped.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from living_chronicle.models import CompiledChronicle, HistoricalEvent

logger = logging.getLogger(__name__)


def fingerprint(civ_name: str, records: Iterable[HistoricalEvent | Mapping[str, Any]]) -> str:
    """Order-independent content hash of a civilization's compile inputs."""
    canonical = sorted(
        json.dumps(
            r.model_dump(mode="json") if isinstance(r, HistoricalEvent)
            else dict(r) if isinstance(r, Mapping) else r,
            sort_keys=True,
            default=str,
        )
        for r in records
    )
    payload = json.dumps({"name": civ_name, "events": canonical}, sort_keys=True)
    return hashlib.sha256(payload.encode()).hexdigest()


class ChronicleCache:
    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, CompiledChronicle]] = {}

    def get(self, civ_id: str, key: str) -> CompiledChronicle | None:
        entry = self._entries.get(civ_id)
        if entry is None or entry[0] != key:
            return None
        return entry[1]

    def put(self, civ_id: str, key: str, chronicle: CompiledChronicle) -> None:
        self._entries[civ_id] = (key, chronicle)

    def get_or_compile(
        self, civ_id: str, key: str, compile_fn: Callable[[], CompiledChronicle]
    ) -> CompiledChronicle:
        cached = self.get(civ_id, key)
        if cached is not None:
            logger.debug("chronicle cache hit civ=%s", civ_id)
            return cached
        chronicle = compile_fn()
        self.put(civ_id, key, chronicle)
        return chronicle

    def invalidate(self, civ_id: str) -> None:
        self._entries.pop(civ_id, None)

    def __len__(self) -> int:
        return len(self._entries)
