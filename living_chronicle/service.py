"""Command surface: compile chronicles for stored civilizations.

ChronicleService reads a civilization and its event records from Storage,
then hands the snapshot to the pipeline. Compilation itself does no I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from living_chronicle.cache import ChronicleCache, fingerprint
from living_chronicle.config import EngineConfig, load_config
from living_chronicle.models import CompiledChronicle
from living_chronicle.pipeline import compile_chronicle
from living_chronicle.storage import Storage

logger = logging.getLogger(__name__)


class CivilizationNotFound(KeyError):
    """Raised when a civilization id has no stored metadata."""

    def __init__(self, civ_id: str) -> None:
        self.civ_id = civ_id
        super().__init__(civ_id)

    def __str__(self) -> str:
        return f"Civilization not found: {self.civ_id!r}"


class ChronicleService:
    """Compiles chronicles from storage, optionally through a caller-owned cache.

    Args:
        storage: Event source to read civilizations and events from.
        cache:   Memo of compiled chronicles; None disables caching.
        config:  Engine tunables. Defaults to the storage's config.json.
    """

    def __init__(
        self,
        storage: Storage,
        cache: ChronicleCache | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._storage = storage
        self._cache = cache
        self._config = config if config is not None else load_config(storage.config_path)

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def config(self) -> EngineConfig:
        return self._config

    def compile_chronicle(self, civ_id: str) -> CompiledChronicle:
        civ = self._storage.get_civilization(civ_id)
        if civ is None:
            raise CivilizationNotFound(civ_id)
        records = self._storage.get_event_records(civ_id)

        def _compile() -> CompiledChronicle:
            return compile_chronicle(civ.id, civ.name, records, self._config)

        if self._cache is None:
            return _compile()
        return self._cache.get_or_compile(civ_id, fingerprint(civ.name, records), _compile)

    def compile_all(self, civ_ids: Iterable[str] | None = None) -> list[CompiledChronicle]:
        """Compile several civilizations; all stored ones when civ_ids is None.

        Each compilation is independent. The first malformed civilization
        aborts the batch with its MalformedEventError.
        """
        if civ_ids is None:
            civ_ids = [civ.id for civ in self._storage.list_civilizations()]
        chronicles = [self.compile_chronicle(civ_id) for civ_id in civ_ids]
        logger.info("Compiled %d chronicles", len(chronicles))
        return chronicles
