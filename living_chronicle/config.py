"""Engine configuration (chapter segmentation and causal-link tunables).

Stored as config.json in the data directory. Loading starts from the
defaults and merges stored values over them key by key. Unknown keys in
the stored file are ignored so old files keep loading.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class EngineConfig(BaseModel):
    chapter_max_span: int = Field(25, ge=0)  # years since chapter start
    chapter_max_events: int = Field(6, ge=1)
    chapter_break_significance: float = 4.0
    causal_window: int = Field(20, ge=0)  # max years between linked events
    direct_consequence_window: int = Field(5, ge=0)
    direct_consequence_significance: float = 3.0
    major_event_significance: float = 4.0


DEFAULT_CONFIG = EngineConfig()


def load_config(path: Path | None) -> EngineConfig:
    """Read config.json, returning defaults merged with stored values.

    An unreadable or invalid file is logged and replaced by the defaults so
    the app still starts; PATCH /api/settings writes a valid file back.
    """
    if path is None or not path.is_file():
        return DEFAULT_CONFIG
    try:
        stored = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return DEFAULT_CONFIG
    if not isinstance(stored, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return DEFAULT_CONFIG
    known = {k: v for k, v in stored.items() if k in EngineConfig.model_fields}
    ignored = sorted(set(stored) - set(known))
    if ignored:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(ignored))
    try:
        return EngineConfig.model_validate({**DEFAULT_CONFIG.model_dump(), **known})
    except ValidationError as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return DEFAULT_CONFIG


def update_config(path: Path, fields: dict[str, Any]) -> EngineConfig:
    """Merge fields into config and persist. Returns the full config."""
    known = {k: v for k, v in fields.items() if k in EngineConfig.model_fields}
    merged = EngineConfig.model_validate({**load_config(path).model_dump(), **known})
    path.write_text(merged.model_dump_json(indent=2))
    return merged
