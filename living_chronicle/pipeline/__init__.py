"""Historical narrative synthesis pipeline.

Compiles one civilization's event log into a chronicle:
  1. Lore filter: keep events worth telling (dramatic categories always,
     others by type and significance).
  2. Chapter segmentation: group survivors into year-bounded chapters with
     generated titles; nothing left means one mythological chapter.
  3. Causal links: classify adjacent events of a chapter that lie within
     the causal window and render connective prose for them.
  4. Narration: one paragraph per event from seeded template families.
  5. Mythology: a founding legend for chapters without events.
  6. Compilation: title block, chapters, closings and aggregate metrics.

Every stage is a pure function of its input. Template choices are seeded from
event values (see living_chronicle.seeding), so compiling the same events
twice gives byte-identical text.
"""

from .causal import classify_link, infer_causal_links  # noqa: F401
from .chapters import chapter_title, segment_chapters  # noqa: F401
from .compiler import compile_chronicle  # noqa: F401
from .lore_filter import filter_lore_worthy, is_lore_worthy  # noqa: F401
from .mythology import generate_mythology  # noqa: F401
from .renderer import render_event  # noqa: F401
