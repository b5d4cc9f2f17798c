"""Handlebars rendering for narrative phrasings.

Every fixed phrasing in the pipeline is a Handlebars template. Parameters use
triple braces ({{{civ}}}) because the engine emits plain text, never markup,
so names like "Tal'Mor" must come through unescaped.
"""

from collections.abc import Callable
from typing import Any

import pybars

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class TemplateError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


def render_template(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise TemplateError(f"Template error: {e}") from e
