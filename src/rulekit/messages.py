"""Message templates with ``{{name}}`` placeholders."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# {{name}}: word characters only, no surrounding whitespace.
_PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")

MISSING_SUBSTITUTION = "undefined"


def interpolate(template: str, subs: Mapping[str, Any]) -> str:
    """Replace every ``{{name}}`` in *template* with ``str(subs[name])``.

    Substitution is a single left-to-right pass, so replacement text is
    never re-scanned for placeholders. Names missing from *subs* render
    as ``undefined``.

    Examples:
        >>> interpolate("must be one of: {{values}}", {"values": "a, b"})
        'must be one of: a, b'
        >>> interpolate("{{nope}}!", {})
        'undefined!'
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in subs:
            return MISSING_SUBSTITUTION
        return str(subs[name])

    return _PLACEHOLDER_PATTERN.sub(_replace, template)
