"""Load named style classes from a JSON document.

Format (every key optional, scopes nest recursively)::

    {
      "card": {
        "declarations": [["padding", "16px"], ["display", "flex"]],
        "pseudos": {"hover": {"declarations": [["opacity", "0.9"]]}},
        "medias": {"(max-width:767px)": {"declarations": [["padding", "8px"]]}},
        "containers": {},
        "ancestors": {".weft-group-menu:hover ": {"declarations": [["color", "red"]]}},
        "extra_classes": ["weft-group-card"]
      }
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from weft.config import DEFAULT_CONFIG, WeftConfig
from weft.errors import StyleSourceError
from weft.style.compiler import StyleClass, compile_rule
from weft.style.rule import SCOPE_FIELDS, Rule

__all__ = ["parse_style_source", "load_style_source"]

_ALLOWED_KEYS = frozenset({"declarations", "extra_classes", *SCOPE_FIELDS})


def _check_rule(data: Any, location: str) -> None:
    """Raise StyleSourceError unless *data* has the shape Rule.from_dict expects."""
    if not isinstance(data, dict):
        raise StyleSourceError("rule must be an object", location)
    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise StyleSourceError(f"unknown key(s): {', '.join(sorted(unknown))}", location)

    declarations = data.get("declarations", [])
    if not isinstance(declarations, list):
        raise StyleSourceError("declarations must be a list", location)
    for i, pair in enumerate(declarations):
        if (
            not isinstance(pair, list)
            or len(pair) != 2
            or not all(
                isinstance(part, (str, int, float)) and not isinstance(part, bool)
                for part in pair
            )
        ):
            raise StyleSourceError(
                "declaration must be a [property, value] pair", f"{location}.declarations[{i}]"
            )

    extra = data.get("extra_classes", [])
    if not isinstance(extra, list) or not all(isinstance(c, str) for c in extra):
        raise StyleSourceError("extra_classes must be a list of strings", location)

    for name in SCOPE_FIELDS:
        scope = data.get(name, {})
        if not isinstance(scope, dict):
            raise StyleSourceError(f"{name} must be an object", location)
        for key, sub in scope.items():
            _check_rule(sub, f"{location}.{name}[{key!r}]")


def parse_style_source(
    text: str, config: WeftConfig = DEFAULT_CONFIG
) -> dict[str, StyleClass]:
    """Parse a JSON style document into compiled classes keyed by label."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StyleSourceError(f"invalid JSON: {exc.msg}", f"line {exc.lineno}") from exc
    if not isinstance(document, dict):
        raise StyleSourceError("document must map labels to rules")

    classes: dict[str, StyleClass] = {}
    for label, data in document.items():
        _check_rule(data, label)
        classes[label] = compile_rule(Rule.from_dict(data), config)
    return classes


def load_style_source(path: Path, config: WeftConfig = DEFAULT_CONFIG) -> dict[str, StyleClass]:
    """Read and parse the style document at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StyleSourceError(str(exc), str(path)) from exc
    return parse_style_source(text, config)
