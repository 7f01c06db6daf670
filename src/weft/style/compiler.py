"""Class compiler and stylesheet renderer.

A class name is a pure function of the normalized rule's serialized text:
the rule is rendered against a neutral placeholder selector and hashed with
32-bit FNV-1a.  Extra classes are not part of the hash input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from weft.config import DEFAULT_CONFIG, WeftConfig
from weft.style.attribute import Attribute, fold_attributes
from weft.style.rule import Rule, normalize_rule
from weft.style.serialize import serialize_rule

__all__ = [
    "FNV_OFFSET_BASIS",
    "FNV_PRIME",
    "StyleClass",
    "fnv1a_32",
    "class_name_for",
    "compile_class",
    "compile_rule",
    "render_stylesheet",
]

logger = logging.getLogger(__name__)

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a hash of *data*."""
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


@dataclass(frozen=True)
class StyleClass:
    """A compiled style unit: generated name, normalized rule, extra classes."""

    name: str
    rule: Rule
    extra_classes: tuple[str, ...] = ()

    @property
    def selector(self) -> str:
        return f".{self.name}"

    @property
    def class_names(self) -> tuple[str, ...]:
        """The generated name followed by the static extra classes."""
        return (self.name, *self.extra_classes)

    @property
    def class_attr(self) -> str:
        """Value for an HTML ``class`` attribute."""
        return " ".join(self.class_names)

    def to_css(self) -> str:
        return serialize_rule(self.selector, self.rule)


def class_name_for(rule: Rule, config: WeftConfig = DEFAULT_CONFIG) -> str:
    """Hash an already-normalized *rule* into ``wf-xxxxxxxx``."""
    serialized = serialize_rule(config.hash_selector, rule)
    return f"{config.class_prefix}{fnv1a_32(serialized.encode('utf-8')):08x}"


def compile_rule(rule: Rule, config: WeftConfig = DEFAULT_CONFIG) -> StyleClass:
    """Normalize *rule* and name it."""
    normalized = normalize_rule(rule)
    name = class_name_for(normalized, config)
    logger.debug("compiled %s (%d declarations)", name, len(normalized.declarations))
    return StyleClass(name=name, rule=normalized, extra_classes=normalized.extra_classes)


def compile_class(
    attrs: Iterable[Attribute], config: WeftConfig = DEFAULT_CONFIG
) -> StyleClass:
    """Fold *attrs* into one rule, normalize it, and name it by content."""
    return compile_rule(fold_attributes(attrs), config)


def render_stylesheet(classes: Iterable[StyleClass]) -> str:
    """Render each distinct class once, in ascending name order."""
    parts: list[str] = []
    previous: str | None = None
    for cls in sorted(classes, key=lambda c: c.name):
        if cls.name == previous:
            continue
        previous = cls.name
        parts.append(cls.to_css())
    return "".join(parts)
