"""Scope constructors: wrap attributes in pseudo, media, container or ancestor scopes."""

from __future__ import annotations

from weft.config import DEFAULT_CONFIG, Breakpoint, WeftConfig
from weft.style.attribute import Attribute, declare, fold_attributes
from weft.style.query import (
    ColorScheme,
    max_width,
    min_width,
    prefers_color_scheme,
    prefers_reduced_motion,
)
from weft.style.rule import Rule
from weft.values import Length, px

__all__ = [
    "pseudo",
    "hover",
    "focus",
    "focus_visible",
    "active",
    "disabled",
    "media",
    "container",
    "ancestor",
    "group",
    "group_class",
    "group_hover",
    "dark",
    "light",
    "reduced_motion",
    "min_width_of",
    "max_width_of",
    "hide_below",
    "show_below",
]


def _scoped(scope_field: str, key: str, attrs: tuple[Attribute, ...]) -> Attribute:
    # Class markers cannot be scoped, so they move up to the root rule.
    inner = fold_attributes(attrs)
    return Attribute(
        Rule(
            extra_classes=inner.collect_extra_classes(),
            **{scope_field: {key: inner.without_extra_classes()}},
        )
    )


def pseudo(name: str, *attrs: Attribute) -> Attribute:
    """Scope *attrs* to ``:name`` (``"hover"``, ``"first-child"``...)."""
    return _scoped("pseudos", name, attrs)


def hover(*attrs: Attribute) -> Attribute:
    return pseudo("hover", *attrs)


def focus(*attrs: Attribute) -> Attribute:
    return pseudo("focus", *attrs)


def focus_visible(*attrs: Attribute) -> Attribute:
    return pseudo("focus-visible", *attrs)


def active(*attrs: Attribute) -> Attribute:
    return pseudo("active", *attrs)


def disabled(*attrs: Attribute) -> Attribute:
    return pseudo("disabled", *attrs)


def media(query: str, *attrs: Attribute) -> Attribute:
    return _scoped("medias", query, attrs)


def container(query: str, *attrs: Attribute) -> Attribute:
    return _scoped("containers", query, attrs)


def ancestor(prefix: str, *attrs: Attribute) -> Attribute:
    """Scope *attrs* under a compound selector prefix, e.g. ``".menu:hover "``."""
    return _scoped("ancestors", prefix, attrs)


def group_class(name: str, config: WeftConfig = DEFAULT_CONFIG) -> str:
    return f"{config.group_prefix}{name}"


def group(name: str, config: WeftConfig = DEFAULT_CONFIG) -> Attribute:
    """Mark the element as group *name* so descendants can react to it."""
    return Attribute(Rule(extra_classes=(group_class(name, config),)))


def group_hover(name: str, *attrs: Attribute, config: WeftConfig = DEFAULT_CONFIG) -> Attribute:
    """Apply *attrs* while an ancestor marked with ``group(name)`` is hovered."""
    return ancestor(f".{group_class(name, config)}:hover ", *attrs)


def dark(*attrs: Attribute) -> Attribute:
    return media(prefers_color_scheme(ColorScheme.DARK), *attrs)


def light(*attrs: Attribute) -> Attribute:
    return media(prefers_color_scheme(ColorScheme.LIGHT), *attrs)


def reduced_motion(*attrs: Attribute) -> Attribute:
    return media(prefers_reduced_motion(), *attrs)


def min_width_of(length: Length | int, *attrs: Attribute) -> Attribute:
    return media(min_width(length), *attrs)


def max_width_of(length: Length | int, *attrs: Attribute) -> Attribute:
    return media(max_width(length), *attrs)


def hide_below(breakpoint: Breakpoint) -> Attribute:
    """Hide the element on viewports narrower than *breakpoint*."""
    return max_width_of(px(breakpoint.px - 1), declare("display", "none"))


def show_below(breakpoint: Breakpoint) -> Attribute:
    """Show the element only on viewports narrower than *breakpoint*."""
    return min_width_of(px(breakpoint.px), declare("display", "none"))
