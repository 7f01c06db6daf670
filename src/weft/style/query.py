"""Media and container query strings."""

from __future__ import annotations

from enum import Enum

from weft.values import Length, as_length

__all__ = [
    "ColorScheme",
    "min_width",
    "max_width",
    "prefers_reduced_motion",
    "prefers_color_scheme",
    "and_query",
]


class ColorScheme(Enum):
    DARK = "dark"
    LIGHT = "light"


def min_width(length: Length | int) -> str:
    return f"(min-width:{as_length(length)})"


def max_width(length: Length | int) -> str:
    return f"(max-width:{as_length(length)})"


def prefers_reduced_motion() -> str:
    return "(prefers-reduced-motion:reduce)"


def prefers_color_scheme(scheme: ColorScheme) -> str:
    return f"(prefers-color-scheme:{scheme.value})"


def and_query(*queries: str) -> str:
    """Conjunction of queries: ``A and B``."""
    return " and ".join(queries)
