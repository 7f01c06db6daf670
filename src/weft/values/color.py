"""CSS color values."""

from __future__ import annotations

from dataclasses import dataclass

from weft.values.numbers import clamp, clamp_unit, format_number

__all__ = [
    "Color",
    "hex_color",
    "rgb",
    "rgba",
    "named_color",
    "transparent",
    "current_color",
]


@dataclass(frozen=True)
class Color:
    """A rendered CSS color.

    The dataclass constructor is internal; build colors with :func:`hex_color`,
    :func:`rgb` and the other module constructors.
    """

    _css: str

    @property
    def css(self) -> str:
        return self._css

    def __str__(self) -> str:
        return self._css


def _channel(value: int) -> str:
    return str(int(clamp(value, 0, 255)))


def hex_color(value: str) -> Color:
    """``"#FFAA00"`` or ``"ffaa00"`` -> ``#ffaa00``."""
    return Color("#" + value.strip().lstrip("#").lower())


def rgb(r: int, g: int, b: int) -> Color:
    return Color(f"rgb({_channel(r)},{_channel(g)},{_channel(b)})")


def rgba(r: int, g: int, b: int, alpha: float) -> Color:
    return Color(
        f"rgba({_channel(r)},{_channel(g)},{_channel(b)},{format_number(clamp_unit(alpha))})"
    )


def named_color(name: str) -> Color:
    return Color(name.strip().lower())


def transparent() -> Color:
    return Color("transparent")


def current_color() -> Color:
    return Color("currentColor")
