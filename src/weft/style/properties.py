"""Property attribute constructors.

Each constructor wraps one CSS property (or a shorthand pair) in an
Attribute.  Bare numbers are pixels.  Size-like properties clamp negative
lengths to zero; offsets and margins may be negative.
"""

from __future__ import annotations

from typing import Sequence

from weft.overlay import OverlaySolution
from weft.style.attribute import Attribute, declare
from weft.style.rule import Rule
from weft.values import (
    Color,
    Duration,
    Length,
    as_length,
    clamp_percent,
    clamp_unit,
    font_weight_value,
    format_number,
    px,
)

LengthLike = Length | int | float | str


def _size(value: LengthLike) -> Length:
    return as_length(value).at_least(0)


def _pair(*pairs: tuple[str, str]) -> Attribute:
    return Attribute(Rule.of(*pairs))


# --- layout -------------------------------------------------------------------


def display(value: str) -> Attribute:
    return declare("display", value)


def position(value: str) -> Attribute:
    return declare("position", value)


def top(value: LengthLike) -> Attribute:
    return declare("top", as_length(value))


def right(value: LengthLike) -> Attribute:
    return declare("right", as_length(value))


def bottom(value: LengthLike) -> Attribute:
    return declare("bottom", as_length(value))


def left(value: LengthLike) -> Attribute:
    return declare("left", as_length(value))


def z_index(value: int) -> Attribute:
    return declare("z-index", int(value))


def grid_columns(count: int) -> Attribute:
    """Equal-width grid tracks; at least one column."""
    return declare("grid-template-columns", f"repeat({max(1, int(count))},minmax(0,1fr))")


def overlay_position(solution: OverlaySolution) -> Attribute:
    """Absolutely position an element at an overlay solution's top-left corner."""
    return _pair(
        ("position", "absolute"),
        ("left", str(px(solution.x))),
        ("top", str(px(solution.y))),
    )


# --- sizing -------------------------------------------------------------------


def width(value: LengthLike) -> Attribute:
    return declare("width", _size(value))


def height(value: LengthLike) -> Attribute:
    return declare("height", _size(value))


def min_w(value: LengthLike) -> Attribute:
    return declare("min-width", _size(value))


def max_w(value: LengthLike) -> Attribute:
    return declare("max-width", _size(value))


def min_h(value: LengthLike) -> Attribute:
    return declare("min-height", _size(value))


def max_h(value: LengthLike) -> Attribute:
    return declare("max-height", _size(value))


# --- spacing ------------------------------------------------------------------


def padding(value: LengthLike) -> Attribute:
    return declare("padding", _size(value))


def padding_x(value: LengthLike) -> Attribute:
    v = str(_size(value))
    return _pair(("padding-left", v), ("padding-right", v))


def padding_y(value: LengthLike) -> Attribute:
    v = str(_size(value))
    return _pair(("padding-top", v), ("padding-bottom", v))


def margin(value: LengthLike) -> Attribute:
    return declare("margin", as_length(value))


def margin_x(value: LengthLike) -> Attribute:
    v = str(as_length(value))
    return _pair(("margin-left", v), ("margin-right", v))


def margin_y(value: LengthLike) -> Attribute:
    v = str(as_length(value))
    return _pair(("margin-top", v), ("margin-bottom", v))


def gap(value: LengthLike) -> Attribute:
    return declare("gap", _size(value))


# --- paint --------------------------------------------------------------------


def color(value: Color) -> Attribute:
    return declare("color", value)


def background(value: Color) -> Attribute:
    return declare("background", value)


def background_gradient(angle_deg: float, stops: Sequence[tuple[Color, float]]) -> Attribute:
    """``linear-gradient`` with stop positions clamped to [0, 100] percent."""
    rendered = ",".join(f"{c} {format_number(clamp_percent(at))}%" for c, at in stops)
    return declare("background", f"linear-gradient({format_number(angle_deg)}deg,{rendered})")


def alpha(opacity: float) -> Attribute:
    """Element opacity, clamped to [0, 1]."""
    return declare("opacity", format_number(clamp_unit(opacity)))


def border_radius(value: LengthLike) -> Attribute:
    return declare("border-radius", _size(value))


def cursor(value: str) -> Attribute:
    return declare("cursor", value)


# --- type ---------------------------------------------------------------------


def font_size(value: LengthLike) -> Attribute:
    return declare("font-size", _size(value))


def font_weight(weight: int) -> Attribute:
    return declare("font-weight", font_weight_value(weight))


def line_height(value: float | Length) -> Attribute:
    if isinstance(value, Length):
        return declare("line-height", value.at_least(0))
    return declare("line-height", format_number(max(0, value)))


# --- motion -------------------------------------------------------------------


def transition(properties: str, duration: Duration, easing: str = "ease") -> Attribute:
    return declare("transition", f"{properties} {duration} {easing}")
