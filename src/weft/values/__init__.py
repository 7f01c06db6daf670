"""Opaque CSS value builders. Out-of-range inputs are clamped, never rejected."""

from weft.values.color import (
    Color,
    current_color,
    hex_color,
    named_color,
    rgb,
    rgba,
    transparent,
)
from weft.values.duration import Duration, ms, seconds
from weft.values.length import Length, as_length, auto, em, percent, px, rem, vh, vw
from weft.values.numbers import (
    clamp,
    clamp_percent,
    clamp_unit,
    font_weight_value,
    format_number,
)

__all__ = [
    # length
    "Length",
    "px",
    "rem",
    "em",
    "percent",
    "vw",
    "vh",
    "auto",
    "as_length",
    # color
    "Color",
    "hex_color",
    "rgb",
    "rgba",
    "named_color",
    "transparent",
    "current_color",
    # duration
    "Duration",
    "ms",
    "seconds",
    # numbers
    "clamp",
    "clamp_unit",
    "clamp_percent",
    "format_number",
    "font_weight_value",
]
