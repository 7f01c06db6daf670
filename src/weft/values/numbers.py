"""Numeric clamps and number formatting shared by the value builders."""

from __future__ import annotations

__all__ = [
    "clamp",
    "clamp_unit",
    "clamp_percent",
    "format_number",
    "font_weight_value",
]


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into the inclusive range [low, high]."""
    return max(low, min(value, high))


def clamp_unit(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def clamp_percent(value: float) -> float:
    return clamp(value, 0.0, 100.0)


def format_number(value: float) -> str:
    """Render a number the way CSS expects it: no trailing zeros, no exponent.

    >>> format_number(1.0), format_number(0.5), format_number(-2)
    ('1', '0.5', '-2')
    """
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def font_weight_value(weight: int) -> str:
    """A CSS font weight, clamped to [1, 1000]."""
    return str(int(clamp(weight, 1, 1000)))
