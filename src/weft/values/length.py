"""CSS length values."""

from __future__ import annotations

from dataclasses import dataclass

from weft.values.numbers import format_number

__all__ = ["Length", "px", "rem", "em", "percent", "vw", "vh", "auto", "as_length"]


@dataclass(frozen=True)
class Length:
    """A CSS length token.

    The dataclass constructor is internal; build lengths with :func:`px`,
    :func:`rem` and the other module constructors.
    """

    _amount: float = 0
    _unit: str = "px"
    _keyword: str = ""  # "auto" and friends; overrides amount/unit

    @property
    def amount(self) -> float:
        return self._amount

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def keyword(self) -> str:
        return self._keyword

    def __str__(self) -> str:
        if self._keyword:
            return self._keyword
        return f"{format_number(self._amount)}{self._unit}"

    def at_least(self, minimum: float) -> Length:
        """Return a copy whose amount is no smaller than *minimum*."""
        if self._keyword or self._amount >= minimum:
            return self
        return Length(minimum, self._unit)


def px(amount: float) -> Length:
    return Length(amount, "px")


def rem(amount: float) -> Length:
    return Length(amount, "rem")


def em(amount: float) -> Length:
    return Length(amount, "em")


def percent(amount: float) -> Length:
    return Length(amount, "%")


def vw(amount: float) -> Length:
    return Length(amount, "vw")


def vh(amount: float) -> Length:
    return Length(amount, "vh")


def _keyword(value: str) -> Length:
    return Length(_keyword=value.strip())


def auto() -> Length:
    return _keyword("auto")


def as_length(value: Length | int | float | str) -> Length:
    """Coerce bare numbers to pixels and bare strings to keyword lengths."""
    if isinstance(value, Length):
        return value
    if isinstance(value, str):
        return _keyword(value)
    return px(value)
