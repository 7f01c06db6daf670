"""CSS time values, always rendered in milliseconds."""

from __future__ import annotations

from dataclasses import dataclass

from weft.values.numbers import format_number

__all__ = ["Duration", "ms", "seconds"]


@dataclass(frozen=True)
class Duration:
    milliseconds: float = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "milliseconds", max(0, self.milliseconds))

    def __str__(self) -> str:
        return f"{format_number(self.milliseconds)}ms"


def ms(amount: float) -> Duration:
    return Duration(amount)


def seconds(amount: float) -> Duration:
    return Duration(amount * 1000)
