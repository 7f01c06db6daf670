"""Geometry primitives: Point, Size, and Rect value types in integer pixels."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Point", "Size", "Rect", "rect_inset"]


@dataclass(frozen=True)
class Point:
    """A pixel position. Coordinates may be negative."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """A pixel extent. Negative dimensions are clamped to zero."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(0, self.width))
        object.__setattr__(self, "height", max(0, self.height))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle anchored at its top-left corner.

    The position may be negative; width and height are clamped to zero.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(0, self.width))
        object.__setattr__(self, "height", max(0, self.height))

    @classmethod
    def from_origin_size(cls, origin: Point, size: Size) -> Rect:
        return cls(origin.x, origin.y, size.width, size.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2

    @property
    def center_y(self) -> int:
        return self.y + self.height // 2

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def inset(self, left: int, top: int, right: int, bottom: int) -> Rect:
        """Return a copy shrunk by the given edge offsets."""
        return rect_inset(self, left, top, right, bottom)


def rect_inset(rect: Rect, left: int, top: int, right: int, bottom: int) -> Rect:
    """Shrink *rect* by per-edge offsets, clamping the result to a non-negative size."""
    return Rect(
        x=rect.x + left,
        y=rect.y + top,
        width=rect.width - left - right,
        height=rect.height - top - bottom,
    )
