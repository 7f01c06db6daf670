"""Overlay placement model: sides, alignments, problem and solution values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from weft.geometry import Rect, Size


class OverlaySide(Enum):
    """Which side of the anchor the overlay sits on."""

    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        """True for ABOVE/BELOW, where the overlay slides along the x axis."""
        return self in (OverlaySide.ABOVE, OverlaySide.BELOW)


class OverlayAlign(Enum):
    """How the overlay lines up with the anchor on the cross axis."""

    START = "start"
    CENTER = "center"
    END = "end"


DEFAULT_SIDES: tuple[OverlaySide, ...] = (
    OverlaySide.BELOW,
    OverlaySide.ABOVE,
    OverlaySide.RIGHT,
    OverlaySide.LEFT,
)
DEFAULT_ALIGNS: tuple[OverlayAlign, ...] = (
    OverlayAlign.CENTER,
    OverlayAlign.START,
    OverlayAlign.END,
)


@dataclass(frozen=True)
class OverlayPlacement:
    side: OverlaySide
    align: OverlayAlign

    def __str__(self) -> str:
        return f"{self.side.value}-{self.align.value}"


@dataclass(frozen=True)
class ArrowSpec:
    """Arrow geometry. ``size_px`` is carried for renderers; placement ignores it."""

    size_px: int = 0
    edge_padding_px: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "size_px", max(0, self.size_px))
        object.__setattr__(self, "edge_padding_px", max(0, self.edge_padding_px))


@dataclass(frozen=True)
class OverlayProblem:
    """Everything the solver needs to place one overlay.

    Attributes:
        anchor: The rectangle the overlay attaches to.
        overlay: The overlay's extent.
        viewport: The visible region.
        sides: Candidate sides in preference order. Empty means the default order.
        aligns: Candidate alignments in preference order. Empty means the default order.
        offset: Gap between anchor and overlay, clamped to >= 0.
        padding: Safe margin inside the viewport, clamped to >= 0.
        arrow: Optional arrow; when set the solution carries an arrow offset.
    """

    anchor: Rect
    overlay: Size
    viewport: Rect
    sides: Sequence[OverlaySide] = DEFAULT_SIDES
    aligns: Sequence[OverlayAlign] = DEFAULT_ALIGNS
    offset: int = 0
    padding: int = 0
    arrow: ArrowSpec | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sides", tuple(self.sides) or DEFAULT_SIDES)
        object.__setattr__(self, "aligns", tuple(self.aligns) or DEFAULT_ALIGNS)
        object.__setattr__(self, "offset", max(0, self.offset))
        object.__setattr__(self, "padding", max(0, self.padding))


@dataclass(frozen=True)
class OverlaySolution:
    """The chosen placement and the overlay's top-left corner.

    ``arrow_x`` is only set for ABOVE/BELOW placements and ``arrow_y`` only for
    LEFT/RIGHT placements, and both only when the problem asked for an arrow.
    """

    placement: OverlayPlacement
    x: int
    y: int
    arrow_x: int | None = None
    arrow_y: int | None = None


@dataclass(frozen=True)
class OverlayCandidate:
    """One scored (side, align) combination from the search."""

    placement: OverlayPlacement
    x: int
    y: int
    overflow: int = 0
    shift: int = 0
    ideal: tuple[int, int] = field(default=(0, 0), compare=False)

    @property
    def score(self) -> tuple[int, int]:
        """Ranking key: lower overflow first, then lower shift."""
        return (self.overflow, self.shift)
