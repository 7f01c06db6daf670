"""Anchored overlay solver: pick the side/alignment that best fits the viewport.

Every (side, align) pair is scored in enumeration order (sides outer, aligns
inner):

1. Ideal position - offset from the anchor edge, aligned on the cross axis
2. Clamp - each axis pulled into the safe viewport, or pinned to its start
   when the overlay is larger than the safe viewport on that axis
3. Overflow - pixels the clamped box still protrudes past the safe edges
4. Shift - Manhattan distance between the ideal and clamped positions

The winner has the lowest overflow, then the lowest shift, then comes first.
"""

from __future__ import annotations

import logging

from weft.geometry import Rect, Size
from weft.overlay.model import (
    OverlayAlign,
    OverlayCandidate,
    OverlayPlacement,
    OverlayProblem,
    OverlaySide,
    OverlaySolution,
)

__all__ = ["solve_overlay", "rank_overlay_candidates", "safe_viewport"]

logger = logging.getLogger(__name__)

_FALLBACK_PLACEMENT = OverlayPlacement(OverlaySide.BELOW, OverlayAlign.CENTER)


def safe_viewport(problem: OverlayProblem) -> Rect:
    """The viewport shrunk by the problem's padding on every edge."""
    p = problem.padding
    return problem.viewport.inset(p, p, p, p)


def rank_overlay_candidates(problem: OverlayProblem) -> list[OverlayCandidate]:
    """Score every (side, align) pair in enumeration order."""
    safe = safe_viewport(problem)
    candidates: list[OverlayCandidate] = []
    for side in problem.sides:
        for align in problem.aligns:
            ideal_x, ideal_y = _ideal_position(problem, side, align)
            x = _clamp_axis(ideal_x, safe.x, safe.right, problem.overlay.width)
            y = _clamp_axis(ideal_y, safe.y, safe.bottom, problem.overlay.height)
            candidates.append(
                OverlayCandidate(
                    placement=OverlayPlacement(side, align),
                    x=x,
                    y=y,
                    overflow=_overflow(Rect(x, y, problem.overlay.width, problem.overlay.height), safe),
                    shift=abs(x - ideal_x) + abs(y - ideal_y),
                    ideal=(ideal_x, ideal_y),
                )
            )
    return candidates


def solve_overlay(problem: OverlayProblem) -> OverlaySolution:
    """Choose the best placement for *problem*. Never raises."""
    candidates = rank_overlay_candidates(problem)
    if not candidates:
        safe = safe_viewport(problem)
        return OverlaySolution(placement=_FALLBACK_PLACEMENT, x=safe.x, y=safe.y)

    # min() keeps the first of equal scores, so enumeration order breaks ties.
    best = min(candidates, key=lambda c: c.score)
    logger.debug(
        "overlay placed %s at (%d, %d) overflow=%d shift=%d",
        best.placement,
        best.x,
        best.y,
        best.overflow,
        best.shift,
    )

    arrow_x: int | None = None
    arrow_y: int | None = None
    if problem.arrow is not None:
        edge = problem.arrow.edge_padding_px
        if best.placement.side.is_vertical:
            arrow_x = _arrow_offset(problem.anchor.center_x - best.x, edge, problem.overlay.width)
        else:
            arrow_y = _arrow_offset(problem.anchor.center_y - best.y, edge, problem.overlay.height)

    return OverlaySolution(
        placement=best.placement,
        x=best.x,
        y=best.y,
        arrow_x=arrow_x,
        arrow_y=arrow_y,
    )


def _ideal_position(
    problem: OverlayProblem, side: OverlaySide, align: OverlayAlign
) -> tuple[int, int]:
    """Unclamped top-left corner for one side/alignment pair."""
    anchor = problem.anchor
    overlay: Size = problem.overlay
    gap = problem.offset

    if side is OverlaySide.ABOVE:
        return _cross(align, anchor.x, anchor.right, anchor.center_x, overlay.width), (
            anchor.y - gap - overlay.height
        )
    if side is OverlaySide.BELOW:
        return _cross(align, anchor.x, anchor.right, anchor.center_x, overlay.width), (
            anchor.bottom + gap
        )
    if side is OverlaySide.LEFT:
        return anchor.x - gap - overlay.width, _cross(
            align, anchor.y, anchor.bottom, anchor.center_y, overlay.height
        )
    return anchor.right + gap, _cross(
        align, anchor.y, anchor.bottom, anchor.center_y, overlay.height
    )


def _cross(align: OverlayAlign, start: int, end: int, center: int, extent: int) -> int:
    if align is OverlayAlign.START:
        return start
    if align is OverlayAlign.END:
        return end - extent
    return center - extent // 2


def _clamp_axis(value: int, safe_min: int, safe_max: int, extent: int) -> int:
    """Clamp into [safe_min, safe_max - extent]; oversize extents pin to safe_min."""
    upper = safe_max - extent
    if upper < safe_min:
        return safe_min
    return max(safe_min, min(value, upper))


def _overflow(box: Rect, safe: Rect) -> int:
    """Total pixels *box* protrudes past the edges of *safe*."""
    return (
        max(0, safe.x - box.x)
        + max(0, safe.y - box.y)
        + max(0, box.right - safe.right)
        + max(0, box.bottom - safe.bottom)
    )


def _arrow_offset(relative_center: int, edge_padding: int, extent: int) -> int:
    upper = max(edge_padding, extent - edge_padding)
    return max(edge_padding, min(relative_center, upper))
