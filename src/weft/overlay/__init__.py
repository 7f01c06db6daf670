from weft.overlay.model import (
    DEFAULT_ALIGNS,
    DEFAULT_SIDES,
    ArrowSpec,
    OverlayAlign,
    OverlayCandidate,
    OverlayPlacement,
    OverlayProblem,
    OverlaySide,
    OverlaySolution,
)
from weft.overlay.solver import rank_overlay_candidates, safe_viewport, solve_overlay

__all__ = [
    "OverlaySide",
    "OverlayAlign",
    "OverlayPlacement",
    "ArrowSpec",
    "OverlayProblem",
    "OverlaySolution",
    "OverlayCandidate",
    "DEFAULT_SIDES",
    "DEFAULT_ALIGNS",
    "solve_overlay",
    "rank_overlay_candidates",
    "safe_viewport",
]
