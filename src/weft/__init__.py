"""Weft: typed style compilation and anchored overlay placement."""

__version__ = "0.1.0"

from weft.geometry import Point, Rect, Size, rect_inset  # noqa: E402
from weft.overlay import OverlayProblem, OverlaySolution, solve_overlay  # noqa: E402
from weft.style import StyleClass, compile_class, render_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "Point",
    "Size",
    "Rect",
    "rect_inset",
    "OverlayProblem",
    "OverlaySolution",
    "solve_overlay",
    "StyleClass",
    "compile_class",
    "render_stylesheet",
]
