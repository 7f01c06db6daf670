"""CLI command: weft place -- solve one anchored overlay placement."""

from __future__ import annotations

from typing import Callable

import click

from weft.geometry import Rect, Size
from weft.overlay import (
    ArrowSpec,
    OverlayAlign,
    OverlayProblem,
    OverlaySide,
    rank_overlay_candidates,
    solve_overlay,
)


IntTupleCallback = Callable[[click.Context, click.Parameter, str | None], tuple[int, ...] | None]


def _int_tuple(count: int) -> IntTupleCallback:
    """Click callback parsing ``"a,b,..."`` into exactly *count* integers."""

    def parse(
        ctx: click.Context, param: click.Parameter, value: str | None
    ) -> tuple[int, ...] | None:
        if value is None:
            return None
        parts = [p.strip() for p in value.split(",")]
        if len(parts) != count:
            raise click.BadParameter(f"expected {count} comma-separated integers")
        try:
            return tuple(int(p) for p in parts)
        except ValueError:
            raise click.BadParameter(f"expected {count} comma-separated integers") from None

    return parse


@click.command()
@click.option("--anchor", required=True, callback=_int_tuple(4), help="Anchor rect X,Y,W,H")
@click.option("--size", required=True, callback=_int_tuple(2), help="Overlay size W,H")
@click.option("--viewport", required=True, callback=_int_tuple(4), help="Viewport rect X,Y,W,H")
@click.option(
    "--side",
    "sides",
    multiple=True,
    type=click.Choice([s.value for s in OverlaySide]),
    help="Candidate side, repeatable, in preference order",
)
@click.option(
    "--align",
    "aligns",
    multiple=True,
    type=click.Choice([a.value for a in OverlayAlign]),
    help="Candidate alignment, repeatable, in preference order",
)
@click.option("--offset", default=0, type=int, help="Gap between anchor and overlay")
@click.option("--padding", default=0, type=int, help="Safe margin inside the viewport")
@click.option("--arrow", default=None, callback=_int_tuple(2), help="Arrow SIZE,EDGE_PADDING")
@click.option("--all", "show_all", is_flag=True, help="Also list every scored candidate")
def place(
    anchor: tuple[int, int, int, int],
    size: tuple[int, int],
    viewport: tuple[int, int, int, int],
    sides: tuple[str, ...],
    aligns: tuple[str, ...],
    offset: int,
    padding: int,
    arrow: tuple[int, int] | None,
    show_all: bool,
) -> None:
    """Place an overlay next to an anchor inside a viewport."""
    problem = OverlayProblem(
        anchor=Rect(*anchor),
        overlay=Size(*size),
        viewport=Rect(*viewport),
        sides=[OverlaySide(s) for s in sides],
        aligns=[OverlayAlign(a) for a in aligns],
        offset=offset,
        padding=padding,
        arrow=ArrowSpec(*arrow) if arrow else None,
    )
    solution = solve_overlay(problem)

    click.echo(f"Placement: {solution.placement}")
    click.echo(f"Position:  x={solution.x} y={solution.y}")
    if solution.arrow_x is not None:
        click.echo(f"Arrow:     x={solution.arrow_x}")
    if solution.arrow_y is not None:
        click.echo(f"Arrow:     y={solution.arrow_y}")

    if show_all:
        click.echo()
        click.echo("Candidates:")
        for cand in rank_overlay_candidates(problem):
            click.echo(
                f"  {str(cand.placement):<14} x={cand.x} y={cand.y} "
                f"ideal={cand.ideal[0]},{cand.ideal[1]} "
                f"overflow={cand.overflow} shift={cand.shift}"
            )
