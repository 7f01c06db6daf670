"""CLI command: weft compile -- render a style source to CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from weft.errors import StyleSourceError
from weft.style import load_style_source, render_stylesheet


@click.command("compile")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the stylesheet here instead of stdout",
)
def compile_source(source: str, output: str | None) -> None:
    """Compile a JSON style source into a deduplicated stylesheet."""
    try:
        classes = load_style_source(Path(source))
    except StyleSourceError as exc:
        click.echo(f"Style source error: {exc}", err=True)
        sys.exit(1)

    css = render_stylesheet(classes.values())

    if output is None:
        click.echo(css)
        return

    Path(output).write_text(css + "\n", encoding="utf-8")
    distinct = len({c.name for c in classes.values()})
    click.echo(f"Wrote {distinct} class(es) to {output}")
