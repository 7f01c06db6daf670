"""CLI command: weft inspect -- show compiled class names for a style source."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from weft.errors import StyleSourceError
from weft.style import load_style_source


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def inspect(source: str) -> None:
    """List each label in a style source with its generated class name."""
    try:
        classes = load_style_source(Path(source))
    except StyleSourceError as exc:
        click.echo(f"Style source error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Classes: {len(classes)}")
    for label, cls in classes.items():
        parts = [f"  {label}", cls.name, f"declarations={len(cls.rule.declarations)}"]
        scoped = sum(len(scope) for _, scope in cls.rule.scopes())
        if scoped:
            parts.append(f"scopes={scoped}")
        if cls.extra_classes:
            parts.append(f"extra={' '.join(cls.extra_classes)}")
        click.echo("  ".join(parts))
