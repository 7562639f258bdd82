"""CLI command: cssembed rewrite -- development rewrite of background images."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssembed.devel.rewrite import devel_bg_img_b64
from cssembed.errors import RewriteError


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--location", required=True, help="Location the stylesheet is served at")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Output file")
def rewrite(cssfile: str, location: str, output: str | None) -> None:
    """Rewrite background-image urls, preserving the file's formatting."""
    try:
        content = devel_bg_img_b64(location, Path(cssfile).as_posix())
    except RewriteError as exc:
        click.echo(f"Rewrite error: {exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(content.decode("utf-8"), nl=False)
    else:
        Path(output).write_bytes(content)
