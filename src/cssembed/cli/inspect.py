"""CLI command: cssembed inspect -- list blocks and local references."""

from __future__ import annotations

import posixpath
import sys
from pathlib import Path

import click

from cssembed.errors import ParseError
from cssembed.filters import read_file_if_exists
from cssembed.parser import UrlMode, parse_css_file
from cssembed.resources import load_resources


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--mode",
    type=click.Choice([m.value for m in UrlMode]),
    default=UrlMode.IMAGES.value,
    show_default=True,
    help="Attributes that may carry a url",
)
def inspect(cssfile: str, mode: str) -> None:
    """Show the blocks of a stylesheet and the local files it references."""
    css_path = Path(cssfile).as_posix()
    try:
        document = parse_css_file(css_path, UrlMode(mode))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Blocks ({len(document.blocks)}):")
    for block in document.blocks:
        click.echo(f"  {block.selector}  [{len(block.declarations)} declaration(s)]")

    references = document.distinct_references()
    found = load_resources(document, posixpath.dirname(css_path), read_file_if_exists)
    click.echo(f"References ({len(references)}):")
    for ref in references:
        status = "ok" if ref in found else "missing"
        click.echo(f"  {ref.path}  ({status})")
