"""CLI command: cssembed build -- produce the packaged form of a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssembed.errors import ParseError
from cssembed.filters import absolute_url_filter, canonical_filter, inline_images_filter
from cssembed.generation import css_production_filter


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--location", default=None, help="Location in the static mount (default: file name)")
@click.option("--inline-images", is_flag=True, help="Inline local background images as data URIs")
@click.option(
    "--absolute-urls",
    "url_prefix",
    default=None,
    metavar="PREFIX",
    help="Make local urls absolute under PREFIX",
)
@click.option("--static-root", default=".", show_default=True, help="Static root for --absolute-urls")
@click.option("--workers", default=1, type=int, show_default=True, help="Parallel image loads")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Output file")
def build(
    cssfile: str,
    location: str | None,
    inline_images: bool,
    url_prefix: str | None,
    static_root: str,
    workers: int,
    output: str | None,
) -> None:
    """Parse a stylesheet and render its production form.

    Without a filter option the stylesheet is re-rendered in canonical form.
    """
    if inline_images and url_prefix is not None:
        raise click.UsageError("--inline-images and --absolute-urls are mutually exclusive")

    if inline_images:
        prod_filter = inline_images_filter(max_workers=workers)
    elif url_prefix is not None:
        prod_filter = absolute_url_filter(static_root, url_prefix)
    else:
        prod_filter = canonical_filter

    css_path = Path(cssfile).as_posix()
    entry = css_production_filter(prod_filter, location or Path(cssfile).name, css_path)

    try:
        generated = entry.generate()
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(generated.content.decode("utf-8"))
    else:
        Path(output).write_bytes(generated.content)
        click.echo(f"Wrote {generated.location} to {output}")
