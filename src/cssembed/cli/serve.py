"""CLI command: cssembed serve -- serve stylesheets through Flask."""

from __future__ import annotations

import click

from cssembed.parser import UrlMode


@click.command()
@click.argument("cssfiles", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--static-root", default="static", show_default=True, help="Directory the mount maps to")
@click.option("--mount", default="static", show_default=True, help="URL prefix of the static mount")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in UrlMode]),
    default=UrlMode.IMAGES.value,
    show_default=True,
    help="images: inline/rewrite background images; urls: absolute urls",
)
@click.option("--production", is_flag=True, help="Serve production content")
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    cssfiles: tuple[str, ...],
    static_root: str,
    mount: str,
    mode: str,
    production: bool,
    host: str,
    port: int,
    debug: bool,
) -> None:
    """Start a web server for the given stylesheets."""
    from cssembed.config import CssEmbedConfig
    from cssembed.generation import entry_for
    from cssembed.web.app import create_app

    config = CssEmbedConfig(
        static_root=static_root,
        mount=mount,
        url_prefix="/" + mount.strip("/"),
        development=not production,
        mode=UrlMode(mode),
        host=host,
        port=port,
    )
    entries = [entry_for(config, f) for f in cssfiles]

    app = create_app(entries, config=config)
    for entry in entries:
        click.echo(f"Serving {entry.source_file} at /{config.mount}/{entry.location}")
    click.echo(f"Starting cssembed on {host}:{port}")
    app.run(host=config.host, port=config.port, debug=debug)
