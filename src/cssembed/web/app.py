from __future__ import annotations

from typing import Iterable

from flask import Flask

from cssembed.config import CssEmbedConfig
from cssembed.generation import Entry


def create_app(
    entries: Iterable[Entry] = (),
    config: CssEmbedConfig | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create a Flask app serving the registered stylesheets under the mount."""
    config = config or CssEmbedConfig()
    app = Flask(__name__, static_folder=None)
    app.config.update(flask_config or {})

    app.extensions["cssembed_config"] = config
    app.extensions["cssembed_entries"] = {entry.location: entry for entry in entries}

    from cssembed.web.routes.stylesheets import stylesheets_bp

    app.register_blueprint(stylesheets_bp, url_prefix="/" + config.mount.strip("/"))

    return app
