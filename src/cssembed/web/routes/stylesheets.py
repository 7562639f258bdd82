from __future__ import annotations

import logging

from flask import Blueprint, Response, abort, current_app

from cssembed.errors import CssEmbedError

logger = logging.getLogger(__name__)

stylesheets_bp = Blueprint("stylesheets", __name__)


@stylesheets_bp.errorhandler(CssEmbedError)
def stylesheet_error(exc: CssEmbedError):
    """Report a stylesheet that could not be parsed or rewritten."""
    logger.error("%s", exc)
    return Response(str(exc), status=500, mimetype="text/plain")


@stylesheets_bp.route("/<path:subpath>")
def serve(subpath: str):
    """Serve a registered stylesheet, or a file one of them references."""
    config = current_app.extensions["cssembed_config"]
    entries = current_app.extensions["cssembed_entries"]

    entry = entries.get(subpath)
    if entry is not None:
        if config.development:
            content = entry.devel_reload()
        else:
            content = entry.generate().content
        return Response(content, mimetype=entry.mime_type)

    if config.development:
        parts = subpath.split("/")
        for entry in entries.values():
            if entry.devel_extra_files is None:
                continue
            found = entry.devel_extra_files(parts)
            if found is not None:
                mime_type, content = found
                return Response(content, mimetype=mime_type)

    abort(404)
