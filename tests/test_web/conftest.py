from __future__ import annotations

from pathlib import Path

import pytest

from cssembed.config import CssEmbedConfig
from cssembed.generation import entry_for
from cssembed.web.app import create_app

SITE_CSS = b".hero {\n  background-image:  url('img/x.png');\n  color: red;\n}\n"


@pytest.fixture
def site_css() -> bytes:
    return SITE_CSS


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Lay out a static directory and make it the working directory."""
    static = tmp_path / "static"
    (static / "img").mkdir(parents=True)
    (static / "site.css").write_bytes(SITE_CSS)
    (static / "broken.css").write_bytes(b".a { background-image none; }\n")
    (static / "img" / "x.png").write_bytes(b"XPNG")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _make_app(development: bool):
    config = CssEmbedConfig(static_root="static", mount="static", development=development)
    entries = [entry_for(config, "static/site.css"), entry_for(config, "static/broken.css")]
    application = create_app(entries, config=config, flask_config={"TESTING": True})
    return application


@pytest.fixture
def app(workdir):
    """Create a development-mode Flask app for testing."""
    return _make_app(development=True)


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def production_client(workdir):
    """Create a test client for a production-mode app."""
    return _make_app(development=False).test_client()
