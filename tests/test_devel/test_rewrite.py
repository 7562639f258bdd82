"""Tests for the format-preserving development rewrite."""

import base64
import re
from pathlib import Path

import pytest

from cssembed.devel.resolver import devel_extra_files

from cssembed.devel.rewrite import (
    devel_bg_img_b64,
    devel_pass_through,
    rewrite_background_images,
    source_directory,
)
from cssembed.errors import RewriteError


def _token(text: str) -> bytes:
    return base64.b64encode(text.encode("utf-8"))


# ---------------------------------------------------------------------------
# Unmatched input
# ---------------------------------------------------------------------------


class TestUnmatchedInput:
    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b".a { color: red; }",
            b".a {\n\tbackground: url('x.png');\r\n}\n\n/* comment */\n",
            b"\xff\xfe not even utf-8",
        ],
    )
    def test_identity(self, data: bytes):
        assert rewrite_background_images("css/site.css", "static/site.css", data) == data


# ---------------------------------------------------------------------------
# Rewrites
# ---------------------------------------------------------------------------


class TestRewrite:
    def test_exact_scenario(self):
        data = b".a {\n  background-image:  url('img/x.png')  ;\n}"
        out = rewrite_background_images("css/site.css", "static/site.css", data)
        expected = (
            b".a {\n  background-image:  url('site.css/"
            + _token("static/img/x.png")
            + b"')  ;\n}"
        )
        assert out == expected

    def test_token_value(self):
        out = rewrite_background_images(
            "css/site.css", "static/site.css", b"background-image:url('img/x.png')"
        )
        assert out == b"background-image:url('site.css/c3RhdGljL2ltZy94LnBuZw==')"

    def test_tabs_and_spaces_kept(self):
        data = b"background-image \t:\t url('a.gif')"
        out = rewrite_background_images("site.css", "assets/site.css", data)
        assert out == b"background-image \t:\t url('site.css/" + _token("assets/a.gif") + b"')"

    def test_multiple_declarations(self):
        data = (
            b".a { background-image: url('a.png'); }\n"
            b".b { color: red; }\n"
            b".c { background-image: url('b.png'); }\n"
        )
        out = rewrite_background_images("site.css", "s/site.css", data)
        assert out == (
            b".a { background-image: url('site.css/" + _token("s/a.png") + b"'); }\n"
            b".b { color: red; }\n"
            b".c { background-image: url('site.css/" + _token("s/b.png") + b"'); }\n"
        )

    def test_source_without_directory(self):
        out = rewrite_background_images("site.css", "site.css", b"background-image: url('a.png')")
        assert out == b"background-image: url('site.css/" + _token("./a.png") + b"')"

    def test_location_without_directory(self):
        out = rewrite_background_images("main.css", "static/main.css", b"background-image:url('x')")
        assert out.startswith(b"background-image:url('main.css/")

    def test_non_ascii_path(self):
        data = "background-image: url('bilder/über.png')".encode("utf-8")
        out = rewrite_background_images("site.css", "static/site.css", data)
        assert _token("static/bilder/über.png") in out

    def test_remote_urls_rewritten_too(self):
        out = rewrite_background_images(
            "site.css", "static/site.css", b"background-image: url('http://x/a.png')"
        )
        assert b"http://" not in out


# ---------------------------------------------------------------------------
# Fatal errors
# ---------------------------------------------------------------------------


class TestRewriteErrors:
    @pytest.mark.parametrize(
        "data",
        [
            b".a { background-image url('x.png'); }",
            b".a { background-image: none; }",
            b'.a { background-image: url("x.png"); }',
            b".a { background-image: url('x.png; }",
            b".a { background-image: url('x.png' ); }",
            b".a { background-image",
        ],
    )
    def test_malformed_declaration(self, data: bytes):
        with pytest.raises(RewriteError):
            rewrite_background_images("site.css", "static/site.css", data)

    def test_error_reports_position(self):
        with pytest.raises(RewriteError) as exc_info:
            rewrite_background_images("site.css", "static/site.css", b"background-image; ")
        assert exc_info.value.offset == len(b"background-image")
        assert exc_info.value.source_file == "static/site.css"
        assert "static/site.css" in str(exc_info.value)

    def test_earlier_matches_do_not_leak(self):
        data = b"background-image: url('a.png')\nbackground-image: none"
        with pytest.raises(RewriteError):
            rewrite_background_images("site.css", "static/site.css", data)


# ---------------------------------------------------------------------------
# Development reloaders
# ---------------------------------------------------------------------------


class TestReloaders:
    FILES = {"static/site.css": b".a {  background-image: url('x.png'); }"}

    def test_pass_through(self):
        out = devel_pass_through("site.css", "static/site.css", read_bytes=self.FILES.__getitem__)
        assert out == self.FILES["static/site.css"]

    def test_bg_img_b64(self):
        out = devel_bg_img_b64("site.css", "static/site.css", read_bytes=self.FILES.__getitem__)
        assert out == b".a {  background-image: url('site.css/" + _token("static/x.png") + b"'); }"

    def test_reads_from_disk(self, tmp_path):
        css = tmp_path / "site.css"
        css.write_bytes(b"body{}\n")
        assert devel_bg_img_b64("site.css", str(css)) == b"body{}\n"


# ---------------------------------------------------------------------------
# Source directory
# ---------------------------------------------------------------------------


class TestSourceDirectory:
    @pytest.mark.parametrize(
        "source_file, directory",
        [
            ("static/site.css", "static/"),
            ("static/css/site.css", "static/css/"),
            ("/srv/static/site.css", "/srv/static/"),
            ("/site.css", "/"),
            ("site.css", "./"),
        ],
    )
    def test_keeps_trailing_separator(self, source_file, directory):
        assert source_directory(source_file) == directory


# ---------------------------------------------------------------------------
# Rewrite then resolve
# ---------------------------------------------------------------------------

_REWRITTEN_URL = re.compile(rb"url\('([^']*)'\)")


def _request_parts(location: str, rewritten: bytes, extension: str) -> list[str]:
    """Turn the first rewritten url into the segments a browser would request."""
    url = _REWRITTEN_URL.search(rewritten).group(1).decode("ascii")
    name, _, token = url.partition("/")
    directory = location.rpartition("/")[0]
    parts = directory.split("/") if directory else []
    return parts + [name, token + extension]


class TestRewriteThenResolve:
    @pytest.fixture()
    def site(self, tmp_path: Path) -> Path:
        static = tmp_path / "static"
        (static / "img").mkdir(parents=True)
        (static / "img" / "x.png").write_bytes(b"REALPNG")
        (static / "site.css").write_bytes(b".a {\n  background-image: url('img/x.png');\n}\n")
        return tmp_path

    def test_relative_source(self, site: Path, monkeypatch):
        monkeypatch.chdir(site)
        rewritten = devel_bg_img_b64("css/site.css", "static/site.css")
        parts = _request_parts("css/site.css", rewritten, ".png")
        assert devel_extra_files("css/site.css", parts) == ("image/png", b"REALPNG")

    def test_absolute_source(self, site: Path):
        source = (site / "static" / "site.css").as_posix()
        rewritten = devel_bg_img_b64("site.css", source)
        parts = _request_parts("site.css", rewritten, ".png")
        assert devel_extra_files("site.css", parts) == ("image/png", b"REALPNG")

    def test_bare_file_name(self, site: Path, monkeypatch):
        monkeypatch.chdir(site / "static")
        rewritten = devel_bg_img_b64("site.css", "site.css")
        parts = _request_parts("site.css", rewritten, ".png")
        assert devel_extra_files("site.css", parts) == ("image/png", b"REALPNG")
