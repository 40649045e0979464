"""Tests for assetpack.busters — cache-buster tokens in file names."""

import os

import pytest

from assetpack.busters import (
    add_buster,
    content_token,
    mtime_token,
    strip_buster,
    strip_extension,
    strip_token,
)


class TestAddBuster:
    def test_inserts_before_extension(self) -> None:
        assert add_buster("/js/app.js", "28389") == "/js/app.28389.js"

    def test_only_last_extension(self) -> None:
        assert add_buster("/js/app.min.js", "7") == "/js/app.min.7.js"

    def test_extensionless(self) -> None:
        assert add_buster("/files/LICENSE", "12") == "/files/LICENSE.12"

    def test_dotted_directory(self) -> None:
        assert add_buster("/v1.2/app", "3") == "/v1.2/app.3"

    def test_dotfile_has_no_extension(self) -> None:
        assert add_buster("/images/.gitkeep", "5") == "/images/.gitkeep.5"


class TestStripBuster:
    def test_strips_numeric_segment(self) -> None:
        assert strip_buster("/js/app.28389.js") == ("/js/app.js", "28389")

    def test_plain_name_unchanged(self) -> None:
        assert strip_buster("/js/app.js") == ("/js/app.js", None)

    def test_non_numeric_segment_unchanged(self) -> None:
        assert strip_buster("/js/app.min.js") == ("/js/app.min.js", None)

    def test_numeric_name_is_ambiguous(self) -> None:
        """A meaningful numeric segment is indistinguishable from a token."""
        assert strip_buster("/js/release.2024.js") == ("/js/release.js", "2024")

    def test_bare_numeric_file_kept(self) -> None:
        assert strip_buster("/img/404.png") == ("/img/404.png", None)

    @pytest.mark.parametrize(
        "uri",
        [
            "/js/app.js",
            "/css/a/b/theme.css",
            "/js/jquery.1.js",
            "/files/LICENSE",
            "/images/.gitkeep",
        ],
    )
    def test_recovers_original(self, uri: str) -> None:
        assert strip_buster(add_buster(uri, "1700000000")) == (uri, "1700000000")


class TestStages:
    def test_strip_extension(self) -> None:
        assert strip_extension("/css/app.28389.css") == ("/css/app.28389", ".css")

    def test_strip_extension_without_one(self) -> None:
        assert strip_extension("/css/app") == ("/css/app", "")

    def test_strip_extension_dotfile(self) -> None:
        assert strip_extension("/images/.gitkeep") == ("/images/.gitkeep", "")

    def test_strip_token(self) -> None:
        assert strip_token("/css/app.28389") == ("/css/app", "28389")

    def test_strip_token_without_one(self) -> None:
        assert strip_token("/css/app") == ("/css/app", None)

    def test_order_matters(self) -> None:
        """Taking the token first misses it when an extension follows."""
        assert strip_token("/css/app.28389.css") == ("/css/app.28389.css", None)
        stem, _ = strip_extension("/css/app.28389.css")
        assert strip_token(stem) == ("/css/app", "28389")


class TestTokenSources:
    def test_mtime_token_newest(self, tmp_path) -> None:
        old = tmp_path / "old.js"
        new = tmp_path / "new.js"
        old.write_text("a")
        new.write_text("b")
        os.utime(old, (1_000_000, 1_000_000))
        os.utime(new, (2_000_000, 2_000_000))
        assert mtime_token([old, new]) == "2000000"

    def test_mtime_token_empty(self) -> None:
        assert mtime_token([]) == "0"

    def test_content_token_is_digits(self, tmp_path) -> None:
        f = tmp_path / "a.js"
        f.write_text("console.log(1)")
        assert content_token([f]).isdigit()

    def test_content_token_tracks_content(self, tmp_path) -> None:
        f = tmp_path / "a.js"
        f.write_text("one")
        first = content_token([f])
        f.write_text("two")
        assert content_token([f]) != first
