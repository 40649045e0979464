"""Tests for assetpack.build — artifact writing."""

from pathlib import Path

import pytest

from assetpack.build import Builder, FileSystemWriter
from assetpack.errors import BuildFailed, RenderError
from assetpack.registry import AssetRegistry


def fixed_token(paths) -> str:
    return "28389"


class MemoryWriter:
    """Collects writes instead of touching the disk."""

    def __init__(self) -> None:
        self.writes: list[tuple[Path, bytes]] = []

    def write(self, path: Path, data: bytes) -> None:
        self.writes.append((path, data))


@pytest.fixture
def root(tmp_path):
    """Application root with two scripts and an image."""
    js = tmp_path / "app" / "js"
    images = tmp_path / "app" / "images"
    js.mkdir(parents=True)
    images.mkdir(parents=True)
    (js / "a.js").write_text("a();")
    (js / "b.js").write_text("b();")
    (images / "logo.png").write_bytes(b"PNG")
    return tmp_path.resolve()


@pytest.fixture
def registry(root):
    registry = AssetRegistry(root)
    registry.serve("/js", "app/js")
    return registry


class TestBuild:
    def test_package_written_twice(self, registry, root) -> None:
        registry.js("app", "/js", ["/js/*.js"])
        output = root / "output"

        Builder(registry, output).build(lambda uri: b"X", token_source=fixed_token)

        assert (output / "js" / "app.js").read_bytes() == b"X"
        assert (output / "js" / "app.28389.js").read_bytes() == b"X"

    def test_packaged_files_not_written_separately(self, registry, root) -> None:
        registry.js("app", "/js", ["/js/*.js"])
        output = root / "output"

        written = Builder(registry, output).build(lambda uri: b"X", token_source=fixed_token)

        assert written == [output / "js" / "app.js", output / "js" / "app.28389.js"]
        assert not (output / "js" / "a.js").exists()

    def test_unpackaged_files_written_twice(self, registry, root) -> None:
        registry.serve("/images", "app/images")
        registry.js("app", "/js", ["/js/a.js"])
        writer = MemoryWriter()

        Builder(registry, root / "out").build(
            lambda uri: uri.encode(), writer, fixed_token
        )

        assert writer.writes == [
            (root / "out" / "js" / "app.js", b"/js/app.js"),
            (root / "out" / "js" / "app.28389.js", b"/js/app.js"),
            (root / "out" / "js" / "b.js", b"/js/b.js"),
            (root / "out" / "js" / "b.28389.js", b"/js/b.js"),
            (root / "out" / "images" / "logo.png", b"/images/logo.png"),
            (root / "out" / "images" / "logo.28389.png", b"/images/logo.png"),
        ]

    def test_token_source_receives_package_members(self, registry, root) -> None:
        registry.js("app", "/js", ["/js/*.js"])
        seen: list[list[Path]] = []

        def token(paths) -> str:
            seen.append(list(paths))
            return "1"

        Builder(registry, root / "out").build(lambda uri: b"", MemoryWriter(), token)

        assert seen == [[root / "app" / "js" / "a.js", root / "app" / "js" / "b.js"]]

    def test_on_write_callback(self, registry, root) -> None:
        registry.js("app", "/js", ["/js/*.js"])
        reported: list[Path] = []

        Builder(registry, root / "out").build(
            lambda uri: b"X", MemoryWriter(), fixed_token, on_write=reported.append
        )

        assert reported == [root / "out" / "js" / "app.js", root / "out" / "js" / "app.28389.js"]

    def test_output_path_for(self, registry, root) -> None:
        builder = Builder(registry, root / "public")
        assert builder.output_path_for("/js/app.js") == root / "public" / "js" / "app.js"


class TestBuildFailure:
    def test_render_error_aborts(self, registry, root) -> None:
        registry.serve("/images", "app/images")
        writer = MemoryWriter()

        def renderer(uri: str) -> bytes:
            if uri == "/js/b.js":
                raise RenderError(uri, "syntax error")
            return b"ok"

        with pytest.raises(BuildFailed) as exc_info:
            Builder(registry, root / "out").build(renderer, writer, fixed_token)

        assert exc_info.value.path == "/js/b.js"
        assert isinstance(exc_info.value.__cause__, RenderError)
        # Earlier artifacts stay; later ones are never attempted
        assert [p.name for p, _ in writer.writes] == ["a.js", "a.28389.js"]

    def test_write_error_aborts(self, registry, root) -> None:
        class FailingWriter:
            def write(self, path: Path, data: bytes) -> None:
                raise PermissionError("read-only")

        with pytest.raises(BuildFailed, match="/js/a.js"):
            Builder(registry, root / "out").build(lambda uri: b"", FailingWriter(), fixed_token)


class TestFileSystemWriter:
    def test_creates_parents(self, tmp_path) -> None:
        target = tmp_path / "deep" / "er" / "app.js"
        FileSystemWriter().write(target, b"data")
        assert target.read_bytes() == b"data"

    def test_overwrites(self, tmp_path) -> None:
        target = tmp_path / "app.js"
        target.write_bytes(b"old")
        FileSystemWriter().write(target, b"new")
        assert target.read_bytes() == b"new"

    def test_no_temp_files_left(self, tmp_path) -> None:
        FileSystemWriter().write(tmp_path / "app.js", b"data")
        assert [p.name for p in tmp_path.iterdir()] == ["app.js"]
