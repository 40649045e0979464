"""Build — writes every package and served file under the output root.

Each asset is written twice with the same bytes: at its canonical path
and at a cache-busted path (``js/app.js`` and ``js/app.28389.js``).

A failure aborts the whole build with ``BuildFailed``.  Files written
before the failure are left in place; build into a staging root and
swap it in when the output must change all at once.  Builds are not
safe to run concurrently against one output root.
"""

import logging
import os
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from assetpack.busters import TokenSource, add_buster, mtime_token
from assetpack.discovery import GlobEngine
from assetpack.errors import AssetpackError, BuildFailed
from assetpack.registry import AssetRegistry

logger = logging.getLogger("assetpack.build")

Renderer = Callable[[str], bytes]


class ArtifactWriter(Protocol):
    """Persists one built artifact, creating parent directories."""

    def write(self, path: Path, data: bytes) -> None: ...


class FileSystemWriter:
    """Writes through a temporary sibling file and ``os.replace``.

    A reader of *path* sees either the old file or the complete new one.
    """

    __slots__ = ()

    def write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class Builder:
    """Renders and writes every asset reachable through a registry.

    Usage::

        builder = Builder(registry, "/srv/site/public")
        builder.build(renderer=pipeline)
    """

    __slots__ = ("_globber", "_output_root", "_registry")

    def __init__(self, registry: AssetRegistry, output_root: str | Path) -> None:
        self._registry = registry
        self._output_root = Path(output_root)
        self._globber = GlobEngine(registry)

    @property
    def output_root(self) -> Path:
        return self._output_root

    def output_path_for(self, uri: str) -> Path:
        """Absolute artifact path for a public URI."""
        return self._output_root / uri.lstrip("/")

    def build(
        self,
        renderer: Renderer,
        writer: ArtifactWriter | None = None,
        token_source: TokenSource = mtime_token,
        *,
        on_write: Callable[[Path], None] | None = None,
    ) -> list[Path]:
        """Build packages first, then every unpackaged served file.

        *on_write* is called with each artifact path just before it is
        written.  Returns the written paths in order.

        Raises:
            BuildFailed: On the first asset that fails to render or write.
        """
        writer = writer or FileSystemWriter()
        written: list[Path] = []
        logger.info("Building assets into %s", self._output_root)

        for package in self._registry.packages.values():
            members = self._globber.package_files(package).values()
            token = token_source(members)
            written += self._emit(
                package.url_path,
                package.production_path(token),
                renderer,
                writer,
                on_write,
            )

        for uri, local in self._globber.unpackaged_files().items():
            token = token_source([local])
            written += self._emit(uri, add_buster(uri, token), renderer, writer, on_write)

        logger.info("Built %d files", len(written))
        return written

    def _emit(
        self,
        uri: str,
        busted_uri: str,
        renderer: Renderer,
        writer: ArtifactWriter,
        on_write: Callable[[Path], None] | None,
    ) -> Sequence[Path]:
        try:
            output = renderer(uri)
        except (AssetpackError, OSError) as exc:
            raise BuildFailed(uri, str(exc)) from exc

        paths = (self.output_path_for(uri), self.output_path_for(busted_uri))
        for path in paths:
            if on_write is not None:
                on_write(path)
            try:
                writer.write(path, output)
            except OSError as exc:
                raise BuildFailed(uri, f"cannot write {path}: {exc}") from exc
            logger.info("Wrote %s", path)
        return paths
