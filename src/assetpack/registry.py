"""Asset registry — served directories and named packages.

Holds the (URL prefix -> local directory) mappings and the package
declarations.  Owns no file-system state beyond what it is told; file
discovery happens on demand in ``GlobEngine`` and ``FileResolver``.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from assetpack.errors import InvalidArgument
from assetpack.package import MediaType, Package

logger = logging.getLogger("assetpack.registry")


class AssetRegistry:
    """Served mappings and packages for one application root.

    Both collections keep insertion order; re-registering a key replaces
    the value in place (last write wins).

    Usage::

        registry = AssetRegistry("/srv/site")
        registry.serve("/js", "app/js")
        registry.js("app", "/js", ["/js/vendor/*.js", "/js/*.js"])
    """

    __slots__ = ("_formats", "_packages", "_root", "_served")

    def __init__(
        self,
        root: str | Path,
        formats: Mapping[str, str] | None = None,
    ) -> None:
        self._root = Path(root).resolve()
        self._formats: Mapping[str, str] = MappingProxyType(dict(formats or {}))
        self._served: dict[str, str] = {}
        self._packages: dict[str, Package] = {}

    @property
    def root(self) -> Path:
        """Application root every served directory is relative to."""
        return self._root

    @property
    def formats(self) -> Mapping[str, str]:
        """Extension map: compile-source extension -> served extension."""
        return self._formats

    @property
    def served(self) -> Mapping[str, str]:
        """Snapshot of URL prefix -> local directory, in registration order."""
        return MappingProxyType(dict(self._served))

    @property
    def packages(self) -> Mapping[str, Package]:
        """Snapshot of package key (``"app.js"``) -> Package."""
        return MappingProxyType(dict(self._packages))

    def local_dir(self, directory: str) -> Path:
        """Absolute path of a served directory."""
        return (self._root / directory).resolve()

    # -- Declarations -----------------------------------------------------

    def serve(self, prefix: str, directory: str | Path | None = None) -> None:
        """Serve files under *directory* at URL *prefix*.

        A directory that does not exist under the root is skipped
        silently so optional asset folders don't break configuration.

        Raises:
            InvalidArgument: If no *directory* is given.
        """
        if not directory:
            msg = f"serve({prefix!r}) requires a source directory"
            raise InvalidArgument(msg)
        directory = str(directory)
        if not (self._root / directory).is_dir():
            logger.debug("Skipping %s: %s is not a directory", prefix, self._root / directory)
            return
        self._served[prefix] = directory

    def reset(self) -> None:
        """Forget every mapping and package, including the defaults."""
        self._served, self._packages = {}, {}

    def add_package(
        self,
        name: str,
        type: MediaType,
        path: str,
        files: Iterable[str] = (),
    ) -> Package:
        """Declare (or replace) the package keyed ``"{name}.{ext}"``."""
        package = Package(name=str(name), type=type, path=path, files=tuple(files))
        self._packages[package.key] = package
        return package

    def js(self, name: str, path: str, files: Iterable[str] = ()) -> Package:
        """Declare a script package: ``js("app", "/js", ["/js/*.js"])``."""
        return self.add_package(name, MediaType.SCRIPT, path, files)

    def css(self, name: str, path: str, files: Iterable[str] = ()) -> Package:
        """Declare a style package: ``css("app", "/css", ["/css/*.css"])``."""
        return self.add_package(name, MediaType.STYLE, path, files)

    def package_for(self, uri: str) -> Package | None:
        """The package whose built bundle is published at *uri*, if any."""
        for package in self._packages.values():
            if package.url_path == uri:
                return package
        return None
