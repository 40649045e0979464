"""URI -> local file resolution.

Prefix matching is first-registered-wins, not longest-prefix: with
``/js`` registered before ``/js/vendor``, every ``/js/vendor/...`` URI
resolves under ``/js``.  Register more specific prefixes first when
mappings overlap.
"""

import glob
from pathlib import Path

from assetpack.busters import strip_extension, strip_token
from assetpack.paths import squeeze_slashes
from assetpack.registry import AssetRegistry


class FileResolver:
    """Answers which local file, if any, backs a public URI.

    Every query returns ``None`` for "not found"; nothing here raises
    for a missing file.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: AssetRegistry) -> None:
        self._registry = registry

    def match(self, uri: str) -> tuple[str, str] | None:
        """First registered ``(prefix, directory)`` whose prefix starts *uri*."""
        uri = squeeze_slashes(uri)
        for prefix, directory in self._registry.served.items():
            if uri[: len(prefix)] == prefix:
                return prefix, directory
        return None

    def resolve(self, uri: str) -> Path | None:
        """Local file served verbatim at *uri*, or ``None``.

        Directories, and paths that escape the served directory
        (``/js/../../secret.txt``), resolve to ``None``.
        """
        uri = squeeze_slashes(uri)
        matched = self.match(uri)
        if matched is None:
            return None
        prefix, directory = matched
        local_root = self._registry.local_dir(directory)
        relative = uri[len(prefix) :].lstrip("/")
        local = (local_root / relative).resolve()
        if not local.is_relative_to(local_root) or not local.is_file():
            return None
        return local

    def resolve_dynamic(self, uri: str, directory: str | None = None) -> Path | None:
        """Source file that compiles to *uri*, or ``None``.

        Strips the final extension, then a numeric cache-buster segment,
        and looks for ``<base>.*`` inside *directory*.  Given
        ``/css/app.28389.css`` and ``app/css/app.kcss`` on disk, returns
        the ``.kcss`` file.  The strip order matters: taking the buster
        first would never match once the extension has been remapped.

        *uri* may carry the prefix of the mapping that serves *directory*;
        it is removed before the lookup.  Without *directory*, the first
        matching mapping is used.
        """
        uri = squeeze_slashes(uri)
        if directory is None:
            matched = self.match(uri)
            if matched is None:
                return None
            prefix, directory = matched
            uri = uri[len(prefix) :]
        else:
            for prefix, served_dir in self._registry.served.items():
                if served_dir == directory and uri[: len(prefix)] == prefix:
                    uri = uri[len(prefix) :]
                    break

        stem, _ = strip_extension(uri)
        stem, _ = strip_token(stem)

        local_root = self._registry.local_dir(directory)
        base = local_root / stem.lstrip("/")
        for candidate in sorted(glob.glob(f"{glob.escape(str(base))}.*")):
            path = Path(candidate).resolve()
            if path.is_relative_to(local_root) and path.is_file():
                return path
        return None

    def exists(self, uri: str) -> bool:
        """True when *uri* resolves statically or dynamically."""
        return self.resolve(uri) is not None or self.resolve_dynamic(uri) is not None
