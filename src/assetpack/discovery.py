"""File discovery across served directories.

Every query walks the file system again; nothing is memoized, because
files change between builds.  Wrap results in a ``RenderCache`` when
repeated walks are too slow.
"""

from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path

from assetpack._internal.multimap import FileList, MultiValueMapping
from assetpack.package import Package
from assetpack.paths import to_public_uri
from assetpack.registry import AssetRegistry


class GlobEngine:
    """Expands public-URI glob patterns over the registry's files."""

    __slots__ = ("_registry",)

    def __init__(self, registry: AssetRegistry) -> None:
        self._registry = registry

    def all_files(self) -> dict[str, Path]:
        """Every served file, keyed by public URI.

        Mappings are walked in registration order; on a URI collision the
        later mapping wins.
        """
        files: dict[str, Path] = {}
        for prefix, directory in self._registry.served.items():
            local_root = self._registry.local_dir(directory)
            for local in sorted(local_root.rglob("*")):
                if not local.is_file():
                    continue
                uri = to_public_uri(local, prefix, local_root, self._registry.formats)
                files[uri] = local
        return files

    def glob(self, patterns: Iterable[str]) -> MultiValueMapping:
        """URIs matching each pattern, pattern by pattern.

        Matches are sorted within a pattern; pattern order is kept and a
        URI matched by two patterns appears twice.  Matching follows
        ``fnmatch`` rules, so ``*`` also crosses ``/``.
        """
        if isinstance(patterns, str):
            patterns = (patterns,)
        files = self.all_files()
        pairs: list[tuple[str, Path]] = []
        for pattern in patterns:
            matches = sorted(uri for uri in files if fnmatchcase(uri, pattern))
            pairs.extend((uri, files[uri]) for uri in matches)
        return FileList(pairs)

    def package_files(self, package: Package) -> MultiValueMapping:
        """Current members of *package*, resolved against the registry now."""
        return self.glob(package.files)

    def unpackaged_files(self) -> dict[str, Path]:
        """Served files that belong to no package."""
        packaged: set[str] = set()
        for package in self._registry.packages.values():
            packaged.update(self.package_files(package))
        return {uri: local for uri, local in self.all_files().items() if uri not in packaged}
