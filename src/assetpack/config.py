"""Asset configuration.

AssetConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

DEFAULT_SERVED: tuple[tuple[str, str], ...] = (
    ("/css", "app/css"),
    ("/js", "app/js"),
    ("/images", "app/images"),
)


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class AssetConfig:
    """Asset configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AssetConfig(root="/srv/site", output_path="dist")
    """

    # Application root; every served directory is relative to it
    root: str | Path = "."

    # Build output, relative to root unless absolute
    output_path: str | Path = "public"

    # Default (URL prefix, local directory) mappings, registered in order
    served: tuple[tuple[str, str], ...] = DEFAULT_SERVED

    # Compression backends (see assetpack.compressors)
    js_compression: str = "none"
    css_compression: str = "simple"
    js_compression_options: Mapping[str, Any] = field(default_factory=_empty)
    css_compression_options: Mapping[str, Any] = field(default_factory=_empty)

    # Keep rendered output in memory until reset_cache()
    cache_renders: bool = False

    # Variables available to template compilers
    template_context: Mapping[str, Any] = field(default_factory=_empty)

    @property
    def root_path(self) -> Path:
        return Path(self.root).resolve()

    @property
    def output_root(self) -> Path:
        output = Path(self.output_path)
        if output.is_absolute():
            return output
        return self.root_path / output
