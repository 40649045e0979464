"""Default renderer — produces the bytes served or built for a public URI.

Resolution order for a URI:

1. A package bundle (``/js/app.js``, or its cache-busted form): every
   member file rendered, joined with newlines, then compressed with the
   backend configured for the package's media type.
2. A file served verbatim.
3. A compiled source (``/css/theme.css`` backed by ``theme.kcss``).

Anything else raises ``RenderError``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from assetpack.busters import strip_buster
from assetpack.compilers import Compilers
from assetpack.compressors import CompressFn, get_compressor
from assetpack.config import AssetConfig
from assetpack.discovery import GlobEngine
from assetpack.errors import AssetpackError, RenderError
from assetpack.package import MediaType, Package
from assetpack.registry import AssetRegistry
from assetpack.resolver import FileResolver


class AssetPipeline:
    """Renders public URIs against one registry.

    Callable, so it can be passed anywhere a ``(uri) -> bytes`` renderer
    is expected.
    """

    __slots__ = ("_compilers", "_config", "_extra_backends", "_globber", "_registry", "_resolver")

    def __init__(
        self,
        registry: AssetRegistry,
        compilers: Compilers,
        config: AssetConfig | None = None,
        *,
        backends: Mapping[tuple[MediaType, str], CompressFn] | None = None,
    ) -> None:
        self._registry = registry
        self._compilers = compilers
        self._config = config or AssetConfig(root=registry.root)
        self._resolver = FileResolver(registry)
        self._globber = GlobEngine(registry)
        self._extra_backends = dict(backends or {})

    def __call__(self, uri: str) -> bytes:
        return self.render(uri)

    def render(self, uri: str) -> bytes:
        """Rendered bytes for *uri*.

        Raises:
            RenderError: If nothing backs *uri* or compilation fails.
        """
        package = self._registry.package_for(uri)
        if package is None:
            package = self._registry.package_for(strip_buster(uri)[0])
        if package is not None:
            return self.render_package(package)

        local = self._resolver.resolve(uri)
        if local is not None:
            return local.read_bytes()

        local = self._resolver.resolve_dynamic(uri)
        if local is not None:
            text = self._compile(uri, local)
            if text is None:
                return local.read_bytes()
            return text.encode("utf-8")

        raise RenderError(uri, "not found")

    def render_package(self, package: Package) -> bytes:
        """Concatenated, compressed bundle for *package*."""
        parts: list[str] = []
        for uri, local in self._globber.package_files(package).items():
            text = self._compile(uri, local)
            if text is None:
                try:
                    text = local.read_text(encoding="utf-8")
                except UnicodeDecodeError as exc:
                    raise RenderError(package.url_path, f"{uri} is not UTF-8 text") from exc
            parts.append(text)

        compress = self._compressor(package.type)
        try:
            output = compress("\n".join(parts), self._compression_options(package.type))
        except Exception as exc:
            raise RenderError(package.url_path, f"compression failed: {exc}") from exc
        return output.encode("utf-8")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _compile(self, uri: str, local: Path) -> str | None:
        try:
            return self._compilers.compile(local, self._config.template_context)
        except AssetpackError:
            raise
        except Exception as exc:
            raise RenderError(uri, f"failed to compile {local.name}: {exc}") from exc

    def _compressor(self, media_type: MediaType) -> CompressFn:
        name = (
            self._config.js_compression
            if media_type is MediaType.SCRIPT
            else self._config.css_compression
        )
        return get_compressor(media_type, name, self._extra_backends)

    def _compression_options(self, media_type: MediaType) -> Mapping[str, Any]:
        if media_type is MediaType.SCRIPT:
            return self._config.js_compression_options
        return self._config.css_compression_options
