"""The ``Assets`` object — one application's asset setup.

Ties a registry to its resolver, glob engine, renderer, and builder.
Each instance is independent; there is no module-level state.

Basic usage::

    from assetpack import AssetConfig, Assets

    def configure(assets):
        assets.serve("/vendor", "vendor/js")
        assets.js("app", "/js", ["/vendor/*.js", "/js/*.js"])
        assets.css("app", "/css", ["/css/*.css"])

    assets = Assets(AssetConfig(root="/srv/site"), configure)
    assets.build(on_write=print)
"""

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from assetpack._internal.multimap import MultiValueMapping
from assetpack.build import ArtifactWriter, Builder, Renderer
from assetpack.busters import TokenSource, mtime_token
from assetpack.cache import CachedRenderer, RenderCache
from assetpack.compilers import Compilers, default_compilers
from assetpack.config import AssetConfig
from assetpack.discovery import GlobEngine
from assetpack.package import MediaType, Package
from assetpack.pipeline import AssetPipeline
from assetpack.registry import AssetRegistry
from assetpack.resolver import FileResolver


class Assets:
    """Asset registry plus everything that queries or builds from it."""

    __slots__ = ("_builder", "_cache", "_globber", "_pipeline", "_registry", "_resolver", "config")

    def __init__(
        self,
        config: AssetConfig | None = None,
        configure: Callable[["Assets"], None] | None = None,
        *,
        compilers: Compilers | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.config = config or AssetConfig()
        compilers = compilers if compilers is not None else default_compilers()

        self._registry = AssetRegistry(self.config.root, formats=compilers.formats())
        self._resolver = FileResolver(self._registry)
        self._globber = GlobEngine(self._registry)
        self._builder = Builder(self._registry, self.config.output_root)
        self._cache = RenderCache()

        self._pipeline: Renderer = renderer or AssetPipeline(self._registry, compilers, self.config)
        if self.config.cache_renders:
            self._pipeline = CachedRenderer(self._pipeline, self._cache)

        for prefix, directory in self.config.served:
            self._registry.serve(prefix, directory)

        if configure is not None:
            configure(self)

    # -- Declarations -----------------------------------------------------

    def serve(self, prefix: str, directory: str | Path | None = None) -> None:
        self._registry.serve(prefix, directory)

    def reset(self) -> None:
        """Undo the default mappings (and everything else declared).

        Cached renders are dropped too; package membership never
        survives a reset.
        """
        self._registry.reset()
        self._cache.reset()

    def js(self, name: str, path: str, files: Iterable[str] = ()) -> Package:
        return self._registry.js(name, path, files)

    def css(self, name: str, path: str, files: Iterable[str] = ()) -> Package:
        return self._registry.css(name, path, files)

    def add_package(
        self, name: str, type: MediaType, path: str, files: Iterable[str] = ()
    ) -> Package:
        return self._registry.add_package(name, type, path, files)

    # -- Queries ----------------------------------------------------------

    @property
    def registry(self) -> AssetRegistry:
        return self._registry

    @property
    def served(self) -> Mapping[str, str]:
        return self._registry.served

    @property
    def packages(self) -> Mapping[str, Package]:
        return self._registry.packages

    def resolve(self, uri: str) -> Path | None:
        return self._resolver.resolve(uri)

    def resolve_dynamic(self, uri: str, directory: str | None = None) -> Path | None:
        return self._resolver.resolve_dynamic(uri, directory)

    def is_served(self, uri: str) -> bool:
        return self._resolver.exists(uri)

    def all_files(self) -> dict[str, Path]:
        return self._globber.all_files()

    def glob(self, *patterns: str) -> MultiValueMapping:
        """``assets.glob("/js/vendor/*.js", "/js/*.js")``"""
        return self._globber.glob(patterns)

    def render(self, uri: str) -> bytes:
        return self._pipeline(uri)

    # -- Cache ------------------------------------------------------------

    @property
    def cache(self) -> RenderCache:
        return self._cache

    def reset_cache(self) -> None:
        self._cache.reset()

    # -- Build ------------------------------------------------------------

    def build(
        self,
        *,
        output_root: str | Path | None = None,
        writer: ArtifactWriter | None = None,
        token_source: TokenSource = mtime_token,
        on_write: Callable[[Path], None] | None = None,
    ) -> list[Path]:
        """Write every package and served file; see ``Builder.build``."""
        builder = self._builder if output_root is None else Builder(self._registry, output_root)
        return builder.build(
            self._pipeline,
            writer,
            token_source,
            on_write=on_write,
        )
