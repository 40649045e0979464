"""Assetpack — asset registry and build engine for web applications.

Maps URL prefixes to local directories, groups files into script and
style packages, and builds concatenated and cache-busted artifacts.

Basic usage::

    from assetpack import AssetConfig, Assets

    assets = Assets(AssetConfig(root="."))
    assets.js("app", "/js", ["/js/vendor/*.js", "/js/*.js"])

    assets.resolve("/js/app.js")     # local Path or None
    assets.build()                   # writes public/js/app.js, public/js/app.<token>.js
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AssetConfig",
    "AssetRegistry",
    "Assets",
    "AssetpackError",
    "BuildFailed",
    "Builder",
    "FileList",
    "FileResolver",
    "GlobEngine",
    "InvalidArgument",
    "MediaType",
    "Package",
    "RenderError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import assetpack`` fast while providing a clean top-level API.
    """
    if name == "Assets":
        from assetpack.assets import Assets

        return Assets

    if name == "AssetConfig":
        from assetpack.config import AssetConfig

        return AssetConfig

    if name == "AssetRegistry":
        from assetpack.registry import AssetRegistry

        return AssetRegistry

    if name == "FileResolver":
        from assetpack.resolver import FileResolver

        return FileResolver

    if name == "GlobEngine":
        from assetpack.discovery import GlobEngine

        return GlobEngine

    if name == "Builder":
        from assetpack.build import Builder

        return Builder

    if name == "FileList":
        from assetpack._internal.multimap import FileList

        return FileList

    if name in ("MediaType", "Package"):
        from assetpack import package as _package

        return getattr(_package, name)

    if name in ("AssetpackError", "BuildFailed", "InvalidArgument", "RenderError"):
        from assetpack import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
