"""Assetpack exception hierarchy.

Shared across the registry, resolver, pipeline, and builder so every
module raises and catches the same types.  "Not found" is never an
exception: resolution queries return ``None``.
"""

from dataclasses import dataclass


class AssetpackError(Exception):
    """Base for all assetpack-specific errors."""


class InvalidArgument(AssetpackError):  # noqa: N818 — mirrors the registry vocabulary
    """Raised when asset configuration is malformed.

    Typically raised while declaring mappings, e.g. ``serve()`` without
    a source directory.
    """


class CompilerNotInstalledError(AssetpackError):
    """Raised when an optional compile integration's library is missing."""


@dataclass(frozen=True, slots=True)
class RenderError(AssetpackError):
    """The renderer could not produce output for a public URI."""

    uri: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.uri}: {self.detail}"
        return self.uri


@dataclass(frozen=True, slots=True)
class BuildFailed(AssetpackError):  # noqa: N818 — conventional name for build aborts
    """A build aborted while producing one asset.

    The original ``RenderError`` or ``OSError`` is chained as
    ``__cause__``.  Files written before the failure stay on disk.
    """

    path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"Build failed at {self.path}: {self.detail}"
        return f"Build failed at {self.path}"
