"""Compression backends, selected by name from ``AssetConfig``.

Only whitespace-level backends ship here; real minifiers are passed to
``AssetPipeline`` as extra backends.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from assetpack.errors import InvalidArgument
from assetpack.package import MediaType

# (source text, options) -> compressed text
CompressFn: TypeAlias = Callable[[str, Mapping[str, Any]], str]

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_CSS_SPACE = re.compile(r"\s+")
_CSS_PUNCTUATION = re.compile(r"\s*([{};:,>])\s*")


def no_compression(source: str, options: Mapping[str, Any]) -> str:
    return source


def simple_css(source: str, options: Mapping[str, Any]) -> str:
    """Drop comments and collapse whitespace around CSS punctuation."""
    source = _CSS_COMMENT.sub("", source)
    source = _CSS_SPACE.sub(" ", source)
    source = _CSS_PUNCTUATION.sub(r"\1", source)
    return source.replace(";}", "}").strip()


def simple_js(source: str, options: Mapping[str, Any]) -> str:
    """Strip indentation and blank lines, keeping line breaks."""
    lines = (line.strip() for line in source.splitlines())
    return "\n".join(line for line in lines if line)


BUILTIN_BACKENDS: Mapping[tuple[MediaType, str], CompressFn] = {
    (MediaType.SCRIPT, "none"): no_compression,
    (MediaType.SCRIPT, "simple"): simple_js,
    (MediaType.STYLE, "none"): no_compression,
    (MediaType.STYLE, "simple"): simple_css,
}


def get_compressor(
    media_type: MediaType,
    name: str,
    extra: Mapping[tuple[MediaType, str], CompressFn] | None = None,
) -> CompressFn:
    """Look up a backend, preferring *extra* over the built-ins.

    Raises:
        InvalidArgument: If no backend is registered under *name*.
    """
    backends = {**BUILTIN_BACKENDS, **(extra or {})}
    try:
        return backends[(media_type, name)]
    except KeyError:
        available = ", ".join(sorted(n for t, n in backends if t is media_type))
        msg = f"Unknown {media_type.extension} compression {name!r} (available: {available})"
        raise InvalidArgument(msg) from None
