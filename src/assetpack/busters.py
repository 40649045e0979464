"""Cache-buster tokens in file names.

``/js/app.js`` with token ``28389`` becomes ``/js/app.28389.js``.  The
codec is split into two explicit stripping stages, extension first and
token second, because the order matters whenever the served extension
differs from the source extension (``app.28389.css`` backed by
``app.kcss``).

A trailing all-digit segment is always treated as a token, so a file
genuinely named ``release.2024.js`` reads as ``release.js`` at version
``2024``.  The name alone cannot tell the two apart.

Token sources (``mtime_token``, ``content_token``) take the local files
behind an asset and return a digits-only token.
"""

import re
import zlib
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

_EXTENSION = re.compile(r"^(.*[^/])(\.[^./]+)$")
_TOKEN = re.compile(r"^(.*)\.([0-9]+)$")


class TokenSource(Protocol):
    """Supplies the cache-buster token for the files behind one asset."""

    def __call__(self, paths: Sequence[Path]) -> str: ...


def strip_extension(name: str) -> tuple[str, str]:
    """Split off the final extension: ``"app.28389.css"`` -> ``("app.28389", ".css")``."""
    match = _EXTENSION.match(name)
    if match is None:
        return name, ""
    return match.group(1), match.group(2)


def strip_token(stem: str) -> tuple[str, str | None]:
    """Split off a trailing numeric segment: ``"app.28389"`` -> ``("app", "28389")``."""
    match = _TOKEN.match(stem)
    if match is None or match.group(1).endswith("/") or not match.group(1):
        return stem, None
    return match.group(1), match.group(2)


def add_buster(uri: str, token: str) -> str:
    """Insert *token* before the final extension of *uri*."""
    stem, ext = strip_extension(uri)
    return f"{stem}.{token}{ext}"


def strip_buster(name: str) -> tuple[str, str | None]:
    """Inverse of :func:`add_buster`.

    Returns the unbusted name and the token, or *name* unchanged and
    ``None`` when no numeric segment precedes the extension.
    """
    stem, ext = strip_extension(name)
    base, token = strip_token(stem)
    if token is None:
        # Extension-less name: "/files/app.28389"
        base, token = strip_token(name)
        return base, token
    return f"{base}{ext}", token


def mtime_token(paths: Sequence[Path]) -> str:
    """Newest modification time among *paths*, in whole seconds."""
    mtimes = [int(p.stat().st_mtime) for p in paths if p.is_file()]
    return str(max(mtimes, default=0))


def content_token(paths: Sequence[Path]) -> str:
    """CRC-32 of the concatenated contents of *paths*, as decimal digits."""
    checksum = 0
    for path in paths:
        if path.is_file():
            checksum = zlib.crc32(path.read_bytes(), checksum)
    return str(checksum)
