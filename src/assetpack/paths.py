"""Path/URI algebra — local asset files to public URIs.

Pure functions, no I/O.  The extension map (``{"kcss": "css"}``) comes
from the installed compile integrations (see ``assetpack.compilers``).
"""

import re
from collections.abc import Mapping
from pathlib import Path

from assetpack.errors import InvalidArgument

_REPEATED_SLASHES = re.compile(r"/{2,}")


def squeeze_slashes(path: str) -> str:
    """Collapse runs of ``/`` into one (``"/js//app.js"`` -> ``"/js/app.js"``)."""
    return _REPEATED_SLASHES.sub("/", path)


def extension_of(uri: str) -> str | None:
    """Return the final extension of *uri* without the dot, or ``None``."""
    name = uri.rsplit("/", 1)[-1]
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        return None
    return ext


def to_public_uri(
    local_file: str | Path,
    prefix: str,
    local_root: str | Path,
    extension_map: Mapping[str, str] | None = None,
) -> str:
    """Return the public URI a local file is served under.

    Strips *local_root* from *local_file*, prepends *prefix* and squeezes
    repeated slashes.  When the file's extension has an entry in
    *extension_map*, the URI carries the compiled extension instead::

        to_public_uri("/srv/app/css/file.kcss", "/styles", "/srv/app/css",
                      {"kcss": "css"})
        # -> "/styles/file.css"

    Raises:
        InvalidArgument: If *prefix* or *local_root* is empty.
    """
    if not prefix:
        raise InvalidArgument("to_public_uri() requires a URL prefix")
    if not str(local_root):
        raise InvalidArgument("to_public_uri() requires a local root directory")

    local = Path(local_file).as_posix()
    root = Path(local_root).as_posix()
    relative = local[len(root) :] if local.startswith(root) else local
    uri = squeeze_slashes(f"{prefix}/{relative}")

    ext = extension_of(uri)
    if ext is not None and extension_map:
        target = extension_map.get(ext)
        if target:
            uri = f"{uri[: -len(ext)]}{target}"
    return uri
