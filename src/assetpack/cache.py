"""Caller-controlled render cache.

A plain dict in front of the renderer.  There is no partial
invalidation: ``reset()`` clears everything.
"""

import threading
from collections.abc import Callable

Renderer = Callable[[str], bytes]


class RenderCache:
    """In-memory store of rendered bytes keyed by public URI."""

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._entries[key] = value

    def reset(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries = {}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class CachedRenderer:
    """Wraps a renderer so each URI is rendered at most once per cache lifetime.

    Failures are not cached.
    """

    __slots__ = ("_cache", "_renderer")

    def __init__(self, renderer: Renderer, cache: RenderCache | None = None) -> None:
        self._renderer = renderer
        self._cache = cache if cache is not None else RenderCache()

    @property
    def cache(self) -> RenderCache:
        return self._cache

    def __call__(self, uri: str) -> bytes:
        cached = self._cache.get(uri)
        if cached is not None:
            return cached
        output = self._renderer(uri)
        self._cache.set(uri, output)
        return output

    def reset_cache(self) -> None:
        self._cache.reset()
