"""Ordered multi-valued mappings — the container returned by ``glob``.

Package file lists are order-sensitive (vendor scripts load before
application scripts) and a URI matched by two patterns must appear
twice, so a plain ``dict`` is not enough.
"""

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only URI -> local path mapping where keys can repeat.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key; ``items`` keeps every pair
    in order.

    Defined with explicit dunder methods because Python 3.14 Protocols
    cannot inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> Path: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: Path | None = None) -> Path | None: ...
    def get_list(self, key: str) -> list[Path]: ...
    def items(self) -> Sequence[tuple[str, Path]]: ...
    def values(self) -> list[Path]: ...


class FileList:
    """Immutable sequence of ``(public URI, local path)`` pairs.

    Iteration yields URIs in insertion order, duplicates included.
    ``len()`` counts pairs, not distinct keys.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, Path]] = ()) -> None:
        self._pairs: tuple[tuple[str, Path], ...] = tuple(pairs)

    def __getitem__(self, key: str) -> Path:
        for uri, local in self._pairs:
            if uri == key:
                return local
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(uri == key for uri, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        for uri, _ in self._pairs:
            yield uri

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileList):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        items = ", ".join(f"{uri!r}: {str(local)!r}" for uri, local in self._pairs)
        return f"FileList([{items}])"

    def get(self, key: str, default: Path | None = None) -> Path | None:
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[Path]:
        """Return all values for *key*, in insertion order."""
        return [local for uri, local in self._pairs if uri == key]

    def items(self) -> tuple[tuple[str, Path], ...]:
        """All pairs, duplicates included."""
        return self._pairs

    def keys(self) -> list[str]:
        return [uri for uri, _ in self._pairs]

    def values(self) -> list[Path]:
        return [local for _, local in self._pairs]
