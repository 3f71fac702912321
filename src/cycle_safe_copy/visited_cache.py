"""Identity-keyed registry of containers already copied during a deep copy."""
# ruff: noqa: ANN401

from __future__ import annotations

from typing import Any, Final

__all__ = ["MISSING", "VisitedCache"]

MISSING: Final = object()


class VisitedCache:
    """Map originals to their copies by reference identity.

    Entries are keyed by ``id(original)``. The original itself is kept alive
    next to its copy so that its id cannot be reused by a new object while the
    cache exists.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[int, tuple[object, object]] = {}

    def lookup(self, original: Any, default: Any = MISSING) -> Any:
        """Return the copy registered for ``original`` or ``default``."""
        entry = self._entries.get(id(original))
        if entry is None:
            return default
        return entry[1]

    def register(self, original: Any, copy: Any) -> None:
        """Record ``copy`` as the clone of ``original``.

        Raises:
        -------
        ValueError
            If ``original`` already has a registered copy.
        """
        key = id(original)
        if key in self._entries:
            raise ValueError(
                f"{type(original).__name__} object at {key:#x} is already registered"
            )
        self._entries[key] = (original, copy)

    def truncate(self, size: int) -> None:
        """Drop every entry registered after the cache held ``size`` entries."""
        for key in list(self._entries)[size:]:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, original: object) -> bool:
        return id(original) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._entries)})"
