"""Cycle-safe deep copy of plain ``dict``/``list`` graphs."""
# ruff: noqa: ANN401

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .classify import Kind, classify, looks_mutable
from .errors import UnsupportedValueError
from .visited_cache import MISSING, VisitedCache

_Path = tuple[str, ...]
_T = TypeVar("_T")

_LOGGER = logging.getLogger(__name__)

__all__ = ["copy_into", "deep_copy"]


def _copy(value: Any, cache: VisitedCache, *, strict: bool, path: _Path) -> Any:
    kind = classify(value)
    if kind is Kind.ATOMIC:
        if looks_mutable(value):
            if strict:
                raise UnsupportedValueError(value, path)
            _LOGGER.debug(
                "Sharing %s at %s by reference",
                type(value).__name__,
                "/".join(path) or "<root>",
            )
        return value

    existing = cache.lookup(value)
    if existing is not MISSING:
        return existing

    if kind is Kind.SEQUENCE:
        new_list: list[Any] = []
        # Registered before the children so back-references resolve to it.
        cache.register(value, new_list)
        for index, item in enumerate(value):
            new_list.append(
                _copy(item, cache, strict=strict, path=(*path, f"[{index}]"))
            )
        return new_list

    new_dict: dict[Any, Any] = {}
    cache.register(value, new_dict)
    for key, item in value.items():
        new_dict[key] = _copy(item, cache, strict=strict, path=(*path, f"[{key!r}]"))
    return new_dict


def copy_into(value: _T, cache: VisitedCache, *, strict: bool = False) -> _T:
    """Deep copy ``value`` using an explicit, caller-owned ``cache``.

    Containers already present in ``cache`` are not copied again, so several
    calls sharing one cache produce copies that share structure exactly where
    the originals do.

    Parameters
    ----------
    value : object
        The value to clone. Only exact ``dict`` and ``list`` instances are
        rebuilt; everything else is returned unchanged.
    cache : VisitedCache
        Registry of containers copied so far. It is updated in place; if the
        copy raises, the entries it added are removed again.
    strict : bool, optional
        Raise :class:`UnsupportedValueError` instead of sharing a mutable value
        that is not a plain container.

    Returns:
    -------
    object
        The copy of ``value``.
    """
    mark = len(cache)
    try:
        return _copy(value, cache, strict=strict, path=())
    except Exception:
        # Half-built containers must not be handed out by later lookups.
        cache.truncate(mark)
        raise


def deep_copy(value: _T, *, strict: bool = False) -> _T:
    """Return a deep copy of ``value`` that preserves cycles and shared references.

    Every call starts from an empty :class:`VisitedCache`; nothing is remembered
    between calls.
    """
    return copy_into(value, VisitedCache(), strict=strict)
