"""Classification of values into the kinds the deep copy understands."""
# ruff: noqa: ANN401

from __future__ import annotations

import enum
import types
from collections.abc import Mapping, MutableSequence, MutableSet
from typing import Any

__all__ = ["Kind", "classify", "looks_mutable"]


class Kind(enum.Enum):
    """The closed set of shapes a value can take during a deep copy."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ATOMIC = "atomic"


def classify(value: Any) -> Kind:
    """Return the :class:`Kind` of ``value``.

    Only exact ``list`` and ``dict`` instances are containers. Subclasses,
    tuples, sets and array-like objects all classify as ``Kind.ATOMIC`` and are
    returned as-is by the copy.
    """
    value_type = type(value)
    if value_type is list:
        return Kind.SEQUENCE
    if value_type is dict:
        return Kind.MAPPING
    return Kind.ATOMIC


def looks_mutable(value: Any) -> bool:
    """Return ``True`` if an atomic ``value`` would alias mutable state.

    Used by strict mode to reject values that a caller probably expected to be
    cloned, such as ``dict`` subclasses, sets, ``bytearray`` or plain objects
    carrying instance attributes.
    """
    if classify(value) is not Kind.ATOMIC:
        return False
    if isinstance(value, (Mapping, MutableSequence, MutableSet, bytearray)):
        return True
    if isinstance(value, (type, types.ModuleType, enum.Enum)) or callable(value):
        return False
    return hasattr(value, "__dict__")
