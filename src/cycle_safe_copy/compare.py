"""Structural comparison of value graphs, including cycles and sharing."""
# ruff: noqa: ANN401

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from .classify import Kind, classify

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
else:  # pragma: no cover - provide runtime aliases for introspection tools
    import collections.abc as _abc

    Iterable = _abc.Iterable
    Iterator = _abc.Iterator
    Sequence = _abc.Sequence

_Path = tuple[str, ...]
_Diff = tuple[_Path, str]

__all__ = ["first_difference", "same_topology_copy"]


class _Pairing:
    """Bijection between container nodes of two graphs, keyed by identity."""

    def __init__(self) -> None:
        self.left: dict[int, object] = {}
        self.right: dict[int, object] = {}

    def check(self, a: object, b: object) -> bool | None:
        """Return ``True`` if already paired, ``False`` on conflict, else ``None``."""
        partner = self.left.get(id(a))
        if partner is not None:
            return partner is b
        if id(b) in self.right:
            return False
        self.left[id(a)] = b
        self.right[id(b)] = a
        return None


def _describe_collection(items: Iterable[Any]) -> str:
    return "[" + ", ".join(sorted(repr(item) for item in items)) + "]"


def _truncated_repr(value: object) -> str:
    text = repr(value)
    if len(text) > 200:
        text = f"{text[:197]}..."
    return text


def _compare_sequence(
    seq_a: Sequence[Any], seq_b: Sequence[Any], path: _Path, pairing: _Pairing
) -> _Diff | None:
    if len(seq_a) != len(seq_b):
        return (*path, "<len>"), f"{len(seq_a)} -> {len(seq_b)}"
    for index, (left, right) in enumerate(zip(seq_a, seq_b, strict=True)):
        diff = _diff(left, right, (*path, f"[{index}]"), pairing)
        if diff:
            return diff
    return None


def _compare_mapping(
    a_dict: dict[Any, Any], b_dict: dict[Any, Any], path: _Path, pairing: _Pairing
) -> _Diff | None:
    a_keys: set[object] = set(a_dict.keys())
    b_keys: set[object] = set(b_dict.keys())
    if a_keys != b_keys:
        missing = a_keys - b_keys
        if missing:
            return (
                *path,
                "<dict-keys>",
            ), f"missing keys {_describe_collection(missing)}"
        added = b_keys - a_keys
        return (
            *path,
            "<dict-keys>",
        ), f"added keys {_describe_collection(added)}"
    for key in a_dict:
        diff = _diff(a_dict[key], b_dict[key], (*path, f"[{key!r}]"), pairing)
        if diff:
            return diff
    return None


def _diff(a: Any, b: Any, path: _Path, pairing: _Pairing) -> _Diff | None:
    if type(a) is not type(b):
        return path, f"type {type(a).__name__} -> {type(b).__name__}"

    kind = classify(a)
    if kind is Kind.ATOMIC:
        if a is not b and a != b:
            return path, f"value {_truncated_repr(a)} -> {_truncated_repr(b)}"
        return None

    paired = pairing.check(a, b)
    if paired is True:
        return None
    if paired is False:
        return (*path, "<shared>"), f"{type(a).__name__} is shared differently"

    if kind is Kind.SEQUENCE:
        return _compare_sequence(
            cast("Sequence[Any]", a), cast("Sequence[Any]", b), path, pairing
        )
    return _compare_mapping(
        cast("dict[Any, Any]", a), cast("dict[Any, Any]", b), path, pairing
    )


def first_difference(a: Any, b: Any) -> _Diff | None:
    """Return the first difference between ``a`` and ``b`` (if any).

    The result is a ``(path, message)`` pair. Plain containers are walked
    recursively; every container of ``a`` must correspond to exactly one
    container of ``b``, so cycles terminate and graphs whose reference sharing
    differs are reported with a ``<shared>`` path marker.
    """
    return _diff(a, b, (), _Pairing())


def _iter_containers(value: Any) -> Iterator[object]:
    seen: set[int] = set()
    stack: list[Any] = [value]
    while stack:
        node = stack.pop()
        kind = classify(node)
        if kind is Kind.ATOMIC or id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(node if kind is Kind.SEQUENCE else node.values())


def same_topology_copy(original: Any, copy: Any) -> bool:
    """Return ``True`` if ``copy`` is a faithful, fully detached deep copy.

    ``copy`` must be structurally equal to ``original`` with the same sharing
    and cycles, and must not reuse any ``dict`` or ``list`` node of ``original``.
    """
    if first_difference(original, copy) is not None:
        return False
    original_nodes = list(_iter_containers(original))
    original_ids = {id(node) for node in original_nodes}
    return all(id(node) not in original_ids for node in _iter_containers(copy))
