"""Exceptions raised by the strict copy mode."""

from __future__ import annotations

__all__ = ["UnsupportedValueError"]


class UnsupportedValueError(TypeError):
    """A mutable value would be shared between the original and the copy.

    Attributes:
    ----------
    value : object
        The value that was reached and could not be cloned.
    path : tuple[str, ...]
        Location of ``value`` inside the copied graph, e.g. ``("['a']", "[0]")``.
    """

    def __init__(self, value: object, path: tuple[str, ...] = ()) -> None:
        self.value = value
        self.path = path
        where = "/".join(path) or "<root>"
        super().__init__(
            f"Cannot deep copy {type(value).__name__} at {where}: "
            "only plain dict and list containers are cloned"
        )
