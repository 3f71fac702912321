"""Decorator that calls a function with cycle-safe copies of its arguments."""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import TYPE_CHECKING, ParamSpec, TypeVar, cast, overload

from .deep_copy import copy_into
from .visited_cache import VisitedCache

if TYPE_CHECKING:
    from collections.abc import Callable
else:  # pragma: no cover
    import collections.abc as _abc

    Callable = _abc.Callable

_P = ParamSpec("_P")
_T = TypeVar("_T")

_LOGGER = logging.getLogger(__name__)

__all__ = ["copy_arguments"]


def _copy_call_arguments(
    func: Callable[..., object],
    args: tuple[object, ...],
    kwargs: dict[str, object],
    *,
    strict: bool,
) -> tuple[tuple[object, ...], dict[str, object]]:
    # One cache for the whole call keeps aliasing between arguments intact.
    cache = VisitedCache()
    copied_args = tuple(copy_into(arg, cache, strict=strict) for arg in args)
    copied_kwargs = {
        key: copy_into(value, cache, strict=strict) for key, value in kwargs.items()
    }
    name = getattr(func, "__qualname__", None) or repr(func)
    _LOGGER.debug("Copied %d container(s) for %s", len(cache), name)
    return copied_args, copied_kwargs


@overload
def copy_arguments(fn: Callable[_P, _T]) -> Callable[_P, _T]: ...


@overload
def copy_arguments(
    *, strict: bool = False
) -> Callable[[Callable[_P, _T]], Callable[_P, _T]]: ...


def copy_arguments(
    fn: Callable[_P, _T] | None = None, *, strict: bool = False
) -> Callable[[Callable[_P, _T]], Callable[_P, _T]] | Callable[_P, _T]:
    """Invoke ``fn`` with deep copies of its positional and keyword arguments.

    All arguments of a single call are copied with one shared
    :class:`VisitedCache`, so an object passed twice, or reachable from two
    arguments, is still one object inside ``fn``. The caller's objects are never
    touched by whatever ``fn`` does to its copies. With ``strict=True`` an
    argument holding mutable state that cannot be cloned raises
    :class:`UnsupportedValueError` before ``fn`` runs.
    """

    def decorator(func: Callable[_P, _T]) -> Callable[_P, _T]:
        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
                copied_args, copied_kwargs = _copy_call_arguments(
                    func, args, kwargs, strict=strict
                )
                return await func(*copied_args, **copied_kwargs)

            return cast("Callable[_P, _T]", async_wrapper)

        @wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
            copied_args, copied_kwargs = _copy_call_arguments(
                func, args, kwargs, strict=strict
            )
            return func(*copied_args, **copied_kwargs)

        return wrapper

    if fn is not None:
        return decorator(fn)
    return decorator
