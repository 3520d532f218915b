"""Custom decorators for Tempotime.

This module provides decorator utilities for the library:
    - @memoize: Simple memoization decorator with an optional size cap

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import threading
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(
    func: Callable[P, T] | None = None, *, maxsize: int | None = None
) -> Callable[P, T]:
    """Simple memoization decorator for functions with hashable arguments.

    Results are stored in a dict keyed by the call arguments. With
    ``maxsize`` set, the oldest entry is evicted once the cache is full.
    Exceptions are not cached.

    Args:
        func: The function to memoize.
        maxsize: Maximum number of cached results, or None for no limit.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def square(n: int) -> int:
        ...     return n ** 2

        >>> @memoize(maxsize=2)
        ... def cube(n: int) -> int:
        ...     return n ** 3
    """
    if func is None:
        return functools.partial(memoize, maxsize=maxsize)  # type: ignore[return-value]
    if maxsize is not None and maxsize < 1:
        raise ValueError(f"maxsize must be positive, got {maxsize}")

    cache: dict[tuple, T] = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        try:
            return cache[key]
        except KeyError:
            pass
        result = func(*args, **kwargs)
        with lock:
            if maxsize is not None:
                while len(cache) >= maxsize:
                    del cache[next(iter(cache))]
            cache[key] = result
        return result

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
