"""Custom decorators for Wallclock.

This module provides decorator utilities for the library:
    - @deprecated(message): Mark callables as deprecated with warnings
    - @memoize: Thread-safe memoization for expensive lookups

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import threading
import warnings
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


def deprecated(message: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Mark a function as deprecated with a warning message.

    This is a parameterized decorator that emits a DeprecationWarning
    when the decorated function is called. It also works under
    ``@property``.

    Args:
        message: The deprecation message explaining what to use instead.

    Returns:
        A decorator function.

    Examples:
        >>> @deprecated("use timezone instead")
        ... def zone(self):
        ...     return self.timezone
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            warnings.warn(
                f"{func.__name__} is deprecated: {message}",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        wrapper._deprecated = True  # type: ignore[attr-defined]
        wrapper._deprecation_message = message  # type: ignore[attr-defined]
        return wrapper

    return decorator


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Memoize a function with hashable arguments.

    Concurrent first calls may both compute the value; the first result
    stored wins and the other is discarded, so the function must be
    idempotent.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def load_table(path: str) -> dict:
        ...     return {}
    """
    cache: dict[tuple, T] = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        with lock:
            if key in cache:
                return cache[key]
        value = func(*args, **kwargs)
        with lock:
            return cache.setdefault(key, value)

    def clear() -> None:
        with lock:
            cache.clear()

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "deprecated",
    "memoize",
]
