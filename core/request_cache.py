"""
Request-scoped memoization for read services.

A page typically asks for the same user progress, units and course progress
several times while it is being built. Reads decorated with `request_cache`
hit the database once per request; `RequestCacheMiddleware` opens the cache
when a request starts and drops it when the response is ready. Outside of a
request (shell, management commands, most tests) the decorator calls straight
through.
"""

import functools
import logging
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

from asgiref.local import Local

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_state = Local()


def _get_store() -> Optional[Dict[Hashable, Any]]:
    return getattr(_state, "store", None)


def _make_key(func: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Hashable:
    """Builds a cache key; model instances are keyed by their class and pk."""

    def normalize(value: Any) -> Hashable:
        meta = getattr(value, "_meta", None)
        if meta is not None:
            return (meta.label_lower, value.pk)
        return value

    return (
        f"{func.__module__}.{func.__qualname__}",
        tuple(normalize(arg) for arg in args),
        tuple(sorted((name, normalize(value)) for name, value in kwargs.items())),
    )


def request_cache(func: F) -> F:
    """Memoizes `func` for the lifetime of the current request."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        store = _get_store()
        if store is None:
            return func(*args, **kwargs)
        key = _make_key(func, args, kwargs)
        if key not in store:
            store[key] = func(*args, **kwargs)
        return store[key]

    return wrapper  # type: ignore[return-value]


def start_request_cache() -> None:
    """Opens an empty cache for the current request."""
    _state.store = {}


def end_request_cache() -> None:
    """Discards the current request's cache."""
    if hasattr(_state, "store"):
        del _state.store


def invalidate_request_cache() -> None:
    """Drops every memoized read; called after each write."""
    store = _get_store()
    if store:
        logger.debug("Invalidating %d memoized reads.", len(store))
        store.clear()


class RequestCacheMiddleware:
    """Gives every request its own read cache."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_request_cache()
        try:
            return self.get_response(request)
        finally:
            end_request_cache()
