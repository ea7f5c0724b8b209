"""Keys for caching enforcement decisions."""

from __future__ import annotations

import abc
from typing import Any

KEY_SEPARATOR = "$$"


class CacheableParam(abc.ABC):
    """A request value that can contribute to a decision-cache key.

    Any object with a callable ``cache_key`` method counts as one, whether or
    not it derives from this class.
    """

    @abc.abstractmethod
    def cache_key(self) -> str:
        """Return the text that identifies this value in a cache key."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is CacheableParam:
            method = getattr(subclass, "cache_key", None)
            if callable(method):
                return True
        return NotImplemented


def get_cache_key(*args: Any) -> str | None:
    """Build the cache key for a request, or return None if it cannot be cached.

    Strings are used as they are and cacheable values contribute their own
    key; each part is followed by ``$$``. Any other value makes the request
    uncacheable.
    """
    parts: list[str] = []
    for arg in args:
        if isinstance(arg, str):
            parts.append(arg)
        elif isinstance(arg, CacheableParam):
            parts.append(arg.cache_key())
        else:
            return None
        parts.append(KEY_SEPARATOR)
    return "".join(parts)