"""Thread-safe LRU cache for compiled templates.

Specifier parsing depends only on a template's literal segments, so the
compiled plan for a given tuple of strings can be reused by every render of
that template, whatever values it is rendered with.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Keys are the literal segments as a tuple of str
    - Compile failures are never cached; they raise on every call

Python 3.13+.
"""

import logging
from collections import OrderedDict
from collections.abc import Sequence
from threading import RLock

from tmplfmt.constants import DEFAULT_CACHE_SIZE
from tmplfmt.syntax import CompiledTemplate, compile_template

__all__ = ["CompileCache"]

logger = logging.getLogger(__name__)

_CacheKey = tuple[str, ...]


class CompileCache:
    """Thread-safe LRU cache of CompiledTemplate objects.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)

    Example:
        >>> cache = CompileCache(maxsize=2)
        >>> first = cache.get_or_compile(["", ":>5"])
        >>> cache.get_or_compile(("", ":>5")) is first
        True
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize compile cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, CompiledTemplate] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get_or_compile(self, strings: Sequence[str]) -> CompiledTemplate:
        """Return the compiled plan for ``strings``, compiling on a miss.

        Compilation runs outside the lock; two threads missing on the same
        key both compile and the later store wins, which is harmless because
        compiled plans are immutable and equal.

        Raises:
            MalformedSpecifierError: Propagated from compilation
            MissingArgumentError: Propagated from compilation
        """
        key = tuple(strings)
        with self._lock:
            compiled = self._cache.get(key)
            if compiled is not None:
                self._cache.move_to_end(key)
                self._hits += 1
                return compiled
            self._misses += 1

        compiled = compile_template(key)
        logger.debug("Compiled template with %d slot(s)", compiled.slot_count)

        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)  # Remove first (oldest)
            self._cache[key] = compiled
        return compiled

    def clear(self) -> None:
        """Clear all cached entries and reset metrics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        """Get current cache size."""
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses
