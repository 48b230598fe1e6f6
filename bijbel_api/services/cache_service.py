"""In-process cache for parsed per-book bundle files."""
import logging
import threading
from typing import Any, Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _generate_cache_key(prefix: str, *args: Any) -> str:
    """Generate a cache key from prefix and arguments.

    Args:
        prefix: Key prefix (e.g., 'book', 'crossrefs')
        *args: Values to include in the key

    Returns:
        Cache key string
    """
    return ":".join([prefix, *(str(arg) for arg in args)])


class CacheService:
    """Memoizes parsed books and cross-reference sets by book id.

    Entries are populated once and never mutated or evicted; the bundle is
    static, so only a process restart invalidates them. Failed loads are not
    stored, which keeps error behaviour identical to the uncached path.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._entries: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Get a value from cache, or None if absent or caching is disabled."""
        if not self.enabled:
            return None
        return self._entries.get(key)

    def get_or_load(self, key: str, loader: Callable[[], T]) -> T:
        """Return the cached value for ``key``, populating it with ``loader`` on a miss.

        Exceptions raised by ``loader`` propagate and leave the cache untouched.
        """
        if not self.enabled:
            return loader()

        cached = self.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                return cached
            logger.info(f"Cache miss for key: {key}")
            value = loader()
            self._entries[key] = value
            return value

    def __len__(self) -> int:
        return len(self._entries)

    # Convenience methods for specific cache types

    def get_book(self, book_id: str, loader: Callable[[], T]) -> T:
        return self.get_or_load(_generate_cache_key("book", book_id), loader)

    def get_cross_references(self, book_id: str, loader: Callable[[], T]) -> T:
        return self.get_or_load(_generate_cache_key("crossrefs", book_id), loader)
