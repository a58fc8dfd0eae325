"""
Rendered-page cache with path revalidation.

Entries are keyed by (kind, path). A page entry belongs to one exact path.
Layout entries hold data shared by everything under a path, so revalidating
a layout drops every layout entry at or below it while leaving pages alone.
"""

import logging
import threading
from typing import Any, Literal

from cachetools import TTLCache

from resumelm.config import settings

logger = logging.getLogger(__name__)

PathKind = Literal["page", "layout"]


def _is_under(path: str, root: str) -> bool:
    if root == "/":
        return path.startswith("/")
    bare = path.split("?", 1)[0]
    return bare == root or bare.startswith(root.rstrip("/") + "/")


class PageCache:
    """Bounded TTL cache for rendered responses.

    Sync route handlers run on the server's threadpool and TTLCache is not
    thread-safe, so every access holds the lock.
    """

    def __init__(self, maxsize: int = 1024, ttl: int = 300):
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl)
        self._lock = threading.Lock()

    def get(self, path: str, kind: PathKind = "page") -> Any | None:
        with self._lock:
            return self._entries.get((kind, path))

    def set(self, path: str, value: Any, kind: PathKind = "page") -> None:
        with self._lock:
            self._entries[(kind, path)] = value

    def __contains__(self, key: tuple[str, str]) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def revalidate_path(self, path: str, kind: PathKind = "page") -> int:
        """Drop cached entries for `path`. Returns how many were evicted."""
        with self._lock:
            if kind == "page":
                evicted = 1 if self._entries.pop(("page", path), None) is not None else 0
            else:
                stale = [key for key in list(self._entries) if key[0] == "layout" and _is_under(key[1], path)]
                for key in stale:
                    self._entries.pop(key, None)
                evicted = len(stale)

        logger.debug(f"[revalidate_path] {kind} {path}: {evicted} entries evicted")
        return evicted

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


page_cache = PageCache(maxsize=settings.page_cache_size, ttl=settings.page_cache_ttl)


def revalidate_path(path: str, kind: PathKind = "page") -> int:
    return page_cache.revalidate_path(path, kind)
