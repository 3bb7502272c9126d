from typing import Any
from cachetools import TTLCache
from .config import settings

class Cache:
    """
    Thin abstraction over an in-process TTL cache.
    """
    def __init__(self, maxsize: int = 4096, ttl: int = settings.CACHE_TTL_SECONDS):
        self.backend = TTLCache(maxsize=maxsize, ttl=ttl)

    def get(self, key: str) -> Any | None:
        return self.backend.get(key)

    def set(self, key: str, value: Any) -> None:
        self.backend[key] = value

    def clear(self) -> None:
        self.backend.clear()

cache = Cache()

# Per-minute rate-limit buckets; kept apart so they never evict insight summaries
rate_cache = Cache(maxsize=10_000, ttl=60)
