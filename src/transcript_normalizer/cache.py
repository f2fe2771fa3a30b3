"""In-memory TTL cache for normalized transcripts."""

import hashlib

from cachetools import TTLCache


class TranscriptCache:
    """Caches normalized transcripts keyed by a digest of the raw content.

    Normalization is deterministic, so equal content always maps to an equal
    result.
    """

    def __init__(self, max_size: int = 100, ttl: int = 3600):
        self._cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl)
        self._hits = 0
        self._misses = 0

    def _key(self, content: str) -> str:
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    def get(self, content: str) -> dict | None:
        result = self._cache.get(self._key(content))
        if result is not None:
            self._hits += 1
        else:
            self._misses += 1
        return result

    def set(self, content: str, data: dict) -> None:
        self._cache[self._key(content)] = data

    def stats(self) -> dict:
        return {
            "size": len(self._cache),
            "max_size": self._cache.maxsize,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / max(self._hits + self._misses, 1) * 100, 1),
        }
