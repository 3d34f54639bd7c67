"""
Bounded, time-expiring cache for routing results.

Keys are raw user messages; values are ClassificationResult instances.
Thread-safe: concurrent route() calls read and write without external locking.
"""
import time
from collections import OrderedDict
from threading import Lock
from typing import Callable, Generic, Hashable, Optional, Tuple, TypeVar

from ..schemas import CacheStatistics, ClassificationResult

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TTLCache(Generic[K, V]):
    """
    Thread-safe LRU cache with expire-after-write TTL.

    Features:
    - LRU eviction once maxsize is reached
    - TTL measured from the last write of a key
    - Cumulative hit/miss statistics
    """

    def __init__(self, maxsize: int, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        """
        :param maxsize: Maximum number of entries (0 stores nothing)
        :param ttl_seconds: Time-to-live after write
        :param clock: Monotonic time source, injectable for tests
        """
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got {ttl_seconds}")

        self.maxsize = maxsize
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._data: "OrderedDict[K, Tuple[V, float]]" = OrderedDict()  # (value, expires_at)
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._data[key]
                self._misses += 1
                return None

            self._data.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: K, value: V) -> None:
        with self._lock:
            if self.maxsize == 0:
                return

            self._data.pop(key, None)
            if len(self._data) >= self.maxsize:
                self._evict_expired()
            while len(self._data) >= self.maxsize:
                self._data.popitem(last=False)

            self._data[key] = (value, self._clock() + self.ttl_seconds)

    def _evict_expired(self) -> None:
        now = self._clock()
        expired = [k for k, (_, expires_at) in self._data.items() if now >= expires_at]
        for k in expired:
            del self._data[k]

    def counters(self) -> Tuple[int, int, int]:
        """Return (hits, misses, size) as one consistent snapshot."""
        with self._lock:
            return self._hits, self._misses, len(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class ResultCache:
    """
    Routing result cache configured in router terms (entries, minutes).
    """

    def __init__(self, max_size: int = 500, ttl_minutes: int = 60,
                 clock: Callable[[], float] = time.monotonic):
        self._max_size = max_size
        self._ttl_minutes = ttl_minutes
        self._cache: TTLCache[str, ClassificationResult] = TTLCache(
            maxsize=max_size,
            ttl_seconds=ttl_minutes * 60,
            clock=clock,
        )

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def ttl_minutes(self) -> int:
        return self._ttl_minutes

    def get(self, message: str) -> Optional[ClassificationResult]:
        return self._cache.get(message)

    def put(self, message: str, result: ClassificationResult) -> None:
        self._cache.set(message, result)

    def stats(self) -> CacheStatistics:
        """
        Cumulative statistics since construction.

        :return: CacheStatistics with request/hit/miss counts and hit rate
        """
        hits, misses, size = self._cache.counters()
        requests = hits + misses
        return CacheStatistics(
            enabled=True,
            request_count=requests,
            hit_count=hits,
            miss_count=misses,
            hit_rate=(hits / requests) if requests else 0.0,
            size=size,
            max_size=self._max_size,
            ttl_minutes=self._ttl_minutes,
        )

    def __len__(self) -> int:
        return len(self._cache)
