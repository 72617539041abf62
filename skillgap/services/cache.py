"""Process-local TTL cache for enrichment results.

Three stores, one per TTL class. Entries expire passively and vanish on
restart. Concurrent misses on the same key are not coalesced: each caller
may run its compute function.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Literal, TypeVar

from cachetools import TTLCache


logger = logging.getLogger(__name__)

T = TypeVar("T")

TTLClass = Literal["short", "medium", "long"]

TTL_SECONDS: dict[str, int] = {
    "short": 5 * 60,
    "medium": 30 * 60,
    "long": 2 * 60 * 60,
}

_MISSING = object()


def hash_string(value: str) -> str:
    """31-multiplier rolling hash over UTF-16 code units, folded to int32, base 36."""
    h = 0
    # surrogatepass keeps lone surrogates as their own code unit.
    data = value.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) - h + unit) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return _to_base36(abs(h))


def _to_base36(number: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if number == 0:
        return "0"
    out: list[str] = []
    while number:
        number, rem = divmod(number, 36)
        out.append(digits[rem])
    return "".join(reversed(out))


def build_cache_key(scope: str, subject_id: str | int, payload: str | None = None) -> str:
    key = f"{scope}:{subject_id}"
    if payload:
        key = f"{key}:{hash_string(payload)}"
    return key


class CacheStore:
    def __init__(self, *, maxsize: int = 1024, timer: Callable[[], float] = time.monotonic) -> None:
        self._stores: dict[str, TTLCache] = {
            name: TTLCache(maxsize=maxsize, ttl=ttl, timer=timer) for name, ttl in TTL_SECONDS.items()
        }
        self._lock = threading.Lock()

    def _store(self, ttl_class: str) -> TTLCache:
        try:
            return self._stores[ttl_class]
        except KeyError as exc:
            raise ValueError(f"Unknown cache TTL class: {ttl_class}") from exc

    def get(self, key: str, ttl_class: TTLClass = "medium", default: Any = None) -> Any:
        store = self._store(ttl_class)
        with self._lock:
            return store.get(key, default)

    def set(self, key: str, value: Any, ttl_class: TTLClass = "medium") -> None:
        store = self._store(ttl_class)
        with self._lock:
            store[key] = value

    def delete(self, key: str, ttl_class: TTLClass = "medium") -> None:
        store = self._store(ttl_class)
        with self._lock:
            store.pop(key, None)

    def flush(self) -> None:
        with self._lock:
            for store in self._stores.values():
                store.clear()

    def get_or_compute(self, key: str, compute_fn: Callable[[], T], ttl_class: TTLClass = "medium") -> T:
        cached = self.get(key, ttl_class, default=_MISSING)
        if cached is not _MISSING:
            logger.debug("cache hit key=%s ttl=%s", key, ttl_class)
            return cached

        logger.debug("cache miss key=%s ttl=%s", key, ttl_class)
        # Computed outside the lock.
        value = compute_fn()
        self.set(key, value, ttl_class)
        return value
