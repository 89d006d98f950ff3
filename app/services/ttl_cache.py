import re
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

# expiry used for entries stored without a TTL
NEVER_EXPIRES = sys.maxsize


@dataclass
class CacheEntry:
    value: str
    expires_at_ms: int


class TTLCache:
    """In-process key/value store with per-key expiry.

    Values are opaque strings (the cache service layers JSON on top). The
    methods are coroutines so the store can be swapped for a networked cache,
    but none of them awaits anything: a call never yields mid-mutation, so
    callers sharing one event loop cannot interleave inside an operation.

    Expired entries are evicted lazily when read, or in bulk by `cleanup()`
    which the owning process runs periodically.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _expires_at(self, ttl_seconds: Optional[float]) -> int:
        if ttl_seconds is None:
            return NEVER_EXPIRES
        return self._now_ms() + int(ttl_seconds * 1000)

    def _live_entry(self, key: str) -> Optional[CacheEntry]:
        entry = self._store.get(key)
        if entry is None:
            return None
        if self._now_ms() > entry.expires_at_ms:
            # expired
            del self._store[key]
            return None
        return entry

    async def get(self, key: str) -> Optional[str]:
        entry = self._live_entry(key)
        return entry.value if entry else None

    async def set(self, key: str, value: str, ttl_seconds: Optional[float] = None) -> None:
        self._store[key] = CacheEntry(value=value, expires_at_ms=self._expires_at(ttl_seconds))

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    async def delete_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._store.pop(key, None)

    async def exists(self, key: str) -> bool:
        return self._live_entry(key) is not None

    async def expire(self, key: str, ttl_seconds: float) -> bool:
        """Move the expiry of an existing key. Returns False if the key is absent."""
        entry = self._live_entry(key)
        if entry is None:
            return False
        entry.expires_at_ms = self._expires_at(ttl_seconds)
        return True

    async def multi_get(self, keys: Iterable[str]) -> List[Optional[str]]:
        return [await self.get(key) for key in keys]

    async def multi_set(self, pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, value in items:
            await self.set(key, value)

    async def _add(self, key: str, delta: int) -> int:
        entry = self._live_entry(key)
        current = int(entry.value) if entry else 0
        new_value = current + delta
        # counters keep whatever expiry they already had
        expires_at = entry.expires_at_ms if entry else NEVER_EXPIRES
        self._store[key] = CacheEntry(value=str(new_value), expires_at_ms=expires_at)
        return new_value

    async def increment(self, key: str) -> int:
        return await self._add(key, 1)

    async def decrement(self, key: str) -> int:
        return await self._add(key, -1)

    async def scan_keys(self, pattern: str) -> List[str]:
        """Return live keys fully matching `pattern`, where `*` matches any run of characters."""
        regex = re.compile(".*".join(re.escape(part) for part in pattern.split("*")))
        matched = []
        for key in list(self._store):
            if regex.fullmatch(key) and self._live_entry(key) is not None:
                matched.append(key)
        return matched

    def cleanup(self) -> int:
        """Evict every expired entry and return how many were removed."""
        now = self._now_ms()
        expired = [key for key, entry in self._store.items() if now > entry.expires_at_ms]
        for key in expired:
            del self._store[key]
        return len(expired)

    def flush(self) -> None:
        self._store.clear()

    @property
    def size(self) -> int:
        return len(self._store)
