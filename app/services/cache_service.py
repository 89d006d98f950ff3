from enum import IntEnum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from pydantic_core import from_json, to_json

from app.services.ttl_cache import TTLCache
from app.utils.log import app_logger


class CacheTTL(IntEnum):
    """Duration tiers (seconds) cache consumers pick from."""
    SHORT = 5 * 60
    MEDIUM = 30 * 60
    LONG = 2 * 60 * 60
    DAILY = 24 * 60 * 60
    WEEKLY = 7 * 24 * 60 * 60


class CacheKeys:
    """Key builders so every consumer names entries the same way (`type:id[:qualifier]`)."""

    @staticmethod
    def user(user_id: str) -> str:
        return f"user:{user_id}"

    @staticmethod
    def user_progress(user_id: str) -> str:
        return f"user:{user_id}:progress"

    @staticmethod
    def user_stats(user_id: str) -> str:
        return f"user:{user_id}:stats"

    @staticmethod
    def algorithm(algorithm_id: str) -> str:
        return f"algorithm:{algorithm_id}"

    @staticmethod
    def algorithms(filters: Optional[str] = None) -> str:
        return f"algorithms:{filters}" if filters else "algorithms"

    @staticmethod
    def categories() -> str:
        return "categories"

    @staticmethod
    def challenge(challenge_id: str) -> str:
        return f"challenge:{challenge_id}"

    @staticmethod
    def challenges(filters: Optional[str] = None) -> str:
        return f"challenges:{filters}" if filters else "challenges"

    @staticmethod
    def daily_challenge(date: str) -> str:
        return f"daily_challenge:{date}"

    @staticmethod
    def leaderboard(board_type: str, period: Optional[str] = None) -> str:
        return f"leaderboard:{board_type}:{period}" if period else f"leaderboard:{board_type}"

    @staticmethod
    def rate_limit(ip: str, endpoint: str) -> str:
        return f"rate_limit:{ip}:{endpoint}"

    @staticmethod
    def session(session_id: str) -> str:
        return f"session:{session_id}"

    @staticmethod
    def admin_collection(resource: str) -> str:
        return f"admin:{resource}"


class CacheService:
    """Best-effort JSON cache on top of a `TTLCache`.

    Callers treat the cache as optional: nothing here raises. A value that
    cannot be serialized is not stored, a payload that cannot be parsed is a
    miss, and both are logged.
    """

    def __init__(self, store: TTLCache):
        self.store = store

    @staticmethod
    def _dump(value: Any) -> str:
        return to_json(value).decode()

    async def get(self, key: str) -> Optional[Any]:
        try:
            raw = await self.store.get(key)
            return from_json(raw) if raw is not None else None
        except ValueError as e:
            app_logger.warning("cache.get.error", key=key, error=str(e))
            return None

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> bool:
        try:
            await self.store.set(key, self._dump(value), ttl_seconds)
            return True
        except ValueError as e:
            app_logger.warning("cache.set.error", key=key, error=str(e))
            return False

    async def delete(self, key: str) -> bool:
        await self.store.delete(key)
        return True

    async def delete_many(self, keys: List[str]) -> bool:
        await self.store.delete_many(keys)
        return True

    async def exists(self, key: str) -> bool:
        return await self.store.exists(key)

    async def expire(self, key: str, ttl_seconds: int) -> bool:
        return await self.store.expire(key, ttl_seconds)

    async def mget(self, keys: List[str]) -> List[Optional[Any]]:
        if not keys:
            return []
        values = []
        for key, raw in zip(keys, await self.store.multi_get(keys)):
            try:
                values.append(from_json(raw) if raw is not None else None)
            except ValueError as e:
                app_logger.warning("cache.mget.error", key=key, error=str(e))
                values.append(None)
        return values

    async def mset(self, pairs: Mapping[str, Any], ttl_seconds: Optional[int] = None) -> bool:
        try:
            serialized = {key: self._dump(value) for key, value in pairs.items()}
        except ValueError as e:
            app_logger.warning("cache.mset.error", keys=list(pairs), error=str(e))
            return False

        await self.store.multi_set(serialized)
        # uniform expiry is applied as a second step
        if ttl_seconds is not None:
            for key in serialized:
                await self.store.expire(key, ttl_seconds)
        return True

    async def incr(self, key: str) -> Optional[int]:
        try:
            return await self.store.increment(key)
        except ValueError as e:
            app_logger.warning("cache.incr.error", key=key, error=str(e))
            return None

    async def decr(self, key: str) -> Optional[int]:
        try:
            return await self.store.decrement(key)
        except ValueError as e:
            app_logger.warning("cache.decr.error", key=key, error=str(e))
            return None

    async def keys(self, pattern: str) -> List[str]:
        return await self.store.scan_keys(pattern)

    async def clear_pattern(self, pattern: str) -> int:
        keys = await self.store.scan_keys(pattern)
        if keys:
            await self.store.delete_many(keys)
        app_logger.info("cache.clear_pattern", pattern=pattern, cleared=len(keys))
        return len(keys)

    async def info(self) -> Dict[str, Any]:
        keys = await self.store.scan_keys("*")
        return {"keys": sorted(keys), "size": len(keys)}

    async def remember(
        self,
        key: str,
        ttl_seconds: Optional[int],
        loader: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached value for `key`, or await `loader()` and cache its result.

        A cached JSON `null` is a hit, so a loader returning None runs once per TTL.
        """
        raw = await self.store.get(key)
        if raw is not None:
            try:
                cached = from_json(raw)
                app_logger.debug("cache.hit", key=key)
                return cached
            except ValueError as e:
                app_logger.warning("cache.get.error", key=key, error=str(e))

        app_logger.debug("cache.miss", key=key)
        value = await loader()
        await self.set(key, value, ttl_seconds)
        return value
