"""Tests for the JSON cache facade."""

import pytest

from app.services.cache_service import CacheKeys, CacheService, CacheTTL


def test_cache_keys_follow_type_id_qualifier_scheme() -> None:
    assert CacheKeys.user("42") == "user:42"
    assert CacheKeys.user_progress("42") == "user:42:progress"
    assert CacheKeys.leaderboard("global") == "leaderboard:global"
    assert CacheKeys.leaderboard("global", "weekly") == "leaderboard:global:weekly"
    assert CacheKeys.rate_limit("1.2.3.4", "/login") == "rate_limit:1.2.3.4:/login"
    assert CacheKeys.admin_collection("users") == "admin:users"


def test_ttl_tiers() -> None:
    assert CacheTTL.SHORT == 300
    assert CacheTTL.DAILY == 86400
    assert CacheTTL.WEEKLY == 7 * CacheTTL.DAILY


@pytest.mark.asyncio
async def test_set_and_get_round_trip_structures(cache: CacheService) -> None:
    payload = {"id": "u-1", "tags": ["a", "b"], "level": 3, "premium": False}
    assert await cache.set("user:u-1", payload, CacheTTL.SHORT) is True
    assert await cache.get("user:u-1") == payload


@pytest.mark.asyncio
async def test_get_expired_entry_is_a_miss(cache: CacheService, clock) -> None:
    await cache.set("user:u-1", {"id": "u-1"}, 10)
    clock.advance(11)
    assert await cache.get("user:u-1") is None


@pytest.mark.asyncio
async def test_unserializable_value_is_not_stored(cache: CacheService) -> None:
    assert await cache.set("bad", {"value": object()}) is False
    assert await cache.exists("bad") is False


@pytest.mark.asyncio
async def test_corrupt_payload_reads_as_miss(cache: CacheService, store) -> None:
    await store.set("broken", "{not json")
    assert await cache.get("broken") is None


@pytest.mark.asyncio
async def test_mget_decodes_each_position(cache: CacheService, store) -> None:
    await cache.set("a", [1, 2])
    await store.set("broken", "{")
    assert await cache.mget(["a", "missing", "broken"]) == [[1, 2], None, None]
    assert await cache.mget([]) == []


@pytest.mark.asyncio
async def test_mset_applies_uniform_ttl(cache: CacheService, clock) -> None:
    assert await cache.mset({"x": 1, "y": {"z": 2}}, ttl_seconds=5) is True
    assert await cache.mget(["x", "y"]) == [1, {"z": 2}]
    clock.advance(6)
    assert await cache.mget(["x", "y"]) == [None, None]


@pytest.mark.asyncio
async def test_mset_stores_nothing_when_one_value_fails(cache: CacheService) -> None:
    assert await cache.mset({"good": 1, "bad": object()}) is False
    assert await cache.exists("good") is False


@pytest.mark.asyncio
async def test_incr_and_decr(cache: CacheService, store) -> None:
    assert await cache.incr("hits") == 1
    assert await cache.incr("hits") == 2
    assert await cache.decr("hits") == 1

    await store.set("text", '"abc"')
    assert await cache.incr("text") is None


@pytest.mark.asyncio
async def test_clear_pattern_counts_deleted_keys(cache: CacheService) -> None:
    await cache.mset({"user:1": 1, "user:2": 2, "session:1": 3})
    assert await cache.clear_pattern("user:*") == 2
    assert await cache.keys("*") == ["session:1"]
    assert await cache.clear_pattern("user:*") == 0


@pytest.mark.asyncio
async def test_info_lists_live_keys(cache: CacheService, clock) -> None:
    await cache.set("b", 1)
    await cache.set("a", 1)
    await cache.set("gone", 1, 1)
    clock.advance(2)
    assert await cache.info() == {"keys": ["a", "b"], "size": 2}


@pytest.mark.asyncio
async def test_remember_loads_once_until_expiry(cache: CacheService, clock) -> None:
    calls = []

    async def loader():
        calls.append(1)
        return [{"id": len(calls)}]

    assert await cache.remember("admin:users", 30, loader) == [{"id": 1}]
    assert await cache.remember("admin:users", 30, loader) == [{"id": 1}]
    assert len(calls) == 1

    clock.advance(31)
    assert await cache.remember("admin:users", 30, loader) == [{"id": 2}]
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_delete_and_expire(cache: CacheService, clock) -> None:
    await cache.set("k", 1)
    assert await cache.expire("k", 1) is True
    assert await cache.expire("absent", 1) is False
    clock.advance(2)
    assert await cache.exists("k") is False

    await cache.set("j", 1)
    assert await cache.delete("j") is True
    assert await cache.delete_many(["j", "k"]) is True
    assert await cache.get("j") is None


@pytest.mark.asyncio
async def test_remember_treats_cached_null_as_hit(cache: CacheService) -> None:
    calls = []

    async def loader():
        calls.append(1)
        return None

    assert await cache.remember("daily_challenge:2024-01-21", 60, loader) is None
    assert await cache.remember("daily_challenge:2024-01-21", 60, loader) is None
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_remember_reloads_corrupt_entry(cache: CacheService, store) -> None:
    await store.set("admin:users", "{")

    async def loader():
        return [{"id": "u-1"}]

    assert await cache.remember("admin:users", 60, loader) == [{"id": "u-1"}]
    assert await cache.get("admin:users") == [{"id": "u-1"}]
