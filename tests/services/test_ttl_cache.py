"""Tests for the in-process TTL store."""

import pytest

from app.services.ttl_cache import NEVER_EXPIRES, TTLCache


@pytest.mark.asyncio
async def test_get_returns_value_before_expiry_and_misses_after(store: TTLCache, clock) -> None:
    await store.set("algorithm:1", "payload", ttl_seconds=10)

    clock.advance(9.5)
    assert await store.get("algorithm:1") == "payload"

    clock.advance(1)
    assert await store.get("algorithm:1") is None
    # the expired read evicted the entry
    assert store.size == 0


@pytest.mark.asyncio
async def test_missing_key_is_a_miss(store: TTLCache) -> None:
    assert await store.get("nope") is None


@pytest.mark.asyncio
async def test_set_without_ttl_never_expires(store: TTLCache, clock) -> None:
    await store.set("categories", "[]")
    clock.advance(10 * 365 * 24 * 3600)
    assert await store.get("categories") == "[]"
    assert store._store["categories"].expires_at_ms == NEVER_EXPIRES


@pytest.mark.asyncio
async def test_set_overwrites_value_and_ttl(store: TTLCache, clock) -> None:
    await store.set("k", "v1", ttl_seconds=1)
    await store.set("k", "v2")
    clock.advance(5)
    assert await store.get("k") == "v2"


@pytest.mark.asyncio
async def test_delete_is_idempotent(store: TTLCache) -> None:
    await store.set("k", "v")
    await store.delete("k")
    await store.delete("k")
    await store.delete_many(["k", "other"])
    assert await store.get("k") is None


@pytest.mark.asyncio
async def test_delete_many_removes_each_key(store: TTLCache) -> None:
    await store.multi_set({"a": "1", "b": "2", "c": "3"})
    await store.delete_many(["a", "c"])
    assert await store.multi_get(["a", "b", "c"]) == [None, "2", None]


@pytest.mark.asyncio
async def test_exists_respects_expiry(store: TTLCache, clock) -> None:
    await store.set("session:1", "x", ttl_seconds=2)
    assert await store.exists("session:1") is True
    clock.advance(3)
    assert await store.exists("session:1") is False
    assert await store.exists("never-set") is False


@pytest.mark.asyncio
async def test_expire_updates_existing_key_only(store: TTLCache, clock) -> None:
    await store.set("k", "v")
    assert await store.expire("k", 5) is True
    assert await store.expire("absent", 5) is False
    assert await store.exists("absent") is False

    clock.advance(6)
    assert await store.get("k") is None


@pytest.mark.asyncio
async def test_multi_get_is_positionally_aligned(store: TTLCache, clock) -> None:
    await store.set("a", "1")
    await store.set("short", "2", ttl_seconds=1)
    clock.advance(2)
    assert await store.multi_get(["missing", "a", "short", "a"]) == [None, "1", None, "1"]


@pytest.mark.asyncio
async def test_multi_set_accepts_pairs(store: TTLCache) -> None:
    await store.multi_set([("x", "1"), ("y", "2")])
    assert await store.multi_get(["x", "y"]) == ["1", "2"]


@pytest.mark.asyncio
async def test_increment_from_absent_key_returns_one(store: TTLCache) -> None:
    assert await store.increment("counter") == 1
    assert await store.increment("counter") == 2
    assert await store.get("counter") == "2"


@pytest.mark.asyncio
async def test_decrement_from_absent_key_goes_negative(store: TTLCache) -> None:
    assert await store.decrement("counter") == -1
    assert await store.get("counter") == "-1"


@pytest.mark.asyncio
async def test_increment_keeps_existing_expiry(store: TTLCache, clock) -> None:
    await store.set("rate_limit:1.2.3.4:/login", "4", ttl_seconds=60)
    assert await store.increment("rate_limit:1.2.3.4:/login") == 5
    clock.advance(61)
    assert await store.get("rate_limit:1.2.3.4:/login") is None


@pytest.mark.asyncio
async def test_increment_rejects_non_integer_value(store: TTLCache) -> None:
    await store.set("k", "not-a-number")
    with pytest.raises(ValueError):
        await store.increment("k")


@pytest.mark.asyncio
async def test_scan_keys_matches_glob(store: TTLCache) -> None:
    for key in ("user:1", "user:2", "session:1"):
        await store.set(key, "x")

    assert set(await store.scan_keys("user:*")) == {"user:1", "user:2"}
    assert set(await store.scan_keys("*:1")) == {"user:1", "session:1"}
    assert set(await store.scan_keys("*")) == {"user:1", "user:2", "session:1"}


@pytest.mark.asyncio
async def test_scan_keys_is_anchored_and_literal(store: TTLCache) -> None:
    await store.set("user:1:progress", "x")
    await store.set("superuser:1", "x")
    await store.set("user.1", "x")

    assert await store.scan_keys("user:*") == ["user:1:progress"]
    # '.' in the pattern is a literal dot, not a regex wildcard
    assert await store.scan_keys("user.*") == ["user.1"]


@pytest.mark.asyncio
async def test_scan_keys_skips_expired(store: TTLCache, clock) -> None:
    await store.set("user:1", "x", ttl_seconds=1)
    await store.set("user:2", "x")
    clock.advance(2)
    assert await store.scan_keys("user:*") == ["user:2"]


@pytest.mark.asyncio
async def test_cleanup_evicts_only_expired(store: TTLCache, clock) -> None:
    await store.set("old", "x", ttl_seconds=1)
    await store.set("older", "x", ttl_seconds=2)
    await store.set("fresh", "x", ttl_seconds=100)
    await store.set("forever", "x")
    clock.advance(5)

    assert store.cleanup() == 2
    assert store.size == 2
    assert store.cleanup() == 0


@pytest.mark.asyncio
async def test_separate_instances_do_not_share_state() -> None:
    first, second = TTLCache(), TTLCache()
    await first.set("k", "v")
    assert await second.get("k") is None


@pytest.mark.asyncio
async def test_flush_empties_store(store: TTLCache) -> None:
    await store.set("a", "1")
    store.flush()
    assert store.size == 0
