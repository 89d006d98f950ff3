"""
Pytest configuration and shared fixtures for the admin backend tests.
"""

from __future__ import annotations

import os

# Set environment variables BEFORE any app imports (no database in tests)
os.environ.setdefault("COLLECTION_BACKEND", "static")
os.environ.setdefault("LOG_LEVEL", "warning")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.admin_collection_service import AdminCollectionService
from app.services.cache_service import CacheService
from app.services.collection_source import StaticCollectionSource
from app.services.ttl_cache import TTLCache


class FakeClock:
    """Controllable replacement for time.time."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> TTLCache:
    return TTLCache(clock=clock)


@pytest.fixture
def cache(store: TTLCache) -> CacheService:
    return CacheService(store)


@pytest.fixture
def scored_records() -> list[dict]:
    """Five records used by the end-to-end list scenarios."""
    return [
        {"name": "A", "status": "active", "score": 10},
        {"name": "B", "status": "inactive", "score": 30},
        {"name": "C", "status": "active", "score": 20},
        {"name": "D", "status": "active", "score": 5},
        {"name": "E", "status": "inactive", "score": 40},
    ]


@pytest.fixture
def users() -> list[dict]:
    return [
        {
            "id": "u-1", "username": "alice", "email": "alice@example.com",
            "first_name": "Alice", "last_name": "Liddell", "role": "admin",
            "level": 10, "xp": 3000, "is_active": True, "is_verified": True, "is_premium": False,
            "created_at": "2024-01-01T10:00:00Z", "last_login": "2024-01-20T10:00:00Z",
        },
        {
            "id": "u-2", "username": "bob", "email": "bob@example.com",
            "first_name": "Bob", "last_name": "Stone", "role": "user",
            "level": 3, "xp": 200, "is_active": False, "is_verified": False, "is_premium": False,
            "created_at": "2024-01-05T10:00:00Z", "last_login": None,
        },
        {
            "id": "u-3", "username": "carol", "email": "carol@example.com",
            "first_name": "Carol", "last_name": "Alvarez", "role": "user",
            "level": 7, "xp": 1500, "is_active": True, "is_verified": True, "is_premium": True,
            "created_at": "2024-01-03T10:00:00Z", "last_login": "2024-01-19T10:00:00Z",
        },
    ]


@pytest.fixture
def collections(users: list[dict]) -> dict:
    return {
        "users": users,
        "leaderboard": [
            {"id": "l-1", "username": "alice", "email": "alice@example.com", "rank": 2,
             "score": 900, "total_problems": 40, "acceptance_rate": 80.0, "current_streak": 3,
             "level": 10, "country": "US"},
            {"id": "l-2", "username": "carol", "email": "carol@example.com", "rank": 1,
             "score": 1200, "total_problems": 55, "acceptance_rate": 91.25, "current_streak": 9,
             "level": 7, "country": "AR"},
        ],
    }


@pytest.fixture
def source(collections: dict) -> StaticCollectionSource:
    return StaticCollectionSource(collections)


@pytest.fixture
def service(source: StaticCollectionSource, cache: CacheService) -> AdminCollectionService:
    return AdminCollectionService(source, cache, ttl_seconds=60)


@pytest.fixture
def client(service: AdminCollectionService) -> TestClient:
    return TestClient(create_app(service))
