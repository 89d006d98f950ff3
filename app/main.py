from typing import Optional

from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api.collections import router as collections_router
from app.api.cache_admin import router as cache_router
from app.config.settings import settings
from app.jobs.scheduler import start_scheduler, shutdown_scheduler, add_cache_cleanup_job, remove_cache_cleanup_job
from app.services.admin_collection_service import AdminCollectionService
from app.services.cache_service import CacheService
from app.services.collection_source import build_collection_source
from app.services.ttl_cache import TTLCache


def create_app(collection_service: Optional[AdminCollectionService] = None) -> FastAPI:
    """Wire the cache and the collection service into a FastAPI app.

    Passing `collection_service` replaces the configured backend (tests use a
    static source); its cache becomes the app's cache.
    """
    if collection_service is None:
        cache_service = CacheService(TTLCache())
        collection_service = AdminCollectionService(
            build_collection_source(settings),
            cache_service,
            ttl_seconds=settings.COLLECTION_CACHE_TTL,
        )
    cache_service = collection_service.cache

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup logic
        add_cache_cleanup_job(cache_service.store, settings.CACHE_CLEANUP_INTERVAL_SECONDS)
        start_scheduler()
        yield
        # Shutdown logic
        remove_cache_cleanup_job()
        shutdown_scheduler()

    app = FastAPI(title="DSA Admin Backend", lifespan=lifespan)
    app.state.collection_service = collection_service
    app.state.cache_service = cache_service

    # include routes
    app.include_router(collections_router)
    app.include_router(cache_router)
    return app


app = create_app()
