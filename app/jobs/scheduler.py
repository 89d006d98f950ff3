from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.services.ttl_cache import TTLCache
from app.utils.log import app_logger

CACHE_CLEANUP_JOB_ID = "cache_cleanup"

# jobs run on the application's event loop, next to the cache they sweep
_scheduler = AsyncIOScheduler()


async def sweep_expired_entries(store: TTLCache) -> int:
    removed = store.cleanup()
    if removed:
        app_logger.debug("scheduler: cache sweep", removed=removed, remaining=store.size)
    return removed


def start_scheduler():
    if not _scheduler.running:
        _scheduler.start()
        app_logger.info("scheduler: started")


def shutdown_scheduler():
    if _scheduler.running:
        _scheduler.shutdown(wait=False)
        app_logger.info("scheduler: shutdown")


def add_cache_cleanup_job(store: TTLCache, interval_seconds: int, scheduler: Optional[AsyncIOScheduler] = None):
    """
    sweep expired cache entries every `interval_seconds`.
    if the job already exists do nothing.
    """
    scheduler = scheduler or _scheduler
    if scheduler.get_job(CACHE_CLEANUP_JOB_ID):
        app_logger.info(f"scheduler: job already exists {CACHE_CLEANUP_JOB_ID}")
        return

    scheduler.add_job(
        sweep_expired_entries,
        'interval',
        seconds=interval_seconds,
        args=[store],
        id=CACHE_CLEANUP_JOB_ID,
        replace_existing=False,
    )
    app_logger.info(f"scheduler: added cache cleanup job every {interval_seconds}s")


def remove_cache_cleanup_job(scheduler: Optional[AsyncIOScheduler] = None):
    scheduler = scheduler or _scheduler
    job = scheduler.get_job(CACHE_CLEANUP_JOB_ID)
    if job:
        scheduler.remove_job(CACHE_CLEANUP_JOB_ID)
        app_logger.info(f"scheduler: removed job {CACHE_CLEANUP_JOB_ID}")
