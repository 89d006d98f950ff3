import pytest
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.jobs.scheduler import (
    CACHE_CLEANUP_JOB_ID,
    add_cache_cleanup_job,
    remove_cache_cleanup_job,
    sweep_expired_entries,
)


@pytest.mark.asyncio
async def test_sweep_removes_expired_entries(store, clock) -> None:
    await store.set("old", "x", ttl_seconds=1)
    await store.set("kept", "x")
    clock.advance(2)
    assert await sweep_expired_entries(store) == 1
    assert store.size == 1


def test_cleanup_job_is_added_once_and_removed(store) -> None:
    scheduler = AsyncIOScheduler()

    add_cache_cleanup_job(store, 60, scheduler=scheduler)
    add_cache_cleanup_job(store, 30, scheduler=scheduler)
    jobs = scheduler.get_jobs()
    assert [job.id for job in jobs] == [CACHE_CLEANUP_JOB_ID]
    assert jobs[0].trigger.interval.total_seconds() == 60
    assert jobs[0].args == (store,)

    remove_cache_cleanup_job(scheduler=scheduler)
    assert scheduler.get_job(CACHE_CLEANUP_JOB_ID) is None
    # removing twice is harmless
    remove_cache_cleanup_job(scheduler=scheduler)
