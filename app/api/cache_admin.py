from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_cache_service
from app.middleware.security import Security
from app.services.cache_service import CacheService
from app.utils.log import app_logger

router = APIRouter(prefix="/admin/cache", tags=["Cache"])


@router.get("/stats")
async def cache_stats(cache: CacheService = Depends(get_cache_service)) -> Dict[str, Any]:
    return await cache.info()


@router.delete("")
async def clear_cache(
    pattern: str = "*",
    cache: CacheService = Depends(get_cache_service),
) -> Dict[str, Any]:
    """Delete every live key matching `pattern` (`*` is the only wildcard)."""
    if not Security().is_valid_cache_pattern(pattern):
        raise HTTPException(status_code=400, detail=f"invalid cache pattern: {pattern}")

    cleared = await cache.clear_pattern(pattern)
    app_logger.info("api.cache.cleared", pattern=pattern, cleared=cleared)
    return {"pattern": pattern, "cleared": cleared}
