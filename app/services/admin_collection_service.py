from typing import Any, Dict, List

from app.core.exceptions.exceptions import RecordNotFoundError
from app.schemas.list_query import ListQuery, ListResult
from app.services.cache_service import CacheKeys, CacheService, CacheTTL
from app.services.collection_source import CollectionSource
from app.services.list_view import distinct_values
from app.services.resources import get_resource
from app.utils.csv_export import to_csv
from app.utils.log import app_logger


class AdminCollectionService:
    """Loads admin collections through the cache and derives list pages from them.

    The full collection of a resource is cached under `admin:<resource>`;
    every query is answered from that copy so paging, sorting and filtering
    never go back to the source until the entry expires or is invalidated.
    """

    def __init__(self, source: CollectionSource, cache: CacheService, ttl_seconds: int = CacheTTL.SHORT):
        self.source = source
        self.cache = cache
        self.ttl_seconds = int(ttl_seconds)

    async def load(self, resource: str, refresh: bool = False) -> List[Dict[str, Any]]:
        get_resource(resource)
        key = CacheKeys.admin_collection(resource)
        if refresh:
            await self.cache.delete(key)

        async def fetch() -> List[Dict[str, Any]]:
            rows = await self.source.fetch_collection(resource)
            app_logger.info("collections.load.fetched", resource=resource, rows=len(rows))
            return rows

        return await self.cache.remember(key, self.ttl_seconds, fetch)

    async def list_records(self, resource: str, query: ListQuery, refresh: bool = False) -> ListResult:
        spec = get_resource(resource)
        records = await self.load(resource, refresh=refresh)
        return spec.apply(records, query)

    async def export_csv(self, resource: str, query: ListQuery) -> str:
        """CSV of every record matching `query`; pagination is ignored."""
        spec = get_resource(resource)
        records = await self.load(resource)
        matched = spec.select(records, query)
        app_logger.info("collections.export", resource=resource, rows=len(matched))
        return to_csv(matched, spec.csv_columns)

    async def get_record(self, resource: str, record_id: str) -> Dict[str, Any]:
        for record in await self.load(resource):
            if str(record.get("id")) == record_id:
                return record
        raise RecordNotFoundError(resource, record_id)

    async def facet(self, resource: str, field: str) -> List[Any]:
        return distinct_values(await self.load(resource), field)

    async def invalidate(self, resource: str) -> None:
        get_resource(resource)
        await self.cache.delete(CacheKeys.admin_collection(resource))
        app_logger.info("collections.invalidate", resource=resource)
