import itertools
from typing import Any, Dict, List, Optional

from app.schemas.list_query import ListQuery, ListResult
from app.services.admin_collection_service import AdminCollectionService
from app.services.resources import get_resource
from app.utils.log import app_logger

# changing any of these invalidates the current page number
_RESET_PAGE_ON = {"search_term", "filters", "ranges"}


class ListSession:
    """View state of one admin list: the loaded collection plus the current query.

    Refreshes may overlap (a new one starts before the previous one
    resolves). Only the most recently started refresh is allowed to replace
    the held collection; an older one that finishes late is dropped.
    """

    def __init__(self, service: AdminCollectionService, resource: str, query: Optional[ListQuery] = None):
        self.service = service
        self.resource = resource
        self.spec = get_resource(resource)
        self.query = query or ListQuery(sort_by=self.spec.default_sort, sort_order=self.spec.default_order)
        self.records: List[Dict[str, Any]] = []
        self._requests = itertools.count(1)
        self._latest = 0

    async def refresh(self, force: bool = True) -> Optional[ListResult]:
        """Reload the collection; returns None when a newer refresh superseded this one."""
        request_id = next(self._requests)
        self._latest = request_id

        records = await self.service.load(self.resource, refresh=force)
        if request_id != self._latest:
            app_logger.debug("list_session.stale", resource=self.resource, request_id=request_id, latest=self._latest)
            return None

        self.records = records
        return self.render()

    def update_query(self, **changes: Any) -> ListResult:
        if _RESET_PAGE_ON & changes.keys() and "page" not in changes:
            changes["page"] = 1
        self.query = ListQuery.model_validate({**self.query.model_dump(), **changes})
        return self.render()

    def render(self) -> ListResult:
        return self.spec.apply(self.records, self.query)
