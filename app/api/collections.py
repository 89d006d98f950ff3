from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.api.dependencies import get_collection_service, http_error
from app.config.settings import settings
from app.core.exceptions.exceptions import AppError
from app.middleware.security import Security
from app.schemas.filters import parse_filters
from app.schemas.list_query import ListQuery, SortOrder
from app.services.admin_collection_service import AdminCollectionService
from app.services.resources import get_resource
from app.utils.log import app_logger

router = APIRouter(prefix="/admin/collections", tags=["Admin_Collections"])

# query parameters that are not resource filters
LIST_PARAMS = {"search", "sort_by", "sort_order", "page", "page_size", "refresh"}


def _build_query(
    resource: str,
    request: Request,
    search: str,
    sort_by: Optional[str],
    sort_order: Optional[SortOrder],
    page: int,
    page_size: int,
) -> ListQuery:
    spec = get_resource(resource)
    raw_filters = {k: v for k, v in request.query_params.items() if k not in LIST_PARAMS}
    filters = parse_filters(resource, raw_filters)
    return spec.build_query(
        filters,
        search_term=Security().clean_search_term(search),
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size,
    )


def _unexpected(event: str, e: Exception) -> HTTPException:
    app_logger.error(event, error=str(e), exc_info=e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unexpected error while reading the collection.",
    )


@router.get("/{resource}")
async def list_collection(
    resource: str,
    request: Request,
    response: Response,
    search: str = "",
    sort_by: Optional[str] = None,
    sort_order: Optional[SortOrder] = None,
    page: int = 1,
    page_size: int = settings.DEFAULT_PAGE_SIZE,
    refresh: bool = False,
    svc: AdminCollectionService = Depends(get_collection_service),
) -> Dict[str, Any]:
    """Return one page of an admin collection after search, filters and sort.

    Filters are passed as extra query parameters (`?role=admin&status=active`);
    each resource accepts its own set and `all` switches a filter off.
    """
    # bounds for pagination: page is clamped, page_size must be within 1..MAX_PAGE_SIZE
    if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
        raise HTTPException(status_code=400, detail="invalid pagination params")

    try:
        query = _build_query(resource, request, search, sort_by, sort_order, page, page_size)
        result = await svc.list_records(resource, query, refresh=refresh)
    except AppError as e:
        raise http_error(e)
    except Exception as e:
        raise _unexpected("api.collections.list.error", e)

    # Pagination headers: X-Page, X-Per-Page, X-Total-Count
    response.headers["X-Page"] = str(result.page)
    response.headers["X-Per-Page"] = str(result.page_size)
    response.headers["X-Total-Count"] = str(result.total_matched)

    next_url = ""
    if result.page * result.page_size < result.total_matched:
        next_url = str(request.url.include_query_params(page=result.page + 1))

    return {
        "data": result.items,
        "meta": {
            "count": result.total_matched,
            "page": result.page,
            "page_size": result.page_size,
            "pages": result.total_pages,
        },
        "links": {"self": str(request.url), "next": next_url},
    }


@router.get("/{resource}/export")
async def export_collection(
    resource: str,
    request: Request,
    search: str = "",
    sort_by: Optional[str] = None,
    sort_order: Optional[SortOrder] = None,
    svc: AdminCollectionService = Depends(get_collection_service),
) -> Response:
    """Download every matching record as CSV."""
    try:
        query = _build_query(resource, request, search, sort_by, sort_order, 1, settings.MAX_PAGE_SIZE)
        content = await svc.export_csv(resource, query)
    except AppError as e:
        raise http_error(e)
    except Exception as e:
        raise _unexpected("api.collections.export.error", e)

    filename = f"{resource}-export-{date.today().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{resource}/facets/{field}")
async def collection_facet(
    resource: str,
    field: str,
    svc: AdminCollectionService = Depends(get_collection_service),
) -> Dict[str, List[Any]]:
    """Distinct values of `field`, for building filter dropdowns."""
    try:
        return {"values": await svc.facet(resource, field)}
    except AppError as e:
        raise http_error(e)


@router.post("/{resource}/refresh", status_code=status.HTTP_202_ACCEPTED)
async def refresh_collection(
    resource: str,
    svc: AdminCollectionService = Depends(get_collection_service),
) -> Dict[str, Any]:
    """Drop the cached copy of a collection and load it again."""
    try:
        await svc.invalidate(resource)
        records = await svc.load(resource)
    except AppError as e:
        raise http_error(e)
    except Exception as e:
        raise _unexpected("api.collections.refresh.error", e)

    return {"status": "refreshed", "count": len(records)}


@router.get("/{resource}/{record_id}")
async def get_collection_record(
    resource: str,
    record_id: str,
    svc: AdminCollectionService = Depends(get_collection_service),
) -> Dict[str, Any]:
    if not Security().is_valid_record_id(record_id):
        raise HTTPException(status_code=400, detail=f"invalid record id: {record_id}")

    try:
        return {"data": await svc.get_record(resource, record_id)}
    except AppError as e:
        raise http_error(e)
