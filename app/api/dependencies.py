from fastapi import HTTPException, Request, status

from app.core.exceptions.exceptions import (
    AppError,
    ExternalAPIError,
    InfrastructureError,
    InvalidListQueryError,
    RecordNotFoundError,
    UnknownResourceError,
)
from app.services.admin_collection_service import AdminCollectionService
from app.services.cache_service import CacheService


def get_collection_service(request: Request) -> AdminCollectionService:
    return request.app.state.collection_service


def get_cache_service(request: Request) -> CacheService:
    return request.app.state.cache_service


def http_error(exc: AppError) -> HTTPException:
    """Translate an application error into the HTTP error the client sees."""
    if isinstance(exc, (UnknownResourceError, RecordNotFoundError)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, InvalidListQueryError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    if isinstance(exc, ExternalAPIError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message)
    if isinstance(exc, InfrastructureError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
