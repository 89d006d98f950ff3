import asyncio
import copy
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlmodel import select

from app.clients.admin_api_client import AdminApiClient
from app.config.settings import Settings, settings
from app.core.exceptions.exceptions import DatabaseConnectionError, UnknownResourceError
from app.data.seed import SEED_COLLECTIONS
from app.services.resources import get_resource
from app.utils.log import app_logger


class CollectionSource(Protocol):
    """Anything that can hand over the full record collection of an admin resource."""

    async def fetch_collection(self, resource: str) -> List[Dict[str, Any]]:
        ...


class StaticCollectionSource:
    """Serves in-memory rows (seed data by default)."""

    def __init__(self, collections: Optional[Mapping[str, Sequence[Dict[str, Any]]]] = None):
        self.collections = collections if collections is not None else SEED_COLLECTIONS

    async def fetch_collection(self, resource: str) -> List[Dict[str, Any]]:
        if resource not in self.collections:
            raise UnknownResourceError(resource)
        # callers may mutate what they get back
        return copy.deepcopy(list(self.collections[resource]))


class DatabaseCollectionSource:
    """Reads whole tables through SQLModel, off the event loop."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def _query(self, resource: str) -> List[Dict[str, Any]]:
        spec = get_resource(resource)
        db = self.session_factory()
        try:
            rows = db.execute(select(spec.model)).scalars().all()
            return [row.model_dump(mode="json") for row in rows]
        except SQLAlchemyError as e:
            app_logger.error("collections.db.error", resource=resource, error=str(e))
            raise DatabaseConnectionError(spec.model.__tablename__, str(e)) from e
        finally:
            db.close()

    async def fetch_collection(self, resource: str) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self._query, resource)


class RestCollectionSource:
    """Pulls collections from the upstream admin REST API."""

    def __init__(self, client: AdminApiClient):
        self.client = client

    async def fetch_collection(self, resource: str) -> List[Dict[str, Any]]:
        get_resource(resource)
        return await asyncio.to_thread(self.client.list_collection, resource)


def build_collection_source(config: Settings = settings) -> CollectionSource:
    """Pick the collection backend named by `COLLECTION_BACKEND`."""
    backend = config.COLLECTION_BACKEND.strip().lower()
    if backend == "static":
        return StaticCollectionSource()
    if backend == "rest":
        if not config.UPSTREAM_API_URL:
            raise ValueError("COLLECTION_BACKEND=rest requires UPSTREAM_API_URL")
        return RestCollectionSource(AdminApiClient(config.UPSTREAM_API_URL, config.UPSTREAM_API_TOKEN))
    if backend == "database":
        # imported lazily: building the engine needs the database driver
        from app.services.database import SessionLocal
        return DatabaseCollectionSource(SessionLocal)
    raise ValueError(f"unknown COLLECTION_BACKEND '{config.COLLECTION_BACKEND}'")
