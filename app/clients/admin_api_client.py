import re
from typing import Any, Dict, List, Optional

import requests

from app.clients.base_http_client import BaseHTTPClient
from app.core.exceptions.exceptions import ExternalAPIError
from app.utils.log import app_logger

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


def to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r'_\1', name).lower()


def snake_keys(record: Dict[str, Any]) -> Dict[str, Any]:
    return {to_snake(key): value for key, value in record.items()}


class AdminApiClient(BaseHTTPClient):
    """Client for the upstream admin REST API (`/api/admin/<resource>`)."""

    def __init__(self, base_url: str, api_key: Optional[str] = None, session: Optional[requests.Session] = None):
        super().__init__(
            base_url=base_url,
            timeout=30,
            max_retries=2,
            retry_delay=1.0,
            api_key=api_key,
            session=session,
        )

    def _setup_authentication(self):
        self.session.headers.update({"Authorization": f"Bearer {self.api_key}"})

    @staticmethod
    def _unwrap(resource: str, payload: Any) -> List[Dict[str, Any]]:
        # {"success": true, "data": {"users": [...], "pagination": {...}}} or {"data": [...]} or [...]
        data = payload.get("data", payload) if isinstance(payload, dict) else payload
        if isinstance(data, dict):
            camel = re.sub(r'_([a-z])', lambda m: m.group(1).upper(), resource)
            # error envelopes and non-JSON bodies ({"text": ...}) carry neither key
            data = data.get(resource, data.get(camel))
        if not isinstance(data, list):
            raise ExternalAPIError("admin-api", f"unexpected payload shape for {resource}")
        return data

    def list_collection(self, resource: str) -> List[Dict[str, Any]]:
        """Fetch every row of `resource` with snake_case keys."""
        try:
            payload = self.get(f"/api/admin/{resource.replace('_', '-')}", params={"limit": "all"})
        except requests.exceptions.RequestException as e:
            app_logger.error("admin_api.list.error", resource=resource, error=str(e))
            raise ExternalAPIError("admin-api", str(e)) from e

        rows = self._unwrap(resource, payload)
        app_logger.debug("admin_api.list", resource=resource, rows=len(rows))
        return [snake_keys(row) for row in rows if isinstance(row, dict)]
