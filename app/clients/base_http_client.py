# clients/base_http_client.py
import requests
import time
import re

from typing import Dict, Any, Optional
from urllib.parse import urljoin
from abc import ABC
from app.utils.log import app_logger

class BaseHTTPClient(ABC):
    """Base HTTP client with common functionalities like GET, POST, retries, and error handling"""

    USER_AGENT = "dsa-admin-backend/1.0"

    def __init__(self,
                 base_url: str,
                 api_key: Optional[str] = None,
                 timeout: int = 30, max_retries: int = 3,
                 retry_delay: float = 1.5,
                 content_type: Optional[str] = 'application/json',
                 accept: Optional[str] = 'application/json',
                 session: Optional[requests.Session] = None,
                 ):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.content_type = content_type
        self.accept = accept
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.session = session or requests.Session()

        # setup default headers
        self._setup_default_headers()

    def _setup_default_headers(self):
        """setup default headers for the client"""
        self.session.headers.update({
            'User-Agent': self.USER_AGENT,
            'Accept': self.accept,
            'Content-Type': self.content_type,
        })

        # add authentication header if api_key is provided
        if self.api_key:
            self._setup_authentication()

    def _setup_authentication(self):
        """setup authentication with API key (can be overridden)"""
        pass

    def _build_url(self, endpoint: str) -> str:
        """build full URL"""
        return urljoin(f"{self.base_url}/", endpoint.lstrip('/'))

    def _make_request(self, method: str, endpoint: str,
                     params: Optional[Dict] = None,
                     headers: Optional[Dict] = None) -> Any:
        """do HTTP request with retries"""
        url = self._build_url(endpoint)
        request_headers = headers or {}

        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    params=params,
                    headers=request_headers,
                    timeout=self.timeout
                )

                # check rate limiting
                if response.status_code == 429:
                    retry_after = int(response.headers.get('Retry-After', 60))
                    app_logger.warning("request.rate_limited", url=url, attempt=attempt + 1, wait=retry_after)
                    time.sleep(retry_after)
                    continue

                # debug log for non-success status codes (we'll still raise below)
                if response.status_code >= 400:
                    app_logger.debug("request.status", method=method, url=url, status_code=response.status_code)

                response.raise_for_status()

                # try to parse json response
                try:
                    return response.json()
                except ValueError:
                    app_logger.debug("request.parse_text", url=url, length=len(response.text))
                    return {'text': response.text}

            except requests.exceptions.RequestException as e:
                # sanitize message to remove memory addresses like <HTTPSConnection(...) at 0x...>
                raw = str(e)
                sanitized = re.sub(r'0x[0-9a-fA-F]+', '<ptr>', raw)
                exc_type = type(e).__name__
                app_logger.error("request.failed", method=method, url=url, attempt=attempt + 1, exc_type=exc_type, error=sanitized)

                if attempt == self.max_retries:
                    raise

                # exponential backoff
                wait_time = self.retry_delay * (2 ** attempt)
                time.sleep(wait_time)

        raise requests.exceptions.RetryError(f"Failed to make request after {self.max_retries} attempts")

    def get(self, endpoint: str, params: Optional[Dict] = None,
            headers: Optional[Dict] = None) -> Any:
        """do GET request"""
        return self._make_request('GET', endpoint, params=params, headers=headers)
