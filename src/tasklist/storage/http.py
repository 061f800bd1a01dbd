"""HTTP key-value storage client."""

from __future__ import annotations

import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from .errors import StorageResponseError, StorageUnavailableError

logger = logging.getLogger(__name__)


class HttpStorage:
    """Client for a REST key-value service.

    Endpoints, relative to ``base_url``:
    - ``GET    /keys?prefix=<p>`` -> ``{"keys": [...]}``
    - ``GET    /keys/<key>``      -> ``{"value": "..."}`` (404 when absent)
    - ``PUT    /keys/<key>``      with ``{"value": "..."}``
    - ``DELETE /keys/<key>``      (404 tolerated)
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the storage client.

        Args:
            base_url: Root URL of the key-value service
            token: Optional bearer token
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpStorage:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # --- Storage contract ---

    def list(self, prefix: str) -> list[str]:
        response = self._request("GET", "/keys", params={"prefix": prefix})
        keys = self._json(response).get("keys")
        if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
            raise StorageResponseError("Malformed key listing")
        return keys

    def get(self, key: str) -> str | None:
        response = self._request("GET", self._key_path(key), allow_missing=True)
        if response.status_code == 404:
            return None
        value = self._json(response).get("value")
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageResponseError(f"Value for {key!r} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        self._request("PUT", self._key_path(key), json={"value": value})

    def delete(self, key: str) -> None:
        self._request("DELETE", self._key_path(key), allow_missing=True)

    # --- Private Methods ---

    @staticmethod
    def _key_path(key: str) -> str:
        return f"/keys/{quote(key, safe='')}"

    def _request(
        self,
        method: str,
        path: str,
        allow_missing: bool = False,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and map failures onto storage errors.

        Raises:
            StorageUnavailableError: Transport failure or 5xx
            StorageResponseError: Any other unexpected status
        """
        start_time = time.monotonic()
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise StorageUnavailableError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        if response.status_code == 404 and allow_missing:
            logger.debug("%s %s: 404 (%.0fms)", method, path, elapsed_ms)
            return response
        if response.status_code >= 500:
            logger.error("%s %s: HTTP %d (%.0fms)", method, path, response.status_code, elapsed_ms)
            raise StorageUnavailableError(f"HTTP {response.status_code}: {response.text}")
        if response.status_code >= 400:
            logger.error("%s %s: HTTP %d (%.0fms)", method, path, response.status_code, elapsed_ms)
            raise StorageResponseError(f"HTTP {response.status_code}: {response.text}")

        logger.debug("%s %s: %d (%.0fms)", method, path, response.status_code, elapsed_ms)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            result = response.json()
        except ValueError as e:
            raise StorageResponseError(f"Invalid JSON response: {e}") from e
        if not isinstance(result, dict):
            raise StorageResponseError("Expected a JSON object")
        return result
