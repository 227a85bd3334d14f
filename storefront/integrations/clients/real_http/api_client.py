"""
Remote backend HTTP client.

Every remote call made by the domain services goes through ApiClient:
- builds the full URL from the configured base URL
- sends JSON by default (multipart uploads let httpx set the content type)
- normalizes failures into NetworkError / HttpError
- returns the parsed JSON body without schema validation
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from storefront.config import StorefrontConfig
from storefront.errors import ApiError, HttpError, NetworkError

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        auth_token: Optional[str] = None,
        health_path: str = "/api/health",
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("STOREFRONT_API_URL", "")).rstrip("/")
        self.auth_token = auth_token
        self.health_path = health_path
        # None means no client-side timeout: a slow backend shows up as a pending call.
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ApiClient":
        if self._client is None:
            self._client = self._new_client()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared connection pool opened by `async with`. Safe to call twice."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport)

    @classmethod
    def from_config(cls, config: StorefrontConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> "ApiClient":
        return cls(
            config.api_base_url,
            auth_token=config.api_token,
            health_path=config.health_path,
            transport=transport,
        )

    def build_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}{endpoint}"

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        files: Any = None,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = self.build_url(endpoint)

        request_headers: Dict[str, str] = {} if files else {"Content-Type": "application/json"}
        if self.auth_token:
            request_headers["Authorization"] = f"Bearer {self.auth_token}"
        if headers:
            request_headers.update(headers)

        send_kwargs = dict(json=json, params=params, files=files, data=data, headers=request_headers)
        try:
            if self._client is not None:
                response = await self._client.request(method, url, **send_kwargs)
            else:
                async with self._new_client() as client:
                    response = await client.request(method, url, **send_kwargs)
        except httpx.RequestError as e:
            raise NetworkError(f"Network error calling {method} {url}: {e}") from e

        if not response.is_success:
            body = _error_body(response)
            message = body.get("message") or body.get("detail")
            if not isinstance(message, str) or not message:
                message = f"HTTP {response.status_code}: {response.reason_phrase}"
            logger.debug("HTTP %s from %s %s: %s", response.status_code, method, url, body)
            raise HttpError(response.status_code, message, body)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON in response from {method} {url}", status=response.status_code) from e

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("POST", endpoint, json=json)

    async def put(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def patch(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PATCH", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)

    async def upload(self, endpoint: str, files: Any, data: Optional[Dict[str, Any]] = None) -> Any:
        """Multipart upload; the Content-Type header is left to httpx."""
        return await self.request("POST", endpoint, files=files, data=data)

    async def health_check(self) -> Any:
        return await self.get(self.health_path)


def _error_body(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    if isinstance(body, dict):
        return body
    return {"data": body}
