from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import (
    ProviderAuthError,
    ProviderMappingError,
    ProviderRateLimited,
    ProviderRequestError,
)

logger = logging.getLogger(__name__)

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling.
    - Provides consistent error handling.
    - Provider-specific clients wrap it and add endpoints / auth.
    """

    base_url: str
    timeout_s: float = 15.0
    connect_timeout_s: float = 5.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json_value(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform an HTTP request and return the parsed JSON value (object, array, ...).
        Raises ProviderRequestError (including ProviderRateLimited / ProviderAuthError)
        on transport issues / non-2xx, ProviderMappingError on a non-JSON body.
        """
        try:
            resp = await self._client.request(
                method=method,
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise ProviderRequestError(f"{type(e).__name__}: {e}") from e

        logger.debug("%s %s -> HTTP %s", method, resp.request.url, resp.status_code)

        if resp.status_code == 429:
            raise ProviderRateLimited(
                "Provider rate limited the request (HTTP 429).", status_code=429
            )
        if resp.status_code in (401, 403):
            raise ProviderAuthError(
                f"Provider refused credentials (HTTP {resp.status_code}).",
                status_code=resp.status_code,
            )

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                f"HTTP {resp.status_code} for {method} {resp.request.url}",
                status_code=resp.status_code,
            ) from e

        try:
            return resp.json()
        except ValueError as e:
            raise ProviderMappingError("Response was not valid JSON.") from e

    async def get_json_value(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.request_json_value("GET", path, params=params, headers=headers)

    async def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        data = await self.get_json_value(path, params=params, headers=headers)
        if not isinstance(data, dict):
            raise ProviderMappingError(
                f"Expected JSON object, got {type(data).__name__}", context={"path": path}
            )
        return data
