"""Client facade bundling the NASA APIs behind one token and connection pool."""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

import httpx

from .apod_client import ApodApi
from .config import DEMO_API_KEY, Settings, get_settings
from .params import ApodParams
from .schemas import ApodResponse

logger = logging.getLogger("stellaria")

ParamsT = TypeVar("ParamsT", contravariant=True)
ResponseT = TypeVar("ResponseT", covariant=True)


class Api(Protocol[ParamsT, ResponseT]):
    """One NASA endpoint: validated params in, decoded response out."""

    async def get(self, params: ParamsT) -> ResponseT: ...


class StellariaClient:
    """Entry point for NASA API calls.

    Owns the ``httpx.AsyncClient`` unless one is passed in, in which case the
    caller stays responsible for closing it.
    """

    def __init__(
        self,
        api_token: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.api_token = api_token or settings.api_token
        if self.api_token == DEMO_API_KEY:
            logger.warning("Using NASA's shared DEMO_KEY; requests are heavily rate limited")

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=settings.nasa_base_url,
            timeout=settings.http_timeout_seconds,
        )
        self.apod = ApodApi(self.api_token, self._client)

    async def get_apod(self, params: ApodParams | None = None) -> list[ApodResponse]:
        """Shortcut for ``client.apod.get``; defaults to today's picture."""
        if params is None:
            params = ApodParams.builder().build()
        return await self.apod.get(params)

    async def close(self) -> None:
        """Close the underlying HTTP client if we created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> StellariaClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
