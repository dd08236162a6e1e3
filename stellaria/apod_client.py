"""HTTP client for the APOD endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .exceptions import ApodApiError, RequestError, ResponseParseError
from .params import ApodParams
from .schemas import ApodErrorBody, ApodResponse, GatewayErrorBody

logger = logging.getLogger("stellaria")

APOD_PATH = "/planetary/apod"
MAX_ERROR_TEXT = 1024


def _as_error(payload: Any) -> ApodErrorBody | None:
    if not isinstance(payload, dict) or "msg" not in payload or "code" not in payload:
        return None
    try:
        return ApodErrorBody.model_validate(payload)
    except ValidationError:
        return None


def parse_apod_payload(payload: Any) -> list[ApodResponse]:
    """Turn a decoded APOD body into response items.

    The service answers with one object for a single date and an array for
    ranges and counts. Error objects sometimes arrive with a 2xx status.
    """
    error = _as_error(payload)
    if error is not None:
        raise ApodApiError(error.code, error.msg, error.service_version)

    try:
        if isinstance(payload, list):
            return [ApodResponse.model_validate(item) for item in payload]
        if isinstance(payload, dict):
            return [ApodResponse.model_validate(payload)]
    except ValidationError as exc:
        raise ResponseParseError(f"Unexpected APOD payload: {exc}") from exc
    raise ResponseParseError(f"Unexpected APOD payload type: {type(payload).__name__}")


def error_from_response(response: httpx.Response) -> ApodApiError:
    """Build an ApodApiError from a non-2xx response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    error = _as_error(payload)
    if error is not None:
        return ApodApiError(error.code, error.msg, error.service_version)
    if isinstance(payload, dict) and "error" in payload:
        try:
            gateway = GatewayErrorBody.model_validate(payload)
        except ValidationError:
            pass
        else:
            return ApodApiError(
                response.status_code,
                f"{gateway.error.code}: {gateway.error.message}",
            )
    return ApodApiError(response.status_code, response.text[:MAX_ERROR_TEXT])


class ApodApi:
    """Thin wrapper around httpx for APOD calls."""

    def __init__(self, api_key: str, http_client: httpx.AsyncClient) -> None:
        self._api_key = api_key
        self._client = http_client

    async def get(self, params: ApodParams) -> list[ApodResponse]:
        """Fetch the pictures selected by ``params``."""
        query = params.to_query()
        logger.debug("Requesting APOD with %s", query)
        query["api_key"] = self._api_key

        try:
            response = await self._client.get(APOD_PATH, params=query)
        except httpx.HTTPError as exc:
            logger.warning("APOD request failed: %s", exc)
            raise RequestError(f"invalid http request: {exc}") from exc

        if response.is_error:
            error = error_from_response(response)
            logger.warning("APOD returned an error: %s", error)
            raise error

        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseParseError(f"error in parsing json: {exc}") from exc

        items = parse_apod_payload(payload)
        logger.debug("Received %s APOD entries", len(items))
        return items
