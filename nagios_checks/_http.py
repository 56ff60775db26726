"""Shared request plumbing for the Azure clients.

HTTP error statuses are not raised: Azure puts the useful message in the
body, so every response is parsed and the caller inspects the fields.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .exceptions import APIError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Longest slice of a non-JSON body echoed back as the error detail
MAX_DETAIL_CHARS = 200


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
    )


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    model: type[ModelT],
    what: str,
    **kwargs: Any,
) -> ModelT:
    """Send a request and parse the JSON body into ``model``.

    ``what`` names the call in error messages, e.g. "an auth token from Graph".
    """
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.RequestError as e:
        raise TransportError(f"HTTP error getting {what}", detail=str(e) or None) from e

    logger.debug("%s %s -> %d", method, url, response.status_code)

    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        body = response.text.strip().replace("\n", " ")[:MAX_DETAIL_CHARS]
        raise APIError(
            f"Unexpected response getting {what} (HTTP {response.status_code})",
            detail=body or None,
        ) from e


def bearer(token: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
    }
