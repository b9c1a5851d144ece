"""
Shared httpx helpers for the provider adapters.

Every outbound call goes through send(), which turns httpx request errors
into domain exceptions so the domain never sees httpx exceptions.
"""

import logging
from typing import Any

import httpx

from src.domain.exceptions import MalformedUpstreamResponse, UpstreamRejected, UpstreamUnavailable
from src.domain.ports import UpstreamResponse

logger = logging.getLogger(__name__)


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    headers: dict[str, str],
    json: Any = None,
) -> httpx.Response:
    """
    Issue one request, without retries.

    Raises:
        MalformedUpstreamResponse: If the response body cannot be decoded
        UpstreamUnavailable: On any other httpx request error
    """
    try:
        return await client.request(method, url, headers=headers, json=json)
    except httpx.DecodingError as exc:
        logger.error("%s %s returned an undecodable body: %s", method, url, exc)
        raise MalformedUpstreamResponse(f"{method} {url} body undecodable: {exc}") from exc
    except httpx.HTTPError as exc:
        logger.error("%s %s failed: %s", method, url, exc)
        raise UpstreamUnavailable(f"{method} {url} failed: {exc}") from exc


def ensure_success(response: httpx.Response) -> httpx.Response:
    """Raise UpstreamRejected for non-2xx responses."""
    if not response.is_success:
        raise UpstreamRejected(response.status_code, str(response.request.url))
    return response


def to_upstream_response(response: httpx.Response) -> UpstreamResponse:
    """Copy status, body and content type out of an httpx response."""
    return UpstreamResponse(
        status_code=response.status_code,
        content=response.content,
        content_type=response.headers.get("content-type"),
    )
