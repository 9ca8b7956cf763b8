"""Upstream fetch helpers.

Every call against the OpenProcessing API goes through :func:`fetch_json`.
It never raises for upstream trouble:

  - non-2xx statuses are logged, decoding is still attempted
  - transport errors are logged and yield the fallback
  - undecodable bodies silently yield the fallback
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")


def safe_json(response: httpx.Response, fallback: T) -> Any | T:
    """Decode *response* as JSON, returning *fallback* on any decode failure."""
    try:
        return response.json()
    except ValueError:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return fallback


async def fetch_json(
    client: httpx.AsyncClient,
    path: str,
    *,
    fallback: T,
    op: str,
    ident: str,
    params: Mapping[str, Any] | None = None,
) -> Any | T:
    """GET *path* relative to the client's base URL and decode the body.

    *op* and *ident* only label log lines (operation name and the sketch or
    collection id involved).
    """
    logger.debug(f"{op}: GET {path} params={dict(params or {})}")
    try:
        response = await client.get(path, params=params)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        # InvalidURL: ids that cannot be put in a URL, e.g. control characters
        logger.warning(f"{op} {ident} request failed: {e!r}")
        return fallback

    if not response.is_success:
        logger.warning(f"{op} {ident} {response.status_code} {response.reason_phrase}")
    return safe_json(response, fallback)
