"""HTTP fetching for the landing page and its script bundles."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from pkgrecon.config import Settings
from pkgrecon.exceptions import FetchError

logger = logging.getLogger(__name__)


def build_client(config: Settings) -> httpx.Client:
    """Return an ``httpx.Client`` carrying the tool's identifying user-agent."""
    return httpx.Client(
        headers={"user-agent": config.user_agent},
        timeout=config.request_timeout,
        follow_redirects=True,
    )


def fetch_page(url: str, config: Settings) -> str:
    """Fetch *url* as HTML and return the response body.

    Raises:
        FetchError: If the server answers with a non-2xx status.
        httpx.TransportError: If the connection cannot be made.
    """
    logger.info("Fetching %s", url)
    with build_client(config) as client:
        response = client.get(url, headers={"accept": "text/html"})
    if not response.is_success:
        raise FetchError(response.status_code, response.reason_phrase, url)
    return response.text


def fetch_bundle(client: httpx.Client, url: str) -> Optional[str]:
    """Return the text of a script bundle, or ``None`` if it could not be fetched.

    Any ``httpx`` error (transport, redirect loop, bad content encoding) skips
    the bundle.
    """
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("Skipping bundle %s: %s", url, exc)
        return None
    if not response.is_success:
        logger.warning("Skipping bundle %s: HTTP %s", url, response.status_code)
        return None
    return response.text
