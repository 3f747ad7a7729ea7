"""One-shot probe of the registry API host, when the bundles reveal it."""

from __future__ import annotations

import logging
from typing import Optional, Set

import httpx

from pkgrecon.config import Settings
from pkgrecon.scraper.fetcher import build_client
from pkgrecon.scraper.models import ProbeResult, RegistryPackage

logger = logging.getLogger(__name__)


def probe_registry(endpoints: Set[str], config: Settings) -> Optional[ProbeResult]:
    """Request the package listing if ``config.api_host`` was discovered.

    Returns ``None`` when the host is not an exact member of *endpoints*.
    Failures never raise (redirect loops and undecodable bodies included);
    they are reported through ``ProbeResult.error``.
    """
    if config.api_host not in endpoints:
        logger.debug("API host %s not discovered; skipping probe", config.api_host)
        return None

    url = config.listing_url
    logger.info("Probing %s", url)
    try:
        with build_client(config) as client:
            response = client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("Probe of %s failed: %s", url, exc)
        return ProbeResult(url=url, error=str(exc))

    if not response.is_success:
        logger.warning("Probe of %s returned HTTP %s", url, response.status_code)
        return ProbeResult(
            url=url,
            status_code=response.status_code,
            error=f"API returned {response.status_code}",
        )

    try:
        data = response.json()
    except ValueError as exc:
        return ProbeResult(url=url, status_code=response.status_code, error=f"invalid JSON: {exc}")
    if not isinstance(data, list):
        return ProbeResult(
            url=url,
            status_code=response.status_code,
            error=f"expected a list, got {type(data).__name__}",
        )

    return ProbeResult(
        url=url,
        status_code=response.status_code,
        total=len(data),
        packages=[RegistryPackage.from_api(item) for item in data[: config.probe_limit]],
    )
