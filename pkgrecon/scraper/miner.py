"""Endpoint mining: text-scan script bundles for URLs and ``/api/`` paths.

This is heuristic by nature.  Minified bundles produce false positives and
obfuscated ones hide endpoints; the result is enrichment, never a guarantee.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Set

from pkgrecon.config import Settings
from pkgrecon.scraper.extractor import absolute_url
from pkgrecon.scraper.fetcher import build_client, fetch_bundle

logger = logging.getLogger(__name__)

_URL_PATTERN = re.compile(r"https?://[^\s\"'<>]+")
_API_PATH_PATTERN = re.compile(r"/api/[a-zA-Z0-9_\-/]+")


def scan_bundle_text(text: str, origin: str) -> Set[str]:
    """Return every absolute URL and origin-qualified ``/api/`` path in *text*."""
    found: Set[str] = set(_URL_PATTERN.findall(text))
    found.update(f"{origin}{path}" for path in _API_PATH_PATTERN.findall(text))
    return found


def mine_endpoints(script_sources: Iterable[str], config: Settings) -> Set[str]:
    """Fetch each bundle in order and collect the endpoints it mentions.

    Bundles that fail to download are skipped.  With no sources at all, no
    client is opened and no request is made.
    """
    sources = list(script_sources)
    endpoints: Set[str] = set()
    if not sources:
        return endpoints

    logger.info("Scanning %d script bundle(s) for endpoints", len(sources))
    with build_client(config) as client:
        for src in sources:
            url = absolute_url(src, config.origin)
            text = fetch_bundle(client, url)
            if text is None:
                continue
            found = scan_bundle_text(text, config.origin)
            logger.debug("%s: %d endpoint(s)", url, len(found))
            endpoints |= found
    return endpoints
