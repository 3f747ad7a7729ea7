"""Recon pipeline — landing page to registry probe.

``run_recon`` runs every stage exactly once, in order:

    fetch → save raw HTML → parse → package links + script sources
          → mine bundles → probe API host

Only the first fetch may abort the run.  Every later stage degrades to an
empty or partial result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from pkgrecon.config import Settings
from pkgrecon.scraper.extractor import (
    collect_script_sources,
    extract_package_links,
    parse_document,
)
from pkgrecon.scraper.fetcher import fetch_page
from pkgrecon.scraper.miner import mine_endpoints
from pkgrecon.scraper.models import ReconReport
from pkgrecon.scraper.probe import probe_registry

logger = logging.getLogger(__name__)

HtmlSink = Callable[[str], None]


def save_raw_html(html: str, path: Path) -> None:
    """Write *html* to *path*, replacing any previous contents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.debug("Saved %d characters of HTML to %s", len(html), path)


def run_recon(config: Settings, sink: Optional[HtmlSink] = None) -> ReconReport:
    """Run the full discovery pipeline against ``config.origin``.

    Args:
        config: Target registry and HTTP settings.
        sink: Receives the raw landing-page HTML once.  Defaults to writing
            ``config.raw_html_path``.

    Raises:
        pkgrecon.exceptions.FetchError: If the landing page returns a
            non-success status.
        httpx.TransportError: If the landing page cannot be reached.
    """
    html = fetch_page(config.home_url, config)

    if sink is None:
        save_raw_html(html, config.raw_html_path)
    else:
        sink(html)

    document = parse_document(html)
    packages = extract_package_links(document, config)
    script_sources = collect_script_sources(document)
    logger.info(
        "Found %d package link(s) and %d script bundle(s)",
        len(packages),
        len(script_sources),
    )

    endpoints = mine_endpoints(script_sources, config)
    probe = probe_registry(endpoints, config)

    return ReconReport(
        origin=config.origin,
        html=html,
        packages=packages,
        script_sources=script_sources,
        endpoints=endpoints,
        probe=probe,
    )
