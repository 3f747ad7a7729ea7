"""Scraper package — page fetch, link extraction, bundle mining, API probe."""

from pkgrecon.scraper.extractor import (
    absolute_url,
    collect_script_sources,
    extract_package_links,
    parse_document,
)
from pkgrecon.scraper.fetcher import fetch_page
from pkgrecon.scraper.miner import mine_endpoints, scan_bundle_text
from pkgrecon.scraper.models import (
    PackageLink,
    ProbeResult,
    ReconReport,
    RegistryPackage,
)
from pkgrecon.scraper.probe import probe_registry

__all__ = [
    "absolute_url",
    "collect_script_sources",
    "extract_package_links",
    "fetch_page",
    "mine_endpoints",
    "parse_document",
    "probe_registry",
    "scan_bundle_text",
    "PackageLink",
    "ProbeResult",
    "ReconReport",
    "RegistryPackage",
]
