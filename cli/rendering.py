"""Utilities for rendering a recon report in the CLI."""

from __future__ import annotations

from typing import List, Optional, Set

from pkgrecon.scraper.models import PackageLink, ProbeResult


def render_package_links(items: List[PackageLink]) -> List[str]:
    lines = [f"Found {len(items)} candidate package links"]
    lines.extend(f"- {it.title} :: {it.url}" for it in items)
    return lines


def render_endpoints(endpoints: Set[str], script_sources: List[str]) -> List[str]:
    """Render the mined endpoints.

    Nothing at all is printed when the page loaded no bundles; a "none found"
    line only appears when bundles were scanned without result.
    """
    if not script_sources:
        return []
    lines = [
        "",
        f"Scanned {len(script_sources)} script bundle(s) for endpoints.",
    ]
    if endpoints:
        lines.append("Possible endpoints found:")
        lines.extend(f"- {u}" for u in sorted(endpoints))
    else:
        lines.append("No obvious endpoints found in JS bundles.")
    return lines


def render_probe(probe: Optional[ProbeResult]) -> List[str]:
    if probe is None:
        return []
    lines = ["", f"Probing {probe.url} ..."]
    if not probe.ok:
        if probe.status_code is not None and not 200 <= probe.status_code < 300:
            lines.append(f"API returned {probe.status_code}")
        else:
            lines.append(f"API probe failed: {probe.error}")
        return lines
    lines.append(f"API packages: {probe.total}")
    lines.extend(f"- {pkg.slug} :: {pkg.repository_url}" for pkg in probe.packages)
    return lines
