"""pkgrecon CLI — scrape a package registry's landing page and bundles.

Usage:
    python cli/main.py --help

Runs the whole recon pipeline once against the configured origin:
    fetch page → package links → script bundles → endpoints → API probe
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pkgrecon.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import httpx
import typer

from cli.rendering import render_endpoints, render_package_links, render_probe
from pkgrecon.config import settings
from pkgrecon.exceptions import ReconError
from pkgrecon.logger import configure_logging
from pkgrecon.pipeline import run_recon

app = typer.Typer(
    name="pkgrecon",
    help="Discover a package registry's public surface from its landing page.",
)


@app.command("scan")
def scan(
    origin: Optional[str] = typer.Option(None, help="Registry origin to scrape."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to save the raw landing-page HTML."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Fetch the landing page, mine its bundles and probe the registry API."""
    changes = {}
    if origin:
        changes["origin"] = origin
    if output is not None:
        changes["raw_html_path"] = output
    config = settings.replace(**changes) if changes else settings

    configure_logging("DEBUG" if verbose else config.log_level)

    try:
        report = run_recon(config)
    except (ReconError, httpx.HTTPError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    for line in render_package_links(report.packages):
        typer.echo(line)
    for line in render_endpoints(report.endpoints, report.script_sources):
        typer.echo(line)
    for line in render_probe(report.probe):
        typer.echo(line)
    typer.echo(f"\nSaved raw HTML to {config.raw_html_path}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
