"""Link and script-source extraction from the landing page."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, List, TypeVar

from bs4 import BeautifulSoup

from pkgrecon.config import Settings
from pkgrecon.scraper.models import PackageLink

T = TypeVar("T")

_PACKAGES_PREFIX = "/packages/"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _unique_by(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Drop items whose *key* was already seen, keeping first occurrences."""
    seen: set = set()
    out: List[T] = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        out.append(item)
    return out


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* once so both extractors can walk the same tree."""
    return BeautifulSoup(html, "html.parser")


def absolute_url(href: str, origin: str) -> str:
    """Resolve *href* against *origin*.

    Anything starting with ``http`` is taken as already absolute; everything
    else is appended to the origin verbatim.
    """
    if not href:
        return ""
    if href.startswith("http"):
        return href
    return f"{origin}{href}"


def extract_package_links(document: BeautifulSoup, config: Settings) -> List[PackageLink]:
    """Return distinct package-page links found in *document*.

    An anchor qualifies when it has visible text and its ``href`` either starts
    with ``/packages/`` or mentions the origin's packages path.  Entries are
    de-duplicated by resolved URL; the first title seen for a URL wins.
    """
    marker = config.packages_marker
    items: List[PackageLink] = []
    for anchor in document.find_all("a"):
        href = anchor.get("href") or ""
        text = anchor.get_text().strip()
        if not text:
            continue
        if href.startswith(_PACKAGES_PREFIX) or marker in href:
            items.append(PackageLink(title=text, url=absolute_url(href, config.origin)))
    return _unique_by(items, lambda it: it.url)


def collect_script_sources(document: BeautifulSoup) -> List[str]:
    """Return the literal ``src`` of every external script, in document order."""
    return [
        tag["src"]
        for tag in document.find_all("script", src=True)
        if tag["src"]
    ]
