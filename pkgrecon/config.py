"""Centralised settings for pkgrecon.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The pipeline never reads the module-level ``settings`` singleton directly; it
receives a :class:`Settings` instance so tests can point it at any origin.
"""

from __future__ import annotations

import os
import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load .env from the project root (one level up from this file)
_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_ROOT / ".env", override=False)


def _optional_float(name: str) -> Optional[float]:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    """Runtime configuration for one recon run.

    The default ``raw_html_path`` is resolved relative to the source checkout
    (the directory holding ``pkgrecon/``).  After a non-editable install that
    directory is ``site-packages``, so set ``PKGRECON_RAW_HTML`` or pass
    ``--output`` instead of relying on the default.
    """

    # ------------------------------------------------------------------
    # Target registry
    # ------------------------------------------------------------------
    origin: str = field(
        default_factory=lambda: os.environ.get("PKGRECON_ORIGIN", "https://pkg-odin.org")
    )
    api_host: str = field(
        default_factory=lambda: os.environ.get("PKGRECON_API_HOST", "https://api.pkg-odin.org")
    )
    listing_path: str = field(
        default_factory=lambda: os.environ.get("PKGRECON_LISTING_PATH", "/packages")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PKGRECON_USER_AGENT", "odpkg-scrape/0.1 (dev tool)"
        )
    )
    # None means requests never time out.
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Reporting / output
    # ------------------------------------------------------------------
    probe_limit: int = field(
        default_factory=lambda: int(os.environ.get("PKGRECON_PROBE_LIMIT", "10"))
    )
    raw_html_path: Path = field(
        default_factory=lambda: Path(
            os.environ.get("PKGRECON_RAW_HTML", _ROOT / "pkg-odin.html")
        )
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("PKGRECON_LOG_LEVEL", "WARNING")
    )

    def __post_init__(self) -> None:
        self.origin = self.origin.rstrip("/")
        self.api_host = self.api_host.rstrip("/")

    @property
    def home_url(self) -> str:
        """URL of the registry landing page."""
        return f"{self.origin}/"

    @property
    def listing_url(self) -> str:
        """Package listing endpoint on the API host."""
        return f"{self.api_host}{self.listing_path}"

    @property
    def packages_marker(self) -> str:
        """Host-qualified packages path, e.g. ``pkg-odin.org/packages``."""
        return f"{urlparse(self.origin).netloc}/packages"

    def replace(self, **changes) -> Settings:
        """Return a copy of these settings with *changes* applied."""
        return dataclasses.replace(self, **changes)


# Module-level singleton, used for CLI defaults:
#   from pkgrecon.config import settings
settings = Settings()
