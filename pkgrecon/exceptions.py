"""Exception types raised by the recon pipeline."""

from __future__ import annotations


class ReconError(Exception):
    """Base class for pkgrecon errors."""


class FetchError(ReconError):
    """A page fetch returned a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str, url: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"HTTP {status} for {url}")
