"""Data models for the recon pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set


@dataclass
class PackageLink:
    """An anchor on the landing page that looks like a package detail page."""

    title: str
    url: str


@dataclass
class RegistryPackage:
    """One record from the registry API listing."""

    slug: str
    repository_url: str

    @classmethod
    def from_api(cls, item: object) -> RegistryPackage:
        if not isinstance(item, dict):
            return cls(slug="", repository_url="")
        return cls(
            slug=str(item.get("slug") or ""),
            repository_url=str(item.get("repository_url") or ""),
        )


@dataclass
class ProbeResult:
    """Outcome of the single exploratory request against the registry API.

    ``total`` is the length of the full listing; ``packages`` only keeps the
    first few entries.
    """

    url: str
    status_code: Optional[int] = None
    total: int = 0
    packages: List[RegistryPackage] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ReconReport:
    """Everything one pipeline run discovered."""

    origin: str
    html: str
    packages: List[PackageLink] = field(default_factory=list)
    script_sources: List[str] = field(default_factory=list)
    endpoints: Set[str] = field(default_factory=set)
    probe: Optional[ProbeResult] = None
