"""Tests for the registry API probe."""

from __future__ import annotations

import httpx
import pytest
import respx

from pkgrecon.config import Settings
from pkgrecon.scraper.models import RegistryPackage
from pkgrecon.scraper.probe import probe_registry

API_HOST = "https://api.pkg-odin.org"
LISTING = f"{API_HOST}/packages"


@pytest.fixture
def config(tmp_path) -> Settings:
    return Settings(
        origin="https://pkg-odin.org",
        api_host=API_HOST,
        listing_path="/packages",
        probe_limit=10,
        raw_html_path=tmp_path / "page.html",
    )


def _packages(n: int) -> list:
    return [
        {"slug": f"pkg-{i}", "repository_url": f"https://github.com/o/pkg-{i}", "stars": i}
        for i in range(n)
    ]


class TestProbeRegistry:
    def test_absent_host_makes_no_request(self, config) -> None:
        with respx.mock:
            assert probe_registry({"https://example.com/x"}, config) is None
            assert respx.calls.call_count == 0

    def test_host_match_is_exact(self, config) -> None:
        with respx.mock:
            endpoints = {f"{API_HOST}/", f"{API_HOST}/v1", "https://api.pkg-odin.org.evil"}
            assert probe_registry(endpoints, config) is None
            assert respx.calls.call_count == 0

    def test_success_reports_total_and_first_ten(self, config) -> None:
        with respx.mock:
            route = respx.get(LISTING).mock(return_value=httpx.Response(200, json=_packages(25)))
            result = probe_registry({API_HOST}, config)

        assert route.calls.last.request.headers["user-agent"] == config.user_agent
        assert result.ok
        assert result.status_code == 200
        assert result.total == 25
        assert len(result.packages) == 10
        assert result.packages[0] == RegistryPackage(
            slug="pkg-0", repository_url="https://github.com/o/pkg-0"
        )

    def test_short_listing_is_not_padded(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(return_value=httpx.Response(200, json=_packages(3)))
            result = probe_registry({API_HOST}, config)

        assert result.total == 3
        assert [p.slug for p in result.packages] == ["pkg-0", "pkg-1", "pkg-2"]

    def test_missing_fields_become_empty(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(return_value=httpx.Response(200, json=[{"slug": "a"}, "junk"]))
            result = probe_registry({API_HOST}, config)

        assert result.packages == [
            RegistryPackage(slug="a", repository_url=""),
            RegistryPackage(slug="", repository_url=""),
        ]

    def test_non_success_is_reported_not_raised(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(return_value=httpx.Response(503))
            result = probe_registry({API_HOST}, config)

        assert not result.ok
        assert result.status_code == 503
        assert result.error == "API returned 503"
        assert result.packages == []

    def test_transport_error_is_reported(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(side_effect=httpx.ConnectError("refused"))
            result = probe_registry({API_HOST}, config)

        assert not result.ok
        assert result.status_code is None

    def test_non_list_body_is_reported(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(return_value=httpx.Response(200, json={"items": []}))
            result = probe_registry({API_HOST}, config)

        assert not result.ok
        assert "dict" in result.error

    def test_invalid_json_is_reported(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(return_value=httpx.Response(200, text="<html>"))
            result = probe_registry({API_HOST}, config)

        assert not result.ok
        assert result.error.startswith("invalid JSON")

    def test_redirect_loop_is_reported(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(
                return_value=httpx.Response(302, headers={"location": LISTING})
            )
            result = probe_registry({API_HOST}, config)

        assert not result.ok
        assert result.status_code is None
        assert result.packages == []

    def test_undecodable_body_is_reported(self, config) -> None:
        with respx.mock:
            respx.get(LISTING).mock(
                return_value=httpx.Response(
                    200,
                    headers={"content-encoding": "gzip"},
                    stream=httpx.ByteStream(b"definitely not gzip"),
                )
            )
            result = probe_registry({API_HOST}, config)

        assert not result.ok
        assert result.error
