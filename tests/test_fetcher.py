"""Tests for the landing-page fetcher."""

from __future__ import annotations

import httpx
import pytest
import respx

from pkgrecon.config import Settings
from pkgrecon.exceptions import FetchError, ReconError
from pkgrecon.scraper.fetcher import fetch_page

HOME = "https://pkg-odin.org/"


@pytest.fixture
def config(tmp_path) -> Settings:
    return Settings(origin="https://pkg-odin.org", raw_html_path=tmp_path / "page.html")


class TestFetchPage:
    def test_success_returns_body(self, config) -> None:
        with respx.mock:
            respx.get(HOME).mock(return_value=httpx.Response(200, text="<html>ok</html>"))
            assert fetch_page(HOME, config) == "<html>ok</html>"

    def test_sends_identifying_headers(self, config) -> None:
        with respx.mock:
            route = respx.get(HOME).mock(return_value=httpx.Response(200, text=""))
            fetch_page(HOME, config)

        headers = route.calls.last.request.headers
        assert headers["user-agent"] == "odpkg-scrape/0.1 (dev tool)"
        assert headers["accept"] == "text/html"

    def test_non_success_raises_fetch_error(self, config) -> None:
        with respx.mock:
            respx.get(HOME).mock(return_value=httpx.Response(500))
            with pytest.raises(FetchError) as excinfo:
                fetch_page(HOME, config)

        err = excinfo.value
        assert isinstance(err, ReconError)
        assert err.status_code == 500
        assert err.url == HOME
        assert str(err) == f"HTTP 500 Internal Server Error for {HOME}"

    def test_transport_error_propagates(self, config) -> None:
        with respx.mock:
            respx.get(HOME).mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(httpx.TransportError):
                fetch_page(HOME, config)

    def test_unknown_status_message_has_no_empty_reason(self, config) -> None:
        with respx.mock:
            respx.get(HOME).mock(return_value=httpx.Response(599))
            with pytest.raises(FetchError) as excinfo:
                fetch_page(HOME, config)

        assert excinfo.value.reason == ""
        assert str(excinfo.value) == f"HTTP 599 for {HOME}"
