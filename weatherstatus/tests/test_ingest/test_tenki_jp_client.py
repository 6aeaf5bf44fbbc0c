"""Tests for tenki.jp client with mocked httpx."""

import httpx
import pytest
import respx

from weatherstatus.ingest.tenki_jp_client import TenkiJpClient

URL = "https://tenki.example.com/forecast/3/16/4410/13113/"


@pytest.fixture
def tenki() -> TenkiJpClient:
    return TenkiJpClient(user_agent="weatherstatus-test/1.0", timeout=5.0)


class TestFetchPage:
    @respx.mock
    def test_success(self, tenki: TenkiJpClient, forecast_html: str):
        respx.get(URL).mock(return_value=httpx.Response(200, text=forecast_html))

        html = tenki.fetch_page(URL)
        assert "東京都港区の天気" in html

    @respx.mock
    def test_user_agent_header(self, tenki: TenkiJpClient):
        route = respx.get(URL).mock(return_value=httpx.Response(200, text="<html></html>"))

        tenki.fetch_page(URL)
        assert route.called
        request = route.calls[0].request
        assert request.headers["user-agent"] == "weatherstatus-test/1.0"

    @respx.mock
    def test_http_error_not_retried(self, tenki: TenkiJpClient):
        route = respx.get(URL).mock(return_value=httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            tenki.fetch_page(URL)
        assert route.call_count == 1
