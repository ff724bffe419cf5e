import httpx

from csv_merger.background import random_background
from csv_merger.config import get_settings


class _FakeResponse:
    def __init__(self, payload, *, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            request = httpx.Request("GET", "https://api.unsplash.com/photos/random")
            response = httpx.Response(self.status_code, request=request)
            raise httpx.HTTPStatusError("request failed", request=request, response=response)

    def json(self):
        return self._payload


def test_background_builds_sized_url(monkeypatch):
    captured = {}

    def fake_get(url, *, headers, timeout):
        captured["url"] = url
        captured["headers"] = headers
        captured["timeout"] = timeout
        return _FakeResponse({"urls": {"full": "https://images.example/photo?ixid=1"}})

    monkeypatch.setenv("CSV_MERGER_UNSPLASH_CLIENT_ID", "test-client")
    monkeypatch.setenv("CSV_MERGER_BACKGROUND_TIMEOUT_SECONDS", "3")
    monkeypatch.setattr("csv_merger.background.httpx.get", fake_get)

    url = random_background(get_settings(), 1280)

    assert url == "https://images.example/photo?ixid=1&w=1280&q=80&fm=jpg&crop=entropy"
    assert captured["headers"] == {"Authorization": "Client-ID test-client"}
    assert captured["timeout"] == 3.0
    assert "photos/random" in captured["url"]


def test_background_missing_url_yields_none(monkeypatch):
    monkeypatch.setattr(
        "csv_merger.background.httpx.get",
        lambda url, *, headers, timeout: _FakeResponse({"errors": ["rate limited"]}),
    )
    assert random_background(get_settings(), 800) is None


def test_background_http_error_yields_none(monkeypatch):
    monkeypatch.setattr(
        "csv_merger.background.httpx.get",
        lambda url, *, headers, timeout: _FakeResponse({}, status_code=403),
    )
    assert random_background(get_settings(), 800) is None


def test_background_endpoint_never_fails(client, monkeypatch):
    def fake_get(url, *, headers, timeout):
        raise httpx.ConnectError("offline")

    monkeypatch.setattr("csv_merger.background.httpx.get", fake_get)
    r = client.get("/background", params={"width": 1024})
    assert r.status_code == 200
    assert r.json() == {"url": None}
