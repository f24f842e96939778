import datetime

import pytest
import requests

from seo_inspector.errors import FetchError, NetworkError, ValidationError
from seo_inspector.fetcher import fetch_page, normalize_url


def _response(
    status: int,
    body: str | bytes = "",
    reason: str = "OK",
    url: str = "https://example.com",
    content_type: str = "text/html; charset=utf-8",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.headers["Content-Type"] = content_type
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    resp.url = url
    resp.elapsed = datetime.timedelta(milliseconds=42)
    return resp


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("example.com", "https://example.com"),
        ("http://example.com/a", "http://example.com/a"),
        ("https://example.com/a?b=1", "https://example.com/a?b=1"),
        ("  example.com/page  ", "https://example.com/page"),
    ],
)
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", None, "https://"])
def test_normalize_url_rejects_missing_host(raw):
    with pytest.raises(ValidationError):
        normalize_url(raw)


def test_fetch_page_returns_body_and_sends_user_agent(monkeypatch):
    seen = {}

    def fake_get(self, url, headers=None, timeout=None, allow_redirects=True):
        seen.update(url=url, headers=headers, timeout=timeout, max_redirects=self.max_redirects)
        return _response(200, "<html><title>Hi</title></html>", url="https://example.com/")

    monkeypatch.setattr(requests.Session, "get", fake_get)
    page = fetch_page("example.com")

    assert page.url == "https://example.com"
    assert page.final_url == "https://example.com/"
    assert page.html == "<html><title>Hi</title></html>"
    assert page.elapsed_ms == 42
    assert seen["url"] == "https://example.com"
    assert "SEOAnalyzerBot" in seen["headers"]["User-Agent"]
    assert seen["timeout"] > 0
    assert seen["max_redirects"] == 10


def test_fetch_page_http_error_carries_status(monkeypatch):
    monkeypatch.setattr(requests.Session, "get", lambda self, url, **kw: _response(404, reason="Not Found"))

    with pytest.raises(FetchError) as exc:
        fetch_page("https://example.com/missing")

    assert exc.value.status_code == 404
    assert exc.value.message == "Failed to fetch URL: 404 Not Found"


def test_fetch_page_network_failure(monkeypatch):
    def boom(self, url, **kw):
        raise requests.ConnectionError("Name or service not known")

    monkeypatch.setattr(requests.Session, "get", boom)

    with pytest.raises(NetworkError):
        fetch_page("https://does-not-resolve.invalid")


def test_fetch_page_timeout_is_network_error(monkeypatch):
    def slow(self, url, **kw):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(requests.Session, "get", slow)

    with pytest.raises(NetworkError):
        fetch_page("https://example.com")


UTF8_TITLE = "Café Über Straße Ärger und Öl: ein Überblick 2024"


def test_utf8_page_without_header_charset(monkeypatch):
    html = f'<html><head><meta charset="utf-8"><title>{UTF8_TITLE}</title></head></html>'
    monkeypatch.setattr(
        requests.Session, "get",
        lambda self, url, **kw: _response(200, html.encode("utf-8"), content_type="text/html"),
    )

    page = fetch_page("https://example.com")

    assert page.html == html
    assert f"<title>{UTF8_TITLE}</title>" in page.html


def test_meta_charset_used_when_header_has_none(monkeypatch):
    html = '<html><head><meta charset="iso-8859-1"><title>Déjà vu</title></head></html>'
    monkeypatch.setattr(
        requests.Session, "get",
        lambda self, url, **kw: _response(200, html.encode("iso-8859-1"), content_type="text/html"),
    )

    assert "Déjà vu" in fetch_page("https://example.com").html


def test_header_charset_wins(monkeypatch):
    html = "<html><head><title>Ça va</title></head></html>"
    monkeypatch.setattr(
        requests.Session, "get",
        lambda self, url, **kw: _response(
            200, html.encode("windows-1252"), content_type="text/html; charset=windows-1252",
        ),
    )

    assert "Ça va" in fetch_page("https://example.com").html


def test_normalize_url_rejects_non_string():
    with pytest.raises(ValidationError):
        normalize_url(123)
