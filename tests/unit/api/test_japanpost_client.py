from __future__ import annotations

from types import SimpleNamespace
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from jp_post_tracking.api.japanpost import JapanPostClient, JapanPostConfig
from jp_post_tracking.errors import TransportError


class FakeTransport:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.urls = []

    def get(self, url, *, headers=None, params=None):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


def _response(status_code=200, text="<html></html>", encoding="utf-8"):
    return SimpleNamespace(status_code=status_code, text=text,
                           encoding=encoding, apparent_encoding="utf-8")


def _fixed_rand(lo, hi):
    return hi


def test_request_url_carries_form_fields():
    client = JapanPostClient(
        JapanPostConfig(search_url="https://example.test/services/srv/search"),
        transport=FakeTransport(),
        rand=_fixed_rand,
    )

    url = client.build_request_url("123456789012")
    parts = urlsplit(url)
    qs = parse_qs(parts.query, keep_blank_values=True)

    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://example.test/services/srv/search"
    assert qs["requestNo1"] == ["123456789012"]
    for i in range(2, 11):
        assert qs[f"requestNo{i}"] == [""]
    assert qs["search.x"] == ["160"]
    assert qs["search.y"] == ["40"]
    assert qs["startingUrlPatten"] == [""]
    assert qs["locale"] == ["ja"]


def test_search_coordinates_stay_in_bounds():
    client = JapanPostClient(transport=FakeTransport())
    for _ in range(50):
        params = client.build_params("1")
        assert 0 <= params["search.x"] <= 160
        assert 0 <= params["search.y"] <= 40


def test_proxy_requires_host_and_port():
    assert not JapanPostClient(JapanPostConfig(), transport=FakeTransport()).is_available_proxy()
    assert not JapanPostClient(JapanPostConfig(proxy="10.0.0.1"),
                               transport=FakeTransport()).is_available_proxy()

    client = JapanPostClient(JapanPostConfig(proxy="10.0.0.1", port=3128),
                             transport=FakeTransport())
    assert client.is_available_proxy()
    assert client.proxies() == {
        "http": "http://10.0.0.1:3128",
        "https": "http://10.0.0.1:3128",
    }


def test_default_transport_uses_configured_proxy_and_timeout():
    client = JapanPostClient(JapanPostConfig(proxy="proxy.local", port="8080", timeout=7))

    assert client.transport.timeout == 7
    assert client.transport.session.proxies["https"] == "http://proxy.local:8080"


def test_fetch_sanitizes_code_and_returns_body():
    transport = FakeTransport(_response(text="<html>ok</html>"))
    client = JapanPostClient(transport=transport)

    body = client.fetch("1234-5678-9012")

    assert body == "<html>ok</html>"
    assert "requestNo1=123456789012" in transport.urls[0]


@pytest.mark.parametrize("status", [199, 404, 500, 503])
def test_fetch_rejects_bad_status(status):
    client = JapanPostClient(transport=FakeTransport(_response(status_code=status)))

    with pytest.raises(TransportError, match=rf"HTTP response code \[{status}\]"):
        client.fetch("123456789012")


def test_fetch_accepts_redirect_range():
    client = JapanPostClient(transport=FakeTransport(_response(status_code=302, text="moved")))
    assert client.fetch("123456789012") == "moved"


def test_fetch_wraps_network_errors():
    client = JapanPostClient(
        transport=FakeTransport(exc=requests.ConnectionError("refused")))

    with pytest.raises(TransportError, match="refused") as ei:
        client.fetch("123456789012")
    assert isinstance(ei.value.__cause__, requests.ConnectionError)


def test_fetch_fixes_latin1_fallback_encoding():
    resp = _response(encoding="ISO-8859-1")
    client = JapanPostClient(transport=FakeTransport(resp))

    client.fetch("123456789012")

    assert resp.encoding == "utf-8"
