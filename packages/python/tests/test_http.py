"""Tests for the requests-backed HTTP layer."""

from unittest.mock import MagicMock, patch

import pytest

from coarnotify.http import DEFAULT_TIMEOUT, HttpLayer, HttpResponse, RequestsHttpLayer, RequestsHttpResponse


def _response(status=201, headers=None):
    resp = MagicMock()
    resp.status_code = status
    resp.headers = headers or {}
    return resp


class TestRequestsHttpLayer:
    def test_post(self):
        with patch("coarnotify.http.requests.post", return_value=_response(201, {"Location": "https://x/1"})) as post:
            resp = RequestsHttpLayer().post("https://example.com/inbox/", "{}", {"Content-Type": "application/ld+json"})
        post.assert_called_once_with(
            "https://example.com/inbox/",
            data="{}",
            headers={"Content-Type": "application/ld+json"},
            timeout=DEFAULT_TIMEOUT,
        )
        assert isinstance(resp, RequestsHttpResponse)
        assert resp.status_code == 201
        assert resp.header("Location") == "https://x/1"

    def test_get(self):
        with patch("coarnotify.http.requests.get", return_value=_response(200)) as get:
            resp = RequestsHttpLayer(timeout=5).get("https://example.com/inbox/")
        get.assert_called_once_with("https://example.com/inbox/", headers={}, timeout=5)
        assert resp.status_code == 200
        assert resp.header("Location") is None

    def test_timeout_override(self):
        with patch("coarnotify.http.requests.post", return_value=_response()) as post:
            RequestsHttpLayer().post("https://example.com/inbox/", "{}", timeout=1)
        assert post.call_args.kwargs["timeout"] == 1

    def test_underlying_response_exposed(self):
        raw = _response()
        assert RequestsHttpResponse(raw).requests_response is raw

    def test_timeout_property(self):
        assert RequestsHttpLayer().timeout == DEFAULT_TIMEOUT


class TestInterfaces:
    def test_layer_is_abstract(self):
        with pytest.raises(NotImplementedError):
            HttpLayer().post("https://example.com/", "{}")
        with pytest.raises(NotImplementedError):
            HttpLayer().get("https://example.com/")

    def test_response_is_abstract(self):
        with pytest.raises(NotImplementedError):
            HttpResponse().header("Location")
        with pytest.raises(NotImplementedError):
            HttpResponse().status_code
