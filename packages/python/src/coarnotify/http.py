"""The HTTP layer the client sends notifications through.

:class:`HttpLayer` and :class:`HttpResponse` are the interfaces the client
needs; :class:`RequestsHttpLayer` is the default implementation, built on
``requests``.  Supply your own layer to use a different HTTP library or to
stub out the network in tests.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds


class HttpResponse:
    """Interface for an HTTP response."""

    def header(self, header_name: str) -> Optional[str]:
        """Return the value of a response header, or ``None`` if absent."""
        raise NotImplementedError()

    @property
    def status_code(self) -> int:
        raise NotImplementedError()


class HttpLayer:
    """Interface for the HTTP operations the client needs."""

    def post(
        self, url: str, data: str, headers: Optional[dict[str, str]] = None, *args: Any, **kwargs: Any,
    ) -> HttpResponse:
        """POST ``data`` to ``url``."""
        raise NotImplementedError()

    def get(
        self, url: str, headers: Optional[dict[str, str]] = None, *args: Any, **kwargs: Any,
    ) -> HttpResponse:
        """GET ``url``."""
        raise NotImplementedError()


class RequestsHttpResponse(HttpResponse):
    """Wraps a :class:`requests.Response`."""

    def __init__(self, resp: requests.Response):
        self._resp = resp

    def header(self, header_name: str) -> Optional[str]:
        return self._resp.headers.get(header_name)

    @property
    def status_code(self) -> int:
        return self._resp.status_code

    @property
    def requests_response(self) -> requests.Response:
        """The underlying :class:`requests.Response`."""
        return self._resp


class RequestsHttpLayer(HttpLayer):
    """:class:`HttpLayer` over ``requests``.

    Extra keyword arguments are passed through to
    ``requests``; ``timeout`` defaults to :data:`DEFAULT_TIMEOUT`.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    def post(
        self, url: str, data: str, headers: Optional[dict[str, str]] = None, *args: Any, **kwargs: Any,
    ) -> RequestsHttpResponse:
        kwargs.setdefault("timeout", self._timeout)
        logger.debug("POST %s", url)
        resp = requests.post(url, data=data, headers=headers or {}, **kwargs)
        return RequestsHttpResponse(resp)

    def get(
        self, url: str, headers: Optional[dict[str, str]] = None, *args: Any, **kwargs: Any,
    ) -> RequestsHttpResponse:
        kwargs.setdefault("timeout", self._timeout)
        logger.debug("GET %s", url)
        resp = requests.get(url, headers=headers or {}, **kwargs)
        return RequestsHttpResponse(resp)
