"""Sending notifications to a remote inbox."""

from __future__ import annotations

import json
import logging
from typing import Optional

from coarnotify.core.notify import NotifyPattern
from coarnotify.exceptions import NotifyException
from coarnotify.http import HttpLayer, RequestsHttpLayer

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": 'application/ld+json;profile="https://www.w3.org/ns/activitystreams"',
}


class NotifyResponse:
    """What the inbox did with a notification.

    ``action`` is :attr:`CREATED` or :attr:`ACCEPTED`.  When the inbox
    created a resource, ``location`` is its URL.
    """

    CREATED = "created"
    ACCEPTED = "accepted"

    def __init__(self, action: str, location: Optional[str] = None):
        self._action = action
        self._location = location

    @property
    def action(self) -> str:
        return self._action

    @property
    def location(self) -> Optional[str]:
        return self._location


class COARNotifyClient:
    """Sends notifications to COAR Notify inboxes.

    Args:
        inbox_url: The inbox to send to when :meth:`send` is not given one.
        http_layer: The :class:`~coarnotify.http.HttpLayer` to send through.
            Defaults to :class:`~coarnotify.http.RequestsHttpLayer`.
        headers: Overrides for :data:`DEFAULT_HEADERS`.
    """

    def __init__(
        self,
        inbox_url: Optional[str] = None,
        http_layer: Optional[HttpLayer] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        self._inbox_url = inbox_url
        self._http = http_layer if http_layer is not None else RequestsHttpLayer()
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}

    @property
    def inbox_url(self) -> Optional[str]:
        return self._inbox_url

    @inbox_url.setter
    def inbox_url(self, value: Optional[str]) -> None:
        self._inbox_url = value

    def send(
        self,
        notification: NotifyPattern,
        inbox_url: Optional[str] = None,
        validate: bool = True,
    ) -> NotifyResponse:
        """POST a notification to an inbox.

        The inbox is, in order of preference: ``inbox_url``, the client's
        default, or the notification's ``target.inbox``.

        Raises:
            ValueError: If no inbox can be found.
            ValidationError: If ``validate`` is true and the notification
                is invalid.  Nothing is sent.
            NotifyException: If the inbox responds with anything other than
                201 or 202.
        """
        if inbox_url is None:
            inbox_url = self._inbox_url
        if inbox_url is None:
            target = notification.target
            inbox_url = target.inbox if target is not None else None
        if inbox_url is None:
            raise ValueError("No inbox URL provided at the client, method, or notification level")

        if validate:
            notification.validate()

        resp = self._http.post(inbox_url, json.dumps(notification.to_jsonld()), dict(self._headers))

        if resp.status_code == 201:
            logger.info("Notification %s created at %s", notification.id, inbox_url)
            return NotifyResponse(NotifyResponse.CREATED, location=resp.header("Location"))
        elif resp.status_code == 202:
            logger.info("Notification %s accepted by %s", notification.id, inbox_url)
            return NotifyResponse(NotifyResponse.ACCEPTED)

        raise NotifyException(f"Unexpected response: {resp.status_code}")
