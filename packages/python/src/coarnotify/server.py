"""Receiving notifications: the part of an inbox that sits behind the web layer.

Your web framework hands the request body to :meth:`COARNotifyServer.receive`,
which parses and (optionally) validates it, then passes the resulting
pattern object to your :class:`COARNotifyServiceBinding`.  Failures surface
as :class:`COARNotifyServerError`, carrying the HTTP status to respond with.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from coarnotify.core.notify import NotifyPattern
from coarnotify.exceptions import NoModelFound, NoTypeFound, ValidationError
from coarnotify.factory import DEFAULT_FACTORY, COARNotifyFactory
from coarnotify.limits import enforce_resource_limits

logger = logging.getLogger(__name__)


class COARNotifyReceipt:
    """What a service did with a notification: :attr:`CREATED` or :attr:`ACCEPTED`."""

    CREATED = 201
    ACCEPTED = 202

    def __init__(self, status: int, location: Optional[str] = None):
        self._status = status
        self._location = location

    @property
    def status(self) -> int:
        return self._status

    @property
    def location(self) -> Optional[str]:
        """The URL of the created resource, if any."""
        return self._location


class COARNotifyServiceBinding:
    """Interface your service implements to handle incoming notifications."""

    def notification_received(self, notification: NotifyPattern) -> COARNotifyReceipt:
        """Process a notification and report what was done with it."""
        raise NotImplementedError()


class COARNotifyServerError(Exception):
    """An incoming notification was refused; ``status`` is the HTTP status to return."""

    def __init__(self, status: int, msg: str):
        super().__init__(msg)
        self._status = status
        self._msg = msg

    @property
    def status(self) -> int:
        return self._status

    @property
    def message(self) -> str:
        return self._msg


class COARNotifyServer:
    """Entry point for incoming notifications.

    Args:
        service_impl: Your service binding.
        factory: The factory used to pick a pattern class.  Defaults to
            :data:`~coarnotify.factory.DEFAULT_FACTORY`.
        limits: Overrides for :data:`~coarnotify.limits.DEFAULT_RESOURCE_LIMITS`.
    """

    def __init__(
        self,
        service_impl: COARNotifyServiceBinding,
        factory: Optional[COARNotifyFactory] = None,
        limits: Optional[dict[str, int]] = None,
    ):
        self._service_impl = service_impl
        self._factory = factory if factory is not None else DEFAULT_FACTORY
        self._limits = limits

    def receive(self, raw: Union[str, bytes, dict[str, Any]], validate: bool = True) -> COARNotifyReceipt:
        """Parse, check and hand on an incoming notification.

        Args:
            raw: The request body, as JSON text or an already-parsed dict.
            validate: Validate the notification before passing it on.

        Returns:
            The receipt from the service binding.

        Raises:
            COARNotifyServerError: 400 for malformed or oversized payloads
                and invalid notifications; 422 when the payload has no type
                or no known pattern matches it.
        """
        try:
            data = enforce_resource_limits(raw, self._limits)
        except (ValueError, TypeError) as e:
            logger.warning("Rejected notification payload: %s", e)
            raise COARNotifyServerError(400, str(e)) from e

        try:
            obj = self._factory.get_by_object(data)
        except (NoTypeFound, NoModelFound) as e:
            logger.warning("Rejected notification: %s", e)
            raise COARNotifyServerError(422, str(e)) from e

        if validate:
            try:
                obj.validate()
            except ValidationError as e:
                logger.warning("Rejected invalid notification %s: %s", obj.id, e)
                raise COARNotifyServerError(400, f"Invalid notification: {e}") from e

        logger.info("Received %s notification %s", type(obj).__name__, obj.id)
        return self._service_impl.notification_received(obj)
