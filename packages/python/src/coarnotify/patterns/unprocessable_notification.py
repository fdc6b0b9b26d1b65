"""UnprocessableNotification: the target could not handle a notification.

https://coar-notify.net/specification/1.0.0/unprocessable/
"""

from __future__ import annotations

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyPattern, NotifyTypes, SummaryMixin
from coarnotify.exceptions import ValidationError


class UnprocessableNotification(SummaryMixin, NotifyPattern):
    """Requires ``inReplyTo`` and a ``summary`` describing the problem."""

    TYPE = [ActivityStreamsTypes.FLAG, NotifyTypes.UNPROCESSABLE_NOTIFICATION]

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.required_and_validate(ve, Properties.IN_REPLY_TO, self.in_reply_to)
        self.required(ve, Properties.SUMMARY, self.summary)

        if ve.has_errors():
            raise ve
        return True
