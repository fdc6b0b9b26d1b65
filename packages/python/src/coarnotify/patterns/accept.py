"""Accept: the target has accepted an earlier request.

https://coar-notify.net/specification/1.0.0/accept/
"""

from __future__ import annotations

from coarnotify.core.activitystreams2 import ActivityStreamsTypes
from coarnotify.core.notify import NestedPatternObjectMixin, NotifyPattern
from coarnotify.patterns._parts import ReplyToObjectMixin


class Accept(ReplyToObjectMixin, NestedPatternObjectMixin, NotifyPattern):
    """The ``object`` is the notification being accepted, and ``inReplyTo`` its id."""

    TYPE = ActivityStreamsTypes.ACCEPT
