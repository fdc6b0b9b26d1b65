"""TentativelyAccept: the target will probably act on an earlier request.

https://coar-notify.net/specification/1.0.0/tentative-accept/
"""

from __future__ import annotations

from coarnotify.core.activitystreams2 import ActivityStreamsTypes
from coarnotify.core.notify import NestedPatternObjectMixin, NotifyPattern, SummaryMixin
from coarnotify.patterns._parts import ReplyToObjectMixin


class TentativelyAccept(ReplyToObjectMixin, NestedPatternObjectMixin, SummaryMixin, NotifyPattern):
    TYPE = ActivityStreamsTypes.TENTATIVE_ACCEPT
