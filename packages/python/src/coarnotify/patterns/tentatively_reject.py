"""TentativelyReject: the target will probably not act on an earlier request.

https://coar-notify.net/specification/1.0.0/tentative-reject/
"""

from __future__ import annotations

from coarnotify.core.activitystreams2 import ActivityStreamsTypes
from coarnotify.core.notify import NestedPatternObjectMixin, NotifyPattern, SummaryMixin
from coarnotify.patterns._parts import ReplyToObjectMixin


class TentativelyReject(ReplyToObjectMixin, NestedPatternObjectMixin, SummaryMixin, NotifyPattern):
    TYPE = ActivityStreamsTypes.TENTATIVE_REJECT
