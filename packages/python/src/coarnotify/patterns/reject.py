"""Reject: the target declines an earlier request.

https://coar-notify.net/specification/1.0.0/reject/
"""

from __future__ import annotations

from coarnotify.core.activitystreams2 import ActivityStreamsTypes
from coarnotify.core.notify import NestedPatternObjectMixin, NotifyPattern, SummaryMixin
from coarnotify.patterns._parts import ReplyToObjectMixin


class Reject(ReplyToObjectMixin, NestedPatternObjectMixin, SummaryMixin, NotifyPattern):
    TYPE = ActivityStreamsTypes.REJECT
