"""UndoOffer: the origin retracts an offer it made earlier.

https://coar-notify.net/specification/1.0.0/undo-offer/
"""

from __future__ import annotations

from coarnotify.core.activitystreams2 import ActivityStreamsTypes
from coarnotify.core.notify import NestedPatternObjectMixin, NotifyPattern, SummaryMixin
from coarnotify.patterns._parts import ReplyToObjectMixin


class UndoOffer(ReplyToObjectMixin, NestedPatternObjectMixin, SummaryMixin, NotifyPattern):
    TYPE = ActivityStreamsTypes.UNDO
