"""The ActivityStreams document store and the Notify object model."""

from coarnotify.core import activitystreams2
from coarnotify.core import notify

__all__ = ["activitystreams2", "notify"]
