"""AnnounceServiceResult: a service announces the outcome of some work on a resource.

https://coar-notify.net/specification/1.0.0/announce-resource/
"""

from __future__ import annotations

from typing import Optional

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyObject, NotifyPattern, NotifyProperties
from coarnotify.exceptions import ValidationError
from coarnotify.patterns._parts import DescribedItem, TypedObject


class AnnounceServiceResult(NotifyPattern):
    """A bare ``Announce``; ``context`` is required."""

    TYPE = ActivityStreamsTypes.ANNOUNCE

    @property
    def object(self) -> Optional[AnnounceServiceResultObject]:
        return self._get_part(AnnounceServiceResultObject, Properties.OBJECT)

    @object.setter
    def object(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.OBJECT, value)

    @property
    def context(self) -> Optional[AnnounceServiceResultContext]:
        return self._get_part(AnnounceServiceResultContext, Properties.CONTEXT)

    @context.setter
    def context(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.CONTEXT, value)

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.required_part_and_validate(ve, Properties.CONTEXT, lambda: self.context)

        if ve.has_errors():
            raise ve
        return True


class AnnounceServiceResultContext(NotifyObject):
    @property
    def item(self) -> Optional[AnnounceServiceResultItem]:
        return self._get_part(AnnounceServiceResultItem, NotifyProperties.ITEM)

    @item.setter
    def item(self, value) -> None:
        self._set_part(NotifyProperties.ITEM, value)


class AnnounceServiceResultItem(DescribedItem):
    pass


class AnnounceServiceResultObject(TypedObject):
    pass
