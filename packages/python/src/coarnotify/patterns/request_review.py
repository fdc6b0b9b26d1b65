"""RequestReview: the origin asks the target to review a resource.

https://coar-notify.net/specification/1.0.0/request-review/
"""

from __future__ import annotations

from typing import Optional

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyObject, NotifyPattern, NotifyProperties, NotifyTypes
from coarnotify.patterns._parts import DescribedItem


class RequestReview(NotifyPattern):
    TYPE = [ActivityStreamsTypes.OFFER, NotifyTypes.REVIEW_ACTION]

    @property
    def object(self) -> Optional[RequestReviewObject]:
        return self._get_part(RequestReviewObject, Properties.OBJECT)

    @object.setter
    def object(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.OBJECT, value)


class RequestReviewObject(NotifyObject):
    @property
    def item(self) -> Optional[RequestReviewItem]:
        return self._get_part(RequestReviewItem, NotifyProperties.ITEM)

    @item.setter
    def item(self, value) -> None:
        self._set_part(NotifyProperties.ITEM, value)


class RequestReviewItem(DescribedItem):
    pass
