"""AnnounceReview: a service announces a review of a resource.

https://coar-notify.net/specification/1.0.0/announce-review/
"""

from __future__ import annotations

from typing import Optional

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyObject, NotifyPattern, NotifyProperties, NotifyTypes
from coarnotify.exceptions import ValidationError
from coarnotify.patterns._parts import DescribedItem, TypedObject


class AnnounceReview(NotifyPattern):
    """``object`` is the review and ``context`` the reviewed resource, which is required."""

    TYPE = [ActivityStreamsTypes.ANNOUNCE, NotifyTypes.REVIEW_ACTION]

    @property
    def object(self) -> Optional[AnnounceReviewObject]:
        return self._get_part(AnnounceReviewObject, Properties.OBJECT)

    @object.setter
    def object(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.OBJECT, value)

    @property
    def context(self) -> Optional[AnnounceReviewContext]:
        return self._get_part(AnnounceReviewContext, Properties.CONTEXT)

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


class AnnounceReviewContext(NotifyObject):
    @property
    def item(self) -> Optional[AnnounceReviewItem]:
        return self._get_part(AnnounceReviewItem, NotifyProperties.ITEM)

    @item.setter
    def item(self, value) -> None:
        self._set_part(NotifyProperties.ITEM, value)


class AnnounceReviewItem(DescribedItem):
    pass


class AnnounceReviewObject(TypedObject):
    pass
