"""AnnounceEndorsement: a service announces that it has endorsed a resource.

https://coar-notify.net/specification/1.0.0/announce-endorsement/
"""

from __future__ import annotations

from typing import Optional

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyObject, NotifyPattern, NotifyProperties, NotifyTypes
from coarnotify.exceptions import ValidationError
from coarnotify.patterns._parts import DescribedItem


class AnnounceEndorsement(NotifyPattern):
    """The ``context`` (the endorsed resource) is required."""

    TYPE = [ActivityStreamsTypes.ANNOUNCE, NotifyTypes.ENDORSEMENT_ACTION]

    @property
    def context(self) -> Optional[AnnounceEndorsementContext]:
        return self._get_part(AnnounceEndorsementContext, Properties.CONTEXT)

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


class AnnounceEndorsementContext(NotifyObject):
    @property
    def item(self) -> Optional[AnnounceEndorsementItem]:
        return self._get_part(AnnounceEndorsementItem, NotifyProperties.ITEM)

    @item.setter
    def item(self, value) -> None:
        self._set_part(NotifyProperties.ITEM, value)


class AnnounceEndorsementItem(DescribedItem):
    pass
