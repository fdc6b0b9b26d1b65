"""RequestEndorsement: the origin asks the target to endorse a resource.

https://coar-notify.net/specification/1.0.0/request-endorsement/
"""

from __future__ import annotations

from typing import Optional

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyObject, NotifyPattern, NotifyProperties, NotifyTypes
from coarnotify.patterns._parts import DescribedItem


class RequestEndorsement(NotifyPattern):
    TYPE = [ActivityStreamsTypes.OFFER, NotifyTypes.ENDORSEMENT_ACTION]

    @property
    def object(self) -> Optional[RequestEndorsementObject]:
        return self._get_part(RequestEndorsementObject, Properties.OBJECT)

    @object.setter
    def object(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.OBJECT, value)


class RequestEndorsementObject(NotifyObject):
    @property
    def item(self) -> Optional[RequestEndorsementItem]:
        return self._get_part(RequestEndorsementItem, NotifyProperties.ITEM)

    @item.setter
    def item(self, value) -> None:
        self._set_part(NotifyProperties.ITEM, value)


class RequestEndorsementItem(DescribedItem):
    pass
