"""Building blocks shared by several patterns."""

from __future__ import annotations

from coarnotify.core.activitystreams2 import Properties
from coarnotify.core.notify import NotifyItem, NotifyObject, NotifyProperties
from coarnotify.exceptions import PartNotAnObjectError, ValidationError


class DescribedItem(NotifyItem):
    """An ``ietf:item`` that must state its ``type`` and ``mediaType``."""

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.required_and_validate(ve, Properties.TYPE, self.type)
        self.required(ve, NotifyProperties.MEDIA_TYPE, self.media_type)

        if ve.has_errors():
            raise ve
        return True


class TypedObject(NotifyObject):
    """An ``object`` that must state its ``type``."""

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.required_and_validate(ve, Properties.TYPE, self.type)

        if ve.has_errors():
            raise ve
        return True


class ReplyToObjectMixin:
    """Responses whose ``inReplyTo`` must point at the notification in ``object``."""

    def validate_reply_to(self, ve: ValidationError) -> None:
        """Record into ``ve`` a missing ``inReplyTo`` or one that is not ``object.id``."""
        self.required_and_validate(ve, Properties.IN_REPLY_TO, self.in_reply_to)
        if self.in_reply_to is None:
            return
        try:
            obj = self.object
        except PartNotAnObjectError:
            # reported against `object` by the pattern checks
            return
        objid = obj.id if obj is not None else None
        if self.in_reply_to != objid:
            ve.add_error(
                Properties.IN_REPLY_TO,
                f"Expected inReplyTo id to be the same as the nested object id. "
                f"inReplyTo: {self.in_reply_to}, object.id: {objid}",
            )

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.validate_reply_to(ve)

        if ve.has_errors():
            raise ve
        return True
