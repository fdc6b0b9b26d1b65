"""AnnounceRelationship: a service announces a relationship between two resources.

https://coar-notify.net/specification/1.0.0/announce-relationship/
"""

from __future__ import annotations

from typing import Optional

from coarnotify.core.activitystreams2 import ActivityStreamsTypes, Properties
from coarnotify.core.notify import NotifyObject, NotifyPattern, NotifyTypes
from coarnotify.exceptions import ValidationError
from coarnotify.patterns._parts import TypedObject


class AnnounceRelationship(NotifyPattern):
    """The ``object`` carries the relationship triple; ``context`` is required."""

    TYPE = [ActivityStreamsTypes.ANNOUNCE, NotifyTypes.RELATIONSHIP_ACTION]

    @property
    def object(self) -> Optional[AnnounceRelationshipObject]:
        return self._get_part(AnnounceRelationshipObject, Properties.OBJECT)

    @object.setter
    def object(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.OBJECT, value)

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


class AnnounceRelationshipObject(TypedObject):
    """A ``Relationship`` object: all three members of the triple are required."""

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        obj, rel, subj = self.triple
        self.required_and_validate(ve, Properties.SUBJECT_TRIPLE, subj)
        self.required_and_validate(ve, Properties.RELATIONSHIP_TRIPLE, rel)
        self.required_and_validate(ve, Properties.OBJECT_TRIPLE, obj)

        if ve.has_errors():
            raise ve
        return True
