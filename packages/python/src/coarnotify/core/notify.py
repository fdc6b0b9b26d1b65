"""Core COAR Notify model objects.

Every pattern and every nested part of a pattern extends :class:`NotifyBase`,
which wraps an :class:`~coarnotify.core.activitystreams2.ActivityStream` and
provides validated property access.

- :class:`NotifyPattern` is a top-level notification (origin, target,
  object, ...).
- :class:`NotifyPatternPart` subclasses are the objects nested inside a
  pattern: :class:`NotifyService`, :class:`NotifyObject`,
  :class:`NotifyActor` and :class:`NotifyItem`.

Nested parts are views onto the parent's document.  With
``properties_by_reference=True`` (the default) a part returned by a getter
shares its dictionary with the parent, so changes made through the part are
visible in the parent; otherwise getters and setters work on deep copies.
"""

from __future__ import annotations

import copy
import uuid
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from coarnotify.core.activitystreams2 import (
    ACTIVITY_STREAMS_OBJECTS,
    ActivityStream,
    ActivityStreamsTypes,
    Properties,
    Property,
    as_property,
)
from coarnotify.exceptions import PartNotAnObjectError, RequiredFieldMissing, ValidationError
from coarnotify import validate
from coarnotify.validate import Validator

if TYPE_CHECKING:
    from coarnotify.factory import COARNotifyFactory


NOTIFY_NAMESPACE = "https://coar-notify.net"


class NotifyProperties:
    """COAR Notify properties that are not part of ActivityStreams."""

    INBOX = Property("inbox", NOTIFY_NAMESPACE)
    CITE_AS = Property("ietf:cite-as", NOTIFY_NAMESPACE)
    ITEM = Property("ietf:item", NOTIFY_NAMESPACE)
    NAME = Property("name")
    MEDIA_TYPE = Property("mediaType")


class NotifyTypes:
    """COAR Notify activity and object types."""

    ENDORSEMENT_ACTION = "coar-notify:EndorsementAction"
    INGEST_ACTION = "coar-notify:IngestAction"
    RELATIONSHIP_ACTION = "coar-notify:RelationshipAction"
    REVIEW_ACTION = "coar-notify:ReviewAction"
    UNPROCESSABLE_NOTIFICATION = "coar-notify:UnprocessableNotification"

    ABOUT_PAGE = "sorg:AboutPage"


ACTOR_TYPES = [
    ActivityStreamsTypes.SERVICE,
    ActivityStreamsTypes.APPLICATION,
    ActivityStreamsTypes.GROUP,
    ActivityStreamsTypes.ORGANIZATION,
    ActivityStreamsTypes.PERSON,
]

VALIDATION_RULES = {
    Properties.ID: {
        "default": validate.absolute_uri,
        "context": {
            Properties.CONTEXT: {"default": validate.url},
            Properties.ORIGIN: {"default": validate.url},
            Properties.TARGET: {"default": validate.url},
            NotifyProperties.ITEM: {"default": validate.url},
        },
    },
    Properties.TYPE: {
        "default": validate.type_checker,
        "context": {
            Properties.ACTOR: {"default": validate.one_of(ACTOR_TYPES)},
            Properties.OBJECT: {"default": validate.at_least_one_of(ACTIVITY_STREAMS_OBJECTS)},
            Properties.CONTEXT: {"default": validate.at_least_one_of(ACTIVITY_STREAMS_OBJECTS)},
            NotifyProperties.ITEM: {"default": validate.at_least_one_of(ACTIVITY_STREAMS_OBJECTS)},
        },
    },
    NotifyProperties.CITE_AS: {"default": validate.url},
    NotifyProperties.INBOX: {"default": validate.url},
    Properties.IN_REPLY_TO: {"default": validate.absolute_uri},
    Properties.SUBJECT_TRIPLE: {"default": validate.absolute_uri},
    Properties.OBJECT_TRIPLE: {"default": validate.absolute_uri},
    Properties.RELATIONSHIP_TRIPLE: {"default": validate.absolute_uri},
}

VALIDATORS = Validator(VALIDATION_RULES)
"""Default validator shared by all patterns and their parts."""

PropertyId = Union[str, tuple, Property]


class NotifyBase:
    """Base class for all Notify objects.

    Args:
        stream: An existing document (``dict``) or
            :class:`~coarnotify.core.activitystreams2.ActivityStream` to wrap.
            If omitted, a new empty document is created.
        validate_stream_on_construct: Validate ``stream`` immediately; the
            :class:`~coarnotify.exceptions.ValidationError` propagates out
            of the constructor.
        validate_properties: Validate each value as it is set.
        validators: The :class:`~coarnotify.validate.Validator` for this
            object and everything nested in it.  Defaults to
            :data:`VALIDATORS`.
        validation_context: The property under which this object sits in
            its parent (e.g. ``Properties.ORIGIN``), used to pick
            context-specific rules.  ``None`` for a top-level pattern.
        properties_by_reference: Get and set properties by reference rather
            than as deep copies.  When false an incoming ``dict`` is copied
            too.
        factory: The :class:`~coarnotify.factory.COARNotifyFactory` used to
            resolve nested patterns.  Defaults to the process-wide factory.
        populate_defaults: Fill in a missing ``id``, and the class type where
            the class declares one.  Nested parts read out of an existing
            document are wrapped with this off, so that reading or
            validating them leaves the document untouched.
    """

    def __init__(
        self,
        stream: Union[ActivityStream, dict[str, Any], None] = None,
        validate_stream_on_construct: bool = True,
        validate_properties: bool = True,
        validators: Optional[Validator] = None,
        validation_context: Optional[PropertyId] = None,
        properties_by_reference: bool = True,
        factory: Optional[COARNotifyFactory] = None,
        populate_defaults: bool = True,
    ):
        self._validate_stream_on_construct = validate_stream_on_construct
        self._validate_properties = validate_properties
        self._validators = validators if validators is not None else VALIDATORS
        self._validation_context = (
            as_property(validation_context) if validation_context is not None else None
        )
        self._properties_by_reference = properties_by_reference
        self._factory = factory

        validate_now = False
        if stream is None:
            self._stream = ActivityStream()
        elif isinstance(stream, dict):
            validate_now = validate_stream_on_construct
            if not properties_by_reference:
                stream = copy.deepcopy(stream)
            self._stream = ActivityStream(stream)
        else:
            validate_now = validate_stream_on_construct
            self._stream = stream

        if populate_defaults and not self._stream.get_property(Properties.ID):
            self._stream.set_property(Properties.ID, "urn:uuid:" + uuid.uuid4().hex)

        if validate_now:
            self.validate()

    # ── Configuration ────────────────────────────────────────────

    @property
    def validate_properties(self) -> bool:
        return self._validate_properties

    @property
    def validate_stream_on_construct(self) -> bool:
        return self._validate_stream_on_construct

    @property
    def validators(self) -> Validator:
        return self._validators

    @property
    def validation_context(self) -> Optional[Property]:
        return self._validation_context

    @property
    def properties_by_reference(self) -> bool:
        return self._properties_by_reference

    @property
    def factory(self) -> COARNotifyFactory:
        """The factory used to resolve nested patterns."""
        if self._factory is None:
            from coarnotify.factory import DEFAULT_FACTORY
            return DEFAULT_FACTORY
        return self._factory

    # ── Document access ──────────────────────────────────────────

    @property
    def doc(self) -> dict[str, Any]:
        """The underlying document, without ``@context``."""
        return self._stream.doc

    @property
    def stream(self) -> ActivityStream:
        return self._stream

    @property
    def id(self) -> Optional[str]:
        return self.get_property(Properties.ID)

    @id.setter
    def id(self, value: Optional[str]) -> None:
        self.set_property(Properties.ID, value)

    @property
    def type(self) -> Union[str, list[str], None]:
        return self.get_property(Properties.TYPE)

    @type.setter
    def type(self, types: Union[str, list[str], None]) -> None:
        self.set_property(Properties.TYPE, types)

    def get_property(self, prop_name: PropertyId, by_reference: Optional[bool] = None) -> Any:
        """Return a property value, as a deep copy unless read by reference."""
        if by_reference is None:
            by_reference = self._properties_by_reference
        val = self._stream.get_property(prop_name)
        if by_reference:
            return val
        return copy.deepcopy(val)

    def set_property(
        self, prop_name: PropertyId, value: Any, by_reference: Optional[bool] = None,
    ) -> None:
        """Validate and set a property.

        Raises:
            ValueError: If property validation is enabled and ``value``
                fails it.  Nothing is stored in that case.
        """
        if by_reference is None:
            by_reference = self._properties_by_reference
        self.validate_property(prop_name, value)
        if not by_reference:
            value = copy.deepcopy(value)
        self._stream.set_property(prop_name, value)

    def to_jsonld(self) -> dict[str, Any]:
        """The object as a JSON-LD document."""
        return self._stream.to_jsonld()

    # ── Validation ───────────────────────────────────────────────

    def validate(self) -> bool:
        """Check the whole object.

        Every failure is collected before anything is raised, so the error
        tree describes all that is wrong with the object.

        Returns:
            ``True`` if the object is valid.

        Raises:
            ValidationError: With the complete error tree otherwise.
        """
        ve = ValidationError()
        self.required_and_validate(ve, Properties.ID, self.id)
        self.required_and_validate(ve, Properties.TYPE, self.type)
        if ve.has_errors():
            raise ve
        return True

    def validate_property(
        self,
        prop_name: PropertyId,
        value: Any,
        force_validate: bool = False,
        raise_error: bool = True,
    ) -> tuple[bool, str]:
        """Run the rule for ``prop_name`` in this object's context against ``value``.

        ``None`` is always accepted; whether a property is required is
        checked separately.

        Returns:
            ``(valid, message)``; ``message`` is empty when valid.

        Raises:
            ValueError: If the value fails and ``raise_error`` is true.
        """
        if value is None:
            return True, ""
        if self._validate_properties or force_validate:
            validator = self._validators.get(prop_name, self._validation_context)
            if validator is not None:
                try:
                    validator(self, value)
                except ValueError as e:
                    if raise_error:
                        raise
                    return False, str(e)
        return True, ""

    def required(self, ve: ValidationError, prop_name: PropertyId, value: Any) -> None:
        """Record an error if ``value`` is absent, without validating it."""
        if value is None:
            ve.add_error(prop_name, str(RequiredFieldMissing(as_property(prop_name).name)))

    def required_and_validate(self, ve: ValidationError, prop_name: PropertyId, value: Any) -> None:
        """Record an error if ``value`` is absent, otherwise validate it into ``ve``."""
        if value is None:
            ve.add_error(prop_name, str(RequiredFieldMissing(as_property(prop_name).name)))
        else:
            self._validate_into(ve, prop_name, value)

    def optional_and_validate(self, ve: ValidationError, prop_name: PropertyId, value: Any) -> None:
        """Validate ``value`` into ``ve`` if it is present."""
        if value is not None:
            self._validate_into(ve, prop_name, value)

    def required_part_and_validate(
        self, ve: ValidationError, prop_name: PropertyId, read: Callable[[], Any],
    ) -> None:
        """As :meth:`required_and_validate`, for a nested part obtained by calling ``read``.

        A part that is not a JSON object is recorded as an error on
        ``prop_name`` instead of being validated.
        """
        readable, part = self._read_part(ve, prop_name, read)
        if readable:
            self.required_and_validate(ve, prop_name, part)

    def optional_part_and_validate(
        self, ve: ValidationError, prop_name: PropertyId, read: Callable[[], Any],
    ) -> None:
        """As :meth:`optional_and_validate`, for a nested part obtained by calling ``read``."""
        readable, part = self._read_part(ve, prop_name, read)
        if readable:
            self.optional_and_validate(ve, prop_name, part)

    def _read_part(
        self, ve: ValidationError, prop_name: PropertyId, read: Callable[[], Any],
    ) -> tuple[bool, Any]:
        try:
            return True, read()
        except PartNotAnObjectError as e:
            ve.add_error(prop_name, str(e))
            return False, None

    def _validate_into(self, ve: ValidationError, prop_name: PropertyId, value: Any) -> None:
        if isinstance(value, NotifyBase):
            try:
                value.validate()
            except ValidationError as subve:
                ve.add_nested_errors(prop_name, subve)
        else:
            valid, msg = self.validate_property(prop_name, value, force_validate=True, raise_error=False)
            if not valid:
                ve.add_error(prop_name, msg)

    # ── Nested parts ─────────────────────────────────────────────

    def _get_part(self, klass: type, prop_name: Property) -> Any:
        """Wrap the nested object stored at ``prop_name`` in ``klass``.

        Raises:
            PartNotAnObjectError: If the stored value is not a ``dict``.
        """
        value = self.get_property(prop_name)
        if value is None:
            return None
        if not isinstance(value, dict):
            raise PartNotAnObjectError(as_property(prop_name).name, value)
        return klass(
            value,
            validate_stream_on_construct=False,
            validate_properties=self._validate_properties,
            validators=self._validators,
            validation_context=prop_name,
            properties_by_reference=self._properties_by_reference,
            factory=self._factory,
            populate_defaults=False,
        )

    def _set_part(self, prop_name: Property, value: Optional[NotifyBase]) -> None:
        """Store a nested object and adopt its namespaces."""
        if value is None:
            self.set_property(prop_name, None)
            return
        self.set_property(prop_name, value.doc)
        for namespace in value.stream.context:
            self._stream.register_namespace(namespace)


class NotifyPattern(NotifyBase):
    """Base class for all notification patterns.

    Subclasses declare their type token(s) in ``TYPE``; any document they
    wrap has its ``type`` extended to include them.
    """

    TYPE: Union[str, list[str]] = ActivityStreamsTypes.OBJECT

    def __init__(
        self,
        stream: Union[ActivityStream, dict[str, Any], None] = None,
        validate_stream_on_construct: bool = True,
        validate_properties: bool = True,
        validators: Optional[Validator] = None,
        validation_context: Optional[PropertyId] = None,
        properties_by_reference: bool = True,
        factory: Optional[COARNotifyFactory] = None,
        populate_defaults: bool = True,
    ):
        super().__init__(
            stream=stream,
            validate_stream_on_construct=validate_stream_on_construct,
            validate_properties=validate_properties,
            validators=validators,
            validation_context=validation_context,
            properties_by_reference=properties_by_reference,
            factory=factory,
            populate_defaults=populate_defaults,
        )
        if populate_defaults:
            self._ensure_type_contains(self.TYPE)

    def _ensure_type_contains(self, types: Union[str, list[str]]) -> None:
        existing = self._stream.get_property(Properties.TYPE)
        if existing is None:
            self.set_property(Properties.TYPE, list(types) if isinstance(types, list) else types)
            return
        existing = list(existing) if isinstance(existing, list) else [existing]
        required = types if isinstance(types, list) else [types]
        for t in required:
            if t not in existing:
                existing.append(t)
        if len(existing) == 1:
            existing = existing[0]
        self.set_property(Properties.TYPE, existing)

    @property
    def origin(self) -> Optional[NotifyService]:
        """The service that sent the notification."""
        return self._get_part(NotifyService, Properties.ORIGIN)

    @origin.setter
    def origin(self, value: Optional[NotifyService]) -> None:
        self._set_part(Properties.ORIGIN, value)

    @property
    def target(self) -> Optional[NotifyService]:
        """The service the notification is addressed to."""
        return self._get_part(NotifyService, Properties.TARGET)

    @target.setter
    def target(self, value: Optional[NotifyService]) -> None:
        self._set_part(Properties.TARGET, value)

    @property
    def object(self) -> Optional[NotifyObject]:
        return self._get_part(NotifyObject, Properties.OBJECT)

    @object.setter
    def object(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.OBJECT, value)

    @property
    def in_reply_to(self) -> Optional[str]:
        """The id of the notification this one responds to."""
        return self.get_property(Properties.IN_REPLY_TO)

    @in_reply_to.setter
    def in_reply_to(self, value: Optional[str]) -> None:
        self.set_property(Properties.IN_REPLY_TO, value)

    @property
    def actor(self) -> Optional[NotifyActor]:
        return self._get_part(NotifyActor, Properties.ACTOR)

    @actor.setter
    def actor(self, value: Optional[NotifyActor]) -> None:
        self._set_part(Properties.ACTOR, value)

    @property
    def context(self) -> Optional[NotifyObject]:
        return self._get_part(NotifyObject, Properties.CONTEXT)

    @context.setter
    def context(self, value: Optional[NotifyObject]) -> None:
        self._set_part(Properties.CONTEXT, value)

    def validate(self) -> bool:
        """Base validation plus the parts every pattern shares.

        ``origin``, ``target`` and ``object`` are required; ``actor``,
        ``inReplyTo`` and ``context`` are validated if present.
        """
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.required_part_and_validate(ve, Properties.ORIGIN, lambda: self.origin)
        self.required_part_and_validate(ve, Properties.TARGET, lambda: self.target)
        self.required_part_and_validate(ve, Properties.OBJECT, lambda: self.object)
        self.optional_part_and_validate(ve, Properties.ACTOR, lambda: self.actor)
        self.optional_and_validate(ve, Properties.IN_REPLY_TO, self.in_reply_to)
        self.optional_part_and_validate(ve, Properties.CONTEXT, lambda: self.context)

        if ve.has_errors():
            raise ve
        return True


class NotifyPatternPart(NotifyBase):
    """Base class for objects nested inside a pattern.

    ``DEFAULT_TYPE`` is applied when the wrapped document has no type;
    a non-empty ``ALLOWED_TYPES`` restricts what the type may be set to.
    """

    DEFAULT_TYPE: Optional[str] = None
    ALLOWED_TYPES: list[str] = []

    def __init__(
        self,
        stream: Union[ActivityStream, dict[str, Any], None] = None,
        validate_stream_on_construct: bool = True,
        validate_properties: bool = True,
        validators: Optional[Validator] = None,
        validation_context: Optional[PropertyId] = None,
        properties_by_reference: bool = True,
        factory: Optional[COARNotifyFactory] = None,
        populate_defaults: bool = True,
    ):
        super().__init__(
            stream=stream,
            validate_stream_on_construct=validate_stream_on_construct,
            validate_properties=validate_properties,
            validators=validators,
            validation_context=validation_context,
            properties_by_reference=properties_by_reference,
            factory=factory,
            populate_defaults=populate_defaults,
        )
        if populate_defaults and self.DEFAULT_TYPE is not None and self.type is None:
            self.type = self.DEFAULT_TYPE

    @property
    def type(self) -> Union[str, list[str], None]:
        return self.get_property(Properties.TYPE)

    @type.setter
    def type(self, types: Union[str, list[str], None]) -> None:
        if types is None:
            self.set_property(Properties.TYPE, None)
            return
        if not isinstance(types, list):
            types = [types]
        if self.ALLOWED_TYPES:
            for t in types:
                if t not in self.ALLOWED_TYPES:
                    raise ValueError(
                        f"Type value {t} is not one of the permitted values: {self.ALLOWED_TYPES}"
                    )
        self.set_property(Properties.TYPE, types[0] if len(types) == 1 else types)


class NotifyService(NotifyPatternPart):
    """A service endpoint, used for ``origin`` and ``target``."""

    DEFAULT_TYPE = ActivityStreamsTypes.SERVICE

    @property
    def inbox(self) -> Optional[str]:
        """The LDN inbox URL of the service."""
        return self.get_property(NotifyProperties.INBOX)

    @inbox.setter
    def inbox(self, value: Optional[str]) -> None:
        self.set_property(NotifyProperties.INBOX, value)

    def validate(self) -> bool:
        ve = ValidationError()
        try:
            super().validate()
        except ValidationError as superve:
            ve.merge(superve)

        self.optional_and_validate(ve, NotifyProperties.INBOX, self.inbox)

        if ve.has_errors():
            raise ve
        return True


class NotifyObject(NotifyPatternPart):
    """The ``object`` or ``context`` of a pattern."""

    @property
    def cite_as(self) -> Optional[str]:
        """The ``ietf:cite-as`` URL of the resource."""
        return self.get_property(NotifyProperties.CITE_AS)

    @cite_as.setter
    def cite_as(self, value: Optional[str]) -> None:
        self.set_property(NotifyProperties.CITE_AS, value)

    @property
    def item(self) -> Optional[NotifyItem]:
        return self._get_part(NotifyItem, NotifyProperties.ITEM)

    @item.setter
    def item(self, value: Optional[NotifyItem]) -> None:
        self._set_part(NotifyProperties.ITEM, value)

    @property
    def triple(self) -> tuple[Optional[str], Optional[str], Optional[str]]:
        """The relationship as ``(object, relationship, subject)``."""
        obj = self.get_property(Properties.OBJECT_TRIPLE)
        rel = self.get_property(Properties.RELATIONSHIP_TRIPLE)
        subj = self.get_property(Properties.SUBJECT_TRIPLE)
        return obj, rel, subj

    @triple.setter
    def triple(self, value: tuple[str, str, str]) -> None:
        obj, rel, subj = value
        self.set_property(Properties.OBJECT_TRIPLE, obj)
        self.set_property(Properties.RELATIONSHIP_TRIPLE, rel)
        self.set_property(Properties.SUBJECT_TRIPLE, subj)

    def validate(self) -> bool:
        """Only ``id`` is required; ``ietf:cite-as`` and ``ietf:item`` are checked if present."""
        ve = ValidationError()
        self.required_and_validate(ve, Properties.ID, self.id)
        self.optional_and_validate(ve, NotifyProperties.CITE_AS, self.cite_as)
        self.optional_part_and_validate(ve, NotifyProperties.ITEM, lambda: self.item)
        if ve.has_errors():
            raise ve
        return True


class NotifyActor(NotifyPatternPart):
    """The party responsible for a notification."""

    DEFAULT_TYPE = ActivityStreamsTypes.SERVICE
    ALLOWED_TYPES = ACTOR_TYPES

    @property
    def name(self) -> Optional[str]:
        return self.get_property(NotifyProperties.NAME)

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self.set_property(NotifyProperties.NAME, value)


class NotifyItem(NotifyPatternPart):
    """An ``ietf:item``: a specific representation of a resource."""

    @property
    def media_type(self) -> Optional[str]:
        return self.get_property(NotifyProperties.MEDIA_TYPE)

    @media_type.setter
    def media_type(self, value: Optional[str]) -> None:
        self.set_property(NotifyProperties.MEDIA_TYPE, value)

    def validate(self) -> bool:
        ve = ValidationError()
        self.required_and_validate(ve, Properties.ID, self.id)
        if ve.has_errors():
            raise ve
        return True


# ── Mixins ───────────────────────────────────────────────────────


class NestedPatternObjectMixin:
    """Resolve ``object`` to the most specific pattern class available.

    For responses such as Accept or Reject, the object is itself a
    notification.  The object's types are looked up in the instance's
    factory; if no pattern matches, a plain :class:`NotifyObject` is
    returned instead.
    """

    @property
    def object(self) -> Union[NotifyPattern, NotifyObject, None]:
        o = self.get_property(Properties.OBJECT)
        if o is None:
            return None
        if not isinstance(o, dict):
            raise PartNotAnObjectError(Properties.OBJECT.name, o)
        types = o.get("type")
        klass = self.factory.get_by_types(types) if types is not None else None
        if klass is not None:
            return klass(
                copy.deepcopy(o),
                validate_stream_on_construct=False,
                validate_properties=self.validate_properties,
                validators=self.validators,
                validation_context=None,
                factory=self._factory,
                populate_defaults=False,
            )
        return NotifyObject(
            copy.deepcopy(o),
            validate_stream_on_construct=False,
            validate_properties=self.validate_properties,
            validators=self.validators,
            validation_context=Properties.OBJECT,
            factory=self._factory,
            populate_defaults=False,
        )

    @object.setter
    def object(self, value: Union[NotifyPattern, NotifyObject, None]) -> None:
        self._set_part(Properties.OBJECT, value)


class SummaryMixin:
    """Adds the ``summary`` property."""

    @property
    def summary(self) -> Optional[str]:
        return self.get_property(Properties.SUMMARY)

    @summary.setter
    def summary(self, summary: Optional[str]) -> None:
        self.set_property(Properties.SUMMARY, summary)
