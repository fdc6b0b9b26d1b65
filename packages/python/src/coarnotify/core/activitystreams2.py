"""ActivityStreams 2.0 vocabulary and document store.

Only the parts of AS 2.0 that COAR Notify patterns use are covered here:
the property and type vocabulary, and :class:`ActivityStream`, a thin
namespace-aware wrapper around a JSON-LD dictionary.

This is not a JSON-LD processor.  Namespaces are tracked only so that a
document can be round-tripped with the ``@context`` it arrived with (plus
any namespace introduced by a property that was set on it).
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Union


ACTIVITY_STREAMS_NAMESPACE = "https://www.w3.org/ns/activitystreams"

Namespace = Union[str, tuple[str, str]]


class Property(NamedTuple):
    """A property identifier: a bare name, optionally tied to a namespace.

    ``namespace`` is ``None`` for a plain JSON key, a namespace URI string,
    or a ``(prefix, uri)`` pair for a prefixed vocabulary such as
    ``("foaf", "http://xmlns.com/foaf/0.1")``.

    Because this is a tuple, ``Property("id", NS) == ("id", NS)``, so plain
    tuples work anywhere a property is expected.
    """

    name: str
    namespace: Optional[Namespace] = None


def as_property(value: Union[str, tuple, Property]) -> Property:
    """Normalise a bare name or a ``(name, namespace)`` tuple to a :class:`Property`."""
    if isinstance(value, Property):
        return value
    if isinstance(value, str):
        return Property(value)
    if isinstance(value, (tuple, list)) and len(value) == 2 and isinstance(value[0], str):
        namespace = value[1]
        if isinstance(namespace, list):
            namespace = tuple(namespace)
        return Property(value[0], namespace)
    raise TypeError(f"Not a property identifier: {value!r}")


class Properties:
    """ActivityStreams 2.0 properties used in COAR Notify patterns."""

    ID = Property("id", ACTIVITY_STREAMS_NAMESPACE)
    TYPE = Property("type", ACTIVITY_STREAMS_NAMESPACE)
    ORIGIN = Property("origin", ACTIVITY_STREAMS_NAMESPACE)
    OBJECT = Property("object", ACTIVITY_STREAMS_NAMESPACE)
    TARGET = Property("target", ACTIVITY_STREAMS_NAMESPACE)
    ACTOR = Property("actor", ACTIVITY_STREAMS_NAMESPACE)
    IN_REPLY_TO = Property("inReplyTo", ACTIVITY_STREAMS_NAMESPACE)
    CONTEXT = Property("context", ACTIVITY_STREAMS_NAMESPACE)
    SUMMARY = Property("summary", ACTIVITY_STREAMS_NAMESPACE)

    # Relationship triple members
    SUBJECT_TRIPLE = Property("as:subject", ACTIVITY_STREAMS_NAMESPACE)
    OBJECT_TRIPLE = Property("as:object", ACTIVITY_STREAMS_NAMESPACE)
    RELATIONSHIP_TRIPLE = Property("as:relationship", ACTIVITY_STREAMS_NAMESPACE)


class ActivityStreamsTypes:
    """ActivityStreams types COAR Notify may use.

    COAR Notify's own types live in :class:`coarnotify.core.notify.NotifyTypes`.
    """

    # Activities
    ACCEPT = "Accept"
    ANNOUNCE = "Announce"
    REJECT = "Reject"
    OFFER = "Offer"
    TENTATIVE_ACCEPT = "TentativeAccept"
    TENTATIVE_REJECT = "TentativeReject"
    FLAG = "Flag"
    UNDO = "Undo"

    # Objects
    ACTIVITY = "Activity"
    APPLICATION = "Application"
    ARTICLE = "Article"
    AUDIO = "Audio"
    COLLECTION = "Collection"
    COLLECTION_PAGE = "CollectionPage"
    RELATIONSHIP = "Relationship"
    DOCUMENT = "Document"
    EVENT = "Event"
    GROUP = "Group"
    IMAGE = "Image"
    INTRANSITIVE_ACTIVITY = "IntransitiveActivity"
    NOTE = "Note"
    OBJECT = "Object"
    ORDERED_COLLECTION = "OrderedCollection"
    ORDERED_COLLECTION_PAGE = "OrderedCollectionPage"
    ORGANIZATION = "Organization"
    PAGE = "Page"
    PERSON = "Person"
    PLACE = "Place"
    PROFILE = "Profile"
    QUESTION = "Question"
    SERVICE = "Service"
    TOMBSTONE = "Tombstone"
    VIDEO = "Video"


ACTIVITY_STREAMS_OBJECTS = [
    ActivityStreamsTypes.ACTIVITY,
    ActivityStreamsTypes.APPLICATION,
    ActivityStreamsTypes.ARTICLE,
    ActivityStreamsTypes.AUDIO,
    ActivityStreamsTypes.COLLECTION,
    ActivityStreamsTypes.COLLECTION_PAGE,
    ActivityStreamsTypes.RELATIONSHIP,
    ActivityStreamsTypes.DOCUMENT,
    ActivityStreamsTypes.EVENT,
    ActivityStreamsTypes.GROUP,
    ActivityStreamsTypes.IMAGE,
    ActivityStreamsTypes.INTRANSITIVE_ACTIVITY,
    ActivityStreamsTypes.NOTE,
    ActivityStreamsTypes.OBJECT,
    ActivityStreamsTypes.ORDERED_COLLECTION,
    ActivityStreamsTypes.ORDERED_COLLECTION_PAGE,
    ActivityStreamsTypes.ORGANIZATION,
    ActivityStreamsTypes.PAGE,
    ActivityStreamsTypes.PERSON,
    ActivityStreamsTypes.PLACE,
    ActivityStreamsTypes.PROFILE,
    ActivityStreamsTypes.QUESTION,
    ActivityStreamsTypes.SERVICE,
    ActivityStreamsTypes.TOMBSTONE,
    ActivityStreamsTypes.VIDEO,
]


class ActivityStream:
    """A namespace-aware wrapper around an ActivityStreams dictionary.

    The dictionary passed in is adopted, not copied: callers that need an
    independent document should copy it first.  Its top-level ``@context``
    is moved out of the dictionary and kept in :attr:`context` as a list, so
    :attr:`doc` only ever holds the document's own properties.
    """

    def __init__(self, raw: Optional[dict[str, Any]] = None):
        self._doc: dict[str, Any] = raw if raw is not None else {}
        self._context: list[Any] = []

        if "@context" in self._doc:
            ctx = self._doc.pop("@context")
            if isinstance(ctx, list):
                for entry in ctx:
                    self.register_namespace(entry)
            elif ctx is not None:
                self.register_namespace(ctx)

    @property
    def doc(self) -> dict[str, Any]:
        """The document without its ``@context``."""
        return self._doc

    @doc.setter
    def doc(self, value: dict[str, Any]) -> None:
        self._doc = value

    @property
    def context(self) -> list[Any]:
        """The JSON-LD context entries, in insertion order."""
        return self._context

    @context.setter
    def context(self, value: list[Any]) -> None:
        self._context = value

    def register_namespace(self, namespace: Union[Namespace, dict[str, str]]) -> None:
        """Add a namespace to the context unless an equal entry is already there.

        ``namespace`` may be a URI string, a ``(prefix, uri)`` pair, or an
        already-built ``{prefix: uri}`` mapping.
        """
        entry: Any = namespace
        if isinstance(namespace, tuple):
            prefix, url = namespace
            entry = {prefix: url}
        if entry not in self._context:
            self._context.append(entry)

    def set_property(self, prop: Union[str, tuple, Property], value: Any) -> None:
        """Set a property, registering its namespace if it has one."""
        prop = as_property(prop)
        self._doc[prop.name] = value
        if prop.namespace is not None:
            self.register_namespace(prop.namespace)

    def get_property(self, prop: Union[str, tuple, Property]) -> Any:
        """Return the value of a property, or ``None`` if it is not set."""
        return self._doc.get(as_property(prop).name)

    def to_jsonld(self) -> dict[str, Any]:
        """Return the document as JSON-LD, with ``@context`` first."""
        return {"@context": self._context, **self._doc}
