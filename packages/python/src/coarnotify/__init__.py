"""
coarnotify: COAR Notify notification patterns for Python

Model objects for the COAR Notify patterns, built on a lightweight
ActivityStreams 2.0 document store, with property validation, best-fit
dispatch of incoming documents, and a client and server boundary for
sending and receiving notifications over LDN.
"""

__version__ = "0.1.0"

from coarnotify.core.activitystreams2 import (
    ActivityStream,
    ActivityStreamsTypes,
    Properties,
    Property,
    ACTIVITY_STREAMS_NAMESPACE,
)
from coarnotify.exceptions import (
    NotifyException,
    ValidationError,
    InvalidURIError,
    ValueNotAllowedError,
    RequiredFieldMissing,
    PartNotAnObjectError,
    NoTypeFound,
    NoModelFound,
)
from coarnotify.validate import Validator
from coarnotify.core.notify import (
    NotifyBase,
    NotifyPattern,
    NotifyPatternPart,
    NotifyService,
    NotifyObject,
    NotifyActor,
    NotifyItem,
    NotifyProperties,
    NotifyTypes,
    VALIDATION_RULES,
    VALIDATORS,
)
from coarnotify.patterns import (
    Accept,
    AnnounceEndorsement,
    AnnounceRelationship,
    AnnounceReview,
    AnnounceServiceResult,
    Reject,
    RequestEndorsement,
    RequestReview,
    TentativelyAccept,
    TentativelyReject,
    UndoOffer,
    UnprocessableNotification,
)
from coarnotify.factory import COARNotifyFactory, DEFAULT_FACTORY
from coarnotify.http import HttpLayer, HttpResponse, RequestsHttpLayer, RequestsHttpResponse
from coarnotify.client import COARNotifyClient, NotifyResponse
from coarnotify.server import (
    COARNotifyServer,
    COARNotifyServerError,
    COARNotifyServiceBinding,
    COARNotifyReceipt,
)

__all__ = [
    # Document store
    "ActivityStream",
    "ActivityStreamsTypes",
    "Properties",
    "Property",
    "ACTIVITY_STREAMS_NAMESPACE",
    # Errors
    "NotifyException",
    "ValidationError",
    "InvalidURIError",
    "ValueNotAllowedError",
    "RequiredFieldMissing",
    "PartNotAnObjectError",
    "NoTypeFound",
    "NoModelFound",
    # Validation
    "Validator",
    "VALIDATION_RULES",
    "VALIDATORS",
    # Model
    "NotifyBase",
    "NotifyPattern",
    "NotifyPatternPart",
    "NotifyService",
    "NotifyObject",
    "NotifyActor",
    "NotifyItem",
    "NotifyProperties",
    "NotifyTypes",
    # Patterns
    "Accept",
    "AnnounceEndorsement",
    "AnnounceRelationship",
    "AnnounceReview",
    "AnnounceServiceResult",
    "Reject",
    "RequestEndorsement",
    "RequestReview",
    "TentativelyAccept",
    "TentativelyReject",
    "UndoOffer",
    "UnprocessableNotification",
    # Dispatch
    "COARNotifyFactory",
    "DEFAULT_FACTORY",
    # Transport
    "HttpLayer",
    "HttpResponse",
    "RequestsHttpLayer",
    "RequestsHttpResponse",
    "COARNotifyClient",
    "NotifyResponse",
    "COARNotifyServer",
    "COARNotifyServerError",
    "COARNotifyServiceBinding",
    "COARNotifyReceipt",
]
