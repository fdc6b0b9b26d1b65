"""The COAR Notify pattern catalogue.

One class per notification pattern, plus the specialised parts
(objects, contexts and items) that some patterns nest.
"""

from coarnotify.patterns.accept import Accept
from coarnotify.patterns.announce_endorsement import (
    AnnounceEndorsement,
    AnnounceEndorsementContext,
    AnnounceEndorsementItem,
)
from coarnotify.patterns.announce_relationship import (
    AnnounceRelationship,
    AnnounceRelationshipObject,
)
from coarnotify.patterns.announce_review import (
    AnnounceReview,
    AnnounceReviewContext,
    AnnounceReviewItem,
    AnnounceReviewObject,
)
from coarnotify.patterns.announce_service_result import (
    AnnounceServiceResult,
    AnnounceServiceResultContext,
    AnnounceServiceResultItem,
    AnnounceServiceResultObject,
)
from coarnotify.patterns.reject import Reject
from coarnotify.patterns.request_endorsement import (
    RequestEndorsement,
    RequestEndorsementItem,
    RequestEndorsementObject,
)
from coarnotify.patterns.request_review import (
    RequestReview,
    RequestReviewItem,
    RequestReviewObject,
)
from coarnotify.patterns.tentatively_accept import TentativelyAccept
from coarnotify.patterns.tentatively_reject import TentativelyReject
from coarnotify.patterns.undo_offer import UndoOffer
from coarnotify.patterns.unprocessable_notification import UnprocessableNotification

__all__ = [
    "Accept",
    "AnnounceEndorsement",
    "AnnounceEndorsementContext",
    "AnnounceEndorsementItem",
    "AnnounceRelationship",
    "AnnounceRelationshipObject",
    "AnnounceReview",
    "AnnounceReviewContext",
    "AnnounceReviewItem",
    "AnnounceReviewObject",
    "AnnounceServiceResult",
    "AnnounceServiceResultContext",
    "AnnounceServiceResultItem",
    "AnnounceServiceResultObject",
    "Reject",
    "RequestEndorsement",
    "RequestEndorsementItem",
    "RequestEndorsementObject",
    "RequestReview",
    "RequestReviewItem",
    "RequestReviewObject",
    "TentativelyAccept",
    "TentativelyReject",
    "UndoOffer",
    "UnprocessableNotification",
]
