"""Tests for the pattern catalogue."""

import pytest

from coarnotify.core.activitystreams2 import Properties
from coarnotify.core.notify import NotifyItem, NotifyObject, NotifyService
from coarnotify.exceptions import ValidationError
from coarnotify.patterns import (
    Accept,
    AnnounceEndorsement,
    AnnounceEndorsementContext,
    AnnounceEndorsementItem,
    AnnounceRelationship,
    AnnounceRelationshipObject,
    AnnounceReview,
    AnnounceReviewContext,
    AnnounceReviewItem,
    AnnounceReviewObject,
    AnnounceServiceResult,
    AnnounceServiceResultContext,
    AnnounceServiceResultObject,
    Reject,
    RequestEndorsement,
    RequestEndorsementItem,
    RequestEndorsementObject,
    RequestReview,
    RequestReviewItem,
    RequestReviewObject,
    TentativelyAccept,
    TentativelyReject,
    UndoOffer,
    UnprocessableNotification,
)

import notify_fixtures


def _errors(pattern):
    with pytest.raises(ValidationError) as exc:
        pattern.validate()
    return exc.value.to_dict()


VALID = [
    (Accept, notify_fixtures.accept),
    (AnnounceEndorsement, notify_fixtures.announce_endorsement),
    (AnnounceRelationship, notify_fixtures.announce_relationship),
    (AnnounceReview, notify_fixtures.announce_review),
    (AnnounceServiceResult, notify_fixtures.announce_service_result),
    (Reject, lambda: notify_fixtures.response("Reject", "The offer is out of scope")),
    (RequestEndorsement, notify_fixtures.request_endorsement),
    (RequestReview, notify_fixtures.request_review),
    (TentativelyAccept, lambda: notify_fixtures.response("TentativeAccept")),
    (TentativelyReject, lambda: notify_fixtures.response("TentativeReject")),
    (UndoOffer, lambda: notify_fixtures.response("Undo")),
    (UnprocessableNotification, notify_fixtures.unprocessable_notification),
]


class TestCatalogue:
    @pytest.mark.parametrize("klass, builder", VALID, ids=[k.__name__ for k, _ in VALID])
    def test_valid_fixture(self, klass, builder):
        pattern = klass(builder())
        assert pattern.validate()
        assert pattern.to_jsonld() == builder()

    @pytest.mark.parametrize("klass, builder", VALID, ids=[k.__name__ for k, _ in VALID])
    def test_new_instance_has_type(self, klass, builder):
        pattern = klass()
        required = klass.TYPE if isinstance(klass.TYPE, list) else [klass.TYPE]
        types = pattern.type if isinstance(pattern.type, list) else [pattern.type]
        assert types == required

    def test_build_from_scratch(self):
        origin = NotifyService()
        origin.id = "https://research-organisation.org/repository"
        origin.inbox = "https://research-organisation.org/inbox/"

        target = NotifyService()
        target.id = "https://overlay-journal.com/system"
        target.inbox = "https://overlay-journal.com/inbox/"

        item = NotifyItem()
        item.id = "https://research-organisation.org/repository/preprint/201203/421/content.pdf"
        item.type = "Article"
        item.media_type = "application/pdf"

        obj = NotifyObject()
        obj.id = "https://research-organisation.org/repository/preprint/201203/421/"
        obj.cite_as = "https://doi.org/10.5555/12345680"
        obj.type = "Page"
        obj.item = item

        offer = RequestReview()
        offer.origin = origin
        offer.target = target
        offer.object = obj

        assert offer.validate()
        assert offer.object.item.media_type == "application/pdf"


class TestResponses:
    def test_nested_object_resolved_to_pattern(self):
        accept = Accept(notify_fixtures.accept())
        assert isinstance(accept.object, RequestReview)
        assert accept.object.validation_context is None

    def test_unknown_nested_object_is_plain_object(self):
        doc = notify_fixtures.accept()
        doc["object"] = {"id": "urn:uuid:0370c0fb-bb78-4a9b-87f5-bed307a509dd", "type": "Offer"}
        accept = Accept(doc)
        assert type(accept.object) is NotifyObject
        assert accept.object.validation_context == Properties.OBJECT

    def test_nested_object_is_a_copy(self):
        accept = Accept(notify_fixtures.accept())
        accept.object.in_reply_to = "urn:uuid:1"
        assert "inReplyTo" not in accept.doc["object"]

    def test_mismatched_in_reply_to(self):
        doc = notify_fixtures.accept()
        doc["inReplyTo"] = "urn:uuid:00000000-0000-0000-0000-000000000000"
        errors = _errors(Accept(doc, validate_stream_on_construct=False))
        assert list(errors) == ["inReplyTo"]
        assert errors["inReplyTo"]["errors"][0].startswith(
            "Expected inReplyTo id to be the same as the nested object id"
        )

    def test_missing_in_reply_to(self):
        doc = notify_fixtures.accept()
        del doc["inReplyTo"]
        errors = _errors(Accept(doc, validate_stream_on_construct=False))
        assert errors == {"inReplyTo": {"errors": ["`inReplyTo` is a required field"]}}

    def test_nested_pattern_errors_reported(self):
        doc = notify_fixtures.accept()
        doc["object"]["origin"]["inbox"] = "not a url"
        errors = _errors(Accept(doc, validate_stream_on_construct=False))
        assert "inbox" in errors["object"]["nested"]["origin"]["nested"]

    @pytest.mark.parametrize("klass, type_", [
        (Reject, "Reject"),
        (TentativelyAccept, "TentativeAccept"),
        (TentativelyReject, "TentativeReject"),
        (UndoOffer, "Undo"),
    ])
    def test_summary_and_reply_check(self, klass, type_):
        pattern = klass(notify_fixtures.response(type_, summary="Out of scope"))
        assert pattern.summary == "Out of scope"
        pattern.summary = "Changed"
        assert pattern.doc["summary"] == "Changed"
        pattern.in_reply_to = "urn:uuid:00000000-0000-0000-0000-000000000000"
        assert list(_errors(pattern)) == ["inReplyTo"]

    def test_unprocessable_requires_summary_and_reply(self):
        doc = notify_fixtures.unprocessable_notification()
        del doc["summary"]
        del doc["inReplyTo"]
        errors = _errors(UnprocessableNotification(doc, validate_stream_on_construct=False))
        assert errors == {
            "inReplyTo": {"errors": ["`inReplyTo` is a required field"]},
            "summary": {"errors": ["`summary` is a required field"]},
        }


class TestAnnounce:
    def test_part_classes(self):
        review = AnnounceReview(notify_fixtures.announce_review())
        assert isinstance(review.object, AnnounceReviewObject)
        assert isinstance(review.context, AnnounceReviewContext)
        assert isinstance(review.context.item, AnnounceReviewItem)

        endorsement = AnnounceEndorsement(notify_fixtures.announce_endorsement())
        assert isinstance(endorsement.context, AnnounceEndorsementContext)
        assert isinstance(endorsement.context.item, AnnounceEndorsementItem)

        result = AnnounceServiceResult(notify_fixtures.announce_service_result())
        assert isinstance(result.object, AnnounceServiceResultObject)
        assert isinstance(result.context, AnnounceServiceResultContext)

        relationship = AnnounceRelationship(notify_fixtures.announce_relationship())
        assert isinstance(relationship.object, AnnounceRelationshipObject)

    @pytest.mark.parametrize("klass, builder", [
        (AnnounceEndorsement, notify_fixtures.announce_endorsement),
        (AnnounceRelationship, notify_fixtures.announce_relationship),
        (AnnounceReview, notify_fixtures.announce_review),
        (AnnounceServiceResult, notify_fixtures.announce_service_result),
    ])
    def test_context_required(self, klass, builder):
        doc = builder()
        del doc["context"]
        errors = _errors(klass(doc, validate_stream_on_construct=False))
        assert errors == {"context": {"errors": ["`context` is a required field"]}}

    def test_review_object_requires_type(self):
        doc = notify_fixtures.announce_review()
        del doc["object"]["type"]
        errors = _errors(AnnounceReview(doc, validate_stream_on_construct=False))
        assert errors["object"]["nested"]["type"]["errors"] == ["`type` is a required field"]

    def test_endorsement_item_requires_media_type(self):
        doc = notify_fixtures.announce_endorsement()
        del doc["context"]["ietf:item"]["mediaType"]
        errors = _errors(AnnounceEndorsement(doc, validate_stream_on_construct=False))
        item = errors["context"]["nested"]["ietf:item"]["nested"]
        assert item == {"mediaType": {"errors": ["`mediaType` is a required field"]}}

    def test_item_type_must_be_an_object_type(self):
        doc = notify_fixtures.announce_review()
        doc["context"]["ietf:item"]["type"] = "sorg:ScholarlyArticle"
        errors = _errors(AnnounceReview(doc, validate_stream_on_construct=False))
        assert "type" in errors["context"]["nested"]["ietf:item"]["nested"]

    @pytest.mark.parametrize("member", ["as:subject", "as:relationship", "as:object"])
    def test_relationship_triple_required(self, member):
        doc = notify_fixtures.announce_relationship()
        del doc["object"][member]
        errors = _errors(AnnounceRelationship(doc, validate_stream_on_construct=False))
        assert errors["object"]["nested"] == {member: {"errors": [f"`{member}` is a required field"]}}

    def test_relationship_triple_values_checked(self):
        doc = notify_fixtures.announce_relationship()
        doc["object"]["as:relationship"] = "supplement"
        errors = _errors(AnnounceRelationship(doc, validate_stream_on_construct=False))
        assert "as:relationship" in errors["object"]["nested"]

    def test_relationship_triple_accessor(self):
        relationship = AnnounceRelationship(notify_fixtures.announce_relationship())
        obj, rel, subj = relationship.object.triple
        assert rel == "http://purl.org/vocab/frbr/core#supplement"
        assert subj == "https://research-organisation.org/repository/item/201203/421/"


class TestRequests:
    @pytest.mark.parametrize("klass, builder, object_class, item_class", [
        (RequestReview, notify_fixtures.request_review, RequestReviewObject, RequestReviewItem),
        (RequestEndorsement, notify_fixtures.request_endorsement, RequestEndorsementObject, RequestEndorsementItem),
    ])
    def test_part_classes(self, klass, builder, object_class, item_class):
        offer = klass(builder())
        assert isinstance(offer.object, object_class)
        assert isinstance(offer.object.item, item_class)

    @pytest.mark.parametrize("klass, builder", [
        (RequestReview, notify_fixtures.request_review),
        (RequestEndorsement, notify_fixtures.request_endorsement),
    ])
    def test_item_requires_type_and_media_type(self, klass, builder):
        doc = builder()
        del doc["object"]["ietf:item"]["type"]
        del doc["object"]["ietf:item"]["mediaType"]
        errors = _errors(klass(doc, validate_stream_on_construct=False))
        item = errors["object"]["nested"]["ietf:item"]["nested"]
        assert set(item) == {"type", "mediaType"}

    def test_item_is_optional(self):
        doc = notify_fixtures.request_review()
        del doc["object"]["ietf:item"]
        assert RequestReview(doc).validate()
