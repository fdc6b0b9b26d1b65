"""Tests for incoming payload limits."""

import json

import pytest

from coarnotify.limits import DEFAULT_RESOURCE_LIMITS, enforce_resource_limits

import notify_fixtures


def _nested(depth):
    doc = {"id": "urn:uuid:1"}
    node = doc
    for _ in range(depth):
        node["child"] = {}
        node = node["child"]
    return doc


class TestEnforceResourceLimits:
    def test_parses_string(self):
        doc = notify_fixtures.announce_review()
        assert enforce_resource_limits(json.dumps(doc)) == doc

    def test_parses_bytes(self):
        doc = notify_fixtures.announce_review()
        assert enforce_resource_limits(json.dumps(doc).encode("utf-8")) == doc

    def test_dict_returned_as_is(self):
        doc = notify_fixtures.announce_review()
        assert enforce_resource_limits(doc) is doc

    def test_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            enforce_resource_limits(None)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="must be a str, bytes or dict"):
            enforce_resource_limits(42)

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="not valid JSON"):
            enforce_resource_limits("{not json")

    def test_invalid_utf8(self):
        with pytest.raises(ValueError, match="not valid UTF-8"):
            enforce_resource_limits(b"\xff\xfe{}")

    def test_must_be_object(self):
        with pytest.raises(ValueError, match="must be a JSON object"):
            enforce_resource_limits("[1, 2, 3]")

    def test_size_limit(self):
        doc = json.dumps(notify_fixtures.announce_review())
        with pytest.raises(ValueError, match="exceeds limit"):
            enforce_resource_limits(doc, {"max_document_size": 100})

    def test_size_limit_dict(self):
        with pytest.raises(ValueError, match="exceeds limit"):
            enforce_resource_limits(notify_fixtures.announce_review(), {"max_document_size": 100})

    def test_not_serializable(self):
        with pytest.raises(TypeError, match="not JSON-serializable"):
            enforce_resource_limits({"id": object()})

    def test_depth_limit(self):
        with pytest.raises(ValueError, match="depth"):
            enforce_resource_limits(_nested(10), {"max_graph_depth": 5})
        assert enforce_resource_limits(_nested(5), {"max_graph_depth": 5})

    def test_defaults_accept_real_notifications(self):
        assert DEFAULT_RESOURCE_LIMITS["max_graph_depth"] >= 10
        assert enforce_resource_limits(notify_fixtures.accept())

    def test_size_counted_in_utf8_bytes(self):
        doc = json.dumps({"id": "urn:uuid:1", "summary": "é" * 40}, ensure_ascii=False)
        assert len(doc) < 80 < len(doc.encode("utf-8"))
        with pytest.raises(ValueError, match="bytes exceeds limit"):
            enforce_resource_limits(doc, {"max_document_size": 80})
        with pytest.raises(ValueError, match="bytes exceeds limit"):
            enforce_resource_limits(doc.encode("utf-8"), {"max_document_size": 80})

    def test_depth_counts_lists(self):
        doc = {"id": "urn:uuid:1", "items": [[[{"deep": True}]]]}
        assert enforce_resource_limits(doc, {"max_graph_depth": 5}) is doc
        with pytest.raises(ValueError, match="Document depth 5 exceeds limit 4"):
            enforce_resource_limits(doc, {"max_graph_depth": 4})

    def test_parser_depth_exhausted(self):
        text = '{"a": ' + "[" * 100000 + "]" * 100000 + "}"
        with pytest.raises(ValueError, match="depth"):
            enforce_resource_limits(text, {"max_graph_depth": 10**6, "max_document_size": 10**6})
