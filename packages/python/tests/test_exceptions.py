"""Tests for the ValidationError tree."""

import json

from coarnotify.core.activitystreams2 import Properties
from coarnotify.core.notify import NotifyProperties
from coarnotify.exceptions import (
    InvalidURIError,
    NotifyException,
    PartNotAnObjectError,
    RequiredFieldMissing,
    ValidationError,
    ValueNotAllowedError,
)


class TestValidationError:
    def test_empty(self):
        ve = ValidationError()
        assert not ve.has_errors()
        assert ve.to_dict() == {}
        assert isinstance(ve, NotifyException)

    def test_add_error_accumulates(self):
        ve = ValidationError()
        ve.add_error(Properties.ID, "first")
        ve.add_error(Properties.ID, "second")
        assert ve.errors[Properties.ID]["errors"] == ["first", "second"]

    def test_plain_keys_normalised(self):
        ve = ValidationError()
        ve.add_error("summary", "missing")
        ve.add_error(("id", Properties.ID.namespace), "bad")
        assert set(ve.to_dict()) == {"summary", "id"}

    def test_nested_errors(self):
        inner = ValidationError()
        inner.add_error(Properties.ID, "bad id")
        outer = ValidationError()
        outer.add_nested_errors(Properties.ORIGIN, inner)
        assert outer.to_dict() == {
            "origin": {"errors": [], "nested": {"id": {"errors": ["bad id"]}}},
        }

    def test_nested_merge_keeps_siblings(self):
        first = ValidationError()
        first.add_error(Properties.ID, "bad id")
        second = ValidationError()
        second.add_error(Properties.TYPE, "bad type")

        outer = ValidationError()
        outer.add_error(Properties.OBJECT, "leaf message")
        outer.add_nested_errors(Properties.OBJECT, first)
        outer.add_nested_errors(Properties.OBJECT, second)

        node = outer.to_dict()["object"]
        assert node["errors"] == ["leaf message"]
        assert set(node["nested"]) == {"id", "type"}

    def test_merge(self):
        a = ValidationError()
        a.add_error(Properties.ID, "one")
        b = ValidationError()
        b.add_error(Properties.ID, "two")
        b.add_error(NotifyProperties.INBOX, "three")
        a.merge(b)
        assert a.to_dict() == {"id": {"errors": ["one", "two"]}, "inbox": {"errors": ["three"]}}

    def test_merge_does_not_alias_source(self):
        a = ValidationError()
        b = ValidationError()
        b.add_error(Properties.ID, "two")
        a.merge(b)
        a.add_error(Properties.ID, "more")
        assert b.errors[Properties.ID]["errors"] == ["two"]

    def test_str_is_json(self):
        ve = ValidationError()
        ve.add_error(Properties.ID, "`id` is a required field")
        assert json.loads(str(ve)) == {"id": {"errors": ["`id` is a required field"]}}


class TestLeafErrors:
    def test_invalid_uri_is_value_error(self):
        e = InvalidURIError("Invalid URI path `^`", "path", "^")
        assert isinstance(e, ValueError)
        assert e.component == "path"
        assert e.value == "^"

    def test_value_not_allowed(self):
        e = ValueNotAllowedError("nope", "X", ("A", "B"))
        assert isinstance(e, ValueError)
        assert e.allowed == ["A", "B"]

    def test_required_field_missing(self):
        e = RequiredFieldMissing("inReplyTo")
        assert isinstance(e, ValueError)
        assert e.field == "inReplyTo"
        assert str(e) == "`inReplyTo` is a required field"

    def test_part_not_an_object(self):
        e = PartNotAnObjectError("origin", ["https://example.com/"])
        assert isinstance(e, ValueError)
        assert e.field == "origin"
        assert str(e) == "`origin` must be a JSON object, got: list"
