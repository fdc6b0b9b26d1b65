"""Exceptions raised by coarnotify."""

from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from coarnotify.core.activitystreams2 import Property, as_property


class NotifyException(Exception):
    """Base class for all coarnotify exceptions."""


class ValidationError(NotifyException):
    """The complete set of validation failures for one ``validate()`` call.

    Errors form a tree keyed by :class:`~coarnotify.core.activitystreams2.Property`::

        {
            Properties.ID: {"errors": ["`id` is a required field"]},
            Properties.ORIGIN: {
                "errors": [],
                "nested": {
                    Properties.ID: {"errors": ["Invalid URI scheme `9x`"]},
                },
            },
        }

    :meth:`to_dict` renders the same tree with bare property names as keys,
    which is what should be shown to users or serialised.
    """

    def __init__(self, errors: Optional[dict[Property, dict[str, Any]]] = None):
        super().__init__("Validation Error")
        self._errors: dict[Property, dict[str, Any]] = errors if errors is not None else {}

    @property
    def errors(self) -> dict[Property, dict[str, Any]]:
        return self._errors

    def add_error(self, key: Any, value: str) -> None:
        """Record a leaf error message against a property."""
        entry = self._errors.setdefault(as_property(key), {"errors": []})
        entry["errors"].append(value)

    def add_nested_errors(self, key: Any, subve: ValidationError) -> None:
        """Splice a nested object's error tree in under ``key``.

        Anything already recorded under ``key`` (leaf messages or earlier
        nested errors) is kept.
        """
        entry = self._errors.setdefault(as_property(key), {"errors": []})
        nested = entry.setdefault("nested", {})
        _merge_trees(nested, subve.errors)

    def merge(self, other: ValidationError) -> None:
        """Merge another error tree into this one, at the top level."""
        _merge_trees(self._errors, other.errors)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def to_dict(self) -> dict[str, Any]:
        """The error tree keyed by bare property names."""
        return _tree_to_dict(self._errors)

    def __str__(self) -> str:
        return json.dumps(self.to_dict())


class InvalidURIError(ValueError):
    """A URI failed the grammar check.

    ``component`` names the part that failed: ``"scheme"``, ``"authority"``,
    ``"path"``, ``"query"`` or ``"fragment"``; it is ``None`` when the value
    could not be split at all.
    """

    def __init__(self, message: str, component: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.component = component
        self.value = value


class ValueNotAllowedError(ValueError):
    """A value was not among, or did not contain, the permitted values."""

    def __init__(self, message: str, value: Any = None, allowed: Sequence[Any] = ()):
        super().__init__(message)
        self.value = value
        self.allowed = list(allowed)


class RequiredFieldMissing(ValueError):
    """A required property has no value.

    ``field`` is the property's bare name; the message is the one recorded
    in a :class:`ValidationError` tree.
    """

    def __init__(self, field: str):
        super().__init__(f"`{field}` is a required field")
        self.field = field


class PartNotAnObjectError(ValueError):
    """A nested part (``origin``, ``object``, ...) holds something other than a JSON object."""

    def __init__(self, field: str, value: Any = None):
        super().__init__(f"`{field}` must be a JSON object, got: {type(value).__name__}")
        self.field = field
        self.value = value


class NoTypeFound(NotifyException):
    """An incoming document has no ``type`` to dispatch on."""


class NoModelFound(NotifyException):
    """No registered pattern class matches an incoming document's types."""


# -- Internal -----------------------------------------------------------------


def _merge_trees(
    target: dict[Property, dict[str, Any]],
    source: dict[Property, dict[str, Any]],
) -> None:
    for key, node in source.items():
        existing = target.get(key)
        if existing is None:
            target[key] = {
                "errors": list(node.get("errors", [])),
                **({"nested": {}} if "nested" in node else {}),
            }
            if "nested" in node:
                _merge_trees(target[key]["nested"], node["nested"])
            continue
        existing.setdefault("errors", []).extend(node.get("errors", []))
        if "nested" in node:
            _merge_trees(existing.setdefault("nested", {}), node["nested"])


def _tree_to_dict(tree: dict[Property, dict[str, Any]]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, node in tree.items():
        rendered: dict[str, Any] = {"errors": list(node.get("errors", []))}
        if "nested" in node:
            rendered["nested"] = _tree_to_dict(node["nested"])
        out[as_property(key).name] = rendered
    return out
