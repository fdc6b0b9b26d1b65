"""Property validation for COAR Notify objects.

Two things live here:

- A set of validator functions.  Each takes ``(obj, value)``, where ``obj``
  is the Notify object the property belongs to, and returns ``True`` or
  raises a :class:`ValueError` subclass describing what is wrong.
- :class:`Validator`, a rule table that picks the right validator for a
  property depending on where in the document it appears.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Any, Callable, Optional, Sequence, Union

from coarnotify.core.activitystreams2 import Property, as_property
from coarnotify.exceptions import InvalidURIError, ValueNotAllowedError

ValidatorFunction = Callable[[Any, Any], bool]


class Validator:
    """A table of validation rules keyed by property and validation context.

    Rules have the shape::

        {
            Properties.ID: {
                "default": absolute_uri,
                "context": {
                    Properties.ORIGIN: {"default": url},
                },
            },
        }

    so ``id`` must be an absolute URI everywhere, except inside ``origin``
    where it must be an HTTP URL.
    """

    def __init__(self, rules: Optional[dict] = None):
        self._rules: dict[Property, dict[str, Any]] = _normalise_rules(rules or {})

    @property
    def rules(self) -> dict[Property, dict[str, Any]]:
        return self._rules

    def get(
        self,
        prop: Union[str, tuple, Property],
        context: Union[str, tuple, Property, None] = None,
    ) -> Optional[ValidatorFunction]:
        """Return the validator for ``prop`` in ``context``.

        A context-specific rule wins over the property's default; ``None``
        means no rule applies and the value is accepted.
        """
        prop_rules = self._rules.get(as_property(prop), {})
        if context is not None:
            specific = (
                prop_rules.get("context", {})
                .get(as_property(context), {})
                .get("default")
            )
            if specific is not None:
                return specific
        return prop_rules.get("default")

    def add_rules(self, rules: dict) -> None:
        """Merge ``rules`` into the table.

        Nested ``context`` maps are merged recursively; where both tables
        define the same leaf, the incoming rule wins.
        """
        self._rules = _merge_dicts_recursive(self._rules, _normalise_rules(rules))


# ── URI grammar ──────────────────────────────────────────────────

# RFC 3986, appendix B
URI_RE = re.compile(r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?$")

SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+\-.]*$")

MARK = r"\-_.!~*'()"
UNRESERVED = r"a-zA-Z0-9" + MARK
RESERVED = r";/?:@&=+$,"
PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

USERINFO = re.compile(r"^(?:[" + UNRESERVED + r";:&=+$,]|" + PCT_ENCODED + r")*$")

HOSTPORT = re.compile(
    r"^(?:"
    r"(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,63}|[A-Z0-9-]{2,})\.?"
    r"|localhost"
    r"|\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}"
    r")(?::\d+)?$",
    re.IGNORECASE,
)

IPV6_HOSTPORT = re.compile(r"^\[([^\]]+)\](?::(\d+))?$")

PATH = re.compile(r"^[" + UNRESERVED + r":@&=+$,%/;]*$")

FREE = re.compile(r"^(?:[" + RESERVED + UNRESERVED + r"]|" + PCT_ENCODED + r")*$")


def absolute_uri(obj: Any, uri: Any) -> bool:
    """Validate that ``uri`` is an absolute URI.

    The URI is split into scheme, authority, path, query and fragment, and
    each part is checked on its own so the error names the part at fault.

    Raises:
        InvalidURIError: If any component is malformed or the scheme is
            missing.
    """
    if not isinstance(uri, str):
        raise InvalidURIError(f"URI must be a string, got: {type(uri).__name__}", None, uri)

    m = URI_RE.match(uri)
    if m is None:
        raise InvalidURIError("Invalid URI", None, uri)

    scheme = m.group(2)
    authority = m.group(4)
    path = m.group(5)
    query = m.group(7)
    fragment = m.group(9)

    if scheme is None:
        raise InvalidURIError(
            "URI requires a scheme (this may be a relative rather than absolute URI)",
            "scheme", uri,
        )
    if not SCHEME.match(scheme):
        raise InvalidURIError(f"Invalid URI scheme `{scheme}`", "scheme", scheme)

    if authority:
        _check_authority(authority)

    if path and not PATH.match(path):
        raise InvalidURIError(f"Invalid URI path `{path}`", "path", path)

    if query is not None and not FREE.match(query):
        raise InvalidURIError(f"Invalid URI query `{query}`", "query", query)

    if fragment is not None and not FREE.match(fragment):
        raise InvalidURIError(f"Invalid URI fragment `{fragment}`", "fragment", fragment)

    return True


def url(obj: Any, url: Any) -> bool:
    """Validate that ``url`` is an absolute ``http`` or ``https`` URI with a host."""
    absolute_uri(obj, url)
    m = URI_RE.match(url)
    scheme = m.group(2)
    authority = m.group(4)
    if scheme not in ("http", "https"):
        raise InvalidURIError("URL scheme must be http or https", "scheme", scheme)
    host = _split_authority(authority)[1] if authority else ""
    if not host:
        raise InvalidURIError("Does not appear to be a valid URL", "authority", authority)
    return True


# ── Value validators ─────────────────────────────────────────────


def one_of(values: Sequence[Any]) -> ValidatorFunction:
    """Build a validator accepting exactly one of ``values``.

    The value is compared as a scalar: a list is never a member, even if
    every element is.
    """

    def validate(obj: Any, x: Any) -> bool:
        if isinstance(x, list) or x not in values:
            raise ValueNotAllowedError(
                f"`{x}` is not one of the valid values: {list(values)}", x, values,
            )
        return True

    return validate


def at_least_one_of(values: Sequence[Any]) -> ValidatorFunction:
    """Build a validator requiring at least one of a value's entries to be in ``values``."""

    def validate(obj: Any, x: Any) -> bool:
        entries = x if isinstance(x, list) else [x]
        for entry in entries:
            if entry in values:
                return True
        raise ValueNotAllowedError(
            f"`{x}` is not one of the valid values: {list(values)}", x, values,
        )

    return validate


def contains(value: Any) -> ValidatorFunction:
    """Build a validator requiring a value to include every one of ``value``."""
    required = value if isinstance(value, list) else [value]

    def validate(obj: Any, x: Any) -> bool:
        entries = x if isinstance(x, list) else [x]
        for r in required:
            if r not in entries:
                raise ValueNotAllowedError(
                    f"`{x}` does not contain the required value(s): {required}", x, required,
                )
        return True

    return validate


def type_checker(obj: Any, value: Any) -> bool:
    """Check a ``type`` value against what the owning object accepts.

    An object with a non-empty ``ALLOWED_TYPES`` must carry exactly one of
    them; otherwise an object with a ``TYPE`` must include all of it.
    """
    allowed = getattr(obj, "ALLOWED_TYPES", None)
    required = getattr(obj, "TYPE", None)
    if allowed:
        one_of(allowed)(obj, value)
    elif required:
        contains(required)(obj, value)
    return True


# -- Internal -----------------------------------------------------------------


def _split_authority(authority: str) -> tuple[Optional[str], str]:
    if "@" in authority:
        userinfo, hostport = authority.rsplit("@", 1)
        return userinfo, hostport
    return None, authority


def _check_authority(authority: str) -> None:
    userinfo, hostport = _split_authority(authority)
    if userinfo is not None and not USERINFO.match(userinfo):
        raise InvalidURIError(f"Invalid URI authority `{authority}`", "authority", authority)

    if hostport.startswith("["):
        m = IPV6_HOSTPORT.match(hostport)
        if m is None:
            raise InvalidURIError(f"Invalid URI authority `{authority}`", "authority", authority)
        try:
            ipaddress.IPv6Address(m.group(1))
        except ValueError:
            raise InvalidURIError(
                f"Invalid URI authority `{authority}`", "authority", authority,
            ) from None
        return

    if not HOSTPORT.match(hostport):
        raise InvalidURIError(f"Invalid URI authority `{authority}`", "authority", authority)


def _normalise_rules(rules: dict) -> dict[Property, dict[str, Any]]:
    normalised: dict[Property, dict[str, Any]] = {}
    for prop, prop_rules in rules.items():
        entry = dict(prop_rules)
        if "context" in entry:
            entry["context"] = {
                as_property(ctx): dict(ctx_rules)
                for ctx, ctx_rules in entry["context"].items()
            }
        normalised[as_property(prop)] = entry
    return normalised


def _merge_dicts_recursive(first: dict, second: dict) -> dict:
    """Return a new dict with ``second`` merged over ``first``."""
    merged = dict(first)
    for key, value in second.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _merge_dicts_recursive(merged[key], value)
        else:
            merged[key] = value
    return merged
