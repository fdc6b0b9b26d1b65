"""Resource limits for incoming notifications.

Payloads are bounded before they reach the model: the encoded size is
measured in UTF-8 bytes, as it arrives over the wire, and the nesting depth
of the parsed object is capped.
"""

from __future__ import annotations

import json
from typing import Any, Optional


DEFAULT_RESOURCE_LIMITS = {
    "max_graph_depth": 100,
    "max_document_size": 1024 * 1024,  # bytes
}


def enforce_resource_limits(
    document: str | bytes | dict | Any,
    limits: Optional[dict[str, int]] = None,
) -> dict[str, Any]:
    """Check an incoming document against size and nesting limits.

    Args:
        document: The raw payload: JSON text (``str`` or UTF-8 ``bytes``)
            or an already-parsed ``dict``.
        limits: Overrides for :data:`DEFAULT_RESOURCE_LIMITS`.

    Returns:
        The parsed document.  A ``dict`` is returned as given.

    Raises:
        ValueError: If the document is too large, too deeply nested, not
            valid UTF-8 or JSON, or not a JSON object.
        TypeError: If the document is ``None``, of an unsupported type, or
            a ``dict`` that cannot be serialised.
    """
    if document is None:
        raise TypeError("Document must not be None")
    resolved = {**DEFAULT_RESOURCE_LIMITS, **(limits or {})}

    parsed: Any = None
    if isinstance(document, dict):
        try:
            payload = json.dumps(document).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Document is not JSON-serializable: {exc}") from exc
        parsed = document
    elif isinstance(document, str):
        payload = document.encode("utf-8", errors="surrogatepass")
    elif isinstance(document, bytes):
        payload = document
    else:
        raise TypeError(f"Document must be a str, bytes or dict, got: {type(document).__name__}")

    if len(payload) > resolved["max_document_size"]:
        raise ValueError(
            f"Document size {len(payload)} bytes exceeds limit {resolved['max_document_size']}"
        )

    if parsed is None:
        parsed = _parse(document if isinstance(document, str) else payload)

    if not isinstance(parsed, dict):
        raise ValueError(f"Notification must be a JSON object, got: {type(parsed).__name__}")

    depth = _measure_depth(parsed)
    if depth > resolved["max_graph_depth"]:
        raise ValueError(f"Document depth {depth} exceeds limit {resolved['max_graph_depth']}")
    return parsed


def _parse(payload: str | bytes) -> Any:
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"Document is not valid UTF-8: {exc}") from exc
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Document is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ValueError("Document depth exceeds what the JSON parser can read") from exc


def _measure_depth(obj: Any) -> int:
    """Deepest container nesting in ``obj``; members of the root are at depth 1."""
    deepest = 0
    pending = [(obj, 0)]
    while pending:
        node, depth = pending.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        for child in children:
            deepest = max(deepest, depth + 1)
            pending.append((child, depth + 1))
    return deepest
