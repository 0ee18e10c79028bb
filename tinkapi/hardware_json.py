"""JSON encoding of hardware records whose metadata is carried as a JSON string.

In storage the ``metadata`` field is a JSON document held in a string. Written
out as-is, its quotes would be escaped and hard to read, so it is expanded into
an object on the way out and folded back into a string on the way in.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _dumps(value: Any) -> str:
    text = json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escape in _ESCAPES:
        text = text.replace(char, escape)
    return text


def _load_object(data: str | bytes, what: str) -> dict[str, Any] | None:
    value = json.loads(data)
    if value is not None and not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def marshal_hardware(hardware: Mapping[str, Any]) -> str:
    """Encode a hardware record as JSON, expanding its metadata string into an object.

    Raises ValueError if the metadata is not a JSON object.
    """
    fields = dict(hardware)
    metadata = fields.pop("metadata", "")
    if metadata:
        fields["metadata"] = _load_object(metadata, "hardware metadata")
    return _dumps(fields)


def unmarshal_hardware(data: str | bytes) -> dict[str, Any]:
    """Decode hardware JSON, folding its metadata object back into a JSON string.

    Raises ValueError if the document is not a JSON object.
    """
    fields = _load_object(data, "hardware")
    if fields is None:
        return {}
    if "metadata" in fields:
        fields["metadata"] = _dumps(fields["metadata"])
    return fields