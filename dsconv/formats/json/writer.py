"""JSON format writer for dsconv."""

from __future__ import annotations

import json
from typing import Any

from dsconv.core.exceptions import EncodeError
from dsconv.core.models import Format
from dsconv.core.values import ensure_string_keys, find_node, temporals_to_iso
from dsconv.formats.registry import FormatRegistry


@FormatRegistry.register_writer(Format.JSON)
class JSONWriter:
    """Writer for JSON documents.

    Date and time values are written as ISO-8601 strings. Non-string map
    keys, byte strings and non-finite floats have no JSON form and raise
    EncodeError.
    """

    # allow_nan=False reports NaN/Infinity as ValueError
    errors = (TypeError, ValueError)

    @property
    def format(self) -> Format:
        return Format.JSON

    def encode(self, value: Any, pretty: bool = False) -> bytes:
        value = temporals_to_iso(value)
        ensure_string_keys(value, Format.JSON)

        found = find_node(value, (bytes,))
        if found is not None:
            location, _ = found
            raise EncodeError(Format.JSON, f"byte string at {location} has no JSON representation")

        if pretty:
            text = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return (text + "\n").encode("utf-8")
