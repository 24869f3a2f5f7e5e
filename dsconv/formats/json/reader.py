"""JSON format reader for dsconv."""

from __future__ import annotations

import json
from typing import Any

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry
from dsconv.formats.text import decode_text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


@FormatRegistry.register_reader(Format.JSON)
class JSONReader:
    """Reader for JSON documents.

    The non-standard constants NaN, Infinity and -Infinity that the stdlib
    parser accepts by default are rejected.
    """

    errors = (ValueError,)

    @property
    def format(self) -> Format:
        return Format.JSON

    def decode(self, data: bytes) -> Any:
        return json.loads(decode_text(data), parse_constant=_reject_constant)
