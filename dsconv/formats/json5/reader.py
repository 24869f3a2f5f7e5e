"""JSON5 format reader for dsconv."""

from __future__ import annotations

from typing import Any

import json5

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry
from dsconv.formats.text import decode_text


@FormatRegistry.register_reader(Format.JSON5)
class JSON5Reader:
    """Reader for JSON5 documents.

    Unlike JSON, NaN and Infinity are valid JSON5 numbers; they decode to
    floats and fail later only if the target format cannot hold them.
    """

    errors = (ValueError,)

    @property
    def format(self) -> Format:
        return Format.JSON5

    def decode(self, data: bytes) -> Any:
        return json5.loads(decode_text(data))
