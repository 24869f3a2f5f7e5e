"""CBOR format writer for dsconv."""

from __future__ import annotations

from typing import Any

import cbor2

from dsconv.core.models import Format
from dsconv.core.values import temporals_to_iso
from dsconv.formats.registry import FormatRegistry


@FormatRegistry.register_writer(Format.CBOR)
class CBORWriter:
    """Writer for CBOR data items.

    Date and time values are written as ISO-8601 text strings. CBOR is a
    binary format, so the pretty flag is ignored.
    """

    errors = (cbor2.CBOREncodeError,)

    @property
    def format(self) -> Format:
        return Format.CBOR

    def encode(self, value: Any, pretty: bool = False) -> bytes:
        return cbor2.dumps(temporals_to_iso(value))
