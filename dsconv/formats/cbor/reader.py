"""CBOR format reader for dsconv."""

from __future__ import annotations

from typing import Any

import cbor2

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry


@FormatRegistry.register_reader(Format.CBOR)
class CBORReader:
    """Reader for CBOR data items.

    Standard date/time tags decode to datetime objects and bignum tags to
    int. Other semantic tags and simple values are outside the generic
    value model and fail normalization.
    """

    errors = (cbor2.CBORDecodeError,)

    @property
    def format(self) -> Format:
        return Format.CBOR

    def decode(self, data: bytes) -> Any:
        return cbor2.loads(data)
