"""MessagePack format writer for dsconv."""

from __future__ import annotations

from typing import Any

import msgpack

from dsconv.core.models import Format
from dsconv.core.values import temporals_to_iso
from dsconv.formats.registry import FormatRegistry


@FormatRegistry.register_writer(Format.MESSAGEPACK)
class MessagePackWriter:
    """Writer for MessagePack objects.

    Byte strings use the bin family, date and time values are written as
    ISO-8601 strings, and integers must fit in 64 bits. The pretty flag is
    ignored.
    """

    errors = (TypeError, ValueError, OverflowError)

    @property
    def format(self) -> Format:
        return Format.MESSAGEPACK

    def encode(self, value: Any, pretty: bool = False) -> bytes:
        return msgpack.packb(temporals_to_iso(value), use_bin_type=True)
