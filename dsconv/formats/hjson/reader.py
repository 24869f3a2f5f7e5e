"""Hjson format reader for dsconv."""

from __future__ import annotations

from typing import Any

import hjson

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry
from dsconv.formats.text import decode_text


@FormatRegistry.register_reader(Format.HJSON)
class HjsonReader:
    """Reader for Hjson documents.

    hjson returns OrderedDict maps; normalization turns them into plain
    dicts with the same order.
    """

    # HjsonDecodeError subclasses ValueError
    errors = (ValueError,)

    @property
    def format(self) -> Format:
        return Format.HJSON

    def decode(self, data: bytes) -> Any:
        return hjson.loads(decode_text(data))
