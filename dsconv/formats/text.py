"""Helpers shared by the text-based format readers."""

from __future__ import annotations


def decode_text(data: bytes) -> str:
    """Decode a UTF-8 document, dropping a leading byte order mark.

    Raises:
        UnicodeDecodeError: If the input is not valid UTF-8.
    """
    return data.decode("utf-8-sig")
