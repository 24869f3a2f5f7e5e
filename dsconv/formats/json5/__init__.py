"""JSON5 format support for dsconv (input only)."""

from dsconv.formats.json5.reader import JSON5Reader

__all__ = ["JSON5Reader"]
