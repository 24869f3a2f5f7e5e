"""Hjson format support for dsconv (input only)."""

from dsconv.formats.hjson.reader import HjsonReader

__all__ = ["HjsonReader"]
