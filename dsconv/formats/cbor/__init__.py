"""CBOR format support for dsconv.

CBOR (RFC 8949) is read and written with cbor2.
"""

from dsconv.formats.cbor.reader import CBORReader
from dsconv.formats.cbor.writer import CBORWriter

__all__ = ["CBORReader", "CBORWriter"]
