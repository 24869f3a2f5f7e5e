"""JSON format support for dsconv.

JSON (RFC 8259) is both an input and an output format. Pretty output uses
a two-space indent; compact output has no insignificant whitespace.
"""

from dsconv.formats.json.reader import JSONReader
from dsconv.formats.json.writer import JSONWriter

__all__ = ["JSONReader", "JSONWriter"]
