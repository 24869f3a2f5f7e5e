"""MessagePack format support for dsconv."""

from dsconv.formats.msgpack.reader import MessagePackReader
from dsconv.formats.msgpack.writer import MessagePackWriter

__all__ = ["MessagePackReader", "MessagePackWriter"]
