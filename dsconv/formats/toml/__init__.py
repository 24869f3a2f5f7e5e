"""TOML format support for dsconv.

TOML is parsed with the standard library's tomllib and written with
tomlkit. A TOML document must be a table at the root.
"""

from dsconv.formats.toml.reader import TOMLReader
from dsconv.formats.toml.writer import TOMLWriter

__all__ = ["TOMLReader", "TOMLWriter"]
