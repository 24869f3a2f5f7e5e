"""YAML format support for dsconv.

YAML is read and written with PyYAML's safe loader and dumper, so only
standard tags (including timestamps and !!binary) are understood.
"""

from dsconv.formats.yaml.reader import YAMLReader
from dsconv.formats.yaml.writer import YAMLWriter

__all__ = ["YAMLReader", "YAMLWriter"]
