"""RON format support for dsconv (input only).

RON (Rusty Object Notation) is parsed with a lark LALR grammar.
"""

from dsconv.formats.ron.reader import RONReader

__all__ = ["RONReader"]
