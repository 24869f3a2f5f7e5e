"""RON format reader for dsconv.

RON values map onto the generic value model as follows:

    struct          Name(x: 1, y: 2) / (x: 1)   map of field name to value
    tuple           Name(1, 2) / (1, 2)          sequence
    unit            ()                           null
    unit variant    Name                         string "Name"
    option          Some(v) / None               v / null
    char            'c'                          string
    list, map       [..] / {..}                  sequence / map

Struct and tuple-struct names are dropped. Extension attributes such as
``#![enable(implicit_some)]`` are accepted and ignored.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from lark import Lark, Transformer
from lark.exceptions import LarkError

from dsconv.core.models import Format
from dsconv.formats.registry import FormatRegistry
from dsconv.formats.text import decode_text

RON_GRAMMAR = r"""
    start: extension* value

    extension: "#" "!" "[" IDENT "(" (IDENT ("," IDENT)* ","?)? ")" "]"

    ?value: mapping
          | sequence
          | tuple
          | struct
          | named
          | "Some" "(" value ")"  -> some
          | "None"                -> none
          | "true"                -> true
          | "false"               -> false
          | STRING                -> string
          | RAW_STRING            -> raw_string
          | CHAR                  -> char
          | NUMBER                -> number

    mapping: "{" (entry ("," entry)* ","?)? "}"
    entry: value ":" value
    sequence: "[" (value ("," value)* ","?)? "]"
    tuple: "(" (value ("," value)* ","?)? ")"
    struct: "(" field ("," field)* ","? ")"
    field: IDENT ":" value
    named: IDENT (tuple | struct)?

    IDENT: /(r#)?[A-Za-z_][A-Za-z0-9_]*/
    STRING: /"(\\[\s\S]|[^"\\])*"/
    RAW_STRING.3: /r"[^"]*"/ | /r#"[\s\S]*?"#/ | /r##"[\s\S]*?"##/ | /r###"[\s\S]*?"###/
    CHAR: /'(\\u\{[0-9a-fA-F]{1,6}\}|\\x[0-9a-fA-F]{2}|\\.|[^'\\])'/
    NUMBER.2: /[+-]?(0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|inf\b|NaN\b|(\d[\d_]*\.[\d_]*|\.\d[\d_]*|\d[\d_]*)([eE][+-]?\d[\d_]*)?)/

    COMMENT: /\/\/[^\n]*/ | /\/\*[\s\S]*?\*\//

    %import common.WS
    %ignore WS
    %ignore COMMENT
"""

_ESCAPE = re.compile(r"\\(u\{[0-9a-fA-F]{1,6}\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\n\s*|.)")
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def _replace_escape(match: re.Match[str]) -> str:
    escape = match.group(1)
    if escape.startswith("u{"):
        return chr(int(escape[2:-1], 16))
    if escape.startswith(("u", "x")) and len(escape) > 1:
        return chr(int(escape[1:], 16))
    if escape.startswith("\n"):
        # Line continuation: backslash-newline and leading whitespace vanish
        return ""
    if escape in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[escape]
    raise ValueError(f"unknown escape sequence '\\{escape}'")


def unescape(text: str) -> str:
    """Resolve the escape sequences of a RON string or char literal."""
    return _ESCAPE.sub(_replace_escape, text)


def parse_number(token: str) -> int | float:
    """Convert a RON number literal to int or float."""
    text = token.replace("_", "")
    body = text.lstrip("+-")
    if body in ("inf", "NaN"):
        return float(text)
    if body[:2] in ("0x", "0o", "0b"):
        return int(text, 0)
    if any(marker in body for marker in ".eE"):
        return float(text)
    return int(text)


def _identifier(token: str) -> str:
    return token[2:] if token.startswith("r#") else str(token)


def _hashable(key: Any) -> Any:
    if isinstance(key, list):
        return tuple(_hashable(part) for part in key)
    if isinstance(key, dict):
        raise ValueError(f"a map cannot be used as a map key: {key!r}")
    return key


class _RONTransformer(Transformer):
    """Builds generic values bottom-up while the LALR parser runs."""

    def start(self, children: list[Any]) -> Any:
        return children[-1]

    def extension(self, children: list[Any]) -> None:
        return None

    def mapping(self, entries: list[tuple[Any, Any]]) -> dict[Any, Any]:
        return {_hashable(key): value for key, value in entries}

    def entry(self, children: list[Any]) -> tuple[Any, Any]:
        return children[0], children[1]

    def sequence(self, items: list[Any]) -> list[Any]:
        return list(items)

    def tuple(self, items: list[Any]) -> list[Any] | None:
        return list(items) if items else None

    def struct(self, fields: list[tuple[str, Any]]) -> dict[str, Any]:
        return dict(fields)

    def field(self, children: list[Any]) -> tuple[str, Any]:
        name, value = children
        return _identifier(name), value

    def named(self, children: list[Any]) -> Any:
        if len(children) == 1:
            return _identifier(children[0])
        return children[1]

    def some(self, children: list[Any]) -> Any:
        return children[0]

    def none(self, children: list[Any]) -> None:
        return None

    def true(self, children: list[Any]) -> bool:
        return True

    def false(self, children: list[Any]) -> bool:
        return False

    def string(self, children: list[Any]) -> str:
        return unescape(children[0][1:-1])

    def raw_string(self, children: list[Any]) -> str:
        body = children[0][1:]
        hashes = len(body) - len(body.lstrip("#"))
        return str(body[hashes + 1 : len(body) - hashes - 1])

    def char(self, children: list[Any]) -> str:
        return unescape(children[0][1:-1])

    def number(self, children: list[Any]) -> int | float:
        return parse_number(children[0])


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(RON_GRAMMAR, parser="lalr", transformer=_RONTransformer())


@FormatRegistry.register_reader(Format.RON)
class RONReader:
    """Reader for RON documents."""

    errors = (LarkError, ValueError)

    @property
    def format(self) -> Format:
        return Format.RON

    def decode(self, data: bytes) -> Any:
        return _parser().parse(decode_text(data))
