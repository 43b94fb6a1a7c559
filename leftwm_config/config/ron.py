"""
Rusty Object Notation (RON) codec.

LeftWM stores its configuration as RON. This module reads RON text into
plain Python values and pretty-prints plain values back:

- structs ``(a: 1)`` and named structs ``Name(a: 1)`` become dicts
- lists ``[..]`` and tuples ``(1, 2)`` become lists
- maps ``{"k": v}`` become dicts
- ``Some(x)`` becomes ``x`` and ``None`` becomes ``None``
- bare identifiers (unit enum variants) become strings
- ``Variant(x)`` becomes ``{"Variant": x}``

The writer emits Enum members as bare identifiers and optional values
without ``Some`` (the ``implicit_some`` extension).
"""

import math
import re
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from ..errors import RonSyntaxError


INDENT = "    "
DEFAULT_DEPTH_LIMIT = 2
IMPLICIT_SOME = "implicit_some"

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_IDENT_FULL = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_DECIMAL = re.compile(r"[0-9][0-9_]*(\.[0-9_]*)?([eE][+-]?[0-9_]+)?|\.[0-9][0-9_]*([eE][+-]?[0-9_]+)?")
_PREFIXED = {
    "0x": (16, re.compile(r"[0-9A-Fa-f_]+")),
    "0b": (2, re.compile(r"[01_]+")),
    "0o": (8, re.compile(r"[0-7_]+")),
}
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


class RonParser:
    """Recursive descent parser over one RON document."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.extensions: List[str] = []

    # Position helpers

    def error(self, reason: str, pos: Optional[int] = None) -> RonSyntaxError:
        pos = self.pos if pos is None else pos
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return RonSyntaxError(reason, line, column)

    def peek(self, length: int = 1) -> str:
        return self.text[self.pos:self.pos + length]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_ws(self) -> None:
        """Skip whitespace and comments."""
        while not self.at_end():
            char = self.text[self.pos]
            if char.isspace():
                self.pos += 1
            elif self.text.startswith("//", self.pos):
                end = self.text.find("\n", self.pos)
                self.pos = len(self.text) if end == -1 else end + 1
            elif self.text.startswith("/*", self.pos):
                self._skip_block_comment()
            else:
                break

    def _skip_block_comment(self) -> None:
        # Block comments nest.
        start = self.pos
        depth = 0
        while not self.at_end():
            if self.text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        raise self.error("Unterminated block comment", start)

    def expect(self, token: str) -> None:
        self.skip_ws()
        if not self.text.startswith(token, self.pos):
            found = self.peek() or "end of input"
            raise self.error(f"Expected `{token}`, found `{found}`")
        self.pos += len(token)

    def consume(self, token: str) -> bool:
        self.skip_ws()
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def identifier(self) -> Optional[str]:
        match = _IDENT.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group()

    # Document

    def parse_document(self) -> Any:
        self.skip_ws()
        while self.text.startswith("#!", self.pos):
            self._parse_attribute()
            self.skip_ws()

        value = self.parse_value()
        self.skip_ws()
        if not self.at_end():
            raise self.error(f"Unexpected trailing characters `{self.peek()}`")
        return value

    def _parse_attribute(self) -> None:
        self.expect("#!")
        self.expect("[")
        self.skip_ws()
        if self.identifier() != "enable":
            raise self.error("Only `enable` attributes are supported")
        self.expect("(")
        while not self.consume(")"):
            self.skip_ws()
            name = self.identifier()
            if name is None:
                raise self.error("Expected extension name")
            self.extensions.append(name)
            if not self.consume(","):
                self.expect(")")
                break
        self.expect("]")

    # Values

    def parse_value(self) -> Any:
        self.skip_ws()
        if self.at_end():
            raise self.error("Unexpected end of input")

        char = self.text[self.pos]
        if char == "[":
            return self._parse_list()
        if char == "{":
            return self._parse_map()
        if char == "(":
            return self._parse_parens(None)
        if char == '"':
            return self._parse_string()
        if char == "r" and self.peek(2) in ('r"', "r#"):
            return self._parse_raw_string()
        if char == "'":
            return self._parse_char()
        if char in "+-.0123456789":
            return self._parse_number()
        if _IDENT.match(char):
            return self._parse_identifier_value()
        raise self.error(f"Unexpected character `{char}`")

    def _parse_identifier_value(self) -> Any:
        name = self.identifier()
        if name == "true":
            return True
        if name == "false":
            return False
        if name == "None":
            return None
        if name == "inf":
            return math.inf
        if name == "NaN":
            return math.nan
        if name == "Some":
            self.expect("(")
            value = self.parse_value()
            self.consume(",")
            self.expect(")")
            return value

        self.skip_ws()
        if self.peek() == "(":
            return self._parse_parens(name)
        # Unit struct or unit enum variant
        return name

    def _items(self, close: str, parse_item) -> List[Any]:
        """Parse comma separated items up to `close`, allowing a trailing comma."""
        items = []
        while True:
            if self.consume(close):
                return items
            items.append(parse_item())
            if not self.consume(","):
                self.expect(close)
                return items

    def _parse_list(self) -> List[Any]:
        self.expect("[")
        return self._items("]", self.parse_value)

    def _parse_map(self) -> dict:
        self.expect("{")

        def entry() -> Tuple[Any, Any]:
            self.skip_ws()
            key_pos = self.pos
            try:
                key = _map_key(self.parse_value())
            except TypeError:
                raise self.error("Map key must be hashable", key_pos) from None
            self.expect(":")
            return key, self.parse_value()

        return dict(self._items("}", entry))

    def _is_struct_body(self) -> bool:
        """Look ahead for `ident :` (but not `ident ::`) after an opening paren."""
        saved = self.pos
        try:
            self.skip_ws()
            if self.identifier() is None:
                return False
            self.skip_ws()
            return self.peek() == ":" and self.peek(2) != "::"
        finally:
            self.pos = saved

    def _parse_parens(self, name: Optional[str]) -> Any:
        self.expect("(")
        if self._is_struct_body():
            def field() -> Tuple[str, Any]:
                self.skip_ws()
                key_pos = self.pos
                key = self.identifier()
                if key is None:
                    raise self.error("Expected field name", key_pos)
                self.expect(":")
                return key, self.parse_value()

            fields = self._items(")", field)
            result = {}
            for key, value in fields:
                if key in result:
                    raise self.error(f"Duplicate field `{key}`")
                result[key] = value
            return result

        values = self._items(")", self.parse_value)
        if name is None:
            # Unit `()` or tuple
            return values if values else None
        if len(values) == 1:
            return {name: values[0]}
        return {name: values}

    def _parse_string(self) -> str:
        start = self.pos
        self.pos += 1
        chunks = []
        while True:
            if self.at_end():
                raise self.error("Unterminated string", start)
            char = self.text[self.pos]
            if char == '"':
                self.pos += 1
                return "".join(chunks)
            if char == "\\":
                chunks.append(self._parse_escape())
            else:
                chunks.append(char)
                self.pos += 1

    def _parse_escape(self) -> str:
        escape_pos = self.pos
        self.pos += 1
        char = self.peek()
        if char in _ESCAPES:
            self.pos += 1
            return _ESCAPES[char]
        if char == "x":
            digits = self.text[self.pos + 1:self.pos + 3]
            if not re.fullmatch(r"[0-9A-Fa-f]{2}", digits):
                raise self.error("Invalid \\x escape", escape_pos)
            self.pos += 3
            return chr(int(digits, 16))
        if char == "u":
            match = re.compile(r"u\{([0-9A-Fa-f_]{1,8})\}").match(self.text, self.pos)
            if match is None:
                raise self.error("Invalid \\u escape", escape_pos)
            digits = match.group(1).replace("_", "")
            code = int(digits, 16) if digits else -1
            if not 0 <= code <= 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                raise self.error("Invalid code point in \\u escape", escape_pos)
            self.pos = match.end()
            return chr(code)
        if char == "\n":
            # Line continuation: skip the newline and leading whitespace.
            self.pos += 1
            while not self.at_end() and self.text[self.pos] in " \t\r\n":
                self.pos += 1
            return ""
        raise self.error(f"Unknown escape `\\{char}`", escape_pos)

    def _parse_raw_string(self) -> str:
        start = self.pos
        self.pos += 1
        hashes = 0
        while self.peek() == "#":
            hashes += 1
            self.pos += 1
        if self.peek() != '"':
            raise self.error("Expected `\"` in raw string", start)
        self.pos += 1
        terminator = '"' + "#" * hashes
        end = self.text.find(terminator, self.pos)
        if end == -1:
            raise self.error("Unterminated raw string", start)
        value = self.text[self.pos:end]
        self.pos = end + len(terminator)
        return value

    def _parse_char(self) -> str:
        start = self.pos
        self.pos += 1
        if self.peek() == "\\":
            value = self._parse_escape()
        else:
            value = self.peek()
            self.pos += 1
        if self.peek() != "'" or len(value) != 1:
            raise self.error("Invalid character literal", start)
        self.pos += 1
        return value

    def _parse_number(self) -> Any:
        start = self.pos
        sign = 1
        if self.peek() in "+-":
            sign = -1 if self.peek() == "-" else 1
            self.pos += 1
            if self.text.startswith("inf", self.pos):
                self.pos += 3
                return sign * math.inf
            if self.text.startswith("NaN", self.pos):
                self.pos += 3
                return math.nan

        prefix = self.peek(2)
        if prefix in _PREFIXED:
            base, pattern = _PREFIXED[prefix]
            match = pattern.match(self.text, self.pos + 2)
            if match is None:
                raise self.error("Invalid number", start)
            self.pos = match.end()
            return sign * int(match.group().replace("_", ""), base)

        match = _DECIMAL.match(self.text, self.pos)
        if match is None:
            raise self.error("Invalid number", start)
        self.pos = match.end()
        literal = match.group().replace("_", "")
        if match.group(1) is not None or "e" in literal or "E" in literal or literal.startswith("."):
            return sign * float(literal)
        return sign * int(literal)


def _map_key(value: Any) -> Any:
    """Turn a parsed map key into a dict key; lists become tuples."""
    if isinstance(value, list):
        value = tuple(_map_key(item) for item in value)
    hash(value)
    return value


def loads(text: str) -> Any:
    """
    Parse RON text into plain Python values.

    Args:
        text: RON document, comments and `#![enable(..)]` attributes allowed

    Returns:
        Parsed value (a dict for a struct document)

    Raises:
        RonSyntaxError: If the text is not valid RON
    """
    return RonParser(text).parse_document()


# Writing

def _format_string(value: str) -> str:
    out = ['"']
    for char in value:
        if char == "\\":
            out.append("\\\\")
        elif char == '"':
            out.append('\\"')
        elif char == "\n":
            out.append("\\n")
        elif char == "\t":
            out.append("\\t")
        elif char == "\r":
            out.append("\\r")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "." not in text and "e" not in text:
        text += ".0"
    return text


def _is_struct(value: dict) -> bool:
    return all(isinstance(key, str) and _IDENT_FULL.match(key) for key in value)


class RonWriter:
    """Pretty printer producing RON text from plain Python values."""

    def __init__(self, depth_limit: int = DEFAULT_DEPTH_LIMIT, extensions: Iterable[str] = (IMPLICIT_SOME,)):
        """
        Initialize writer.

        Args:
            depth_limit: Containers nested deeper than this are written on
                a single line
            extensions: RON extensions announced in the document header
        """
        self.depth_limit = depth_limit
        self.extensions = list(extensions)

    def write(self, value: Any) -> str:
        header = ""
        if self.extensions:
            header = f"#![enable({', '.join(self.extensions)})]\n"
        return header + self._value(value, 1)

    def _value(self, value: Any, depth: int) -> str:
        if value is None:
            return "None"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _format_float(value)
        if isinstance(value, str):
            return _format_string(value)
        if isinstance(value, dict):
            if _is_struct(value):
                items = [f"{key}: {self._value(item, depth + 1)}" for key, item in value.items()]
                return self._container("(", ")", items, depth)
            items = [
                f"{self._value(key, depth + 1)}: {self._value(item, depth + 1)}"
                for key, item in value.items()
            ]
            return self._container("{", "}", items, depth)
        if isinstance(value, (list, tuple)):
            items = [self._value(item, depth + 1) for item in value]
            return self._container("[", "]", items, depth)
        raise TypeError(f"Cannot serialize {type(value).__name__} to RON")

    def _container(self, open_: str, close: str, items: List[str], depth: int) -> str:
        if not items:
            return open_ + close
        if depth > self.depth_limit:
            return open_ + ", ".join(items) + close
        indent = INDENT * depth
        body = "".join(f"{indent}{item},\n" for item in items)
        return f"{open_}\n{body}{INDENT * (depth - 1)}{close}"


def dumps(value: Any, depth_limit: int = DEFAULT_DEPTH_LIMIT) -> str:
    """
    Pretty-print a plain value as RON.

    Args:
        value: Value built from dicts, lists, scalars and Enum members
        depth_limit: Nesting depth written one item per line

    Returns:
        RON text, starting with the `implicit_some` attribute
    """
    return RonWriter(depth_limit=depth_limit).write(value)
