"""JavaScript literal serialization.

The generated code embeds template text and lookup keys as JavaScript
string literals. Output is plain ASCII: every non-ASCII character and the
line terminators JavaScript rejects inside string literals are written as
``\\uXXXX`` escapes, so the generated source is safe to inline in a
``<script>`` element.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Reserved words that cannot be used as generated identifiers.
JS_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "let",
        "new",
        "null",
        "return",
        "static",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    # Keep the literal from closing an enclosing <script> element.
    "<": "\\u003c",
    ">": "\\u003e",
}


def _escape_char(char: str) -> str:
    escaped = _ESCAPES.get(char)
    if escaped is not None:
        return escaped
    code = ord(char)
    if code < 0x20 or code > 0x7E:
        if code > 0xFFFF:
            # Astral characters become a UTF-16 surrogate pair.
            code -= 0x10000
            high = 0xD800 + (code >> 10)
            low = 0xDC00 + (code & 0x3FF)
            return f"\\u{high:04x}\\u{low:04x}"
        return f"\\u{code:04x}"
    return char


def js_string(value: str) -> str:
    """Serialize ``value`` as a double-quoted JavaScript string literal.

    Example:
        >>> js_string('say "hi"\\n')
        '"say \\\\"hi\\\\"\\\\n"'
    """
    return '"' + "".join(_escape_char(char) for char in value) + '"'


def js_array(values: Iterable[str]) -> str:
    """Serialize strings as a JavaScript array literal."""
    return "[" + ", ".join(js_string(value) for value in values) + "]"


def is_identifier(name: str) -> bool:
    """Return True if ``name`` is usable as a JavaScript variable name."""
    return bool(_IDENTIFIER_RE.fullmatch(name)) and name not in JS_RESERVED_WORDS
