"""Mustache template parser.

Produces the immutable node tree (``mustache_js.nodes``) the compiler
consumes. Supports variables, triple mustaches and ``&`` tags, dotted
names, the implicit iterator ``{{.}}``, sections, inverted sections,
comments, partials and set-delimiter tags, with standalone-line trimming.
"""

from mustache_js.parser.core import DEFAULT_DELIMITERS, Parser, parse
from mustache_js.parser.tokens import Tag, TagType

__all__ = [
    "DEFAULT_DELIMITERS",
    "Parser",
    "Tag",
    "TagType",
    "parse",
]
