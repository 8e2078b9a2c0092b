"""Mustache AST nodes.

The parser produces a tree of these immutable nodes and the compiler walks
it. Five node kinds exist:

- ``Sequence``: ordered children
- ``StaticText``: literal output
- ``Interpolation``: variable lookup, HTML-escaped or raw
- ``Section``: conditional / iterating block, optionally inverted
- ``PartialReference``: named sub-template include

Example:
    >>> from mustache_js.nodes import Interpolation, Sequence, StaticText
    >>> Sequence((StaticText("Hello "), Interpolation(("name",))))
    Sequence(children=(StaticText(content='Hello '), Interpolation(path=('name',), escape=True)))

"""

from mustache_js.nodes.base import Node
from mustache_js.nodes.output import Interpolation, StaticText
from mustache_js.nodes.structure import PartialReference, Section, Sequence

__all__ = [
    "Interpolation",
    "Node",
    "PartialReference",
    "Section",
    "Sequence",
    "StaticText",
]
