"""Template structure nodes for the Mustache AST."""

from __future__ import annotations

from dataclasses import dataclass, field

from mustache_js.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Sequence(Node):
    """Ordered concatenation of child nodes."""

    children: tuple[Node, ...] = ()
    lineno: int = field(default=1, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Section(Node):
    """Section {{#name}}...{{/name}} or inverted section {{^name}}...{{/name}}."""

    path: tuple[str, ...]
    body: Node
    inverted: bool = False
    lineno: int = field(default=1, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class PartialReference(Node):
    """Partial include: {{> name}}.

    ``indentation`` is the whitespace preceding a standalone partial tag;
    it is reapplied to every line of the partial's text.
    """

    name: str
    indentation: str = ""
    lineno: int = field(default=1, compare=False, repr=False)
