"""Output nodes for the Mustache AST."""

from __future__ import annotations

from dataclasses import dataclass, field

from mustache_js.nodes.base import Node


@dataclass(frozen=True, slots=True)
class StaticText(Node):
    """Literal text between tags."""

    content: str
    lineno: int = field(default=1, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Interpolation(Node):
    """Variable tag: {{ name }}, {{{ name }}} or {{& name }}.

    ``path`` is the dotted name split into segments; an empty path is the
    implicit iterator ``{{.}}``.
    """

    path: tuple[str, ...]
    escape: bool = True
    lineno: int = field(default=1, compare=False, repr=False)
