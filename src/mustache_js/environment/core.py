"""Environment: compiler configuration and entry points.

The Environment holds everything a compilation needs besides the tree:
the partial loader, the parser, and output options. It is immutable and
holds no per-compile state, so one Environment can serve any number of
compilations, concurrently if its loader allows it. Each compile gets a
fresh JavascriptGenerator.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mustache_js.environment.exceptions import TemplateNotFoundError
from mustache_js.parser import Parser
from mustache_js.utils.javascript import is_identifier

if TYPE_CHECKING:
    from mustache_js.environment.loaders import Loader
    from mustache_js.nodes import Node, Sequence

logger = logging.getLogger(__name__)

# Names the generated module binds or relies on.
_RESERVED_NAMES = frozenset(
    {
        "fetch",
        "escape",
        "isEmpty",
        "isArray",
        "isObject",
        "isFunction",
        "reduce",
        "traverse",
        "stack",
        "out",
        "obj",
        # Built-ins the helpers reference.
        "Array",
        "Object",
    }
)
_GENERATED_NAME_RE = re.compile(r"[lg][0-9]+")


@dataclass(frozen=True, slots=True)
class Environment:
    """Configuration for compiling Mustache templates to JavaScript.

    Attributes:
        loader: Partial storage. ``None`` makes every partial reference
            fail with TemplateNotFoundError.
        indent: Indentation unit of the generated code
        entry_point: Name of the generated render function

    Example:
            >>> from mustache_js import DictLoader, Environment
            >>> env = Environment(loader=DictLoader({"user": "<b>{{name}}</b>"}))
            >>> js = env.to_javascript("{{#users}}{{> user}}{{/users}}")
            >>> js.startswith("(function () {")
            True

    """

    loader: Loader | None = None
    indent: str = "  "
    entry_point: str = "render"

    def __post_init__(self) -> None:
        if not self.indent or self.indent.strip(" \t"):
            raise ValueError(f"indent must be spaces or tabs, got {self.indent!r}")
        if (
            not is_identifier(self.entry_point)
            or self.entry_point in _RESERVED_NAMES
            or _GENERATED_NAME_RE.fullmatch(self.entry_point)
        ):
            raise ValueError(f"entry_point {self.entry_point!r} is not a usable JavaScript name")

    def parse(self, source: str, name: str | None = None) -> Sequence:
        """Parse template source into a node tree."""
        return Parser(source, name=name).parse()

    def get_partial_source(self, name: str) -> tuple[str, str | None]:
        """Fetch raw partial text from the loader.

        Raises:
            TemplateNotFoundError: If there is no loader or it does not
                know ``name``; loader errors propagate unchanged.
        """
        if self.loader is None:
            raise TemplateNotFoundError(f"Template '{name}' not found: no loader configured")
        logger.debug("Loading partial %r", name)
        return self.loader.get_source(name)

    def compile(self, tree: Node) -> str:
        """Compile a node tree to JavaScript source."""
        from mustache_js.compiler import JavascriptGenerator

        return JavascriptGenerator(self).compile(tree)

    def to_javascript(self, source: str, name: str | None = None) -> str:
        """Parse and compile template source in one step."""
        return self.compile(self.parse(source, name=name))


def compile_tree(tree: Node, loader: Loader | None = None) -> str:
    """Compile ``tree`` with a default Environment using ``loader`` for partials."""
    return Environment(loader=loader).compile(tree)


def to_javascript(source: str, loader: Loader | None = None) -> str:
    """Compile template source with a default Environment."""
    return Environment(loader=loader).to_javascript(source)
