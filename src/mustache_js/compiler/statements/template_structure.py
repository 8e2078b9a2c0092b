"""Partial compilation.

Provides the mixin for partial references ({{> name}}). Each distinct
partial name is loaded, parsed and compiled once per compilation into a
module-level closure; every reference emits the same call.

    g1(stack, out);

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from mustache_js.compiler.partials import PartialState

if TYPE_CHECKING:
    from mustache_js.compiler.builder import CodeBuilder
    from mustache_js.compiler.partials import PartialTable
    from mustache_js.compiler.symbols import SymbolAllocator
    from mustache_js.environment import Environment
    from mustache_js.nodes import Node, PartialReference

logger = logging.getLogger(__name__)

# Start of every line except an empty remainder after a final newline.
_LINE_START_RE = re.compile(r"^(?!\Z)", re.MULTILINE)


def indent_lines(source: str, indentation: str) -> str:
    """Prefix every line of ``source`` with ``indentation``.

    Applied to partial text before parsing, so the indentation becomes part
    of the partial's static text and never of interpolated values.

    Example:
        >>> indent_lines("a\\nb\\n", "  ")
        '  a\\n  b\\n'
    """
    if not indentation:
        return source
    return _LINE_START_RE.sub(lambda _: indentation, source)


class TemplateStructureMixin:
    """Mixin for compiling partial references."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _env: Environment
        _out: CodeBuilder
        _partials: PartialTable
        _symbols: SymbolAllocator

        def _compile_closure(
            self, name: str, node: Node, depth: int | None = None
        ) -> CodeBuilder: ...

    def _compile_partial(self, node: PartialReference) -> None:
        """Compile {{> name}}.

        The table entry is created before the partial body is compiled, so
        a partial that includes itself (directly or through others) finds
        its own entry and emits a call instead of recompiling.
        """
        partials = self._partials
        partials.record_reference(node.name)

        state = partials.state(node.name)
        if state is PartialState.PENDING:
            self._resolve_partial(node)
        else:
            logger.debug("Partial %r already %s, emitting call", node.name, state.value)

        self._out.line(f"{partials.identifier(node.name)}(stack, out);")

    def _resolve_partial(self, node: PartialReference) -> None:
        source, filename = self._env.get_partial_source(node.name)

        identifier = self._symbols.fresh_global()
        self._partials.begin(node.name, identifier, filename=filename)
        logger.debug("Compiling partial %r as %s", node.name, identifier)

        tree = self._env.parse(indent_lines(source, node.indentation), name=filename or node.name)
        closure = self._compile_closure(identifier, tree, depth=1)
        self._partials.finish(node.name, closure.getvalue())
