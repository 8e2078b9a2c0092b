"""Basic statement compilation.

Provides the mixin for sequences, static text and variable interpolation.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mustache_js.compiler.lookup import TOP_OF_STACK, ValueKind
from mustache_js.utils.javascript import js_string

if TYPE_CHECKING:
    from mustache_js.compiler.builder import CodeBuilder
    from mustache_js.compiler.helpers import HelperRegistry
    from mustache_js.compiler.symbols import SymbolAllocator
    from mustache_js.nodes import Interpolation, Node, Sequence, StaticText


class BasicStatementMixin:
    """Mixin for compiling output statements."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _out: CodeBuilder
        _helpers: HelperRegistry
        _symbols: SymbolAllocator

        def _compile_node(self, node: Node) -> None: ...

        def _compile_lookup(self, path: tuple[str, ...]) -> str: ...

        def _compile_test(self, kind: ValueKind, var: str) -> str | None: ...

    def _compile_sequence(self, node: Sequence) -> None:
        for child in node.children:
            self._compile_node(child)

    def _compile_static_text(self, node: StaticText) -> None:
        """out.push("literal text");"""
        if not node.content:
            return
        self._out.line(f"out.push({js_string(node.content)});")

    def _compile_interpolation(self, node: Interpolation) -> None:
        """Compile {{ name }} / {{{ name }}}.

        A callable value is invoked once with the current context as its
        receiver and replaced by its result. Empty values output nothing.

            l1 = fetch(stack, "name");
            if (isFunction(l1)) {
              l1 = l1.call(stack[stack.length - 1]);
            }
            if (!isEmpty(l1)) {
              out.push(escape(l1));
            }
        """
        out = self._out
        v = self._symbols.fresh_local()

        out.line(f"{v} = {self._compile_lookup(node.path)};")
        with out.block(f"if ({self._compile_test(ValueKind.CALLABLE, v)}) {{"):
            out.line(f"{v} = {v}.call({TOP_OF_STACK});")

        value = v
        if node.escape:
            self._helpers.require("escape")
            value = f"escape({v})"
        with out.block(f"if (!{self._compile_test(ValueKind.EMPTY, v)}) {{"):
            out.line(f"out.push({value});")
