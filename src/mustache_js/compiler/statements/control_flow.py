"""Section compilation.

Provides the mixin for sections ({{#name}}) and inverted sections
({{^name}}). The section body is compiled once into a local closure
``function lN(stack, out)`` declared just before the section's lookup,
and every branch calls it.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mustache_js.compiler.lookup import SECTION_DISPATCH, TOP_OF_STACK, ValueKind

if TYPE_CHECKING:
    from mustache_js.compiler.builder import CodeBuilder
    from mustache_js.compiler.symbols import SymbolAllocator
    from mustache_js.nodes import Node, Section


class ControlFlowMixin:
    """Mixin for compiling sections."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _out: CodeBuilder
        _symbols: SymbolAllocator

        def _compile_closure(self, name: str, node: Node) -> CodeBuilder: ...

        def _compile_lookup(self, path: tuple[str, ...]) -> str: ...

        def _compile_test(self, kind: ValueKind, var: str) -> str | None: ...

    def _compile_section(self, node: Section) -> None:
        """Compile {{#name}}...{{/name}}.

        Non-empty values are dispatched on their kind:

            CALLABLE  out.push(v.call(top, function () { ...render body... }))
            LIST      push each element, render body, pop
            MAP       push the value, render body, pop
            SCALAR    render body with the context unchanged
        """
        if node.inverted:
            self._compile_inverted_section(node)
            return

        out = self._out
        f = self._symbols.fresh_local()
        out.extend(self._compile_closure(f, node.body))

        v = self._symbols.fresh_local()
        out.line(f"{v} = {self._compile_lookup(node.path)};")
        with out.block(f"if (!{self._compile_test(ValueKind.EMPTY, v)}) {{"):
            for index, kind in enumerate(SECTION_DISPATCH):
                test = self._compile_test(kind, v)
                if index == 0:
                    out.line(f"if ({test}) {{")
                elif test is None:
                    out.line("} else {")
                else:
                    out.line(f"}} else if ({test}) {{")
                with out.indented():
                    self._compile_section_branch(kind, v, f)
            out.line("}")

    def _compile_section_branch(self, kind: ValueKind, v: str, f: str) -> None:
        out = self._out
        if kind is ValueKind.CALLABLE:
            with out.block(
                f"out.push({v}.call({TOP_OF_STACK}, function () {{",
                footer="}));",
            ):
                out.line("var out = [];")
                out.line(f"{f}(stack, out);")
                out.line('return out.join("");')
        elif kind is ValueKind.LIST:
            i = self._symbols.fresh_local()
            with out.block(f"for ({i} = 0; {i} < {v}.length; {i} += 1) {{"):
                out.line(f"stack.push({v}[{i}]);")
                out.line(f"{f}(stack, out);")
                out.line("stack.pop();")
        elif kind is ValueKind.MAP:
            out.line(f"stack.push({v});")
            out.line(f"{f}(stack, out);")
            out.line("stack.pop();")
        else:
            out.line(f"{f}(stack, out);")

    def _compile_inverted_section(self, node: Section) -> None:
        """Compile {{^name}}...{{/name}}: render the body only when the value is empty."""
        out = self._out
        f = self._symbols.fresh_local()
        out.extend(self._compile_closure(f, node.body))

        v = self._symbols.fresh_local()
        out.line(f"{v} = {self._compile_lookup(node.path)};")
        with out.block(f"if ({self._compile_test(ValueKind.EMPTY, v)}) {{"):
            out.line(f"{f}(stack, out);")
