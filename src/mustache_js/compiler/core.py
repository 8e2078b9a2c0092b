"""JavaScript generator core: the JavascriptGenerator class.

The generator walks a Mustache node tree and emits the source of a
self-contained JavaScript function rendering it. Uses a mixin-based design
like the statement handlers it is assembled from.

Design Principles:
1. **One instance per compile**: symbol counter, helper set and partial
   table live on the instance and are never shared
2. **StringBuilder**: output via ``out.push()``, joined once at the end
3. **Closures per scope**: each section body and partial is a function
   ``(stack, out)`` declaring its own locals in one ``var`` statement
4. **O(1) dispatch**: dict-based node type -> handler lookup

Compilation recurses once per nesting level (section inside section),
so Python's recursion limit caps nesting at roughly a hundred levels.
Deeper trees raise RecursionError.

Generated module:

    ```javascript
    (function () {
      var fetch, escape, isEmpty, ..., render, g1;
      fetch = function fetch(stack, key) { ... };
      ...
      g1 = function g1(stack, out) { ...partial body... };
      render = function render(obj) {
        var stack, out, l1;
        stack = [obj];
        out = [];
        ...
        return out.join("");
      };
      return render;
    })()
    ```

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from mustache_js.compiler.builder import CodeBuilder
from mustache_js.compiler.helpers import HelperRegistry
from mustache_js.compiler.lookup import LookupCompilationMixin
from mustache_js.compiler.partials import PartialTable
from mustache_js.compiler.statements import StatementCompilationMixin
from mustache_js.compiler.symbols import SymbolAllocator
from mustache_js.environment.exceptions import CompilerError, ErrorCode

if TYPE_CHECKING:
    from mustache_js.environment import Environment
    from mustache_js.nodes import Node

logger = logging.getLogger(__name__)


class JavascriptGenerator(
    LookupCompilationMixin,
    StatementCompilationMixin,
):
    """Compile a Mustache node tree to JavaScript source.

    A generator compiles exactly one tree; create a new one per compile.

    Attributes:
        _env: Parent Environment (partial loading, parsing, output options)
        _symbols: Identifier allocator and scope stack
        _helpers: Runtime helpers required so far
        _partials: Partials referenced so far
        _out: Builder receiving statements for the closure being compiled

    Node Dispatch:
        Uses O(1) dict lookup for node type -> handler:
            ```python
            dispatch = {
                "Sequence": self._compile_sequence,
                "StaticText": self._compile_static_text,
                ...
            }
            handler = dispatch[type(node).__name__]
            ```

    Example:
            >>> from mustache_js import Environment
            >>> from mustache_js.compiler import JavascriptGenerator
            >>> env = Environment()
            >>> source = JavascriptGenerator(env).compile(env.parse("Hi {{name}}"))
            >>> source.splitlines()[0]
            '(function () {'

    """

    __slots__ = (
        "_compiled",
        "_env",
        "_helpers",
        "_node_dispatch",
        "_out",
        "_partials",
        "_symbols",
    )

    def __init__(self, env: Environment):
        self._env = env
        self._symbols = SymbolAllocator()
        self._helpers = HelperRegistry()
        self._partials = PartialTable()
        self._out: CodeBuilder | None = None
        self._compiled = False

    @property
    def helpers(self) -> HelperRegistry:
        return self._helpers

    @property
    def partials(self) -> PartialTable:
        return self._partials

    def compile(self, node: Node) -> str:
        """Compile ``node`` to the source of a JavaScript render function.

        Returns:
            One JavaScript expression evaluating to ``function render(obj)``

        Raises:
            CompilerError: If the tree contains an unknown node type
            TemplateNotFoundError: If a partial cannot be loaded
            TemplateSyntaxError: If a partial's source does not parse
        """
        if self._compiled:
            raise CompilerError(
                "JavascriptGenerator instances compile a single tree; create a new one",
                code=ErrorCode.SCOPE_ERROR,
            )
        self._compiled = True

        logger.debug("Compiling %s", type(node).__name__)
        unit = self._env.indent
        entry_point = self._env.entry_point

        with self._symbols.scope() as module_scope:
            self._symbols.named_local(entry_point)
            render = self._make_render_function(entry_point, node)

        helpers = CodeBuilder(unit, indentation=1)
        helper_names = self._helpers.emit(helpers)

        module = CodeBuilder(unit)
        module.line("(function () {")
        with module.indented():
            module.declare([*helper_names, *module_scope])
            module.extend(helpers)
            for closure in self._partials.closures():
                module.verbatim(closure)
            module.extend(render)
            module.line(f"return {entry_point};")
        module.line("})()")

        logger.debug(
            "Compiled %d partial(s), %d helper(s)",
            len(self._partials),
            len(helper_names),
        )
        return module.getvalue()

    def _make_function(
        self,
        name: str,
        params: str,
        emit_body: Callable[[], None],
        depth: int,
    ) -> CodeBuilder:
        """Emit ``name = function name(params) {...};`` in a fresh scope.

        The body is compiled first so the scope's declarations are known
        when the ``var`` statement is written above it.
        """
        function = CodeBuilder(self._env.indent, indentation=depth)
        body = function.child()
        body.indent()

        outer = self._out
        self._out = body
        try:
            with self._symbols.scope() as declarations:
                emit_body()
        finally:
            self._out = outer

        function.line(f"{name} = function {name}({params}) {{")
        with function.indented():
            function.declare(declarations)
        function.extend(body)
        function.line("};")
        return function

    def _make_render_function(self, name: str, node: Node) -> CodeBuilder:
        """Generate the entry point: render(obj) -> string."""

        def emit_body() -> None:
            self._symbols.named_local("stack")
            self._symbols.named_local("out")
            self._out.line("stack = [obj];")
            self._out.line("out = [];")
            self._compile_node(node)
            self._out.line('return out.join("");')

        return self._make_function(name, "obj", emit_body, depth=1)

    def _compile_closure(self, name: str, node: Node, depth: int | None = None) -> CodeBuilder:
        """Generate a body closure: name(stack, out), rendering ``node`` into ``out``.

        Section bodies are nested at the current depth; partials pass
        ``depth=1`` to live at module level.
        """
        if depth is None:
            depth = self._out.depth if self._out is not None else 1
        return self._make_function(
            name,
            "stack, out",
            lambda: self._compile_node(node),
            depth=depth,
        )

    def _compile_node(self, node: Node) -> None:
        """Compile a single node into the current closure.

        Complexity: O(1) type dispatch using class name lookup.
        """
        handler = self._get_node_dispatch().get(type(node).__name__)
        if handler is None:
            raise CompilerError(f"Unhandled node type: {type(node).__name__}", node=node)
        handler(node)

    def _get_node_dispatch(self) -> dict[str, Callable]:
        """Get node type dispatch table (cached on first call)."""
        if not hasattr(self, "_node_dispatch"):
            self._node_dispatch = {
                "Sequence": self._compile_sequence,
                "StaticText": self._compile_static_text,
                "Interpolation": self._compile_interpolation,
                "Section": self._compile_section,
                "PartialReference": self._compile_partial,
            }
        return self._node_dispatch
