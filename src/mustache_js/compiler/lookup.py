"""Lookup expression compilation.

A Mustache name resolves against the runtime context stack:

    {{.}}      stack[stack.length - 1]
    {{a}}      fetch(stack, "a")
    {{a.b.c}}  reduce.call(["b", "c"], traverse, fetch(stack, "a"))

Only the first segment searches the stack; later segments walk properties
of the value found, so a missing intermediate key yields undefined instead
of throwing.

The value a lookup produces is classified at render time into one of the
``ValueKind`` cases. Sections test the kinds in ``SECTION_DISPATCH``
order after ruling out EMPTY; the first match decides how the body is
rendered.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

from mustache_js.utils.javascript import js_array, js_string

if TYPE_CHECKING:
    from mustache_js.compiler.helpers import HelperRegistry

TOP_OF_STACK = "stack[stack.length - 1]"


class ValueKind(Enum):
    """Render-time classification of a looked-up value.

    ``test`` is the JavaScript predicate template and ``helper`` the runtime
    helper it calls; SCALAR is the fall-through case and has neither.
    """

    EMPTY = ("isEmpty({v})", "isEmpty")
    CALLABLE = ("isFunction({v})", "isFunction")
    LIST = ("isArray({v})", "isArray")
    MAP = ("isObject({v})", "isObject")
    SCALAR = (None, None)

    @property
    def test(self) -> str | None:
        return self.value[0]

    @property
    def helper(self) -> str | None:
        return self.value[1]


# Order matters: a function is never treated as a map, an array never as an
# object.
SECTION_DISPATCH: tuple[ValueKind, ...] = (
    ValueKind.CALLABLE,
    ValueKind.LIST,
    ValueKind.MAP,
    ValueKind.SCALAR,
)


class LookupCompilationMixin:
    """Mixin compiling lookup paths to JavaScript expressions."""

    if TYPE_CHECKING:
        _helpers: HelperRegistry

    def _compile_lookup(self, path: Sequence[str]) -> str:
        if not path:
            return TOP_OF_STACK

        first, *rest = path
        self._helpers.require("fetch")
        start = f"fetch(stack, {js_string(first)})"
        if not rest:
            return start

        self._helpers.require("reduce")
        return f"reduce.call({js_array(rest)}, traverse, {start})"

    def _compile_test(self, kind: ValueKind, var: str) -> str | None:
        """Return the predicate for ``kind`` applied to ``var``, registering its helper."""
        if kind.test is None:
            return None
        self._helpers.require(kind.helper)
        return kind.test.format(v=var)
