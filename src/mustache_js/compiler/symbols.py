"""Identifier allocation for generated closures.

Every generated closure (the render function, each section body and each
partial) owns one scope: the list of variable names it declares in a
single ``var`` statement. Scopes form a stack mirroring closure nesting.

Numbering is global to one allocator, so ``l3`` allocated in one section
body can never collide with a name in a sibling or nested closure, and
names are never reused.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from mustache_js.environment.exceptions import CompilerError, ErrorCode


class SymbolAllocator:
    """Allocates unique identifiers within a stack of scopes.

    ``fresh_local()`` declares in the innermost scope, ``fresh_global()``
    in the outermost one (the module wrapper), which is where partial
    closures live so they can be called from any depth.

    Example:
        >>> symbols = SymbolAllocator()
        >>> symbols.enter_scope()
        >>> symbols.fresh_local(), symbols.fresh_local()
        ('l1', 'l2')
        >>> symbols.leave_scope()
        ['l1', 'l2']

    """

    __slots__ = ("_counter", "_scopes")

    def __init__(self) -> None:
        self._counter = 0
        self._scopes: list[list[str]] = []

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def enter_scope(self) -> None:
        self._scopes.append([])

    def leave_scope(self) -> list[str]:
        """Pop the innermost scope and return its declarations in order."""
        if not self._scopes:
            raise CompilerError("leave_scope() without enter_scope()", code=ErrorCode.SCOPE_ERROR)
        return self._scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[list[str]]:
        """Enter a scope for the duration of the block.

        The yielded list is the live declaration list; it is complete once
        the block exits.
        """
        self.enter_scope()
        declarations = self._scopes[-1]
        try:
            yield declarations
        finally:
            self._scopes.pop()

    def _current(self) -> list[str]:
        if not self._scopes:
            raise CompilerError("not in closure", code=ErrorCode.SCOPE_ERROR)
        return self._scopes[-1]

    def _next(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}{self._counter}"

    def fresh_local(self) -> str:
        """Allocate a new variable in the innermost scope."""
        scope = self._current()
        name = self._next("l")
        scope.append(name)
        return name

    def fresh_global(self) -> str:
        """Allocate a new variable in the outermost scope."""
        if not self._scopes:
            raise CompilerError("not in closure", code=ErrorCode.SCOPE_ERROR)
        name = self._next("g")
        self._scopes[0].append(name)
        return name

    def named_local(self, tag: str) -> str:
        """Declare a caller-chosen name (``out``, ``stack``, ...) in the innermost scope."""
        scope = self._current()
        if tag not in scope:
            scope.append(tag)
        return tag
