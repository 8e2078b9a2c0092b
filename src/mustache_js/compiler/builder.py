"""Indentation-aware builder for generated JavaScript.

Statements are appended line by line at the current indentation level;
nesting is expressed with context managers instead of splicing
pre-indented text blocks together, so a closure compiled in isolation can
be inserted at any depth.

Example:
    >>> b = CodeBuilder()
    >>> with b.block("if (x) {"):
    ...     b.line("out.push(x);")
    >>> print(b.getvalue())
    if (x) {
      out.push(x);
    }
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager


class CodeBuilder:
    """Accumulates lines of source text with explicit indentation.

    Attributes:
        _lines: Emitted lines, already indented
        _indentation: Current nesting depth
        _unit: Whitespace for one indentation level
    """

    __slots__ = ("_indentation", "_lines", "_unit")

    def __init__(self, unit: str = "  ", indentation: int = 0):
        self._lines: list[str] = []
        self._indentation = indentation
        self._unit = unit

    def child(self) -> CodeBuilder:
        """Create an empty builder at the same depth, sharing the unit."""
        return CodeBuilder(self._unit, self._indentation)

    def line(self, text: str = "") -> None:
        """Emit one line at the current indentation (blank lines stay empty)."""
        if text:
            self._lines.append(self._unit * self._indentation + text)
        else:
            self._lines.append("")

    def source(self, text: str) -> None:
        """Emit a snippet written with two-space indentation.

        Each line is re-indented relative to the current depth using this
        builder's unit.
        """
        for raw in text.strip("\n").splitlines():
            stripped = raw.lstrip(" ")
            level = (len(raw) - len(stripped)) // 2
            if stripped:
                self._lines.append(self._unit * (self._indentation + level) + stripped)
            else:
                self._lines.append("")

    def verbatim(self, text: str) -> None:
        """Append already-indented lines unchanged."""
        self._lines.extend(text.splitlines())

    def extend(self, other: CodeBuilder) -> None:
        """Append the lines of a builder created with ``child()``."""
        self._lines.extend(other._lines)

    @property
    def depth(self) -> int:
        return self._indentation

    def indent(self) -> None:
        self._indentation += 1

    def outdent(self, step: int = 1) -> None:
        self._indentation -= step

    @contextmanager
    def indented(self) -> Iterator[None]:
        self.indent()
        try:
            yield
        finally:
            self.outdent()

    @contextmanager
    def block(self, header: str, footer: str = "}") -> Iterator[None]:
        """Emit ``header``, an indented body and ``footer``."""
        self.line(header)
        with self.indented():
            yield
        self.line(footer)

    def declare(self, names: Iterable[str]) -> None:
        """Emit one batched ``var`` declaration, nothing when ``names`` is empty."""
        names = list(names)
        if names:
            self.line(f"var {', '.join(names)};")

    def __len__(self) -> int:
        return len(self._lines)

    def getvalue(self) -> str:
        return "\n".join(self._lines)
