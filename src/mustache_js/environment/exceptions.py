"""Exceptions for the mustache_js compiler.

Exception Hierarchy:
TemplateError (base)
├── TemplateNotFoundError     # Partial not found by loader
├── TemplateSyntaxError       # Parse-time syntax error
└── CompilerError             # Code generation failure (unknown node, scope misuse)

All of these are raised at compile time. The generated JavaScript never
raises for missing data; lookups of unknown keys render as empty.

Example:
    ```
    M-PAR-002: Unclosed section 'items'
      --> list.mustache:3
       |
      3 | {{#items}}
       |
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes.

    Format: M-{CATEGORY}-{NUMBER}
    Categories: PAR (parser), CMP (compiler), TPL (template loading)
    """

    # Parser errors (M-PAR-xxx)
    UNCLOSED_TAG = "M-PAR-001"
    UNCLOSED_SECTION = "M-PAR-002"
    UNOPENED_SECTION = "M-PAR-003"
    MISMATCHED_SECTION = "M-PAR-004"
    INVALID_DELIMITERS = "M-PAR-005"
    EMPTY_TAG = "M-PAR-006"

    # Compiler errors (M-CMP-xxx)
    UNKNOWN_NODE = "M-CMP-001"
    SCOPE_ERROR = "M-CMP-002"

    # Template loading errors (M-TPL-xxx)
    TEMPLATE_NOT_FOUND = "M-TPL-001"
    SYNTAX_ERROR = "M-TPL-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'parser', 'compiler', 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "PAR": "parser",
            "CMP": "compiler",
            "TPL": "template",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source context around an error line.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet with line numbers, marking the error line."""
        parts: list[str] = ["   |"]
        for lineno, content in self.lines:
            marker = ">" if lineno == self.error_line else " "
            parts.append(f"{marker}{lineno:>3} | {content}")
        if self.column is not None:
            parts.append(f"   | {' ' * self.column}^")
        parts.append("   |")
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from template source.

    Args:
        source: Full template source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional column offset for caret pointer.
    """
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class TemplateError(Exception):
    """Base exception for all mustache_js errors.

        >>> try:
        ...     env.to_javascript(source)
        ... except TemplateError as e:
        ...     log.error("Template error: %s", e)

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-line summary prefixed with its error code."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        return header


class TemplateNotFoundError(TemplateError):
    """Partial not found by the configured loader.

    Raised by loaders and propagated unchanged through compilation; partial
    resolution has no fallback.

    Example:
            >>> env.to_javascript("{{> missing}}")
        TemplateNotFoundError: Template 'missing' not found

    """

    code: ErrorCode | None = ErrorCode.TEMPLATE_NOT_FOUND


class TemplateSyntaxError(TemplateError):
    """Parse-time syntax error in template source.

    When ``source`` and ``lineno`` are provided, the error message includes
    a source snippet with the offending line. If ``col_offset`` is also
    given, a caret (``^``) points at the exact column.
    """

    code: ErrorCode | None = ErrorCode.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        name: str | None = None,
        source: str | None = None,
        col_offset: int | None = None,
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.name = name
        self.source = source
        self.col_offset = col_offset
        if code is not None:
            self.code = code
        super().__init__(self._format_message())

    @property
    def location(self) -> str:
        location = self.name or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
        return location

    def _format_message(self) -> str:
        header = f"Syntax Error: {self.message}\n  --> {self.location}"

        if self.source and self.lineno:
            snippet = build_source_snippet(
                self.source, self.lineno, context_lines=0, column=self.col_offset
            )
            if snippet.lines:
                return f"{header}\n{snippet.format()}"

        return header

    def format_compact(self) -> str:
        """Format syntax error as structured terminal diagnostic."""
        parts: list[str] = []

        code_prefix = f"{self.code.value}: " if self.code else ""
        parts.append(f"{code_prefix}{self.message}")
        parts.append(f"  --> {self.location}")

        if self.source and self.lineno:
            snippet = build_source_snippet(self.source, self.lineno, context_lines=0)
            if snippet.lines:
                parts.append(snippet.format())

        return "\n".join(parts)


class CompilerError(TemplateError):
    """Code generation failure.

    Raised when the input tree contains a node kind the generator has no
    handler for (a parser/compiler version mismatch) or when the generator
    misuses its scope stack. Both are programming errors, not user input
    errors, and never produce partial output.

    Attributes:
        node: The offending node, when there is one
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_NODE

    def __init__(
        self,
        message: str,
        *,
        node: object | None = None,
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.node = node
        if code is not None:
            self.code = code
        super().__init__(message)
