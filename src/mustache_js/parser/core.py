"""Mustache parser.

Turns template text into the node tree consumed by the compiler. The
scanner walks the source looking for the current opening delimiter;
text between tags becomes StaticText, tags become nodes, and section
tags open and close nested Sequences.

Standalone lines:
A section, inverted, close, comment, partial or set-delimiter tag that is
the only non-whitespace content of its line removes the whole line,
including its line ending. For a standalone partial the leading whitespace
is kept on the node as ``indentation``.

Set delimiters:
``{{=<% %>=}}`` switches the delimiters for the rest of the template
(sections included, partials excluded: every partial is parsed with the
defaults).
"""

from __future__ import annotations

from mustache_js.environment.exceptions import ErrorCode, TemplateSyntaxError
from mustache_js.nodes import (
    Interpolation,
    Node,
    PartialReference,
    Section,
    Sequence,
    StaticText,
)
from mustache_js.parser.tokens import SIGILS, Tag, TagType

DEFAULT_DELIMITERS = ("{{", "}}")

_INLINE_WHITESPACE = frozenset(" \t")
_TRAILING_WHITESPACE = frozenset(" \t\r")


class _Frame:
    """An open section while its body is being parsed."""

    __slots__ = ("children", "inverted", "lineno", "name", "path")

    def __init__(self, name: str, path: tuple[str, ...], inverted: bool, lineno: int):
        self.name = name
        self.path = path
        self.inverted = inverted
        self.lineno = lineno
        self.children: list[Node] = []


class Parser:
    """Parse one template source.

    Example:
        >>> Parser("Hi {{name}}!").parse()
        Sequence(children=(StaticText(content='Hi '), Interpolation(path=('name',), escape=True), StaticText(content='!')))

    Raises:
        TemplateSyntaxError: On unclosed tags, unbalanced sections, empty
            tag names or malformed set-delimiter tags.

    """

    __slots__ = ("_ctag", "_name", "_otag", "_pos", "_source", "_stack")

    def __init__(
        self,
        source: str,
        name: str | None = None,
        delimiters: tuple[str, str] = DEFAULT_DELIMITERS,
    ):
        self._source = source
        self._name = name
        self._otag, self._ctag = delimiters
        self._pos = 0
        self._stack: list[_Frame] = [_Frame("", (), False, 1)]

    def parse(self) -> Sequence:
        source = self._source
        while self._pos < len(source):
            start = source.find(self._otag, self._pos)
            if start == -1:
                self._add_text(source[self._pos :], self._lineno(self._pos))
                break
            tag = self._scan_tag(start)
            self._emit(tag)

        if len(self._stack) > 1:
            frame = self._stack[-1]
            raise self._error(
                f"Unclosed section '{frame.name}'",
                frame.lineno,
                ErrorCode.UNCLOSED_SECTION,
            )
        return Sequence(tuple(self._stack[0].children), lineno=1)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _lineno(self, offset: int) -> int:
        return self._source.count("\n", 0, offset) + 1

    def _col_offset(self, offset: int) -> int:
        return offset - (self._source.rfind("\n", 0, offset) + 1)

    def _scan_tag(self, start: int) -> Tag:
        source = self._source
        content_start = start + len(self._otag)
        tag_type = SIGILS.get(source[content_start : content_start + 1], TagType.VARIABLE)
        if tag_type is not TagType.VARIABLE:
            content_start += 1

        close = self._ctag
        if tag_type is TagType.TRIPLE:
            close = "}" + self._ctag
        elif tag_type is TagType.DELIMITERS:
            close = "=" + self._ctag

        end = source.find(close, content_start)
        if end == -1:
            raise self._error(
                f"Unclosed tag, expected '{close}'",
                self._lineno(start),
                ErrorCode.UNCLOSED_TAG,
                col_offset=self._col_offset(start),
            )
        return Tag(
            type=tag_type,
            content=source[content_start:end].strip(),
            start=start,
            end=end + len(close),
            lineno=self._lineno(start),
            col_offset=self._col_offset(start),
        )

    def _standalone_bounds(self, tag: Tag) -> tuple[int, int, str] | None:
        """Return (line_start, next_line_start, indentation) for a standalone tag."""
        if not tag.type.can_stand_alone:
            return None
        source = self._source
        line_start = source.rfind("\n", 0, tag.start) + 1
        left = source[line_start : tag.start]
        if not all(char in _INLINE_WHITESPACE for char in left):
            return None
        newline = source.find("\n", tag.end)
        line_end = len(source) if newline == -1 else newline
        right = source[tag.end : line_end]
        if not all(char in _TRAILING_WHITESPACE for char in right):
            return None
        next_line = len(source) if newline == -1 else newline + 1
        return line_start, next_line, left

    def _emit(self, tag: Tag) -> None:
        indentation = ""
        standalone = self._standalone_bounds(tag)
        if standalone is None:
            self._add_text(self._source[self._pos : tag.start], self._lineno(self._pos))
            self._pos = tag.end
        else:
            line_start, next_line, indentation = standalone
            self._add_text(self._source[self._pos : line_start], self._lineno(self._pos))
            self._pos = next_line

        handler = _TAG_HANDLERS[tag.type]
        handler(self, tag, indentation)

    # ------------------------------------------------------------------
    # Tree building
    # ------------------------------------------------------------------

    def _add_text(self, text: str, lineno: int) -> None:
        if not text:
            return
        children = self._stack[-1].children
        if children and isinstance(children[-1], StaticText):
            previous = children[-1]
            children[-1] = StaticText(previous.content + text, lineno=previous.lineno)
        else:
            children.append(StaticText(text, lineno=lineno))

    def _path(self, tag: Tag) -> tuple[str, ...]:
        if not tag.content:
            raise self._error(
                "Empty tag name",
                tag.lineno,
                ErrorCode.EMPTY_TAG,
                col_offset=tag.col_offset,
            )
        if tag.content == ".":
            return ()
        return tuple(part.strip() for part in tag.content.split("."))

    def _on_variable(self, tag: Tag, indentation: str) -> None:
        node = Interpolation(
            self._path(tag),
            escape=tag.type is TagType.VARIABLE,
            lineno=tag.lineno,
        )
        self._stack[-1].children.append(node)

    def _on_section(self, tag: Tag, indentation: str) -> None:
        path = self._path(tag)
        self._stack.append(_Frame(tag.content, path, tag.type is TagType.INVERTED, tag.lineno))

    def _on_close(self, tag: Tag, indentation: str) -> None:
        if len(self._stack) == 1:
            raise self._error(
                f"Closing unopened section '{tag.content}'",
                tag.lineno,
                ErrorCode.UNOPENED_SECTION,
                col_offset=tag.col_offset,
            )
        frame = self._stack.pop()
        if frame.name != tag.content:
            raise self._error(
                f"Unclosed section '{frame.name}' (found '/{tag.content}')",
                tag.lineno,
                ErrorCode.MISMATCHED_SECTION,
                col_offset=tag.col_offset,
            )
        section = Section(
            frame.path,
            Sequence(tuple(frame.children), lineno=frame.lineno),
            inverted=frame.inverted,
            lineno=frame.lineno,
        )
        self._stack[-1].children.append(section)

    def _on_comment(self, tag: Tag, indentation: str) -> None:
        pass

    def _on_partial(self, tag: Tag, indentation: str) -> None:
        if not tag.content:
            raise self._error(
                "Empty partial name",
                tag.lineno,
                ErrorCode.EMPTY_TAG,
                col_offset=tag.col_offset,
            )
        node = PartialReference(tag.content, indentation, lineno=tag.lineno)
        self._stack[-1].children.append(node)

    def _on_delimiters(self, tag: Tag, indentation: str) -> None:
        parts = tag.content.split()
        if len(parts) != 2 or any("=" in part for part in parts):
            raise self._error(
                f"Invalid set-delimiter tag '{tag.content}'",
                tag.lineno,
                ErrorCode.INVALID_DELIMITERS,
                col_offset=tag.col_offset,
            )
        self._otag, self._ctag = parts

    def _error(
        self,
        message: str,
        lineno: int,
        code: ErrorCode,
        col_offset: int | None = None,
    ) -> TemplateSyntaxError:
        return TemplateSyntaxError(
            message,
            lineno=lineno,
            name=self._name,
            source=self._source,
            col_offset=col_offset,
            code=code,
        )


_TAG_HANDLERS = {
    TagType.VARIABLE: Parser._on_variable,
    TagType.UNESCAPED: Parser._on_variable,
    TagType.TRIPLE: Parser._on_variable,
    TagType.SECTION: Parser._on_section,
    TagType.INVERTED: Parser._on_section,
    TagType.CLOSE: Parser._on_close,
    TagType.COMMENT: Parser._on_comment,
    TagType.PARTIAL: Parser._on_partial,
    TagType.DELIMITERS: Parser._on_delimiters,
}


def parse(source: str, name: str | None = None) -> Sequence:
    """Parse ``source`` into a Sequence node."""
    return Parser(source, name=name).parse()
