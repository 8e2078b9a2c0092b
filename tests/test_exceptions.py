"""Test error codes and error formatting."""

import pytest

from mustache_js import (
    CompilerError,
    ErrorCode,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from mustache_js.environment import build_source_snippet


class TestErrorCode:
    def test_codes_are_unique(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.UNCLOSED_TAG, "parser"),
            (ErrorCode.UNKNOWN_NODE, "compiler"),
            (ErrorCode.TEMPLATE_NOT_FOUND, "template"),
        ],
    )
    def test_category(self, code, category):
        assert code.category == category

    def test_every_code_has_a_known_category(self):
        assert all(code.category != "unknown" for code in ErrorCode)


class TestHierarchy:
    @pytest.mark.parametrize("cls", [TemplateNotFoundError, TemplateSyntaxError, CompilerError])
    def test_subclasses_template_error(self, cls):
        assert issubclass(cls, TemplateError)

    def test_default_codes(self):
        assert TemplateNotFoundError("x").code is ErrorCode.TEMPLATE_NOT_FOUND
        assert TemplateSyntaxError("x").code is ErrorCode.SYNTAX_ERROR
        assert CompilerError("x").code is ErrorCode.UNKNOWN_NODE

    def test_code_override_is_per_instance(self):
        error = CompilerError("x", code=ErrorCode.SCOPE_ERROR)
        assert error.code is ErrorCode.SCOPE_ERROR
        assert CompilerError.code is ErrorCode.UNKNOWN_NODE


class TestFormatting:
    def test_syntax_error_message(self):
        error = TemplateSyntaxError(
            "Unclosed tag, expected '}}'",
            lineno=1,
            source="{{x",
            col_offset=0,
            code=ErrorCode.UNCLOSED_TAG,
        )
        assert str(error) == (
            "Syntax Error: Unclosed tag, expected '}}'\n"
            "  --> <template>:1\n"
            "   |\n"
            ">  1 | {{x\n"
            "   | ^\n"
            "   |"
        )

    def test_syntax_error_without_source(self):
        error = TemplateSyntaxError("bad", name="a.mustache")
        assert str(error) == "Syntax Error: bad\n  --> a.mustache"

    def test_syntax_error_compact(self):
        error = TemplateSyntaxError(
            "Unclosed section 'x'",
            lineno=2,
            name="list.mustache",
            source="a\n{{#x}}\n",
            code=ErrorCode.UNCLOSED_SECTION,
        )
        compact = error.format_compact()
        assert compact.startswith("M-PAR-002: Unclosed section 'x'\n  --> list.mustache:2")
        assert compact.splitlines()[-2] == ">  2 | {{#x}}"
        assert "http" not in compact

    def test_compact_prefixes_code_once(self):
        compact = TemplateNotFoundError("Template 'x' not found").format_compact()
        assert compact == "M-TPL-001: Template 'x' not found"

    def test_compact_keeps_existing_code(self):
        error = CompilerError("M-CMP-002: not in closure", code=ErrorCode.SCOPE_ERROR)
        assert error.format_compact() == "M-CMP-002: not in closure"

    def test_compiler_error_keeps_node(self):
        node = object()
        error = CompilerError("Unhandled node type: object", node=node)
        assert error.node is node
        assert str(error) == "Unhandled node type: object"


class TestSourceSnippet:
    def test_context_lines(self):
        snippet = build_source_snippet("a\nb\nc\nd\ne", 3, context_lines=1)
        assert snippet.lines == ((2, "b"), (3, "c"), (4, "d"))
        assert snippet.format().splitlines()[2] == ">  3 | c"

    def test_clamped_at_edges(self):
        snippet = build_source_snippet("a\nb", 1, context_lines=5)
        assert snippet.lines == ((1, "a"), (2, "b"))
