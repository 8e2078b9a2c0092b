"""Tests for the indentation-aware code builder."""

from mustache_js.compiler import CodeBuilder


def test_block_indents_body():
    builder = CodeBuilder()
    with builder.block("if (x) {"):
        builder.line("y();")
        with builder.block("while (z) {"):
            builder.line("z();")
    assert builder.getvalue() == "if (x) {\n  y();\n  while (z) {\n    z();\n  }\n}"


def test_custom_footer():
    builder = CodeBuilder()
    with builder.block("f(function () {", footer="});"):
        builder.line("g();")
    assert builder.getvalue().splitlines()[-1] == "});"


def test_declare_batches_names():
    builder = CodeBuilder()
    builder.declare(["a", "b", "c"])
    builder.declare([])
    assert builder.getvalue() == "var a, b, c;"


def test_child_starts_at_parent_depth():
    builder = CodeBuilder(unit="\t")
    builder.indent()
    child = builder.child()
    child.line("x;")
    builder.extend(child)
    assert builder.getvalue() == "\tx;"
    assert child.depth == 1


def test_verbatim_keeps_indentation():
    builder = CodeBuilder()
    builder.indent()
    builder.verbatim("  a\n    b")
    assert builder.getvalue() == "  a\n    b"


def test_blank_lines_have_no_trailing_whitespace():
    builder = CodeBuilder()
    builder.indent()
    builder.line()
    assert builder.getvalue() == ""
