"""Property-based rendering tests, run in V8 through mini-racer."""

from __future__ import annotations

import json

import pytest
from hypothesis import given, settings

from mustache_js import Environment

from .strategies import any_text, plain_text

py_mini_racer = pytest.importorskip("py_mini_racer")

_ctx = py_mini_racer.MiniRacer()
_env = Environment()
_interpolate = _env.to_javascript("{{v}}")
_raw = _env.to_javascript("{{{v}}}")


def _html_escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


class TestRenderingProperties:
    @given(text=plain_text)
    @settings(max_examples=100, deadline=None)
    def test_static_text_renders_verbatim(self, text: str) -> None:
        source = _env.to_javascript(text)
        assert _ctx.eval(f"({source})({{}})") == text

    @given(value=any_text)
    @settings(max_examples=100, deadline=None)
    def test_interpolation_escapes_html(self, value: str) -> None:
        data = json.dumps({"v": value})
        assert _ctx.eval(f"({_interpolate})({data})") == _html_escape(value)
        assert _ctx.eval(f"({_raw})({data})") == value
