"""Pytest configuration and fixtures for mustache_js tests."""

import json

import pytest

from mustache_js import DictLoader, Environment


@pytest.fixture
def env():
    """Create a basic Environment without partials."""
    return Environment()


@pytest.fixture
def env_with_loader():
    """Create an Environment with a DictLoader and test partials."""
    loader = DictLoader(
        {
            "user": "[{{name}}]",
            "static": "static text",
            "node": "{{name}}{{#children}}({{> node}}){{/children}}",
            "ping": "ping {{#next}}{{> pong}}{{/next}}",
            "pong": "pong {{#next}}{{> ping}}{{/next}}",
            "lines": "1\n{{v}}\n2\n",
        }
    )
    return Environment(loader=loader)


@pytest.fixture
def js_context():
    """A V8 context for executing generated code (skips without mini-racer)."""
    mini_racer = pytest.importorskip("py_mini_racer")
    return mini_racer.MiniRacer()


@pytest.fixture
def render(js_context):
    """Render compiled JavaScript against data.

    ``data`` may be a Python value (serialized as JSON) or a string holding
    a JavaScript expression, for contexts that contain functions.
    """

    def _render(source: str, data=None) -> str:
        if not isinstance(data, str):
            data = json.dumps(data if data is not None else {})
        return js_context.eval(f"({source})({data})")

    return _render
