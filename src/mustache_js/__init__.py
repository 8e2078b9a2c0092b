"""mustache_js: compile Mustache templates to standalone JavaScript.

Templates are compiled ahead of time, server side, into a dependency-free
JavaScript function that renders the template in any JavaScript runtime
(a browser, a worker, node) without a Mustache implementation present.

Quickstart:
    >>> from mustache_js import Environment
    >>> env = Environment()
    >>> js = env.to_javascript("Hello, {{name}}!")
    >>> # In the browser: var render = <js>; render({name: "World"})

Partials:
    >>> from mustache_js import Environment, FileSystemLoader
    >>> env = Environment(loader=FileSystemLoader("templates/"))
    >>> js = env.to_javascript("{{#users}}{{> user}}{{/users}}")

Architecture:
Template Source → Parser → Node tree → JavascriptGenerator → JavaScript source

Pipeline stages:
1. **Parser**: Builds an immutable node tree from the template text
2. **Generator**: Walks the tree, emitting one closure per scope
3. **Helpers**: Only the runtime helpers the emitted code calls are included
4. **Partials**: Each partial is compiled once, recursion included

Rendering semantics of the generated code: missing names render as
empty, callables are invoked once (lambdas), arrays iterate, objects push
a context, other truthy values gate their section.

"""

from mustache_js.compiler import JavascriptGenerator
from mustache_js.environment import (
    ChoiceLoader,
    CompilerError,
    DictLoader,
    Environment,
    ErrorCode,
    FileSystemLoader,
    FunctionLoader,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
    compile_tree,
    to_javascript,
)
from mustache_js.nodes import (
    Interpolation,
    Node,
    PartialReference,
    Section,
    Sequence,
    StaticText,
)
from mustache_js.parser import Parser, parse

__version__ = "0.1.0"

__all__ = [
    "ChoiceLoader",
    "CompilerError",
    "DictLoader",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "FunctionLoader",
    "Interpolation",
    "JavascriptGenerator",
    "Node",
    "Parser",
    "PartialReference",
    "Section",
    "Sequence",
    "StaticText",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "__version__",
    "compile_tree",
    "parse",
    "to_javascript",
]
