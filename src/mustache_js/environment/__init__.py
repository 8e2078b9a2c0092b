"""Environment package: configuration, partial loaders and exceptions."""

from mustache_js.environment.exceptions import (
    CompilerError,
    ErrorCode,
    SourceSnippet,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
    build_source_snippet,
)
from mustache_js.environment.loaders import (
    ChoiceLoader,
    DictLoader,
    FileSystemLoader,
    FunctionLoader,
    Loader,
)
from mustache_js.environment.core import Environment, compile_tree, to_javascript

__all__ = [
    "ChoiceLoader",
    "CompilerError",
    "DictLoader",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "FunctionLoader",
    "Loader",
    "SourceSnippet",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "build_source_snippet",
    "compile_tree",
    "to_javascript",
]
