"""Mustache to JavaScript compiler.

Transforms a Mustache node tree into the source of a standalone
JavaScript render function.

Architecture:
    Node tree -> JavascriptGenerator -> JavaScript source

Components:
- core: JavascriptGenerator, node dispatch and module assembly
- symbols: Unique identifiers per closure scope
- helpers: Runtime helper library with dependency tree-shaking
- partials: Partial table with compilation states and reference graph
- lookup: Context lookup expressions and value kinds
- builder: Indentation-aware line builder
- statements: Per-node statement handlers

"""

from mustache_js.compiler.builder import CodeBuilder
from mustache_js.compiler.core import JavascriptGenerator
from mustache_js.compiler.helpers import (
    HELPER_DEPENDENCIES,
    HELPER_ORDER,
    HELPER_SOURCES,
    HelperRegistry,
)
from mustache_js.compiler.lookup import SECTION_DISPATCH, ValueKind
from mustache_js.compiler.partials import PartialEntry, PartialState, PartialTable
from mustache_js.compiler.symbols import SymbolAllocator

__all__ = [
    "HELPER_DEPENDENCIES",
    "HELPER_ORDER",
    "HELPER_SOURCES",
    "SECTION_DISPATCH",
    "CodeBuilder",
    "HelperRegistry",
    "JavascriptGenerator",
    "PartialEntry",
    "PartialState",
    "PartialTable",
    "SymbolAllocator",
    "ValueKind",
]
