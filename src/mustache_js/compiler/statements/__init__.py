"""Statement compilation for the JavaScript generator.

Provides mixins for compiling template nodes to JavaScript statements.

The statements package is organized into logical modules:
- basic: Sequences, static text and interpolation
- control_flow: Sections and inverted sections
- template_structure: Partial references

Uses inline TYPE_CHECKING declarations for host attributes.

"""

from __future__ import annotations

from mustache_js.compiler.statements.basic import BasicStatementMixin
from mustache_js.compiler.statements.control_flow import ControlFlowMixin
from mustache_js.compiler.statements.template_structure import TemplateStructureMixin


class StatementCompilationMixin(
    BasicStatementMixin,
    ControlFlowMixin,
    TemplateStructureMixin,
):
    """Combined mixin for compiling all statement types.

    This class combines all statement compilation mixins into a single
    interface that can be inherited by the JavascriptGenerator class.

    """
