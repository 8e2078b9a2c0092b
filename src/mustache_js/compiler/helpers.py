"""Runtime helper library for generated templates.

Compiled templates depend on a handful of small JavaScript functions
(context lookup, emptiness and type tests, HTML escaping). Statement
handlers register the helpers their emitted code calls; at assembly time
the registry closes the requested set over helper dependencies and emits
only those definitions, in a fixed order, ahead of any code that uses
them.

Helper contracts:
    fetch(stack, key)     first truthy ``frame[key]``, searching the context
                          stack from the top; undefined when none
    traverse(value, key)  ``value?.[key]``
    reduce                left fold; ``reduce.call(keys, traverse, start)``
    isEmpty(value)        falsy -> true, array -> no elements,
                          object -> no own keys, anything else -> false
    isArray, isObject, isFunction
                          type predicates (isObject excludes null,
                          isFunction is duck-typed)
    escape(value)         ``&``, ``<``, ``>``, ``"`` to entities, in that order
"""

from __future__ import annotations

import logging

from mustache_js.compiler.builder import CodeBuilder
from mustache_js.environment.exceptions import CompilerError

logger = logging.getLogger(__name__)

HELPER_SOURCES: dict[str, str] = {
    "fetch": """
fetch = function fetch(stack, key) {
  var i, frame, value;
  for (i = stack.length - 1; i >= 0; i -= 1) {
    frame = stack[i];
    if (frame !== null && frame !== undefined) {
      value = frame[key];
      if (value) {
        return value;
      }
    }
  }
};
""",
    "escape": """
escape = function escape(value) {
  return ('' + value)
    .replace(/&/g, '&amp;')
    .replace(/</g, '&lt;')
    .replace(/>/g, '&gt;')
    .replace(/"/g, '&quot;');
};
""",
    "isEmpty": """
isEmpty = function isEmpty(value) {
  var key;
  if (!value) {
    return true;
  } else if (isArray(value)) {
    return value.length === 0;
  } else if (isObject(value)) {
    for (key in value) {
      if (Object.prototype.hasOwnProperty.call(value, key)) {
        return false;
      }
    }
    return true;
  }
  return false;
};
""",
    "isArray": """
isArray = Array.isArray || function isArray(value) {
  return Object.prototype.toString.call(value) === '[object Array]';
};
""",
    "isObject": """
isObject = function isObject(value) {
  return value !== null && typeof value === 'object';
};
""",
    "isFunction": """
isFunction = function isFunction(value) {
  return !!(value && value.constructor && value.call && value.apply);
};
""",
    "reduce": """
reduce = Array.prototype.reduce || function reduce(iterator, memo) {
  var i;
  for (i = 0; i < this.length; i += 1) {
    memo = iterator(memo, this[i], i, this);
  }
  return memo;
};
""",
    "traverse": """
traverse = function traverse(value, key) {
  return value === null || value === undefined ? undefined : value[key];
};
""",
}

# Emission order. Helpers are assigned before the render function runs, so
# order only has to be stable, not dependency-sorted.
HELPER_ORDER: tuple[str, ...] = (
    "fetch",
    "escape",
    "isEmpty",
    "isArray",
    "isObject",
    "isFunction",
    "reduce",
    "traverse",
)

# helper -> helpers its definition or its call sites rely on
HELPER_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "isEmpty": ("isArray", "isObject"),
    "reduce": ("fetch", "traverse"),
}


class HelperRegistry:
    """Accumulates required helpers for one compilation.

    Requests are monotonic: once a helper is required it stays required
    for the rest of the compile.

    Example:
        >>> helpers = HelperRegistry()
        >>> helpers.require("isEmpty")
        >>> helpers.resolve()
        ['isEmpty', 'isArray', 'isObject']

    """

    __slots__ = ("_requested",)

    def __init__(self) -> None:
        self._requested: dict[str, bool] = dict.fromkeys(HELPER_ORDER, False)

    def require(self, *names: str) -> None:
        for name in names:
            if name not in self._requested:
                raise CompilerError(f"Unknown runtime helper '{name}'")
            self._requested[name] = True

    def is_required(self, name: str) -> bool:
        return self._requested.get(name, False)

    def resolve(self) -> list[str]:
        """Close the requested set over HELPER_DEPENDENCIES.

        Marks every implied helper as required and returns the full set in
        HELPER_ORDER.
        """
        changed = True
        while changed:
            changed = False
            for name, deps in HELPER_DEPENDENCIES.items():
                if not self._requested[name]:
                    continue
                for dep in deps:
                    if not self._requested[dep]:
                        self._requested[dep] = True
                        changed = True

        resolved = [name for name in HELPER_ORDER if self._requested[name]]
        logger.debug("Resolved runtime helpers: %s", ", ".join(resolved) or "<none>")
        return resolved

    def emit(self, builder: CodeBuilder) -> list[str]:
        """Write the definitions of all required helpers; return their names."""
        names = self.resolve()
        for name in names:
            builder.source(HELPER_SOURCES[name])
        return names
