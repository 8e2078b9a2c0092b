"""Base node class for the Mustache AST."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    Nodes are immutable; the compiler only ever reads them. ``lineno``
    records the template line the node started on and is used in error
    messages.

    """
