"""Partial table for one compilation.

Tracks every partial referenced while compiling a template: the global
identifier of its closure, its compilation state and the generated
closure source. It also records which template or partial referenced
which partial, so recursion is visible as a cycle in that graph.

States:
    PENDING    never referenced (not in the table)
    COMPILING  identifier allocated, body being compiled
    COMPILED   closure source stored

A partial enters COMPILING before its body is compiled. A reference
reached while it is COMPILING (self or mutual recursion) or after it is
COMPILED emits a call only, so each name is compiled exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mustache_js.environment.exceptions import CompilerError, ErrorCode


class PartialState(Enum):
    PENDING = "pending"
    COMPILING = "compiling"
    COMPILED = "compiled"


@dataclass(slots=True)
class PartialEntry:
    """One referenced partial."""

    name: str
    identifier: str
    state: PartialState = PartialState.COMPILING
    source: str | None = None
    filename: str | None = None


@dataclass(slots=True)
class PartialTable:
    """Partials referenced during one compilation, in first-reference order.

    Attributes:
        entries: name -> PartialEntry
        edges: referrer -> names referenced from it; the root template is
            the ``None`` referrer
    """

    entries: dict[str, PartialEntry] = field(default_factory=dict)
    edges: dict[str | None, list[str]] = field(default_factory=dict)
    _active: list[str] = field(default_factory=list)

    def __contains__(self, name: str) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def referrer(self) -> str | None:
        """The partial currently being compiled, or None at template level."""
        return self._active[-1] if self._active else None

    def state(self, name: str) -> PartialState:
        entry = self.entries.get(name)
        return entry.state if entry is not None else PartialState.PENDING

    def identifier(self, name: str) -> str:
        return self.entries[name].identifier

    def record_reference(self, name: str) -> None:
        targets = self.edges.setdefault(self.referrer, [])
        if name not in targets:
            targets.append(name)

    def begin(self, name: str, identifier: str, filename: str | None = None) -> PartialEntry:
        """Insert ``name`` as COMPILING; its body is compiled next."""
        if name in self.entries:
            raise CompilerError(
                f"Partial '{name}' is already {self.entries[name].state.value}",
                code=ErrorCode.SCOPE_ERROR,
            )
        entry = PartialEntry(name=name, identifier=identifier, filename=filename)
        self.entries[name] = entry
        self._active.append(name)
        return entry

    def finish(self, name: str, source: str) -> None:
        """Store the closure source for ``name`` and mark it COMPILED."""
        if not self._active or self._active[-1] != name:
            raise CompilerError(
                f"Partial '{name}' finished out of order",
                code=ErrorCode.SCOPE_ERROR,
            )
        self._active.pop()
        entry = self.entries[name]
        entry.source = source
        entry.state = PartialState.COMPILED

    def closures(self) -> list[str]:
        """Closure sources in first-reference order."""
        return [entry.source for entry in self.entries.values() if entry.source is not None]

    def cycles(self) -> set[str]:
        """Names of partials that (directly or indirectly) reference themselves."""
        recursive: set[str] = set()
        for start in self.entries:
            seen: set[str] = set()
            pending = list(self.edges.get(start, ()))
            while pending:
                name = pending.pop()
                if name == start:
                    recursive.add(start)
                    break
                if name in seen:
                    continue
                seen.add(name)
                pending.extend(self.edges.get(name, ()))
        return recursive
