"""Tag tokens produced by the Mustache scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TagType(Enum):
    """Kind of a Mustache tag, keyed by its sigil."""

    VARIABLE = ""
    UNESCAPED = "&"
    TRIPLE = "{"
    SECTION = "#"
    INVERTED = "^"
    CLOSE = "/"
    COMMENT = "!"
    PARTIAL = ">"
    DELIMITERS = "="

    @property
    def can_stand_alone(self) -> bool:
        """Whether a tag of this kind alone on a line removes the whole line."""
        return self in _STANDALONE_TYPES


_STANDALONE_TYPES = frozenset(
    {
        TagType.SECTION,
        TagType.INVERTED,
        TagType.CLOSE,
        TagType.COMMENT,
        TagType.PARTIAL,
        TagType.DELIMITERS,
    }
)

# Sigils checked after the opening delimiter; anything else is a variable.
SIGILS: dict[str, TagType] = {t.value: t for t in TagType if t.value}


@dataclass(frozen=True, slots=True)
class Tag:
    """One scanned tag.

    ``start``/``end`` delimit the tag in the source, delimiters included.
    """

    type: TagType
    content: str
    start: int
    end: int
    lineno: int
    col_offset: int
