"""Layout-neutral document model sitting between resume data and the PDF.

Plain text only, single column, predictable reading order. Elements carry
structure, never spacing: the renderer owns all geometry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

__all__ = [
    "Document",
    "DocumentElement",
    "Heading",
    "HeadingLevel",
    "ListBlock",
    "Paragraph",
    "SectionBreak",
    "TextLine",
]

HeadingLevel: TypeAlias = Literal[1, 2, 3]


@dataclass(frozen=True, slots=True)
class Heading:
    """Name (level 1), section title (level 2) or entry title (level 3)."""

    level: HeadingLevel
    text: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Multi-line block that wraps across the content width."""

    text: str


@dataclass(frozen=True, slots=True)
class TextLine:
    """Single unwrapped line: contact details, dates, metadata."""

    text: str


@dataclass(frozen=True, slots=True)
class ListBlock:
    """Group of bullet points."""

    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SectionBreak:
    """Vertical separator between sections; draws nothing."""


DocumentElement: TypeAlias = Heading | Paragraph | TextLine | ListBlock | SectionBreak


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered, immutable element sequence.

    Position in ``elements`` is the only source of render order.
    """

    elements: tuple[DocumentElement, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.elements)
