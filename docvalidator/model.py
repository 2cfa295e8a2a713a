"""
Document tree consumed by validators.

The tree is produced by an external parser and is read-only from here on:
every node is a frozen dataclass and child sequences are stored as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Sentence:
    """One sentence of raw text."""

    content: str
    line_number: int = 0

    def __len__(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class Paragraph:
    """Ordered sentences."""

    sentences: tuple[Sentence, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sentences", tuple(self.sentences))


@dataclass(frozen=True)
class Section:
    """A section: header lines plus ordered paragraphs."""

    level: int = 0
    header_contents: tuple[str, ...] = field(default_factory=tuple)
    paragraphs: tuple[Paragraph, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "header_contents", tuple(self.header_contents))
        object.__setattr__(self, "paragraphs", tuple(self.paragraphs))

    def header_content(self, index: int = 0) -> str:
        """Return a header line, or an empty string when there is none."""
        if 0 <= index < len(self.header_contents):
            return self.header_contents[index]
        return ""

    def iter_sentences(self) -> Iterator[Sentence]:
        for paragraph in self.paragraphs:
            yield from paragraph.sentences


@dataclass(frozen=True)
class Document:
    """Root of the tree."""

    sections: tuple[Section, ...] = field(default_factory=tuple)
    file_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(self.sections))

    def iter_paragraphs(self) -> Iterator[Paragraph]:
        for section in self.sections:
            yield from section.paragraphs

    def iter_sentences(self) -> Iterator[Sentence]:
        for section in self.sections:
            yield from section.iter_sentences()
