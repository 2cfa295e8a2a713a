"""
Tree factories shared by the test modules.
"""

from __future__ import annotations

from typing import Sequence

from docvalidator.model import Paragraph, Section, Sentence


def make_paragraph(*sentences: str) -> Paragraph:
    """Create a paragraph from raw sentence strings."""
    return Paragraph(tuple(Sentence(text, line_number=i) for i, text in enumerate(sentences)))


def make_section(
    header: str = "Introduction",
    paragraphs: Sequence[Sequence[str]] = (),
    level: int = 1,
) -> Section:
    """Create a section with one header line and paragraphs of sentences."""
    return Section(
        level=level,
        header_contents=(header,),
        paragraphs=tuple(make_paragraph(*sentences) for sentences in paragraphs),
    )


def sentences_of_length(*lengths: int) -> list[str]:
    """Sentences made of 'x' characters with the given lengths."""
    return ["x" * length for length in lengths]
