"""
Section-level rules.

SectionLength is the reference rule for the validator contract: it reads one
optional integer attribute, falls back to a logged default, and derives all
of its counting state inside check().
"""

from __future__ import annotations

from typing import Iterator

from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.model import Section
from docvalidator.symbols.table import SymbolTable

from .base import BaseValidator, ValidationError
from .registry import register_validator


DEFAULT_MAX_SECTION_CHAR_NUMBER = 1000
DEFAULT_MAX_PARAGRAPH_NUMBER = 5
DEFAULT_PARAGRAPH_START = " "


@register_validator
class SectionLengthValidator(BaseValidator):
    """Validates the number of characters in a section.

    Sentence lengths are summed across paragraphs in document order. The
    running total is checked after each paragraph and is never reset, so a
    section reports once for every paragraph boundary at which the total
    exceeds the maximum.

    Attributes:
        max_char_number: int - Maximum characters per section (default 1000)
    """

    def __init__(self) -> None:
        super().__init__("SectionLength")
        self.max_char_number = DEFAULT_MAX_SECTION_CHAR_NUMBER

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_char_number = self._int_attribute(
            config, "max_char_number", DEFAULT_MAX_SECTION_CHAR_NUMBER
        )

    def check(self, node: Section) -> Iterator[ValidationError]:
        char_number = 0
        for paragraph in node.paragraphs:
            char_number += sum(len(sentence.content) for sentence in paragraph.sentences)
            if char_number > self.max_char_number:
                yield self._error(
                    f'The number of the character exceeds the maximum "{char_number}".',
                    node.header_content(0),
                )


@register_validator
class MaxParagraphNumberValidator(BaseValidator):
    """Validates the number of paragraphs in a section.

    Attributes:
        max_paragraph_num: int - Maximum paragraphs per section (default 5)
    """

    def __init__(self) -> None:
        super().__init__("MaxParagraphNumber")
        self.max_paragraph_num = DEFAULT_MAX_PARAGRAPH_NUMBER

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_paragraph_num = self._int_attribute(
            config, "max_paragraph_num", DEFAULT_MAX_PARAGRAPH_NUMBER
        )

    def check(self, node: Section) -> Iterator[ValidationError]:
        paragraph_number = len(node.paragraphs)
        if paragraph_number > self.max_paragraph_num:
            yield self._error(
                f'The number of paragraphs "{paragraph_number}" exceeds the maximum '
                f'"{self.max_paragraph_num}".',
                node.header_content(0),
            )


@register_validator
class ParagraphStartWithValidator(BaseValidator):
    """Validates that each paragraph of a section starts with a given string.

    Empty paragraphs are skipped.

    Attributes:
        start_from: str - Required paragraph prefix (default: one space)
    """

    def __init__(self) -> None:
        super().__init__("ParagraphStartWith")
        self.start_from = DEFAULT_PARAGRAPH_START

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.start_from = self._str_attribute(config, "start_from", DEFAULT_PARAGRAPH_START)

    def check(self, node: Section) -> Iterator[ValidationError]:
        for paragraph in node.paragraphs:
            if not paragraph.sentences:
                continue
            first = paragraph.sentences[0]
            if not first.content.startswith(self.start_from):
                yield self._error(
                    f'Paragraph does not start with "{self.start_from}".',
                    first.content,
                )
