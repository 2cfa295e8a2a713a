"""
Paragraph-level rules.
"""

from __future__ import annotations

from typing import Iterator

from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.model import Paragraph
from docvalidator.symbols.table import SymbolTable

from .base import BaseValidator, ValidationError
from .registry import register_validator


DEFAULT_MAX_SENTENCE_NUMBER = 10


@register_validator
class MaxSentenceNumberValidator(BaseValidator):
    """Validates the number of sentences in a paragraph.

    The finding points at the paragraph's first sentence.

    Attributes:
        max_sentence_num: int - Maximum sentences per paragraph (default 10)
    """

    def __init__(self) -> None:
        super().__init__("MaxSentenceNumber")
        self.max_sentence_num = DEFAULT_MAX_SENTENCE_NUMBER

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_sentence_num = self._int_attribute(
            config, "max_sentence_num", DEFAULT_MAX_SENTENCE_NUMBER
        )

    def check(self, node: Paragraph) -> Iterator[ValidationError]:
        sentence_number = len(node.sentences)
        if sentence_number > self.max_sentence_num:
            yield self._error(
                f'The number of sentences "{sentence_number}" exceeds the maximum '
                f'"{self.max_sentence_num}".',
                node.sentences[0].content,
            )
