"""
Sentence-level rules.

CommaNumber, WordNumber and InvalidCharacter read their punctuation from the
active SymbolTable, so the same rule works for every language.
"""

from __future__ import annotations

import re
from typing import Iterator

from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.model import Sentence
from docvalidator.symbols.table import Symbol, SymbolTable

from .base import BaseValidator, ValidationError
from .registry import register_validator


DEFAULT_MAX_SENTENCE_LENGTH = 30
DEFAULT_MAX_COMMA_NUMBER = 3
DEFAULT_MAX_WORD_NUMBER = 30


@register_validator
class SentenceLengthValidator(BaseValidator):
    """Validates the number of characters in a sentence.

    Attributes:
        max_length: int - Maximum characters per sentence (default 30)
    """

    def __init__(self) -> None:
        super().__init__("SentenceLength")
        self.max_length = DEFAULT_MAX_SENTENCE_LENGTH

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_length = self._int_attribute(config, "max_length", DEFAULT_MAX_SENTENCE_LENGTH)

    def check(self, node: Sentence) -> Iterator[ValidationError]:
        length = len(node.content)
        if length > self.max_length:
            yield self._error(
                f'The length of the sentence "{length}" exceeds the maximum "{self.max_length}".',
                node.content,
            )


@register_validator
class CommaNumberValidator(BaseValidator):
    """Validates the number of commas in a sentence.

    The comma is the COMMA symbol of the active table.

    Attributes:
        max_comma_num: int - Maximum commas per sentence (default 3)
    """

    def __init__(self) -> None:
        super().__init__("CommaNumber")
        self.max_comma_num = DEFAULT_MAX_COMMA_NUMBER
        self.comma = ","

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_comma_num = self._int_attribute(config, "max_comma_num", DEFAULT_MAX_COMMA_NUMBER)
        self.comma = symbol_table.value_of("COMMA")

    def check(self, node: Sentence) -> Iterator[ValidationError]:
        comma_number = node.content.count(self.comma)
        if comma_number > self.max_comma_num:
            yield self._error(
                f'The number of commas "{comma_number}" exceeds the maximum "{self.max_comma_num}".',
                node.content,
            )


@register_validator
class WordNumberValidator(BaseValidator):
    """Validates the number of words in a sentence.

    Words are separated by the SPACE symbol of the active table or by any
    whitespace.

    Attributes:
        max_word_num: int - Maximum words per sentence (default 30)
    """

    def __init__(self) -> None:
        super().__init__("WordNumber")
        self.max_word_num = DEFAULT_MAX_WORD_NUMBER
        self._separator = re.compile(r"\s+")

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_word_num = self._int_attribute(config, "max_word_num", DEFAULT_MAX_WORD_NUMBER)
        space = re.escape(symbol_table.value_of("SPACE"))
        self._separator = re.compile(rf"(?:\s|{space})+")

    def check(self, node: Sentence) -> Iterator[ValidationError]:
        words = [word for word in self._separator.split(node.content) if word]
        if len(words) > self.max_word_num:
            yield self._error(
                f'The number of words "{len(words)}" exceeds the maximum "{self.max_word_num}".',
                node.content,
            )


@register_validator
class InvalidCharacterValidator(BaseValidator):
    """Reports characters the active table lists as invalid variants.

    One finding per symbol whose invalid variant occurs in the sentence,
    in table order.
    """

    def __init__(self) -> None:
        super().__init__("InvalidCharacter")
        self._symbols: tuple[Symbol, ...] = ()

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self._symbols = tuple(symbol for symbol in symbol_table if symbol.invalid_chars)

    def check(self, node: Sentence) -> Iterator[ValidationError]:
        for symbol in self._symbols:
            for invalid in symbol.invalid_chars:
                if invalid in node.content:
                    yield self._error(
                        f'Invalid symbol "{invalid}" is found; use "{symbol.value}" ({symbol.name}).',
                        node.content,
                    )
                    break
