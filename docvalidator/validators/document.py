"""
Document-level rules.
"""

from __future__ import annotations

from typing import Iterator

from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.model import Document
from docvalidator.symbols.table import SymbolTable

from .base import BaseValidator, ValidationError
from .registry import register_validator


DEFAULT_MAX_SECTION_NUMBER = 50


@register_validator
class MaxSectionNumberValidator(BaseValidator):
    """Validates the number of sections in a document.

    Attributes:
        max_section_num: int - Maximum sections per document (default 50)
    """

    def __init__(self) -> None:
        super().__init__("MaxSectionNumber")
        self.max_section_num = DEFAULT_MAX_SECTION_NUMBER

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        self.max_section_num = self._int_attribute(
            config, "max_section_num", DEFAULT_MAX_SECTION_NUMBER
        )

    def check(self, node: Document) -> Iterator[ValidationError]:
        section_number = len(node.sections)
        if section_number > self.max_section_num:
            yield self._error(
                f'The number of sections "{section_number}" exceeds the maximum '
                f'"{self.max_section_num}".',
                node.file_name,
            )
