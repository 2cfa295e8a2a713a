"""
Configuration and its builder.

A Configuration pairs the active SymbolTable with four ordered lists of
ValidatorConfig, one per document granularity. It is produced once by a
ConfigurationBuilder and never changes afterwards.

Validator names are routed to a granularity through VALIDATOR_GRANULARITY, a
closed table: adding a validator means adding one entry here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Type, Union

from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.errors import TableNotInitializedError, UnknownValidatorError
from docvalidator.symbols.table import Language, Symbol, SymbolTable, load_defaults

log = logging.getLogger(__name__)


# =============================================================================
# Routing Table
# =============================================================================


class Granularity(str, Enum):
    """Document-tree level a validator runs on."""

    DOCUMENT = "document"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"


VALIDATOR_GRANULARITY: Mapping[str, Granularity] = MappingProxyType({
    # Sentence
    "SentenceLength": Granularity.SENTENCE,
    "InvalidExpression": Granularity.SENTENCE,
    "SpaceAfterPeriod": Granularity.SENTENCE,
    "CommaNumber": Granularity.SENTENCE,
    "WordNumber": Granularity.SENTENCE,
    "SuggestExpression": Granularity.SENTENCE,
    "InvalidCharacter": Granularity.SENTENCE,
    "SpaceWithSymbol": Granularity.SENTENCE,
    "KatakanaEndHyphen": Granularity.SENTENCE,
    "KatakanaSpellCheck": Granularity.SENTENCE,
    # Paragraph
    "MaxSentenceNumber": Granularity.PARAGRAPH,
    # Section
    "SectionLength": Granularity.SECTION,
    "MaxParagraphNumber": Granularity.SECTION,
    "ParagraphStartWith": Granularity.SECTION,
    # Document
    "MaxSectionNumber": Granularity.DOCUMENT,
})


def granularity_of(name: str) -> Granularity:
    """Return the granularity a validator name is routed to.

    Raises:
        UnknownValidatorError: If the name is not in the routing table.
    """
    try:
        return VALIDATOR_GRANULARITY[name]
    except KeyError:
        raise UnknownValidatorError(name) from None


# =============================================================================
# Builder
# =============================================================================


class ConfigurationBuilder:
    """Mutable accumulator for a Configuration.

    Example:
        configuration = (
            ConfigurationBuilder()
            .set_language("ja")
            .add_invalid_pattern("COMMA", ",")
            .add_validation_config(ValidatorConfig("SectionLength", {"max_char_number": "500"}))
            .build()
        )
    """

    def __init__(self) -> None:
        self._symbol_table: Optional[SymbolTable] = None
        self._configs: dict[Granularity, list[ValidatorConfig]] = {
            granularity: [] for granularity in Granularity
        }

    @property
    def symbol_table(self) -> Optional[SymbolTable]:
        return self._symbol_table

    # -- symbols ---------------------------------------------------------------

    def set_language(self, tag: Union[str, Language]) -> "ConfigurationBuilder":
        """Load the default symbol table for ``tag``.

        On failure the current table is left as it was.
        """
        self._symbol_table = load_defaults(tag)
        return self

    def set_character(self, symbol: Union[Symbol, str], value: Optional[str] = None) -> "ConfigurationBuilder":
        """Override a symbol, given either a Symbol or a name and value."""
        if not isinstance(symbol, Symbol):
            if value is None:
                raise TypeError("set_character() needs a value when given a symbol name")
            symbol = Symbol(symbol, value)
        self._require_table().override(symbol)
        return self

    def add_invalid_pattern(self, name: str, pattern: str) -> "ConfigurationBuilder":
        self._require_table().add_invalid_variant(name, pattern)
        return self

    def _require_table(self) -> SymbolTable:
        if self._symbol_table is None:
            raise TableNotInitializedError()
        return self._symbol_table

    # -- validator configs -----------------------------------------------------

    def add_document_validator_config(self, config: ValidatorConfig) -> "ConfigurationBuilder":
        self._configs[Granularity.DOCUMENT].append(config)
        return self

    def add_section_validator_config(self, config: ValidatorConfig) -> "ConfigurationBuilder":
        self._configs[Granularity.SECTION].append(config)
        return self

    def add_paragraph_validator_config(self, config: ValidatorConfig) -> "ConfigurationBuilder":
        self._configs[Granularity.PARAGRAPH].append(config)
        return self

    def add_sentence_validator_config(self, config: ValidatorConfig) -> "ConfigurationBuilder":
        self._configs[Granularity.SENTENCE].append(config)
        return self

    def add_validation_config(self, config: ValidatorConfig) -> "ConfigurationBuilder":
        """Route ``config`` (and its children) by name.

        Every name in the tree is resolved before anything is inserted, so an
        unknown name anywhere leaves the builder unchanged. Children are
        recorded before their parent.

        Raises:
            UnknownValidatorError: If any name in the tree is not routed.
        """
        routes: list[tuple[Granularity, ValidatorConfig]] = []

        def collect(node: ValidatorConfig) -> None:
            for child in node.children:
                collect(child)
            routes.append((granularity_of(node.name), node))

        collect(config)
        for granularity, node in routes:
            self._configs[granularity].append(node)
            log.debug("Routed validator config %s to %s", node.name, granularity.value)
        return self

    # -- build -----------------------------------------------------------------

    def build(self) -> Configuration:
        """Snapshot the builder into an immutable Configuration."""
        table = self._symbol_table
        if table is None:
            table = load_defaults(Language.DEFAULT)
            log.info("No language set; using the default symbol table")
        log.info("Building configuration for language '%s'", table.language.value)
        return Configuration(
            symbol_table=table.frozen_copy(),
            document_configs=tuple(self._configs[Granularity.DOCUMENT]),
            section_configs=tuple(self._configs[Granularity.SECTION]),
            paragraph_configs=tuple(self._configs[Granularity.PARAGRAPH]),
            sentence_configs=tuple(self._configs[Granularity.SENTENCE]),
        )


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class Configuration:
    """Immutable result of ConfigurationBuilder.build()."""

    Builder: ClassVar[Type[ConfigurationBuilder]] = ConfigurationBuilder

    symbol_table: SymbolTable
    document_configs: tuple[ValidatorConfig, ...] = field(default_factory=tuple)
    section_configs: tuple[ValidatorConfig, ...] = field(default_factory=tuple)
    paragraph_configs: tuple[ValidatorConfig, ...] = field(default_factory=tuple)
    sentence_configs: tuple[ValidatorConfig, ...] = field(default_factory=tuple)

    def configs_for(self, granularity: Granularity) -> tuple[ValidatorConfig, ...]:
        if granularity is Granularity.DOCUMENT:
            return self.document_configs
        if granularity is Granularity.SECTION:
            return self.section_configs
        if granularity is Granularity.PARAGRAPH:
            return self.paragraph_configs
        return self.sentence_configs

    def all_configs(self) -> list[tuple[Granularity, ValidatorConfig]]:
        """All configs paired with their granularity, document level first."""
        return [
            (granularity, config)
            for granularity in Granularity
            for config in self.configs_for(granularity)
        ]

    @property
    def language(self) -> Language:
        return self.symbol_table.language
