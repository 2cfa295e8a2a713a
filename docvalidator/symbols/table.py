"""
Symbol tables: the punctuation and typography conventions of a language.

A SymbolTable maps a fixed vocabulary of names ("COMMA", "FULL_STOP", ...) to
Symbol records. The vocabulary comes from the language defaults only;
configuration may replace a symbol or add invalid variants to it, but never
introduce a new name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from docvalidator.errors import (
    FrozenTableError,
    InvalidSymbolError,
    UnknownLanguageError,
    UnknownSymbolError,
)
from docvalidator.symbols.defaults import DEFAULT_SYMBOLS, JAPANESE_SYMBOLS, SymbolSpec

log = logging.getLogger(__name__)


# =============================================================================
# Symbol
# =============================================================================


@dataclass(frozen=True)
class Symbol:
    """A named canonical character plus the variants that should not be used."""

    name: str
    value: str
    invalid_chars: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidSymbolError(self.name, "must have a non-empty value")
        if "" in self.invalid_chars:
            raise InvalidSymbolError(self.name, "cannot list an empty invalid variant")
        # Ordered set: keep first occurrence only
        object.__setattr__(self, "invalid_chars", tuple(dict.fromkeys(self.invalid_chars)))

    def with_invalid(self, variant: str) -> "Symbol":
        """Return a copy with ``variant`` appended to the invalid set."""
        if variant in self.invalid_chars:
            return self
        return Symbol(self.name, self.value, self.invalid_chars + (variant,))


# =============================================================================
# Language
# =============================================================================


class Language(str, Enum):
    """Languages with a default symbol vocabulary."""

    DEFAULT = "en"
    JAPANESE = "ja"

    @classmethod
    def from_tag(cls, tag: Union[str, "Language"]) -> "Language":
        """Resolve a language tag.

        Raises:
            UnknownLanguageError: For anything other than "en", "default" or "ja".
        """
        if isinstance(tag, Language):
            return tag
        normalized = (tag or "").strip().lower()
        if normalized in ("en", "default"):
            return cls.DEFAULT
        if normalized == "ja":
            return cls.JAPANESE
        raise UnknownLanguageError(tag)


_LANGUAGE_DEFAULTS: dict[Language, tuple[SymbolSpec, ...]] = {
    Language.DEFAULT: DEFAULT_SYMBOLS,
    Language.JAPANESE: JAPANESE_SYMBOLS,
}


# =============================================================================
# SymbolTable
# =============================================================================


class SymbolTable:
    """Name -> Symbol dictionary for one language.

    Tables returned by load_defaults() are mutable and private to their
    caller. frozen_copy() produces the read-only table held by a built
    Configuration.
    """

    def __init__(
        self,
        language: Language,
        symbols: Optional[Mapping[str, Symbol]] = None,
        frozen: bool = False,
    ) -> None:
        self._language = language
        self._symbols: dict[str, Symbol] = dict(symbols or {})
        self._frozen = frozen

    @property
    def language(self) -> Language:
        return self._language

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def dictionary(self) -> Mapping[str, Symbol]:
        """Read-only view of the name -> Symbol mapping."""
        return MappingProxyType(self._symbols)

    # -- lookups ---------------------------------------------------------------

    def get(self, name: str) -> Symbol:
        """Look up a symbol by name.

        Raises:
            UnknownSymbolError: If the name is not in this table's vocabulary.
        """
        try:
            return self._symbols[name]
        except KeyError:
            raise UnknownSymbolError(name) from None

    def value_of(self, name: str) -> str:
        return self.get(name).value

    def invalid_chars_of(self, name: str) -> tuple[str, ...]:
        return self.get(name).invalid_chars

    def names(self) -> list[str]:
        return list(self._symbols)

    def __getitem__(self, name: str) -> Symbol:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolTable):
            return NotImplemented
        return self._language == other._language and self._symbols == other._symbols

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"SymbolTable(language={self._language.value!r}, symbols={len(self)}, {state})"

    # -- mutation --------------------------------------------------------------

    def override(self, symbol: Symbol) -> None:
        """Replace the entry with the same name.

        Raises:
            UnknownSymbolError: If no base entry with that name exists.
            FrozenTableError: If the table belongs to a built Configuration.
        """
        self._check_mutable()
        if symbol.name not in self._symbols:
            raise UnknownSymbolError(symbol.name)
        self._symbols[symbol.name] = symbol
        log.debug("Overrode symbol %s with %r", symbol.name, symbol.value)

    def add_invalid_variant(self, name: str, variant: str) -> None:
        """Append ``variant`` to the invalid set of an existing symbol.

        Raises:
            UnknownSymbolError: If the symbol is absent.
            InvalidSymbolError: If ``variant`` is empty.
            FrozenTableError: If the table belongs to a built Configuration.
        """
        self._check_mutable()
        self._symbols[name] = self.get(name).with_invalid(variant)

    def frozen_copy(self) -> "SymbolTable":
        """Return an independent, read-only copy of this table."""
        return SymbolTable(self._language, self._symbols, frozen=True)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenTableError(
                f"Symbol table for '{self._language.value}' is frozen and cannot be modified"
            )


def load_defaults(language: Union[str, Language]) -> SymbolTable:
    """Return a freshly populated table for ``language``.

    Every call builds a new dictionary, so tables never share mutable state.

    Raises:
        UnknownLanguageError: If the tag is not a supported language.
    """
    resolved = Language.from_tag(language)
    symbols = {
        name: Symbol(name, value, invalid)
        for name, value, invalid in _LANGUAGE_DEFAULTS[resolved]
    }
    return SymbolTable(resolved, symbols)
