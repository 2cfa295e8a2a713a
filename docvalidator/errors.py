"""
Configuration-phase exceptions.

Everything that can go wrong while building a Configuration or configuring a
validator derives from ConfigError. Validation findings are not exceptions;
see docvalidator.validators.base.ValidationError.
"""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base class for configuration failures."""


class UnknownLanguageError(ConfigError):
    """Raised when a language tag has no default symbol table."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unknown language '{language}'")


class UnknownSymbolError(ConfigError):
    """Raised when a symbol name is not part of the active vocabulary."""

    def __init__(self, symbol_name: str) -> None:
        self.symbol_name = symbol_name
        super().__init__(f"No symbol such as '{symbol_name}'")


class InvalidSymbolError(ConfigError):
    """Raised when a symbol value or invalid variant is empty."""

    def __init__(self, symbol_name: str, reason: str) -> None:
        self.symbol_name = symbol_name
        super().__init__(f"Symbol '{symbol_name}' {reason}")


class UnknownValidatorError(ConfigError):
    """Raised when a validator name is missing from the routing table."""

    def __init__(self, validator_name: str) -> None:
        self.validator_name = validator_name
        super().__init__(f"No validator such as '{validator_name}'")


class TableNotInitializedError(ConfigError):
    """Raised when symbols are edited before a language was selected."""

    def __init__(self, message: str = "Symbol table is not initialized; call set_language() first") -> None:
        super().__init__(message)


class BadAttributeError(ConfigError):
    """Raised when a validator attribute holds a value it cannot interpret."""

    def __init__(self, validator_name: str, key: str, value: str, reason: Optional[str] = None) -> None:
        self.validator_name = validator_name
        self.key = key
        self.value = value
        message = f"Bad value '{value}' for attribute '{key}' of validator '{validator_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FrozenTableError(ConfigError):
    """Raised when the symbol table of a built Configuration is modified."""


class ValidatorNotAvailableError(ConfigError):
    """Raised when a routed validator name has no registered implementation."""

    def __init__(self, validator_name: str) -> None:
        self.validator_name = validator_name
        super().__init__(f"Validator '{validator_name}' is not implemented")


class ConfigFileError(ConfigError):
    """Raised when a configuration file cannot be read or has the wrong shape."""
