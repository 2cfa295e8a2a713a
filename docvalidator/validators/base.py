"""
Base types and protocols for the pluggable validator system.

Defines the contract every rule follows (configure once, then validate nodes
of one granularity) plus the ValidationError finding they produce.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from docvalidator.config.configuration import Granularity, granularity_of
from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.errors import BadAttributeError
from docvalidator.symbols.table import SymbolTable

log = logging.getLogger(__name__)


# =============================================================================
# Findings
# =============================================================================


@dataclass(frozen=True)
class ValidationError:
    """A document-quality finding reported by a validator."""

    validator: str
    """Name of the validator that produced this finding."""

    message: str
    """Human-readable description of the issue."""

    location: str = ""
    """Hint pointing at the offending span (e.g. a section header)."""

    def __str__(self) -> str:
        if self.location:
            return f"[{self.validator}] {self.message} (at: {self.location})"
        return f"[{self.validator}] {self.message}"


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class Validator(Protocol):
    """Protocol for validators.

    Lifecycle: Unconfigured -> load_configuration() -> Configured. Only a
    configured validator may validate, and validate() must not modify the
    node or keep per-call state on the instance.
    """

    @property
    def name(self) -> str:
        """Routing-table name of this rule."""
        ...

    @property
    def granularity(self) -> Granularity:
        """Tree level this validator consumes."""
        ...

    @property
    def configured(self) -> bool:
        ...

    def load_configuration(self, config: ValidatorConfig, symbol_table: SymbolTable) -> bool:
        """Read the attributes this rule understands.

        Raises:
            BadAttributeError: If a recognized attribute is malformed.
        """
        ...

    def validate(self, node: Any) -> list[ValidationError]:
        """Check one node and return its findings (empty when clean)."""
        ...


# =============================================================================
# Base Class
# =============================================================================


class BaseValidator:
    """Shared lifecycle handling for validators.

    Subclasses implement configure() to read their attributes and check() to
    yield findings for a node. Anything computed while checking stays local
    to check().
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._granularity = granularity_of(name)
        self._configured = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    @property
    def configured(self) -> bool:
        return self._configured

    def load_configuration(self, config: ValidatorConfig, symbol_table: SymbolTable) -> bool:
        self._configured = False
        self.configure(config, symbol_table)
        self._configured = True
        return True

    def validate(self, node: Any) -> list[ValidationError]:
        if not self._configured:
            raise RuntimeError(f"Validator '{self._name}' must be configured before validate()")
        return list(self.check(node))

    def configure(self, config: ValidatorConfig, symbol_table: SymbolTable) -> None:
        """Override in subclasses that take attributes."""

    def check(self, node: Any) -> Iterable[ValidationError]:
        """Override this method in subclasses."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement check()")

    # -- helpers ---------------------------------------------------------------

    def _error(self, message: str, location: str = "") -> ValidationError:
        return ValidationError(validator=self._name, message=message, location=location)

    def _int_attribute(
        self,
        config: ValidatorConfig,
        key: str,
        default: int,
        minimum: Optional[int] = 0,
    ) -> int:
        """Parse an integer attribute, falling back to ``default`` when absent."""
        raw = config.get_attribute(key)
        if raw is None:
            log.info("%s: %s was not set, using the default value %d", self._name, key, default)
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            raise BadAttributeError(self._name, key, raw, "expected an integer") from None
        if minimum is not None and value < minimum:
            raise BadAttributeError(self._name, key, raw, f"must be at least {minimum}")
        return value

    def _str_attribute(self, config: ValidatorConfig, key: str, default: str) -> str:
        raw = config.get_attribute(key)
        if raw is None:
            log.info("%s: %s was not set, using the default value %r", self._name, key, default)
            return default
        return raw

    def __repr__(self) -> str:
        state = "configured" if self._configured else "unconfigured"
        return f"{self.__class__.__name__}(name={self._name!r}, {state})"
