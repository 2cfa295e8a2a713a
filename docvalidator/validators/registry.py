"""
Validator registry: routing-table name -> implementation class.

The registry is closed over the routing table in
docvalidator.config.configuration; a class can only be registered under a
name the table already routes.
"""

from __future__ import annotations

from typing import Callable, Optional, Type, TypeVar

from docvalidator.config.configuration import VALIDATOR_GRANULARITY
from docvalidator.errors import UnknownValidatorError, ValidatorNotAvailableError

from .base import Validator

V = TypeVar("V", bound=Type[Validator])


class ValidatorRegistry:
    """Registry of validator classes.

    Classes register via the @register_validator decorator or by calling
    registry.register() directly. create() returns a fresh, unconfigured
    instance for every call.
    """

    def __init__(self) -> None:
        self._classes: dict[str, Callable[[], Validator]] = {}

    def register(self, cls: Callable[[], Validator]) -> None:
        """Register a validator class.

        Raises:
            TypeError: If instances don't implement the Validator protocol.
            UnknownValidatorError: If the name is not in the routing table.
            ValueError: If the name is already registered.
        """
        instance = cls()
        if not isinstance(instance, Validator):
            raise TypeError(
                f"Validator must implement the Validator protocol. "
                f"Got {cls.__name__} which is missing required "
                f"attributes/methods (name, granularity, load_configuration, validate)."
            )

        name = instance.name
        if name not in VALIDATOR_GRANULARITY:
            raise UnknownValidatorError(name)

        if name in self._classes:
            existing = self._classes[name]
            raise ValueError(
                f"Validator '{name}' is already registered "
                f"(existing: {getattr(existing, '__name__', existing)}, new: {cls.__name__})"
            )

        self._classes[name] = cls

    def get(self, name: str) -> Optional[Callable[[], Validator]]:
        return self._classes.get(name)

    def create(self, name: str) -> Validator:
        """Instantiate the validator registered under ``name``.

        Raises:
            UnknownValidatorError: If the name is not routed at all.
            ValidatorNotAvailableError: If it is routed but has no implementation.
        """
        if name not in VALIDATOR_GRANULARITY:
            raise UnknownValidatorError(name)
        cls = self._classes.get(name)
        if cls is None:
            raise ValidatorNotAvailableError(name)
        return cls()

    def list_names(self) -> list[str]:
        return sorted(self._classes)

    def clear(self) -> None:
        """Clear all registered validators. Primarily for testing."""
        self._classes.clear()

    def __len__(self) -> int:
        return len(self._classes)

    def __contains__(self, name: str) -> bool:
        return name in self._classes


# Module-level singleton instance
registry = ValidatorRegistry()


def register_validator(cls: V) -> V:
    """Decorator to register a validator class with the global registry.

    Usage:
        @register_validator
        class SentenceLengthValidator(BaseValidator):
            def __init__(self):
                super().__init__("SentenceLength")
    """
    registry.register(cls)
    return cls
