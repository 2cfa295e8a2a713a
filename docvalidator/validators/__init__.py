"""
Pluggable validator system.

Each rule implements the Validator protocol, usually by subclassing
BaseValidator, and registers itself under its routing-table name.

Usage:
    from docvalidator.validators import validate_document

    result = validate_document(document, configuration)
    for error in result.errors:
        print(error)
"""

from .base import BaseValidator, ValidationError, Validator
from .registry import ValidatorRegistry, register_validator, registry

# Importing the rule modules registers their validators
from .document import MaxSectionNumberValidator
from .section import (
    MaxParagraphNumberValidator,
    ParagraphStartWithValidator,
    SectionLengthValidator,
)
from .paragraph import MaxSentenceNumberValidator
from .sentence import (
    CommaNumberValidator,
    InvalidCharacterValidator,
    SentenceLengthValidator,
    WordNumberValidator,
)
from .runner import (
    RunnerResult,
    ValidatorFailure,
    ValidatorSet,
    create_validators,
    run_validators,
    validate_document,
)

__all__ = [
    # Base types
    "ValidationError",
    "Validator",
    "BaseValidator",
    # Registry
    "ValidatorRegistry",
    "registry",
    "register_validator",
    # Rules
    "MaxSectionNumberValidator",
    "SectionLengthValidator",
    "MaxParagraphNumberValidator",
    "ParagraphStartWithValidator",
    "MaxSentenceNumberValidator",
    "SentenceLengthValidator",
    "CommaNumberValidator",
    "WordNumberValidator",
    "InvalidCharacterValidator",
    # Runner
    "ValidatorFailure",
    "ValidatorSet",
    "RunnerResult",
    "create_validators",
    "run_validators",
    "validate_document",
]
