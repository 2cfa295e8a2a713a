"""
Tests for the validator registry.

Tests cover:
- Built-in validators registered on import
- Registration checks (protocol, routing table, duplicates)
- Instance creation for implemented, unimplemented and unknown names
"""

from __future__ import annotations

from typing import Any

import pytest

from docvalidator.config import VALIDATOR_GRANULARITY, Granularity, ValidatorConfig
from docvalidator.errors import UnknownValidatorError, ValidatorNotAvailableError
from docvalidator.symbols import SymbolTable
from docvalidator.validators.base import BaseValidator, ValidationError
from docvalidator.validators.registry import ValidatorRegistry, registry
from docvalidator.validators.section import SectionLengthValidator
from docvalidator.validators.sentence import SentenceLengthValidator

from .base_test import ValidatorPropertiesTestMixin


BUILT_IN = [
    "CommaNumber",
    "InvalidCharacter",
    "MaxParagraphNumber",
    "MaxSectionNumber",
    "MaxSentenceNumber",
    "ParagraphStartWith",
    "SectionLength",
    "SentenceLength",
    "WordNumber",
]


class _Unrouted:
    """Implements the protocol under a name the routing table lacks."""

    name = "SpellCheck"
    granularity = Granularity.SENTENCE
    configured = False

    def load_configuration(self, config: ValidatorConfig, symbol_table: SymbolTable) -> bool:
        return True

    def validate(self, node: Any) -> list[ValidationError]:
        return []


class _NotAValidator:
    pass


class _InvalidExpression(BaseValidator):
    def __init__(self) -> None:
        super().__init__("InvalidExpression")

    def check(self, node: Any) -> list[ValidationError]:
        return []


# =============================================================================
# Global Registry Tests
# =============================================================================


@pytest.mark.evergreen
class TestGlobalRegistry:
    """Verify the built-in validators."""

    def test_built_ins_registered(self) -> None:
        assert registry.list_names() == BUILT_IN

    def test_every_registered_name_is_routed(self) -> None:
        for name in registry.list_names():
            assert name in VALIDATOR_GRANULARITY

    @pytest.mark.parametrize("name", BUILT_IN)
    def test_created_granularity_matches_routing(self, name: str) -> None:
        assert registry.create(name).granularity is VALIDATOR_GRANULARITY[name]

    def test_create_returns_fresh_instances(self) -> None:
        first = registry.create("SentenceLength")
        second = registry.create("SentenceLength")
        assert first is not second
        assert not first.configured

    def test_routed_but_unimplemented(self) -> None:
        assert "InvalidExpression" not in registry
        with pytest.raises(ValidatorNotAvailableError) as exc_info:
            registry.create("InvalidExpression")
        assert exc_info.value.validator_name == "InvalidExpression"

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownValidatorError):
            registry.create("SpellCheck")


# =============================================================================
# Registration Tests
# =============================================================================


@pytest.mark.evergreen
class TestRegistration:
    """Verify registration on a private registry."""

    @pytest.fixture
    def local_registry(self) -> ValidatorRegistry:
        return ValidatorRegistry()

    def test_register_and_create(self, local_registry: ValidatorRegistry) -> None:
        local_registry.register(_InvalidExpression)
        assert "InvalidExpression" in local_registry
        assert len(local_registry) == 1
        assert local_registry.get("InvalidExpression") is _InvalidExpression
        assert isinstance(local_registry.create("InvalidExpression"), _InvalidExpression)

    def test_get_missing(self, local_registry: ValidatorRegistry) -> None:
        assert local_registry.get("SentenceLength") is None

    def test_duplicate_rejected(self, local_registry: ValidatorRegistry) -> None:
        local_registry.register(SentenceLengthValidator)
        with pytest.raises(ValueError, match="already registered"):
            local_registry.register(SentenceLengthValidator)

    def test_unrouted_name_rejected(self, local_registry: ValidatorRegistry) -> None:
        with pytest.raises(UnknownValidatorError):
            local_registry.register(_Unrouted)
        assert len(local_registry) == 0

    def test_non_validator_rejected(self, local_registry: ValidatorRegistry) -> None:
        with pytest.raises(TypeError, match="Validator protocol"):
            local_registry.register(_NotAValidator)

    def test_clear(self, local_registry: ValidatorRegistry) -> None:
        local_registry.register(SentenceLengthValidator)
        local_registry.clear()
        assert local_registry.list_names() == []


# =============================================================================
# Validator Properties
# =============================================================================


@pytest.mark.evergreen
class TestSectionLengthProperties(ValidatorPropertiesTestMixin):
    validator_name = "SectionLength"
    validator_granularity = Granularity.SECTION

    @pytest.fixture
    def validator(self) -> SectionLengthValidator:
        return SectionLengthValidator()


@pytest.mark.evergreen
class TestSentenceLengthProperties(ValidatorPropertiesTestMixin):
    validator_name = "SentenceLength"
    validator_granularity = Granularity.SENTENCE

    @pytest.fixture
    def validator(self) -> SentenceLengthValidator:
        return SentenceLengthValidator()
