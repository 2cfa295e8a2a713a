"""
Tests for the SectionLength validator.

Tests cover:
- Default and configured maximum
- Running total across paragraphs, checked at each paragraph boundary
- Location hint (first header line)
- Malformed attributes
- Repeated validation with one configured instance
"""

from __future__ import annotations

import logging

import pytest

from docvalidator.config import ValidatorConfig
from docvalidator.errors import BadAttributeError
from docvalidator.model import Paragraph, Section, Sentence
from docvalidator.symbols import SymbolTable
from docvalidator.validators.section import (
    DEFAULT_MAX_SECTION_CHAR_NUMBER,
    SectionLengthValidator,
)

from .helpers import make_section, sentences_of_length


def _configured(table: SymbolTable, **attributes: str) -> SectionLengthValidator:
    validator = SectionLengthValidator()
    validator.load_configuration(ValidatorConfig("SectionLength", attributes), table)
    return validator


def _section(*paragraph_lengths: int, header: str = "Introduction") -> Section:
    return make_section(header, [sentences_of_length(n) for n in paragraph_lengths])


# =============================================================================
# Configuration Tests
# =============================================================================


@pytest.mark.evergreen
class TestSectionLengthConfiguration:
    """Verify attribute handling."""

    def test_default_maximum(self, default_table: SymbolTable, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="docvalidator.validators.base"):
            validator = _configured(default_table)
        assert validator.configured
        assert validator.max_char_number == DEFAULT_MAX_SECTION_CHAR_NUMBER == 1000
        assert "max_char_number was not set" in caplog.text

    def test_configured_maximum(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="50")
        assert validator.max_char_number == 50

    def test_unrelated_attributes_ignored(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="50", color="blue")
        assert validator.max_char_number == 50

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "-1"])
    def test_bad_attribute(self, default_table: SymbolTable, raw: str) -> None:
        validator = SectionLengthValidator()
        config = ValidatorConfig("SectionLength", {"max_char_number": raw})
        with pytest.raises(BadAttributeError) as exc_info:
            validator.load_configuration(config, default_table)
        assert exc_info.value.key == "max_char_number"
        assert not validator.configured

    def test_validate_requires_configuration(self) -> None:
        with pytest.raises(RuntimeError):
            SectionLengthValidator().validate(_section(5))


# =============================================================================
# Counting Tests
# =============================================================================


@pytest.mark.evergreen
class TestSectionLengthCounting:
    """Verify the running character total."""

    def test_under_limit_is_clean(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        assert validator.validate(_section(4, 6)) == []

    def test_exactly_at_limit_is_clean(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        assert validator.validate(_section(10)) == []

    def test_default_limit_on_short_section(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table)
        assert validator.validate(_section(60)) == []

    def test_configured_limit_on_same_section(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="50")
        errors = validator.validate(_section(60))
        assert len(errors) == 1

    def test_total_crosses_limit_in_second_paragraph(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        errors = validator.validate(_section(6, 5))

        assert len(errors) == 1
        error = errors[0]
        assert error.validator == "SectionLength"
        assert error.message == 'The number of the character exceeds the maximum "11".'
        assert error.location == "Introduction"

    def test_sentences_summed_within_paragraph(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        section = make_section("Intro", [sentences_of_length(4, 4, 4)])
        errors = validator.validate(section)
        assert [e.message for e in errors] == [
            'The number of the character exceeds the maximum "12".'
        ]

    def test_total_is_never_reset(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        errors = validator.validate(_section(11, 0, 3))

        # Once over, every later paragraph boundary reports again
        assert [e.message for e in errors] == [
            'The number of the character exceeds the maximum "11".',
            'The number of the character exceeds the maximum "11".',
            'The number of the character exceeds the maximum "14".',
        ]

    def test_adding_characters_never_removes_errors(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        base = validator.validate(_section(6, 5))
        longer = validator.validate(_section(6, 5, 2))
        assert len(longer) >= len(base)
        assert longer[: len(base)] == base

    def test_empty_section(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="0")
        assert validator.validate(Section(header_contents=("Empty",))) == []

    def test_missing_header_gives_empty_location(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="1")
        section = Section(paragraphs=(Paragraph((Sentence("abc"),)),))
        errors = validator.validate(section)
        assert len(errors) == 1
        assert errors[0].location == ""

    def test_only_first_header_line_used(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="1")
        section = Section(
            header_contents=("Title", "Subtitle"),
            paragraphs=make_section("x", [["abc"]]).paragraphs,
        )
        assert validator.validate(section)[0].location == "Title"

    def test_counts_code_points(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="5")
        section = make_section("見出し", [["日本語の文。"]])
        errors = validator.validate(section)
        assert [e.message for e in errors] == [
            'The number of the character exceeds the maximum "6".'
        ]
        assert errors[0].location == "見出し"


# =============================================================================
# Reuse Tests
# =============================================================================


@pytest.mark.evergreen
class TestSectionLengthReuse:
    """Verify that a configured instance can validate many sections."""

    def test_repeat_validation_is_identical(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        section = _section(6, 5)
        assert validator.validate(section) == validator.validate(section)

    def test_no_state_carried_between_sections(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        validator.validate(_section(9))
        assert validator.validate(_section(9)) == []

    def test_section_not_modified(self, default_table: SymbolTable) -> None:
        validator = _configured(default_table, max_char_number="10")
        section = _section(6, 5)
        validator.validate(section)
        assert [len(s) for s in section.iter_sentences()] == [6, 5]
