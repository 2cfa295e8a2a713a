"""
Shared pytest fixtures for docvalidator tests.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
"""

from __future__ import annotations

import pytest

from docvalidator.config import Configuration, ConfigurationBuilder, ValidatorConfig
from docvalidator.model import Document
from docvalidator.symbols import SymbolTable, load_defaults

from .helpers import make_section


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )


# =============================================================================
# Documents
# =============================================================================


@pytest.fixture
def sample_document() -> Document:
    """Two sections; the second has a long sentence and a comma-heavy one.

    Sentence lengths: "Overview" 10 + 8, "Details" 55 then 14.
    """
    return Document(
        sections=(
            make_section("Overview", [["Short one.", "Another."]]),
            make_section(
                "Details",
                [
                    ["This sentence is clearly longer than thirty characters."],
                    ["a, b, c, d, e."],
                ],
            ),
        ),
        file_name="sample.txt",
    )


# =============================================================================
# Symbol Tables and Configurations
# =============================================================================


@pytest.fixture
def default_table() -> SymbolTable:
    return load_defaults("en")


@pytest.fixture
def japanese_table() -> SymbolTable:
    return load_defaults("ja")


@pytest.fixture
def builder() -> ConfigurationBuilder:
    return ConfigurationBuilder()


@pytest.fixture
def english_configuration() -> Configuration:
    return (
        ConfigurationBuilder()
        .set_language("en")
        .add_validation_config(ValidatorConfig("MaxSectionNumber", {"max_section_num": "1"}))
        .add_validation_config(ValidatorConfig("SectionLength", {"max_char_number": "40"}))
        .add_validation_config(ValidatorConfig("SentenceLength"))
        .add_validation_config(ValidatorConfig("CommaNumber"))
        .build()
    )
