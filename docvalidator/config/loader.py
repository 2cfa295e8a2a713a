"""
Configuration file loading.

Reads a YAML document, checks its shape with pydantic models, and feeds the
result through a ConfigurationBuilder:

    lang: ja
    symbols:
      - name: COMMA
        value: "，"
        invalid: ["、"]
    validators:
      - name: SectionLength
        attributes:
          max_char_number: 500
      - name: SentenceLength
        children:
          - name: CommaNumber
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Dict, List, Mapping, Optional

import pydantic
import yaml
from pydantic import BaseModel, Field, field_validator

from docvalidator.config.configuration import Configuration, ConfigurationBuilder
from docvalidator.config.validator_config import ValidatorConfig
from docvalidator.errors import ConfigFileError

log = logging.getLogger(__name__)


# =============================================================================
# File Schema
# =============================================================================


NonEmptyStr = Annotated[str, Field(min_length=1)]


class SymbolEntry(BaseModel):
    """A symbol override or extension."""

    name: str = Field(description="Symbol name from the language vocabulary")
    value: Optional[NonEmptyStr] = Field(None, description="Replacement canonical character")
    invalid: List[NonEmptyStr] = Field(default_factory=list, description="Extra invalid variants")


class ValidatorEntry(BaseModel):
    """One validator config, possibly with nested children."""

    name: str
    attributes: Dict[str, str] = Field(default_factory=dict)
    children: List["ValidatorEntry"] = Field(default_factory=list)

    @field_validator("attributes", mode="before")
    @classmethod
    def _stringify_attributes(cls, value: Any) -> Any:
        # YAML scalars arrive typed; validators expect text
        if isinstance(value, Mapping):
            return {str(k): _scalar_to_str(v) for k, v in value.items()}
        return value

    def to_validator_config(self) -> ValidatorConfig:
        return ValidatorConfig(
            name=self.name,
            attributes=self.attributes,
            children=tuple(child.to_validator_config() for child in self.children),
        )


class ConfigDocument(BaseModel):
    """Top-level configuration file."""

    lang: str = "en"
    symbols: List[SymbolEntry] = Field(default_factory=list)
    validators: List[ValidatorEntry] = Field(default_factory=list)


ValidatorEntry.model_rebuild()


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


# =============================================================================
# Loading
# =============================================================================


def config_from_mapping(data: Mapping[str, Any]) -> Configuration:
    """Build a Configuration from already-parsed configuration data.

    Raises:
        ConfigFileError: If the data does not match the expected schema.
        ConfigError: For unknown languages, symbols or validator names.
    """
    try:
        document = ConfigDocument.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigFileError(f"Invalid configuration: {e}") from e

    builder = ConfigurationBuilder().set_language(document.lang)

    for entry in document.symbols:
        if entry.value is not None:
            builder.set_character(entry.name, entry.value)
        for variant in entry.invalid:
            builder.add_invalid_pattern(entry.name, variant)

    for entry in document.validators:
        builder.add_validation_config(entry.to_validator_config())

    return builder.build()


def parse_config(text: str) -> Configuration:
    """Build a Configuration from YAML text.

    An empty document yields the default configuration.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Configuration is not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigFileError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )
    return config_from_mapping(data)


def load_config_file(path: Path) -> Configuration:
    """Load a YAML configuration file.

    Raises:
        ConfigFileError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(f"Cannot read configuration file {path}: {e}") from e

    configuration = parse_config(text)
    log.info("Loaded configuration from %s", path)
    return configuration
