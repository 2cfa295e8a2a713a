"""
Configuration management.

Usage:
    from docvalidator.config import ConfigurationBuilder, ValidatorConfig

    configuration = (
        ConfigurationBuilder()
        .set_language("en")
        .add_validation_config(ValidatorConfig("SectionLength"))
        .build()
    )
"""

from .configuration import (
    VALIDATOR_GRANULARITY,
    Configuration,
    ConfigurationBuilder,
    Granularity,
    granularity_of,
)
from .loader import config_from_mapping, load_config_file, parse_config
from .validator_config import ValidatorConfig

__all__ = [
    "ValidatorConfig",
    "Granularity",
    "VALIDATOR_GRANULARITY",
    "granularity_of",
    "Configuration",
    "ConfigurationBuilder",
    "config_from_mapping",
    "parse_config",
    "load_config_file",
]
