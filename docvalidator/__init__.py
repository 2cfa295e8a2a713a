"""
docvalidator - rule-based inspection of prose documents.

Walks a Document -> Section -> Paragraph -> Sentence tree and applies
independently configurable validators, each encoding one structural or
lexical rule, collecting ValidationError findings.

Layout:

    docvalidator/
    ├── model.py       - Read-only document tree
    ├── symbols/       - Per-language symbol tables
    ├── config/        - ValidatorConfig, Configuration and its builder, YAML loading
    ├── validators/    - Validator contract, registry, built-in rules, runner
    └── errors.py      - Configuration errors

Usage:

    from docvalidator import ConfigurationBuilder, ValidatorConfig, validate_document

    configuration = (
        ConfigurationBuilder()
        .set_language("en")
        .add_validation_config(ValidatorConfig("SectionLength", {"max_char_number": "500"}))
        .build()
    )
    result = validate_document(document, configuration)
    print(result.summary())
"""

__version__ = "0.1.0"

from docvalidator.config import (
    Configuration,
    ConfigurationBuilder,
    Granularity,
    ValidatorConfig,
    load_config_file,
    parse_config,
)
from docvalidator.errors import (
    BadAttributeError,
    ConfigError,
    ConfigFileError,
    FrozenTableError,
    InvalidSymbolError,
    TableNotInitializedError,
    UnknownLanguageError,
    UnknownSymbolError,
    UnknownValidatorError,
    ValidatorNotAvailableError,
)
from docvalidator.model import Document, Paragraph, Section, Sentence
from docvalidator.symbols import Language, Symbol, SymbolTable, load_defaults
from docvalidator.validators import (
    BaseValidator,
    RunnerResult,
    ValidationError,
    Validator,
    create_validators,
    registry,
    run_validators,
    validate_document,
)

__all__ = [
    "__version__",
    # Model
    "Document",
    "Section",
    "Paragraph",
    "Sentence",
    # Symbols
    "Language",
    "Symbol",
    "SymbolTable",
    "load_defaults",
    # Configuration
    "ValidatorConfig",
    "Granularity",
    "Configuration",
    "ConfigurationBuilder",
    "load_config_file",
    "parse_config",
    # Validators
    "ValidationError",
    "Validator",
    "BaseValidator",
    "registry",
    "RunnerResult",
    "create_validators",
    "run_validators",
    "validate_document",
    # Errors
    "ConfigError",
    "UnknownLanguageError",
    "UnknownSymbolError",
    "UnknownValidatorError",
    "TableNotInitializedError",
    "BadAttributeError",
    "FrozenTableError",
    "InvalidSymbolError",
    "ValidatorNotAvailableError",
    "ConfigFileError",
]
