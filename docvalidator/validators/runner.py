"""
Validator runner: instantiates configured validators and walks a document.

Document rules run first, then each section in order: its section rules,
then for each paragraph its paragraph rules followed by sentence rules on
every sentence. Within one validator, findings for earlier nodes are always
reported earlier.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from docvalidator.config.configuration import Configuration, Granularity
from docvalidator.errors import ConfigError
from docvalidator.model import Document

from .base import ValidationError, Validator
from .registry import ValidatorRegistry, registry as default_registry

log = logging.getLogger(__name__)


# =============================================================================
# Result Types
# =============================================================================


@dataclass(frozen=True)
class ValidatorFailure:
    """A configured validator that could not be created or configured."""

    validator: str
    message: str


@dataclass
class ValidatorSet:
    """Configured validators grouped by granularity, in configuration order."""

    validators: dict[Granularity, list[Validator]] = field(
        default_factory=lambda: {granularity: [] for granularity in Granularity}
    )

    failures: list[ValidatorFailure] = field(default_factory=list)
    """Validators that failed to configure, in configuration order."""

    def for_granularity(self, granularity: Granularity) -> list[Validator]:
        return self.validators[granularity]

    def __len__(self) -> int:
        return sum(len(group) for group in self.validators.values())


@dataclass
class RunnerResult:
    """Aggregated findings from running a validator set over a document."""

    errors: list[ValidationError] = field(default_factory=list)
    """Findings in traversal order."""

    failures: list[ValidatorFailure] = field(default_factory=list)
    """Validators that were left out because their configuration failed."""

    @property
    def passed(self) -> bool:
        return not self.errors and not self.failures

    def errors_by_validator(self) -> dict[str, list[ValidationError]]:
        grouped: dict[str, list[ValidationError]] = defaultdict(list)
        for error in self.errors:
            grouped[error.validator].append(error)
        return dict(grouped)

    def summary(self) -> str:
        if self.passed:
            return "Validation PASSED - No errors found"

        lines = [f"Validation FAILED - {len(self.errors)} error(s)"]
        for name, errors in sorted(self.errors_by_validator().items()):
            lines.append(f"  {name}: {len(errors)}")
        if self.failures:
            lines.extend(["", "Validators not run:"])
            for failure in self.failures:
                lines.append(f"  {failure.validator}: {failure.message}")
        return "\n".join(lines)


# =============================================================================
# Validator Creation
# =============================================================================


def create_validators(
    configuration: Configuration,
    strict: bool = True,
    registry: ValidatorRegistry = default_registry,
) -> ValidatorSet:
    """Instantiate and configure one validator per ValidatorConfig.

    Args:
        configuration: Built configuration.
        strict: If True, the first configuration failure is raised. If False,
            the failing validator is left out and recorded in ``failures``.
        registry: Registry to instantiate from.

    Raises:
        ConfigError: In strict mode, for any validator that cannot be created
            or configured.
    """
    validator_set = ValidatorSet()
    table = configuration.symbol_table

    for granularity, config in configuration.all_configs():
        try:
            validator = registry.create(config.name)
            validator.load_configuration(config, table)
        except ConfigError as e:
            if strict:
                raise
            validator_set.failures.append(ValidatorFailure(config.name, str(e)))
            log.error("Skipping validator %s: %s", config.name, e)
            continue

        if validator.granularity is not granularity:
            log.warning(
                "Validator %s runs on %s but was configured under %s",
                validator.name, validator.granularity.value, granularity.value,
            )
        validator_set.validators[validator.granularity].append(validator)
        log.debug("Configured validator %s", validator.name)

    return validator_set


# =============================================================================
# Runner
# =============================================================================


def run_validators(document: Document, validators: ValidatorSet) -> RunnerResult:
    """Run a configured validator set over ``document``."""
    result = RunnerResult(failures=list(validators.failures))
    errors = result.errors

    for validator in validators.for_granularity(Granularity.DOCUMENT):
        errors.extend(validator.validate(document))

    section_validators = validators.for_granularity(Granularity.SECTION)
    paragraph_validators = validators.for_granularity(Granularity.PARAGRAPH)
    sentence_validators = validators.for_granularity(Granularity.SENTENCE)

    for section in document.sections:
        for validator in section_validators:
            errors.extend(validator.validate(section))
        for paragraph in section.paragraphs:
            for validator in paragraph_validators:
                errors.extend(validator.validate(paragraph))
            for sentence in paragraph.sentences:
                for validator in sentence_validators:
                    errors.extend(validator.validate(sentence))

    log.info(
        "Validated %s: %d error(s) from %d validator(s)",
        document.file_name or "document", len(errors), len(validators),
    )
    return result


def validate_document(
    document: Document,
    configuration: Configuration,
    strict: bool = True,
) -> RunnerResult:
    """Configure the validators of ``configuration`` and run them over ``document``.

    This is the main entry point for validating a document programmatically.
    """
    return run_validators(document, create_validators(configuration, strict=strict))
