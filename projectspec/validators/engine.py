"""Validation Engine — runs the structural gate and every validator, aggregates findings.

This is the main entry point for document validation.

Usage:
    engine = ValidationEngine()
    spec, report = engine.run(document)
    if not report.passed:
        # report.findings lists every defect
"""

import time
from typing import Any, Optional

import structlog

from projectspec.config import Settings, get_settings
from projectspec.models.input import ProjectSpec
from projectspec.validators.aggregator import ErrorAggregator, aggregate
from projectspec.validators.base import BaseValidator
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity, ValidationReport
from projectspec.validators.structure_validator import StructureValidator

# Import all validators
from projectspec.validators.identifier_validator import IdentifierValidator
from projectspec.validators.state_machine_validator import StateMachineValidator
from projectspec.validators.consistency_validator import CrossFieldConsistencyValidator
from projectspec.validators.reference_validator import ReferentialIntegrityChecker

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates all validators and produces a unified validation report.

    Design principles:
        - Deterministic: same input → same ordered findings
        - Collect-all: every validator runs, whatever the others found
        - Extensible: add validators without modifying engine
        - Observable: logs every validation run with timing
    """

    def __init__(
        self,
        validators: Optional[list[BaseValidator]] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
            settings: Validation policy. If None, uses environment settings.
        """
        self.settings = settings or get_settings()
        self.structure = StructureValidator()
        self.validators = validators if validators is not None else self._default_validators(self.settings)

    @staticmethod
    def _default_validators(settings: Settings) -> list[BaseValidator]:
        """Create the default validators. They are independent of each other."""
        return [
            IdentifierValidator(settings),
            StateMachineValidator(settings),
            CrossFieldConsistencyValidator(settings),
            ReferentialIntegrityChecker(settings),
        ]

    def run(self, document: Any) -> tuple[Optional[ProjectSpec], ValidationReport]:
        """Validate a raw document.

        Args:
            document: Mapping parsed from JSON/YAML by the caller

        Returns:
            (spec, report). ``spec`` is None when the structural gate failed.
        """
        start_time = time.perf_counter()

        spec, structural = self.structure.parse(document)
        if spec is None:
            report = ValidationReport.build(aggregate(structural))
            logger.info(
                "validation_complete",
                passed=False,
                structural_errors=len(structural),
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            return None, report

        aggregator = ErrorAggregator()
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                aggregator.add(validator.validate(spec))
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                )
                # Fatal, so normalization never runs past a crashed validator
                aggregator.add([Finding(
                    path=f"<{validator.name}>",
                    kind=ErrorKind.STRUCTURAL,
                    severity=Severity.FATAL,
                    code=FindingCode.VALIDATOR_CRASHED,
                    message=f"Validator '{validator.name}' crashed: {e}",
                )])
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 2)

        report = ValidationReport.build(aggregator.results())

        logger.info(
            "validation_complete",
            passed=report.passed,
            summary=report.summary,
            total_findings=len(aggregator),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            validator_timings=validator_timings,
        )

        return spec, report

    def validate(self, document: Any) -> ValidationReport:
        """Run all validators against the document and return only the report."""
        return self.run(document)[1]

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]
