"""Project spec validators — deterministic checks over an input document.

Usage:
    from projectspec.validators import ValidationEngine

    report = ValidationEngine().validate(document)
    if not report.passed:
        # report.findings lists every defect, fatal first
"""

from projectspec.validators.aggregator import ErrorAggregator
from projectspec.validators.consistency_validator import CrossFieldConsistencyValidator
from projectspec.validators.engine import ValidationEngine
from projectspec.validators.identifier_validator import IdentifierValidator
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity, ValidationReport
from projectspec.validators.reference_validator import ReferentialIntegrityChecker
from projectspec.validators.state_machine_validator import StateMachineValidator
from projectspec.validators.structure_validator import StructureValidator

__all__ = [
    "ValidationEngine",
    "ErrorAggregator",
    "StructureValidator",
    "IdentifierValidator",
    "StateMachineValidator",
    "CrossFieldConsistencyValidator",
    "ReferentialIntegrityChecker",
    "ValidationReport",
    "Finding",
    "ErrorKind",
    "FindingCode",
    "Severity",
]
