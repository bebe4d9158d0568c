"""Validation models — finding kinds, severity levels, codes and report structure.

All validation is deterministic: same input → same output.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Finding severity levels."""

    FATAL = "fatal"      # Blocks normalization
    WARNING = "warning"  # Surfaced alongside a normalized model


class ErrorKind(str, Enum):
    """Finding taxonomy. Each validator owns one or two kinds."""

    STRUCTURAL = "StructuralError"
    NAMING = "NamingError"
    STATE_MACHINE = "StateMachineError"
    REFERENTIAL_INTEGRITY = "ReferentialIntegrityError"
    CONSISTENCY = "ConsistencyError"
    REACHABILITY = "ReachabilityWarning"


class FindingCode(str, Enum):
    """Deterministic codes for every validation rule.

    Naming convention: CATEGORY_SPECIFIC_ISSUE
    """

    # Structural errors
    STRUCT_MISSING_FIELD = "STRUCT_MISSING_FIELD"
    STRUCT_INVALID_TYPE = "STRUCT_INVALID_TYPE"
    STRUCT_UNKNOWN_FIELD = "STRUCT_UNKNOWN_FIELD"
    VALIDATOR_CRASHED = "VALIDATOR_CRASHED"

    # Naming errors
    NAMING_EMPTY = "NAMING_EMPTY"
    NAMING_LEADING_DIGIT = "NAMING_LEADING_DIGIT"
    NAMING_INVALID_CHARACTER = "NAMING_INVALID_CHARACTER"

    # State machine errors
    STATE_UNEXPECTED_STATES = "STATE_UNEXPECTED_STATES"
    STATE_UNEXPECTED_TRANSITIONS = "STATE_UNEXPECTED_TRANSITIONS"
    STATE_MISSING_STATES = "STATE_MISSING_STATES"
    STATE_SINGLE_STATE = "STATE_SINGLE_STATE"
    STATE_MISSING_TRANSITIONS = "STATE_MISSING_TRANSITIONS"
    STATE_AMBIGUOUS_TRANSITION = "STATE_AMBIGUOUS_TRANSITION"
    STATE_ISOLATED = "STATE_ISOLATED"
    STATE_MULTIPLE_ENTRY_POINTS = "STATE_MULTIPLE_ENTRY_POINTS"

    # Reachability advisories
    REACH_NO_ENTRY_POINT = "REACH_NO_ENTRY_POINT"
    REACH_UNREACHABLE_STATE = "REACH_UNREACHABLE_STATE"

    # Referential integrity errors
    REF_UNKNOWN_STATE = "REF_UNKNOWN_STATE"
    REF_DUPLICATE_IDENTIFIER = "REF_DUPLICATE_IDENTIFIER"
    REF_EMPTY_ISOLATION_KEY = "REF_EMPTY_ISOLATION_KEY"
    REF_EMPTY_CHECKLIST = "REF_EMPTY_CHECKLIST"

    # Consistency errors
    CONSIST_INVALID_ENUM = "CONSIST_INVALID_ENUM"
    CONSIST_SUBTYPE_MISMATCH = "CONSIST_SUBTYPE_MISMATCH"
    CONSIST_MISSING_TENANT_ISOLATION = "CONSIST_MISSING_TENANT_ISOLATION"
    CONSIST_TENANCY_MISMATCH = "CONSIST_TENANCY_MISMATCH"
    CONSIST_COMPLIANCE_UNDECLARED = "CONSIST_COMPLIANCE_UNDECLARED"
    CONSIST_MISSING_FRAMEWORKS = "CONSIST_MISSING_FRAMEWORKS"
    CONSIST_STATELESS_WITH_STATE_MACHINE = "CONSIST_STATELESS_WITH_STATE_MACHINE"
    CONSIST_EVENT_DRIVEN_NO_QUEUE = "CONSIST_EVENT_DRIVEN_NO_QUEUE"


class Finding(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    path: str                          # Dotted path, e.g. domains[1].entities[0].englishName
    kind: ErrorKind
    severity: Severity
    code: FindingCode
    message: str
    suggestion: Optional[str] = None   # How to fix it

    @property
    def is_fatal(self) -> bool:
        return self.severity == Severity.FATAL


class ValidationReport(BaseModel):
    """Complete validation report — the output of the validation engine."""

    passed: bool = Field(description="True if no fatal findings")
    summary: dict = Field(
        description="Count of findings by severity",
        default_factory=lambda: {"fatal": 0, "warning": 0},
    )
    findings: list[Finding] = Field(default_factory=list)

    @classmethod
    def build(cls, findings: list[Finding]) -> "ValidationReport":
        """Build a report from already aggregated findings."""
        summary = {"fatal": 0, "warning": 0}
        for finding in findings:
            summary[finding.severity] += 1

        return cls(
            passed=summary["fatal"] == 0,
            summary=summary,
            findings=list(findings),
        )

    @property
    def fatal(self) -> list[Finding]:
        return [f for f in self.findings if f.is_fatal]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if not f.is_fatal]
