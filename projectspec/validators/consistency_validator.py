"""Cross-Field Consistency Validator — rules that span sibling fields.

Classification pairing and enum membership are fatal. The tenancy and
compliance couplings are advisories: they are inferred from how the fields are
meant to be used together, so they are reported as warnings only.
"""

from enum import Enum
from typing import Optional

from projectspec.models.enums import BoundaryLayerType, MultiTenancy, StateComplexity, SystemType
from projectspec.models.input import ProjectSpec
from projectspec.validators.base import BaseValidator
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity
from projectspec.validators.reference_data import (
    ELEVATED_COMPLIANCE_LEVELS,
    ISOLATED_TENANCY_MODELS,
    ROOT_ENUM_FIELDS,
    TECH_STACK_ENUM_FIELDS,
    allowed_subtypes,
    enum_values,
)


class CrossFieldConsistencyValidator(BaseValidator):
    """Validates document-wide relationships between sibling fields."""

    @property
    def name(self) -> str:
        return "CrossFieldConsistencyValidator"

    def validate(self, spec: ProjectSpec) -> list[Finding]:
        errors = []

        errors.extend(self._check_classification(spec))
        errors.extend(self._check_enum_fields(spec))
        errors.extend(self._check_tenancy(spec))
        errors.extend(self._check_compliance(spec))
        errors.extend(self._check_state_complexity(spec))
        errors.extend(self._check_message_queue(spec))

        return errors

    def _membership(self, path: str, value: str, enum_cls: type[Enum]) -> Optional[Finding]:
        allowed = enum_values(enum_cls)
        if value in allowed:
            return None
        return self._error(
            path=path,
            kind=ErrorKind.CONSISTENCY,
            code=FindingCode.CONSIST_INVALID_ENUM,
            message=f"'{value}' is not a valid value for {path}",
            suggestion=f"Use one of: {', '.join(allowed)}",
        )

    # ── 1. MECE classification ──

    def _check_classification(self, spec: ProjectSpec) -> list[Finding]:
        invalid_type = self._membership("systemType", spec.system_type, SystemType)
        if invalid_type:
            # Without a known system type there is no subtype set to check against.
            return [invalid_type]

        system_type = SystemType(spec.system_type)
        allowed = allowed_subtypes(system_type)
        if spec.system_sub_type in allowed:
            return []

        return [self._error(
            path="systemSubType",
            kind=ErrorKind.CONSISTENCY,
            code=FindingCode.CONSIST_SUBTYPE_MISMATCH,
            message=(
                f"System subtype '{spec.system_sub_type}' does not belong to "
                f"system type '{system_type.value}'"
            ),
            suggestion=f"Use one of: {', '.join(allowed)}",
        )]

    # ── 2. Enum membership ──

    def _check_enum_fields(self, spec: ProjectSpec) -> list[Finding]:
        errors = []
        document = spec.model_dump(by_alias=True)

        for field, enum_cls in ROOT_ENUM_FIELDS.items():
            errors.append(self._membership(field, document[field], enum_cls))

        tech_stack = document.get("techStack")
        if tech_stack:
            for field, enum_cls in TECH_STACK_ENUM_FIELDS.items():
                if tech_stack.get(field) is not None:
                    errors.append(self._membership(f"techStack.{field}", tech_stack[field], enum_cls))

        for i, layer in enumerate(spec.boundary_layers or []):
            errors.append(self._membership(f"boundaryLayers[{i}].type", layer.type, BoundaryLayerType))

        isolation = spec.compliance.tenant_isolation if spec.compliance else None
        if isolation is not None:
            errors.append(self._membership("compliance.tenantIsolation.type", isolation.type, MultiTenancy))

        return [e for e in errors if e is not None]

    # ── 3. Tenancy ↔ isolation ──

    def _check_tenancy(self, spec: ProjectSpec) -> list[Finding]:
        errors = []
        isolation = spec.compliance.tenant_isolation if spec.compliance else None

        if spec.multi_tenancy in ISOLATED_TENANCY_MODELS and isolation is None:
            errors.append(self._error(
                path="compliance.tenantIsolation",
                kind=ErrorKind.CONSISTENCY,
                code=FindingCode.CONSIST_MISSING_TENANT_ISOLATION,
                severity=Severity.WARNING,
                message=(
                    f"multiTenancy is '{spec.multi_tenancy}' but no tenant isolation "
                    f"strategy is declared"
                ),
                suggestion="Add compliance.tenantIsolation with the isolation key (e.g. 'organizationId')",
            ))

        if isolation is not None and isolation.type != spec.multi_tenancy:
            errors.append(self._error(
                path="compliance.tenantIsolation.type",
                kind=ErrorKind.CONSISTENCY,
                code=FindingCode.CONSIST_TENANCY_MISMATCH,
                severity=Severity.WARNING,
                message=(
                    f"Tenant isolation type '{isolation.type}' differs from "
                    f"multiTenancy '{spec.multi_tenancy}'"
                ),
            ))

        return errors

    # ── 4. Compliance level ↔ sensitive data flags ──

    def _check_compliance(self, spec: ProjectSpec) -> list[Finding]:
        if spec.compliance_level not in ELEVATED_COMPLIANCE_LEVELS:
            return []

        errors = []
        compliance = spec.compliance

        if compliance is None or not (
            compliance.requires_audit_log or compliance.has_pii or compliance.has_financial_data
        ):
            errors.append(self._error(
                path="compliance",
                kind=ErrorKind.CONSISTENCY,
                code=FindingCode.CONSIST_COMPLIANCE_UNDECLARED,
                severity=Severity.WARNING,
                message=(
                    f"complianceLevel is '{spec.compliance_level}' but none of "
                    f"requiresAuditLog, hasPII, hasFinancialData is set"
                ),
                suggestion="Declare which compliance requirements apply",
            ))

        if compliance is not None and compliance.has_financial_data and not compliance.regulatory_frameworks:
            errors.append(self._error(
                path="compliance.regulatoryFrameworks",
                kind=ErrorKind.CONSISTENCY,
                code=FindingCode.CONSIST_MISSING_FRAMEWORKS,
                severity=Severity.WARNING,
                message="Financial data is handled but no regulatory framework is declared",
                suggestion="List the applicable frameworks (e.g. 'PCI-DSS', 'FISC')",
            ))

        return errors

    # ── 5. Advisories on the secondary dimensions ──

    def _check_state_complexity(self, spec: ProjectSpec) -> list[Finding]:
        if spec.state_complexity != StateComplexity.STATELESS.value:
            return []

        stateful = [entity.english_name for _, entity in self._iter_entities(spec) if entity.has_state_transition]
        if not stateful:
            return []

        return [self._error(
            path="stateComplexity",
            kind=ErrorKind.CONSISTENCY,
            code=FindingCode.CONSIST_STATELESS_WITH_STATE_MACHINE,
            severity=Severity.WARNING,
            message=(
                f"stateComplexity is 'stateless' but entities declare state machines: "
                f"{', '.join(stateful)}"
            ),
        )]

    def _check_message_queue(self, spec: ProjectSpec) -> list[Finding]:
        if spec.system_type != SystemType.EVENT_DRIVEN.value or spec.tech_stack is None:
            return []
        if spec.tech_stack.message_queue is not None:
            return []

        return [self._error(
            path="techStack.messageQueue",
            kind=ErrorKind.CONSISTENCY,
            code=FindingCode.CONSIST_EVENT_DRIVEN_NO_QUEUE,
            severity=Severity.WARNING,
            message="Event-driven system declares a tech stack without a message queue",
            suggestion="Set techStack.messageQueue",
        )]
