"""Normalized Model Builder — validate, then resolve the document into its canonical model.

The builder never returns a partial result: either a complete NormalizedProject
(with any warnings), or the complete list of findings and no model.

Usage:
    result = normalize(document)
    if result.ok:
        project = result.model
    else:
        for finding in result.findings: ...
"""

import time
from typing import Any, Optional

import structlog
from pydantic import BaseModel, Field

from projectspec.config import Settings
from projectspec.exceptions import DocumentInvalidError
from projectspec.models.enums import SystemType
from projectspec.models.input import DomainSpec, EntitySpec, ProjectSpec
from projectspec.models.normalized import (
    DataIntensiveClassification,
    EventDrivenClassification,
    LibraryClassification,
    NormalizedBoundaryLayer,
    NormalizedChecklist,
    NormalizedCompliance,
    NormalizedDomain,
    NormalizedEntity,
    NormalizedProject,
    NormalizedQuickCommands,
    NormalizedState,
    NormalizedSubdomain,
    NormalizedTechStack,
    NormalizedTenantIsolation,
    NormalizedTransition,
    RequestResponseClassification,
    StatefulClassification,
)
from projectspec.validators.engine import ValidationEngine
from projectspec.validators.models import Finding, ValidationReport

logger = structlog.get_logger()

CLASSIFICATION_BY_SYSTEM_TYPE = {
    SystemType.REQUEST_RESPONSE: RequestResponseClassification,
    SystemType.EVENT_DRIVEN: EventDrivenClassification,
    SystemType.STATEFUL: StatefulClassification,
    SystemType.LIBRARY: LibraryClassification,
    SystemType.DATA_INTENSIVE: DataIntensiveClassification,
}


class NormalizationResult(BaseModel):
    """Outcome of a build: a model plus warnings, or findings only."""

    model: Optional[NormalizedProject] = None
    report: ValidationReport = Field(default_factory=lambda: ValidationReport.build([]))

    @property
    def ok(self) -> bool:
        return self.model is not None

    @property
    def findings(self) -> list[Finding]:
        return self.report.findings

    def unwrap(self) -> NormalizedProject:
        """Return the model, or raise DocumentInvalidError with every fatal finding."""
        if self.model is None:
            raise DocumentInvalidError(self.report.fatal)
        return self.model


class NormalizedModelBuilder:
    """Top-level entry point: runs the validation engine, then builds the canonical model."""

    def __init__(self, engine: Optional[ValidationEngine] = None, settings: Optional[Settings] = None):
        self.engine = engine or ValidationEngine(settings=settings)

    def build(self, document: Any) -> NormalizationResult:
        start_time = time.perf_counter()

        spec, report = self.engine.run(document)
        if spec is None or not report.passed:
            logger.info(
                "normalization_rejected",
                fatal=report.summary["fatal"],
                warning=report.summary["warning"],
            )
            return NormalizationResult(report=report)

        project = self.from_spec(spec)

        logger.info(
            "normalization_complete",
            project=project.project_name,
            domains=len(project.domains),
            entities=project.entity_count,
            warnings=report.summary["warning"],
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return NormalizationResult(model=project, report=report)

    # ── Conversion ──

    def from_spec(self, spec: ProjectSpec) -> NormalizedProject:
        """Convert a spec that passed validation. Not safe on unvalidated input."""
        system_type = SystemType(spec.system_type)
        classification = CLASSIFICATION_BY_SYSTEM_TYPE[system_type](system_sub_type=spec.system_sub_type)

        return NormalizedProject(
            project_name=spec.project_name,
            project_description=spec.project_description,
            classification=classification,
            deployment=spec.deployment,
            state_complexity=spec.state_complexity,
            multi_tenancy=spec.multi_tenancy,
            compliance_level=spec.compliance_level,
            domains=tuple(self._domain(domain) for domain in spec.domains),
            tech_stack=self._tech_stack(spec),
            quick_commands=self._quick_commands(spec),
            boundary_layers=tuple(
                NormalizedBoundaryLayer(
                    type=layer.type,
                    naming_pattern=layer.naming_pattern,
                    responsibility=layer.responsibility,
                    examples=tuple(layer.examples),
                )
                for layer in spec.boundary_layers or []
            ),
            compliance=self._compliance(spec),
            value_objects=tuple(spec.value_objects or []),
            custom_checklist=tuple(
                NormalizedChecklist(category=item.category, items=tuple(item.items))
                for item in spec.custom_checklist or []
            ),
        )

    def _domain(self, domain: DomainSpec) -> NormalizedDomain:
        return NormalizedDomain(
            japanese_name=domain.japanese_name,
            english_name=domain.english_name,
            subdomains=tuple(
                NormalizedSubdomain(
                    japanese_name=s.japanese_name,
                    english_name=s.english_name,
                    description=s.description,
                )
                for s in domain.subdomains
            ),
            entities=tuple(self._entity(entity, domain.english_name) for entity in domain.entities),
        )

    def _entity(self, entity: EntitySpec, domain_name: str) -> NormalizedEntity:
        states = tuple(
            NormalizedState(
                japanese_name=s.japanese_name,
                english_name=s.english_name,
                description=s.description,
            )
            for s in entity.states or []
        )
        by_name = {state.english_name: state for state in states}

        # Endpoints resolve to the entity's own state objects.
        transitions = tuple(
            NormalizedTransition(
                source=by_name[t.from_],
                target=by_name[t.to],
                action=t.action,
                command_class=t.command_class,
            )
            for t in entity.transitions or []
        )

        return NormalizedEntity(
            japanese_name=entity.japanese_name,
            english_name=entity.english_name,
            domain_name=domain_name,
            has_state_transition=entity.has_state_transition,
            states=states,
            transitions=transitions,
        )

    def _tech_stack(self, spec: ProjectSpec) -> Optional[NormalizedTechStack]:
        if spec.tech_stack is None:
            return None
        return NormalizedTechStack(**spec.tech_stack.model_dump())

    def _quick_commands(self, spec: ProjectSpec) -> Optional[NormalizedQuickCommands]:
        if spec.quick_commands is None:
            return None
        fields = spec.quick_commands.model_dump(exclude={"custom"})
        custom = tuple(sorted((spec.quick_commands.custom or {}).items()))
        return NormalizedQuickCommands(**fields, custom=custom)

    def _compliance(self, spec: ProjectSpec) -> Optional[NormalizedCompliance]:
        compliance = spec.compliance
        if compliance is None:
            return None

        isolation = None
        if compliance.tenant_isolation is not None:
            isolation = NormalizedTenantIsolation(
                type=compliance.tenant_isolation.type,
                isolation_key=compliance.tenant_isolation.isolation_key,
            )

        return NormalizedCompliance(
            requires_audit_log=compliance.requires_audit_log,
            has_pii=compliance.has_pii,
            has_financial_data=compliance.has_financial_data,
            regulatory_frameworks=tuple(compliance.regulatory_frameworks or []),
            tenant_isolation=isolation,
        )


def normalize(document: Any, settings: Optional[Settings] = None) -> NormalizationResult:
    """Validate ``document`` and build its canonical model when it has no fatal findings."""
    return NormalizedModelBuilder(settings=settings).build(document)
