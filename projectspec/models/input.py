"""Input document models — the shape of a raw project spec.

These models only enforce structure: required keys, scalar types and nesting.
Enumerated fields are kept as plain strings so that membership problems are
reported by the cross-field validator with a proper path and severity.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


class InputModel(BaseModel):
    """Base for all input models: camelCase keys, no unknown keys, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        frozen=True,
    )


# ── Domain model ──


class StateSpec(InputModel):
    japanese_name: StrictStr
    english_name: StrictStr
    description: StrictStr


class TransitionSpec(InputModel):
    from_: StrictStr = Field(alias="from")
    to: StrictStr
    action: StrictStr
    command_class: Optional[StrictStr] = None


class EntitySpec(InputModel):
    japanese_name: StrictStr
    english_name: StrictStr
    has_state_transition: StrictBool
    states: Optional[list[StateSpec]] = None
    transitions: Optional[list[TransitionSpec]] = None


class SubdomainSpec(InputModel):
    japanese_name: StrictStr
    english_name: StrictStr
    description: StrictStr


class DomainSpec(InputModel):
    japanese_name: StrictStr
    english_name: StrictStr
    subdomains: list[SubdomainSpec]
    entities: list[EntitySpec]


# ── Leaf configuration ──


class BoundaryLayerDefinition(InputModel):
    type: StrictStr
    naming_pattern: StrictStr
    responsibility: StrictStr
    examples: list[StrictStr]


class TechStackDefinition(InputModel):
    language: StrictStr
    framework: Optional[StrictStr] = None
    database: Optional[StrictStr] = None
    package_manager: Optional[StrictStr] = None
    message_queue: Optional[StrictStr] = None


class TenantIsolation(InputModel):
    type: StrictStr
    isolation_key: StrictStr


class ComplianceRequirements(InputModel):
    requires_audit_log: StrictBool
    has_pii: StrictBool = Field(alias="hasPII")
    has_financial_data: StrictBool
    regulatory_frameworks: Optional[list[StrictStr]] = None
    tenant_isolation: Optional[TenantIsolation] = None


class QuickCommands(InputModel):
    dev: StrictStr
    test: StrictStr
    test_unit: Optional[StrictStr] = None
    test_integration: Optional[StrictStr] = None
    lint: StrictStr
    typecheck: StrictStr
    format: Optional[StrictStr] = None
    db_migrate: Optional[StrictStr] = None
    build: Optional[StrictStr] = None
    custom: Optional[dict[StrictStr, StrictStr]] = None


class ChecklistCategory(InputModel):
    category: StrictStr
    items: list[StrictStr]


# ── Root document ──


class ProjectSpec(InputModel):
    """Root of the input document."""

    project_name: StrictStr
    project_description: StrictStr
    system_type: StrictStr
    system_sub_type: StrictStr
    domains: list[DomainSpec]

    deployment: StrictStr
    state_complexity: StrictStr
    multi_tenancy: StrictStr
    compliance_level: StrictStr

    tech_stack: Optional[TechStackDefinition] = None
    quick_commands: Optional[QuickCommands] = None

    boundary_layers: Optional[list[BoundaryLayerDefinition]] = None
    compliance: Optional[ComplianceRequirements] = None
    value_objects: Optional[list[StrictStr]] = None
    custom_checklist: Optional[list[ChecklistCategory]] = None
