"""Reference data — the static lookup tables the cross-field rules consult.

The MECE table is the single source of truth for which subtypes belong to
which system type; it is derived from the per-type subtype enums.
"""

from enum import Enum

from projectspec.models.enums import (
    ComplianceLevel,
    DataIntensiveSubType,
    DeploymentModel,
    EventDrivenSubType,
    Language,
    LibrarySubType,
    MessageQueue,
    MultiTenancy,
    PackageManager,
    RequestResponseSubType,
    StatefulSubType,
    StateComplexity,
    SystemType,
)

# ──────────────────────────────────────────────────────────────────────
# MECE CLASSIFICATION (system type → its closed subtype enum)
# ──────────────────────────────────────────────────────────────────────

SUBTYPES_BY_SYSTEM_TYPE: dict[SystemType, type[Enum]] = {
    SystemType.REQUEST_RESPONSE: RequestResponseSubType,
    SystemType.EVENT_DRIVEN: EventDrivenSubType,
    SystemType.STATEFUL: StatefulSubType,
    SystemType.LIBRARY: LibrarySubType,
    SystemType.DATA_INTENSIVE: DataIntensiveSubType,
}


def allowed_subtypes(system_type: SystemType) -> list[str]:
    return [member.value for member in SUBTYPES_BY_SYSTEM_TYPE[system_type]]


# ──────────────────────────────────────────────────────────────────────
# ENUM MEMBERSHIP (dotted path → closed vocabulary)
# ──────────────────────────────────────────────────────────────────────

ROOT_ENUM_FIELDS: dict[str, type[Enum]] = {
    "deployment": DeploymentModel,
    "stateComplexity": StateComplexity,
    "multiTenancy": MultiTenancy,
    "complianceLevel": ComplianceLevel,
}

TECH_STACK_ENUM_FIELDS: dict[str, type[Enum]] = {
    "language": Language,
    "packageManager": PackageManager,
    "messageQueue": MessageQueue,
}


# ──────────────────────────────────────────────────────────────────────
# COUPLING RULES
# ──────────────────────────────────────────────────────────────────────

# Tenancy models that expect an explicit isolation strategy
ISOLATED_TENANCY_MODELS: set[str] = {
    MultiTenancy.LOGICAL.value,
    MultiTenancy.PHYSICAL.value,
    MultiTenancy.HYBRID.value,
}

# Compliance levels that expect at least one sensitive-data flag
ELEVATED_COMPLIANCE_LEVELS: set[str] = {
    ComplianceLevel.REGULATED.value,
    ComplianceLevel.HIGH_SECURITY.value,
}


def enum_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]
