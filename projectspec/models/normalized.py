"""Canonical project model — the validated, cross-referenced tree.

Every model here is frozen. Transitions hold the entity's own NormalizedState
objects as source/target (the same instances, not copies), and the project
keeps flat indices of domains and entities for O(1) lookup by name.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_serializer

from projectspec.models.enums import (
    BoundaryLayerType,
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
from projectspec.state_graph import StateGraph


class CanonicalModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Classification (one variant per system type) ──


class RequestResponseClassification(CanonicalModel):
    system_type: Literal[SystemType.REQUEST_RESPONSE] = SystemType.REQUEST_RESPONSE
    system_sub_type: RequestResponseSubType


class EventDrivenClassification(CanonicalModel):
    system_type: Literal[SystemType.EVENT_DRIVEN] = SystemType.EVENT_DRIVEN
    system_sub_type: EventDrivenSubType


class StatefulClassification(CanonicalModel):
    system_type: Literal[SystemType.STATEFUL] = SystemType.STATEFUL
    system_sub_type: StatefulSubType


class LibraryClassification(CanonicalModel):
    system_type: Literal[SystemType.LIBRARY] = SystemType.LIBRARY
    system_sub_type: LibrarySubType


class DataIntensiveClassification(CanonicalModel):
    system_type: Literal[SystemType.DATA_INTENSIVE] = SystemType.DATA_INTENSIVE
    system_sub_type: DataIntensiveSubType


Classification = Annotated[
    Union[
        RequestResponseClassification,
        EventDrivenClassification,
        StatefulClassification,
        LibraryClassification,
        DataIntensiveClassification,
    ],
    Field(discriminator="system_type"),
]


# ── Domain model ──


class NormalizedState(CanonicalModel):
    japanese_name: str
    english_name: str
    description: str


class NormalizedTransition(CanonicalModel):
    source: NormalizedState
    target: NormalizedState
    action: str
    command_class: Optional[str] = None

    @field_serializer("source", "target")
    def _serialize_state(self, state: NormalizedState) -> str:
        return state.english_name


class NormalizedEntity(CanonicalModel):
    japanese_name: str
    english_name: str
    domain_name: str
    has_state_transition: bool
    states: tuple[NormalizedState, ...] = ()
    transitions: tuple[NormalizedTransition, ...] = ()

    _states_by_name: dict[str, NormalizedState] = PrivateAttr(default_factory=dict)
    _graph: Optional[StateGraph[NormalizedTransition]] = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        self._states_by_name = {state.english_name: state for state in self.states}
        self._graph = StateGraph.build(
            self._states_by_name,
            ((t.source.english_name, t.target.english_name, t) for t in self.transitions),
        )

    def state(self, name: str) -> NormalizedState:
        return self._states_by_name[name]

    def outgoing(self, name: str) -> list[NormalizedTransition]:
        """Transitions leaving ``name``, in declaration order."""
        return self._graph.outgoing(name)

    def next_states(self, name: str) -> list[NormalizedState]:
        return [self._states_by_name[target] for target in self._graph.successors(name)]

    @property
    def initial_states(self) -> list[NormalizedState]:
        return [self._states_by_name[s] for s in self._graph.initial_states()]

    @property
    def terminal_states(self) -> list[NormalizedState]:
        return [self._states_by_name[s] for s in self._graph.terminal_states()]


class NormalizedSubdomain(CanonicalModel):
    japanese_name: str
    english_name: str
    description: str


class NormalizedDomain(CanonicalModel):
    japanese_name: str
    english_name: str
    subdomains: tuple[NormalizedSubdomain, ...] = ()
    entities: tuple[NormalizedEntity, ...] = ()


# ── Leaf configuration ──


class NormalizedBoundaryLayer(CanonicalModel):
    type: BoundaryLayerType
    naming_pattern: str
    responsibility: str
    examples: tuple[str, ...] = ()


class NormalizedTechStack(CanonicalModel):
    language: Language
    framework: Optional[str] = None
    database: Optional[str] = None
    package_manager: Optional[PackageManager] = None
    message_queue: Optional[MessageQueue] = None


class NormalizedTenantIsolation(CanonicalModel):
    type: MultiTenancy
    isolation_key: str


class NormalizedCompliance(CanonicalModel):
    requires_audit_log: bool
    has_pii: bool
    has_financial_data: bool
    regulatory_frameworks: tuple[str, ...] = ()
    tenant_isolation: Optional[NormalizedTenantIsolation] = None


class NormalizedQuickCommands(CanonicalModel):
    dev: str
    test: str
    test_unit: Optional[str] = None
    test_integration: Optional[str] = None
    lint: str
    typecheck: str
    format: Optional[str] = None
    db_migrate: Optional[str] = None
    build: Optional[str] = None
    custom: tuple[tuple[str, str], ...] = ()


class NormalizedChecklist(CanonicalModel):
    category: str
    items: tuple[str, ...]


# ── Root ──


class NormalizedProject(CanonicalModel):
    """The artifact handed to the rendering step."""

    project_name: str
    project_description: str
    classification: Classification
    deployment: DeploymentModel
    state_complexity: StateComplexity
    multi_tenancy: MultiTenancy
    compliance_level: ComplianceLevel
    domains: tuple[NormalizedDomain, ...]

    tech_stack: Optional[NormalizedTechStack] = None
    quick_commands: Optional[NormalizedQuickCommands] = None
    boundary_layers: tuple[NormalizedBoundaryLayer, ...] = ()
    compliance: Optional[NormalizedCompliance] = None
    value_objects: tuple[str, ...] = ()
    custom_checklist: tuple[NormalizedChecklist, ...] = ()

    _domains_by_name: dict[str, NormalizedDomain] = PrivateAttr(default_factory=dict)
    _entities_by_name: dict[str, NormalizedEntity] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        self._domains_by_name = {domain.english_name: domain for domain in self.domains}
        self._entities_by_name = {
            entity.english_name: entity for domain in self.domains for entity in domain.entities
        }

    @property
    def system_type(self) -> SystemType:
        return self.classification.system_type

    def domain(self, name: str) -> NormalizedDomain:
        return self._domains_by_name[name]

    def entity(self, name: str) -> NormalizedEntity:
        return self._entities_by_name[name]

    def domain_of(self, entity_name: str) -> NormalizedDomain:
        return self._domains_by_name[self._entities_by_name[entity_name].domain_name]

    @property
    def domain_names(self) -> list[str]:
        return list(self._domains_by_name)

    @property
    def entity_names(self) -> list[str]:
        return list(self._entities_by_name)

    @property
    def entity_count(self) -> int:
        return len(self._entities_by_name)
