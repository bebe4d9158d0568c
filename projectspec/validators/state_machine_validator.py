"""State Machine Validator — per-entity state/transition graph well-formedness.

Checks run in this order for every entity with hasStateTransition=true:

1. Dangling endpoints: every from/to names a declared state, checked whenever
   transitions exist. Any dangling endpoint, fewer than two states or no
   transitions stops the remaining checks for that entity.
2. Ambiguity: no two transitions leave the same state under the same action.
3. Isolation: no state without incoming and outgoing edges.
4. Reachability (advisory): every state reachable from some entry state.

Multiple entry states are legal unless ENTRY_POINT_POLICY is "single".
"""

from projectspec.models.input import EntitySpec, ProjectSpec, TransitionSpec
from projectspec.state_graph import StateGraph
from projectspec.validators.base import BaseValidator
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity

MIN_STATES = 2


class StateMachineValidator(BaseValidator):
    """Validates declared states and transitions of each entity."""

    @property
    def name(self) -> str:
        return "StateMachineValidator"

    def validate(self, spec: ProjectSpec) -> list[Finding]:
        errors = []

        for entity_path, entity in self._iter_entities(spec):
            if entity.has_state_transition:
                errors.extend(self._check_state_machine(entity_path, entity))
            else:
                errors.extend(self._check_no_state_machine(entity_path, entity))

        return errors

    # ── Conditional requirements ──

    def _check_no_state_machine(self, entity_path: str, entity: EntitySpec) -> list[Finding]:
        """hasStateTransition=false must not carry states or transitions."""
        errors = []

        if entity.states:
            errors.append(self._error(
                path=f"{entity_path}.states",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_UNEXPECTED_STATES,
                message=f"Entity '{entity.english_name}' declares states but hasStateTransition is false",
                suggestion="Set hasStateTransition to true or remove the states",
            ))
        if entity.transitions:
            errors.append(self._error(
                path=f"{entity_path}.transitions",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_UNEXPECTED_TRANSITIONS,
                message=f"Entity '{entity.english_name}' declares transitions but hasStateTransition is false",
                suggestion="Set hasStateTransition to true or remove the transitions",
            ))

        return errors

    def _check_state_machine(self, entity_path: str, entity: EntitySpec) -> list[Finding]:
        errors = []
        states = entity.states or []
        transitions = entity.transitions or []

        if not states:
            errors.append(self._error(
                path=f"{entity_path}.states",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_MISSING_STATES,
                message=f"Entity '{entity.english_name}' has hasStateTransition=true but no states",
                suggestion=f"Declare at least {MIN_STATES} states",
            ))
        elif len(states) < MIN_STATES:
            errors.append(self._error(
                path=f"{entity_path}.states",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_SINGLE_STATE,
                message=f"Entity '{entity.english_name}' declares a single state machine state",
                suggestion="A single-state entity has no transitions; set hasStateTransition to false",
            ))

        if not transitions:
            errors.append(self._error(
                path=f"{entity_path}.transitions",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_MISSING_TRANSITIONS,
                message=f"Entity '{entity.english_name}' has hasStateTransition=true but no transitions",
                suggestion="Declare at least one transition",
            ))

        declared = [state.english_name for state in states]

        dangling = self._check_endpoints(entity_path, set(declared), transitions)
        errors.extend(dangling)

        if dangling or len(states) < MIN_STATES or not transitions:
            return errors

        errors.extend(self._check_ambiguity(entity_path, transitions))

        graph: StateGraph[TransitionSpec] = StateGraph.build(
            declared, ((t.from_, t.to, t) for t in transitions)
        )
        errors.extend(self._check_isolation(entity_path, declared, graph))
        errors.extend(self._check_entry_points(entity_path, entity, declared, graph))

        return errors

    # ── Graph checks ──

    def _check_endpoints(
        self, entity_path: str, declared: set[str], transitions: list[TransitionSpec]
    ) -> list[Finding]:
        """Every from/to must name a declared state."""
        errors = []
        suggestion = f"Use one of: {', '.join(sorted(declared))}" if declared else "Declare the state first"

        for i, transition in enumerate(transitions):
            for field, value in (("from", transition.from_), ("to", transition.to)):
                if value in declared:
                    continue
                errors.append(self._error(
                    path=f"{entity_path}.transitions[{i}].{field}",
                    kind=ErrorKind.REFERENTIAL_INTEGRITY,
                    code=FindingCode.REF_UNKNOWN_STATE,
                    message=f"Transition '{transition.action}' references undeclared state '{value}'",
                    suggestion=suggestion,
                ))

        return errors

    def _check_ambiguity(self, entity_path: str, transitions: list[TransitionSpec]) -> list[Finding]:
        """No two transitions may leave the same state under the same action."""
        errors = []
        first_seen: dict[tuple[str, str], int] = {}

        for i, transition in enumerate(transitions):
            key = (transition.from_, transition.action)
            if key not in first_seen:
                first_seen[key] = i
                continue
            errors.append(self._error(
                path=f"{entity_path}.transitions[{i}]",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_AMBIGUOUS_TRANSITION,
                message=(
                    f"Ambiguous transition: action '{transition.action}' from state "
                    f"'{transition.from_}' is already declared at "
                    f"{entity_path}.transitions[{first_seen[key]}]"
                ),
                suggestion="Rename one of the actions or merge the transitions",
            ))

        return errors

    def _check_isolation(
        self, entity_path: str, declared: list[str], graph: StateGraph[TransitionSpec]
    ) -> list[Finding]:
        errors = []
        isolated = set(graph.isolated_states())

        for i, state in enumerate(declared):
            if state not in isolated:
                continue
            errors.append(self._error(
                path=f"{entity_path}.states[{i}]",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_ISOLATED,
                message=f"Isolated state: '{state}' has no incoming and no outgoing transitions",
                suggestion="Add a transition into or out of the state, or remove it",
            ))

        return errors

    def _check_entry_points(
        self,
        entity_path: str,
        entity: EntitySpec,
        declared: list[str],
        graph: StateGraph[TransitionSpec],
    ) -> list[Finding]:
        """Entry-point policy and advisory reachability."""
        errors = []
        initial = graph.initial_states()

        if self.settings.ENTRY_POINT_POLICY == "single" and len(initial) > 1:
            errors.append(self._error(
                path=f"{entity_path}.transitions",
                kind=ErrorKind.STATE_MACHINE,
                code=FindingCode.STATE_MULTIPLE_ENTRY_POINTS,
                message=(
                    f"Entity '{entity.english_name}' has {len(initial)} entry states "
                    f"({', '.join(initial)}) but a single entry state is required"
                ),
            ))

        if not self.settings.REPORT_REACHABILITY:
            return errors

        if not initial:
            errors.append(self._error(
                path=f"{entity_path}.transitions",
                kind=ErrorKind.REACHABILITY,
                code=FindingCode.REACH_NO_ENTRY_POINT,
                severity=Severity.WARNING,
                message=f"Entity '{entity.english_name}' has no entry state: every state has an incoming transition",
            ))

        unreachable = set(graph.unreachable_states(initial))
        for i, state in enumerate(declared):
            if state not in unreachable:
                continue
            errors.append(self._error(
                path=f"{entity_path}.states[{i}]",
                kind=ErrorKind.REACHABILITY,
                code=FindingCode.REACH_UNREACHABLE_STATE,
                severity=Severity.WARNING,
                message=f"State '{state}' cannot be reached from any entry state",
            ))

        return errors
