"""StateGraph — an entity's states and transitions as a NetworkX multigraph.

All states are loaded as nodes before any edge, so isolated states stay
visible to the algorithms. Each transition is its own edge, so parallel
transitions and self-loops are kept. Outgoing queries follow transition-list
order, which keeps every result deterministic for identical input.
"""

from typing import Generic, Hashable, Iterable, Optional, TypeVar

import networkx as nx

E = TypeVar("E")


class StateGraph(Generic[E]):
    """Directed multigraph built from (source, target, edge) triples.

    ``E`` is whatever the caller attaches to an edge: the raw transition
    while validating, the resolved transition once normalized.
    """

    def __init__(self, states: Iterable[str]):
        self._graph = nx.MultiDiGraph()
        self._graph.add_nodes_from(states)
        self._edge_count = 0

    @classmethod
    def build(cls, states: Iterable[str], edges: Iterable[tuple[str, str, E]]) -> "StateGraph[E]":
        graph = cls(states)
        for source, target, edge in edges:
            graph.add_edge(source, target, edge)
        return graph

    def add_edge(self, source: str, target: str, edge: E) -> None:
        if source not in self._graph or target not in self._graph:
            raise KeyError(f"Edge {source!r} -> {target!r} references an undeclared state")
        self._graph.add_edge(source, target, edge=edge, order=self._edge_count)
        self._edge_count += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateGraph):
            return NotImplemented
        return self.states == other.states and self._edges() == other._edges()

    def _edges(self) -> list[tuple[str, str, E]]:
        edges = sorted(self._graph.edges(data=True), key=lambda e: e[2]["order"])
        return [(source, target, data["edge"]) for source, target, data in edges]

    def _out_edges(self, state: str) -> list[tuple[str, str, dict]]:
        if state not in self._graph:
            raise KeyError(state)
        return sorted(self._graph.out_edges(state, data=True), key=lambda e: e[2]["order"])

    # ── Queries ──

    @property
    def states(self) -> list[str]:
        return list(self._graph.nodes)

    def __contains__(self, state: Hashable) -> bool:
        return state in self._graph

    def outgoing(self, state: str) -> list[E]:
        return [data["edge"] for _, _, data in self._out_edges(state)]

    def successors(self, state: str) -> list[str]:
        """Distinct next states, in first-seen order."""
        return list(dict.fromkeys(target for _, target, _ in self._out_edges(state)))

    def indegree(self, state: str) -> int:
        # Self-loops count as incoming edges.
        return self._graph.in_degree(state)

    def outdegree(self, state: str) -> int:
        return self._graph.out_degree(state)

    def initial_states(self) -> list[str]:
        """States nothing transitions into, that have a way out."""
        return [s for s in self._graph if self.indegree(s) == 0 and self.outdegree(s) > 0]

    def terminal_states(self) -> list[str]:
        """States that are entered but never left."""
        return [s for s in self._graph if self.outdegree(s) == 0 and self.indegree(s) > 0]

    def isolated_states(self) -> list[str]:
        return list(nx.isolates(self._graph))

    def reachable_from(self, starts: Iterable[str]) -> set[str]:
        """The start states plus everything reachable from them."""
        reached: set[str] = set()
        for start in starts:
            if start in self._graph and start not in reached:
                reached.add(start)
                reached |= nx.descendants(self._graph, start)
        return reached

    def unreachable_states(self, starts: Optional[Iterable[str]] = None) -> list[str]:
        """Non-isolated states not reachable from ``starts`` (default: the initial states)."""
        entry = self.initial_states() if starts is None else list(starts)
        reached = self.reachable_from(entry)
        isolated = set(self.isolated_states())
        return [s for s in self._graph if s not in reached and s not in isolated]
