"""
Edge-centric weighted directed graph.

Implements the Graph interface with a flat vertex collection plus a flat list
of immutable (source, target, weight) edges.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Iterator, List, Set

from graph import GRAPHS, Graph, L, check_label, check_weight


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Directed edge source -> target; weight is always positive.
    """
    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        assert self.source is not None and self.target is not None
        assert self.weight > 0

    def __repr__(self) -> str:
        return f"{self.source!r} -> {self.target!r} (weight: {self.weight})"


class EdgeListGraph(Graph[L]):
    """
    Directed, weighted graph backed by a vertex collection and an edge list.

    Complexity:
        sources, targets, set_weight and remove all scan the edge list, O(E).
    """

    def __init__(self) -> None:
        # dict used as an insertion-ordered set
        self._vertices: Dict[L, None] = {}
        self._edges: List[Edge[L]] = []

    def _check_rep(self) -> None:
        if not __debug__:
            return
        seen = set()
        for edge in self._edges:
            assert edge.source in self._vertices
            assert edge.target in self._vertices
            assert isinstance(edge.weight, int) and edge.weight > 0
            assert (edge.source, edge.target) not in seen
            seen.add((edge.source, edge.target))

    def _find(self, source: L, target: L) -> int:
        """Index of the edge source -> target, or -1."""
        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                return i
        return -1

    # --- Graph interface -----------------------------------------------------

    def add(self, label: L) -> bool:
        check_label(label)
        if label in self._vertices:
            return False
        self._vertices[label] = None
        self._check_rep()
        return True

    def set_weight(self, source: L, target: L, weight: int) -> int:
        check_label(source)
        check_label(target)
        check_weight(weight)

        self._vertices.setdefault(source, None)
        self._vertices.setdefault(target, None)

        i = self._find(source, target)
        previous = 0
        if i >= 0:
            previous = self._edges[i].weight
            if weight > 0:
                self._edges[i] = Edge(source, target, weight)
            else:
                del self._edges[i]
        elif weight > 0:
            self._edges.append(Edge(source, target, weight))

        self._check_rep()
        return previous

    def remove(self, label: L) -> bool:
        check_label(label)
        if label not in self._vertices:
            return False
        del self._vertices[label]
        self._edges = [
            e for e in self._edges if e.source != label and e.target != label
        ]
        self._check_rep()
        return True

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        check_label(target)
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        check_label(source)
        return {e.target: e.weight for e in self._edges if e.source == source}

    def __iter__(self) -> Iterator[L]:
        return iter(list(self._vertices))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __repr__(self) -> str:
        return f"EdgeListGraph(vertices={list(self._vertices)!r}, edges={self._edges!r})"


GRAPHS.register("edges", EdgeListGraph)
