"""
Vertex-centric weighted directed graph.

Implements the Graph interface with an adjacency-list representation: every
vertex owns the map of its outgoing edges.
"""

from typing import Dict, Generic, Iterator, Set

from graph import GRAPHS, Graph, L, check_label, check_weight


class Vertex(Generic[L]):
    """
    A labelled vertex and its outgoing edges (target -> weight).
    """

    def __init__(self, label: L) -> None:
        self.label = label
        self._targets: Dict[L, int] = {}

    def targets(self) -> Dict[L, int]:
        return dict(self._targets)  # defensive copy

    def weight_to(self, target: L) -> int:
        return self._targets.get(target, 0)

    def set_target(self, target: L, weight: int) -> int:
        """Store (or with weight 0, drop) the edge to target; return the old weight."""
        if weight == 0:
            return self._targets.pop(target, 0)
        previous = self._targets.get(target, 0)
        self._targets[target] = weight
        return previous

    def remove_target(self, target: L) -> None:
        self._targets.pop(target, None)

    def __repr__(self) -> str:
        return f"{self.label!r} -> {self._targets!r}"


class AdjacencyListGraph(Graph[L]):
    """
    Directed, weighted graph backed by a label -> Vertex mapping.

    Complexity:
        targets(source) is a lookup plus a copy; sources(target) and
        remove(label) scan every vertex's outgoing map, O(V * avg degree).
    """

    def __init__(self) -> None:
        # dict keys keep labels unique and remember insertion order
        self._vertices: Dict[L, Vertex[L]] = {}

    def _check_rep(self) -> None:
        if not __debug__:
            return
        for label, vertex in self._vertices.items():
            assert vertex.label == label
            for target, weight in vertex.targets().items():
                assert target in self._vertices
                assert isinstance(weight, int) and weight > 0

    def _get_or_create(self, label: L) -> Vertex[L]:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    # --- Graph interface -----------------------------------------------------

    def add(self, label: L) -> bool:
        check_label(label)
        if label in self._vertices:
            return False
        self._vertices[label] = Vertex(label)
        self._check_rep()
        return True

    def set_weight(self, source: L, target: L, weight: int) -> int:
        check_label(source)
        check_label(target)
        check_weight(weight)

        source_vertex = self._get_or_create(source)
        self._get_or_create(target)
        previous = source_vertex.set_target(target, weight)
        self._check_rep()
        return previous

    def remove(self, label: L) -> bool:
        check_label(label)
        if self._vertices.pop(label, None) is None:
            return False
        for vertex in self._vertices.values():
            vertex.remove_target(label)
        self._check_rep()
        return True

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        check_label(target)
        result: Dict[L, int] = {}
        for label, vertex in self._vertices.items():
            weight = vertex.weight_to(target)
            if weight:
                result[label] = weight
        return result

    def targets(self, source: L) -> Dict[L, int]:
        check_label(source)
        vertex = self._vertices.get(source)
        return {} if vertex is None else vertex.targets()

    def __iter__(self) -> Iterator[L]:
        return iter(list(self._vertices))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __repr__(self) -> str:
        body = ", ".join(repr(v) for v in self._vertices.values())
        return f"AdjacencyListGraph({body})"


GRAPHS.register("vertices", AdjacencyListGraph)
