"""
Mutable weighted directed graph abstraction for the word-affinity poet.

Vertices are immutable, hashable labels compared by equality (words, here).
Edges are directed: source -> target with a strictly positive int weight.
A weight of zero means "no edge" and is never stored.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Mapping, MutableMapping, Set, TypeVar

L = TypeVar("L", bound=Hashable)


def check_label(label: object) -> None:
    """Reject labels that can never name a vertex."""
    if label is None:
        raise ValueError("Vertex label must not be None.")


def check_weight(weight: object) -> None:
    """Edge weights are non-negative ints; zero deletes an edge."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an int, got {type(weight).__name__}.")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}.")


class Graph(ABC, Generic[L]):
    """
    Directed, weighted graph over hashable labels.

    Every accessor returns an owned snapshot; callers may mutate the result
    without touching the graph.
    """

    @abstractmethod
    def add(self, label: L) -> bool:
        """
        Add an isolated vertex.

        Returns False (and leaves the graph unchanged) if label is already a
        vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def set_weight(self, source: L, target: L, weight: int) -> int:
        """
        Record, overwrite or delete the edge source -> target.

        A positive weight creates missing endpoints and stores the edge; zero
        deletes any existing edge. Missing vertices are created in both cases.

        Returns:
            The weight of the edge before the call, 0 if there was none.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, label: L) -> bool:
        """
        Remove a vertex and every edge that starts or ends at it.

        Returns False if label was not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Return a snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Incoming neighbours of target and the weights of their edges.

        Returns: dict[source, weight], empty if target has no incoming edges.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Outgoing neighbours of source and the weights of their edges.

        Returns: dict[target, weight], empty if source has no outgoing edges.
        """
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[L]:
        """Iterate a snapshot of vertex labels in insertion order."""
        raise NotImplementedError

    # --- Derived helpers -----------------------------------------------------

    def weight(self, source: L, target: L) -> int:
        """Weight of source -> target, 0 if there is no such edge."""
        return self.targets(source).get(target, 0)

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, label: object) -> bool:
        return label in self.vertices()


GraphFactory = Callable[[], Graph]


class GraphRegistry:
    """Named constructors for the available graph representations."""

    def __init__(self) -> None:
        self._factories: MutableMapping[str, GraphFactory] = {}

    def register(self, name: str, factory: GraphFactory) -> None:
        """Register ``factory`` under ``name``; duplicates raise ValueError."""

        if name in self._factories:
            raise ValueError(f"Graph backend '{name}' is already registered.")
        self._factories[name] = factory

    def get(self, name: str) -> GraphFactory:
        """Return the factory registered under ``name``."""

        if name not in self._factories:
            raise KeyError(f"Unknown graph backend '{name}'.")
        return self._factories[name]

    def names(self) -> List[str]:
        return list(self._factories)

    def all(self) -> Mapping[str, GraphFactory]:
        """Return a copy of all registered factories."""

        return dict(self._factories)


GRAPHS = GraphRegistry()


def available_graphs() -> List[str]:
    """Names of the registered graph representations."""
    # backends register themselves on import
    import adjacency_list_graph  # noqa: F401
    import edge_list_graph  # noqa: F401

    return GRAPHS.names()


def empty_graph(kind: str = "vertices") -> Graph:
    """Fresh empty graph of the named representation."""
    available_graphs()
    return GRAPHS.get(kind)()
