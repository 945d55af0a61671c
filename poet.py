"""
GraphPoet: rewrite a phrase by inserting bridge words learned from a corpus.

Vertices of the affinity graph are lower-cased words; the weight of
w1 -> w2 counts how often w2 immediately follows w1 on a corpus line.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from algorithms import BridgeFinder
from bridge_finder import MaxWeightBridgeFinder
from corpus import build_graph, read_corpus
from graph import Graph


class GraphPoet:
    """
    Poem generator over a word-affinity graph.

    For each adjacent pair of input words, at most one bridge word is placed
    between them. Input words keep their casing; bridges are lower-case.
    Inserted bridges are never bridged themselves.

    The poet takes ownership of the graph it is given and only exposes
    snapshots of it.
    """

    def __init__(self, graph: Graph[str], finder: Optional[BridgeFinder] = None) -> None:
        self._graph = graph
        self._finder = finder or MaxWeightBridgeFinder()
        self._check_rep()

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        kind: str = "vertices",
        finder: Optional[BridgeFinder] = None,
    ) -> "GraphPoet":
        return cls(build_graph(lines, kind), finder)

    @classmethod
    def from_file(
        cls,
        path: Path,
        kind: str = "vertices",
        finder: Optional[BridgeFinder] = None,
    ) -> "GraphPoet":
        """
        Build a poet from a corpus file.

        The whole file is read before the graph is built, so a read failure
        raises OSError and no poet exists.
        """
        return cls.from_lines(read_corpus(path), kind, finder)

    def vertices(self) -> Set[str]:
        """Snapshot of the words in the affinity graph."""
        return self._graph.vertices()

    def _check_rep(self) -> None:
        for word in self._graph:
            assert isinstance(word, str) and word

    def bridges(self, text: str) -> List[Optional[str]]:
        """Bridge chosen for each adjacent pair of words in text (None if none)."""
        words = text.split()
        return [
            self._finder.find_bridge(self._graph, w1.lower(), w2.lower())
            for w1, w2 in zip(words, words[1:])
        ]

    def compose(self, text: str) -> Tuple[str, List[Optional[str]]]:
        """
        Generate a poem from text along with the bridge found for each pair.

        Words are separated by exactly one space in the output. Empty or
        whitespace-only input gives "".
        """
        words = text.split()
        if not words:
            return "", []

        bridges = self.bridges(text)
        out: List[str] = []
        for word, bridge in zip(words, bridges):
            out.append(word)
            if bridge is not None:
                out.append(bridge.lower())
        out.append(words[-1])
        return " ".join(out), bridges

    def poem(self, text: str) -> str:
        """Generate a poem from text."""
        return self.compose(text)[0]
