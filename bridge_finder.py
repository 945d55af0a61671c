"""
Highest-total-weight BridgeFinder implementation.

Works over any graph that satisfies the Graph interface, using only its
targets/sources lookups and insertion-order iteration.
"""

from typing import Dict, Hashable, Optional

from algorithms import BridgeFinder
from graph import Graph


class MaxWeightBridgeFinder(BridgeFinder):
    """
    Score each vertex b by weight(word1 -> b) + weight(b -> word2).

    The two terms are summed without requiring both to be non-zero, so a
    vertex linked on one side only still earns a positive score and can win
    over a weaker two-sided bridge. Ties keep the first vertex in iteration
    order.

    Complexity:
        One targets() and one sources() lookup, then O(V) over the vertices.
    """

    def score_candidates(
        self, graph: Graph, word1: Hashable, word2: Hashable
    ) -> Dict[Hashable, int]:
        weights_in = graph.targets(word1)  # word1 -> b
        weights_out = graph.sources(word2)  # b -> word2

        scores: Dict[Hashable, int] = {}
        for b in graph:
            total = weights_in.get(b, 0) + weights_out.get(b, 0)
            if total > 0:
                scores[b] = total
        return scores

    def find_bridge(
        self, graph: Graph, word1: Hashable, word2: Hashable
    ) -> Optional[Hashable]:
        best: Optional[Hashable] = None
        best_score = 0
        for b, score in self.score_candidates(graph, word1, word2).items():
            # strictly greater: earlier vertices win ties
            if score > best_score:
                best, best_score = b, score
        return best
