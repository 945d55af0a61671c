"""
Algorithm interfaces for poem generation.

Keeps bridge selection separate from corpus ingestion and poem assembly.
"""

from abc import ABC, abstractmethod
from typing import Dict, Hashable, Optional

from graph import Graph


class BridgeFinder(ABC):
    """
    Interface for choosing a single bridge vertex between two words.
    """

    @abstractmethod
    def score_candidates(
        self, graph: Graph, word1: Hashable, word2: Hashable
    ) -> Dict[Hashable, int]:
        """
        Score every vertex as a bridge word1 -> b -> word2.

        Returns:
            Mapping b -> score for every vertex with a positive score, in the
            graph's iteration order.
        """
        raise NotImplementedError

    @abstractmethod
    def find_bridge(
        self, graph: Graph, word1: Hashable, word2: Hashable
    ) -> Optional[Hashable]:
        """
        Pick the best bridge between word1 and word2.

        Returns:
            The bridge vertex, or None when no vertex scores above zero.
        """
        raise NotImplementedError
