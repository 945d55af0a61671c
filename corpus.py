"""
Corpus ingestion: turn lines of text into word-adjacency counts on a Graph.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from graph import Graph, empty_graph


def tokenize(line: str) -> List[str]:
    """Lower-case a line and split it on runs of whitespace."""
    return line.lower().split()


def word_pairs(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield (word, next_word) for every adjacent token pair.

    Pairs never span a line break.
    """
    for line in lines:
        words = tokenize(line)
        for word1, word2 in zip(words, words[1:]):
            yield word1, word2


def ingest(lines: Iterable[str], graph: Graph[str]) -> Graph[str]:
    """
    Add one to the weight of word1 -> word2 for every adjacent pair in lines.

    Returns the same graph for chaining.
    """
    for word1, word2 in word_pairs(lines):
        graph.add(word1)
        graph.add(word2)
        current = graph.targets(word1).get(word2, 0)
        graph.set_weight(word1, word2, current + 1)
    return graph


def read_corpus(path: Path) -> List[str]:
    """
    Read every line of a UTF-8 corpus file.

    Lines end only at LF, CR or CRLF. Undecodable bytes become U+FFFD.
    Raises OSError if the file is missing or unreadable.
    """
    with Path(path).open(encoding="utf-8", errors="replace") as f:
        return [line.rstrip("\n") for line in f]


def build_graph(lines: Iterable[str], kind: str = "vertices") -> Graph[str]:
    """Fresh graph of representation ``kind`` holding the counts from lines."""
    return ingest(lines, empty_graph(kind))
