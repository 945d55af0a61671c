from pathlib import Path

import pytest

from adjacency_list_graph import AdjacencyListGraph
from algorithms import BridgeFinder
from graph import available_graphs
from poet import GraphPoet

MUGAR = ["This is a test of the Mugar Omni Theater", "A test of the test"]


@pytest.fixture(params=available_graphs())
def kind(request):
    return request.param


def test_empty_corpus(tmp_path: Path, kind):
    corpus = tmp_path / "empty.txt"
    corpus.write_text("")
    poet = GraphPoet.from_file(corpus, kind=kind)
    assert poet.poem("Hello world") == "Hello world"


def test_single_word_corpus(tmp_path: Path, kind):
    corpus = tmp_path / "single-word.txt"
    corpus.write_text("hello\n")
    poet = GraphPoet.from_file(corpus, kind=kind)
    assert poet.poem("Hello world") == "Hello world"


def test_missing_corpus_raises(tmp_path: Path):
    with pytest.raises(OSError):
        GraphPoet.from_file(tmp_path / "nope.txt")


def test_single_pair_corpus_never_bridges_unrelated_words(kind):
    poet = GraphPoet.from_lines(["w1 w2"], kind=kind)
    assert poet.vertices() == {"w1", "w2"}
    assert poet.poem("Hello there world") == "Hello there world"


def test_mugar_bridge_inserted(kind):
    poet = GraphPoet.from_lines(MUGAR, kind=kind)

    # test -> of -> the scores 4. "the" -> "system" has only one-sided links,
    # mugar and test both score 1 and test was inserted first.
    assert poet.bridges("Test the system") == ["of", "test"]
    assert poet.poem("Test the system") == "Test of the test system"


def test_original_casing_kept_and_bridges_lowercased(kind):
    poet = GraphPoet.from_lines(["Alpha BETA Gamma"], kind=kind)
    assert poet.poem("ALPHA   Gamma") == "ALPHA beta Gamma"


def test_bridges_are_not_bridged_again(kind):
    # a -> b -> c and a -> x -> b: only one word may go between a and c
    poet = GraphPoet.from_lines(["a b c", "a x b"], kind=kind)
    assert poet.poem("a c") == "a b c"


def test_single_word_passes_through(kind):
    poet = GraphPoet.from_lines(MUGAR, kind=kind)
    assert poet.poem("  Theater ") == "Theater"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_gives_empty_poem(text, kind):
    poet = GraphPoet.from_lines(MUGAR, kind=kind)
    assert poet.poem(text) == ""
    assert poet.bridges(text) == []


def test_whitespace_collapsed_in_output():
    poet = GraphPoet(AdjacencyListGraph())
    assert poet.poem("  one \t two\nthree  ") == "one two three"


def test_custom_finder_is_used():
    class Always(BridgeFinder):
        def score_candidates(self, graph, word1, word2):
            return {"and": 1}

        def find_bridge(self, graph, word1, word2):
            return "AND"

    poet = GraphPoet(AdjacencyListGraph(), finder=Always())
    assert poet.poem("salt pepper") == "salt and pepper"


def test_compose_returns_poem_and_bridges(kind):
    poet = GraphPoet.from_lines(MUGAR, kind=kind)
    assert poet.compose("Test the system") == ("Test of the test system", ["of", "test"])
    assert poet.compose("  ") == ("", [])


def test_vertices_is_a_snapshot():
    poet = GraphPoet.from_lines(MUGAR)
    words = poet.vertices()
    words.add("intruder")
    assert "intruder" not in poet.vertices()
