"""
Unit tests for AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph, Vertex


def test_add_vertices_and_edges():
    g = AdjacencyListGraph()

    g.set_weight("a", "b", 1)
    g.set_weight("a", "c", 2)
    g.set_weight("b", "c", 3)

    assert g.vertices() == {"a", "b", "c"}

    assert g.targets("a") == {"b": 1, "c": 2}
    assert g.targets("b") == {"c": 3}
    assert g.targets("c") == {}
    assert g.sources("c") == {"a": 2, "b": 3}


def test_targets_returns_copy():
    g = AdjacencyListGraph()
    g.set_weight("a", "b", 1)

    out = g.targets("a")
    out.clear()

    # internal structure must remain intact
    assert g.targets("a") == {"b": 1}


def test_zeroing_last_edge_keeps_source_vertex():
    g = AdjacencyListGraph()
    g.set_weight("a", "b", 4)

    assert g.set_weight("a", "b", 0) == 4
    assert g.vertices() == {"a", "b"}
    assert g.targets("a") == {}


def test_remove_strips_incoming_edges_from_other_vertices():
    g = AdjacencyListGraph()
    g.set_weight("a", "x", 1)
    g.set_weight("b", "x", 2)
    g.set_weight("x", "c", 3)

    assert g.remove("x") is True
    assert g.targets("a") == {}
    assert g.targets("b") == {}
    assert g.sources("c") == {}
    assert g.vertices() == {"a", "b", "c"}


def test_iteration_follows_insertion_order():
    g = AdjacencyListGraph()
    for label in ("delta", "alpha", "charlie"):
        g.add(label)
    g.set_weight("bravo", "alpha", 1)

    assert list(g) == ["delta", "alpha", "charlie", "bravo"]

    g.remove("alpha")
    g.add("alpha")
    assert list(g) == ["delta", "charlie", "bravo", "alpha"]


def test_vertex_set_target_reports_previous_weight():
    v = Vertex("a")
    assert v.set_target("b", 2) == 0
    assert v.set_target("b", 5) == 2
    assert v.set_target("b", 0) == 5
    assert v.set_target("b", 0) == 0
    assert v.targets() == {}


def test_repr_lists_vertices_and_edges():
    g = AdjacencyListGraph()
    g.set_weight("a", "b", 2)
    assert repr(g) == "AdjacencyListGraph('a' -> {'b': 2}, 'b' -> {})"


def test_rejects_negative_weight_without_mutation():
    g = AdjacencyListGraph()
    with pytest.raises(ValueError):
        g.set_weight("a", "b", -1)
    assert g.vertices() == set()
