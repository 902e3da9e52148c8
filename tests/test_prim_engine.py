"""
Unit tests for LazyPrimEngine and the Prim side of AdjacencyListGraph.
"""

import io
import math

from adjacency_list_graph import AdjacencyListGraph
from algorithms import PathRecord
from prim_engine import LazyPrimEngine
from topology_builder import build_graph, example_graph


def test_prim_spans_example_graph_from_2():
    g = example_graph()
    g.prim(2)

    for n in range(1, 8):
        assert g.is_path(n)

    table = g.prim_result()
    assert table[2] == PathRecord(parent=2, metric=0.0)
    assert table[7] == PathRecord(parent=2, metric=1.0)
    assert table[5] == PathRecord(parent=7, metric=1.0)
    assert table[6] == PathRecord(parent=5, metric=1.0)
    assert table[3] == PathRecord(parent=2, metric=2.0)
    assert table[4] == PathRecord(parent=5, metric=2.0)
    assert table[1] == PathRecord(parent=4, metric=2.0)

    # 1 + 1 + 1 + 2 + 2 + 2
    assert g.tree_weight() == 9.0


def test_prim_paths_on_example_graph():
    g = example_graph()
    g.prim(2)

    assert g.path(2) == [2]
    assert g.path(1) == [2, 7, 5, 4, 1]
    assert g.path(6) == [2, 7, 5, 6]
    assert g.path(3) == [2, 3]

    out = io.StringIO()
    g.print_path(1, out)
    g.print_path(2, out)
    assert out.getvalue() == "2 --> 7 --> 5 --> 4 --> 1\n2\n"


def test_prim_picks_cheapest_connecting_edge_not_shortest_distance():
    # A->B (1), B->C (1), A->C (1.5): Dijkstra would reach C via A directly,
    # Prim attaches C through the cheaper B->C edge.
    g = build_graph([1, 2, 3], [(1, 2, 1.0), (2, 3, 1.0), (1, 3, 1.5)])
    g.prim(1)
    table = g.prim_result()
    assert table[3] == PathRecord(parent=2, metric=1.0)
    assert g.tree_weight() == 2.0


def test_prim_leaves_other_components_unreached():
    g = build_graph([1, 2, 3, 4], [(1, 2, 1.0), (3, 4, 1.0)])
    g.prim(1)

    assert g.is_path(1)
    assert g.is_path(2)
    assert not g.is_path(3)
    assert not g.is_path(4)
    assert g.prim_result()[3] == PathRecord(parent=None, metric=math.inf)

    out = io.StringIO()
    g.print_path(4, out)
    assert out.getvalue() == "<no path>\n"


def test_prim_only_follows_outgoing_edges():
    g = build_graph([1, 2], [(2, 1, 1.0)])
    g.prim(1)
    assert not g.is_path(2)


def test_prim_before_any_run_has_no_paths():
    g = example_graph()
    assert not g.is_path(2)
    assert g.path(2) is None
    assert g.tree_weight() == 0.0


def test_prim_absent_source_keeps_previous_result():
    g = example_graph()
    g.prim(2)
    before = g.prim_result()

    g.prim(99)

    assert g.prim_result() == before
    assert not g.is_path(99)


def test_prim_absent_source_on_fresh_graph_is_noop():
    g = AdjacencyListGraph()
    g.prim(1)
    assert not g.is_path(1)
    assert g.prim_result() == {}


def test_prim_rerun_rebuilds_from_scratch():
    g = example_graph()
    g.prim(2)
    g.prim(6)  # 6 has no out-edges

    assert g.is_path(6)
    for n in (1, 2, 3, 4, 5, 7):
        assert not g.is_path(n)


def test_prim_results_go_stale_after_mutation():
    g = example_graph()
    g.prim(2)

    g.remove_vertex(5)

    # still describes the tree through 5 until prim() runs again
    assert g.is_path(5)
    assert g.path(6) == [2, 7, 5, 6]

    g.prim(2)
    assert not g.is_path(5)
    assert g.path(6) == [2, 3, 4, 6]


def test_prim_does_not_touch_dijkstra_result():
    g = example_graph()
    g.dijkstra(2)
    g.prim(1)
    assert g.distance(1) == 6.0
    assert g.distance(2) == 0.0


def test_prim_self_loop_ignored():
    g = build_graph([1, 2], [(1, 1, 0.0), (1, 2, 3.0)])
    g.prim(1)
    assert g.prim_result()[1] == PathRecord(parent=1, metric=0.0)
    assert g.path(2) == [1, 2]


def test_engine_discards_stale_queue_entries():
    g = example_graph()
    engine = LazyPrimEngine()
    table = engine.spanning_tree(g, 2)

    assert len(table) == 7
    # 5 is pushed at weight 3 from 2 and again at weight 1 from 7
    assert engine.last_stale_discards == 1
    assert engine.last_heap_pops == engine.last_heap_pushes
    assert engine.last_heap_pops == 7 + engine.last_stale_discards
    assert engine.last_edges_examined == 12


def test_engine_counters_reset_each_run():
    g = example_graph()
    engine = LazyPrimEngine()
    engine.spanning_tree(g, 2)
    engine.spanning_tree(g, 6)
    assert engine.last_heap_pops == 1
    assert engine.last_edges_examined == 0
    assert engine.last_stale_discards == 0
