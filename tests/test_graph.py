import pytest

from coranker.graph import CoRelevanceGraph


def test_self_loop_is_ignored():
    graph = CoRelevanceGraph()
    graph.add_edge(4, 4)
    assert graph.num_nodes == 0
    assert graph.num_edges == 0
    assert graph.adjacency == {}


def test_repeated_edges_accumulate_weight_symmetrically():
    graph = CoRelevanceGraph()
    graph.add_edge(1, 2)
    graph.add_edge(2, 1)
    graph.add_edge(1, 3)
    assert graph.num_edges == 3
    assert graph.nodes == [1, 2, 3]
    adjacency = graph.adjacency
    assert adjacency[1][2] == adjacency[2][1] == 2
    assert adjacency[1][3] == adjacency[3][1] == 1
    assert 3 not in adjacency[2]


def test_empty_graph_has_no_scores():
    assert CoRelevanceGraph().pagerank() == {}


def test_scores_sum_to_one_and_cover_all_nodes():
    graph = CoRelevanceGraph()
    for a, b in [(1, 2), (2, 3), (3, 4), (4, 1), (1, 3), (5, 1)]:
        graph.add_edge(a, b)
    scores = graph.pagerank()
    assert list(scores) == graph.nodes
    assert sum(scores.values()) == pytest.approx(1.0)
    assert all(score > 0 for score in scores.values())


def test_symmetric_pair_shares_score_equally():
    graph = CoRelevanceGraph()
    graph.add_edge(10, 20)
    scores = graph.pagerank()
    assert scores[10] == pytest.approx(scores[20])
    assert scores[10] == pytest.approx(0.5)


def test_star_centre_outranks_leaves():
    graph = CoRelevanceGraph()
    for leaf in (2, 3, 4, 5):
        graph.add_edge(1, leaf)
    scores = graph.pagerank()
    assert all(scores[1] > scores[leaf] for leaf in (2, 3, 4, 5))
    assert scores[2] == pytest.approx(scores[5])


def test_zero_iterations_keeps_uniform_scores():
    graph = CoRelevanceGraph()
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    scores = graph.pagerank(iterations=0)
    assert scores[1] == pytest.approx(scores[2])
    assert scores[2] == pytest.approx(scores[3])
    assert sum(scores.values()) == pytest.approx(1.0)


def test_heavier_edges_pull_more_score():
    graph = CoRelevanceGraph()
    graph.add_edge(1, 2)
    graph.add_edge(1, 2)
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    scores = graph.pagerank()
    assert scores[2] > scores[3]