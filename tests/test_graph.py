import itertools

import pytest

from map_distance.adapters.graph import UNREACHABLE_DISTANCE, DijkstraPathFinder
from map_distance.domain.models import ErrorKind, canonical_id


@pytest.fixture
def finder():
    return DijkstraPathFinder()


def _path_weight(graph, path):
    weights = {}
    for edge in graph.edges:
        key = frozenset((canonical_id(edge.from_id), canonical_id(edge.to_id)))
        weights[key] = min(weights.get(key, edge.weight), edge.weight)
    return sum(
        weights[frozenset((canonical_id(a), canonical_id(b)))]
        for a, b in zip(path, path[1:])
    )


def test_dijkstra_finds_direct_edge(finder, make_graph):
    graph = make_graph(["A", "B"], [("A", "B", 10)])

    result = finder.shortest_path(graph, "A", "B")

    assert result.is_success
    assert result.path == ("A", "B")
    assert result.distance == 10


def test_dijkstra_chooses_shortest_path(finder, example_graph):
    # The direct G-E edge costs 10, the chain through A and C costs 9.
    result = finder.shortest_path(example_graph, "G", "E")

    assert result.path == ("G", "A", "C", "E")
    assert result.distance == 9


def test_edges_are_traversed_in_both_directions(finder, example_graph):
    result = finder.shortest_path(example_graph, "E", "G")

    assert result.path == ("E", "C", "A", "G")
    assert result.distance == 9


def test_same_source_and_target_returns_single_node(finder, example_graph):
    result = finder.shortest_path(example_graph, "C", "C")

    assert result.path == ("C",)
    assert result.distance == 0


def test_lookup_is_case_insensitive_and_trimmed(finder, example_graph):
    result = finder.shortest_path(example_graph, "  g ", "e")

    assert result.path == ("G", "A", "C", "E")
    assert result.distance == 9


def test_path_uses_declared_node_ids(finder, make_graph):
    graph = make_graph([" Paris ", "Lyon"], [("paris", "LYON", 465)])

    result = finder.shortest_path(graph, "PARIS", "lyon")

    assert result.path == ("Paris", "Lyon")
    assert result.distance == 465


def test_missing_graph_reports_not_set(finder):
    result = finder.shortest_path(None, "A", "B")

    assert not result.is_success
    assert result.error_kind is ErrorKind.NOT_SET
    assert result.error == "Map has not been set."


@pytest.mark.parametrize("source,target", [("", "E"), ("G", "   "), (None, "E")])
def test_blank_parameters_are_rejected(finder, example_graph, source, target):
    result = finder.shortest_path(example_graph, source, target)

    assert result.error_kind is ErrorKind.INPUT
    assert result.error == "Missing parameters: from and/or to."


def test_unknown_source_is_reported(finder, example_graph):
    result = finder.shortest_path(example_graph, "Z", "E")

    assert result.error_kind is ErrorKind.INPUT
    assert result.error == "Unknown node name: 'Z'."


def test_unknown_target_is_reported(finder, example_graph):
    result = finder.shortest_path(example_graph, "G", " Z ")

    assert result.error_kind is ErrorKind.INPUT
    assert result.error == "Unknown node name: 'Z'."


def test_disconnected_nodes_report_no_route(finder, make_graph):
    graph = make_graph(["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 1)])

    result = finder.shortest_path(graph, "A", "D")

    assert result.error_kind is ErrorKind.UNREACHABLE
    assert result.error == "No route found from 'A' to 'D'."
    assert result.path == ()


def test_isolated_node_is_unreachable(finder, make_graph):
    graph = make_graph(["A", "B", "C"], [("A", "B", 4)])

    result = finder.shortest_path(graph, "C", "A")

    assert result.error_kind is ErrorKind.UNREACHABLE


def test_parallel_edges_use_the_lightest(finder, make_graph):
    graph = make_graph(["A", "B"], [("A", "B", 7), ("B", "A", 2)])

    result = finder.shortest_path(graph, "A", "B")

    assert result.distance == 2


def test_equal_cost_paths_return_a_shortest_one(finder, make_graph):
    graph = make_graph(
        ["S", "L", "R", "T"],
        [("S", "L", 2), ("L", "T", 2), ("S", "R", 1), ("R", "T", 3)],
    )

    result = finder.shortest_path(graph, "S", "T")

    assert result.distance == 4
    assert result.path[0] == "S" and result.path[-1] == "T"
    assert len(result.path) == 3
    assert _path_weight(graph, result.path) == 4


def test_overflowing_sums_are_not_relaxed(finder, make_graph):
    big = UNREACHABLE_DISTANCE - 1
    graph = make_graph(["A", "B", "C"], [("A", "B", big), ("B", "C", big)])

    assert finder.shortest_path(graph, "A", "B").distance == big
    assert finder.shortest_path(graph, "A", "C").error_kind is ErrorKind.UNREACHABLE


def test_input_graph_is_not_mutated(finder, example_graph):
    before = example_graph.to_dict()

    finder.shortest_path(example_graph, "G", "E")

    assert example_graph.to_dict() == before


class TestShortestPathProperties:
    """Metric properties over every pair of nodes in a small mesh."""

    @pytest.fixture
    def mesh(self, make_graph):
        return make_graph(
            ["A", "B", "C", "D", "E", "F"],
            [
                ("A", "B", 7),
                ("A", "C", 9),
                ("A", "F", 14),
                ("B", "C", 10),
                ("B", "D", 15),
                ("C", "D", 11),
                ("C", "F", 2),
                ("D", "E", 6),
                ("E", "F", 9),
            ],
        )

    def test_distance_is_symmetric(self, finder, mesh):
        for a, b in itertools.combinations("ABCDEF", 2):
            forward = finder.shortest_path(mesh, a, b)
            backward = finder.shortest_path(mesh, b, a)
            assert forward.distance == backward.distance

    def test_triangle_inequality(self, finder, mesh):
        def dist(x, y):
            return finder.shortest_path(mesh, x, y).distance

        for a, b, c in itertools.permutations("ABCDEF", 3):
            assert dist(a, c) <= dist(a, b) + dist(b, c)

    def test_path_weight_equals_distance(self, finder, mesh):
        for a, b in itertools.permutations("ABCDEF", 2):
            result = finder.shortest_path(mesh, a, b)
            assert result.path[0] == a and result.path[-1] == b
            assert _path_weight(mesh, result.path) == result.distance

    def test_known_distance(self, finder, mesh):
        result = finder.shortest_path(mesh, "A", "E")

        assert result.path == ("A", "C", "F", "E")
        assert result.distance == 20
