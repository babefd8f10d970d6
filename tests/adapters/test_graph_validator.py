"""Tests for the structural graph validator."""

import pytest

from map_distance.adapters.graph import GraphValidator
from map_distance.domain.models import Edge, ErrorKind, Graph, Node, canonical_id


@pytest.fixture
def validator():
    return GraphValidator()


class TestGraphValidator:
    """Each rule in order, plus acceptance."""

    def test_accepts_well_formed_graph(self, validator, example_graph):
        result = validator.validate(example_graph)

        assert result.is_valid
        assert result.error is None
        assert result.error_kind is None

    def test_missing_graph(self, validator):
        result = validator.validate(None)

        assert result.error == "Map data is missing."
        assert result.error_kind is ErrorKind.STRUCTURAL

    def test_empty_node_list(self, validator, make_graph):
        result = validator.validate(make_graph([], [("A", "B", 1)]))

        assert result.error == "Map must contain at least one node."

    def test_empty_edge_list(self, validator, make_graph):
        result = validator.validate(make_graph(["A", "B"], []))

        assert result.error == "Map must contain at least one edge."

    @pytest.mark.parametrize("node", [None, Node(id=None), Node(id=""), Node(id="  ")])
    def test_blank_node_id(self, validator, node):
        graph = Graph(
            nodes=(Node(id="A"), node),
            edges=(Edge(from_id="A", to_id="A", weight=1),),
        )

        assert validator.validate(graph).error == "All nodes must have a non-empty Id."

    def test_duplicate_node_id(self, validator, make_graph):
        graph = make_graph(["A", "B", "A"], [("A", "B", 1)])

        assert validator.validate(graph).error == "Duplicate node Id detected: 'A'."

    def test_duplicate_differs_only_by_case_and_whitespace(self, validator, make_graph):
        graph = make_graph(["A", "B", " a "], [("A", "B", 1)])

        assert validator.validate(graph).error == "Duplicate node Id detected: ' a '."

    def test_first_duplicate_is_reported(self, validator, make_graph):
        graph = make_graph(["A", "B", "b", "a"], [("A", "B", 1)])

        assert validator.validate(graph).error == "Duplicate node Id detected: 'b'."

    def test_null_edge(self, validator):
        graph = Graph(nodes=(Node(id="A"),), edges=(None,))

        assert validator.validate(graph).error == "Edge entry is null."

    @pytest.mark.parametrize(
        "edge",
        [
            Edge(from_id=None, to_id="B", weight=1),
            Edge(from_id="A", to_id="", weight=1),
            Edge(from_id=" ", to_id="B", weight=1),
        ],
    )
    def test_edge_without_endpoints(self, validator, edge):
        graph = Graph(nodes=(Node(id="A"), Node(id="B")), edges=(edge,))

        assert validator.validate(graph).error == "All edges must have FromId and ToId."

    @pytest.mark.parametrize("weight", [0, -1, -100])
    def test_non_positive_weight(self, validator, make_graph, weight):
        graph = make_graph(["A", "B"], [("A", "B", weight)])

        assert validator.validate(graph).error == "Edge Weight must be greater than 0."

    def test_weight_checked_before_endpoints_exist(self, validator, make_graph):
        graph = make_graph(["A"], [("A", "Z", 0)])

        assert validator.validate(graph).error == "Edge Weight must be greater than 0."

    def test_unknown_endpoint(self, validator, make_graph):
        graph = make_graph(["A", "B"], [("A", "B", 1), ("b", " Z", 3)])

        assert (
            validator.validate(graph).error
            == "Edge references unknown node(s): 'b' -> ' Z'."
        )

    def test_endpoints_match_case_insensitively(self, validator, make_graph):
        graph = make_graph(["Paris", "Lyon"], [(" paris ", "LYON", 465)])

        assert validator.validate(graph).is_valid

    def test_nodes_checked_before_edges(self, validator):
        graph = Graph(nodes=(Node(id="A"), Node(id="a")), edges=(None,))

        assert validator.validate(graph).error == "Duplicate node Id detected: 'a'."

    def test_validation_does_not_mutate_graph(self, validator, example_graph):
        before = example_graph.to_dict()

        validator.validate(example_graph)

        assert example_graph.to_dict() == before


def test_accepted_graph_satisfies_invariants(validator, make_graph):
    graph = make_graph(
        ["Depot", "north", "South "],
        [("depot", "NORTH", 5), ("south", "North", 2), ("Depot", "South", 9)],
    )

    assert validator.validate(graph).is_valid

    ids = [canonical_id(node.id) for node in graph.nodes]
    assert len(ids) == len(set(ids))
    for edge in graph.edges:
        assert canonical_id(edge.from_id) in ids
        assert canonical_id(edge.to_id) in ids
        assert edge.weight > 0
