import pytest

from pathgraph.algorithms.traversal import breadth_first_traversal, depth_first_traversal
from pathgraph.core.graph import Graph


@pytest.fixture
def branching(build_graph):
    # A has children B and C; B has child D
    return build_graph(["A", "B", "C", "D"], [(1, "A", "B"), (1, "A", "C"), (1, "B", "D")])


class TestBreadthFirst:
    def test_isolated_vertex(self, abcd):
        G, V, _ = abcd
        assert breadth_first_traversal(G, V["E"]) == []

    def test_star_single_level(self, star):
        G, V, E = star
        result = breadth_first_traversal(G, V["X"])
        assert result == [E[f"XL{i}"] for i in range(1, 6)]

    def test_level_order(self, branching):
        G, V, E = branching
        assert breadth_first_traversal(G, V["A"]) == [E["AB"], E["AC"], E["BD"]]

    def test_spanning_tree_of_component(self, abcd):
        G, V, _ = abcd
        result = breadth_first_traversal(G, V["D"])
        assert len(result) == 3
        reached = {V["D"]} | {v for e in result for v in e}
        assert reached == {V["A"], V["B"], V["C"], V["D"]}

    def test_edges_ignore_stored_direction(self, abcd):
        G, V, E = abcd
        # every edge in abcd points away from A; start from the far end
        assert breadth_first_traversal(G, V["D"])[0] is E["CD"]

    def test_foreign_start_raises(self, abcd):
        G, _, _ = abcd
        with pytest.raises(KeyError):
            breadth_first_traversal(G, Graph().add_vertex("A"))


class TestDepthFirst:
    def test_isolated_vertex(self, abcd):
        G, V, _ = abcd
        assert depth_first_traversal(G, V["E"]) == []

    def test_star_depth_one(self, star):
        G, V, E = star
        result = depth_first_traversal(G, V["X"])
        assert set(result) == set(E.values())
        # each leaf closes immediately, so each edge is put in front of the previous one
        assert result == [E[f"XL{i}"] for i in range(5, 0, -1)]

    def test_path_keeps_discovery_order(self, build_graph):
        G, V, E = build_graph(
            ["A", "B", "C", "D"], [(1, "A", "B"), (1, "B", "C"), (1, "C", "D")]
        )
        assert depth_first_traversal(G, V["A"]) == [E["AB"], E["BC"], E["CD"]]

    def test_prepend_order_on_backtrack(self, branching):
        G, V, E = branching
        # B's subtree closes first (BD, then AB); C is explored last and ends up first
        assert depth_first_traversal(G, V["A"]) == [E["AC"], E["AB"], E["BD"]]

    def test_cycle_visits_each_vertex_once(self, abcd):
        G, V, _ = abcd
        result = depth_first_traversal(G, V["A"])
        assert len(result) == 3
        assert len(set(result)) == 3

    def test_deep_graph_does_not_recurse(self):
        G = Graph(history=False)
        vs = [G.add_vertex(i) for i in range(5000)]
        for a, b in zip(vs, vs[1:]):
            G.add_edge(1, a, b)
        result = depth_first_traversal(G, vs[0])
        assert len(result) == 4999
        assert result[0].key == (0, 1)
        assert result[-1].key == (4998, 4999)

    def test_foreign_start_raises(self, abcd):
        G, _, _ = abcd
        with pytest.raises(KeyError):
            depth_first_traversal(G, Graph().add_vertex("A"))
