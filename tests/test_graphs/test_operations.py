"""Tests for structural graph operations."""

import pytest

from atomgraph.graphs import (
    Graph,
    cartesian_product,
    contract,
    create_circle,
    create_complete,
    create_path,
    create_star_of_order,
    cut,
    edge_complement,
    join,
)


def edge_pairs(graph):
    return sorted(tuple(sorted((e.source.data, e.target.data))) for e in graph.edges)


class TestContract:
    """Tests for edge contraction."""

    def test_square_becomes_triangle(self, make_graph):
        """Test contracting one side of a 4-cycle leaves a triangle."""
        G, v = make_graph(
            [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("D", "A", 4)], directed=False
        )
        contract(G.get_edge("A", "B"), G)

        assert list(G) == ["B", "C", "D"]
        assert edge_pairs(G) == [("B", "C"), ("B", "D"), ("C", "D")]
        assert G.get_edge("B", "D").weight == 4.0

    def test_discard_extra(self, make_graph):
        """Test reconnections to existing neighbours are dropped by default."""
        G, _ = make_graph([("A", "B", 1), ("B", "C", 1), ("C", "A", 1)], directed=False)
        contract(G.get_edge("A", "B"), G)
        assert edge_pairs(G) == [("B", "C")]

    def test_keep_extra_as_parallel(self, make_graph):
        """Test discard_extra=False keeps parallel edges."""
        G, _ = make_graph(
            [("A", "B", 1), ("B", "C", 1), ("C", "A", 1)],
            directed=False,
            allows_multiple_edges=True,
        )
        contract(G.get_edge("A", "B"), G, discard_extra=False)
        assert edge_pairs(G) == [("B", "C"), ("B", "C")]
        assert G.contains_multiple_edges

    def test_directed_rejected(self, make_graph):
        """Test contraction of a directed edge raises ValueError."""
        G, _ = make_graph([("A", "B", 1)])
        with pytest.raises(ValueError, match="undirected"):
            contract(G.edges[0], G)

    def test_foreign_edge(self, make_graph):
        """Test an edge of another graph is rejected."""
        G, _ = make_graph([("A", "B", 1)], directed=False)
        H, _ = make_graph([("A", "B", 1)], directed=False)
        with pytest.raises(ValueError, match="not part of the graph"):
            contract(H.edges[0], G)


class TestCut:
    """Tests for vertex cuts."""

    def test_star_center(self):
        """Test cutting the center of a star joins the leaves pairwise."""
        G = create_star_of_order(4, lambda i: i)
        cut(G.get_vertex(0), G)
        assert list(G) == [1, 2, 3]
        assert edge_pairs(G) == [(1, 2), (1, 3), (2, 3)]

    def test_existing_edges_kept(self, make_graph):
        """Test already-connected neighbours get no second edge."""
        G, v = make_graph([("A", "B", 1), ("A", "C", 1), ("B", "C", 7)], directed=False)
        cut(v["A"], G)
        assert G.edge_count == 1
        assert G.get_edge("B", "C").weight == 7.0

    def test_vertex_not_in_graph(self, make_graph):
        """Test a foreign vertex is rejected."""
        G, _ = make_graph([("A", "B", 1)], directed=False)
        H, w = make_graph([("A", "B", 1)], directed=False)
        with pytest.raises(ValueError):
            cut(w["A"], G)


class TestEdgeComplement:
    """Tests for the edge complement."""

    def test_path_complement(self):
        """Test the complement of P_3 is a single edge between the ends."""
        complement = edge_complement(create_path(3, lambda i: i))
        assert list(complement) == [0, 1, 2]
        assert edge_pairs(complement) == [(0, 2)]

    def test_circle_self_complementary(self):
        """Test C_5 complements to another 5-cycle."""
        complement = edge_complement(create_circle(5, lambda i: i))
        assert complement.edge_count == 5
        assert all(v.degree == 2 for v in complement.vertices)

    def test_complete_complement_empty(self):
        """Test K_n complements to the empty graph on n vertices."""
        complement = edge_complement(create_complete(4, lambda i: i))
        assert complement.vertex_count == 4
        assert complement.edge_count == 0

    def test_directed_ignores_direction(self, make_graph):
        """Test a directed pair joined one way stays unjoined."""
        G, _ = make_graph([("A", "B", 1)], vertices=("A", "B", "C"))
        complement = edge_complement(G)
        assert complement.directed
        assert not complement.contains_edge("A", "B")
        assert not complement.contains_edge("B", "A")
        assert complement.edge_count == 4

    def test_input_untouched(self):
        """Test the input graph is not modified."""
        G = create_path(3, lambda i: i)
        edge_complement(G)
        assert G.edge_count == 2


class TestCartesianProduct:
    """Tests for the Cartesian product."""

    def test_square(self):
        """Test P_2 x P_2 is a 4-cycle."""
        P = create_path(2, lambda i: i)
        square = cartesian_product(P, P, lambda u, v: (u.data, v.data))

        assert square.vertex_count == 4
        assert edge_pairs(square) == [
            ((0, 0), (0, 1)), ((0, 0), (1, 0)), ((0, 1), (1, 1)), ((1, 0), (1, 1)),
        ]
        assert square.girth == 4

    def test_prism(self):
        """Test K_2 x C_3 is the triangular prism with 6 vertices and 9 edges."""
        prism = cartesian_product(
            create_path(2, lambda i: i),
            create_circle(3, lambda i: i),
            lambda u, v: (u.data, v.data),
        )
        assert prism.vertex_count == 6
        assert prism.edge_count == 9
        assert all(v.degree == 3 for v in prism.vertices)

    def test_directed(self, make_graph):
        """Test directed factors keep their directions."""
        G, _ = make_graph([("a", "b", 1)])
        H, _ = make_graph([("x", "y", 1)])
        product = cartesian_product(G, H, lambda u, v: u.data + v.data)
        assert product.directed
        assert sorted((e.source.data, e.target.data) for e in product.edges) == [
            ("ax", "ay"), ("ax", "bx"), ("ay", "by"), ("bx", "by"),
        ]

    def test_mixed_directedness(self, make_graph):
        """Test factors of different directedness are rejected."""
        G, _ = make_graph([("a", "b", 1)])
        H, _ = make_graph([("x", "y", 1)], directed=False)
        with pytest.raises(ValueError):
            cartesian_product(G, H, lambda u, v: (u.data, v.data))


class TestJoin:
    """Tests for the graph join."""

    def test_wheel(self):
        """Test a single vertex joined to C_4 gives the wheel W_5."""
        hub = Graph(directed=False)
        hub.add_vertex("hub")
        wheel = join(hub, create_circle(4, lambda i: i))

        assert wheel.vertex_count == 5
        assert wheel.edge_count == 4 + 4
        assert wheel.get_vertex("hub").degree == 4

    def test_payloads_copied(self, make_graph):
        """Test edges from both inputs keep copies of their payloads."""
        G, _ = make_graph([("A", "B", 3)], directed=False)
        H, _ = make_graph([("X", "Y", 5)], directed=False)
        joined = join(G, H)

        assert joined.edge_count == 1 + 1 + 4
        joined.get_edge("A", "B").data.weight = 0.0
        assert G.get_edge("A", "B").weight == 3.0
        assert joined.get_edge("X", "Y").weight == 5.0

    def test_shared_payload_rejected(self, make_graph):
        """Test overlapping vertex payloads raise ValueError."""
        G, _ = make_graph([("A", "B", 1)], directed=False)
        H, _ = make_graph([("B", "C", 1)], directed=False)
        with pytest.raises(ValueError, match="already exists"):
            join(G, H)

    def test_mixed_directedness(self, make_graph):
        """Test graphs of different directedness are rejected."""
        G, _ = make_graph([("A", "B", 1)])
        H, _ = make_graph([("X", "Y", 1)], directed=False)
        with pytest.raises(ValueError, match="directedness"):
            join(G, H)
