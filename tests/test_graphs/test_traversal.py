"""Tests for graph traversal algorithms and visitors."""

import pytest

from atomgraph.graphs import (
    CallbackVisitor,
    CountingVisitor,
    EmptyVisitor,
    Graph,
    OrderedVisitor,
    PostOrderVisitor,
    PreOrderVisitor,
    TrackingVisitor,
    breadth_first,
    depth_first,
    topological,
)


def names(vertices):
    return [v.data for v in vertices]


class TestDepthFirst:
    """Tests for depth-first traversal."""

    def test_pre_and_post_order(self, make_graph):
        """Test pre-order and post-order on a small tree."""
        G, v = make_graph([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])

        pre = TrackingVisitor()
        depth_first(PreOrderVisitor(pre), v["A"])
        post = TrackingVisitor()
        depth_first(PostOrderVisitor(post), v["A"])

        assert names(pre.tracking_list) == ["A", "B", "D", "C"]
        assert names(post.tracking_list) == ["D", "B", "C", "A"]

    def test_visits_each_vertex_once(self, make_graph):
        """Test DFS over a graph with a diamond and a back edge."""
        G, v = make_graph(
            [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1), ("D", "A", 1)]
        )
        tracker = TrackingVisitor()
        depth_first(PreOrderVisitor(tracker), v["A"])
        assert names(tracker.tracking_list) == ["A", "B", "D", "C"]

    def test_only_reachable_vertices(self, make_graph):
        """Test DFS stays within the reachable part of the graph."""
        G, v = make_graph([("A", "B", 1), ("C", "A", 1)])
        counter = CountingVisitor()
        depth_first(PreOrderVisitor(counter), v["A"])
        assert counter.count == 2

    def test_undirected_follows_both_directions(self, make_graph):
        """Test DFS on an undirected graph reaches all connected vertices."""
        G, v = make_graph([("A", "B", 1), ("C", "B", 1)], directed=False)
        tracker = TrackingVisitor()
        depth_first(PreOrderVisitor(tracker), v["C"])
        assert names(tracker.tracking_list) == ["C", "B", "A"]

    def test_stops_when_completed(self, make_graph):
        """Test DFS short-circuits once the visitor has completed."""
        G, v = make_graph([("A", "B", 1), ("B", "C", 1), ("C", "D", 1)])
        seen = []
        visitor = CallbackVisitor(seen.append, limit=2)
        depth_first(PreOrderVisitor(visitor), v["A"])
        assert names(seen) == ["A", "B"]

    def test_deep_graph_no_recursion_error(self):
        """Test DFS on a path longer than the default recursion limit."""
        G = Graph()
        previous = G.add_vertex(0)
        for i in range(1, 5000):
            current = G.add_vertex(i)
            G.add_edge(previous, current)
            previous = current

        counter = CountingVisitor()
        depth_first(PostOrderVisitor(counter), G.vertex_at(0))
        assert counter.count == 5000

    def test_base_ordered_visitor_drops_events(self, make_graph):
        """Test the base OrderedVisitor forwards nothing."""
        G, v = make_graph([("A", "B", 1)])
        counter = CountingVisitor()
        depth_first(OrderedVisitor(counter), v["A"])
        assert counter.count == 0

    def test_none_arguments(self, make_graph):
        """Test None arguments raise TypeError."""
        G, v = make_graph([("A", "B", 1)])
        with pytest.raises(TypeError):
            depth_first(None, v["A"])
        with pytest.raises(TypeError):
            depth_first(PreOrderVisitor(EmptyVisitor()), None)


class TestBreadthFirst:
    """Tests for breadth-first traversal."""

    def test_level_order(self, make_graph):
        """Test BFS visits vertices level by level."""
        G, v = make_graph([("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "E", 1)])
        tracker = TrackingVisitor()
        breadth_first(v["A"], tracker)
        assert names(tracker.tracking_list) == ["A", "B", "C", "D", "E"]

    def test_cycle_visited_once(self, make_graph):
        """Test BFS on a cycle visits each vertex once."""
        G, v = make_graph([("A", "B", 1), ("B", "C", 1), ("C", "A", 1)])
        counter = CountingVisitor()
        breadth_first(v["B"], counter)
        assert counter.count == 3

    def test_early_completion(self, make_graph):
        """Test BFS stops when the callback asks to."""
        G, v = make_graph([("A", "B", 1), ("A", "C", 1), ("A", "D", 1)])
        seen = []

        def stop_at_c(vertex):
            seen.append(vertex.data)
            return vertex.data == "C"

        breadth_first(v["A"], CallbackVisitor(stop_at_c))
        assert seen == ["A", "B", "C"]


class TestTopological:
    """Tests for Kahn's topological order."""

    def test_acyclic_visits_all(self, make_graph):
        """Test a DAG visits every vertex in a valid order."""
        G, v = make_graph(
            [("shirt", "tie", 1), ("tie", "jacket", 1), ("trousers", "shoes", 1),
             ("trousers", "belt", 1), ("belt", "jacket", 1)]
        )
        tracker = TrackingVisitor()
        count = topological(G, tracker)
        assert count == G.vertex_count

        position = {x.data: i for i, x in enumerate(tracker.tracking_list)}
        for edge in G.edges:
            assert position[edge.source.data] < position[edge.target.data]

    def test_pure_cycle_visits_none(self, make_graph):
        """Test the synthetic cycle A->B->C->A yields a visit count of 0."""
        G, _ = make_graph([("A", "B", 1), ("B", "C", 1), ("C", "A", 1)])
        assert topological(G, EmptyVisitor()) == 0

    def test_partial_order_before_cycle(self, make_graph):
        """Test only the acyclic prefix is visited."""
        G, _ = make_graph([("S", "A", 1), ("A", "B", 1), ("B", "A", 1)])
        tracker = TrackingVisitor()
        count = topological(G, tracker)
        assert count == 1
        assert names(tracker.tracking_list) == ["S"]

    def test_self_loop_blocks_vertex(self):
        """Test a vertex with a self-loop never reaches in-degree 0."""
        G = Graph(allows_self_loops=True)
        a, b = G.add_vertex("A"), G.add_vertex("B")
        G.add_edge(a, a)
        G.add_edge(b, a)
        assert topological(G, EmptyVisitor()) == 1

    def test_undirected_raises(self, make_graph):
        """Test topological order is rejected on undirected graphs."""
        G, _ = make_graph([("A", "B", 1)], directed=False)
        with pytest.raises(RuntimeError, match="directed"):
            topological(G, EmptyVisitor())

    def test_acyclic_iff_full_count(self, random_weighted_graph):
        """Test visit count equals vertex count exactly when the graph is acyclic."""
        from atomgraph.graphs import find_cycles

        for _ in range(5):
            G, _ = random_weighted_graph(n=6, p=0.25, directed=True)
            acyclic = len(find_cycles(G)) == 0
            # find_cycles never reports 2-cycles, so check those directly
            two_cycle = any(e.target.has_emanating_edge_to(e.source) for e in G.edges)
            full = topological(G, EmptyVisitor()) == G.vertex_count
            assert full == (acyclic and not two_cycle)


class TestVisitors:
    """Tests for visitor helpers."""

    def test_counting_reset(self):
        """Test CountingVisitor counts and resets."""
        counter = CountingVisitor()
        counter.visit(1)
        counter.visit(2)
        assert counter.count == 2
        counter.reset()
        assert counter.count == 0

    def test_callback_limit_validation(self):
        """Test CallbackVisitor rejects bad arguments."""
        with pytest.raises(TypeError):
            CallbackVisitor(None)
        with pytest.raises(ValueError):
            CallbackVisitor(print, limit=-1)

    def test_callback_limit_zero_is_complete(self):
        """Test a limit of zero completes immediately."""
        visitor = CallbackVisitor(lambda obj: None, limit=0)
        assert visitor.has_completed
