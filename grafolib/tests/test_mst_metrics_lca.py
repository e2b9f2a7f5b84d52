"""
Tests for minimum spanning trees, distance metrics and DAG lowest common
ancestors.
"""

import random
import unittest

import networkx as nx

from grafolib.errors import NotAcyclicError, NotConnectedError, VertexError
from grafolib.examples import fixture_path
from grafolib.graph import DirectedGraph, Edge, UndirectedGraph
from grafolib.lca import LowestCommonAncestor, lowest_common_ancestors
from grafolib.metrics import GraphMetrics
from grafolib.mst import KruskalMST, PrimMST


def random_connected_graph(n, extra, seed, weighted=False):
    """A random spanning tree plus extra random edges."""
    rng = random.Random(seed)
    g = UndirectedGraph(n)
    for v in range(1, n):
        g.add_edge(rng.randrange(v), v, rng.randint(1, 50) if weighted else 0.0)
    added = 0
    while added < extra:
        u, v = rng.sample(range(n), 2)
        if not g.has_edge(u, v):
            g.add_edge(u, v, rng.randint(1, 50) if weighted else 0.0)
            added += 1
    return g


class TestMinimumSpanningTree(unittest.TestCase):
    """Tests for KruskalMST and PrimMST."""

    def setUp(self):
        self.graph = UndirectedGraph.from_file(fixture_path("mst.txt"), weighted=True)

    def test_kruskal(self):
        """Test Kruskal on the bundled fixture."""
        mst = KruskalMST(self.graph)
        self.assertEqual(mst.edges(), [Edge(0, 1), Edge(1, 2), Edge(2, 3)])
        self.assertEqual(mst.weight(), 7.0)

    def test_prim(self):
        """Test Prim on the bundled fixture."""
        mst = PrimMST(self.graph)
        self.assertEqual(set(mst.edges()), {Edge(0, 1), Edge(1, 2), Edge(2, 3)})
        self.assertEqual(mst.weight(), 7.0)

    def test_prim_needs_connected_graph(self):
        """Test prim needs connected graph."""
        g = UndirectedGraph.from_edges(4, [(0, 1, 1.0), (2, 3, 1.0)])
        with self.assertRaises(NotConnectedError):
            PrimMST(g)

    def test_kruskal_spanning_forest(self):
        """Test kruskal spanning forest."""
        g = UndirectedGraph.from_edges(4, [(0, 1, 1.0), (2, 3, 2.0)])
        mst = KruskalMST(g)
        self.assertEqual(len(mst.edges()), 2)
        self.assertEqual(mst.weight(), 3.0)

    def test_trivial_graphs(self):
        """Test Prim on empty and single-vertex graphs."""
        self.assertEqual(PrimMST(UndirectedGraph(0)).edges(), [])
        self.assertEqual(PrimMST(UndirectedGraph(1)).weight(), 0)

    def test_random_graphs(self):
        """Test agreement with networkx on random graphs."""
        for seed in range(8):
            g = random_connected_graph(20, 25, seed, weighted=True)
            expected = nx.minimum_spanning_tree(g.to_networkx()).size(weight='weight')
            kruskal = KruskalMST(g)
            prim = PrimMST(g)
            self.assertEqual(len(kruskal.edges()), 19)
            self.assertEqual(len(prim.edges()), 19)
            self.assertAlmostEqual(kruskal.weight(), expected)
            self.assertAlmostEqual(prim.weight(), expected)


class TestGraphMetrics(unittest.TestCase):
    """Tests for GraphMetrics."""

    def test_fixture(self):
        """Test the bundled fixture."""
        metrics = GraphMetrics(UndirectedGraph.from_file(fixture_path("metrics.txt")))
        self.assertEqual([metrics.eccentricity(v) for v in range(5)], [3, 2, 2, 2, 3])
        self.assertEqual(metrics.diameter(), 3)
        self.assertEqual(metrics.radius(), 2)
        self.assertEqual(metrics.center(), 1)
        self.assertEqual(metrics.wiener_index(), 16)

    def test_single_vertex(self):
        """Test metrics of a single vertex."""
        metrics = GraphMetrics(UndirectedGraph(1))
        self.assertEqual(metrics.diameter(), 0)
        self.assertEqual(metrics.wiener_index(), 0)

    def test_disconnected(self):
        """Test disconnected and empty graphs are rejected."""
        with self.assertRaises(NotConnectedError):
            GraphMetrics(UndirectedGraph.from_edges(3, [(0, 1)]))
        with self.assertRaises(NotConnectedError):
            GraphMetrics(UndirectedGraph(0))

    def test_bad_vertex(self):
        """Test out of range vertices are rejected."""
        metrics = GraphMetrics(UndirectedGraph.from_file(fixture_path("triangle.txt")))
        with self.assertRaises(VertexError):
            metrics.eccentricity(3)

    def test_random_graphs(self):
        """Test agreement with networkx on random graphs."""
        for seed in range(5):
            g = random_connected_graph(25, 10, seed)
            nx_graph = g.to_networkx()
            metrics = GraphMetrics(g)
            self.assertEqual(metrics.diameter(), nx.diameter(nx_graph))
            self.assertEqual(metrics.radius(), nx.radius(nx_graph))
            self.assertEqual(metrics.wiener_index(), int(nx.wiener_index(nx_graph)))
            self.assertIn(metrics.center(), nx.center(nx_graph))


class TestLowestCommonAncestor(unittest.TestCase):
    """Tests for LowestCommonAncestor."""

    def setUp(self):
        self.graph = DirectedGraph.from_file(fixture_path("lca.txt"))
        self.lca = LowestCommonAncestor(self.graph)

    def test_lca(self):
        """Test lowest common ancestors on the bundled DAG."""
        self.assertEqual(self.lca.lca(3, 4), 2)
        self.assertEqual(self.lca.lca(1, 2), 0)
        self.assertEqual(self.lca.lca(3, 5), 1)
        self.assertEqual(self.lca.lca(5, 3), 1)

    def test_same_vertex(self):
        """Test the LCA of a vertex with itself."""
        self.assertEqual(self.lca.lca(5, 5), 3)
        self.assertEqual(self.lca.lca(0, 0), -1)

    def test_no_common_ancestor(self):
        """Test no common ancestor."""
        self.assertEqual(self.lca.lca(6, 5), -1)
        self.assertEqual(self.lca.lca(0, 1), -1)

    def test_depth(self):
        """Test longest-path depths."""
        self.assertEqual([self.lca.depth(v) for v in range(7)], [0, 1, 1, 2, 2, 3, 0])

    def test_is_ancestor(self):
        """Test the proper ancestor relation."""
        self.assertTrue(self.lca.is_ancestor(0, 5))
        self.assertFalse(self.lca.is_ancestor(5, 0))
        self.assertFalse(self.lca.is_ancestor(3, 3))
        self.assertFalse(self.lca.is_ancestor(1, 4))

    def test_bad_vertex(self):
        """Test out of range vertices are rejected."""
        with self.assertRaises(VertexError):
            self.lca.lca(0, 7)

    def test_cyclic(self):
        """Test a cyclic digraph is rejected."""
        g = DirectedGraph.from_arcs(3, [(0, 1), (1, 2), (2, 0)])
        with self.assertRaises(NotAcyclicError):
            LowestCommonAncestor(g)
        outcome = lowest_common_ancestors(g)
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, NotAcyclicError)

    def test_outcome(self):
        """Test the Outcome-returning factory."""
        outcome = lowest_common_ancestors(self.graph)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.unwrap().lca(3, 4), 2)


if __name__ == '__main__':
    unittest.main()
