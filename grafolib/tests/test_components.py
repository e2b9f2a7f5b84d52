"""
Tests for disjoint sets, connected components and two-colouring.
"""

import random
import unittest

import networkx as nx

from grafolib.bipartite import TwoColoring
from grafolib.connected import ConnectedComponentsDFS, ConnectedComponentsDS
from grafolib.disjoint_set import DisjointSet
from grafolib.errors import GraphError, NotBipartiteError, VertexError
from grafolib.examples import fixture_path
from grafolib.graph import UndirectedGraph


def random_graph(n, m, seed):
    rng = random.Random(seed)
    g = UndirectedGraph(n)
    while g.num_edges() < m:
        u, v = rng.sample(range(n), 2)
        if not g.has_edge(u, v):
            g.add_edge(u, v)
    return g


class TestDisjointSet(unittest.TestCase):
    """Tests for DisjointSet."""

    def test_singletons(self):
        """Test every element starts in its own set."""
        ds = DisjointSet(4)
        self.assertEqual(ds.num_sets(), 4)
        self.assertEqual([ds.find(v) for v in range(4)], [0, 1, 2, 3])
        self.assertEqual(ds.set_size(2), 1)

    def test_union(self):
        """Test union merges sets and reports redundant merges."""
        ds = DisjointSet(5)
        self.assertTrue(ds.union(0, 1))
        self.assertTrue(ds.union(3, 4))
        self.assertTrue(ds.union(1, 4))
        self.assertFalse(ds.union(0, 3))

        self.assertEqual(ds.num_sets(), 2)
        self.assertTrue(ds.same_set(0, 4))
        self.assertFalse(ds.same_set(2, 4))
        self.assertEqual(ds.set_size(3), 4)
        self.assertEqual(ds.set_size(2), 1)

    def test_long_chain(self):
        """Test a long chain of unions collapses to one set."""
        n = 1000
        ds = DisjointSet(n)
        for i in range(n - 1):
            ds.union(i, i + 1)
        self.assertEqual(ds.num_sets(), 1)
        self.assertEqual(ds.set_size(0), n)
        self.assertEqual(len({ds.find(v) for v in range(n)}), 1)

    def test_out_of_range(self):
        """Test out of range vertices are rejected."""
        ds = DisjointSet(3)
        with self.assertRaises(VertexError):
            ds.find(3)
        with self.assertRaises(VertexError):
            ds.union(-1, 0)


class TestConnectedComponents(unittest.TestCase):
    """Both implementations must agree."""

    IMPLEMENTATIONS = (ConnectedComponentsDFS, ConnectedComponentsDS)

    def test_ids_follow_smallest_vertex(self):
        """Test component ids follow the smallest vertex of each component."""
        g = UndirectedGraph.from_edges(7, [(5, 1), (2, 6), (6, 0), (3, 4)])
        for impl in self.IMPLEMENTATIONS:
            cc = impl(g)
            self.assertEqual(cc.num_components(), 3)
            self.assertEqual([cc.component_id(v) for v in range(7)], [0, 1, 0, 2, 2, 1, 0])
            self.assertEqual([cc.component_size(c) for c in range(3)], [3, 2, 2])
            self.assertTrue(cc.same_component(0, 6))
            self.assertFalse(cc.same_component(1, 3))

    def test_isolated_vertices(self):
        """Test isolated vertices form singleton components."""
        for impl in self.IMPLEMENTATIONS:
            cc = impl(UndirectedGraph(3))
            self.assertEqual(cc.num_components(), 3)

    def test_bad_ids(self):
        """Test invalid component ids and vertices are rejected."""
        g = UndirectedGraph.from_file(fixture_path("triangle.txt"))
        for impl in self.IMPLEMENTATIONS:
            cc = impl(g)
            with self.assertRaises(GraphError):
                cc.component_size(1)
            with self.assertRaises(VertexError):
                cc.component_id(3)

    def test_random_graphs(self):
        """Test agreement with networkx on random graphs."""
        for seed in range(10):
            g = random_graph(40, 30, seed)
            expected = nx.number_connected_components(g.to_networkx())
            dfs = ConnectedComponentsDFS(g)
            ds = ConnectedComponentsDS(g)
            self.assertEqual(dfs.num_components(), expected)
            self.assertEqual([dfs.component_id(v) for v in range(40)],
                             [ds.component_id(v) for v in range(40)])


class TestTwoColoring(unittest.TestCase):
    """Tests for TwoColoring."""

    def test_even_cycle(self):
        """Test an even cycle is two-colourable with alternating sides."""
        g = UndirectedGraph.from_file(fixture_path("even_cycle.txt"))
        coloring = TwoColoring(g)
        self.assertTrue(coloring.is_two_colorable())
        self.assertEqual([coloring.side(v) for v in range(6)], [0, 1, 0, 1, 0, 1])

    def test_chord_breaks_coloring(self):
        """Test a chord closing an odd cycle breaks the colouring."""
        g = UndirectedGraph.from_file(fixture_path("even_cycle.txt"))
        g.add_edge(0, 2)
        self.assertFalse(TwoColoring(g).is_two_colorable())

    def test_triangle(self):
        """Test a triangle."""
        coloring = TwoColoring(UndirectedGraph.from_file(fixture_path("triangle.txt")))
        self.assertFalse(coloring.is_two_colorable())
        with self.assertRaises(NotBipartiteError):
            coloring.side(0)

    def test_edgeless(self):
        """Test graphs without edges are two-colourable."""
        self.assertTrue(TwoColoring(UndirectedGraph(0)).is_two_colorable())
        self.assertTrue(TwoColoring(UndirectedGraph(4)).is_two_colorable())

    def test_random_graphs(self):
        """Test agreement with networkx on random graphs."""
        for seed in range(10):
            g = random_graph(15, 14, seed)
            coloring = TwoColoring(g)
            self.assertEqual(coloring.is_two_colorable(), nx.is_bipartite(g.to_networkx()))
            if coloring.is_two_colorable():
                for e in g.edges():
                    self.assertNotEqual(coloring.side(e.u), coloring.side(e.v))


if __name__ == '__main__':
    unittest.main()
