"""
Example usage of grafolib on the bundled fixtures.

Run with:
    python -m grafolib.examples
"""

import logging
import os

from grafolib.bipartite import TwoColoring
from grafolib.eulerian import find_eulerian_circuit
from grafolib.graph import DirectedGraph, UndirectedGraph
from grafolib.lca import LowestCommonAncestor
from grafolib.metrics import GraphMetrics
from grafolib.mst import KruskalMST, PrimMST
from grafolib.scc import StronglyConnectedComponents
from grafolib.topological import topological_sort
from grafolib.twosat import TwoSatSolver

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fixtures")


def fixture_path(name: str) -> str:
    return os.path.join(FIXTURES_DIR, name)


def example_eulerian():
    print("=" * 60)
    print("Eulerian circuits")
    print("=" * 60)

    for name in ["eulerian.txt", "eulerian_unbalanced.txt", "eulerian_disconnected.txt"]:
        g = DirectedGraph.from_file(fixture_path(name))
        outcome = find_eulerian_circuit(g)
        print(f"{name}: {g!r}")
        if outcome.ok:
            print(f"  Circuit: {outcome.value}")
        else:
            print(f"  No circuit: {outcome.error}")
    print()


def example_metrics():
    print("=" * 60)
    print("Metrics of an undirected graph")
    print("=" * 60)

    g = UndirectedGraph.from_file(fixture_path("metrics.txt"))
    metrics = GraphMetrics(g)
    for v in range(g.num_vertices()):
        print(f"  Eccentricity({v}) = {metrics.eccentricity(v)}")
    print(f"  Diameter = {metrics.diameter()}")
    print(f"  Radius = {metrics.radius()}")
    print(f"  Center = {metrics.center()}")
    print(f"  Wiener index = {metrics.wiener_index()}")
    print()


def example_bipartite():
    print("=" * 60)
    print("Two-colorability")
    print("=" * 60)

    g = UndirectedGraph.from_file(fixture_path("even_cycle.txt"))
    print(f"  Even cycle is bipartite: {TwoColoring(g).is_two_colorable()}")
    g.add_edge(0, 2)
    print(f"  After adding (0, 2): {TwoColoring(g).is_two_colorable()}")
    g = UndirectedGraph.from_file(fixture_path("triangle.txt"))
    print(f"  Triangle is bipartite: {TwoColoring(g).is_two_colorable()}")
    print()


def example_lca():
    print("=" * 60)
    print("Lowest common ancestors")
    print("=" * 60)

    g = DirectedGraph.from_file(fixture_path("lca.txt"))
    print(f"  Topological order: {topological_sort(g).unwrap()}")
    lca = LowestCommonAncestor(g)
    for u, v in [(3, 4), (1, 2), (3, 5), (5, 5), (6, 5)]:
        print(f"  LCA({u}, {v}) = {lca.lca(u, v)}")
    print()


def example_mst():
    print("=" * 60)
    print("Minimum spanning trees")
    print("=" * 60)

    g = UndirectedGraph.from_file(fixture_path("mst.txt"), weighted=True)
    kruskal = KruskalMST(g)
    prim = PrimMST(g)
    print(f"  Kruskal: {kruskal.edges()} weight={kruskal.weight()}")
    print(f"  Prim:    {prim.edges()} weight={prim.weight()}")
    print()


def example_scc():
    print("=" * 60)
    print("Strongly connected components")
    print("=" * 60)

    g = DirectedGraph.from_file(fixture_path("scc.txt"))
    scc = StronglyConnectedComponents(g)
    print(f"  {scc.num_components()} components: {scc.components()}")
    print("  Component graph:")
    print(scc.component_graph())
    print()


def example_2sat():
    print("=" * 60)
    print("2-SAT")
    print("=" * 60)

    for name in ["twosat_negated_units.txt", "twosat_unsat.txt", "twosat_four_vars.txt"]:
        solver = TwoSatSolver.from_file(fixture_path(name))
        print(f"{name}: {solver.formula.to_string()}")
        print(f"  Satisfiable: {solver.is_satisfiable()}")
        if solver.is_satisfiable():
            for i, value in enumerate(solver.assignment()):
                print(f"    x{i} = {value}")
    print()


def run_all_examples(verbose: bool = False):
    """Run all examples."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    example_eulerian()
    example_metrics()
    example_bipartite()
    example_lca()
    example_mst()
    example_scc()
    example_2sat()


if __name__ == '__main__':
    run_all_examples()
