"""Command that reads a graph and prints a report on it."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from grafo.graph import Graph, read_graph


def report(graph: Graph) -> str:
    """Return the text report for ``graph``."""
    bipartite = "" if graph.is_bipartite() else "não "
    diameters = " ".join(str(d) for d in graph.diameters())
    cut_vertices = " ".join(graph.cut_vertices())
    cut_edges = " ".join(name for pair in graph.cut_edges() for name in pair)
    return "\n".join(
        [
            f"grafo: {graph.name}",
            f"{graph.vertex_count()} vertices",
            f"{graph.edge_count()} arestas",
            f"{graph.component_count()} componentes",
            f"{bipartite}bipartido",
            f"diâmetros: {diameters}",
            f"vértices de corte: {cut_vertices}",
            f"arestas de corte: {cut_edges}",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="grafo", description="Report on a graph.")
    parser.add_argument("path", nargs="?", help="graph file; standard input if omitted")
    args = parser.parse_args(argv)
    if args.path is None:
        graph = read_graph(sys.stdin)
    else:
        try:
            with open(args.path, encoding="utf-8") as handle:
                graph = read_graph(handle)
        except OSError as error:
            print(f"grafo: {error}", file=sys.stderr)
            return 1
    print(report(graph))
    return 0


if __name__ == "__main__":
    sys.exit(main())