# src/run_greedy.py

import argparse
import sys
import time

from chromatic_graph import Graph, describe, unique_color_count
from graph_parser import load_graph
from greedy_coloring import color_graph, verify_coloring, uncolored_vertices


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Greedy coloring of a graph given as an adjacency list "
                    "(one 'name:neighbour1,neighbour2' line per vertex)"
    )
    p.add_argument("input", help="Path to the graph file (examples under data/benchmarks/)")
    p.add_argument("--output", "-o", default=None, help="Save the 'name: color' coloring to this file")
    p.add_argument("--draw", action="store_true", help="Draw the colored graph")
    p.add_argument("--draw-path", default=None, help="Save the drawing to this image file instead of showing it")
    return p.parse_args(argv)


def print_adjacency(graph: Graph) -> None:
    for name, neighbours in describe(graph):
        print(name + ": " + "".join(n + ", " for n in neighbours))
    print()


def save_coloring(graph: Graph, path: str) -> None:
    with open(path, "w") as f:
        for name, color in graph.coloring().items():
            f.write(f"{name}: {color}\n")


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        graph = load_graph(args.input)
    except OSError:
        print(f"Can't read file: {args.input}", file=sys.stderr)
        return 1

    print(f"Loaded graph with {len(graph)} vertices and {graph.number_of_links()} links")

    print_adjacency(graph)

    start = time.time()
    color_graph(graph)
    elapsed = time.time() - start

    print(f"This graph has {unique_color_count(graph)} unique color(s)")
    print(f"Colored in {elapsed:.4f}s, coloring is {'valid' if verify_coloring(graph) else 'invalid'}")

    missing = uncolored_vertices(graph)
    if missing:
        print(f"{len(missing)} vertex(es) unreachable from '{graph.start_vertex().name}' left uncolored")

    if args.output:
        save_coloring(graph, args.output)
        print(f"Full coloring saved to {args.output}")

    if args.draw or args.draw_path:
        from exploration import GraphExplorer
        GraphExplorer(graph).draw_graph(save_path=args.draw_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
