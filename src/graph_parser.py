import os

from chromatic_graph import Graph


class GraphReadError(OSError):
    """Raised when a graph file exists but cannot be read."""


def parse_graph(text: str) -> Graph:
    """
    Build a Graph from an adjacency list, one vertex per line:

        A:B,C
        B:A,C

    Names are taken verbatim (no trimming). Lines without ':' are skipped.
    Each line only links the subject to its neighbours, never the reverse.
    """
    graph = Graph()

    for line in text.split("\n"):
        name, sep, rest = line.partition(":")
        if not sep:
            continue

        vertex = graph.get_or_create(name)
        for neighbour_name in rest.split(","):
            vertex.add_neighbour(graph.get_or_create(neighbour_name))

    return graph


def load_graph(path: str) -> Graph:
    # Load graph from an adjacency list file
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file {path} does not exist")

    try:
        with open(path, "r", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise GraphReadError(f"Error reading file {path}: {e}") from e

    return parse_graph(text)
