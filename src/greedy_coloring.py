from typing import List

from chromatic_graph import UNCOLORED, Graph, Vertex


def minimum_available_color(vertex: Vertex) -> int:
    # Smallest positive color not taken by a contiguous run 1, 2, ... of neighbour colors
    close_colors = sorted(n.color for n in vertex.neighbours)

    start = 0
    for color in close_colors:
        if color > start:
            if color == start + 1:
                start += 1
            else:
                break

    return start + 1


def color_graph(graph: Graph) -> None:
    """
    Greedy depth-first coloring starting from the first vertex of the graph.

    Every vertex reachable from the start gets the smallest color its
    neighbours leave free. Vertices in other components keep UNCOLORED.
    Already colored vertices are never recolored, so calling this twice
    changes nothing.

    The walk keeps one neighbour iterator per level instead of recursing,
    visiting vertices in the same order a recursive walk would.
    """
    start = graph.start_vertex()
    if start is None:
        return

    stack = []

    def visit(vertex: Vertex) -> None:
        if not vertex.has_color():
            vertex.color = minimum_available_color(vertex)
        stack.append(iter(vertex.neighbours))

    visit(start)
    while stack:
        for neighbour in stack[-1]:
            # Checked when reached, an earlier sibling may have colored it already
            if not neighbour.has_color():
                visit(neighbour)
                break
        else:
            stack.pop()


def verify_coloring(graph: Graph) -> bool:
    # Check no link joins two vertices sharing the same color (uncolored ends are ignored)
    coloring = graph.coloring()
    for u, v in graph.G.edges():
        if coloring[u] != UNCOLORED and coloring[u] == coloring[v]:
            return False
    return True


def uncolored_vertices(graph: Graph) -> List[str]:
    return [name for name, color in graph.coloring().items() if color == UNCOLORED]
