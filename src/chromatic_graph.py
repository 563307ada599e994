import networkx as nx
from typing import Dict, Iterator, List, Optional, Tuple

UNCOLORED = 0                                                                          # Sentinel color for "not assigned yet"


class Vertex:
    # Lightweight handle on a node stored inside a Graph.
    # The Graph owns the storage, a Vertex only remembers where to look.

    __slots__ = ("graph", "name")

    def __init__(self, graph: "Graph", name: str):
        self.graph = graph
        self.name = name

    @property
    def color(self) -> int:
        return self.graph.G.nodes[self.name]["color"]

    @color.setter
    def color(self, value: int) -> None:
        self.graph.G.nodes[self.name]["color"] = value

    def has_color(self) -> bool:
        return self.color != UNCOLORED

    @property
    def neighbours(self) -> List["Vertex"]:
        # Successors come back in insertion order (first seen first)
        return [Vertex(self.graph, n) for n in self.graph.G.successors(self.name)]

    def neighbour_names(self) -> List[str]:
        return list(self.graph.G.successors(self.name))

    def is_neighbour(self, other: "Vertex") -> bool:
        return self.graph.G.has_edge(self.name, other.name)

    def add_neighbour(self, other: "Vertex") -> bool:
        """
        Link `other` as a neighbour of this vertex (one direction only).
        Returns False when it is already a neighbour or is this vertex itself.
        """
        if other.name == self.name or self.is_neighbour(other):
            return False
        self.graph.G.add_edge(self.name, other.name)
        return True

    def __eq__(self, other) -> bool:
        return isinstance(other, Vertex) and other.graph is self.graph and other.name == self.name

    def __hash__(self) -> int:
        return hash((id(self.graph), self.name))

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, color={self.color})"


class Graph:

    def __init__(self):
        self.G = nx.DiGraph()                                                          # Arena: vertex name -> attributes, links keyed by name

    def __len__(self) -> int:
        return self.G.number_of_nodes()

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __contains__(self, name: str) -> bool:
        return name in self.G

    @property
    def vertices(self) -> List[Vertex]:
        return [Vertex(self, n) for n in self.G.nodes()]

    def number_of_links(self) -> int:
        return self.G.number_of_edges()

    def find(self, name: str) -> Optional[Vertex]:
        # Exact name match, no trimming
        if name in self.G:
            return Vertex(self, name)
        return None

    def get_or_create(self, name: str) -> Vertex:
        vertex = self.find(name)
        if vertex is not None:
            return vertex

        self.G.add_node(name, color=UNCOLORED)
        return Vertex(self, name)

    def start_vertex(self) -> Optional[Vertex]:
        # Coloring always starts from the first vertex ever created
        for name in self.G.nodes():
            return Vertex(self, name)
        return None

    def coloring(self) -> Dict[str, int]:
        return {n: c for n, c in self.G.nodes(data="color")}


def unique_color_count(graph: Graph) -> int:
    # The uncolored sentinel counts as a color of its own when present
    return len({c for _, c in graph.G.nodes(data="color")})


def describe(graph: Graph) -> List[Tuple[str, List[str]]]:
    return [(v.name, v.neighbour_names()) for v in graph.vertices]
