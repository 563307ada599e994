import networkx as nx
import matplotlib.pyplot as plt
from collections import Counter

from chromatic_graph import UNCOLORED, Graph


class GraphExplorer:
    def __init__(self, graph: Graph):

        self.graph = graph
        self.G = graph.G

    def compute_basic_stats(self):
        # basic graph statistics.
        stats = {}
        stats['num_vertices'] = self.G.number_of_nodes()
        stats['num_links'] = self.G.number_of_edges()
        stats['density'] = nx.density(self.G) if stats['num_vertices'] > 1 else 0.0
        degrees = [d for _, d in self.G.out_degree()]
        stats['avg_degree'] = sum(degrees) / len(degrees) if degrees else 0.0
        stats['degree_histogram'] = Counter(degrees)
        stats['num_components'] = nx.number_weakly_connected_components(self.G) if degrees else 0
        stats['component_sizes'] = sorted(
            (len(c) for c in nx.weakly_connected_components(self.G)),
            reverse=True
        )

        # vertices the greedy walk can reach, the start included
        start = self.graph.start_vertex()
        stats['reachable_from_start'] = 0 if start is None else len(nx.descendants(self.G, start.name)) + 1

        # every link declared in both directions
        stats['symmetric'] = all(self.G.has_edge(v, u) for u, v in self.G.edges())
        return stats

    def draw_graph(self, save_path=None):
        plt.figure(figsize=(10, 8))
        pos = nx.spring_layout(self.G.to_undirected(), seed=42)

        colored = [(n, c) for n, c in self.G.nodes(data="color") if c != UNCOLORED]
        uncolored = [n for n, c in self.G.nodes(data="color") if c == UNCOLORED]

        if colored:
            nx.draw_networkx_nodes(
                self.G, pos,
                nodelist=[n for n, _ in colored],
                node_color=[c for _, c in colored],
                cmap=plt.cm.tab20, vmin=1, vmax=20, node_size=500
            )
        if uncolored:
            # never reached by the greedy walk
            nx.draw_networkx_nodes(self.G, pos, nodelist=uncolored, node_color='lightgrey', node_size=500)
        nx.draw_networkx_edges(self.G, pos, arrows=True)
        nx.draw_networkx_labels(self.G, pos, font_size=10)
        plt.axis('off')

        if save_path:
            plt.savefig(save_path)
            plt.close()
        else:
            plt.show()


if __name__ == '__main__':
    from graph_parser import load_graph
    from greedy_coloring import color_graph

    # triangle.txt
    graph = load_graph('data/benchmarks/triangle.txt')
    color_graph(graph)
    explorer = GraphExplorer(graph)

    stats = explorer.compute_basic_stats()
    print("Basic stats for triangle.txt:")
    for k, v in stats.items():
        print(f"  {k}: {v}")

    # Draw the graph
    explorer.draw_graph()
