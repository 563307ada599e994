import os
import glob
import csv
import time
import argparse

from typing import List

from chromatic_graph import unique_color_count
from graph_parser import load_graph
from greedy_coloring import color_graph, verify_coloring, uncolored_vertices


# --- Configuration ---
GRAPHS_DIR = 'data/benchmarks'
# automatically include all .txt in benchmarks
OUTPUT_CSV = 'results/greedy_experiments.csv'

COLUMNS = ['graph', 'vertices', 'links', 'colors', 'uncolored', 'valid', 'runtime']


def run_experiments(graphs_dir: str = GRAPHS_DIR, output_path: str = OUTPUT_CSV) -> List[list]:

    graph_files = sorted(glob.glob(os.path.join(graphs_dir, '*.txt')))
    rows = []

    # prepare CSV
    out_dir = os.path.dirname(output_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(output_path, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(COLUMNS)

        for graph_path in graph_files:
            graph_name = os.path.basename(graph_path)
            print(f"Running: {graph_name}")

            graph = load_graph(graph_path)

            start = time.time()
            color_graph(graph)
            runtime = time.time() - start

            row = [
                graph_name,
                len(graph),
                graph.number_of_links(),
                unique_color_count(graph),
                len(uncolored_vertices(graph)),
                verify_coloring(graph),
                round(runtime, 6),
            ]
            writer.writerow(row)
            csvfile.flush()
            rows.append(row)

            print(f"  -> colors={row[3]}, uncolored={row[4]}, valid={row[5]}, time={runtime:.4f}s")

    return rows


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Greedy coloring over a directory of graph files')
    parser.add_argument('--graphs', default=GRAPHS_DIR, help='Directory holding *.txt graph files')
    parser.add_argument('--output', default=OUTPUT_CSV, help='CSV file to write')
    args = parser.parse_args()

    run_experiments(args.graphs, args.output)
