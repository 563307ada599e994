import csv
from pathlib import Path

from exploration import GraphExplorer
from experiments import COLUMNS, run_experiments
from graph_parser import parse_graph
from greedy_coloring import color_graph

BENCHMARKS = Path(__file__).resolve().parent.parent / "data" / "benchmarks"


def test_basic_stats_two_components():
    graph = parse_graph("A:B,C\nB:A,C\nC:A,B\nD:E\nE:D")
    stats = GraphExplorer(graph).compute_basic_stats()

    assert stats["num_vertices"] == 5
    assert stats["num_links"] == 8
    assert stats["degree_histogram"] == {2: 3, 1: 2}
    assert stats["num_components"] == 2
    assert stats["component_sizes"] == [3, 2]
    assert stats["reachable_from_start"] == 3
    assert stats["symmetric"] is True


def test_basic_stats_one_directional():
    graph = parse_graph("A:B")
    stats = GraphExplorer(graph).compute_basic_stats()
    assert stats["symmetric"] is False
    assert stats["density"] == 0.5
    assert stats["reachable_from_start"] == 2


def test_basic_stats_empty_graph():
    stats = GraphExplorer(parse_graph("")).compute_basic_stats()
    assert stats["num_vertices"] == 0
    assert stats["avg_degree"] == 0.0
    assert stats["num_components"] == 0
    assert stats["reachable_from_start"] == 0


def test_draw_graph_with_uncolored_vertices(tmp_path):
    graph = parse_graph("A:B\nB:A\nC:D\nD:C")
    color_graph(graph)
    path = tmp_path / "graph.png"
    GraphExplorer(graph).draw_graph(save_path=str(path))
    assert path.exists()


def test_run_experiments_writes_csv(tmp_path):
    output = tmp_path / "results" / "greedy.csv"
    rows = run_experiments(str(BENCHMARKS), str(output))

    with open(output, newline="") as f:
        written = list(csv.reader(f))
    assert written[0] == COLUMNS
    assert len(written) == len(rows) + 1

    by_name = {row[0]: row for row in rows}
    assert by_name["triangle.txt"][1:6] == [3, 6, 3, 0, True]
    assert by_name["two_components.txt"][3:5] == [4, 2]
    assert by_name["australia.txt"][3:5] == [4, 2]
    assert all(row[5] for row in rows)


def test_run_experiments_empty_directory(tmp_path):
    output = tmp_path / "out.csv"
    assert run_experiments(str(tmp_path), str(output)) == []
    assert output.read_text().splitlines() == [",".join(COLUMNS)]
