"""End-to-end tests on the example graph used by the demo."""

from dijkstra_graph import GraphStore, shortest_path
from dijkstra_graph.config import AppConfig
from dijkstra_graph.demo import build_example_graph, main, run_demo


def test_example_ids_are_sequential():
    ids = build_example_graph(GraphStore())

    assert ids == {"A": 0, "B": 1, "C": 2, "D": 3, "E": 4}


def test_example_shortest_path_a_to_e():
    graph = GraphStore()
    ids = build_example_graph(graph)

    result = shortest_path(graph, ids["A"], ids["E"])

    assert result.total_cost == 5.0
    assert result.values == ("A", "B", "C", "E")
    assert [v.id for v in result.path] == [0, 1, 2, 4]


def test_example_other_queries():
    graph = GraphStore()
    ids = build_example_graph(graph)

    assert shortest_path(graph, ids["A"], ids["D"]).total_cost == 3.0
    assert shortest_path(graph, ids["E"], ids["D"]).values == ("E", "C", "D")
    assert shortest_path(graph, ids["D"], ids["A"]).is_empty


def test_run_demo_output():
    output = run_demo(AppConfig())

    assert output.splitlines() == [
        "[A] -> [B (1)][C (3)]",
        "[B] -> [D (2)][E (8)][C (1)]",
        "[C] -> [D (1)][E (3)]",
        "[D] -> [E (4)]",
        "[E] -> [C (3)]",
        "The shortest path has value of 5 and leads via A -> B -> C -> E",
    ]


def test_main_prints(capsys):
    main()

    out = capsys.readouterr().out
    assert "The shortest path has value of 5" in out
