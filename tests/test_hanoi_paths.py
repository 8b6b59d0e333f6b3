import pytest

from hanoigraph.hanoi_paths import (
    bellman_ford,
    build_adjacency,
    dijkstra,
    format_configurations,
    format_matrix,
    format_path,
    generate_configurations,
    is_edge,
    main,
    path_to,
    timing_report,
)


@pytest.fixture(scope="module")
def configurations():
    return generate_configurations()


@pytest.fixture(scope="module")
def adjacency(configurations):
    return build_adjacency(configurations)


def test_configurations_cover_all_states(configurations):
    assert len(configurations) == 81
    assert len(set(configurations)) == 81
    assert configurations[0] == (1, 1, 1, 1)
    assert configurations[-1] == (3, 3, 3, 3)
    assert configurations[1] == (2, 1, 1, 1)


def test_moving_smallest_disk_is_edge():
    assert is_edge((1, 1, 1, 1), (2, 1, 1, 1))


def test_moving_covered_disk_is_not_edge():
    assert not is_edge((1, 1, 1, 1), (1, 2, 1, 1))


def test_two_disks_moved_is_not_edge():
    assert not is_edge((1, 1, 1, 1), (2, 2, 1, 1))


def test_same_configuration_is_not_edge():
    assert not is_edge((1, 2, 3, 1), (1, 2, 3, 1))


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        is_edge((1, 1), (1, 1, 1))


def test_adjacency_is_symmetric_without_loops(adjacency):
    for i, row in enumerate(adjacency):
        assert row[i] == 0
        for j, value in enumerate(row):
            assert value == adjacency[j][i]


def test_every_state_has_two_or_three_moves(adjacency):
    degrees = [sum(row) for row in adjacency]
    assert set(degrees) == {2, 3}


def test_dijkstra_finds_optimal_solution(adjacency):
    predecessors = dijkstra(adjacency, 0)
    path = path_to(predecessors, 80)
    assert path[0] == 0
    assert path[-1] == 80
    assert len(path) - 1 == 2**4 - 1
    for first, second in zip(path, path[1:]):
        assert adjacency[first][second] == 1


def test_bellman_ford_matches_dijkstra_lengths(adjacency):
    by_dijkstra = dijkstra(adjacency, 0)
    by_bellman = bellman_ford(adjacency, 0)
    for target in range(len(adjacency)):
        assert len(path_to(by_dijkstra, target)) == len(path_to(by_bellman, target))


def test_bellman_ford_path_is_valid(adjacency):
    path = path_to(bellman_ford(adjacency, 0), 80)
    assert path[0] == 0
    for first, second in zip(path, path[1:]):
        assert adjacency[first][second] == 1


def test_source_has_no_predecessor(adjacency):
    assert dijkstra(adjacency, 0)[0] is None
    assert path_to(bellman_ford(adjacency, 0), 0) == [0]


def test_small_line_graph():
    line = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert dijkstra(line, 0) == [None, 0, 1]
    assert bellman_ford(line, 0) == [None, 0, 1]


def test_unreachable_vertex_has_no_predecessor():
    split = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert dijkstra(split, 0)[2] is None
    assert bellman_ford(split, 0)[2] is None


def test_source_out_of_range_raises(adjacency):
    with pytest.raises(ValueError):
        dijkstra(adjacency, 81)
    with pytest.raises(ValueError):
        bellman_ford(adjacency, -1)


def test_path_to_detects_cycle():
    with pytest.raises(ValueError):
        path_to([1, 0], 0)


def test_format_path(adjacency):
    text = format_path(dijkstra(adjacency, 0), 0, 80)
    lines = text.splitlines()
    assert lines[0] == "Caminho minimo entre configuracoes 0 e 80:"
    assert lines[1].startswith("0 ")
    assert lines[1].endswith(" 80")
    assert lines[2] == "Quantidade de movimentos: 15"


def test_format_configurations(configurations):
    lines = format_configurations(configurations).splitlines()
    assert len(lines) == 81
    assert lines[0] == "Configuracao 0: 1 1 1 1 "


def test_format_matrix(adjacency):
    lines = format_matrix(adjacency).splitlines()
    assert lines[0] == "Matriz de Adjacencia:"
    assert len(lines) == 2 + 81
    assert lines[2].startswith(" 0  0  1 ")


def test_timing_report(adjacency):
    text = timing_report(adjacency, 0, 2)
    assert "Realizando 2 testes..." in text
    assert text.splitlines()[-1] == "==== FIM DOS TESTES ===="


def test_timing_report_rejects_zero_runs(adjacency):
    with pytest.raises(ValueError):
        timing_report(adjacency, 0, 0)


def test_main_runs_both_algorithms(monkeypatch, capsys):
    answers = iter(["3", "4", "9", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Quantidade de movimentos: 15") == 2
    assert "Tempo de execucao (Dijkstra)" in out
    assert "Tempo de execucao (Ford-Moore-Bellman)" in out
    assert "Opcao invalida!" in out
    assert "Saindo..." in out