import pytest

from hanoigraph.hanoi import (
    Configuration,
    build_adjacency_matrix,
    config_to_index,
    describe_configuration,
    index_to_config,
    is_valid_move,
    main,
    render_connections,
    render_matrix,
    render_pegs,
    shortest_path,
)


@pytest.fixture(scope="module")
def matrix():
    return build_adjacency_matrix()


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_index_round_trip_covers_all_configurations():
    configs = [index_to_config(i) for i in range(81)]
    assert [config_to_index(c) for c in configs] == list(range(81))
    assert len(set(configs)) == 81


def test_index_extremes():
    assert index_to_config(0) == Configuration((0, 0, 0, 0))
    assert config_to_index(Configuration((2, 2, 2, 2))) == 80


def test_index_out_of_range():
    with pytest.raises(ValueError):
        index_to_config(81)
    with pytest.raises(ValueError):
        index_to_config(-1)


@pytest.mark.parametrize("disks", [(0, 0, 0), (0, 0, 0, 3), (0, -1, 0, 0)])
def test_configuration_rejects_bad_placements(disks):
    with pytest.raises(ValueError):
        Configuration(disks)


def test_moving_smallest_disk_is_valid():
    assert is_valid_move(Configuration((0, 0, 0, 0)), Configuration((0, 0, 0, 1)))


def test_moving_covered_disk_is_invalid():
    assert not is_valid_move(Configuration((0, 0, 0, 0)), Configuration((1, 0, 0, 0)))


def test_moving_two_disks_or_none_is_invalid():
    start = Configuration((0, 0, 0, 0))
    assert not is_valid_move(start, start)
    assert not is_valid_move(start, Configuration((0, 0, 1, 1)))


def test_cannot_land_on_smaller_disk():
    origin = Configuration((0, 0, 1, 2))
    assert not is_valid_move(origin, Configuration((0, 0, 2, 2)))


def test_matrix_is_symmetric_with_empty_diagonal(matrix):
    assert len(matrix) == 81
    for i in range(81):
        assert matrix[i][i] == 0
        for j in range(81):
            assert matrix[i][j] == matrix[j][i]


def test_matrix_degrees(matrix):
    degrees = [sum(row) for row in matrix]
    assert set(degrees) == {2, 3}
    assert degrees[0] == 2 and degrees[80] == 2


def test_shortest_path_is_optimal_and_legal(matrix):
    path = shortest_path(matrix, 0, 80)
    assert path[0] == 0 and path[-1] == 80
    assert len(path) - 1 == 15
    for a, b in zip(path, path[1:]):
        assert is_valid_move(index_to_config(a), index_to_config(b))


def test_shortest_path_same_vertex(matrix):
    assert shortest_path(matrix, 5, 5) == [5]


def test_shortest_path_unreachable():
    assert shortest_path([[0, 0], [0, 0]], 0, 1) == []


def test_shortest_path_prefers_lighter_route():
    weights = [[0, 5, 1], [5, 0, 1], [1, 1, 0]]
    assert shortest_path(weights, 0, 1) == [0, 2, 1]


def test_shortest_path_bad_vertex(matrix):
    with pytest.raises(ValueError):
        shortest_path(matrix, 0, 81)


def test_describe_configuration():
    text = describe_configuration(Configuration((0, 0, 0, 0)))
    assert text == "Configuracao: D1->P1 D2->P1 D3->P1 D4->P1"


def test_render_matrix_reports_connections(matrix):
    text = render_matrix(matrix)
    total = sum(map(sum, matrix))
    assert f"Total de conexoes (arestas): {total}" in text
    assert "Tamanho: 81x81" in text
    assert text.splitlines()[0] == "=== MATRIZ DE ADJACENCIA 81x81 ==="


def test_render_connections_lists_every_edge(matrix):
    text = render_connections(matrix)
    total = sum(map(sum, matrix))
    listed = [line for line in text.splitlines() if line.startswith("Conexao ")]
    assert len(listed) == total
    assert listed[0] == "Conexao 1: [0,0,0,0] -> [0,0,0,1] (indice 0 -> 27)"


def test_main_full_run(monkeypatch, capsys):
    _feed(monkeypatch, ["6", "0"])
    assert main() == 0
    out = capsys.readouterr().out
    assert "Numero minimo de movimentos: 15" in out
    assert "Solucao otima encontrada!" in out
    assert "Encerrando programa..." in out


def test_main_requires_matrix_first(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "x", "0"])
    assert main() == 0
    out = capsys.readouterr().out
    assert "Erro: Matriz ainda nao foi criada!" in out
    assert "Opcao invalida! Tente novamente." in out


def test_main_option_four_shows_path(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "4", "s", "0"])
    assert main() == 0
    out = capsys.readouterr().out
    assert "Matriz ja foi criada!" in out
    assert "Numero de movimentos: 15" in out
    assert "Caminho: 0 -> " in out