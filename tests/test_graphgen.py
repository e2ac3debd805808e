import numpy as np
import pytest

from graphgen import *
from kruskal import parse_edges, kruskal


def test_node_name():
    assert node_name(0) == 'A'
    assert node_name(25) == 'Z'
    assert node_name(26) == 'AA'
    assert node_name(27) == 'AB'
    assert node_name(701) == 'ZZ'
    assert node_name(702) == 'AAA'


def test_generate_complete_graph():
    adj = generate_graph(6, density=1.0, min_weight=3, max_weight=9, seed=1)
    upper = adj[np.triu_indices(6, k=1)]
    assert np.count_nonzero(upper) == 15
    assert upper.min() >= 3 and upper.max() <= 9
    assert np.count_nonzero(np.tril(adj)) == 0

    edges, forest = parse_edges(to_lines(adj))
    assert len(edges) == 15
    assert len(forest) == 6
    assert len(kruskal(edges, forest)) == 5


def test_generate_graph_seeded():
    a = generate_graph(12, density=0.4, seed=7)
    b = generate_graph(12, density=0.4, seed=7)
    assert np.array_equal(a, b)
    assert np.count_nonzero(a) == int(0.4 * 12 * 11 / 2)


def test_generate_empty_graph():
    adj = generate_graph(5, density=0.0)
    assert to_lines(adj) == []


@pytest.mark.parametrize('kwargs', [
    {'density': 1.5},
    {'density': -0.1},
    {'min_weight': 0},
    {'min_weight': 10, 'max_weight': 5},
])
def test_generate_graph_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        generate_graph(4, **kwargs)


def test_to_lines():
    adj = np.array([[0, 4, 7],
                    [0, 0, 2],
                    [0, 0, 0]])
    assert to_lines(adj) == ['A, 4, B, 7, C', 'B, 2, C']


def test_main(tmp_path, capsys):
    path = tmp_path / 'graph.txt'
    assert main(['8', '-d', '0.5', '-o', str(path), '-q']) == 0
    assert capsys.readouterr().out == ''

    with open(path) as f:
        edges, forest = parse_edges(f)
    assert len(edges) == int(0.5 * 8 * 7 / 2)


def test_main_rejects_bad_density(tmp_path):
    with pytest.raises(SystemExit):
        main(['4', '-d', '2', '-o', str(tmp_path / 'g.txt'), '-q'])
