import numpy as np
import pytest

from simplex_tree import rips_simplex_tree


def _square_distances():
    points = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    return np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)


def _random_distances(n_points=15, seed=0):
    rng = np.random.default_rng(seed)
    points = rng.random((n_points, 3))
    return np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)


def test_complete_square():
    st = rips_simplex_tree(_square_distances(), max_edge_length=1.5, max_dimension=2)
    assert st.num_vertices() == 4
    assert st.num_simplices() == 14
    assert st.dimension() == 2
    assert st.filtration(st.find([0, 1, 2])) == pytest.approx(np.sqrt(2.0))
    assert st.filtration(st.find([0, 1])) == pytest.approx(1.0)
    assert st.filtration(st.find([2])) == 0.0


def test_square_cycle():
    st = rips_simplex_tree(_square_distances(), max_edge_length=1.0, max_dimension=2)
    assert st.num_simplices() == 8
    assert st.dimension() == 1
    assert st.find([0, 2]) is None


def test_vertices_only():
    st = rips_simplex_tree(_square_distances(), max_dimension=0)
    assert st.num_simplices() == 4
    assert st.dimension() == 0


def test_config_defaults():
    st = rips_simplex_tree(_square_distances(), config={"max_dimension": 3})
    assert st.num_simplices() == 15
    assert st.dimension() == 3


@pytest.mark.parametrize(
    "matrix",
    [
        np.zeros((2, 3)),
        np.array([[0.0, 1.0], [2.0, 0.0]]),
    ],
)
def test_invalid_matrices(matrix):
    with pytest.raises(ValueError):
        rips_simplex_tree(matrix)


def test_negative_dimension():
    with pytest.raises(ValueError):
        rips_simplex_tree(_square_distances(), max_dimension=-1)


def test_matches_gudhi():
    gudhi = pytest.importorskip("gudhi")
    dist = _random_distances()
    ours = rips_simplex_tree(dist, max_edge_length=0.5, max_dimension=2)
    theirs = gudhi.RipsComplex(distance_matrix=dist, max_edge_length=0.5).create_simplex_tree(max_dimension=2)

    ours_set = {tuple(sorted(vs)): f for vs, f in ours.get_simplices()}
    theirs_set = {tuple(sorted(vs)): f for vs, f in theirs.get_simplices()}
    assert ours_set.keys() == theirs_set.keys()
    for simplex, value in ours_set.items():
        assert value == pytest.approx(theirs_set[simplex])
