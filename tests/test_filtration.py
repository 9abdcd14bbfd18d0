import numpy as np
import pytest

from simplex_tree import FiltrationIndex, SimplexTree, rips_simplex_tree, validate_filtration


def _make_insertion_tree():
    st = SimplexTree()
    for vertices, value in [
        ([0], 0.1),
        ([1], 0.1),
        ([0, 1], 0.2),
        ([2], 0.1),
        ([2, 0], 0.2),
        ([2, 1], 0.2),
        ([2, 1, 0], 0.3),
        ([3], 0.1),
        ([3, 0], 0.2),
    ]:
        st.insert_simplex(vertices, value)
    return st


def _make_rips_tree(n_points=12, seed=0):
    rng = np.random.default_rng(seed)
    points = rng.random((n_points, 2))
    dist = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
    return rips_simplex_tree(dist, max_edge_length=0.6, max_dimension=2)


def test_filtration_order():
    st = _make_insertion_tree()
    order = [st.simplex(sh) for sh in st.filtration_simplex_range()]
    assert order == [
        (0,), (1,), (2,), (3,),
        (1, 0), (2, 0), (2, 1), (3, 0),
        (2, 1, 0),
    ]


def test_filtration_index_is_restartable_and_cached():
    st = _make_insertion_tree()
    index = st.filtration_simplex_range()
    assert isinstance(index, FiltrationIndex)
    assert list(index) == list(index)
    assert st.filtration_simplex_range() is index
    assert index[0] is st.find([0])
    assert len(index[2:5]) == 3


def test_keys_are_positions():
    st = _make_insertion_tree()
    index = st.initialize_filtration()
    for i, sh in enumerate(index):
        assert st.key(sh) == i
        assert index.position(sh) == i


def test_position_of_foreign_handle():
    st = _make_insertion_tree()
    other = _make_insertion_tree()
    with pytest.raises(ValueError):
        st.filtration_simplex_range().position(other.find([0]))


def test_mutation_invalidates_index():
    st = _make_insertion_tree()
    index = st.filtration_simplex_range()
    st.insert_simplex([9], 0.0)
    rebuilt = st.filtration_simplex_range()
    assert rebuilt is not index
    assert len(rebuilt) == len(index) + 1
    assert rebuilt[0] is st.find([9])

    st.assign_filtration(st.find([9]), 1.0)
    assert st.simplex(st.filtration_simplex_range()[-1]) == (9,)


def test_value_arrays():
    st = _make_rips_tree()
    index = st.filtration_simplex_range()
    values = index.filtration_values()
    dims = index.dimensions()
    assert values.shape == dims.shape == (len(index),)
    assert np.all(np.diff(values) >= 0)
    assert dims.max() == 2

    values[0] = 99.0
    assert index.filtration_values()[0] != 99.0


def test_faces_precede_cofaces():
    st = _make_rips_tree()
    index = st.filtration_simplex_range()
    for i, sh in enumerate(index):
        for face in st.boundary_simplex_range(sh):
            assert index.position(face) < i


def test_get_filtration():
    st = _make_insertion_tree()
    pairs = st.get_filtration()
    assert pairs[0] == ([0], pytest.approx(0.1))
    assert pairs[-1][0] == [2, 1, 0]


def test_empty_index():
    st = SimplexTree()
    index = st.filtration_simplex_range()
    assert len(index) == 0
    assert index.filtration_values().size == 0


def test_validate_filtration():
    assert validate_filtration(_make_insertion_tree()) == []
    assert validate_filtration(_make_rips_tree()) == []

    st = SimplexTree()
    st.insert_simplex([1, 0], 0.1)
    warnings = validate_filtration(st)
    assert len(warnings) == 1
    assert warnings[0].startswith("missing face [0]")

    st = SimplexTree()
    st.insert_simplex([0], 0.5)
    st.insert_simplex([1], 0.1)
    st.insert_simplex([1, 0], 0.2)
    warnings = validate_filtration(st)
    assert len(warnings) == 1
    assert "monotonicity violation" in warnings[0]
