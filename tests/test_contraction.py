import pytest

from simplex_tree import SimplexTree, validate_filtration


def _make_contraction_tree():
    st = SimplexTree()
    st.insert_simplex_and_subfaces([1, 2, 3], 0.5)
    st.insert_simplex_and_subfaces([2, 3, 4, 5], 0.4)
    st.insert_simplex_and_subfaces([1, 3, 6, 7], 0.3)
    st.insert_simplex_and_subfaces([1, 3, 8], 0.2)
    return st


def _simplex_set(st):
    return {tuple(vs) for vs, _ in st.get_simplices()}


@pytest.mark.parametrize("a, b", [(3, 1), (1, 9), (0, 2), (1, 1)])
def test_contraction_preconditions_are_noops(a, b):
    st = _make_contraction_tree()
    before = st.copy()
    assert not st.edge_contraction(a, b)
    assert st == before


def test_contraction_structure():
    st = _make_contraction_tree()
    before = st.copy()
    assert st.edge_contraction(1, 3)
    assert st != before

    expected = SimplexTree()
    for vertices in ([1, 2, 4, 5], [1, 6, 7], [1, 8]):
        expected.insert_simplex_and_subfaces(vertices)
    assert _simplex_set(st) == _simplex_set(expected)

    assert 3 not in st.complex_vertex_range()
    assert st.num_vertices() == 7
    assert not [w for w in validate_filtration(st) if w.startswith("missing face")]


def test_contraction_keeps_minimum_values():
    st = _make_contraction_tree()
    before = {tuple(vs): f for vs, f in st.get_simplices()}
    st.edge_contraction(1, 3)

    assert st.filtration(st.find([1, 2, 4, 5])) == pytest.approx(0.4)
    assert st.filtration(st.find([1, 6, 7])) == pytest.approx(0.3)
    assert st.filtration(st.find([1, 8])) == pytest.approx(0.2)
    assert st.filtration(st.find([1, 4])) == pytest.approx(0.4)
    assert st.filtration(st.find([1, 2])) == pytest.approx(0.5)
    assert st.filtration(st.find([1])) == pytest.approx(0.5)
    assert st.filtration(st.find([2])) == pytest.approx(0.5)

    # never raises a value that was already there
    for vs, value in st.get_simplices():
        if tuple(vs) in before:
            assert value <= before[tuple(vs)]


def test_contraction_merges_by_minimum():
    st = SimplexTree()
    st.insert_simplex_and_subfaces([0, 2], 0.9)
    st.insert_simplex_and_subfaces([1, 2], 0.2)
    assert st.edge_contraction(0, 1)
    assert st.filtration(st.find([0])) == pytest.approx(0.2)
    assert st.filtration(st.find([2, 0])) == pytest.approx(0.2)
    assert st.filtration(st.find([2])) == pytest.approx(0.9)
    assert st.find([1]) is None


def test_contraction_collapses_triangle():
    st = SimplexTree()
    st.insert_simplex_and_subfaces([2, 1, 0], 0.5)
    assert st.edge_contraction(0, 1)
    assert _simplex_set(st) == {(0,), (2,), (2, 0)}
    assert st.num_vertices() == 2
    assert st.num_simplices() == 3


def test_contraction_leaves_counters_alone():
    st = _make_contraction_tree()
    st.set_dimension(7)
    st.edge_contraction(1, 3)
    assert st.dimension() == 7
    assert st.finalize_dimension() == 3


def test_contraction_invalidates_filtration_index():
    st = _make_contraction_tree()
    index = st.filtration_simplex_range()
    assert len(index) == st.num_simplices()
    st.edge_contraction(1, 3)
    rebuilt = st.filtration_simplex_range()
    assert rebuilt is not index
    assert len(rebuilt) == st.num_simplices()
    assert len(rebuilt) < len(index)
