import pytest

from simplex_tree import SimplexTree


def _make_subfaces_tree():
    st = SimplexTree()
    for vertices in ([2, 1, 0], [3], [3, 0], [1, 0], [3, 4, 5], [0, 1, 6, 7]):
        st.insert_simplex_and_subfaces(vertices)
    return st


def _simplices(st, handles):
    return {st.simplex(sh) for sh in handles}


def _brute_force_cofaces(st, vertices, codimension):
    target = set(vertices)
    found = set()
    for sh in st.complex_simplex_range():
        vs = st.simplex(sh)
        if target <= set(vs) and (codimension == 0 or len(vs) == len(target) + codimension):
            found.add(vs)
    return found


def test_star_of_vertex():
    st = _make_subfaces_tree()
    star = st.star_simplex_range(st.find([3]))
    assert _simplices(st, star) == {
        (3,),
        (3, 0),
        (4, 3),
        (5, 3),
        (5, 4, 3),
    }
    assert len(star) == 5


def test_star_of_edge():
    st = _make_subfaces_tree()
    star = st.star_simplex_range(st.find([7, 1]))
    assert _simplices(st, star) == {
        (7, 1),
        (7, 1, 0),
        (7, 6, 1),
        (7, 6, 1, 0),
    }


def test_cofaces_with_codimension():
    st = _make_subfaces_tree()
    sh = st.find([1, 7])
    assert _simplices(st, st.cofaces_simplex_range(sh, 1)) == {(7, 1, 0), (7, 6, 1)}
    assert _simplices(st, st.cofaces_simplex_range(sh, 2)) == {(7, 6, 1, 0)}
    assert st.cofaces_simplex_range(sh, 5) == []
    assert _simplices(st, st.cofaces_simplex_range(st.find([3]), 2)) == {(5, 4, 3)}


def test_cofaces_degenerate_arguments():
    st = _make_subfaces_tree()
    assert st.star_simplex_range(None) == []
    assert st.cofaces_simplex_range(None, 1) == []
    assert st.cofaces_simplex_range(st.find([3]), -1) == []
    # a maximal simplex has no proper cofaces
    assert st.cofaces_simplex_range(st.find([7, 6, 1, 0]), 1) == []
    assert st.star_simplex_range(st.find([5, 4, 3])) == [st.find([5, 4, 3])]


@pytest.mark.parametrize("codimension", [0, 1, 2, 3])
def test_cofaces_match_brute_force(codimension):
    st = _make_subfaces_tree()
    for sh in list(st.complex_simplex_range()):
        vs = st.simplex(sh)
        got = st.cofaces_simplex_range(sh, codimension)
        assert len(got) == len(set(map(id, got)))
        assert _simplices(st, got) == _brute_force_cofaces(st, vs, codimension)
