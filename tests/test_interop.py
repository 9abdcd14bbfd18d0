import numpy as np
import pytest

from simplex_tree import SimplexTree, from_gudhi, rips_simplex_tree, to_gudhi

gudhi = pytest.importorskip("gudhi")


def _make_rips_tree():
    rng = np.random.default_rng(1)
    points = rng.random((10, 2))
    dist = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
    return rips_simplex_tree(dist, max_edge_length=0.7, max_dimension=2)


def test_to_gudhi():
    st = _make_rips_tree()
    gst = to_gudhi(st)
    assert gst.num_simplices() == st.num_simplices()
    assert gst.num_vertices() == st.num_vertices()
    assert gst.dimension() == st.dimension()
    for vertices, value in st.get_simplices():
        assert gst.filtration(vertices) == pytest.approx(value)

    # the copy is a valid filtration: persistence runs on it
    diagram = gst.persistence()
    assert any(dim == 0 for dim, _ in diagram)


def test_round_trip_through_gudhi():
    st = _make_rips_tree()
    back = from_gudhi(to_gudhi(st))
    assert back == st


def test_from_gudhi():
    gst = gudhi.SimplexTree()
    gst.insert([0, 1, 2], filtration=0.4)
    st = from_gudhi(gst)
    assert st.num_simplices() == 7
    assert st.dimension() == 2
    assert st.filtration(st.find([2, 0])) == pytest.approx(0.4)
    assert isinstance(st, SimplexTree)
