"""simplex_tree.interop

Optional conversion to and from GUDHI's `SimplexTree`.

Persistence itself is computed elsewhere; handing a tree over to GUDHI is the
usual way to get a diagram out of it:

    gst = to_gudhi(tree)
    gst.compute_persistence()

If `gudhi` is not installed, `to_gudhi` returns None.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .tree import SimplexTree


def _try_import_gudhi():
    try:
        import gudhi  # type: ignore
        return gudhi
    except Exception:
        return None


def to_gudhi(tree: SimplexTree):
    """Copy `tree` into a new `gudhi.SimplexTree` (None without gudhi)."""
    gudhi = _try_import_gudhi()
    if gudhi is None:
        return None

    gst = gudhi.SimplexTree()
    # filtration order: faces are in place before any coface is inserted
    for vertices, value in tree.get_filtration():
        gst.insert(vertices, filtration=value)
    return gst


def from_gudhi(gst: Any, *, config: Optional[Dict[str, Any]] = None) -> SimplexTree:
    """Build a `SimplexTree` from anything exposing GUDHI's `get_simplices()`."""
    records = [(list(vertices), float(value)) for vertices, value in gst.get_simplices()]
    records.sort(key=lambda r: len(r[0]))

    tree = SimplexTree(config=config)
    for vertices, value in records:
        tree.insert_simplex(vertices, value)
    return tree
