"""simplex_tree.contraction

Edge contraction: merge vertex `b` into vertex `a`.

Every simplex containing `b` is mapped to (simplex - {b}) | {a}. Simplices
that already contained `a` collapse onto an existing face; the others are
re-homed onto `a`. When several simplices land on the same image, the image
keeps the minimum of their filtration values (and of its own value if it was
already present), so a contraction never raises a filtration value.

The edit is done as: collect the star of `b`, compute the images, unlink
every `b` node top-down, then merge the images back in. Nothing is mutated
while the star is being enumerated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from .cofaces import star_simplex_range
from .node import Siblings
from .schema import Simplex

if TYPE_CHECKING:
    from .tree import SimplexTree


def edge_contraction(tree: "SimplexTree", a: int, b: int) -> bool:
    """Contract the edge (a, b) of `tree`, keeping vertex `a`.

    Requires `a < b` with both `a` and `b` vertices of the tree; otherwise the
    call is a no-op returning False. Returns True when the tree was modified.
    Dimension and maximal filtration counters are left as they were.
    """
    a, b = int(a), int(b)
    root = tree.root()
    if a >= b or a not in root or b not in root:
        return False

    images: Dict[Simplex, float] = {}
    for sh in star_simplex_range(tree, root.get(b)):
        image = tuple(sorted({v for v in tree.simplex(sh) if v != b} | {a}, reverse=True))
        value = sh.filtration
        if image not in images or value < images[image]:
            images[image] = value

    _unlink_vertex(tree, root, b)

    # faces before cofaces, so every path prefix is settled first
    for image in sorted(images, key=lambda s: (len(s), s)):
        tree._merge_simplex(image, images[image])
    return True


def _unlink_vertex(tree: "SimplexTree", sib: Siblings, b: int) -> None:
    # Every simplex containing `b` has exactly one node labelled `b` on its
    # path, below ancestors with larger labels only.
    node = sib.get(b)
    if node is not None:
        tree._unlink(node)
    for other in list(sib.nodes_from(b + 1)):
        if other.children is not None:
            _unlink_vertex(tree, other.children, b)
