"""simplex_tree.cofaces

Star and coface enumeration without scanning the whole complex.

Written in canonical (descending) order, any coface T of S embeds the vertices
of S in order. Walking the tree from the root with the vertices of S still to
be matched, a Siblings level only needs the nodes whose label is >= the next
vertex of S:

- a node with a larger label is an extra vertex of T sitting above the next
  vertex of S, so we descend keeping the same vertices to match
- a node equal to the next vertex consumes it; once all of S is consumed the
  node is a coface and so is every node of its subtree
- smaller labels can never lead back to the next vertex and are skipped
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .node import Node, Siblings
from .schema import Simplex

if TYPE_CHECKING:
    from .tree import SimplexTree


def star_simplex_range(tree: "SimplexTree", sh: Optional[Node]) -> List[Node]:
    """All cofaces of `sh`, `sh` itself included."""
    return cofaces_simplex_range(tree, sh, 0)


def cofaces_simplex_range(tree: "SimplexTree", sh: Optional[Node], codimension: int) -> List[Node]:
    """Cofaces of `sh` with exactly `codimension` extra vertices.

    `codimension == 0` returns the whole star. A null handle, a negative
    codimension, or a codimension reaching beyond the tree dimension gives an
    empty list.
    """
    if sh is None or codimension < 0:
        return []
    simplex = tree.simplex(sh)
    if codimension > 0 and len(simplex) - 1 + codimension > tree.dimension():
        return []

    target = None if codimension == 0 else len(simplex) + codimension
    result: List[Node] = []
    _rec_cofaces(tree.root(), simplex, 1, target, result)
    return result


def _rec_cofaces(
    sib: Siblings,
    rest: Simplex,
    depth: int,
    target: Optional[int],
    result: List[Node],
) -> None:
    # `depth` is the number of vertices of the simplices stored in `sib`.
    if target is not None and depth - 1 + len(rest) > target:
        return
    head = rest[0]
    for node in sib.nodes_from(head):
        if node.label == head:
            if len(rest) == 1:
                _collect_subtree(node, depth, target, result)
            elif node.children is not None:
                _rec_cofaces(node.children, rest[1:], depth + 1, target, result)
        elif node.children is not None:
            _rec_cofaces(node.children, rest, depth + 1, target, result)


def _collect_subtree(node: Node, depth: int, target: Optional[int], result: List[Node]) -> None:
    if target is None or depth == target:
        result.append(node)
    if node.children is None or (target is not None and depth >= target):
        return
    for child in node.children:
        _collect_subtree(child, depth + 1, target, result)


def has_proper_coface(tree: "SimplexTree", sh: Node) -> bool:
    """True when some simplex of `tree` has `sh` as a codimension-1 face.

    Unlike `cofaces_simplex_range`, this never trusts the tracked tree
    dimension, which may be lower than the stored simplices.
    """
    simplex = tree.simplex(sh)
    result: List[Node] = []
    _rec_cofaces(tree.root(), simplex, 1, len(simplex) + 1, result)
    return bool(result)
