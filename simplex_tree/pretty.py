"""Pretty-print helpers for simplex trees.

Kept out of the core algorithms so the textual rendering stays easy to change.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .node import Node, Siblings
from .tree import SimplexTree


def format_simplex(vertices: Iterable[int]) -> str:
    return " ".join(str(v) for v in vertices)


def print_tree(tree: SimplexTree) -> None:
    """Print the trie, one node per line, indented by depth."""
    if not len(tree.root()):
        print("(empty simplex tree)")
        return
    _print_siblings(tree.root(), 0)


def _print_siblings(sib: Siblings, depth: int) -> None:
    for node in sib:
        print(f"{'  ' * depth}{node.label} [{node.filtration}]")
        if node.children is not None:
            _print_siblings(node.children, depth + 1)


def print_filtration(tree: SimplexTree, *, max_lines: int = 0) -> None:
    """Print simplices in filtration order as "[f] v_k ... v_0".

    max_lines:
        If >0, cap the number of printed simplices. 0 means "no cap".
    """
    for i, sh in enumerate(tree.filtration_simplex_range()):
        if max_lines and i >= max_lines:
            print("   ...")
            break
        print(f"   [{tree.filtration(sh)}] {format_simplex(tree.simplex_vertex_range(sh))}")


def count_by_dimension(tree: SimplexTree) -> Dict[int, int]:
    """Histogram of simplex counts per dimension."""
    hist: Dict[int, int] = {}
    for node, vertices in tree._walk(tree.root(), ()):
        dim = len(vertices) - 1
        hist[dim] = hist.get(dim, 0) + 1
    return hist


def print_summary(tree: SimplexTree, title: Optional[str] = None) -> None:
    """Print a lightweight summary of the complex."""
    hist = count_by_dimension(tree)
    if title:
        print(title)
    print(f"  vertices:   {tree.num_vertices()}")
    print(f"  simplices:  {sum(hist.values())}")
    print(f"  dimension:  {tree.dimension()}")
    print(f"  filtration: {tree.filtration()}")
    if hist:
        dims = ", ".join(f"{d}:{c}" for d, c in sorted(hist.items()))
        print(f"  per dim:    {{ {dims} }}")


def print_star(tree: SimplexTree, sh: Optional[Node], codimension: int = 0) -> None:
    """Print the cofaces of `sh` (its star when codimension is 0)."""
    cofaces = tree.cofaces_simplex_range(sh, codimension)
    if not cofaces:
        print("(no cofaces)")
        return
    for c in sorted(cofaces, key=lambda c: (tree.dimension(c), tree.simplex(c))):
        print(f"   [{tree.filtration(c)}] {format_simplex(tree.simplex_vertex_range(c))}")
