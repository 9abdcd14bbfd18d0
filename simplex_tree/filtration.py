"""
Simplex Tree: Filtration Index
==============================

This module handles:
1. Building the filtration order of a simplex tree (one traversal + sort)
2. Exposing it as a read-only, restartable sequence of simplex handles
3. Checking a tree against the assumptions persistence algorithms make

Order
-----
Handle A precedes handle B iff

    (filtration(A), dimension(A), vertices(A)) < (filtration(B), dimension(B), vertices(B))

where vertices are compared in canonical (descending) form. Lower-dimensional
faces therefore come before any coface sharing the same filtration value, and
the vertex tuples make the order total.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Sequence, Tuple, Union, overload

import numpy as np
from numpy.typing import NDArray

from .node import Node
from .schema import Simplex

if TYPE_CHECKING:
    from .tree import SimplexTree


# =============================================================================
# Filtration Index
# =============================================================================

class FiltrationIndex(Sequence[Node]):
    """
    Simplex handles of a tree sorted in filtration order.

    Parameters
    ----------
    tree : SimplexTree
        The tree to index. The index is a snapshot: it is not updated by
        later mutations (the tree drops its cached index on every mutation).

    Notes
    -----
    Iterating twice yields the same sequence; `position(sh)` gives the index
    of a handle in O(1).
    """

    def __init__(self, tree: "SimplexTree") -> None:
        entries: List[Tuple[float, int, Simplex, Node]] = [
            (node.filtration, len(vs) - 1, vs, node)
            for node, vs in tree._walk(tree.root(), ())
        ]
        entries.sort(key=lambda e: (e[0], e[1], e[2]))

        self._handles: Tuple[Node, ...] = tuple(e[3] for e in entries)
        self._filtrations = np.array([e[0] for e in entries], dtype=np.float64)
        self._dimensions = np.array([e[1] for e in entries], dtype=np.int64)
        self._positions: Dict[int, int] = {id(sh): i for i, sh in enumerate(self._handles)}

    @overload
    def __getitem__(self, index: int) -> Node: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Node]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Node, Sequence[Node]]:
        return self._handles[index]

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._handles)

    def position(self, sh: Node) -> int:
        """Index of `sh` in the filtration order (ValueError if absent)."""
        try:
            return self._positions[id(sh)]
        except KeyError:
            raise ValueError("simplex handle is not part of this filtration") from None

    def filtration_values(self) -> NDArray[np.float64]:
        """Filtration values in filtration order (copy)."""
        return self._filtrations.copy()

    def dimensions(self) -> NDArray[np.int64]:
        """Simplex dimensions in filtration order (copy)."""
        return self._dimensions.copy()

    def __repr__(self) -> str:
        return f"FiltrationIndex(n={len(self._handles)})"


# =============================================================================
# Validation
# =============================================================================

def validate_filtration(tree: "SimplexTree") -> List[str]:
    """
    Check closure and monotonicity of a tree.

    Parameters
    ----------
    tree : SimplexTree
        The filtered complex.

    Returns
    -------
    List of warning messages (empty if valid).

    Notes
    -----
    Neither property is enforced by the tree itself: `insert_simplex` does
    not add faces, and filtration values are taken as given.
    """
    warnings: List[str] = []

    for node, vs in tree._walk(tree.root(), ()):
        if len(vs) < 2:
            continue
        for i in range(len(vs)):
            face_vs = vs[:i] + vs[i + 1:]
            face = tree._find_canonical(face_vs)
            if face is None:
                warnings.append(f"missing face {list(face_vs)} of simplex {list(vs)}")
            elif node.filtration < face.filtration:
                warnings.append(
                    f"monotonicity violation: simplex {list(vs)} val={node.filtration} "
                    f"< face {list(face_vs)} val={face.filtration}"
                )

    return warnings
