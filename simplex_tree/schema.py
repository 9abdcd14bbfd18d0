"""simplex_tree.schema

Lightweight data-model definitions used across the package.

Simplices are handled in two shapes:
- inside the tree, as paths of `Node` objects (see `node.py`); a handle is the
  Node at the end of the path
- outside the tree, as plain tuples of vertex labels in *canonical form*
  (strictly descending), or as JSON-friendly records

This module names the plain shapes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, TypedDict


Vertex = int
FiltrationValue = float
Simplex = Tuple[int, ...]  # canonical form: strictly descending

NULL_VERTEX: Vertex = -1
NULL_KEY: int = -1
DEFAULT_FILTRATION: FiltrationValue = 0.0


class SimplexRecord(TypedDict):
    vertices: List[int]      # highest first
    filtration: float
    dimension: int


class TreeRecord(TypedDict, total=False):
    """JSON-friendly dump of a whole tree (see `io.simplex_tree_to_dict`)."""
    null_vertex: int
    dimension: int
    filtration: float
    num_vertices: int
    num_simplices: int
    simplices: List[SimplexRecord]
    # provenance
    library_versions: Dict[str, str]
    config: Dict[str, Any]

