"""
Simplex Tree: Vietoris-Rips Construction
========================================

Build a flag (Vietoris-Rips) filtration from a distance matrix:

1. every point becomes a vertex at the default filtration value
2. every pair at distance <= max_edge_length becomes an edge at that distance
3. the 1-skeleton is expanded into its clique complex up to max_dimension

Geometry stays outside: the caller supplies the pairwise distances.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
from numpy.typing import NDArray

from .config import resolve_config
from .tree import SimplexTree


def rips_simplex_tree(
    distance_matrix: NDArray,
    max_edge_length: Optional[float] = None,
    max_dimension: Optional[int] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> SimplexTree:
    """
    Build a Vietoris-Rips simplex tree from a distance matrix.

    Parameters
    ----------
    distance_matrix : NDArray
        Symmetric pairwise distance matrix of shape (N, N).
    max_edge_length : float, optional
        Maximum edge length (filtration value) to include.
        Defaults to config["max_edge_length"].
    max_dimension : int, optional
        Maximum simplex dimension (1 for edges, 2 for triangles, etc.).
        Defaults to config["max_dimension"].
    config : dict, optional
        Overrides for `default_config()`.
    verbose : bool
        Print basic progress.

    Returns
    -------
    SimplexTree with vertices labelled 0..N-1.
    """
    cfg = resolve_config(config)
    if max_edge_length is None:
        max_edge_length = float(cfg["max_edge_length"])
    if max_dimension is None:
        max_dimension = int(cfg["max_dimension"])
    if max_dimension < 0:
        raise ValueError(f"max_dimension must be non-negative, got {max_dimension}")

    dist = np.asarray(distance_matrix, dtype=np.float64)
    if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
        raise ValueError(f"distance matrix must be square, got shape {dist.shape}")
    if not np.allclose(dist, dist.T):
        raise ValueError("distance matrix must be symmetric")

    n = dist.shape[0]
    tree = SimplexTree(config=cfg)
    default = float(cfg["default_filtration"])

    rows, cols = np.triu_indices(n, k=1)
    lengths = dist[rows, cols]
    keep = lengths <= max_edge_length
    if max_dimension < 1:
        keep[:] = False

    tree.insert_graph(
        ((int(u), int(v), float(d)) for u, v, d in zip(rows[keep], cols[keep], lengths[keep])),
        vertices=((v, default) for v in range(n)),
    )
    if verbose:
        print(f"[simplex_tree] rips: {n} vertices, {int(keep.sum())} edges <= {max_edge_length}")

    if max_dimension >= 2:
        tree.expansion(max_dimension)

    if verbose:
        print(f"[simplex_tree] rips: {tree.num_simplices()} simplices, dimension {tree.dimension()}")

    return tree
