"""simplex_tree

A simplex tree for filtered simplicial complexes.

The public API is intentionally small:

- SimplexTree (insert / find / ranges / star and cofaces / edge contraction)
- FiltrationIndex, validate_filtration
- default_config
- rips_simplex_tree
- read_tower, apply_tower, tower_simplex_tree
- read_simplex_tree, write_simplex_tree, save_simplex_tree, load_simplex_tree
- to_gudhi, from_gudhi
- print_tree, print_filtration, print_summary
"""

from .config import default_config
from .tree import SimplexTree
from .node import Node, Siblings
from .filtration import FiltrationIndex, validate_filtration
from .rips import rips_simplex_tree
from .tower import read_tower, apply_tower, tower_simplex_tree
from .io import (
    read_simplex_tree,
    write_simplex_tree,
    simplex_tree_to_json,
    save_simplex_tree,
    load_simplex_tree,
)
from .interop import to_gudhi, from_gudhi
from .pretty import print_tree, print_filtration, print_summary

__all__ = [
    "default_config",
    "SimplexTree",
    "Node",
    "Siblings",
    "FiltrationIndex",
    "validate_filtration",
    "rips_simplex_tree",
    "read_tower",
    "apply_tower",
    "tower_simplex_tree",
    "read_simplex_tree",
    "write_simplex_tree",
    "simplex_tree_to_json",
    "save_simplex_tree",
    "load_simplex_tree",
    "to_gudhi",
    "from_gudhi",
    "print_tree",
    "print_filtration",
    "print_summary",
]
