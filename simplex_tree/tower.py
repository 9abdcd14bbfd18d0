"""simplex_tree.tower

Towers: a complex evolving through inclusions and edge contractions.

A tower file holds one operation per line:

    [timestamp] i v0 v1 ...     include the simplex {v0, v1, ...} and its faces
    [timestamp] c u v           contract the edge {u, v}

Lines starting with '#', blank lines and single-token lines are comments.
When the timestamp is omitted, a running default is used: it is reset to every
explicit timestamp and advanced by one after each inclusion that added a new
simplex and after each contraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from pathlib import Path

from .config import resolve_config
from .tree import SimplexTree
from .utils import source_lines

INCLUSION = "i"
CONTRACTION = "c"


@dataclass
class TowerOperation:
    kind: str                      # INCLUSION | CONTRACTION
    vertices: List[int]
    timestamp: Optional[float]     # None: use the running default
    lineno: int = 0


def parse_tower_line(line: str, *, comment_char: str = "#", where: str = "<line>") -> Optional[TowerOperation]:
    """Parse one tower line; None for comments. Raises ValueError when malformed."""
    tokens = line.split()
    if len(tokens) < 2 or tokens[0].startswith(comment_char):
        return None

    timestamp: Optional[float] = None
    op, rest = tokens[0], tokens[1:]
    if op not in (INCLUSION, CONTRACTION):
        try:
            timestamp = float(op)
        except ValueError:
            raise ValueError(f"{where}: unknown operation '{op}'") from None
        op, rest = tokens[1], tokens[2:]
        if op.startswith(comment_char):
            return None
        if op not in (INCLUSION, CONTRACTION):
            raise ValueError(f"{where}: unknown operation '{op}'")

    try:
        vertices = [int(tok) for tok in rest]
    except ValueError:
        raise ValueError(f"{where}: vertices must be integers, got {rest}") from None

    if op == INCLUSION and not vertices:
        raise ValueError(f"{where}: inclusion needs at least one vertex")
    if op == CONTRACTION and len(vertices) != 2:
        raise ValueError(f"{where}: contraction needs exactly 2 vertices, got {len(vertices)}")

    return TowerOperation(kind=op, vertices=vertices, timestamp=timestamp)


def read_tower(
    source: Union[str, Path, Iterable[str]],
    *,
    config: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> List[TowerOperation]:
    """Read all operations of a tower file (path) or of an iterable of lines."""
    cfg = resolve_config(config)
    name, lines = source_lines(source)

    operations: List[TowerOperation] = []
    for lineno, raw in enumerate(lines, start=1):
        op = parse_tower_line(raw, comment_char=str(cfg["comment_char"]), where=f"{name}:{lineno}")
        if op is None:
            continue
        if int(cfg["null_vertex"]) in op.vertices:
            raise ValueError(f"{name}:{lineno}: the null vertex {cfg['null_vertex']} cannot be part of a simplex")
        op.lineno = lineno
        operations.append(op)

    if verbose:
        n_inc = sum(1 for op in operations if op.kind == INCLUSION)
        print(f"[simplex_tree] tower {name}: {n_inc} inclusions, {len(operations) - n_inc} contractions")
    return operations


def apply_tower(
    tree: SimplexTree,
    operations: Iterable[TowerOperation],
    *,
    verbose: bool = False,
) -> SimplexTree:
    """Replay tower operations on `tree` (mutated in place and returned).

    A contraction of {u, v} keeps the smaller label.
    """
    default_timestamp = 0.0
    n_inserted = 0
    n_contracted = 0
    for op in operations:
        if op.timestamp is not None:
            default_timestamp = float(op.timestamp)

        if op.kind == INCLUSION:
            _, inserted = tree.insert_simplex_and_subfaces(op.vertices, default_timestamp)
            if inserted:
                default_timestamp += 1
                n_inserted += 1
        else:
            u, v = op.vertices
            if tree.edge_contraction(min(u, v), max(u, v)):
                n_contracted += 1
            default_timestamp += 1

    if verbose:
        print(f"[simplex_tree] tower: {n_inserted} simplices inserted, {n_contracted} edges contracted")
    return tree


def tower_simplex_tree(
    source: Union[str, Path, Iterable[str]],
    *,
    config: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> SimplexTree:
    """Read a tower and replay it on a fresh tree."""
    operations = read_tower(source, config=config, verbose=verbose)
    return apply_tower(SimplexTree(config=config), operations, verbose=verbose)
