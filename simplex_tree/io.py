"""simplex_tree.io

Serialised forms of a simplex tree.

Text form: one simplex per line, vertices highest first, filtration value last

    2 1 0 0.3

Lines are written in filtration order. Reading inserts each line with
`insert_simplex`; blank lines and comment lines are skipped, and the whole
input is parsed before the tree is touched.

JSON form: plain dicts + lists (see `schema.TreeRecord`) with provenance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO, Tuple, Union

import json

from .config import get_library_versions, resolve_config
from .schema import SimplexRecord, TreeRecord
from .tree import SimplexTree
from .utils import source_lines, to_jsonable


# ---------------------------------------------------------------------------
# Text form
# ---------------------------------------------------------------------------

def parse_simplex_line(line: str, *, where: str = "<line>") -> Tuple[List[int], float]:
    """Parse "v_k ... v_0 f" into (vertices, filtration). Raises ValueError."""
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"{where}: need at least 2 tokens, got {len(parts)}")
    try:
        value = float(parts[-1])
    except ValueError:
        raise ValueError(f"{where}: invalid filtration value '{parts[-1]}'") from None
    try:
        vertices = [int(v) for v in parts[:-1]]
    except ValueError:
        raise ValueError(f"{where}: vertices must be integers") from None
    return vertices, value


def simplex_tree_to_text(tree: SimplexTree, *, config: Optional[Dict[str, Any]] = None) -> str:
    cfg = resolve_config(config if config is not None else tree.config)
    fmt = str(cfg["filtration_format"])
    lines = []
    for sh in tree.filtration_simplex_range():
        vertices = " ".join(str(v) for v in tree.simplex_vertex_range(sh))
        lines.append(f"{vertices} {format(tree.filtration(sh), fmt)}")
    return "\n".join(lines) + ("\n" if lines else "")


def write_simplex_tree(
    tree: SimplexTree,
    dest: Union[str, Path, TextIO],
    *,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """Write the text form to a path or an open text stream."""
    text = simplex_tree_to_text(tree, config=config)
    if isinstance(dest, (str, Path)):
        path = Path(dest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    else:
        dest.write(text)


def read_simplex_tree(
    source: Union[str, Path, Iterable[str]],
    tree: Optional[SimplexTree] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> SimplexTree:
    """Populate `tree` (or a new tree) from the text form.

    `source` is a path or an iterable of lines (e.g. an open file).
    Raises ValueError on the first malformed line, before any insertion.
    """
    cfg = resolve_config(config)
    comment = str(cfg["comment_char"])
    name, lines = source_lines(source)

    if tree is None:
        tree = SimplexTree(config=cfg)
    null = tree.null_vertex()

    parsed: List[Tuple[List[int], float]] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(comment):
            continue
        vertices, value = parse_simplex_line(line, where=f"{name}:{lineno}")
        if null in vertices:
            raise ValueError(f"{name}:{lineno}: the null vertex {null} cannot be part of a simplex")
        parsed.append((vertices, value))

    inserted = 0
    # faces first (stable on size), so no path prefix takes a coface's value
    for vertices, value in sorted(parsed, key=lambda p: len(set(p[0]))):
        _, ok = tree.insert_simplex(vertices, value)
        inserted += int(ok)

    if verbose:
        print(f"[simplex_tree] read {name}: {len(parsed)} lines, {inserted} simplices inserted")
    return tree


# ---------------------------------------------------------------------------
# JSON form
# ---------------------------------------------------------------------------

def simplex_tree_to_dict(tree: SimplexTree) -> TreeRecord:
    simplices: List[SimplexRecord] = [
        {
            "vertices": tree.simplex_vertex_range(sh),
            "filtration": float(tree.filtration(sh)),
            "dimension": tree.dimension(sh),
        }
        for sh in tree.filtration_simplex_range()
    ]
    return {
        "null_vertex": tree.null_vertex(),
        "dimension": tree.dimension(),
        "filtration": float(tree.filtration()),
        "num_vertices": tree.num_vertices(),
        "num_simplices": len(simplices),
        "simplices": simplices,
        "library_versions": get_library_versions(),
        "config": tree.config,
    }


def simplex_tree_from_dict(record: Dict[str, Any], *, config: Optional[Dict[str, Any]] = None) -> SimplexTree:
    """Rebuild a tree from `simplex_tree_to_dict` output.

    Stored counters (dimension, filtration) are restored as written. The
    stored config is the base; `config` overrides it.
    """
    if "simplices" not in record:
        raise ValueError("tree record has no 'simplices' entry")
    cfg = resolve_config(record.get("config"))
    if "null_vertex" in record:
        cfg["null_vertex"] = int(record["null_vertex"])
    if config:
        cfg.update(config)

    entries = []
    for i, item in enumerate(record["simplices"]):
        try:
            entries.append(([int(v) for v in item["vertices"]], float(item["filtration"])))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"simplices[{i}]: malformed record {item!r}") from e
        if int(cfg["null_vertex"]) in entries[-1][0]:
            raise ValueError(f"simplices[{i}]: the null vertex {cfg['null_vertex']} cannot be part of a simplex")

    tree = SimplexTree(config=cfg)
    # faces first so that no prefix gets a coface's value
    for vertices, value in sorted(entries, key=lambda e: len(set(e[0]))):
        tree.insert_simplex(vertices, value)

    if "dimension" in record:
        tree.set_dimension(int(record["dimension"]))
    if "filtration" in record:
        tree.set_filtration(float(record["filtration"]))
    return tree


def simplex_tree_to_json(tree: SimplexTree, indent: int = 2) -> str:
    """Convert a tree to a JSON string."""
    return json.dumps(to_jsonable(simplex_tree_to_dict(tree)), indent=indent, ensure_ascii=False, allow_nan=False)


def save_simplex_tree(tree: SimplexTree, path: str | Path, indent: int = 2) -> Path:
    """Save a tree to JSON on disk."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(simplex_tree_to_json(tree, indent=indent), encoding="utf-8")
    return path


def load_simplex_tree(path: str | Path, *, config: Optional[Dict[str, Any]] = None) -> SimplexTree:
    """Load a tree saved with `save_simplex_tree`."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    return simplex_tree_from_dict(json.loads(path.read_text(encoding="utf-8")), config=config)
