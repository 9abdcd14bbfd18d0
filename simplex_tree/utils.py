"""simplex_tree.utils

Small utilities used throughout the codebase.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

import numpy as np

from .schema import Simplex


def canonical_simplex(vertices: Iterable[Any]) -> Simplex:
    """Deduplicate and sort vertex labels into canonical (descending) form.

    Accepts python or numpy integers; anything that is not an integer label
    raises `TypeError`.
    """
    labels = set()
    for v in vertices:
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
            raise TypeError(f"vertex labels must be integers, got {v!r}")
        labels.add(int(v))
    return tuple(sorted(labels, reverse=True))


def approx_equal(a: float, b: float, tolerance: float) -> bool:
    return abs(float(a) - float(b)) < tolerance


def to_jsonable(obj: Any) -> Any:
    """Recursively convert numpy types into JSON-friendly python types.

    Non-finite floats become the strings "inf", "-inf" and "nan", which
    `float()` parses back; strict JSON has no token for them.
    """
    if isinstance(obj, float) and not math.isfinite(obj):
        return str(obj)
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    if isinstance(obj, np.ndarray):
        return to_jsonable(obj.tolist())
    if isinstance(obj, (np.floating,)):
        return to_jsonable(float(obj))
    if isinstance(obj, (np.integer,)):
        return int(obj)
    # fall back to string
    return str(obj)


def source_lines(source: Union[str, Path, Iterable[str]]) -> Tuple[str, List[str]]:
    """Resolve a path or an iterable of lines into (name, lines)."""
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(path)
        return str(path), path.read_text(encoding="utf-8").splitlines()
    return "<stream>", list(source)
