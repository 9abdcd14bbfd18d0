"""simplex_tree.config

Centralised configuration + reproducibility helpers.
"""

from __future__ import annotations

from typing import Any, Dict

import math
import random

import numpy as np

from .schema import DEFAULT_FILTRATION, NULL_VERTEX


def default_config() -> Dict[str, Any]:
    """Return a *copy* of the default configuration.

    You can override any key in the returned dict and pass it as `config=`
    to `SimplexTree`, the readers and the Rips builder.
    """
    return {
        # --- tree ---
        "null_vertex": NULL_VERTEX,
        "default_filtration": DEFAULT_FILTRATION,
        # approximate equality of filtration values (float32 epsilon)
        "filtration_tolerance": float(np.finfo(np.float32).eps),

        # --- text formats ---
        "comment_char": "#",
        "filtration_format": "",  # "" = shortest round-trip repr

        # --- Rips builder ---
        "max_edge_length": math.inf,
        "max_dimension": 2,

        # --- reproducibility ---
        "random_seed": 0,
    }


def resolve_config(config: Dict[str, Any] | None) -> Dict[str, Any]:
    cfg = default_config()
    if config:
        cfg.update(config)
    return cfg


def set_global_seeds(seed: int) -> None:
    """Best-effort reproducibility across numpy / python."""
    random.seed(seed)
    np.random.seed(seed)


def get_library_versions() -> Dict[str, str]:
    """Collect versions of key libraries for provenance."""
    versions: Dict[str, str] = {}

    def _add(pkg: str) -> None:
        try:
            import importlib.metadata as md
            versions[pkg] = md.version(pkg)
        except Exception:
            pass

    for pkg in ["numpy", "gudhi"]:
        _add(pkg)
    return versions
