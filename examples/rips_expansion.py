"""Worked example: Vietoris-Rips filtration

Samples points on a noisy circle, builds the Rips complex up to triangles and,
when GUDHI is installed, hands the tree over for persistence.

Run:
    python examples/rips_expansion.py
"""

import numpy as np

from simplex_tree import default_config, print_summary, rips_simplex_tree, to_gudhi, validate_filtration
from simplex_tree.config import set_global_seeds


def main() -> None:
    cfg = default_config()
    cfg["max_edge_length"] = 0.9
    cfg["max_dimension"] = 2
    set_global_seeds(cfg["random_seed"])

    angles = np.random.uniform(0.0, 2.0 * np.pi, size=40)
    points = np.stack([np.cos(angles), np.sin(angles)], axis=1)
    points += np.random.normal(scale=0.05, size=points.shape)
    dist = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)

    st = rips_simplex_tree(dist, config=cfg, verbose=True)

    print("\n" + "=" * 72)
    print_summary(st, title="Rips complex")
    print(f"  valid:      {not validate_filtration(st)}")

    gst = to_gudhi(st)
    if gst is None:
        print("\n(gudhi not installed: skipping persistence)")
        return

    diagram = gst.persistence()
    h1 = sorted((bar for dim, bar in diagram if dim == 1), key=lambda b: b[1] - b[0], reverse=True)
    print("\nTop H1 bars (by persistence):")
    for birth, death in h1[:5]:
        print(f"  [{birth:.3f}, {death:.3f})  pers={death - birth:.3f}")


if __name__ == "__main__":
    main()
