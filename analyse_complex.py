#!/usr/bin/env python3
"""
Simplex Tree Analyser
=====================

Analyse a filtered complex stored as text (one simplex per line, vertices then
filtration value) or as a tower (inclusions and edge contractions):

    python analyse_complex.py complex.txt
    python analyse_complex.py --tower tower.txt

With no argument, the example complex pasted below is used.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# =============================================================================
# PASTE YOUR COMPLEX HERE
# =============================================================================

COMPLEX = """
# vertices ... filtration
0 0.0
1 0.0
2 0.0
3 0.0
1 0 0.1
2 1 0.2
2 0 0.3
3 2 0.4
3 0 0.5
2 1 0 0.6
"""

# =============================================================================
# CONFIGURATION (adjust if needed)
# =============================================================================

CONFIG = {
    "comment_char": "#",
    "max_lines": 40,      # cap on printed simplices (0 = everything)
}

# =============================================================================
# ANALYSIS (no need to edit below)
# =============================================================================

def main():
    from simplex_tree import (
        default_config,
        print_filtration,
        print_summary,
        read_simplex_tree,
        tower_simplex_tree,
        validate_filtration,
    )

    config = default_config()
    config["comment_char"] = CONFIG["comment_char"]

    args = sys.argv[1:]
    if args and args[0] == "--tower":
        if len(args) < 2:
            print("usage: analyse_complex.py --tower FILE")
            return 2
        st = tower_simplex_tree(args[1], config=config, verbose=True)
        source = args[1]
    elif args:
        st = read_simplex_tree(args[0], config=config, verbose=True)
        source = args[0]
    else:
        st = read_simplex_tree(COMPLEX.splitlines(), config=config, verbose=True)
        source = "<pasted complex>"

    print("=" * 70)
    print(f"SIMPLEX TREE ANALYSIS: {source}")
    print("=" * 70)
    print_summary(st)

    print("\nFiltration:")
    print_filtration(st, max_lines=CONFIG["max_lines"])

    warnings = validate_filtration(st)
    print()
    print("=" * 70)
    print(f"VALIDATION: {len(warnings)} warnings")
    print("=" * 70)
    for w in warnings:
        print(f"  - {w}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
