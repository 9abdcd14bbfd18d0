"""Worked example: edge contraction

Contracts the edge {1, 3} of a small complex and shows that the contracted
simplices keep the smallest filtration value among those landing on them.

Run:
    python examples/edge_contraction.py
"""

from simplex_tree import SimplexTree, print_filtration, print_summary, validate_filtration


def main() -> None:
    st = SimplexTree()
    st.insert_simplex_and_subfaces([1, 2, 3], 0.5)
    st.insert_simplex_and_subfaces([2, 3, 4, 5], 0.4)
    st.insert_simplex_and_subfaces([1, 3, 6, 7], 0.3)
    st.insert_simplex_and_subfaces([1, 3, 8], 0.2)

    print_summary(st, title="Before contraction")

    for a, b in [(3, 1), (1, 9)]:
        print(f"\ncontract({a}, {b}) -> {st.edge_contraction(a, b)}  (no-op)")

    changed = st.edge_contraction(1, 3)
    print(f"\ncontract(1, 3) -> {changed}")
    st.finalize_dimension()
    st.finalize_filtration()

    print_summary(st, title="After contraction")
    print("\nFiltration:")
    print_filtration(st)

    warnings = validate_filtration(st)
    if warnings:
        print("\nWarnings:")
        for w in warnings:
            print(f"  - {w}")


if __name__ == "__main__":
    main()
