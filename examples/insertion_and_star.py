"""Worked example: insertion, lookup and stars

Builds the small complex

    {0,1,2} {3} {0,3} {3,4,5} {0,1,6,7}

with all its faces, then walks the filtration and the stars of a few simplices.

Run:
    python examples/insertion_and_star.py
"""

from simplex_tree import SimplexTree, print_filtration, print_summary, print_tree
from simplex_tree.pretty import print_star


MAXIMAL = [
    ([2, 1, 0], 0.3),
    ([3], 0.1),
    ([3, 0], 0.2),
    ([3, 4, 5], 0.4),
    ([0, 1, 6, 7], 0.5),
]


def main() -> None:
    st = SimplexTree()
    for vertices, value in MAXIMAL:
        st.insert_simplex_and_subfaces(vertices, value)

    print_summary(st, title="Complex")

    print("\nTrie:")
    print_tree(st)

    print("\nFiltration:")
    print_filtration(st)

    for vertices in ([3], [7, 1], [0]):
        print(f"\nStar of {vertices}:")
        print_star(st, st.find(vertices))

    print("\nCofaces of [1, 7] with one extra vertex:")
    print_star(st, st.find([1, 7]), codimension=1)


if __name__ == "__main__":
    main()
