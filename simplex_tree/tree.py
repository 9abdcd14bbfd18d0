"""simplex_tree.tree

The simplex tree: a trie over canonical (descending) vertex sequences storing
every simplex of a filtered simplicial complex.

Counters (`num_vertices`, `dimension`, `filtration`) are maintained
incrementally by insertions. Structural edits (edge contraction, removal)
never recompute `dimension()` / `filtration()`; after such edits they are
upper bounds, and callers that need exact values use `set_dimension` /
`set_filtration` or `finalize_dimension` / `finalize_filtration`.

Any mutation invalidates the Filtration Index; it is rebuilt on the next call
to `filtration_simplex_range()`.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .cofaces import cofaces_simplex_range, has_proper_coface, star_simplex_range
from .config import resolve_config
from .contraction import edge_contraction
from .filtration import FiltrationIndex
from .node import Node, Siblings
from .schema import NULL_KEY, Simplex
from .utils import approx_equal, canonical_simplex


class SimplexTree:
    def __init__(self, *, config: Optional[Dict[str, Any]] = None) -> None:
        self._config = resolve_config(config)
        self._null_vertex = int(self._config["null_vertex"])
        self._default_filtration = float(self._config["default_filtration"])
        self._tolerance = float(self._config["filtration_tolerance"])

        self._root = Siblings(parent=None, parent_label=self._null_vertex)
        self._num_vertices = 0
        self._dimension = -1
        self._filtration = self._default_filtration
        self._filtration_index: Optional[FiltrationIndex] = None

    # ------------------------------------------------------------------
    # Sentinels and counters
    # ------------------------------------------------------------------

    def null_vertex(self) -> int:
        return self._null_vertex

    def null_simplex(self) -> None:
        return None

    def null_key(self) -> int:
        return NULL_KEY

    def root(self) -> Siblings:
        return self._root

    @property
    def config(self) -> Dict[str, Any]:
        return dict(self._config)

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_simplices(self) -> int:
        return sum(1 for _ in self.complex_simplex_range())

    def dimension(self, sh: Optional[Node] = None) -> int:
        """Tree dimension (-1 when empty), or the dimension of simplex `sh`."""
        if sh is None:
            return self._dimension
        dim = 0
        sib = sh.siblings
        while sib.parent is not None:
            dim += 1
            sib = sib.parent.siblings
        return dim

    def filtration(self, sh: Optional[Node] = None) -> float:
        """Maximal filtration value of the tree, or the value of simplex `sh`."""
        if sh is None:
            return self._filtration
        return sh.filtration

    def set_dimension(self, dimension: int) -> None:
        self._dimension = int(dimension)

    def set_filtration(self, filtration: float) -> None:
        self._filtration = float(filtration)

    def finalize_dimension(self) -> int:
        """Recompute the dimension from the stored simplices."""
        self._dimension = max((len(vs) - 1 for _, vs in self._walk(self._root, ())), default=-1)
        return self._dimension

    def finalize_filtration(self) -> float:
        """Recompute the maximal filtration value from the stored simplices."""
        self._filtration = max(
            (node.filtration for node in self.complex_simplex_range()),
            default=self._default_filtration,
        )
        return self._filtration

    def assign_filtration(self, sh: Node, filtration: float) -> None:
        sh.filtration = float(filtration)
        self._invalidate()

    def key(self, sh: Optional[Node]) -> int:
        if sh is None:
            return NULL_KEY
        return sh.key

    def assign_key(self, sh: Node, key: int) -> None:
        sh.key = int(key)

    def has_children(self, sh: Node) -> bool:
        return sh.has_children()

    def self_siblings(self, sh: Node) -> Siblings:
        return sh.siblings

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_simplex(
        self,
        vertices: Iterable[int],
        filtration: Optional[float] = None,
    ) -> Tuple[Optional[Node], bool]:
        """Insert one simplex (its faces are *not* added).

        Missing nodes along the canonical path are created with the same
        filtration value. Returns `(handle, True)` when the simplex is new and
        `(None, False)` when it was already present; an existing simplex keeps
        its filtration value. The empty simplex is a no-op returning
        `(None, True)`. The null vertex is not a valid label (ValueError).
        """
        simplex = self._checked_simplex(vertices)
        value = self._default_filtration if filtration is None else float(filtration)
        if not simplex:
            return None, True

        sib = self._root
        node: Optional[Node] = None
        created = False
        for v in simplex:
            if node is not None:
                sib = node.ensure_children()
            nxt = sib.get(v)
            if nxt is None:
                nxt = self._new_node(sib, v, value)
                created = True
            node = nxt

        if not created:
            return None, False
        self._update_trackers(len(simplex) - 1, value)
        return node, True

    def insert_simplex_and_subfaces(
        self,
        vertices: Iterable[int],
        filtration: Optional[float] = None,
    ) -> Tuple[Optional[Node], bool]:
        """Insert a simplex together with all of its missing faces.

        Every newly created face gets `filtration`; faces already present keep
        their value. The return value follows `insert_simplex` for the full
        simplex itself.
        """
        simplex = self._checked_simplex(vertices)
        value = self._default_filtration if filtration is None else float(filtration)
        if not simplex:
            return None, True

        node, is_new, created_any = self._rec_insert_subfaces(self._root, simplex, value)
        if created_any:
            self._update_trackers(len(simplex) - 1, value)
        if not is_new:
            return None, False
        return node, True

    def _checked_simplex(self, vertices: Iterable[int]) -> Simplex:
        simplex = canonical_simplex(vertices)
        if self._null_vertex in simplex:
            raise ValueError(f"the null vertex {self._null_vertex} cannot be part of a simplex")
        return simplex

    def _rec_insert_subfaces(
        self,
        sib: Siblings,
        suffix: Simplex,
        value: float,
    ) -> Tuple[Node, bool, bool]:
        # Inserts under `sib` every non-empty subset of `suffix`.
        # Subsets containing suffix[0] go below its node, the others beside it.
        v = suffix[0]
        node = sib.get(v)
        is_new = node is None
        if node is None:
            node = self._new_node(sib, v, value)
        if len(suffix) == 1:
            return node, is_new, is_new

        full, full_is_new, created_below = self._rec_insert_subfaces(node.ensure_children(), suffix[1:], value)
        _, _, created_beside = self._rec_insert_subfaces(sib, suffix[1:], value)
        return full, full_is_new, is_new or created_below or created_beside

    def insert_graph(
        self,
        edges: Iterable[Tuple[int, int, float]],
        vertices: Iterable[Tuple[int, float]] = (),
    ) -> None:
        """Insert the 0- and 1-simplices of a weighted graph.

        `vertices` are `(v, filtration)` pairs, `edges` are `(u, v, filtration)`
        triples. Missing edge endpoints are created with the edge value.
        """
        for v, value in vertices:
            self.insert_simplex([v], value)
        for u, v, value in edges:
            self.insert_simplex_and_subfaces([u, v], value)

    def expansion(self, max_dim: int) -> None:
        """Expand the tree into the flag complex of its 1-skeleton.

        Every clique of at most `max_dim + 1` vertices becomes a simplex whose
        filtration value is the maximum over its vertices and edges.
        """
        if max_dim < 0:
            raise ValueError(f"max_dim must be non-negative, got {max_dim}")
        for node in self._root:
            if node.children is not None:
                self._siblings_expansion(node.children, 2, max_dim)
        self._invalidate()

    def _siblings_expansion(self, sib: Siblings, size: int, max_dim: int) -> None:
        # Members of `sib` are simplices with `size` vertices.
        if size > max_dim:
            return
        for node in sib:
            top = self._root.get(node.label)
            lower = top.children if top is not None else None
            if lower is not None:
                candidates = [w for w in sib if w.label < node.label and w.label in lower]
                if candidates:
                    children = node.ensure_children()
                    for w in candidates:
                        if w.label in children:
                            continue
                        edge = lower.get(w.label)
                        value = max(node.filtration, w.filtration, edge.filtration)
                        children.insert(w.label, value)
                        self._update_trackers(size, value)
            if node.children is not None and len(node.children):
                self._siblings_expansion(node.children, size + 1, max_dim)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, vertices: Iterable[int]) -> Optional[Node]:
        """Return the handle of a simplex given in any vertex order, or None."""
        return self._find_canonical(canonical_simplex(vertices))

    def _find_canonical(self, simplex: Simplex) -> Optional[Node]:
        if not simplex:
            return None
        sib = self._root
        node: Optional[Node] = None
        for v in simplex:
            if node is not None:
                # path deeper than the tree: stop here
                if node.children is None:
                    return None
                sib = node.children
            node = sib.get(v)
            if node is None:
                return None
        return node

    def __contains__(self, vertices: object) -> bool:
        try:
            return self.find(vertices) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def simplex(self, sh: Node) -> Simplex:
        """Canonical (descending) vertex tuple of a handle."""
        labels = [sh.label]
        sib = sh.siblings
        while sib.parent is not None:
            labels.append(sib.parent_label)
            sib = sib.parent.siblings
        labels.reverse()
        return tuple(labels)

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------

    def complex_vertex_range(self) -> List[int]:
        return self._root.labels()

    def complex_simplex_range(self) -> Iterator[Node]:
        for node, _ in self._walk(self._root, ()):
            yield node

    def skeleton_simplex_range(self, dim: int) -> Iterator[Node]:
        """All simplices of dimension <= `dim`."""
        for node, _ in self._walk(self._root, (), max_size=dim + 1):
            yield node

    def _walk(
        self,
        sib: Siblings,
        prefix: Simplex,
        max_size: Optional[int] = None,
    ) -> Iterator[Tuple[Node, Simplex]]:
        if max_size is not None and len(prefix) >= max_size:
            return
        for node in sib:
            vs = prefix + (node.label,)
            yield node, vs
            if node.children is not None:
                yield from self._walk(node.children, vs, max_size)

    def simplex_vertex_range(self, sh: Node) -> List[int]:
        """Vertices of `sh`, highest first."""
        return list(self.simplex(sh))

    def boundary_simplex_range(self, sh: Node) -> List[Node]:
        """Codimension-1 faces of `sh`, dropping each canonical vertex in turn.

        Faces missing from a non-closed tree are skipped.
        """
        vs = self.simplex(sh)
        if len(vs) < 2:
            return []
        faces: List[Node] = []
        for i in range(len(vs)):
            face = self._find_canonical(vs[:i] + vs[i + 1:])
            if face is not None:
                faces.append(face)
        return faces

    def get_simplices(self) -> Iterator[Tuple[List[int], float]]:
        """`(vertices, filtration)` pairs in tree order, vertices highest first."""
        for node, vs in self._walk(self._root, ()):
            yield list(vs), node.filtration

    def get_filtration(self) -> List[Tuple[List[int], float]]:
        """`(vertices, filtration)` pairs in filtration order."""
        return [(self.simplex_vertex_range(sh), sh.filtration) for sh in self.filtration_simplex_range()]

    def initialize_filtration(self) -> FiltrationIndex:
        """(Re)build the Filtration Index and set each key to its position."""
        index = FiltrationIndex(self)
        for position, sh in enumerate(index):
            sh.key = position
        self._filtration_index = index
        return index

    def filtration_simplex_range(self) -> FiltrationIndex:
        if self._filtration_index is None:
            return self.initialize_filtration()
        return self._filtration_index

    def star_simplex_range(self, sh: Optional[Node]) -> List[Node]:
        return star_simplex_range(self, sh)

    def cofaces_simplex_range(self, sh: Optional[Node], codimension: int) -> List[Node]:
        return cofaces_simplex_range(self, sh, codimension)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def edge_contraction(self, a: int, b: int) -> bool:
        return edge_contraction(self, a, b)

    def remove_maximal_simplex(self, sh: Optional[Node]) -> bool:
        """Remove a simplex without proper cofaces; False (no-op) otherwise."""
        if sh is None or sh.has_children():
            return False
        if has_proper_coface(self, sh):
            return False
        self._unlink(sh)
        return True

    def _new_node(self, sib: Siblings, label: int, value: float) -> Node:
        node = sib.insert(label, value)
        if sib is self._root:
            self._num_vertices += 1
        self._invalidate()
        return node

    def _unlink(self, node: Node) -> None:
        # Removes `node` with its whole subtree; drops emptied child collections.
        sib = node.siblings
        sib.remove(node.label)
        if sib is self._root:
            self._num_vertices -= 1
        elif not len(sib):
            sib.parent.children = None
        self._invalidate()

    def _merge_simplex(self, simplex: Simplex, value: float) -> None:
        # Insert-or-lower: missing nodes get `value`, an existing simplex keeps
        # the minimum of both values.
        sib = self._root
        node: Optional[Node] = None
        created = False
        for v in simplex:
            if node is not None:
                sib = node.ensure_children()
            nxt = sib.get(v)
            if nxt is None:
                nxt = self._new_node(sib, v, value)
                created = True
            node = nxt
        if not created and value < node.filtration:
            node.filtration = value
        self._invalidate()

    def _update_trackers(self, dim: int, value: float) -> None:
        if dim > self._dimension:
            self._dimension = dim
        if value > self._filtration:
            self._filtration = value

    def _invalidate(self) -> None:
        self._filtration_index = None

    # ------------------------------------------------------------------
    # Comparison / copy
    # ------------------------------------------------------------------

    def is_equal(self, other: "SimplexTree", *, approximate: bool = False) -> bool:
        """Structural equality including filtration values and counters.

        With `approximate=True`, filtration values are compared up to the
        configured `filtration_tolerance`.
        """
        if not isinstance(other, SimplexTree):
            return False
        if self._null_vertex != other._null_vertex or self._dimension != other._dimension:
            return False
        if not self._values_equal(self._filtration, other._filtration, approximate):
            return False
        return self._rec_equal(self._root, other._root, approximate)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimplexTree):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None  # type: ignore[assignment]

    def _values_equal(self, a: float, b: float, approximate: bool) -> bool:
        if approximate:
            return approx_equal(a, b, self._tolerance)
        return a == b

    def _rec_equal(self, s1: Optional[Siblings], s2: Optional[Siblings], approximate: bool) -> bool:
        n1 = 0 if s1 is None else len(s1)
        n2 = 0 if s2 is None else len(s2)
        if n1 != n2:
            return False
        if n1 == 0:
            return True
        if s1.labels() != s2.labels():
            return False
        for a, b in zip(s1, s2):
            if not self._values_equal(a.filtration, b.filtration, approximate):
                return False
            if not self._rec_equal(a.children, b.children, approximate):
                return False
        return True

    def copy(self) -> "SimplexTree":
        other = SimplexTree(config=self._config)
        other._num_vertices = self._num_vertices
        other._dimension = self._dimension
        other._filtration = self._filtration
        self._rec_copy(self._root, other._root)
        return other

    def _rec_copy(self, src: Siblings, dst: Siblings) -> None:
        for node in src:
            new = dst.insert(node.label, node.filtration)
            new.key = node.key
            new.data = node.data
            if node.has_children():
                self._rec_copy(node.children, new.ensure_children())

    def __len__(self) -> int:
        return self.num_simplices()

    def __repr__(self) -> str:
        return (
            f"SimplexTree(num_vertices={self._num_vertices}, "
            f"dimension={self._dimension}, filtration={self._filtration})"
        )
