"""simplex_tree.node

Storage building blocks of the simplex tree.

A simplex {v_0 > v_1 > ... > v_k} is stored as the path

    root[v_0] -> children[v_1] -> ... -> children[v_k]

so every child adds a vertex *smaller* than all of its ancestors.

- `Node`: one entry of a `Siblings` collection. Carries the filtration value,
  an optional child `Siblings`, a persistence key and a free payload slot.
  The Node at the end of a path is the *simplex handle* of that simplex;
  handles compare by identity.
- `Siblings`: all children sharing the same parent path, ordered by vertex
  label. Holds non-owning back-references to the parent Node and to the
  parent's label, used only to walk upward.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .schema import NULL_KEY, NULL_VERTEX, FiltrationValue, Vertex


@dataclass(eq=False)
class Node:
    label: Vertex
    filtration: FiltrationValue
    siblings: "Siblings" = field(repr=False)
    children: Optional["Siblings"] = field(default=None, repr=False)
    key: int = NULL_KEY
    data: Any = None  # caller payload, carried over by copy()

    def has_children(self) -> bool:
        return self.children is not None and len(self.children) > 0

    def ensure_children(self) -> "Siblings":
        if self.children is None:
            self.children = Siblings(parent=self, parent_label=self.label)
        return self.children


class Siblings:
    """Ordered mapping vertex label -> Node for one parent path."""

    __slots__ = ("parent", "parent_label", "_members", "_labels")

    def __init__(self, parent: Optional[Node] = None, parent_label: int = NULL_VERTEX) -> None:
        self.parent = parent
        self.parent_label = parent_label
        self._members: Dict[int, Node] = {}
        self._labels: List[int] = []  # ascending

    def oncles(self) -> Optional["Siblings"]:
        """Siblings collection one level up (None for the root)."""
        if self.parent is None:
            return None
        return self.parent.siblings

    def get(self, label: int) -> Optional[Node]:
        return self._members.get(label)

    def insert(self, label: int, filtration: float) -> Node:
        node = Node(label=label, filtration=filtration, siblings=self)
        self._members[label] = node
        insort(self._labels, label)
        return node

    def remove(self, label: int) -> Node:
        node = self._members.pop(label)
        del self._labels[bisect_left(self._labels, label)]
        return node

    def labels(self) -> List[int]:
        return list(self._labels)

    def nodes_from(self, label: int) -> Iterator[Node]:
        """Nodes whose label is >= `label`, ascending."""
        for lab in self._labels[bisect_left(self._labels, label):]:
            yield self._members[lab]

    def __iter__(self) -> Iterator[Node]:
        for lab in list(self._labels):
            yield self._members[lab]

    def __contains__(self, label: object) -> bool:
        return label in self._members

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"Siblings(parent_label={self.parent_label}, labels={self._labels})"
