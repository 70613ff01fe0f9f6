"""
linked_list.py — Singly Linked List
===================================
Nodes live in a Python list in chain order and also point at their
successor by id, so the view can draw arrows without walking pointers.

search_path() is what the list animation plays: the ids scanned from the
head up to and including the first match.
"""

from dataclasses import dataclass, asdict, replace
from typing import Iterable, List, Optional, Union

from structures.ids import IdSequence

Number = Union[int, float]


@dataclass
class ListNode:
    id:    str
    value: Number
    next:  Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class LinkedList:

    def __init__(self, values: Iterable[Number] = ()):
        self._nodes: List[ListNode] = []
        self._ids:   IdSequence     = IdSequence("node")
        for v in values:
            self.append(v)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def append(self, value: Number) -> ListNode:
        """Add at the tail."""
        node = ListNode(id=self._ids.next_id(), value=value)
        if self._nodes:
            self._nodes[-1].next = node.id
        self._nodes.append(node)
        return node

    def prepend(self, value: Number) -> ListNode:
        """Add at the head."""
        node = ListNode(id=self._ids.next_id(), value=value)
        if self._nodes:
            node.next = self._nodes[0].id
        self._nodes.insert(0, node)
        return node

    def delete(self, node_id: str) -> bool:
        """Unlink `node_id`.  Returns False if it is not in the list."""
        for i, node in enumerate(self._nodes):
            if node.id == node_id:
                if i > 0:
                    self._nodes[i - 1].next = node.next
                del self._nodes[i]
                return True
        return False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find(self, value: Number) -> Optional[ListNode]:
        for node in self._nodes:
            if node.value == value:
                return node
        return None

    def search_path(self, value: Number) -> List[str]:
        """
        IDs visited by a head-first scan for `value`, ending on the match.
        Empty when the value is absent — there is nothing to animate.
        """
        path: List[str] = []
        for node in self._nodes:
            path.append(node.id)
            if node.value == value:
                return path
        return []

    @property
    def head(self) -> Optional[ListNode]:
        return self._nodes[0] if self._nodes else None

    def values(self) -> List[Number]:
        return [n.value for n in self._nodes]

    def node_ids(self) -> List[str]:
        return [n.id for n in self._nodes]

    def to_list(self) -> List[ListNode]:
        return [replace(n) for n in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return "LinkedList(" + " → ".join(str(v) for v in self.values()) + ")"
