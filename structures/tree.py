"""
tree.py — Binary Search Tree
============================
A flat, id-keyed collection of TreeNodes.  Children are referenced by id,
so no node owns another; the tree only ever grows by insertion.

Ordering rule (used by insert and checked by is_valid):
    value <  node.value  →  left subtree
    value >= node.value  →  right subtree   (duplicates go right)

The first node inserted is the permanent root — no rotations, no
rebalancing, so the shape depends entirely on insertion order.
"""

from dataclasses import dataclass, asdict, replace
from typing import Dict, Iterable, List, Optional, Sequence, Union

from structures.ids import IdSequence

Number = Union[int, float]


@dataclass
class TreeNode:
    id:    str
    value: Number
    left:  Optional[str] = None
    right: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TreeNode":
        return cls(
            id=str(data["id"]),
            value=data["value"],
            left=_child_id(data.get("left")),
            right=_child_id(data.get("right")),
        )


def _child_id(raw) -> Optional[str]:
    return None if raw is None else str(raw)


class BinarySearchTree:
    """
    Attributes:
        nodes    : {node_id: TreeNode} in insertion order.
        root_id  : ID of the first inserted node, or None while empty.
    """

    def __init__(self):
        self.nodes:   Dict[str, TreeNode] = {}
        self.root_id: Optional[str]       = None
        self._ids:    IdSequence          = IdSequence("node")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_values(cls, values: Iterable[Number]) -> "BinarySearchTree":
        tree = cls()
        for v in values:
            tree.insert(v)
        return tree

    @classmethod
    def from_nodes(cls, nodes: Sequence[TreeNode]) -> "BinarySearchTree":
        """
        Wrap a snapshot.  Nodes are copied; the first one is the root.
        Raises ValueError on a repeated id.
        """
        tree = cls()
        for n in nodes:
            if n.id in tree.nodes:
                raise ValueError(f"Duplicate node id: {n.id}")
            tree.nodes[n.id] = replace(n)
        if nodes:
            tree.root_id = nodes[0].id
        tree._ids.reserve(tree.nodes)
        return tree

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------
    def insert(self, value: Number, node_id: Optional[str] = None) -> TreeNode:
        nid = node_id or self._ids.next_id()
        if nid in self.nodes:
            raise ValueError(f"Duplicate node id: {nid}")
        self._ids.reserve([nid])
        node = TreeNode(id=nid, value=value)

        path = self.insertion_path(value)
        if not path:
            self.root_id = nid
        else:
            parent = self.nodes[path[-1]]
            if value < parent.value:
                parent.left = nid
            else:
                parent.right = nid

        self.nodes[nid] = node
        return node

    def insertion_path(self, value: Number) -> List[str]:
        """IDs compared against `value` on the way down, root first."""
        path: List[str] = []
        seen = set()
        cur = self.root_id
        while cur is not None and cur in self.nodes:
            if cur in seen:
                raise ValueError(f"Child links loop back to node {cur}")
            seen.add(cur)
            path.append(cur)
            node = self.nodes[cur]
            cur = node.left if value < node.value else node.right
        return path

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, node_id: str) -> Optional[TreeNode]:
        return self.nodes.get(node_id)

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        if self.root_id is None:
            return 0
        best = 0
        stack = [(self.root_id, 1)]
        while stack:
            nid, depth = stack.pop()
            node = self.nodes.get(nid)
            if node is None:
                continue
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def is_valid(self) -> bool:
        """Check every node against the (low, high) bounds inherited from its ancestors."""
        if self.root_id is None:
            return True
        stack = [(self.root_id, None, None)]
        while stack:
            nid, low, high = stack.pop()
            node = self.nodes.get(nid)
            if node is None:
                continue
            if low is not None and node.value < low:
                return False
            if high is not None and node.value >= high:
                return False
            if node.left is not None:
                stack.append((node.left, low, node.value))
            if node.right is not None:
                stack.append((node.right, node.value, high))
        return True

    def validate(self) -> None:
        """
        Raise ValueError unless this is a well-formed BST: numeric values,
        no node reachable twice from the root, ordering rule intact.
        Used on client snapshots before anything walks them.
        """
        for node in self.nodes.values():
            if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
                raise ValueError(f"Node {node.id} has a non-numeric value: {node.value!r}")

        seen = set()
        stack = [self.root_id] if self.root_id is not None else []
        while stack:
            nid = stack.pop()
            if nid not in self.nodes:
                continue
            if nid in seen:
                raise ValueError(f"Node {nid} is reachable more than once")
            seen.add(nid)
            node = self.nodes[nid]
            stack.extend(c for c in (node.left, node.right) if c is not None)

        if not self.is_valid():
            raise ValueError("Tree breaks the BST ordering rule")

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_list(self) -> List[TreeNode]:
        return [replace(n) for n in self.nodes.values()]

    def to_dict(self) -> dict:
        return {"root": self.root_id, "nodes": [n.to_dict() for n in self.nodes.values()]}

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"BinarySearchTree(nodes={len(self)}, height={self.height()})"
