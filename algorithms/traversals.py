"""
traversals.py — Binary Tree Traversals
=======================================
Unlike the array / graph algorithms these return a plain list of node
ids in visiting order, not Steps: the tree view simply lights the nodes
up one after another.

    in_order   : left, self, right   → ascending values for a BST
    pre_order  : self, left, right
    post_order : left, right, self

Each accepts either a BinarySearchTree or a sequence of TreeNodes whose
first element is the root.  Child ids that point nowhere are ignored.
All three walk an explicit stack, so a degenerate (list-shaped) tree of
a few thousand nodes is fine.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from structures.tree import BinarySearchTree, TreeNode, Number

TreeLike = Union[BinarySearchTree, Sequence[TreeNode]]


def _index(tree: TreeLike) -> Tuple[Dict[str, TreeNode], Optional[str]]:
    if isinstance(tree, BinarySearchTree):
        return tree.nodes, tree.root_id
    nodes = {n.id: n for n in tree}
    return nodes, (tree[0].id if tree else None)


def in_order(tree: TreeLike) -> List[str]:
    nodes, cur = _index(tree)
    order: List[str] = []
    stack: List[TreeNode] = []
    while stack or (cur is not None and cur in nodes):
        while cur is not None and cur in nodes:
            stack.append(nodes[cur])
            cur = nodes[cur].left
        node = stack.pop()
        order.append(node.id)
        cur = node.right
    return order


def pre_order(tree: TreeLike) -> List[str]:
    nodes, root = _index(tree)
    order: List[str] = []
    stack = [root] if root is not None else []
    while stack:
        nid = stack.pop()
        node = nodes.get(nid)
        if node is None:
            continue
        order.append(nid)
        # right pushed first so left is popped first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return order


def post_order(tree: TreeLike) -> List[str]:
    nodes, root = _index(tree)
    # reverse of a (self, right, left) walk
    reversed_order: List[str] = []
    stack = [root] if root is not None else []
    while stack:
        nid = stack.pop()
        node = nodes.get(nid)
        if node is None:
            continue
        reversed_order.append(nid)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_order[::-1]


def insert(nodes: Sequence[TreeNode], value: Number, node_id: Optional[str] = None) -> List[TreeNode]:
    """
    Pure BST insert over a snapshot: returns a new node list with the
    value added, leaving `nodes` untouched.
    """
    tree = BinarySearchTree.from_nodes(nodes)
    tree.insert(value, node_id=node_id)
    return tree.to_list()


TRAVERSALS: Dict[str, Callable[[TreeLike], List[str]]] = {
    "inorder":   in_order,
    "preorder":  pre_order,
    "postorder": post_order,
}


def get_traversal(key: str) -> Optional[Callable[[TreeLike], List[str]]]:
    """Return the traversal for "inorder" / "preorder" / "postorder", or None."""
    return TRAVERSALS.get(key)
