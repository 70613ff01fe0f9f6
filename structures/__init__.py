"""
structures/
-----------
Core data layer.  Public API:

    from structures import ArrayElement, make_elements, random_elements
    from structures import Graph, GraphNode, GraphEdge
    from structures import BinarySearchTree, TreeNode
    from structures import LinkedList, ListNode
"""

from structures.element     import ArrayElement, make_elements, random_elements
from structures.node        import GraphNode
from structures.edge        import GraphEdge
from structures.graph       import Graph, build_adjacency
from structures.tree        import BinarySearchTree, TreeNode
from structures.linked_list import LinkedList, ListNode
from structures.ids         import IdSequence

__all__ = [
    "ArrayElement",     "make_elements",  "random_elements",
    "GraphNode",        "GraphEdge",      "Graph",  "build_adjacency",
    "BinarySearchTree", "TreeNode",
    "LinkedList",       "ListNode",
    "IdSequence",
]
