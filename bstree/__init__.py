from bstree.tree import (
    BalancedBinarySearchTree,
    BinaryTree,
    EmptyTreeError,
    Node,
    NodeNotFoundError,
    TreeError,
)
from bstree.render import pretty_print, render

__all__ = [
    "BalancedBinarySearchTree",
    "BinaryTree",
    "EmptyTreeError",
    "Node",
    "NodeNotFoundError",
    "TreeError",
    "pretty_print",
    "render",
]
