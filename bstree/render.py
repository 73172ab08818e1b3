"""
Text diagram of a binary tree, drawn sideways.

The right subtree is printed above its parent and the left subtree below,
so reading the diagram with the head tilted left shows the usual layout:

    │   ┌── 8
    └── 5
        └── 3
"""

from typing import List, Optional, Union

from bstree.tree import BinaryTree, Node


def _render_lines(root: Node) -> List[str]:
    lines: List[str] = []
    # (node, prefix, is_left, ready); ready entries print, others expand right, self, left
    stack = [(root, "", True, False)]
    while stack:
        node, prefix, is_left, ready = stack.pop()
        if ready:
            lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.key}")
            continue
        if node.left is not None:
            stack.append((node.left, prefix + ("    " if is_left else "│   "), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + ("│   " if is_left else "    "), False, False))
    return lines


def render(tree: Union[BinaryTree, Node, None]) -> str:
    """Return the diagram for a tree or subtree; empty trees render as ''."""
    root: Optional[Node] = tree.root() if isinstance(tree, BinaryTree) else tree
    if root is None:
        return ""
    return "\n".join(_render_lines(root))


def pretty_print(tree: Union[BinaryTree, Node, None]) -> None:
    print(render(tree))
