from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Iterable, Iterator, List, Optional

# Default subtree argument meaning the tree's own root; None is an empty subtree.
_TREE_ROOT: Any = object()


class TreeError(RuntimeError):
    """Base class for errors raised by tree operations."""


class EmptyTreeError(TreeError):
    """Raised when an operation needs a root and the tree is empty."""


class NodeNotFoundError(TreeError):
    """Raised when a node cannot be reached from the given subtree."""


class Node:
    """A tree node holding one key and two children."""
    __slots__ = 'key', 'left', 'right'

    def __init__(self, key, left=None, right=None):
        self.key = key
        self.left: Optional['Node'] = left
        self.right: Optional['Node'] = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        return f"Node({self.key!r})"


class BinaryTree(ABC):
    """Abstract base class providing the traversal orders of a binary tree."""

    @abstractmethod
    def root(self) -> Optional[Node]:
        """Return the root node of the tree (or None if tree is empty)."""
        pass

    def is_empty(self) -> bool:
        """Return True if the tree is empty."""
        return self.root() is None

    def __len__(self) -> int:
        return sum(1 for _ in self._subtree_preorder(self.root()))

    def __iter__(self) -> Iterator[Any]:
        """Generate an iteration of the tree's keys in ascending order."""
        for node in self._subtree_inorder(self.root()):
            yield node.key

    # ------------------ Generators ------------------
    def _levelorder(self) -> Iterator[Node]:
        """Generate a breadth-first iteration of the tree's nodes."""
        if self.is_empty():
            return
        queue = deque([self.root()])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _subtree_preorder(self, node: Optional[Node]) -> Iterator[Node]:
        stack = [node] if node is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _subtree_inorder(self, node: Optional[Node]) -> Iterator[Node]:
        stack: List[Node] = []
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _subtree_postorder(self, node: Optional[Node]) -> Iterator[Node]:
        # (node, children_done) pairs; a node is yielded on its second pop
        stack = [(node, False)] if node is not None else []
        while stack:
            node, children_done = stack.pop()
            if children_done:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    # ------------------ Collected traversals ------------------
    def level_order(self) -> List[Node]:
        """Return the nodes level by level, left to right within a level."""
        return list(self._levelorder())

    def pre_order(self) -> List[Node]:
        """Return the nodes in pre-order (node, left, right)."""
        return list(self._subtree_preorder(self.root()))

    def in_order(self) -> List[Node]:
        """Return the nodes in in-order (left, node, right), i.e. sorted by key."""
        return list(self._subtree_inorder(self.root()))

    def post_order(self) -> List[Node]:
        """Return the nodes in post-order (left, right, node)."""
        return list(self._subtree_postorder(self.root()))

    # ------------------ Visitor traversals ------------------
    def each_level_order(self, visit: Callable[[Node], None]) -> None:
        """Call visit on each node level by level."""
        for node in self._levelorder():
            visit(node)

    def each_pre_order(self, visit: Callable[[Node], None]) -> None:
        """Call visit on each node in pre-order."""
        for node in self._subtree_preorder(self.root()):
            visit(node)

    def each_in_order(self, visit: Callable[[Node], None]) -> None:
        """Call visit on each node in ascending key order."""
        for node in self._subtree_inorder(self.root()):
            visit(node)

    def each_post_order(self, visit: Callable[[Node], None]) -> None:
        """Call visit on each node in post-order."""
        for node in self._subtree_postorder(self.root()):
            visit(node)


class BalancedBinarySearchTree(BinaryTree):
    """
    Binary search tree built at minimal height from a collection of keys.

    Insert and delete never restructure the tree; balance is restored only
    by an explicit call to rebalance().
    """

    def __init__(self, keys: Iterable[Any] = ()):
        self.array: List[Any] = sorted(set(keys))
        self._root: Optional[Node] = self._build_subtree(self.array)

    @classmethod
    def build(cls, keys: Iterable[Any]) -> 'BalancedBinarySearchTree':
        """Return a new tree holding the unique keys of the collection."""
        return cls(keys)

    def root(self) -> Optional[Node]:
        return self._root

    def __contains__(self, key) -> bool:
        return self.find(key) is not None

    def __repr__(self):
        return f"BalancedBinarySearchTree({list(self)!r})"

    # ------------------ Queries ------------------
    def find(self, key: Any, root: Optional[Node] = _TREE_ROOT) -> Optional[Node]:
        """Return the node holding key, or None if it is not in the subtree."""
        return self._find(key, self._root if root is _TREE_ROOT else root)

    def _find(self, key: Any, root: Optional[Node]) -> Optional[Node]:
        while root is not None and key != root.key:
            root = root.left if key < root.key else root.right
        return root

    def height(self, root: Optional[Node] = _TREE_ROOT) -> int:
        """
        Return the number of nodes on the longest downward path from root.

        A leaf has height 1 and an empty subtree has height 0. With no
        argument the tree's own root is measured.
        """
        return self._height(self._root if root is _TREE_ROOT else root)

    def _height(self, root: Optional[Node]) -> int:
        """Count the levels below root one at a time."""
        levels = 0
        level = [root] if root is not None else []
        while level:
            levels += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return levels

    def depth(self, node: Node, root: Optional[Node] = _TREE_ROOT) -> int:
        """
        Return the level of node below root, counting root itself as 1.

        The node is located by comparing its key on the way down, so it must
        be present in the subtree; NodeNotFoundError is raised otherwise.
        """
        return self._depth(node, self._root if root is _TREE_ROOT else root)

    def _depth(self, node: Node, root: Optional[Node]) -> int:
        depth = 1
        while root is not node:
            if root is None:
                raise NodeNotFoundError(f"{node!r} is not in the tree")
            if node.key == root.key:
                raise NodeNotFoundError(f"{node!r} is detached from the tree")
            root = root.left if node.key < root.key else root.right
            depth += 1
        return depth

    def is_balanced(self) -> bool:
        """Return True if the root's subtrees differ in height by at most one."""
        if self._root is None:
            raise EmptyTreeError("balance is undefined for an empty tree")
        return abs(self._height(self._root.left) - self._height(self._root.right)) <= 1

    # ------------------ Mutations ------------------
    def insert(self, key: Any) -> 'BalancedBinarySearchTree':
        """Insert key; a key already in the tree is ignored."""
        parent, node = None, self._root
        while node is not None:
            if key == node.key:
                return self
            parent, node = node, (node.left if key < node.key else node.right)
        self._replace_child(parent, key, Node(key))
        return self

    def delete(self, key: Any) -> 'BalancedBinarySearchTree':
        """Remove key from the tree; a missing key is ignored."""
        parent, node = None, self._root
        while node is not None:
            if key < node.key:
                parent, node = node, node.left
            elif key > node.key:
                parent, node = node, node.right
            elif node.left is not None and node.right is not None:
                # Successor has no left child, so removing it takes a one-child branch.
                node.key = key = self.next_biggest(node.right).key
                parent, node = node, node.right
            else:
                child = node.left if node.right is None else node.right
                self._replace_child(parent, key, child)
                break
        return self

    def _replace_child(self, parent: Optional[Node], key: Any, new: Optional[Node]) -> None:
        """Write new into the slot of parent (or the root) that key descends to."""
        if parent is None:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new

    @staticmethod
    def next_biggest(root: Node) -> Node:
        """Return the leftmost node of the subtree, its smallest key."""
        while root.left is not None:
            root = root.left
        return root

    def rebalance(self) -> 'BalancedBinarySearchTree':
        """Rebuild the tree at minimal height from its current keys."""
        self.array = [node.key for node in self.in_order()]
        self._root = self._build_subtree(self.array)
        return self

    def _build_subtree(self, keys: List[Any]) -> Optional[Node]:
        if not keys:
            return None
        mid = len(keys) // 2  # even lengths take the right-hand middle
        node = Node(keys[mid])
        node.left = self._build_subtree(keys[:mid])
        node.right = self._build_subtree(keys[mid + 1:])
        return node
