"""A link-based binary search tree.

Items smaller than a node's item go to its left subtree; all others,
including equal items, go to its right subtree.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


@dataclass(eq=False)
class BinaryNode(Generic[T]):
    """A node holding one item and links to its two children."""

    item: T
    left: BinaryNode[T] | None = None
    right: BinaryNode[T] | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BinarySearchTree(Generic[T]):
    """An unbalanced binary search tree that allows duplicate items."""

    def __init__(self, root_item: T = _MISSING) -> None:
        self._root: BinaryNode[T] | None = (
            None if root_item is _MISSING else BinaryNode(root_item)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.inorder())!r})"

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of nodes on the longest path from the root to a leaf."""
        height = 0
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def __len__(self) -> int:
        return sum(1 for _ in self.inorder())

    def add(self, item: T) -> bool:
        """Insert ``item`` at the leaf position the ordering dictates."""
        new_node = BinaryNode(item)
        if self._root is None:
            self._root = new_node
            return True
        node = self._root
        while True:
            if node.item > item:
                if node.left is None:
                    node.left = new_node
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return True
                node = node.right

    def _locate(self, target: Any) -> tuple[BinaryNode[T] | None, BinaryNode[T] | None]:
        """Return the first node equal to ``target`` on the search path and its parent."""
        parent: BinaryNode[T] | None = None
        node = self._root
        while node is not None:
            if node.item == target:
                return node, parent
            parent = node
            node = node.left if node.item > target else node.right
        return None, None

    def _replace_child(
        self,
        parent: BinaryNode[T] | None,
        old: BinaryNode[T],
        new: BinaryNode[T] | None,
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, target: Any) -> bool:
        """Remove one item equal to ``target``; return False if none is found."""
        node, parent = self._locate(target)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.item = successor.item
            self._replace_child(successor_parent, successor, successor.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        return True

    def clear(self) -> None:
        self._root = None

    def __contains__(self, target: Any) -> bool:
        return self._locate(target)[0] is not None

    def find(self, target: Any) -> T | None:
        """Return the stored item equal to ``target``, or None if absent."""
        node = self._locate(target)[0]
        return None if node is None else node.item

    def preorder(self) -> Iterator[T]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.item
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[T]:
        stack: list[BinaryNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def postorder(self) -> Iterator[T]:
        if self._root is None:
            return
        stack = [self._root]
        visited: deque[T] = deque()
        while stack:
            node = stack.pop()
            visited.appendleft(node.item)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from visited

    def copy(self) -> BinarySearchTree[T]:
        """Return a tree of the same shape whose nodes are new but items shared."""
        duplicate: BinarySearchTree[T] = type(self).__new__(type(self))
        BinarySearchTree.__init__(duplicate)
        if self._root is None:
            return duplicate
        duplicate._root = BinaryNode(self._root.item)
        stack = [(self._root, duplicate._root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = BinaryNode(source.left.item)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = BinaryNode(source.right.item)
                stack.append((source.right, target.right))
        return duplicate