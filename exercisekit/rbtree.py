"""Red-black tree with insertion and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Color(Enum):
    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class _Node:
    data: Any
    color: Color = Color.RED
    left: _Node | None = None
    right: _Node | None = None
    parent: _Node | None = field(default=None, repr=False)


class RedBlackTree:
    """A red-black tree of distinct values; duplicates are ignored."""

    def __init__(self) -> None:
        self.root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, data: Any) -> bool:
        node = self.root
        while node is not None:
            if data < node.data:
                node = node.left
            elif data > node.data:
                node = node.right
            else:
                return True
        return False

    def insert(self, data: Any) -> bool:
        """Insert ``data``; return False if it was already present."""
        parent: _Node | None = None
        node = self.root
        while node is not None:
            parent = node
            if data < node.data:
                node = node.left
            elif data > node.data:
                node = node.right
            else:
                return False
        new = _Node(data, parent=parent)
        if parent is None:
            self.root = new
        elif data < parent.data:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._fix_violation(new)
        return True

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if node.right is not None:
            node.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self.root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if node.left is not None:
            node.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self.root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.right = node
        node.parent = pivot

    def _fix_violation(self, node: _Node) -> None:
        while (
            node is not self.root
            and node.color is Color.RED
            and node.parent is not None
            and node.parent.color is Color.RED
        ):
            parent = node.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    grand.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grand
                    continue
                if node is parent.right:
                    self._rotate_left(parent)
                    node = parent
                    parent = node.parent
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if uncle is not None and uncle.color is Color.RED:
                    grand.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grand
                    continue
                if node is parent.left:
                    self._rotate_right(parent)
                    node = parent
                    parent = node.parent
                self._rotate_left(grand)
            parent.color, grand.color = grand.color, parent.color
            node = parent
        assert self.root is not None
        self.root.color = Color.BLACK

    def _walk_inorder(self, node: _Node | None) -> Iterator[Any]:
        if node is None:
            return
        yield from self._walk_inorder(node.left)
        yield node.data
        yield from self._walk_inorder(node.right)

    def inorder(self) -> list[Any]:
        """Values in sorted order."""
        return list(self._walk_inorder(self.root))

    def level_order(self) -> list[Any]:
        """Values in breadth-first order."""
        if self.root is None:
            return []
        result = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree and print its traversals."""
    tree = RedBlackTree()
    for value in (50, 30, 40, 60, 10, 80, 90, 5, 100):
        tree.insert(value)
    print("Inoder Traversal of Created Tree")
    print(" ".join(str(v) for v in tree.inorder()))
    print("\nLevel Order Traversal of Created Tree")
    print(" ".join(str(v) for v in tree.level_order()))
    return 0