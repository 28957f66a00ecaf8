"""Binary search tree construction, queries and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, repr=False)


def insert(root: TreeNode | None, data: Any) -> TreeNode:
    """Insert ``data`` into the tree and return its root.

    Values equal to a node's value go into its left subtree.
    """
    if root is None:
        return TreeNode(data)
    node = root
    while True:
        if data <= node.data:
            if node.left is None:
                node.left = TreeNode(data, parent=node)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(data, parent=node)
                return root
            node = node.right


def lookup(node: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key``, or None."""
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node


def tree_min(node: TreeNode | None) -> TreeNode | None:
    """Return the leftmost node of the subtree."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def tree_max(node: TreeNode | None) -> TreeNode | None:
    """Return the rightmost node of the subtree."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def _inorder(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def _reverse_inorder(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    yield from _reverse_inorder(node.right)
    yield node
    yield from _reverse_inorder(node.left)


def _preorder(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node


def _bfs(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    queue = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


def is_bst(node: TreeNode | None) -> bool:
    """True when the in-order values are strictly increasing."""
    return all(a.data < b.data for a, b in pairwise(_inorder(node)))


def size(node: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _inorder(node))


def max_depth(node: TreeNode | None) -> int:
    """Depth in edges of the deepest leaf; a leaf or empty tree is 0."""
    if node is None or (node.left is None and node.right is None):
        return 0
    return max(max_depth(node.left), max_depth(node.right)) + 1


def min_depth(node: TreeNode | None) -> int:
    """Shallowest depth, where a missing child counts as depth 0."""
    if node is None or (node.left is None and node.right is None):
        return 0
    return min(min_depth(node.left), min_depth(node.right)) + 1


def is_balanced(node: TreeNode | None) -> bool:
    """True when max and min depth differ by at most one."""
    return max_depth(node) - min_depth(node) <= 1


def successor(node: TreeNode) -> TreeNode | None:
    """In-order successor: the node with the next higher key."""
    if node.right is not None:
        return tree_min(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


def predecessor(node: TreeNode) -> TreeNode | None:
    """In-order predecessor: the node with the next lower key."""
    if node.left is not None:
        return tree_max(node.left)
    parent = node.parent
    while parent is not None and node is parent.left:
        node, parent = parent, parent.parent
    return parent


def lowest_common_ancestor(
    node: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest node that has ``p`` or ``q`` as a child, or both below it."""
    if node is None:
        return None
    for child in (node.left, node.right):
        if child is not None and (child is p or child is q):
            return node
    left = lowest_common_ancestor(node.left, p, q)
    right = lowest_common_ancestor(node.right, p, q)
    if left is not None and right is not None:
        return node
    return left if left is not None else right


def inorder(node: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    return [n.data for n in _inorder(node)]


def preorder(node: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    return [n.data for n in _preorder(node)]


def postorder(node: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    return [n.data for n in _postorder(node)]


def reverse_order(node: TreeNode | None) -> list[Any]:
    """Values in right, root, left order."""
    return [n.data for n in _reverse_inorder(node)]


def root_to_leaf_paths(node: TreeNode | None) -> list[list[Any]]:
    """Every path of values from the root down to a leaf, left to right."""
    paths: list[list[Any]] = []

    def walk(current: TreeNode | None, prefix: list[Any]) -> None:
        if current is None:
            return
        path = [*prefix, current.data]
        if current.left is None and current.right is None:
            paths.append(path)
            return
        walk(current.left, path)
        walk(current.right, path)

    walk(node, [])
    return paths


def match_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """True when both trees have the same shape and values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    if first.data != second.data:
        return False
    return match_tree(first.left, second.left) and match_tree(first.right, second.right)


def is_subtree(tree: TreeNode | None, sub: TreeNode | None) -> bool:
    """True when ``sub`` matches some subtree of ``tree``; an empty tree always does."""
    if sub is None:
        return True
    if tree is None:
        return False
    if tree.data == sub.data and match_tree(tree, sub):
        return True
    return is_subtree(tree.left, sub) or is_subtree(tree.right, sub)


def mirror(node: TreeNode | None) -> TreeNode | None:
    """Swap left and right children at every node, in place."""
    if node is None:
        return None
    mirror(node.left)
    mirror(node.right)
    node.left, node.right = node.right, node.left
    return node


def minimal_bst(items: Sequence[Any]) -> TreeNode | None:
    """Build a tree of minimal depth from a sorted sequence."""

    def build(start: int, end: int, parent: TreeNode | None) -> TreeNode | None:
        if end < start:
            return None
        mid = (start + end) // 2
        node = TreeNode(items[mid], parent=parent)
        node.left = build(start, mid - 1, node)
        node.right = build(mid + 1, end, node)
        return node

    return build(0, len(items) - 1, None)


def breadth_first(node: TreeNode | None) -> list[Any]:
    """Values in level order."""
    return [n.data for n in _bfs(node)]


def get_level(node: TreeNode | None, key: Any) -> int:
    """Level of ``key`` by search from the root (root is 0); 0 when absent."""
    level = 0
    while node is not None:
        if key == node.data:
            return level
        node = node.left if key < node.data else node.right
        level += 1
    return 0


def levels(node: TreeNode | None) -> list[list[Any]]:
    """Values grouped by level, in breadth-first order within each level."""
    grouped: list[list[Any]] = []
    for current in _bfs(node):
        level = get_level(node, current.data)
        while len(grouped) <= level:
            grouped.append([])
        grouped[level].append(current.data)
    return grouped


def level_print(node: TreeNode | None) -> list[list[Any]]:
    """Values grouped by depth, filled in pre-order."""
    grouped: list[list[Any]] = []

    def walk(current: TreeNode | None, level: int) -> None:
        if current is None:
            return
        while len(grouped) <= level:
            grouped.append([])
        grouped[level].append(current.data)
        walk(current.left, level + 1)
        walk(current.right, level + 1)

    walk(node, 0)
    return grouped


def nth_max(node: TreeNode | None, n: int = 5) -> Any:
    """The n-th largest value, or None when the tree is smaller than n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    for rank, current in enumerate(_reverse_inorder(node), start=1):
        if rank == n:
            return current.data
    return None


def split_even_odd_levels(node: TreeNode | None) -> tuple[list[Any], list[Any]]:
    """Values on even and on odd levels, each in breadth-first order."""
    even: list[Any] = []
    odd: list[Any] = []
    for current in _bfs(node):
        target = even if get_level(node, current.data) % 2 == 0 else odd
        target.append(current.data)
    return even, odd


def _join(values: list[Any]) -> str:
    return " ".join(str(v) for v in values)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration on a fixed sample tree."""
    root: TreeNode | None = None
    for ch in "FBADCEGIH":
        root = insert(root, ch)
    assert root is not None

    if not is_bst(root):
        print("Not a BST")
    print(f"size = {size(root)}")
    print(f"max depth = {max_depth(root)}")
    print(f"min depth = {min_depth(root)}")
    print("This tree is balanced!" if is_balanced(root) else "This tree is not balanced!")
    print(f"Min value = {tree_min(root).data}")
    print(f"Max value = {tree_max(root).data}")
    for ch in "BHF":
        print(f"Node {ch} is at level: {get_level(root, ch)}")

    even, odd = split_even_odd_levels(root)
    print(f"even level elements : {_join(even)}")
    print(f"odd level elements : {_join(odd)}")

    found = lookup(root, "B")
    if found is not None:
        print(f"Min value of subtree B as a root is {tree_min(found).data}")
        print(f"Max value of subtree B as a root is {tree_max(found).data}")

    for label, step in (("Successor", successor), ("Predecessor", predecessor)):
        for ch in "BEI":
            found = lookup(root, ch)
            if found is None:
                continue
            neighbour = step(found)
            shown = neighbour.data if neighbour is not None else "None"
            print(f"In Order {label} of {ch} is {shown}")

    for ch1, ch2 in ("AC", "EH", "DE", "GI", "HI"):
        ancestor = lowest_common_ancestor(root, lookup(root, ch1), lookup(root, ch2))
        if ancestor is not None:
            print(f"The lowest common ancestor of {ch1} and {ch2} is {ancestor.data}")

    print("increasing sort order")
    print(_join(inorder(root)))
    print("post order ")
    print(_join(postorder(root)))
    print("pre order ")
    print(_join(preorder(root)))
    print("reverse order ")
    print(_join(reverse_order(root)))

    for ch in "DM":
        if lookup(root, ch) is not None:
            print(f"{ch} is in the tree")
        else:
            print(f"{ch} is not in the tree")

    print("printing paths ...")
    for path in root_to_leaf_paths(root):
        print("".join(str(v) for v in path))

    fifth = nth_max(root, 5)
    if fifth is not None:
        print(f"5-th maximum data is {fifth}")

    print("printing with Breadth-first traversal")
    print(_join(breadth_first(root)))

    for index, row in enumerate(levels(root)):
        print(f"Level at {index}: {_join(row)}")

    print("levelPrint() ")
    for index, row in enumerate(level_print(root)):
        print(f"level {index}: {_join(row)}")

    print(f"New array: {_join(inorder(root))}")

    def build(values: str) -> TreeNode | None:
        tree: TreeNode | None = None
        for value in values:
            tree = insert(tree, value)
        return tree

    root2 = build("DCE")
    root3 = build("BADCE")
    root4 = build("BDCE")
    print(f"1-2 subtree: {int(is_subtree(root, root2))}")
    print(f"1-3 subtree: {int(is_subtree(root, root3))}")
    print(f"1-4 subtree: {int(is_subtree(root, root4))}")
    print(f"2-3 subtree: {int(is_subtree(root2, root3))}")
    print(f"3-2 subtree: {int(is_subtree(root3, root2))}")

    mirror(root)
    minimal_bst("ABCDEFGHI")
    return 0