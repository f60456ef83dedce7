"""Binary trees: a binary search tree, row insertion and burn time from a start node."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinarySearchTree:
    """A binary search tree of distinct integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``; a value already present raises ValueError."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.val:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            elif value > current.val:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                raise ValueError(f"duplicate value {value}")

    def search(self, value: int) -> TreeNode | None:
        """The node holding ``value``, or None."""
        current = self.root
        while current is not None and current.val != value:
            current = current.left if value < current.val else current.right
        return current

    def delete(self, value: int) -> None:
        """Remove ``value``; raise KeyError when it is absent."""
        self.root = self._delete(self.root, value)

    def _delete(self, node: TreeNode | None, value: int) -> TreeNode | None:
        if node is None:
            raise KeyError(value)
        if value < node.val:
            node.left = self._delete(node.left, value)
        elif value > node.val:
            node.right = self._delete(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            heir = node.right
            while heir.left is not None:
                heir = heir.left
            node.val = heir.val
            node.right = self._delete(node.right, heir.val)
        return node

    def inorder(self) -> list[int]:
        return list(self._walk(self.root, "in"))

    def preorder(self) -> list[int]:
        return list(self._walk(self.root, "pre"))

    def postorder(self) -> list[int]:
        return list(self._walk(self.root, "post"))

    def _walk(self, node: TreeNode | None, order: str) -> Iterator[int]:
        if node is None:
            return
        if order == "pre":
            yield node.val
        yield from self._walk(node.left, order)
        if order == "in":
            yield node.val
        yield from self._walk(node.right, order)
        if order == "post":
            yield node.val

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""

        def depth(node: TreeNode | None) -> int:
            if node is None:
                return -1
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self.root)

    def _neighbour(self, value: int, smaller: bool) -> int | None:
        best: int | None = None
        current = self.root
        while current is not None and current.val != value:
            if value < current.val:
                if not smaller:
                    best = current.val
                current = current.left
            else:
                if smaller:
                    best = current.val
                current = current.right
        if current is None:
            raise KeyError(value)
        child = current.left if smaller else current.right
        while child is not None:
            best = child.val
            child = child.right if smaller else child.left
        return best

    def predecessor(self, value: int) -> int | None:
        """The next smaller value in the tree, or None."""
        return self._neighbour(value, smaller=True)

    def successor(self, value: int) -> int | None:
        """The next larger value in the tree, or None."""
        return self._neighbour(value, smaller=False)


def add_one_row(root: TreeNode | None, value: int, depth: int) -> TreeNode:
    """Insert a row of ``value`` nodes at ``depth`` (root is depth 1) and return the root."""
    if depth < 1:
        raise ValueError("depth must be at least 1")
    if depth == 1 or root is None:
        return TreeNode(value, left=root)
    level = [root]
    for _ in range(depth - 2):
        level = [child for node in level for child in (node.left, node.right) if child]
    for node in level:
        node.left = TreeNode(value, left=node.left)
        node.right = TreeNode(value, right=node.right)
    return root


def time_to_burn(root: TreeNode | None, start: int) -> int:
    """Minutes for fire lit at the node valued ``start`` to spread through the whole tree."""
    answer = -1
    found_any = False

    def visit(node: TreeNode | None) -> tuple[bool, int]:
        nonlocal answer, found_any
        if node is None:
            return False, 0
        left_found, left_path = visit(node.left)
        right_found, right_path = visit(node.right)
        if node.val == start:
            found_any = True
            answer = max(left_path, right_path)
            return True, 1
        if left_found or right_found:
            answer = max(answer, left_path + right_path)
            return True, (left_path if left_found else right_path) + 1
        return False, max(left_path, right_path) + 1

    visit(root)
    if not found_any:
        raise ValueError(f"start value {start} is not in the tree")
    return answer


def _bfs_values(root: TreeNode | None) -> Iterator[int]:
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        yield node.val
        queue.extend(child for child in (node.left, node.right) if child)