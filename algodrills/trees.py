"""Binary tree nodes and tree-walking routines."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

_T = TypeVar("_T", "TreeNode", "Node")


def _build(factory: Callable[[int], _T], values: Iterable[Optional[int]]) -> Optional[_T]:
    """Link nodes laid out heap-style: the children of slot i sit at 2i+1 and 2i+2."""
    nodes = [None if value is None else factory(value) for value in values]
    for index, node in enumerate(nodes):
        if node is None:
            continue
        left, right = 2 * index + 1, 2 * index + 2
        node.left = nodes[left] if left < len(nodes) else None
        node.right = nodes[right] if right < len(nodes) else None
    return nodes[0] if nodes else None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional["TreeNode"]:
        """Build a tree from heap-indexed values, None marking an empty slot."""
        return _build(cls, values)


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node that also points to its right neighbour on its level."""

    val: int = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    next: Optional["Node"] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional["Node"]:
        """Build a tree from heap-indexed values, None marking an empty slot."""
        return _build(cls, values)

    def __repr__(self) -> str:
        following = None if self.next is None else self.next.val
        return f"Node(val={self.val!r}, next={following!r})"


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to target_sum."""
    if root is None:
        return False
    stack = [(root, root.val)]
    while stack:
        node, total = stack.pop()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, total + child.val))
    return False


def connect(root: Optional[Node]) -> Optional[Node]:
    """Point each node's next at its right neighbour on the same level."""
    if root is None:
        return None
    level = [child for child in (root.left, root.right) if child is not None]
    while level:
        for current, following in zip(level, level[1:]):
            current.next = following
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return root


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    stack = [(p, q)]
    while stack:
        first, second = stack.pop()
        if first is None and second is None:
            continue
        if first is None or second is None or first.val != second.val:
            return False
        stack.append((first.left, second.left))
        stack.append((first.right, second.right))
    return True


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled by the digits along every root-to-leaf path."""
    if root is None:
        return 0
    result = 0
    stack = [(root, root.val)]
    while stack:
        node, number = stack.pop()
        if node.left is None and node.right is None:
            result += number
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, number * 10 + child.val))
    return result


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether a tree is a mirror image of itself."""
    if root is None:
        return True
    pairs = deque([(root.left, root.right)])
    while pairs:
        left, right = pairs.popleft()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pairs.append((left.left, right.right))
        pairs.append((left.right, right.left))
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether an in-order walk of the tree gives strictly rising values."""
    stack: list[TreeNode] = []
    current = root
    previous: Optional[int] = None
    while True:
        while current is not None:
            stack.append(current)
            current = current.left
        if not stack:
            return True
        current = stack.pop()
        if previous is not None and current.val <= previous:
            return False
        previous = current.val
        current = current.right