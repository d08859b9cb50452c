"""Singly linked list node and list-rearranging routines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list from values; an empty iterable gives None."""
        return _link([cls(value) for value in values])

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in self]

    def __repr__(self) -> str:
        return f"ListNode({self.to_list()!r})"


def _nodes(head: Optional[ListNode]) -> list[ListNode]:
    return list(head) if head is not None else []


def _link(nodes: list[ListNode]) -> Optional[ListNode]:
    """Chain the nodes in the given order and terminate the last one."""
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    if not nodes:
        return None
    nodes[-1].next = None
    return nodes[0]


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below x ahead of the rest, keeping relative order."""
    if head is None or head.next is None:
        return head
    nodes = _nodes(head)
    smaller = [node for node in nodes if node.val < x]
    larger = [node for node in nodes if node.val >= x]
    return _link(smaller + larger)


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node whose value equals a neighbour's, keeping the rest."""
    if head is None or head.next is None:
        return head
    nodes = _nodes(head)
    kept = []
    for index, node in enumerate(nodes):
        same_as_prev = index > 0 and nodes[index - 1].val == node.val
        same_as_next = index + 1 < len(nodes) and nodes[index + 1].val == node.val
        if not (same_as_prev or same_as_next):
            kept.append(node)
    return _link(kept)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end (1 is the last node)."""
    nodes = _nodes(head)
    if not nodes:
        return None
    if len(nodes) == 1:
        return None
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    if n == len(nodes):
        return nodes[0].next
    index = len(nodes) - n
    nodes[index - 1].next = nodes[index].next
    return head


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions left through right."""
    if left == 1 and right == 1:
        return head
    nodes = _nodes(head)
    if left > len(nodes):
        return head
    if left < 1 or right < left or right > len(nodes):
        raise ValueError(
            f"invalid range {left}..{right} for a list of {len(nodes)} nodes"
        )
    nodes[left - 1 : right] = nodes[left - 1 : right][::-1]
    return _link(nodes)


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of k nodes; a shorter tail stays as it is."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    nodes = _nodes(head)
    if len(nodes) < k or len(nodes) == 1:
        return head
    full = len(nodes) - len(nodes) % k
    reordered: list[ListNode] = []
    for start in range(0, full, k):
        reordered.extend(reversed(nodes[start : start + k]))
    reordered.extend(nodes[full:])
    return _link(reordered)


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list k places to the right."""
    if head is None or k == 0:
        return head
    nodes = _nodes(head)
    shift = k % len(nodes)
    if shift == 0:
        return _link(nodes)
    return _link(nodes[-shift:] + nodes[:-shift])