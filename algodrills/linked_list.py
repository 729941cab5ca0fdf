"""Singly linked list nodes and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def list_size(head: ListNode | None) -> int:
    """Count the nodes of the list."""
    return sum(1 for _ in _nodes(head))


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _node_at(head: ListNode | None, index: int) -> ListNode:
    for position, node in enumerate(_nodes(head)):
        if position == index:
            return node
    raise IndexError(f"list has no node at position {index}")


def swap_nodes(head: ListNode | None, k: int) -> ListNode | None:
    """Swap the values of the k-th node from the start and from the end."""
    size = list_size(head)
    if not 1 <= k <= size:
        raise IndexError(f"k must be between 1 and {size}, got {k}")
    first = _node_at(head, k - 1)
    second = _node_at(head, size - k)
    first.val, second.val = second.val, first.val
    return head


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node from the end and return the new head."""
    size = list_size(head)
    if not 1 <= n <= size:
        raise IndexError(f"n must be between 1 and {size}, got {n}")
    dummy = ListNode(-1, head)
    before = dummy
    for _ in range(size - n):
        before = before.next
    before.next = before.next.next
    return dummy.next


def merge_nodes(head: ListNode | None) -> ListNode | None:
    """Merge each run of nodes between zeros into one node holding their sum.

    The list must start and end with a zero-valued node.
    """
    if head is None or head.next is None:
        raise ValueError("list must start and end with a zero node")
    current = head.next
    probe = current
    while probe is not None:
        total = 0
        while probe is not None and probe.val != 0:
            total += probe.val
            probe = probe.next
        if probe is None:
            raise ValueError("list must end with a zero node")
        current.val = total
        probe = probe.next
        current.next = probe
        current = probe
    return head.next


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(-1, head)
    current = dummy
    while current.next is not None:
        if current.next.val == val:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether the list reads the same both ways, leaving it unchanged."""
    values = to_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list, given only the node itself.

    The node must not be the last one.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = following.val
    node.next = following.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop repeated values from a sorted list, keeping the first of each."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    steps = list_size(head) // 2
    node = head
    for _ in range(steps):
        node = node.next
    return node