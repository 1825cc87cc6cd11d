"""Singly linked lists and common operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the n-th node counted from the end of the list (1-based)."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    fast: ListNode | None = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError(f"n={n} is larger than the list length")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next  # type: ignore[assignment]
    assert slow.next is not None
    slow.next = slow.next.next
    return dummy.next


def _merge(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take from list2 first."""
    return _merge(list1, list2)


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge any number of sorted lists by pairwise divide and conquer."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        pending = [
            _merge(first, second)
            for first, second in zip_longest(pending[::2], pending[1::2])
        ]
    return pending[0]


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the nodes in each complete group of k; a short tail stays as is."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if head is None or k == 1:
        return head
    dummy = ListNode(0, head)
    remaining = sum(1 for _ in _nodes(head))
    prev = dummy
    while remaining >= k:
        curr = prev.next
        nxt = curr.next
        for _ in range(k - 1):
            curr.next = nxt.next
            nxt.next = prev.next
            prev.next = nxt
            nxt = curr.next
        prev = curr
        remaining -= k
    return dummy.next