"""Singly linked lists of sorted values and k-way merging of them."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    data: int
    next: Optional[ListNode] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Link ``values`` into a list and return its head, or None if empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.data
            node = node.next

    def nodes(self) -> Iterator[ListNode]:
        """The nodes of the list starting at this one."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def to_list(self) -> list[int]:
        """The values of the list starting at this node."""
        return list(self)


def merge_k_lists_scan(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists by scanning every head for the smallest value.

    Nodes are relinked, not copied. On ties the earliest list wins.
    """
    heads = list(lists)
    sentinel = ListNode(0)
    tail = sentinel
    while True:
        best = min(
            (i for i, head in enumerate(heads) if head is not None),
            key=lambda i: heads[i].data,
            default=None,
        )
        if best is None:
            break
        node = heads[best]
        tail.next = node
        tail = node
        heads[best] = node.next
    return sentinel.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists with a min-heap of their current heads.

    Nodes are relinked, not copied. On ties the earliest list wins.
    """
    order = itertools.count()
    heap = [(head.data, next(order), head) for head in lists if head is not None]
    heapq.heapify(heap)
    sentinel = ListNode(0)
    tail = sentinel
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.data, next(order), node.next))
    return sentinel.next