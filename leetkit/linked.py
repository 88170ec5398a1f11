"""Singly linked lists, a small linked-list container and an LRU cache."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(-1, head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        first = cur.next
        second = first.next
        first.next = second.next
        second.next = first
        cur.next = second
        cur = first
    return dummy.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list in ascending order by bubbling nodes and return the new head."""
    if head is None or head.next is None:
        return head
    count = sum(1 for _ in _nodes(head))
    dummy = ListNode(0, head)
    for remaining in range(count - 1, 0, -1):
        prev = dummy
        for _ in range(remaining):
            first = prev.next
            second = first.next
            if first.val > second.val:
                prev.next = second
                first.next = second.next
                second.next = first
            prev = prev.next
    return dummy.next


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Drop every node whose value equals ``val`` and return the new head."""
    dummy = ListNode(0, head)
    cur = dummy
    while cur.next is not None:
        if cur.next.val == val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev: ListNode | None = None
    cur = head
    while cur is not None:
        cur.next, prev, cur = prev, cur, cur.next
    return prev


class MyLinkedList:
    """A singly linked list addressed by zero-based index."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._dummy = ListNode(0)
        self._size = 0
        for value in values:
            self.add_at_tail(value)

    def _node_before(self, index: int) -> ListNode:
        cur = self._dummy
        for _ in range(index):
            cur = cur.next
        return cur

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError if there is none."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of size {self._size}")
        return self._node_before(index).next.val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self._dummy.next = ListNode(val, self._dummy.next)
        self._size += 1

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        self._node_before(self._size).next = ListNode(val)
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``.

        An index equal to the length appends; a larger one is ignored;
        a negative one inserts at the head.
        """
        if index > self._size:
            return
        index = max(index, 0)
        prev = self._node_before(index)
        prev.next = ListNode(val, prev.next)
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < self._size:
            return
        prev = self._node_before(index)
        prev.next = prev.next.next
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self._dummy.next))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"MyLinkedList({list(self)!r})"


class LRUCache:
    """A fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key`` and mark it as recently used, or None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key, last=False)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if over capacity."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key, last=False)
            return
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=True)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries