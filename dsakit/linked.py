"""Singly linked lists, circular lists and a bounded FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` links from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place and return its new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


class LinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Add ``value`` at the start."""
        self._head = ListNode(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.val

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        if self._head.next is None:
            return self.pop_front()
        previous = self._head
        while previous.next is not self._tail:
            previous = previous.next
        value = self._tail.val
        previous.next = None
        self._tail = previous
        self._size -= 1
        return value

    def middle(self) -> int:
        """The middle value; of two middles, the second one."""
        if self._head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.val

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._tail = self._head
        self._head = reverse_list(self._head)

    def sum(self) -> int:
        """Total of all values."""
        return sum(self)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return "->".join([*(str(value) for value in self), "None"])


class CircularList:
    """A circular singly linked list with positional insertion and deletion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.insert(self._size, value)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at 0-based position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position {index} is outside 0..{self._size}")
        node = ListNode(value)
        if self._head is None:
            node.next = node
            self._head = self._tail = node
        elif index == 0:
            node.next = self._head
            self._tail.next = node
            self._head = node
        else:
            previous = self._head
            for _ in range(index - 1):
                previous = previous.next
            node.next = previous.next
            previous.next = node
            if previous is self._tail:
                self._tail = node
        self._size += 1

    def delete(self, position: int) -> int:
        """Remove and return the value at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"delete position {position} is outside 1..{self._size}")
        if position == 1:
            removed = self._head
            if self._size == 1:
                self._head = self._tail = None
            else:
                self._head = removed.next
                self._tail.next = self._head
        else:
            previous = self._head
            for _ in range(position - 2):
                previous = previous.next
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.val

    def __iter__(self) -> Iterator[int]:
        node = self._head
        for _ in range(self._size):
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._size


class CircularQueue:
    """A FIFO queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> bool:
        """Append ``value``; return False when the queue is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def dequeue(self) -> bool:
        """Drop the front value; return False when the queue is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def front(self) -> int | None:
        """The front value, or None when empty."""
        return self._items[0] if self._items else None

    def rear(self) -> int | None:
        """The last value, or None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity