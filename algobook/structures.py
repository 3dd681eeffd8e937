"""Linked lists, stacks, queues, a priority queue and binary-tree traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A singly linked list node; lists built from it may be circular."""

    item: Any
    next: Node | None = field(default=None, repr=False)

    def insert_after(self, other: Node) -> None:
        """Link other directly after this node."""
        other.next = self.next
        self.next = other

    def delete_after(self) -> Node:
        """Unlink and return the node that follows this one."""
        removed = self.next
        if removed is None:
            raise ValueError("no node follows this one")
        self.next = removed.next
        return removed

    def cycle(self) -> Iterator[Any]:
        """Yield the items from this node on, until the list ends or comes back here."""
        node: Node | None = self
        while node is not None:
            yield node.item
            node = node.next
            if node is self:
                return


def reverse_cycle(head: Node) -> Node:
    """Reverse the list starting at head and return its new first node.

    The former head becomes the last node and ends the list, so a circular
    list comes out as a plain one.
    """
    previous: Node | None = None
    node: Node | None = head
    while True:
        assert node is not None
        following = node.next
        node.next = previous
        previous = node
        node = following
        if node is None or node is head:
            return previous


class Stack:
    """A last-in first-out stack of bounded size."""

    def __init__(self, max_size: int) -> None:
        self._max_size = max_size
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: Any) -> None:
        if len(self._items) >= self._max_size:
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()


class LinkedStack:
    """A last-in first-out stack kept as a chain of nodes."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def push(self, item: Any) -> None:
        self._head = Node(item, self._head)
        self._size += 1

    def pop(self) -> Any:
        if self._head is None:
            raise IndexError("pop from an empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.item


class Queue:
    """A first-in first-out queue kept as a chain of nodes."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def put(self, item: Any) -> None:
        node = Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def get(self) -> Any:
        if self._head is None:
            raise IndexError("get from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.item


class ArrayQueue:
    """A first-in first-out queue in a fixed circular buffer holding up to max_n items."""

    def __init__(self, max_n: int) -> None:
        self._slots: list[Any] = [None] * (max_n + 1)
        self._head = 0
        self._tail = 0

    def __len__(self) -> int:
        return (self._tail - self._head) % len(self._slots)

    def put(self, item: Any) -> None:
        if len(self) == len(self._slots) - 1:
            raise OverflowError("queue is full")
        self._slots[self._tail] = item
        self._tail = (self._tail + 1) % len(self._slots)

    def get(self) -> Any:
        if self._head == self._tail:
            raise IndexError("get from an empty queue")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        return item


class PriorityQueue:
    """A bounded priority queue in an unordered array; removal scans for the maximum."""

    def __init__(self, max_n: int) -> None:
        self._max_n = max_n
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, item: Any) -> None:
        if len(self._items) >= self._max_n:
            raise OverflowError("priority queue is full")
        self._items.append(item)

    def pop_max(self) -> Any:
        """Remove and return the largest item (the first one found on ties)."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        items = self._items
        best = 0
        for i, item in enumerate(items):
            if items[best] < item:
                best = i
        items[best], items[-1] = items[-1], items[best]
        return items.pop()


@dataclass(eq=False)
class BinaryTree:
    """A binary tree node with optional left and right subtrees."""

    item: Any
    left: BinaryTree | None = None
    right: BinaryTree | None = None


def preorder(tree: BinaryTree | None) -> Iterator[Any]:
    """Yield items node first, then the left subtree, then the right, recursively."""
    if tree is None:
        return
    yield tree.item
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def preorder_stack(tree: BinaryTree | None) -> Iterator[Any]:
    """Yield items in preorder using an explicit stack."""
    if tree is None:
        return
    pending = [tree]
    while pending:
        node = pending.pop()
        yield node.item
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def level_order(tree: BinaryTree | None) -> Iterator[Any]:
    """Yield items level by level from the root, each level right to left."""
    if tree is None:
        return
    pending = deque([tree])
    while pending:
        node = pending.popleft()
        yield node.item
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def count(tree: BinaryTree | None) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return count(tree.left) + count(tree.right) + 1


def height(tree: BinaryTree | None) -> int:
    """Height of the tree; a single node has height 0 and an empty tree -1."""
    if tree is None:
        return -1
    return max(height(tree.left), height(tree.right)) + 1