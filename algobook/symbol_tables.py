"""Symbol tables: key-indexed array, ordered array, linked list, BST and linear-probing hash."""

from __future__ import annotations

import random
from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from algobook.sorting import RAND_MAX
from algobook.structures import Node

MAX_KEY = 1000

_key_of = attrgetter("key")


@dataclass(frozen=True)
class Record:
    """A keyed record; the key MAX_KEY marks a null record."""

    key: Any = MAX_KEY
    info: float = 0.0

    @property
    def is_null(self) -> bool:
        return self.key == MAX_KEY

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Record:
        """A record with a random key in 0..100 and random info in [0, 1]."""
        rng = rng or random.Random()
        key = 100 * rng.randrange(RAND_MAX + 1) // RAND_MAX
        info = rng.randrange(RAND_MAX + 1) / RAND_MAX
        return cls(key, info)


def _require(record: Record) -> None:
    if record.is_null:
        raise ValueError("cannot store a null record")


class DistributedTable:
    """Records stored in an array at the index equal to their integer key."""

    def __init__(self, max_n: int) -> None:
        self._slots: list[Record | None] = [None] * max_n

    def _in_range(self, key: Any) -> bool:
        return isinstance(key, int) and 0 <= key < len(self._slots)

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)

    def insert(self, record: Record) -> None:
        _require(record)
        if not self._in_range(record.key):
            raise ValueError(f"key {record.key!r} outside 0..{len(self._slots) - 1}")
        self._slots[record.key] = record

    def search(self, key: Any) -> Record | None:
        return self._slots[key] if self._in_range(key) else None

    def remove(self, record: Record) -> None:
        if self._in_range(record.key):
            self._slots[record.key] = None

    def select(self, k: int) -> Record | None:
        """The record with the k-th smallest key (0-based), or None."""
        present = (slot for slot in self._slots if slot is not None)
        for index, record in enumerate(present):
            if index == k:
                return record
        return None


class SequentialTable:
    """Records kept sorted by key in a bounded array."""

    def __init__(self, max_n: int) -> None:
        self._max_n = max_n
        self._records: list[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, record: Record) -> None:
        """Insert after any records with an equal key."""
        _require(record)
        if len(self._records) >= self._max_n:
            raise OverflowError("table is full")
        index = bisect_right(self._records, record.key, key=_key_of)
        self._records.insert(index, record)

    def search(self, key: Any) -> Record | None:
        """Linear scan for the first record with the key."""
        return next((r for r in self._records if r.key == key), None)

    def binary_search(self, key: Any) -> Record | None:
        """Binary search for a record with the key."""
        index = bisect_left(self._records, key, key=_key_of)
        if index < len(self._records) and self._records[index].key == key:
            return self._records[index]
        return None


class LinkedTable:
    """Records in an unordered linked list, newest first."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, record: Record) -> None:
        _require(record)
        self._head = Node(record, self._head)
        self._size += 1

    def search(self, key: Any) -> Record | None:
        if self._head is None:
            return None
        return next((r for r in self._head.cycle() if r.key == key), None)


@dataclass(eq=False)
class _TreeNode:
    record: Record
    left: _TreeNode | None = None
    right: _TreeNode | None = None


def _rotate_right(node: _TreeNode) -> _TreeNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: _TreeNode) -> _TreeNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


def _insert_root(node: _TreeNode | None, record: Record) -> _TreeNode:
    if node is None:
        return _TreeNode(record)
    if record.key < node.record.key:
        node.left = _insert_root(node.left, record)
        return _rotate_right(node)
    node.right = _insert_root(node.right, record)
    return _rotate_left(node)


def _join(a: _TreeNode | None, b: _TreeNode | None) -> _TreeNode | None:
    if b is None:
        return a
    if a is None:
        return b
    b = _insert_root(b, a.record)
    b.left = _join(a.left, b.left)
    b.right = _join(a.right, b.right)
    return b


def _in_order(node: _TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.left)
    yield node.record.key
    yield from _in_order(node.right)


class BinarySearchTree:
    """An unbalanced binary search tree of records; equal keys go to the right."""

    def __init__(self) -> None:
        self._root: _TreeNode | None = None

    def __len__(self) -> int:
        return sum(1 for _ in self.keys())

    def search(self, key: Any) -> Record | None:
        node = self._root
        while node is not None:
            if node.record.key == key:
                return node.record
            node = node.left if key < node.record.key else node.right
        return None

    def insert(self, record: Record) -> None:
        """Insert as a new leaf."""
        _require(record)
        new = _TreeNode(record)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if record.key < node.record.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def insert_at_root(self, record: Record) -> None:
        """Insert as a leaf, then rotate the new node up to the root."""
        _require(record)
        self._root = _insert_root(self._root, record)

    def keys(self) -> Iterator[Any]:
        """Yield the keys in sorted order."""
        return _in_order(self._root)

    def join(self, other: BinarySearchTree) -> None:
        """Merge the other tree's records into this one, leaving the other empty."""
        self._root = _join(self._root, other._root)
        other._root = None


def hash_string(text: str, modulus: int) -> int:
    """Horner hash of the character codes with multiplier 127, reduced by modulus."""
    h = 0
    for char in text:
        h = (127 * h + ord(char)) % modulus
    return h


class HashTable:
    """Open-addressing hash table with linear probing, sized twice max_n."""

    def __init__(self, max_n: int) -> None:
        self._slots: list[Record | None] = [None] * (2 * max_n)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _start(self, key: Any) -> int:
        text = key if isinstance(key, str) else chr(key)
        return hash_string(text, len(self._slots))

    def _probe(self, key: Any) -> Iterator[int]:
        size = len(self._slots)
        start = self._start(key)
        return ((start + step) % size for step in range(size))

    def insert(self, record: Record) -> None:
        _require(record)
        if self._size >= len(self._slots):
            raise OverflowError("hash table is full")
        for i in self._probe(record.key):
            if self._slots[i] is None:
                self._slots[i] = record
                self._size += 1
                return

    def search(self, key: Any) -> Record | None:
        for i in self._probe(key):
            record = self._slots[i]
            if record is None:
                return None
            if record.key == key:
                return record
        return None