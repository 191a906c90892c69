"""Fixed-size hash table with chained buckets keyed by a SHA-256 based hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from securedtable.linked_list import LinkedList
from securedtable.printf import printf
from securedtable.sha256 import sha256_digest

HashFunction = Callable[[str, int], int]


def hash_key(key: str, size: int) -> int:
    """Hash *key* to a non-negative 32-bit integer.

    The SHA-256 digest holds eight 32-bit words; the word picked is chosen by
    ``size % 8`` and read big-endian.
    """
    digest = sha256_digest(key)
    offset = (size % 8) * 4
    word = int.from_bytes(digest[offset:offset + 4], "big")
    signed = word - 2**32 if word >= 2**31 else word
    return abs(signed)


@dataclass
class HashedData:
    """One stored entry: the hashed key and its value."""

    key: int
    value: str


class HashTable:
    """Hash table with *size* buckets, each a linked list of entries.

    Entries are identified by their hashed key only, so two keys that hash
    to the same value share one entry.
    """

    def __init__(self, hash_function: HashFunction = hash_key, size: int = 1) -> None:
        if size <= 0:
            raise ValueError("hash table size must be positive")
        self.size = size
        self.hash_function = hash_function
        self.buckets: list[LinkedList] = [LinkedList() for _ in range(size)]

    def _locate(self, key: str) -> tuple[int, LinkedList]:
        if key is None:
            raise TypeError("key must not be None")
        hashed = self.hash_function(key, self.size)
        return hashed, self.buckets[hashed % self.size]

    def insert(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any value with the same hash."""
        if value is None:
            raise TypeError("value must not be None")
        hashed, bucket = self._locate(key)
        for entry in bucket:
            if entry.key == hashed:
                entry.value = value
                return
        bucket.push_front(HashedData(hashed, value))

    def delete(self, key: str) -> None:
        """Remove the entry for *key*; raise KeyError if it is absent."""
        hashed, bucket = self._locate(key)
        for node in bucket.nodes():
            if node.data.key == hashed:
                bucket.delete_node(node)
                return
        raise KeyError(key)

    def search(self, key: str) -> Optional[str]:
        """Return the value stored for *key*, or None."""
        hashed, bucket = self._locate(key)
        return next((entry.value for entry in bucket if entry.key == hashed), None)

    def dump(self, file: TextIO | None = None) -> None:
        """Write every bucket and its entries."""
        for index, bucket in enumerate(self.buckets):
            printf("[%d]:\n", index, file=file)
            for entry in bucket:
                printf("> %d - %s\n", entry.key, entry.value, file=file)

    def is_empty(self) -> bool:
        """Return True when no bucket holds an entry."""
        return all(bucket.head is None for bucket in self.buckets)

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self.buckets:
            bucket.clear()