"""A singly linked list holding arbitrary data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            self.push_back_all(*items)

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, data: Any) -> Node:
        """Insert *data* at the head; None is not accepted."""
        if data is None:
            raise ValueError("cannot push None to the front of the list")
        self.head = Node(data, self.head)
        return self.head

    def push_front_all(self, *args: Any) -> None:
        """Push each argument to the front, in order."""
        for data in args:
            self.push_front(data)

    def push_back(self, data: Any) -> Node:
        """Append *data* at the tail."""
        new_node = Node(data)
        last = None
        for last in self.nodes():
            pass
        if last is None:
            self.head = new_node
        else:
            last.next = new_node
        return new_node

    def push_back_all(self, *args: Any) -> None:
        """Append each argument at the tail, in order."""
        for data in args:
            self.push_back(data)

    def pop_front(self) -> Any:
        """Remove the head node and return its data."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        return node.data

    def delete_node(self, node: Optional[Node]) -> None:
        """Unlink *node* from the list; None is ignored."""
        if node is None or self.head is None:
            return
        if self.head is node:
            self.head = node.next
            return
        for prev in self.nodes():
            if prev.next is node:
                prev.next = node.next
                return
        raise ValueError("node is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev = None
        current = self.head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self.head = prev

    def clear(self) -> None:
        """Remove every node."""
        self.head = None