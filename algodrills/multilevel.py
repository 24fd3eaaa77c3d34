"""Multilevel doubly linked lists and their flattening."""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node of a doubly linked list that may also hold a child list."""

    val: int = 0
    prev: Optional["Node"] = None
    next: Optional["Node"] = None
    child: Optional["Node"] = None


def flatten(head):
    """Flatten the list in place so every child list follows its parent node; return ``head``."""
    node = head
    while node is not None:
        child = node.child
        if child is not None:
            tail = child
            while tail.next is not None:
                tail = tail.next
            following = node.next
            node.next = child
            child.prev = node
            node.child = None
            tail.next = following
            if following is not None:
                following.prev = tail
        node = node.next
    return head