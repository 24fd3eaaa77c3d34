"""Singly linked lists: conversion helpers, digit addition, merging and the middle node."""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self):
        node = self
        while node is not None:
            yield node
            node = node.next


def from_values(values):
    """Build a linked list from ``values`` and return its head, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head):
    """Return the values of the list starting at ``head``."""
    return [node.val for node in head] if head is not None else []


def add_two_numbers(list1, list2):
    """Add two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while list1 is not None or list2 is not None:
        total = carry
        if list1 is not None:
            total += list1.val
            list1 = list1.next
        if list2 is not None:
            total += list2.val
            list2 = list2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def merge_two_lists(list1, list2):
    """Splice two ascending lists into one ascending list, reusing their nodes."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def middle_node(head):
    """Return the middle node of the list, the second one when there are two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow