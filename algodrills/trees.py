"""Binary trees: construction from level order and traversal puzzles."""

from collections import deque
from dataclasses import dataclass
from typing import Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values):
    """Build a tree from level-order ``values``, where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def inorder_traversal(root):
    """Return the values of the tree in left, node, right order."""
    values = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def _truncating_div(numerator, denominator):
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def average_of_subtree(root):
    """Count the nodes whose value equals the truncated average of their subtree."""
    matches = 0

    def visit(node):
        nonlocal matches
        if node is None:
            return 0, 0
        left_sum, left_count = visit(node.left)
        right_sum, right_count = visit(node.right)
        total = left_sum + right_sum + node.val
        count = left_count + right_count + 1
        if _truncating_div(total, count) == node.val:
            matches += 1
        return total, count

    visit(root)
    return matches


def lowest_common_ancestor(root, p, q):
    """Return the deepest node of the tree that has both ``p`` and ``q`` below or at it."""
    parents = {root: None}
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                stack.append(child)

    ancestors = set()
    node = p
    while node is not None:
        ancestors.add(node)
        node = parents.get(node)

    node = q
    while node is not None:
        if node in ancestors:
            return node
        node = parents.get(node)
    return root


def max_ancestor_diff(root):
    """Return the largest absolute difference between a node and one of its ancestors."""
    if root is None:
        raise ValueError("the tree must not be empty")
    best = 0
    stack = [(root, root.val, root.val)]
    while stack:
        node, highest, lowest = stack.pop()
        value = node.val
        best = max(best, abs(highest - value), abs(lowest - value))
        highest, lowest = max(highest, value), min(lowest, value)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, highest, lowest))
    return best


def merge_trees(root1, root2):
    """Overlay ``root2`` onto ``root1``, summing values where both have a node."""
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    root1.val += root2.val
    root1.right = merge_trees(root1.right, root2.right)
    root1.left = merge_trees(root1.left, root2.left)
    return root1


def min_depth(root):
    """Return the number of nodes on the shortest path from the root to a leaf."""
    if root is None:
        return 0
    queue = deque([(root, 1)])
    while queue:
        node, depth = queue.popleft()
        if node.left is None and node.right is None:
            return depth
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, depth + 1))
    return 0