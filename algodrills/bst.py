"""Binary search tree puzzles: balancing, building, ancestors and gaps."""

from itertools import pairwise

from algodrills.trees import TreeNode, inorder_traversal


def _inorder_nodes(root):
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def balance_bst(root):
    """Relink the nodes of a search tree into a height-balanced one and return its root."""
    nodes = list(_inorder_nodes(root))

    def link(left, right):
        if left > right:
            return None
        mid = (left + right) // 2
        node = nodes[mid]
        node.left = link(left, mid - 1)
        node.right = link(mid + 1, right)
        return node

    return link(0, len(nodes) - 1)


def sorted_array_to_bst(nums):
    """Build a height-balanced search tree from the ascending ``nums``."""

    def build(left, right):
        if left > right:
            return None
        mid = (left + right) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def lowest_common_ancestor_bst(root, p, q):
    """Return the lowest node of a search tree whose value lies between those of ``p`` and ``q``."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            break
    return node


def get_minimum_difference(root):
    """Return the smallest difference between the values of two nodes of a search tree."""
    values = inorder_traversal(root)
    if len(values) < 2:
        raise ValueError("the tree must hold at least two nodes")
    return min(b - a for a, b in pairwise(values))