import pytest

from algodrills.trees import (
    TreeNode,
    average_of_subtree,
    build_tree,
    inorder_traversal,
    lowest_common_ancestor,
    max_ancestor_diff,
    merge_trees,
    min_depth,
)

EXAMPLE = [1, 2, 3, 4, 5, None, 6]


def _nodes(root):
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child)


def _find(root, value):
    return next(node for node in _nodes(root) if node.val == value)


def _left_chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def test_inorder_of_worked_example():
    assert inorder_traversal(build_tree(EXAMPLE)) == [4, 2, 5, 1, 3, 6]


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([None]) is None
    assert inorder_traversal(None) == []


def test_build_tree_shape():
    root = build_tree(EXAMPLE)
    assert root.val == EXAMPLE[0]
    assert root.left.val == EXAMPLE[1]
    assert root.right.left is None
    assert root.right.right.val == EXAMPLE[6]


def test_average_all_equal_counts_every_node():
    values = [5] * 7
    assert average_of_subtree(build_tree(values)) == len(values)


def test_average_empty_tree():
    assert average_of_subtree(None) == 0


def test_average_leaves_always_match():
    root = build_tree(EXAMPLE)
    leaves = [n for n in _nodes(root) if n.left is None and n.right is None]
    assert average_of_subtree(root) >= len(leaves)


def test_lca_of_siblings_is_parent():
    root = build_tree(EXAMPLE)
    p, q = root.left.left, root.left.right
    assert lowest_common_ancestor(root, p, q) is root.left


def test_lca_with_self_and_root():
    root = build_tree(EXAMPLE)
    leaf = _find(root, 6)
    assert lowest_common_ancestor(root, leaf, leaf) is leaf
    assert lowest_common_ancestor(root, leaf, root) is root


def test_lca_across_subtrees_is_root():
    root = build_tree(EXAMPLE)
    assert lowest_common_ancestor(root, _find(root, 4), _find(root, 6)) is root


def test_max_ancestor_diff_equal_values():
    assert max_ancestor_diff(build_tree([3, 3, 3, 3])) == 0


def test_max_ancestor_diff_chain_spans_ends():
    values = [4, 9, 1, 7]
    assert max_ancestor_diff(_left_chain(values)) == max(values) - min(values)


def test_max_ancestor_diff_empty_raises():
    with pytest.raises(ValueError):
        max_ancestor_diff(None)


def test_merge_with_none_returns_other():
    tree = build_tree(EXAMPLE)
    assert merge_trees(None, tree) is tree
    assert merge_trees(tree, None) is tree


def test_merge_identical_shapes_doubles_values():
    merged = merge_trees(build_tree(EXAMPLE), build_tree(EXAMPLE))
    expected = [2 * v for v in inorder_traversal(build_tree(EXAMPLE))]
    assert inorder_traversal(merged) == expected


def test_merge_preserves_total():
    first = [1, 3, 2, 5]
    second = [2, 1, 3, None, 4, None, 7]
    merged = merge_trees(build_tree(first), build_tree(second))
    assert sum(inorder_traversal(merged)) == sum(first) + sum(v for v in second if v)


def test_min_depth_empty_and_single():
    assert min_depth(None) == 0
    assert min_depth(TreeNode(7)) == 1


def test_min_depth_chain_is_its_length():
    values = [1, 2, 3, 4, 5]
    assert min_depth(_left_chain(values)) == len(values)


def test_min_depth_shallow_leaf():
    assert min_depth(build_tree([3, 9, 20, None, None, 15, 7])) == 2