from algodrills.multilevel import Node, flatten


def _chain(values):
    nodes = [Node(value) for value in values]
    for before, after in zip(nodes, nodes[1:]):
        before.next = after
        after.prev = before
    return nodes


def _walk(head):
    values = []
    previous = None
    node = head
    while node is not None:
        assert node.prev is previous
        assert node.child is None
        values.append(node.val)
        previous, node = node, node.next
    return values


def _example():
    top = _chain([1, 2, 3, 4, 5, 6])
    middle = _chain([7, 8, 9, 10])
    bottom = _chain([11, 12])
    top[2].child = middle[0]
    middle[1].child = bottom[0]
    return top[0]


def test_worked_example():
    assert _walk(flatten(_example())) == [1, 2, 3, 7, 8, 11, 12, 9, 10, 4, 5, 6]


def test_flat_list_is_unchanged():
    values = [3, 1, 4, 1, 5]
    head = _chain(values)[0]
    assert _walk(flatten(head)) == values


def test_empty_list():
    assert flatten(None) is None


def test_head_is_returned():
    head = _example()
    assert flatten(head) is head


def test_child_on_last_node_is_appended():
    top = _chain([1, 2])
    below = _chain([3, 4])
    top[1].child = below[0]
    assert _walk(flatten(top[0])) == [node.val for node in top + below]


def test_values_are_preserved():
    top = _chain(range(5))
    below = _chain(range(10, 13))
    deepest = _chain(range(20, 22))
    top[0].child = below[0]
    below[2].child = deepest[0]
    flattened = _walk(flatten(top[0]))
    assert sorted(flattened) == sorted(list(range(5)) + list(range(10, 13)) + list(range(20, 22)))
    assert flattened[: 1 + len(below)] == [0, 10, 11, 12]