from huffpack.node import Node


def test_leaf_is_detected_by_symbol():
    assert Node(symbol=ord("a"), weight=3).is_leaf() is True


def test_internal_node_is_not_leaf():
    left = Node(symbol=ord("a"), weight=1)
    right = Node(symbol=ord("b"), weight=2)
    parent = Node(left, right, 0, 3)
    assert parent.is_leaf() is False
    assert parent.left is left
    assert parent.right is right


def test_copy_drops_children_and_keeps_values():
    child = Node(symbol=ord("x"), weight=1)
    original = Node(child, child, 0, 7)
    clone = original.copy()
    assert clone is not original
    assert clone.left is None and clone.right is None
    assert clone.symbol == original.symbol
    assert clone.weight == original.weight


def test_copy_of_leaf_is_leaf():
    leaf = Node(symbol=ord("q"), weight=4)
    assert leaf.copy().is_leaf() is True