import pytest

from judgekit.trees import (
    TreeNode,
    is_same_tree,
    is_symmetric,
    level_order,
    max_depth,
    min_depth,
    zigzag_level_order,
)


def build(values):
    """Build a tree from a level-order list where None marks a missing child."""
    if not values or values[0] is None:
        return None
    nodes = iter(values)
    root = TreeNode(next(nodes))
    pending = [root]
    while pending:
        parent = pending.pop(0)
        for side in ("left", "right"):
            try:
                value = next(nodes)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, mirror(node.right), mirror(node.left))


def chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, None, root)
    return root


SHAPES = [
    [3, 9, 20, None, None, 15, 7],
    [1, 2, 3, 4, 5, 6, 7, 8],
    [1, None, 2, None, 3],
    [5, 4, None, 3, None, 2],
    [1],
    [1, 2, 2, 3, 4, 4, 3],
]


def test_level_order_example():
    assert level_order(build([3, 9, 20, None, None, 15, 7])) == [[3], [9, 20], [15, 7]]


def test_zigzag_example():
    assert zigzag_level_order(build([3, 9, 20, None, None, 15, 7])) == [[3], [20, 9], [15, 7]]


def test_empty_tree_traversals():
    assert level_order(None) == []
    assert zigzag_level_order(None) == level_order(None)
    assert max_depth(None) == len(level_order(None))
    assert min_depth(None) == max_depth(None)


@pytest.mark.parametrize("shape", SHAPES)
def test_zigzag_reverses_odd_levels(shape):
    root = build(shape)
    plain = level_order(root)
    zigzag = zigzag_level_order(root)
    assert len(plain) == len(zigzag)
    for depth, (a, b) in enumerate(zip(plain, zigzag)):
        assert b == (a if depth % 2 == 0 else a[::-1])


@pytest.mark.parametrize("shape", SHAPES)
def test_level_order_holds_every_value(shape):
    root = build(shape)
    flat = [v for level in level_order(root) for v in level]
    assert sorted(flat) == sorted(v for v in shape if v is not None)


@pytest.mark.parametrize("shape", SHAPES)
def test_depth_bounds(shape):
    root = build(shape)
    assert max_depth(root) == len(level_order(root))
    assert 1 <= min_depth(root) <= max_depth(root)


def test_min_depth_example():
    assert min_depth(build([3, 9, 20, None, None, 15, 7])) == 2


def test_chain_depths_follow_the_only_child():
    values = [2, 3, 4, 5, 6]
    root = chain(values)
    assert min_depth(root) == len(values)
    assert max_depth(root) == len(values)


def test_min_depth_ignores_missing_side():
    deep = chain([7, 8, 9])
    root = TreeNode(1, None, deep)
    assert min_depth(root) == min_depth(deep) + 1


def test_same_tree_with_copy():
    a = build([1, 2, 3, None, 4])
    b = build([1, 2, 3, None, 4])
    assert is_same_tree(a, b)
    assert is_same_tree(None, None)


def test_same_tree_differs_on_side():
    assert not is_same_tree(TreeNode(1, TreeNode(2)), TreeNode(1, None, TreeNode(2)))


def test_same_tree_differs_on_value():
    assert not is_same_tree(build([1, 2, 1]), build([1, 1, 2]))


def test_same_tree_against_empty():
    assert not is_same_tree(TreeNode(1), None)


def test_symmetric_example():
    assert is_symmetric(build([1, 2, 2, 3, 4, 4, 3]))


def test_not_symmetric_example():
    assert not is_symmetric(build([1, 2, 2, None, 3, None, 3]))


def test_empty_is_symmetric():
    assert is_symmetric(None)


@pytest.mark.parametrize("shape", SHAPES)
def test_tree_joined_with_its_mirror_is_symmetric(shape):
    sub = build(shape)
    assert is_symmetric(TreeNode(0, sub, mirror(sub)))


def test_symmetric_levels_are_palindromes():
    root = build([1, 2, 2, 3, 4, 4, 3])
    for level in level_order(root):
        assert level == level[::-1]