import pytest

from algokit.binary_tree import (
    TreeNode,
    build_level_order,
    build_preorder,
    contains,
    count_leaves,
    count_nodes,
    diameter,
    height,
    level_order,
    mirror,
    node_diameter,
    path_to,
    preorder,
    render,
)

# 1 -> (2, 3); 2 -> (4, 5); 3 -> (-, 6)
LEVEL_INPUT = [1, 2, 3, 4, 5, -1, 6, -1, -1, -1, -1, -1, -1]


def serialize_preorder(node):
    if node is None:
        return [-1]
    return [node.value] + serialize_preorder(node.left) + serialize_preorder(node.right)


@pytest.fixture
def tree():
    return build_level_order(LEVEL_INPUT)


def test_level_order_round_trip(tree):
    assert level_order(tree) == [v for v in LEVEL_INPUT if v != -1]


def test_preorder_round_trip(tree):
    rebuilt = build_preorder(serialize_preorder(tree))
    assert rebuilt == tree
    assert preorder(rebuilt) == preorder(tree)


def test_build_preorder_simple():
    root = build_preorder([7, -1, -1])
    assert root == TreeNode(7)


def test_empty_inputs():
    assert build_level_order([-1]) is None
    assert build_preorder([-1]) is None
    assert height(None) == 0
    assert diameter(None) == 0
    assert node_diameter(None) == 0
    assert count_nodes(None) == 0
    assert count_leaves(None) == 0
    assert preorder(None) == []
    assert render(None) == ""
    assert path_to(None, 1) is None


@pytest.mark.parametrize("builder", [build_level_order, build_preorder])
def test_truncated_input_raises(builder):
    with pytest.raises(ValueError):
        builder([1, 2])
    with pytest.raises(ValueError):
        builder([])


def test_render_format():
    root = build_level_order([1, 2, 3, -1, -1, -1, -1])
    assert render(root) == "1:L2R3\n2:\n3:\n"


def test_render_has_one_line_per_node(tree):
    lines = render(tree).splitlines()
    assert len(lines) == count_nodes(tree)
    assert [int(line.split(":")[0]) for line in lines] == preorder(tree)


def test_height_and_diameter(tree):
    assert height(tree) == 3
    assert diameter(tree) == 4
    assert node_diameter(tree) == diameter(tree) + 1


def test_diameter_not_through_root():
    # left spine hanging off a deep left subtree with two long branches
    root = build_preorder(
        [1, 2, 3, 4, -1, -1, -1, 5, -1, 6, -1, -1, -1]
    )
    assert diameter(root) >= height(root.left.left) + height(root.left.right)
    assert diameter(root) == max(
        height(root.left) + height(root.right),
        diameter(root.left),
        diameter(root.right),
    )


def test_counts(tree):
    assert count_nodes(tree) == len(level_order(tree))
    assert count_leaves(tree) == sum(
        1 for line in render(tree).splitlines() if line.endswith(":")
    )


def test_contains(tree):
    for value in level_order(tree):
        assert contains(tree, value)
    assert not contains(tree, 42)


def test_mirror_twice_restores(tree):
    original = build_level_order(LEVEL_INPUT)
    mirrored = mirror(tree)
    assert mirrored is tree
    assert mirrored != original
    assert level_order(mirrored) == [1, 3, 2, 6, 5, 4]
    assert mirror(mirrored) == original


def test_mirror_reverses_each_level(tree):
    before = preorder(tree)
    mirror(tree)
    assert sorted(preorder(tree)) == sorted(before)
    assert height(tree) == height(build_level_order(LEVEL_INPUT))


def test_path_to(tree):
    assert path_to(tree, 5) == [5, 2, 1]
    assert path_to(tree, 1) == [1]
    assert path_to(tree, 99) is None


def test_path_ends_at_root_for_every_node(tree):
    for value in preorder(tree):
        path = path_to(tree, value)
        assert path[0] == value
        assert path[-1] == tree.value
        assert len(path) <= height(tree)