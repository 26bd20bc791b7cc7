from collections import deque

import pytest

from solvekit.trees import (
    TreeNode,
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    count_complete_nodes,
    distance_k,
    find_target,
    is_balanced,
    lowest_common_ancestor,
    width_of_tree,
)


def level_order(values):
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def preorder(node):
    return [] if node is None else [node.val, *preorder(node.left), *preorder(node.right)]


def inorder(node):
    return [] if node is None else [*inorder(node.left), node.val, *inorder(node.right)]


def postorder(node):
    return [] if node is None else [*postorder(node.left), *postorder(node.right), node.val]


def find(node, value):
    if node is None:
        return None
    if node.val == value:
        return node
    return find(node.left, value) or find(node.right, value)


def chain(length):
    root = TreeNode(0)
    node = root
    for value in range(1, length):
        node.left = TreeNode(value)
        node = node.left
    return root


SAMPLE = [3, 5, 1, 6, 2, 0, 8, None, None, 7, 4]


def test_build_from_preorder_inorder_round_trip():
    pre, ino = [3, 9, 20, 15, 7], [9, 3, 15, 20, 7]
    root = build_from_preorder_inorder(pre, ino)
    assert preorder(root) == pre
    assert inorder(root) == ino


def test_build_from_inorder_postorder_round_trip():
    ino, post = [9, 3, 15, 20, 7], [9, 15, 7, 20, 3]
    root = build_from_inorder_postorder(ino, post)
    assert inorder(root) == ino
    assert postorder(root) == post


def test_builders_agree_with_sample_tree():
    tree = level_order(SAMPLE)
    a = build_from_preorder_inorder(preorder(tree), inorder(tree))
    b = build_from_inorder_postorder(inorder(tree), postorder(tree))
    assert preorder(a) == preorder(tree) == preorder(b)
    assert postorder(a) == postorder(tree) == postorder(b)


def test_builders_empty():
    assert build_from_preorder_inorder([], []) is None
    assert build_from_inorder_postorder([], []) is None


def test_builder_rejects_unknown_value():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1, 3])


def test_is_balanced():
    assert is_balanced(level_order(SAMPLE)) is True
    assert is_balanced(None) is True
    assert is_balanced(chain(2)) is True
    assert is_balanced(chain(3)) is False


@pytest.mark.parametrize("n", range(0, 20))
def test_count_complete_nodes(n):
    assert count_complete_nodes(level_order(list(range(1, n + 1)))) == n


def test_lowest_common_ancestor():
    root = level_order(SAMPLE)
    n5, n1, n4, n7, n2 = (find(root, v) for v in (5, 1, 4, 7, 2))
    assert lowest_common_ancestor(root, n5, n1) is root
    assert lowest_common_ancestor(root, n5, n4) is n5
    assert lowest_common_ancestor(root, n7, n4) is n2


def test_lowest_common_ancestor_on_bst():
    root = level_order([6, 2, 8, 0, 4, 7, 9])
    n2, n8, n4 = (find(root, v) for v in (2, 8, 4))
    assert lowest_common_ancestor(root, n2, n8) is root
    assert lowest_common_ancestor(root, n2, n4) is n2


BST = [5, 3, 6, 2, 4, None, 7]


def test_find_target_worked_example():
    root = level_order(BST)
    assert find_target(root, 9) is True
    assert find_target(root, 28) is False


def test_find_target_every_pair():
    root = level_order(BST)
    values = inorder(root)
    for i, a in enumerate(values):
        for b in values[i + 1 :]:
            assert find_target(root, a + b) is True


def test_find_target_same_node_not_allowed():
    root = level_order(BST)
    assert find_target(root, 2 * max(inorder(root))) is False
    assert find_target(None, 0) is False


def test_width_of_tree():
    assert width_of_tree(level_order([1, 3, 2, 5, 3, None, 9])) == 4
    assert width_of_tree(chain(5)) == 1
    assert width_of_tree(None) == 0


def test_width_of_deep_sparse_tree_is_large():
    root = TreeNode(0, TreeNode(1), TreeNode(2))
    left, right = root.left, root.right
    for depth in range(60):
        left.left = TreeNode(depth)
        right.right = TreeNode(depth)
        left, right = left.left, right.right
    assert width_of_tree(root) == 2 ** 61


def test_distance_k_worked_example():
    root = level_order(SAMPLE)
    assert sorted(distance_k(root, find(root, 5), 2)) == [1, 4, 7]


def test_distance_k_zero_and_out_of_reach():
    root = level_order(SAMPLE)
    target = find(root, 6)
    assert distance_k(root, target, 0) == [6]
    assert distance_k(root, target, 50) == []


def test_distance_k_matches_neighbours():
    root = level_order(SAMPLE)
    target = find(root, 2)
    assert sorted(distance_k(root, target, 1)) == sorted([5, 7, 4])