"""Binary trees: reconstruction, shape checks, ancestors, sums and distances."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def _positions(inorder: Sequence[int]) -> dict[int, int]:
    return {value: index for index, value in enumerate(inorder)}


def _locate(positions: dict[int, int], value: int) -> int:
    try:
        return positions[value]
    except KeyError:
        raise ValueError(f"value {value!r} is missing from the inorder sequence") from None


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    positions = _positions(inorder)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if pre_start > pre_end or in_start > in_end:
            return None
        root = TreeNode(preorder[pre_start])
        in_root = _locate(positions, root.val)
        left_size = in_root - in_start
        root.left = build(pre_start + 1, pre_start + left_size, in_start, in_root - 1)
        root.right = build(pre_start + left_size + 1, pre_end, in_root + 1, in_end)
        return root

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its inorder and postorder traversals."""
    positions = _positions(inorder)

    def build(post_start: int, post_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if post_start > post_end or in_start > in_end:
            return None
        root = TreeNode(postorder[post_end])
        in_root = _locate(positions, root.val)
        left_size = in_root - in_start
        root.left = build(post_start, post_start + left_size - 1, in_start, in_root - 1)
        root.right = build(post_start + left_size, post_end - 1, in_root + 1, in_end)
        return root

    return build(0, len(postorder) - 1, 0, len(inorder) - 1)


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtree heights differ by at most one."""

    def height(node: TreeNode | None) -> int | None:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return height(root) is not None


def _edge_height(node: TreeNode | None, go_left: bool) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.left if go_left else node.right
    return height


def count_complete_nodes(root: TreeNode | None) -> int:
    """Number of nodes in a complete binary tree."""
    if root is None:
        return 0
    left = _edge_height(root, True)
    if left == _edge_height(root, False):
        return (1 << left) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def _in_order(root: TreeNode | None, reverse: bool) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right if reverse else node.left
        node = stack.pop()
        yield node
        node = node.left if reverse else node.right


def find_target(root: TreeNode | None, target: int) -> bool:
    """Tell whether two distinct nodes of a binary search tree sum to ``target``."""
    ascending = _in_order(root, reverse=False)
    descending = _in_order(root, reverse=True)
    low = next(ascending, None)
    high = next(descending, None)
    while low is not None and high is not None:
        total = low.val + high.val
        if total == target:
            return low is not high
        if total < target:
            low = next(ascending, None)
        else:
            high = next(descending, None)
    return False


def width_of_tree(root: TreeNode | None) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    best = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        base = level[0][1]
        best = max(best, level[-1][1] - base + 1)
        following: list[tuple[TreeNode, int]] = []
        for node, index in level:
            index -= base
            if node.left is not None:
                following.append((node.left, 2 * index + 1))
            if node.right is not None:
                following.append((node.right, 2 * index + 2))
        level = following
    return best


def distance_k(root: TreeNode | None, target: TreeNode, k: int) -> list[int]:
    """Values of all nodes exactly ``k`` edges away from ``target``, nearest-first BFS order."""
    neighbours: defaultdict[TreeNode, list[TreeNode]] = defaultdict(list)
    pending: list[tuple[TreeNode | None, TreeNode | None]] = [(root, None)]
    while pending:
        node, parent = pending.pop()
        if node is None:
            continue
        if parent is not None:
            neighbours[node].append(parent)
            neighbours[parent].append(node)
        pending.append((node.right, node))
        pending.append((node.left, node))

    visited = {target}
    frontier = [target]
    for _ in range(k):
        if not frontier:
            break
        following: list[TreeNode] = []
        for node in frontier:
            for neighbour in neighbours[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return [node.val for node in frontier]