"""Graph algorithms: cloning, disjoint sets, account merging and connectivity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class GraphNode:
    """A node of an undirected graph with an ordered neighbour list."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"GraphNode({self.val!r})"


class DisjointSet:
    """Union-find over the integers ``0..n`` with path compression."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n + 1))
        self.size = [1] * (n + 1)
        self.rank = [0] * (n + 1)

    def find(self, node: int) -> int:
        """Representative of the set holding ``node``."""
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[node] != root:
            following = self.parent[node]
            self.parent[node] = root
            node = following
        return root

    def union_by_size(self, u: int, v: int) -> None:
        """Merge the sets of ``u`` and ``v``, hanging the smaller under the larger."""
        a, b = self.find(u), self.find(v)
        if a == b:
            return
        if self.size[a] < self.size[b]:
            a, b = b, a
        self.parent[b] = a
        self.size[a] += self.size[b]

    def union_by_rank(self, u: int, v: int) -> None:
        """Merge the sets of ``u`` and ``v``, hanging the lower rank under the higher."""
        a, b = self.find(u), self.find(v)
        if a == b:
            return
        if self.rank[a] < self.rank[b]:
            self.parent[a] = b
        elif self.rank[b] < self.rank[a]:
            self.parent[b] = a
        else:
            self.parent[b] = a
            self.rank[a] += 1


def clone_graph(node: GraphNode | None) -> GraphNode | None:
    """Deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    pending = [node]
    while pending:
        original = pending.pop()
        copy = copies[original]
        for neighbour in original.neighbors:
            if neighbour not in copies:
                copies[neighbour] = GraphNode(neighbour.val)
                pending.append(neighbour)
            copy.neighbors.append(copies[neighbour])
    return copies[node]


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts sharing any e-mail; each result is a name then sorted e-mails."""
    sets = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, (_, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                sets.union_by_size(index, owner[email])
            else:
                owner[email] = index

    groups: dict[int, list[str]] = {}
    for email, index in owner.items():
        groups.setdefault(sets.find(index), []).append(email)

    return [
        [accounts[root][0], *sorted(groups[root])]
        for root in range(len(accounts))
        if root in groups
    ]


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Fewest cable moves to connect ``n`` computers, or -1 if there are too few cables."""
    sets = DisjointSet(n)
    spare = 0
    for u, v in connections:
        if sets.find(u) == sets.find(v):
            spare += 1
        else:
            sets.union_by_size(u, v)
    components = sum(1 for i in range(n) if sets.find(i) == i)
    needed = components - 1
    return needed if spare >= needed else -1