from solvekit.graphs import (
    DisjointSet,
    GraphNode,
    accounts_merge,
    clone_graph,
    make_connected,
)


def square():
    nodes = [GraphNode(v) for v in (1, 2, 3, 4)]
    edges = {1: (2, 4), 2: (1, 3), 3: (2, 4), 4: (1, 3)}
    by_val = {n.val: n for n in nodes}
    for val, neighbours in edges.items():
        by_val[val].neighbors = [by_val[v] for v in neighbours]
    return nodes[0]


def reachable(start):
    seen = {start}
    order = [start]
    for node in order:
        for neighbour in node.neighbors:
            if neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
    return order


def test_clone_graph_preserves_structure():
    original = square()
    copy = clone_graph(original)
    original_nodes = reachable(original)
    copied_nodes = reachable(copy)
    assert [n.val for n in copied_nodes] == [n.val for n in original_nodes]
    for a, b in zip(original_nodes, copied_nodes):
        assert [n.val for n in a.neighbors] == [n.val for n in b.neighbors]


def test_clone_graph_shares_no_nodes():
    original = square()
    copy = clone_graph(original)
    original_ids = {id(n) for n in reachable(original)}
    copied_nodes = reachable(copy)
    assert sorted(n.val for n in copied_nodes) == [1, 2, 3, 4]
    shared = [n.val for n in copied_nodes if id(n) in original_ids]
    assert shared == []


def test_clone_graph_single_and_none():
    lone = GraphNode(5)
    copy = clone_graph(lone)
    assert copy is not lone and copy.val == 5 and copy.neighbors == []
    assert clone_graph(None) is None


def test_disjoint_set_union_by_size():
    sets = DisjointSet(5)
    sets.union_by_size(1, 2)
    sets.union_by_size(3, 2)
    root = sets.find(1)
    assert sets.find(2) == root == sets.find(3)
    assert sets.size[root] == 3
    assert sets.find(4) == 4


def test_disjoint_set_union_by_rank():
    sets = DisjointSet(4)
    sets.union_by_rank(0, 1)
    sets.union_by_rank(2, 3)
    sets.union_by_rank(1, 3)
    assert len({sets.find(i) for i in range(4)}) == 1
    assert sets.find(4) == 4


def test_disjoint_set_repeated_union_is_noop():
    sets = DisjointSet(3)
    sets.union_by_size(0, 1)
    sets.union_by_size(1, 0)
    assert sets.size[sets.find(0)] == 2


def test_accounts_merge_example():
    accounts = [
        ["John", "johnsmith@example.com", "john_newyork@example.com"],
        ["John", "johnsmith@example.com", "john00@example.com"],
        ["Mary", "mary@example.com"],
        ["John", "johnnybravo@example.com"],
    ]
    assert accounts_merge(accounts) == [
        ["John", "john00@example.com", "john_newyork@example.com", "johnsmith@example.com"],
        ["Mary", "mary@example.com"],
        ["John", "johnnybravo@example.com"],
    ]


def test_accounts_merge_keeps_every_email_once():
    accounts = [
        ["Ann", "a@example.com", "b@example.com"],
        ["Ann", "c@example.com"],
        ["Ann", "b@example.com", "c@example.com"],
    ]
    merged = accounts_merge(accounts)
    assert len(merged) == 1
    emails = merged[0][1:]
    assert emails == sorted({"a@example.com", "b@example.com", "c@example.com"})


def test_make_connected_example():
    assert make_connected(4, [[0, 1], [0, 2], [1, 2]]) == 1


def test_make_connected_too_few_cables():
    assert make_connected(6, [[0, 1], [0, 2], [0, 3], [1, 2]]) == -1


def test_make_connected_already_connected():
    assert make_connected(3, [[0, 1], [1, 2]]) == 0
    assert make_connected(1, []) == 0