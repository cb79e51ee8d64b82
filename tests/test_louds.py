import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from compactmeta.louds import LoudsTree
from compactmeta.tree import PlainTree


def _build(parents):
    """Build a tree whose ids are already in breadth-first order."""
    tree = PlainTree()
    for p in parents:
        tree.add_node(p)
    return tree


SAMPLE_PARENTS = [0, 0, 0, 1, 1, 3, 5]


@pytest.fixture
def sample():
    tree = _build(SAMPLE_PARENTS)
    return tree, LoudsTree(tree)


def test_node_map_inverts_node_select(sample):
    tree, louds = sample
    assert [louds.node_map(louds.node_select(i)) for i in range(len(tree))] == list(
        range(len(tree))
    )


def test_structure_matches_plain_tree(sample):
    tree, louds = sample
    for i in range(len(tree)):
        v = louds.node_select(i)
        assert louds.children_count(v) == tree.children_count(i)
        assert louds.is_leaf(v) == tree.is_leaf(i)
        assert louds.child_rank(v) == tree.child_rank(i)
        assert louds.node_map(louds.parent(v)) == tree.parent(i)
        for t in range(1, tree.children_count(i) + 1):
            assert louds.node_map(louds.child_select(v, t)) == tree.child_select(i, t)


def test_first_and_last_child(sample):
    tree, louds = sample
    v = louds.node_select(0)
    assert louds.node_map(louds.first_child(v)) == tree.first_child(0)
    assert louds.node_map(louds.last_child(v)) == tree.last_child(0)


def test_siblings(sample):
    tree, louds = sample
    for i in range(len(tree)):
        v = louds.node_select(i)
        nxt = louds.next_sibling(v)
        prv = louds.prev_sibling(v)
        expected_next = tree.next_sibling(i) if i != 0 else None
        expected_prev = tree.prev_sibling(i)
        assert (None if nxt is None else louds.node_map(nxt)) == expected_next
        assert (None if prv is None else louds.node_map(prv)) == expected_prev


def test_lca(sample):
    _, louds = sample
    pos = louds.node_select
    assert louds.node_map(louds.lca(pos(4), pos(7))) == 1
    assert louds.node_map(louds.lca(pos(6), pos(7))) == 0
    assert louds.lca(pos(5), pos(7)) == pos(5)


def test_root_properties(sample):
    _, louds = sample
    assert louds.root() == 0
    assert louds.parent(louds.root()) == louds.root()
    assert louds.child_rank(louds.root()) == 0


def test_child_select_out_of_range(sample):
    _, louds = sample
    leaf = louds.node_select(2)
    with pytest.raises(IndexError):
        louds.first_child(leaf)
    with pytest.raises(IndexError):
        louds.child_select(louds.root(), 4)


def test_single_node_tree():
    louds = LoudsTree(PlainTree())
    assert louds.is_leaf(louds.root())
    assert louds.children_count(louds.root()) == 0


def test_unreachable_nodes_rejected():
    with pytest.raises(ValueError):
        LoudsTree(PlainTree(3))


@st.composite
def bfs_parents(draw):
    raw = draw(st.lists(st.integers(min_value=0, max_value=40), max_size=30))
    parents = []
    prev = 0
    for k, r in enumerate(raw, start=1):
        p = min(max(prev, r), k - 1)
        parents.append(p)
        prev = p
    return parents


@settings(max_examples=60, deadline=None)
@given(bfs_parents())
def test_random_trees_match(parents):
    tree = _build(parents)
    louds = LoudsTree(tree)
    for i in range(len(tree)):
        v = louds.node_select(i)
        assert louds.node_map(v) == i
        assert louds.children_count(v) == tree.children_count(i)
        assert louds.node_map(louds.parent(v)) == tree.parent(i)
        assert louds.child_rank(v) == tree.child_rank(i)